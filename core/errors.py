"""
Exception types.

Neither error is ever raised out of a repository mutation; both end up as a
log line and, for playback, a status message in the UI.
"""


class SoundButtonError(Exception):
    """Base class for application errors."""


class PersistenceError(SoundButtonError):
    """Board list or preference store could not be encoded, decoded, read or written."""


class PlaybackError(SoundButtonError):
    """Audio resource could not be opened, decoded or sent to the output device."""
