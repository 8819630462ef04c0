"""
Sound button playback.

Reads a WAV file with scipy, normalizes it to float32 and hands it to
sounddevice for non-blocking playback. One sound at a time: starting a new
sound stops the previous one.
"""
import logging
import time
from pathlib import Path
from typing import Optional, Union

import numpy as np
import sounddevice as sd
from scipy.io import wavfile

from core.errors import PlaybackError
from core.models import SoundLocator

logger = logging.getLogger(__name__)


def to_float32(data: np.ndarray) -> np.ndarray:
    """
    Convert WAV sample data to float32 in [-1.0, 1.0].

    Args:
        data: Samples as returned by scipy.io.wavfile.read

    Returns:
        float32 array with the same shape

    Raises:
        PlaybackError: If the sample format is not supported
    """
    if data.dtype == np.uint8:
        # 8-bit WAV is unsigned, centred on 128
        return (data.astype(np.float32) - 128.0) / 128.0
    if data.dtype == np.int16:
        return data.astype(np.float32) / 32768.0
    if data.dtype == np.int32:
        return data.astype(np.float32) / 2147483648.0
    if data.dtype in (np.float32, np.float64):
        return np.clip(data.astype(np.float32), -1.0, 1.0)
    raise PlaybackError(f"Unsupported sample format: {data.dtype}")


class AudioPlayer:
    """
    Plays the sound behind a button.

    Playback is fire-and-forget: callers never wait for completion.
    """

    def __init__(self, output_device: Optional[Union[int, str]] = None):
        """
        Args:
            output_device: sounddevice device id or name; None or "Default"
                uses the system default output
        """
        if output_device == "Default":
            output_device = None
        self.output_device = output_device

        self._current_path: Optional[str] = None
        self._ends_at: float = 0.0

    @property
    def is_playing(self) -> bool:
        """True while the last started sound has not finished or been stopped."""
        if self._current_path is None:
            return False
        if time.monotonic() >= self._ends_at:
            self._current_path = None
            return False
        return True

    @property
    def current_path(self) -> Optional[str]:
        """Path of the sound that is playing, or None."""
        return self._current_path if self.is_playing else None

    def load(self, locator: SoundLocator):
        """
        Decode the audio behind a locator.

        Returns:
            (sample_rate, float32 samples)

        Raises:
            PlaybackError: If the locator is unset or the file cannot be decoded
        """
        if not locator.is_set:
            raise PlaybackError("No sound selected for this button")

        path = Path(locator.path)
        if not path.is_file():
            raise PlaybackError(f"Sound file not found: {path}")

        try:
            sample_rate, data = wavfile.read(str(path))
        except (OSError, ValueError) as e:
            raise PlaybackError(f"Cannot decode {path}: {e}") from e

        if data.size == 0:
            raise PlaybackError(f"Sound file is empty: {path}")

        return sample_rate, to_float32(data)

    def play(self, locator: SoundLocator):
        """
        Start playing a sound, replacing whatever is playing.

        Raises:
            PlaybackError: If the sound cannot be opened, decoded or played.
                The player is left not playing.
        """
        self.stop()

        sample_rate, samples = self.load(locator)

        try:
            sd.play(samples, samplerate=sample_rate, device=self.output_device)
        except (sd.PortAudioError, ValueError) as e:
            # ValueError: configured output device not found
            raise PlaybackError(f"Audio output failed: {e}") from e

        self._current_path = locator.path
        self._ends_at = time.monotonic() + len(samples) / float(sample_rate)
        logger.info("Playing %s (%.2fs)", locator.path, len(samples) / float(sample_rate))

    def stop(self):
        """Stop playback. Safe to call when nothing is playing."""
        if self._current_path is None:
            return

        try:
            sd.stop()
        except sd.PortAudioError as e:
            logger.warning("Error stopping playback: %s", e)

        logger.debug("Stopped %s", self._current_path)
        self._current_path = None
        self._ends_at = 0.0
