"""
Preference store and board list codec.

Store format:
- One MessagePack map per user (~/.soundbutton/preferences.msgpack)
- Values are opaque byte blobs or integers keyed by string
- The board list is stored as a JSON blob under "soundBoards"
"""
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Dict, Any, Iterable, Tuple, Union

import msgpack

from core.errors import PersistenceError
from core.models import SoundBoard

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Interface of the flat key-value store the repository persists into."""

    @abstractmethod
    def get_data(self, key: str) -> Optional[bytes]:
        """Return the blob stored under key, or None if absent."""

    @abstractmethod
    def set_data(self, key: str, value: bytes):
        """Store a blob under key."""

    @abstractmethod
    def get_int(self, key: str, default: int = 0) -> int:
        """Return the integer stored under key, or default if absent."""

    @abstractmethod
    def set_int(self, key: str, value: int):
        """Store an integer under key."""

    @abstractmethod
    def remove(self, key: str):
        """Delete key if present."""


class MemoryStore(KeyValueStore):
    """In-process store. Used by tests and headless runs."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})

    def get_data(self, key: str) -> Optional[bytes]:
        value = self._values.get(key)
        if value is None:
            return None
        if not isinstance(value, bytes):
            raise PersistenceError(f"Value under '{key}' is not a blob")
        return value

    def set_data(self, key: str, value: bytes):
        self._values[key] = bytes(value)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._values.get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def set_int(self, key: str, value: int):
        self._values[key] = int(value)

    def remove(self, key: str):
        self._values.pop(key, None)


class PreferenceStore(KeyValueStore):
    """
    File-backed store.

    The whole map is read on first access and rewritten on every set, so each
    repository mutation is one file write.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: Location of the .msgpack preference file
        """
        self.path = Path(path)
        self._values: Optional[Dict[str, Any]] = None

    def _load(self) -> Dict[str, Any]:
        """Read the store file once. A corrupt file leaves the store empty."""
        if self._values is not None:
            return self._values

        self._values = {}
        if not self.path.exists():
            return self._values

        try:
            with open(self.path, "rb") as f:
                packed_data = f.read()
            values = msgpack.unpackb(packed_data, raw=False)
        except (OSError, ValueError, msgpack.exceptions.ExtraData) as e:
            raise PersistenceError(f"Failed to read preferences from {self.path}: {e}") from e

        if not isinstance(values, dict):
            raise PersistenceError(f"Invalid preference file format: {self.path}")

        self._values = values
        return self._values

    def _write(self):
        """Write the whole map back to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            packed_data = msgpack.packb(self._values, use_bin_type=True)
            with open(self.path, "wb") as f:
                f.write(packed_data)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Failed to write preferences to {self.path}: {e}") from e

    def get_data(self, key: str) -> Optional[bytes]:
        value = self._load().get(key)
        if value is None:
            return None
        if not isinstance(value, bytes):
            raise PersistenceError(f"Value under '{key}' is not a blob")
        return value

    def set_data(self, key: str, value: bytes):
        try:
            self._load()
        except PersistenceError as e:
            # Unreadable file gets replaced by the next write
            logger.warning("Discarding unreadable preferences: %s", e)
        self._values[key] = bytes(value)
        self._write()

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._load().get(key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return default

    def set_int(self, key: str, value: int):
        try:
            self._load()
        except PersistenceError as e:
            logger.warning("Discarding unreadable preferences: %s", e)
        self._values[key] = int(value)
        self._write()

    def remove(self, key: str):
        values = self._load()
        if key in values:
            del values[key]
            self._write()


def encode_boards(boards: Iterable[SoundBoard]) -> bytes:
    """
    Serialize a board list to the JSON blob stored under "soundBoards".

    Raises:
        PersistenceError: If a board cannot be encoded
    """
    try:
        return json.dumps([b.to_dict() for b in boards]).encode("utf-8")
    except (TypeError, ValueError, AttributeError) as e:
        raise PersistenceError(f"Failed to encode boards: {e}") from e


def decode_boards(data: bytes) -> Tuple[SoundBoard, ...]:
    """
    Deserialize the "soundBoards" blob.

    Either every board decodes or PersistenceError is raised; a partial list
    is never returned.

    Raises:
        PersistenceError: If the blob is not a valid board list
    """
    try:
        raw = json.loads(data.decode("utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"expected a list of boards, got {type(raw).__name__}")
        return tuple(SoundBoard.from_dict(b) for b in raw)
    except (UnicodeDecodeError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise PersistenceError(f"Failed to decode boards: {e}") from e
