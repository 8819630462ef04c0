"""
Immutable data models for Sound Button Board.

All models are frozen dataclasses so that:
- The repository can hand out snapshots without copying
- Every mutation produces a new AppState for change observers
- Serialization is a plain to_dict/from_dict walk
"""
import uuid
from dataclasses import dataclass, field
from typing import Tuple, Optional, Dict, Any, Union

from core.constants import DEFAULT_BUTTON_COLOR


def new_id() -> str:
    """Generate a fresh opaque identifier for a board or button."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class UnsetLocator:
    """No audio resource chosen yet. Buttons holding this are not playable."""

    @property
    def is_set(self) -> bool:
        return False

    def to_value(self) -> None:
        return None


@dataclass(frozen=True)
class FileLocator:
    """
    Reference to an audio resource on the local filesystem.

    Attributes:
        path: Absolute (or user-supplied) path to the audio file
    """
    path: str

    def __post_init__(self):
        """Validate locator."""
        if not self.path:
            raise ValueError("FileLocator path must not be empty")

    @property
    def is_set(self) -> bool:
        return True

    def to_value(self) -> str:
        return self.path


SoundLocator = Union[UnsetLocator, FileLocator]

UNSET = UnsetLocator()


def locator_from_value(value: Optional[str]) -> SoundLocator:
    """
    Build a locator from its serialized form.

    Args:
        value: Stored path string, or None/empty for "no sound chosen"

    Returns:
        FileLocator for a non-empty string, UNSET otherwise
    """
    if not value:
        return UNSET
    if not isinstance(value, str):
        raise ValueError(f"Sound locator must be a string, got {type(value).__name__}")
    return FileLocator(value)


@dataclass(frozen=True)
class SoundButton:
    """
    Single sound button.

    Attributes:
        title: Text label shown on the button
        sound: Locator of the audio resource (UNSET until the user picks one)
        color: RGBA tuple (0-255 per channel), presentation only
        id: Opaque unique identifier, generated at creation
    """
    title: str
    sound: SoundLocator = UNSET
    color: Tuple[int, int, int, int] = DEFAULT_BUTTON_COLOR
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        """Validate button."""
        if len(self.color) != 4:
            raise ValueError(f"Color must be an RGBA tuple, got {self.color}")
        for channel in self.color:
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channels must be 0-255, got {self.color}")

    @property
    def playable(self) -> bool:
        """True if a sound has been picked for this button."""
        return self.sound.is_set

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "soundLocator": self.sound.to_value(),
            "color": list(self.color),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SoundButton":
        """Create SoundButton from dictionary."""
        return cls(
            id=data["id"],
            title=data["title"],
            sound=locator_from_value(data.get("soundLocator")),
            color=tuple(data.get("color", DEFAULT_BUTTON_COLOR)),
        )


@dataclass(frozen=True)
class SoundBoard:
    """
    Named collection of sound buttons.

    Attributes:
        name: Board name shown in the board selector
        buttons: Tuple of SoundButton objects (insertion order = display order)
        id: Opaque unique identifier, generated at creation
    """
    name: str
    buttons: Tuple[SoundButton, ...] = field(default_factory=tuple)
    id: str = field(default_factory=new_id)

    def find_button(self, button_id: str) -> Optional[SoundButton]:
        """Return the button with the given id, or None."""
        for button in self.buttons:
            if button.id == button_id:
                return button
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "buttons": [b.to_dict() for b in self.buttons],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SoundBoard":
        """Create SoundBoard from dictionary."""
        buttons = tuple(SoundButton.from_dict(b) for b in data.get("buttons", []))
        return cls(
            id=data["id"],
            name=data["name"],
            buttons=buttons,
        )


@dataclass(frozen=True)
class AppState:
    """
    Snapshot of everything the board screen renders.

    Attributes:
        boards: Tuple of SoundBoard objects
        selected_board_index: Position of the displayed board. Always 0 when
            there are no boards, and then must not be used to index.
    """
    boards: Tuple[SoundBoard, ...] = field(default_factory=tuple)
    selected_board_index: int = 0

    def __post_init__(self):
        """Validate selection against the board list."""
        if self.boards:
            if not 0 <= self.selected_board_index < len(self.boards):
                raise ValueError(
                    f"Selected board index {self.selected_board_index} out of range "
                    f"for {len(self.boards)} boards"
                )
        elif self.selected_board_index != 0:
            raise ValueError("Selected board index must be 0 when there are no boards")

    @property
    def selected_board(self) -> Optional[SoundBoard]:
        """Currently displayed board, or None when there are no boards."""
        if not self.boards:
            return None
        return self.boards[self.selected_board_index]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "boards": [b.to_dict() for b in self.boards],
            "selected_board_index": self.selected_board_index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppState":
        """Create AppState from dictionary."""
        return cls(
            boards=tuple(SoundBoard.from_dict(b) for b in data.get("boards", [])),
            selected_board_index=data.get("selected_board_index", 0),
        )
