"""
Board repository: the single owner of board/button state.

All mutations go through BoardRepository so that:
- The selection index always stays inside the board list
- Every mutation is written to the preference store before returning
- Change observers (the board view) get the new AppState immediately
"""
import logging
from dataclasses import replace
from typing import Callable, List, Optional

from core.constants import (
    BOARDS_KEY,
    SELECTED_BOARD_INDEX_KEY,
    DEFAULT_BUTTON_TITLE,
    DEFAULT_BUTTON_COLOR,
)
from core.errors import PersistenceError
from core.models import AppState, SoundBoard, SoundButton, SoundLocator, UNSET
from core.persistence import KeyValueStore, encode_boards, decode_boards

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[AppState], None]


class BoardRepository:
    """
    Owns the board list and the selected board index.

    Create one instance at startup and pass it to whatever renders the UI.
    Out-of-range indices passed to any operation are ignored: they come from
    a UI snapshot that is one mutation behind, not from a caller bug.
    """

    def __init__(self, store: KeyValueStore):
        """
        Args:
            store: Key-value store to load from and persist into
        """
        self._store = store
        self._boards: List[SoundBoard] = []
        self._selected_board_index: int = 0
        self._on_change_callbacks: List[ChangeCallback] = []

        self._load_boards()
        self._load_selected_board_index()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def current_state(self) -> AppState:
        """Snapshot of the boards and selection."""
        return AppState(
            boards=tuple(self._boards),
            selected_board_index=self._selected_board_index,
        )

    def selected_board(self) -> Optional[SoundBoard]:
        """Currently selected board, or None when there are no boards."""
        if not self._boards:
            return None
        return self._boards[self._selected_board_index]

    def button_by_id(self, board_index: int, button_id: str) -> Optional[SoundButton]:
        """Look up a button on a board. None if the board or button does not exist."""
        if not self._is_valid_board_index(board_index):
            return None
        return self._boards[board_index].find_button(button_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_board(self, name: str) -> AppState:
        """
        Append a new, empty board.

        The name is not validated here; the add-board form only submits
        non-empty names.
        """
        board = SoundBoard(name=name)
        self._boards.append(board)
        logger.info("Added board '%s' (%s)", name, board.id)

        self._save_boards()
        return self._changed()

    def delete_board(self, index: int) -> AppState:
        """Remove the board at index and pull the selection back into range."""
        if not self._is_valid_board_index(index):
            logger.debug("delete_board: index %d out of range, ignored", index)
            return self.current_state()

        board = self._boards.pop(index)
        logger.info("Deleted board '%s' (%s)", board.name, board.id)

        if self._selected_board_index >= len(self._boards):
            self._selected_board_index = max(len(self._boards) - 1, 0)
            self._save_selected_board_index()

        self._save_boards()
        return self._changed()

    def add_button_to_board(self,
                            board_index: int,
                            title: str,
                            sound: SoundLocator = UNSET,
                            color=DEFAULT_BUTTON_COLOR) -> AppState:
        """
        Append a button to a board.

        Args:
            board_index: Index of the target board
            title: Button label; empty becomes DEFAULT_BUTTON_TITLE
            sound: Chosen audio resource, UNSET if none
            color: RGBA tuple for the button face
        """
        if not self._is_valid_board_index(board_index):
            logger.debug("add_button_to_board: index %d out of range, ignored", board_index)
            return self.current_state()

        button = SoundButton(
            title=title or DEFAULT_BUTTON_TITLE,
            sound=sound,
            color=tuple(color),
        )
        board = self._boards[board_index]
        self._boards[board_index] = replace(board, buttons=board.buttons + (button,))
        logger.info("Added button '%s' to board '%s'", button.title, board.name)

        self._save_boards()
        return self._changed()

    def delete_button(self, board_index: int, button_id: str) -> AppState:
        """Remove the button with button_id from a board, if it is there."""
        if not self._is_valid_board_index(board_index):
            logger.debug("delete_button: index %d out of range, ignored", board_index)
            return self.current_state()

        board = self._boards[board_index]
        buttons = tuple(b for b in board.buttons if b.id != button_id)
        if len(buttons) != len(board.buttons):
            self._boards[board_index] = replace(board, buttons=buttons)
            logger.info("Deleted button %s from board '%s'", button_id, board.name)
        else:
            logger.debug("delete_button: no button %s on board '%s'", button_id, board.name)

        self._save_boards()
        return self._changed()

    def set_selected_board_index(self, index: int) -> AppState:
        """Select the board to display. Persisted separately from the board list."""
        if self._boards:
            if not self._is_valid_board_index(index):
                logger.debug("set_selected_board_index: index %d out of range, ignored", index)
                return self.current_state()
        elif index != 0:
            logger.debug("set_selected_board_index: no boards, index %d ignored", index)
            return self.current_state()

        self._selected_board_index = index
        self._save_selected_board_index()
        return self._changed()

    # ------------------------------------------------------------------
    # Change observers
    # ------------------------------------------------------------------

    def add_change_callback(self, callback: ChangeCallback) -> None:
        """Register a callback called with the new AppState after each mutation."""
        if callback not in self._on_change_callbacks:
            self._on_change_callbacks.append(callback)

    def remove_change_callback(self, callback: ChangeCallback) -> None:
        """Unregister a change callback."""
        if callback in self._on_change_callbacks:
            self._on_change_callbacks.remove(callback)

    def _changed(self) -> AppState:
        """Notify observers and return the new state."""
        state = self.current_state()
        for callback in list(self._on_change_callbacks):
            try:
                callback(state)
            except Exception:
                logger.exception("Error in board change callback")
        return state

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _is_valid_board_index(self, index: int) -> bool:
        return 0 <= index < len(self._boards)

    def _save_boards(self):
        """Write the full board list. Failure is logged, state is kept."""
        try:
            self._store.set_data(BOARDS_KEY, encode_boards(self._boards))
        except PersistenceError as e:
            logger.error("Failed to save boards: %s", e)

    def _save_selected_board_index(self):
        try:
            self._store.set_int(SELECTED_BOARD_INDEX_KEY, self._selected_board_index)
        except PersistenceError as e:
            logger.error("Failed to save selected board index: %s", e)

    def _load_boards(self):
        """Load the board list. Any failure leaves the list empty."""
        try:
            data = self._store.get_data(BOARDS_KEY)
            if data is None:
                return
            self._boards = list(decode_boards(data))
        except PersistenceError as e:
            logger.error("Failed to load boards: %s", e)
            self._boards = []
            return

        logger.info("Loaded %d boards", len(self._boards))

    def _load_selected_board_index(self):
        """Load the selection, clamped to the loaded board list."""
        try:
            index = self._store.get_int(SELECTED_BOARD_INDEX_KEY, 0)
        except PersistenceError as e:
            logger.error("Failed to load selected board index: %s", e)
            index = 0

        if not self._boards:
            index = 0
        elif not self._is_valid_board_index(index):
            index = min(max(index, 0), len(self._boards) - 1)
            logger.debug("Stored board index out of range, clamped to %d", index)

        self._selected_board_index = index
