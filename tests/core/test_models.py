"""
Unit tests for the data model.

Tests locators, buttons, boards and AppState validation/serialization.
"""

import pytest

from core.constants import DEFAULT_BUTTON_COLOR
from core.models import (
    AppState,
    FileLocator,
    SoundBoard,
    SoundButton,
    UNSET,
    UnsetLocator,
    locator_from_value,
)


class TestSoundLocator:
    """Test the two locator variants."""

    def test_unset_is_not_set(self):
        assert not UNSET.is_set
        assert UNSET.to_value() is None
        assert UnsetLocator() == UNSET

    def test_file_locator_is_set(self):
        locator = FileLocator("/sounds/horn.wav")
        assert locator.is_set
        assert locator.to_value() == "/sounds/horn.wav"

    def test_file_locator_rejects_empty_path(self):
        with pytest.raises(ValueError):
            FileLocator("")

    def test_locator_from_value(self):
        assert locator_from_value(None) == UNSET
        assert locator_from_value("") == UNSET
        assert locator_from_value("/a.wav") == FileLocator("/a.wav")

    def test_locator_from_value_rejects_non_string(self):
        with pytest.raises(ValueError):
            locator_from_value(42)


class TestSoundButton:
    """Test SoundButton defaults and validation."""

    def test_defaults(self):
        button = SoundButton(title="Air Horn")
        assert button.sound == UNSET
        assert button.color == DEFAULT_BUTTON_COLOR
        assert not button.playable
        assert button.id

    def test_ids_are_unique(self):
        ids = {SoundButton(title="x").id for _ in range(100)}
        assert len(ids) == 100

    def test_playable_with_sound(self):
        button = SoundButton(title="Air Horn", sound=FileLocator("/a.wav"))
        assert button.playable

    def test_invalid_color(self):
        with pytest.raises(ValueError):
            SoundButton(title="x", color=(0, 0, 300, 255))
        with pytest.raises(ValueError):
            SoundButton(title="x", color=(0, 0, 0))

    def test_from_dict_defaults(self):
        """Records written without colour or sound still load."""
        button = SoundButton.from_dict({"id": "abc", "title": "Old"})
        assert button.id == "abc"
        assert button.sound == UNSET
        assert button.color == DEFAULT_BUTTON_COLOR

    def test_to_dict_layout(self):
        button = SoundButton(title="Air Horn", sound=FileLocator("/a.wav"), id="b1")
        assert button.to_dict() == {
            "id": "b1",
            "title": "Air Horn",
            "soundLocator": "/a.wav",
            "color": list(DEFAULT_BUTTON_COLOR),
        }


class TestSoundBoard:
    """Test SoundBoard lookup and serialization."""

    def test_find_button(self):
        first = SoundButton(title="one")
        second = SoundButton(title="two")
        board = SoundBoard(name="Music", buttons=(first, second))

        assert board.find_button(second.id) is second
        assert board.find_button("missing") is None

    def test_round_trip_preserves_order(self):
        buttons = tuple(SoundButton(title=f"b{i}", sound=FileLocator(f"/{i}.wav")) for i in range(5))
        board = SoundBoard(name="Music", buttons=buttons)

        restored = SoundBoard.from_dict(board.to_dict())

        assert restored == board
        assert [b.title for b in restored.buttons] == ["b0", "b1", "b2", "b3", "b4"]


class TestAppState:
    """Test AppState selection validation."""

    def test_empty_state(self):
        state = AppState()
        assert state.boards == ()
        assert state.selected_board_index == 0
        assert state.selected_board is None

    def test_selected_board(self):
        boards = (SoundBoard(name="a"), SoundBoard(name="b"))
        state = AppState(boards=boards, selected_board_index=1)
        assert state.selected_board.name == "b"

    def test_selection_out_of_range(self):
        with pytest.raises(ValueError):
            AppState(boards=(SoundBoard(name="a"),), selected_board_index=1)

    def test_selection_must_be_zero_without_boards(self):
        with pytest.raises(ValueError):
            AppState(selected_board_index=2)

    def test_round_trip(self):
        boards = (
            SoundBoard(name="Music", buttons=(SoundButton(title="Air Horn", sound=FileLocator("/h.wav")),)),
            SoundBoard(name="Effects", buttons=(SoundButton(title="Unpicked"),)),
        )
        state = AppState(boards=boards, selected_board_index=1)

        assert AppState.from_dict(state.to_dict()) == state
