"""
Board View for Sound Button Board.
Single screen: board selector, sound button grid and the edit panel.
"""
import dearpygui.dearpygui as dpg
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

from audio.player import AudioPlayer
from core.constants import APP_NAME, BUTTON_COLORS, DEFAULT_BUTTON_COLOR
from core.errors import PlaybackError
from core.models import AppState, SoundLocator, UNSET
from core.repository import BoardRepository
from ui.widgets.ResourcePicker import ResourcePicker

logger = logging.getLogger(__name__)

BUTTON_WIDTH = 100
BUTTON_HEIGHT = 50
BUTTONS_PER_ROW = 6


class BoardView:
    """
    Main window.

    Shows:
    - Board selector (one tab-like button per board) + delete board button
    - Grid of the selected board's sound buttons
      (left click plays, right click deletes)
    - Edit panel (toggleable): title, board name, colour, sound picker,
      Add Button, Add Board, Stop Sound
    """

    def __init__(self,
                 repository: BoardRepository,
                 player: AudioPlayer,
                 show_edit_options: bool = False):
        """
        Args:
            repository: Board state owner; the view re-renders on its changes
            player: Plays sound buttons
            show_edit_options: Whether the edit panel starts open
        """
        self.repository = repository
        self.player = player
        self.show_edit_options = show_edit_options

        # Pending "new button" form state
        self.selected_sound: SoundLocator = UNSET
        self.selected_color: Tuple[int, int, int, int] = DEFAULT_BUTTON_COLOR

        self.picker = ResourcePicker(on_resolved=self._on_sound_picked)

        self._window_tag = "board_view_window"
        self._selector_tag = "board_selector_group"
        self._grid_tag = "sound_button_grid"
        self._edit_panel_tag = "edit_options_group"
        self._status_tag = "status_text"
        self._handlers_tag = "sound_button_handlers"
        self._button_themes: Dict[Tuple[int, int, int, int], int] = {}

        self.repository.add_change_callback(self._on_state_changed)

    def create(self) -> str:
        """
        Create the board window.

        Returns:
            Window tag
        """
        from ui.theme import (create_accent_button_theme, create_success_button_theme,
                              create_error_button_theme)

        # Right click on any sound button deletes it
        with dpg.item_handler_registry(tag=self._handlers_tag):
            dpg.add_item_clicked_handler(button=dpg.mvMouseButton_Right,
                                         callback=self._on_sound_button_right_click)

        with dpg.window(label=APP_NAME, tag=self._window_tag, no_scrollbar=True):
            # === BOARD SELECTOR ===
            with dpg.group(horizontal=True):
                dpg.add_group(tag=self._selector_tag, horizontal=True)
                dpg.add_spacer(width=10)
                delete_btn = dpg.add_button(
                    label="Delete Board",
                    tag="delete_board_btn",
                    callback=self._on_delete_board
                )
                dpg.bind_item_theme(delete_btn, create_error_button_theme())

            dpg.add_separator()

            # === BUTTON GRID ===
            with dpg.child_window(tag=self._grid_tag, height=-120, border=False):
                pass

            dpg.add_separator()

            # === EDIT PANEL ===
            with dpg.group(tag=self._edit_panel_tag, show=self.show_edit_options):
                dpg.add_input_text(tag="new_button_title_input", hint="Button Title", width=-1)
                dpg.add_input_text(tag="new_board_name_input", hint="New Board Name", width=-1,
                                   callback=self._refresh_form)

                with dpg.group(horizontal=True):
                    dpg.add_color_edit(
                        default_value=self.selected_color,
                        tag="button_color_edit",
                        label="Button Color",
                        no_inputs=True,
                        callback=self._on_color_changed
                    )
                    dpg.add_combo(
                        items=list(BUTTON_COLORS.keys()),
                        width=120,
                        callback=self._on_color_preset
                    )

                with dpg.group(horizontal=True):
                    dpg.add_button(label="Select Sound", callback=lambda: self.picker.show())
                    dpg.add_text("No sound selected", tag="selected_sound_text")

                with dpg.group(horizontal=True):
                    add_button_btn = dpg.add_button(
                        label="Add Button",
                        tag="add_button_btn",
                        callback=self._on_add_button
                    )
                    dpg.bind_item_theme(add_button_btn, create_accent_button_theme())

                    add_board_btn = dpg.add_button(
                        label="Add Board",
                        tag="add_board_btn",
                        callback=self._on_add_board
                    )
                    dpg.bind_item_theme(add_board_btn, create_success_button_theme())

                stop_btn = dpg.add_button(label="Stop Sound", callback=self._on_stop)
                dpg.bind_item_theme(stop_btn, create_error_button_theme())

            dpg.add_text("", tag=self._status_tag, color=(150, 150, 150, 255))

            dpg.add_button(
                label=self._edit_toggle_label(),
                tag="edit_options_toggle_btn",
                callback=self._on_toggle_edit_options
            )

        self.render(self.repository.current_state())
        self._refresh_form()
        return self._window_tag

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, state: AppState):
        """Rebuild the board selector and button grid from state."""
        if not dpg.does_item_exist(self._window_tag):
            return

        from ui.theme import Palette

        dpg.delete_item(self._selector_tag, children_only=True)
        for index, board in enumerate(state.boards):
            btn = dpg.add_button(
                label=board.name,
                parent=self._selector_tag,
                user_data=index,
                callback=self._on_board_selected
            )
            if index == state.selected_board_index:
                dpg.bind_item_theme(btn, self._theme_for_color(Palette.ACCENT))

        dpg.configure_item("delete_board_btn", enabled=bool(state.boards))

        dpg.delete_item(self._grid_tag, children_only=True)
        board = state.selected_board
        if board is None:
            dpg.add_text("No boards yet. Open the edit options to add one.",
                         parent=self._grid_tag, color=(100, 100, 100, 255))
            return

        row = None
        for i, button in enumerate(board.buttons):
            if i % BUTTONS_PER_ROW == 0:
                row = dpg.add_group(horizontal=True, parent=self._grid_tag)
            btn = dpg.add_button(
                label=button.title,
                parent=row,
                width=BUTTON_WIDTH,
                height=BUTTON_HEIGHT,
                user_data=button.id,
                callback=self._on_sound_button
            )
            dpg.bind_item_theme(btn, self._theme_for_color(button.color))
            dpg.bind_item_handler_registry(btn, self._handlers_tag)

    def _theme_for_color(self, color: Tuple[int, int, int, int]) -> int:
        """Button themes are cached per colour so re-renders don't create new ones."""
        from ui.theme import create_button_color_theme

        if color not in self._button_themes:
            self._button_themes[color] = create_button_color_theme(color)
        return self._button_themes[color]

    def _refresh_form(self, sender=None, app_data=None):
        """Enable Add Button / Add Board only when their inputs are complete."""
        if not dpg.does_item_exist("add_button_btn"):
            return

        has_sound = self.selected_sound.is_set
        dpg.configure_item("add_button_btn", enabled=has_sound and self.repository.selected_board() is not None)
        dpg.set_value("selected_sound_text",
                      Path(self.selected_sound.path).name if has_sound else "No sound selected")

        board_name = dpg.get_value("new_board_name_input") or ""
        dpg.configure_item("add_board_btn", enabled=bool(board_name.strip()))

    def _set_status(self, message: str):
        if dpg.does_item_exist(self._status_tag):
            dpg.set_value(self._status_tag, message)

    def _edit_toggle_label(self) -> str:
        return "Hide Edit Options" if self.show_edit_options else "Show Edit Options"

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def _on_state_changed(self, state: AppState):
        self.render(state)
        self._refresh_form()

    def _on_board_selected(self, sender, app_data, user_data):
        self.repository.set_selected_board_index(user_data)

    def _on_delete_board(self):
        state = self.repository.current_state()
        if not state.boards:
            return
        self.repository.delete_board(state.selected_board_index)

    def _on_sound_button(self, sender, app_data, user_data):
        """Play the clicked button's sound."""
        state = self.repository.current_state()
        button = self.repository.button_by_id(state.selected_board_index, user_data)
        if button is None or not button.playable:
            return

        try:
            self.player.play(button.sound)
            self._set_status(f"Playing: {button.title}")
        except PlaybackError as e:
            logger.error("Error playing sound: %s", e)
            self._set_status(f"Cannot play '{button.title}': {e}")

    def _on_sound_button_right_click(self, sender, app_data):
        """Delete the right-clicked button. app_data is (mouse button, item)."""
        item = app_data[1]
        button_id = dpg.get_item_user_data(item)
        if button_id is None:
            return
        state = self.repository.current_state()
        self.repository.delete_button(state.selected_board_index, button_id)

    def _on_sound_picked(self, locator: SoundLocator):
        self.selected_sound = locator
        self._refresh_form()

    def _on_color_changed(self, sender, app_data):
        self.selected_color = self._normalize_color(dpg.get_value(sender))

    def _on_color_preset(self, sender, app_data):
        color = BUTTON_COLORS.get(app_data, DEFAULT_BUTTON_COLOR)
        self.selected_color = color
        dpg.set_value("button_color_edit", color)

    @staticmethod
    def _normalize_color(value) -> Tuple[int, int, int, int]:
        """Colour edit values as an RGBA tuple of ints in 0-255."""
        channels = [int(round(min(max(c, 0), 255))) for c in list(value)[:4]]
        while len(channels) < 4:
            channels.append(255)
        return tuple(channels)

    def _on_add_button(self):
        """Add a button to the selected board. Needs a picked sound."""
        if not self.selected_sound.is_set:
            self._set_status("Select a sound first")
            return

        state = self.repository.current_state()
        title = dpg.get_value("new_button_title_input") or ""
        self.repository.add_button_to_board(
            state.selected_board_index,
            title,
            self.selected_sound,
            self.selected_color
        )

        dpg.set_value("new_button_title_input", "")
        self.selected_sound = UNSET
        self._refresh_form()

    def _on_add_board(self):
        """Add a board. Blank names are rejected here, not in the repository."""
        name = (dpg.get_value("new_board_name_input") or "").strip()
        if not name:
            return

        self.repository.add_board(name)
        dpg.set_value("new_board_name_input", "")
        self._refresh_form()

    def _on_stop(self):
        self.player.stop()
        self._set_status("")

    def _on_toggle_edit_options(self):
        self.show_edit_options = not self.show_edit_options
        dpg.configure_item(self._edit_panel_tag, show=self.show_edit_options)
        dpg.configure_item("edit_options_toggle_btn", label=self._edit_toggle_label())

    # ------------------------------------------------------------------

    def show(self):
        """Show the board window."""
        if dpg.does_item_exist(self._window_tag):
            dpg.show_item(self._window_tag)

    def hide(self):
        """Hide the board window."""
        if dpg.does_item_exist(self._window_tag):
            dpg.hide_item(self._window_tag)

    def destroy(self):
        """Destroy the board window and detach from the repository."""
        self.repository.remove_change_callback(self._on_state_changed)
        self.picker.destroy()
        if dpg.does_item_exist(self._window_tag):
            dpg.delete_item(self._window_tag)
