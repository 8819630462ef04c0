"""
ResourcePicker widget for Sound Button Board.

Modal file dialog for choosing the audio file behind a new button.
"""
import dearpygui.dearpygui as dpg
from pathlib import Path
from typing import Callable, Optional, Dict, Any

from core.constants import AUDIO_EXTENSIONS
from core.models import FileLocator, SoundLocator, UNSET


def locator_from_dialog(app_data: Optional[Dict[str, Any]]) -> SoundLocator:
    """
    Turn file dialog output into a locator.

    Exactly one selection gives a FileLocator; no selection (or anything
    else) gives UNSET, the same as cancelling.
    """
    if not app_data:
        return UNSET
    selections = app_data.get("selections") or {}
    if len(selections) != 1:
        return UNSET
    path = list(selections.values())[0]
    if not path:
        return UNSET
    return FileLocator(str(path))


class ResourcePicker:
    """
    Lets the user pick one audio file.

    The result is delivered to on_resolved as either a FileLocator or UNSET
    (cancelled). Cancelling is not reported separately.
    """

    def __init__(self, on_resolved: Callable[[SoundLocator], None],
                 default_path: Optional[str] = None):
        """
        Args:
            on_resolved: Callback receiving the chosen locator (UNSET on cancel)
            default_path: Directory the dialog opens in (default ~/Music)
        """
        self.on_resolved = on_resolved
        self.default_path = default_path or str(Path.home() / "Music")
        self._dialog_tag = "sound_picker_dialog"

    def show(self):
        """Open the picker. Creates the dialog on first use."""
        if not dpg.does_item_exist(self._dialog_tag):
            with dpg.file_dialog(
                directory_selector=False,
                show=False,
                modal=True,
                callback=self._on_selected,
                cancel_callback=self._on_cancelled,
                tag=self._dialog_tag,
                width=700,
                height=400,
                default_path=self.default_path
            ):
                for extension in AUDIO_EXTENSIONS:
                    dpg.add_file_extension(extension, color=(0, 255, 122, 255))
                dpg.add_file_extension(".*")

        dpg.show_item(self._dialog_tag)

    def _on_selected(self, sender, app_data):
        self.on_resolved(locator_from_dialog(app_data))

    def _on_cancelled(self, sender, app_data):
        self.on_resolved(UNSET)

    def destroy(self):
        """Delete the dialog."""
        if dpg.does_item_exist(self._dialog_tag):
            dpg.delete_item(self._dialog_tag)
