"""
Sound Button Board
Main entry point
"""
import logging

import dearpygui.dearpygui as dpg

from audio.player import AudioPlayer
from core.constants import APP_NAME
from core.log import configure_logging
from core.persistence import PreferenceStore
from core.repository import BoardRepository
from core.settings import load_settings
from ui.theme import apply_theme, apply_ui_scale
from ui.views.BoardView import BoardView

logger = logging.getLogger(__name__)


def main():
    """Launch the sound button board."""
    settings = load_settings()
    configure_logging(settings["logging"]["level"])

    logger.info("Starting %s", APP_NAME)

    # One repository for the whole app, handed to the view explicitly
    store = PreferenceStore(settings["general"]["store_path"])
    repository = BoardRepository(store)
    player = AudioPlayer(output_device=settings["audio"]["output_device"])

    dpg.create_context()
    apply_ui_scale(settings["video"]["ui_scale"])

    board_view = BoardView(
        repository=repository,
        player=player,
        show_edit_options=settings["general"]["show_edit_options"]
    )
    window_tag = board_view.create()

    apply_theme()

    dpg.create_viewport(title=APP_NAME,
                        width=settings["video"]["width"],
                        height=settings["video"]["height"])
    dpg.setup_dearpygui()
    dpg.show_viewport()
    dpg.set_primary_window(window_tag, True)

    logger.info("Ready")

    try:
        dpg.start_dearpygui()
    finally:
        player.stop()
        board_view.destroy()
        dpg.destroy_context()

    logger.info("%s closed", APP_NAME)


if __name__ == "__main__":
    main()
