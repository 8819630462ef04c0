"""
Application constants.

Store keys, default values and the button colour palette.
"""
from pathlib import Path

APP_NAME = "Sound Button App"

# Per-user config directory (settings + preference store)
CONFIG_DIR = Path.home() / ".soundbutton"
SETTINGS_FILE = CONFIG_DIR / "settings.json"
DEFAULT_STORE_FILE = CONFIG_DIR / "preferences.msgpack"

# Preference store keys
BOARDS_KEY = "soundBoards"
SELECTED_BOARD_INDEX_KEY = "selectedBoardIndex"

# Title given to a button added with an empty title
DEFAULT_BUTTON_TITLE = "Sound Button"

# RGBA, 0-255 per channel
DEFAULT_BUTTON_COLOR = (0, 0, 0, 255)

# Quick picks shown next to the colour picker
BUTTON_COLORS = {
    "Black": (0, 0, 0, 255),
    "Blue": (0, 122, 204, 255),
    "Green": (80, 160, 80, 255),
    "Red": (220, 80, 80, 255),
    "Orange": (230, 140, 40, 255),
    "Purple": (150, 90, 200, 255),
}

# File extensions offered by the sound picker
AUDIO_EXTENSIONS = (".wav",)
