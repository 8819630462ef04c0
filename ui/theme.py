"""
Dark theme for Sound Button Board.
Provides the colour palette and DearPyGui theme helpers.
"""
import dearpygui.dearpygui as dpg
from typing import Tuple


class Palette:
    """Dark palette constants (RGBA)."""

    # Background colors
    BG_WINDOW = (30, 30, 30, 255)          # #1E1E1E
    BG_PANEL = (51, 51, 51, 255)           # #333333
    BG_INPUT = (60, 60, 60, 255)           # #3C3C3C
    BG_HOVER = (45, 45, 45, 255)           # #2D2D2D

    BORDER = (60, 60, 60, 255)
    BORDER_ACTIVE = (0, 122, 204, 255)

    # Text colors
    TEXT_PRIMARY = (212, 212, 212, 255)
    TEXT_SECONDARY = (150, 150, 150, 255)
    TEXT_DISABLED = (90, 90, 90, 255)
    TEXT_ON_BUTTON = (255, 255, 255, 255)

    # Action colors
    ACCENT = (0, 122, 204, 255)            # Add Button
    SUCCESS = (80, 160, 80, 255)           # Add Board
    ERROR = (220, 80, 80, 255)             # Stop / delete board

    SELECTION = (38, 79, 120, 255)

    BUTTON_NORMAL = (60, 60, 60, 255)
    BUTTON_HOVER = (70, 70, 70, 255)
    BUTTON_ACTIVE = (80, 80, 80, 255)

    # Spacing
    FRAME_PADDING = (8, 6)
    ITEM_SPACING = (12, 12)                # Grid gap between sound buttons
    WINDOW_PADDING = (12, 12)


def apply_theme() -> None:
    """
    Apply the dark theme globally.
    Call this once during application initialization.
    """
    with dpg.theme() as global_theme:
        with dpg.theme_component(dpg.mvAll):
            dpg.add_theme_color(dpg.mvThemeCol_WindowBg, Palette.BG_WINDOW)
            dpg.add_theme_color(dpg.mvThemeCol_ChildBg, Palette.BG_PANEL)
            dpg.add_theme_color(dpg.mvThemeCol_PopupBg, Palette.BG_PANEL)
            dpg.add_theme_color(dpg.mvThemeCol_Border, Palette.BORDER)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBg, Palette.BG_INPUT)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgHovered, Palette.BG_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_FrameBgActive, Palette.BORDER_ACTIVE)

            dpg.add_theme_color(dpg.mvThemeCol_Text, Palette.TEXT_PRIMARY)
            dpg.add_theme_color(dpg.mvThemeCol_TextDisabled, Palette.TEXT_DISABLED)

            dpg.add_theme_color(dpg.mvThemeCol_Button, Palette.BUTTON_NORMAL)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, Palette.BUTTON_HOVER)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, Palette.BUTTON_ACTIVE)

            dpg.add_theme_color(dpg.mvThemeCol_CheckMark, Palette.ACCENT)
            dpg.add_theme_color(dpg.mvThemeCol_HeaderActive, Palette.SELECTION)

            dpg.add_theme_style(dpg.mvStyleVar_FramePadding, Palette.FRAME_PADDING[0], Palette.FRAME_PADDING[1])
            dpg.add_theme_style(dpg.mvStyleVar_ItemSpacing, Palette.ITEM_SPACING[0], Palette.ITEM_SPACING[1])
            dpg.add_theme_style(dpg.mvStyleVar_WindowPadding, Palette.WINDOW_PADDING[0], Palette.WINDOW_PADDING[1])
            dpg.add_theme_style(dpg.mvStyleVar_FrameRounding, 8)

    dpg.bind_theme(global_theme)


def apply_ui_scale(scale: float) -> None:
    """Scale all fonts (0.5x - 2.0x)."""
    dpg.set_global_font_scale(min(max(scale, 0.5), 2.0))


def _lighten(color: Tuple[int, int, int, int], amount: int) -> Tuple[int, int, int, int]:
    r, g, b, a = color
    return (min(r + amount, 255), min(g + amount, 255), min(b + amount, 255), a)


def create_button_color_theme(color: Tuple[int, int, int, int]) -> int:
    """
    Create a theme for a sound button face.

    Args:
        color: RGBA colour picked for the button

    Returns:
        Theme tag that can be bound to buttons
    """
    with dpg.theme() as button_theme:
        with dpg.theme_component(dpg.mvButton):
            dpg.add_theme_color(dpg.mvThemeCol_Button, color)
            dpg.add_theme_color(dpg.mvThemeCol_ButtonHovered, _lighten(color, 25))
            dpg.add_theme_color(dpg.mvThemeCol_ButtonActive, _lighten(color, 45))
            dpg.add_theme_color(dpg.mvThemeCol_Text, Palette.TEXT_ON_BUTTON)

    return button_theme


def create_accent_button_theme() -> int:
    """Blue theme for the Add Button action."""
    return create_button_color_theme(Palette.ACCENT)


def create_success_button_theme() -> int:
    """Green theme for the Add Board action."""
    return create_button_color_theme(Palette.SUCCESS)


def create_error_button_theme() -> int:
    """Red theme for Stop Sound and delete board."""
    return create_button_color_theme(Palette.ERROR)
