"""
Unit tests for turning file dialog output into locators.
"""

import pytest

dpg = pytest.importorskip("dearpygui.dearpygui")

from core.models import FileLocator, UNSET
from ui.widgets.ResourcePicker import ResourcePicker, locator_from_dialog


class TestLocatorFromDialog:
    """Test dialog result handling."""

    def test_single_selection(self):
        app_data = {"selections": {"horn.wav": "/sounds/horn.wav"}}
        assert locator_from_dialog(app_data) == FileLocator("/sounds/horn.wav")

    def test_no_selection(self):
        assert locator_from_dialog({"selections": {}}) == UNSET
        assert locator_from_dialog(None) == UNSET
        assert locator_from_dialog({}) == UNSET

    def test_multiple_selections_rejected(self):
        app_data = {"selections": {"a.wav": "/a.wav", "b.wav": "/b.wav"}}
        assert locator_from_dialog(app_data) == UNSET


class TestResourcePickerCallbacks:
    """Cancel and select both resolve through on_resolved."""

    def test_cancel_resolves_unset(self):
        resolved = []
        picker = ResourcePicker(on_resolved=resolved.append)

        picker._on_cancelled("dialog", {"selections": {"a.wav": "/a.wav"}})

        assert resolved == [UNSET]

    def test_select_resolves_locator(self):
        resolved = []
        picker = ResourcePicker(on_resolved=resolved.append)

        picker._on_selected("dialog", {"selections": {"a.wav": "/a.wav"}})

        assert resolved == [FileLocator("/a.wav")]
