import importlib.resources
import xml.etree.ElementTree as ET

import pytest


@pytest.fixture
def menu_actions():
    ui = importlib.resources.files("divelog.gui").joinpath("ui/window.ui")
    root = ET.fromstring(ui.read_bytes())
    menu = root.find("menu[@id='main_menu']")
    return [
        attribute.text
        for attribute in menu.iter("attribute")
        if attribute.get("name") == "action"
    ]


class TestMainMenu:
    def test_print_follows_save(self, menu_actions):
        assert menu_actions.index("win.print") == menu_actions.index("win.save") + 1

    def test_actions(self, menu_actions):
        assert set(menu_actions) == {
            "win.open",
            "win.save",
            "win.print",
            "win.import",
            "win.renumber",
            "win.preferences",
            "win.about",
            "win.quit",
        }
