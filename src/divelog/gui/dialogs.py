import logging
from typing import Callable

import gi

from divelog.device import DEFAULT_DEVICE_PATH, DEVICE_LIST, DeviceData
from divelog.shell import MAX_DIVE_NUMBER, MIN_DIVE_NUMBER
from divelog.units import UNIT_CHOICES, Units

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
gi.require_version("Pango", "1.0")
from gi.repository import Adw, Gtk, Pango

logger = logging.getLogger(__name__)


def _alert(heading, body=None, accept_label="_OK"):
    dialog = Adw.AlertDialog(heading=heading, body=body or "")
    dialog.add_response("cancel", "_Cancel")
    dialog.add_response("ok", accept_label)
    dialog.set_response_appearance("ok", Adw.ResponseAppearance.SUGGESTED)
    dialog.set_default_response("ok")
    dialog.set_close_response("cancel")
    return dialog


class PreferencesDialog:
    """Unit choices and the dive list font, applied only on OK."""

    def __init__(self, units: Units, font, on_accept: Callable[[Units, str], None]):
        self.menu_units = units.copy()
        self.on_accept = on_accept

        self.dialog = _alert("Preferences")
        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)

        group = Adw.PreferencesGroup(title="Units")
        for attribute, (label, choices) in UNIT_CHOICES.items():
            group.add(self._radio_row(attribute, label, choices))
        box.append(group)

        self.font_button = Gtk.FontDialogButton(
            dialog=Gtk.FontDialog(), font_desc=Pango.FontDescription.from_string(font)
        )
        font_row = Adw.ActionRow(title="Dive list font")
        font_row.add_suffix(self.font_button)
        font_group = Adw.PreferencesGroup()
        font_group.add(font_row)
        box.append(font_group)

        self.dialog.set_extra_child(box)
        self.dialog.connect("response", self._on_response)

    def _radio_row(self, attribute, label, choices):
        row = Adw.ActionRow(title=label)
        group = None
        current = getattr(self.menu_units, attribute)
        for name, value in choices:
            button = Gtk.CheckButton(label=name, active=value == current)
            if group is None:
                group = button
            else:
                button.set_group(group)
            button.connect("toggled", self._on_toggled, attribute, value)
            row.add_suffix(button)
        return row

    def _on_toggled(self, button, attribute, value):
        if button.get_active():
            setattr(self.menu_units, attribute, value)

    def _on_response(self, _, response):
        if response != "ok":
            return
        font = self.font_button.get_font_desc().to_string()
        logger.info(f"preferences accepted: {self.menu_units}, font {font}")
        self.on_accept(self.menu_units, font)

    def present(self, parent):
        self.dialog.present(parent)


class RenumberDialog:
    def __init__(self, on_accept: Callable[[int], None]):
        self.on_accept = on_accept
        self.dialog = _alert("Renumber", "New starting number")
        self.spin_button = Gtk.SpinButton.new_with_range(
            MIN_DIVE_NUMBER, MAX_DIVE_NUMBER, 1
        )
        self.dialog.set_extra_child(self.spin_button)
        self.dialog.connect("response", self._on_response)

    def _on_response(self, _, response):
        if response == "ok":
            self.on_accept(self.spin_button.get_value_as_int())

    def present(self, parent):
        self.dialog.present(parent)


class ImportDialog:
    def __init__(self, on_accept: Callable[[DeviceData], None]):
        self.on_accept = on_accept
        self.dialog = _alert("Import from dive computer", accept_label="_Import")

        self.computer = Gtk.DropDown.new_from_strings([name for name, _ in DEVICE_LIST])
        self.computer.set_valign(Gtk.Align.CENTER)
        self.device = Gtk.Entry(text=DEFAULT_DEVICE_PATH, valign=Gtk.Align.CENTER)

        computer_row = Adw.ActionRow(title="Dive computer")
        computer_row.add_suffix(self.computer)
        device_row = Adw.ActionRow(title="Device name")
        device_row.add_suffix(self.device)

        group = Adw.PreferencesGroup()
        group.add(computer_row)
        group.add(device_row)
        self.dialog.set_extra_child(group)
        self.dialog.connect("response", self._on_response)

    def _on_response(self, _, response):
        if response != "ok":
            return
        selected = self.computer.get_selected()
        if selected == Gtk.INVALID_LIST_POSITION:
            return
        name, device_type = DEVICE_LIST[selected]
        self.on_accept(DeviceData(device_type, name, self.device.get_text()))

    def present(self, parent):
        self.dialog.present(parent)


class SaveChangesDialog:
    def __init__(self, on_response: Callable[[bool], None]):
        self.on_response = on_response
        self.dialog = _alert(
            "Save Changes?",
            "You have unsaved changes\n"
            "Would you like to save those before exiting the program?",
            accept_label="_Save",
        )
        self.dialog.connect("response", self._on_response)

    def _on_response(self, _, response):
        self.on_response(response == "ok")

    def present(self, parent):
        self.dialog.present(parent)
