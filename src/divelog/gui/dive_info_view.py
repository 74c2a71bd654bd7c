import importlib.resources
import logging

import gi

from divelog.info import DiveInfoPresenter, DiveInfoView

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

logger = logging.getLogger(__name__)


@Gtk.Template(
    filename=str(importlib.resources.files("divelog.gui").joinpath("ui/dive_info_view.ui"))
)
class DiveInfoForm(Gtk.Box):
    __gtype_name__ = "DiveInfoForm"

    location_entry: Gtk.Entry = Gtk.Template.Child()
    divemaster_entry: Gtk.Entry = Gtk.Template.Child()
    buddy_entry: Gtk.Entry = Gtk.Template.Child()
    notes_view: Gtk.TextView = Gtk.Template.Child()

    @property
    def notes(self) -> Gtk.TextBuffer:
        return self.notes_view.get_buffer()


class DiveInfoAdapter(DiveInfoView):
    """Connects a DiveInfoForm and the window title to the dive info presenter."""

    presenter: DiveInfoPresenter | None = None

    def __init__(self, form: DiveInfoForm, window: Gtk.Window):
        self.form = form
        self.window = window
        self._loading = False

        self.entries = {
            "location": form.location_entry,
            "divemaster": form.divemaster_entry,
            "buddy": form.buddy_entry,
        }
        for field, entry in self.entries.items():
            entry.connect("changed", self._on_changed, field)
        form.notes.connect("changed", self._on_changed, "notes")

    def _on_changed(self, _, field):
        if self._loading or self.presenter is None:
            return
        self.presenter.on_field_edited(field)

    def get_text(self, field):
        if field == "notes":
            buffer = self.form.notes
            return buffer.get_text(buffer.get_start_iter(), buffer.get_end_iter(), False)
        return self.entries[field].get_text()

    def set_text(self, field, text):
        self._loading = True
        try:
            if field == "notes":
                self.form.notes.set_text(text, -1)
            else:
                self.entries[field].set_text(text)
        finally:
            self._loading = False

    def set_title(self, title):
        self.window.set_title(title)
