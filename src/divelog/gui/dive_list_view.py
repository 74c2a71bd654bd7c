import logging

import gi

from divelog.divelist import DiveListPresenter, DiveListView, DiveRow
from divelog.gui.widgets import DiveRowItem, LabelColumn

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")
from gi.repository import Gdk, Gio, Gtk, Pango

logger = logging.getLogger(__name__)


class DiveListColumnView(Gtk.ColumnView):
    __gtype_name__ = "DiveListColumnView"

    dives: Gio.ListStore
    sorted_dives: Gtk.SortListModel
    selection: Gtk.SingleSelection

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.add_css_class("dive-list")
        self.dives = Gio.ListStore.new(DiveRowItem)

        self.date_column = LabelColumn("date", "when", title="Date")
        self.depth_column = LabelColumn("depth", "maxdepth", xalign=1.0, title="m")
        self.duration_column = LabelColumn(
            "duration", "duration_seconds", xalign=1.0, title="min"
        )
        self.temperature_column = LabelColumn(
            "temperature", "watertemp", xalign=1.0, title="°C"
        )
        self.cylinder_column = LabelColumn("cylinder", title="Cyl")
        self.nitrox_column = LabelColumn("nitrox", "o2", xalign=1.0, title="O2%")
        self.sac_column = LabelColumn("sac", "sac_value", xalign=1.0, title="SAC")
        self.location_column = LabelColumn("location", expand=True, title="Location")

        for column in [
            self.date_column,
            self.depth_column,
            self.duration_column,
            self.temperature_column,
            self.cylinder_column,
            self.nitrox_column,
            self.sac_column,
            self.location_column,
        ]:
            self.append_column(column)

        self.sorted_dives = Gtk.SortListModel(model=self.dives, sorter=self.get_sorter())
        self.selection = Gtk.SingleSelection(model=self.sorted_dives)
        self.set_model(self.selection)


class DiveListAdapter(DiveListView):
    """Connects a DiveListColumnView to the dive list presenter."""

    presenter: DiveListPresenter | None = None

    def __init__(self, column_view: DiveListColumnView):
        self.column_view = column_view
        self.css_provider = Gtk.CssProvider()
        self._syncing = False

        column_view.selection.connect("notify::selected", self._on_selected)
        # default focus is only accepted once the widget is realized
        column_view.connect_after("realize", lambda view: view.grab_focus())

    def _on_selected(self, selection, _):
        if self._syncing or self.presenter is None:
            return
        item = selection.get_selected_item()
        if item is None:
            return
        self.presenter.on_selection_changed(item.position)

    def set_rows(self, rows: list[DiveRow]):
        self._syncing = True
        try:
            items = [DiveRowItem(position, row) for position, row in enumerate(rows)]
            self.column_view.dives.splice(0, self.column_view.dives.get_n_items(), items)
        finally:
            self._syncing = False

    def update_row(self, position, row: DiveRow):
        item = self.column_view.dives.get_item(position)
        if item is not None:
            item.update(row)

    def set_column_titles(self, depth, temperature):
        self.column_view.depth_column.set_title(depth)
        self.column_view.temperature_column.set_title(temperature)

    def select_row(self, position):
        model = self.column_view.sorted_dives
        for i in range(model.get_n_items()):
            if model.get_item(i).position == position:
                self._syncing = True
                try:
                    self.column_view.selection.set_selected(i)
                finally:
                    self._syncing = False
                self.column_view.scroll_to(i, None, Gtk.ListScrollFlags.FOCUS, None)
                return

    def set_font(self, font):
        font_desc = Pango.FontDescription.from_string(font)
        css = [".dive-list {"]
        if font_desc.get_family():
            css.append(f'  font-family: "{font_desc.get_family()}";')
        if font_desc.get_size():
            css.append(f"  font-size: {font_desc.get_size() / Pango.SCALE:g}pt;")
        css.append("}")
        self.css_provider.load_from_string("\n".join(css))
        Gtk.StyleContext.add_provider_for_display(
            Gdk.Display.get_default(),
            self.css_provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
        )
        logger.debug(f"dive list font set to {font}")
