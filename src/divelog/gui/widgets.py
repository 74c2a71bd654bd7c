import gi

from divelog.divelist import DiveRow

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, GObject, Gtk


def process_ui_events():
    """Run the handlers of every pending toolkit event, without blocking."""
    context = GLib.MainContext.default()
    while context.pending():
        context.iteration(False)


class DiveRowItem(GObject.Object):
    """List model item mirroring a DiveRow so columns can bind to it."""

    position = GObject.Property(type=int, default=0)

    when = GObject.Property(type=GObject.TYPE_INT64, default=0)
    maxdepth = GObject.Property(type=int, default=0)
    duration_seconds = GObject.Property(type=int, default=0)
    watertemp = GObject.Property(type=int, default=0)
    o2 = GObject.Property(type=int, default=0)
    sac_value = GObject.Property(type=int, default=0)

    date = GObject.Property(type=str, default="")
    depth = GObject.Property(type=str, default="")
    duration = GObject.Property(type=str, default="")
    temperature = GObject.Property(type=str, default="")
    nitrox = GObject.Property(type=str, default="")
    sac = GObject.Property(type=str, default="")
    location = GObject.Property(type=str, default="")
    cylinder = GObject.Property(type=str, default="")

    def __init__(self, position, row: DiveRow):
        super().__init__(position=position)
        self.update(row)

    def update(self, row: DiveRow):
        for name in [
            "when",
            "maxdepth",
            "duration_seconds",
            "watertemp",
            "o2",
            "sac_value",
            "date",
            "depth",
            "duration",
            "temperature",
            "nitrox",
            "sac",
            "location",
            "cylinder",
        ]:
            value = getattr(row, name)
            if self.get_property(name) != value:
                self.set_property(name, value)


class LabelColumn(Gtk.ColumnViewColumn):
    def __init__(self, attribute: str, sort_attribute=None, xalign=0.0, **kwargs):
        super().__init__(**kwargs)
        self.attribute = attribute

        def label_setup_function(_, item: Gtk.ListItem):
            item.set_child(Gtk.Label(xalign=xalign))

        def label_bind_function(_, item: Gtk.ListItem):
            label = item.get_child()
            label.binding = item.get_item().bind_property(
                self.attribute,
                label,
                "label",
                GObject.BindingFlags.SYNC_CREATE,
            )

        def label_unbind_function(_, item: Gtk.ListItem):
            label = item.get_child()
            label.binding.unbind()
            label.binding = None

        factory = Gtk.SignalListItemFactory()
        factory.connect("setup", label_setup_function)
        factory.connect("bind", label_bind_function)
        factory.connect("unbind", label_unbind_function)
        self.set_factory(factory)

        if sort_attribute is not None:
            expression = Gtk.PropertyExpression.new(
                DiveRowItem, None, sort_attribute.replace("_", "-")
            )
            self.set_sorter(Gtk.NumericSorter.new(expression))
        else:
            expression = Gtk.PropertyExpression.new(DiveRowItem, None, attribute)
            self.set_sorter(Gtk.StringSorter.new(expression))
