import logging

import gi

from divelog.dive import Dive
from divelog.profile import profile_figure
from divelog.units import Units

gi.require_version("Adw", "1")
gi.require_version("Gtk", "4.0")
gi.require_version("WebKit", "6.0")
from gi.repository import Adw
from gi.repository.WebKit import PrintOperation, WebView

logger = logging.getLogger(__name__)


class DiveProfileView(Adw.Bin):
    __gtype_name__ = "DiveProfileView"

    web_view: WebView

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.web_view = WebView(hexpand=True, vexpand=True)
        self.set_child(self.web_view)
        self.set_size_request(350, 250)

    def render(self, width, height, dive: Dive | None, units: Units):
        if dive is None:
            self.web_view.load_html("", None)
            return
        fig = profile_figure(dive, units, width=width or None, height=height or None)
        self.web_view.load_html(fig.to_html(), None)

    def display_dive(self, dive: Dive | None, units: Units):
        self.render(self.get_width(), self.get_height(), dive, units)

    def print_profile(self, parent):
        operation = PrintOperation.new(self.web_view)
        response = operation.run_dialog(parent)
        logger.debug(f"print dialog closed with {response.value_nick}")
