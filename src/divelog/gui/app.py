import logging

import gi

from divelog.device import DeviceImporter

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio

logger = logging.getLogger(__name__)


class DivelogApp(Adw.Application):
    importer: DeviceImporter | None

    def __init__(self, importer=None, **kwargs):
        super().__init__(
            application_id="io.github.divelog.Divelog",
            flags=Gio.ApplicationFlags.HANDLES_OPEN,
            **kwargs,
        )
        self.importer = importer

    def do_startup(self):
        Adw.Application.do_startup(self)
        logging.getLogger("divelog.gui").setLevel(logging.DEBUG)

    def _get_window(self):
        win = self.props.active_window

        if not win:
            from divelog.gui.window import DivelogWindow

            win = DivelogWindow(application=self, importer=self.importer)
        return win

    def do_activate(self):
        self.set_accels_for_action("win.open", ["<Control>o"])
        self.set_accels_for_action("win.save", ["<Control>s"])
        self.set_accels_for_action("win.print", ["<Control>p"])
        self.set_accels_for_action("win.quit", ["<Control>q"])

        self._get_window().present()

    def do_open(self, files, n_files, hint):
        self.activate()
        paths = [file.get_path() for file in files]
        logger.debug(f"opening {paths} from the command line")
        self._get_window().open_files(paths)
