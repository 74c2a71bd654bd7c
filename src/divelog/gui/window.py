import importlib.metadata
import importlib.resources
import logging

import gi

from divelog.context import AppContext
from divelog.device import DeviceData, DeviceImporter
from divelog.divelist import DiveListPresenter
from divelog.gui.dialogs import (
    ImportDialog,
    PreferencesDialog,
    RenumberDialog,
    SaveChangesDialog,
)
from divelog.gui.dive_info_view import DiveInfoAdapter, DiveInfoForm
from divelog.gui.dive_list_view import DiveListAdapter, DiveListColumnView
from divelog.gui.dive_viewer import DiveProfileView
from divelog.gui.widgets import process_ui_events
from divelog.info import DiveInfoPresenter
from divelog.settings import KeyFileSettingsStore, SettingsStore, load_preferences
from divelog.shell import ShellController, ShellView
from divelog.units import Units
from divelog.xml_io import parse_file, save_dives

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio, GLib, Gtk

logger = logging.getLogger(__name__)


def xml_filter():
    file_filter = Gtk.FileFilter()
    file_filter.add_pattern("*.xml")
    file_filter.add_pattern("*.XML")
    file_filter.add_mime_type("text/xml")
    file_filter.set_name("XML file")
    return file_filter


class WindowShellView(ShellView):
    def __init__(self, window: "DivelogWindow"):
        self.window = window

    def show_error(self, message):
        self.window.error_banner.set_title(GLib.markup_escape_text(message))
        self.window.error_banner.set_revealed(True)

    def hide_error(self):
        self.window.error_banner.set_revealed(False)

    def queue_profile_draw(self):
        context = self.window.context
        self.window.profile_view.display_dive(context.current_dive, context.units)

    def print_profile(self):
        self.window.profile_view.print_profile(self.window)


@Gtk.Template(
    filename=str(importlib.resources.files("divelog.gui").joinpath("ui/window.ui"))
)
class DivelogWindow(Adw.ApplicationWindow):
    __gtype_name__ = "DivelogWindow"

    error_banner: Adw.Banner = Gtk.Template.Child()
    top_paned: Gtk.Paned = Gtk.Template.Child()
    dive_list_window: Gtk.ScrolledWindow = Gtk.Template.Child()
    progress_bar: Gtk.ProgressBar = Gtk.Template.Child()

    context: AppContext
    controller: ShellController

    def __init__(
        self,
        settings: SettingsStore | None = None,
        importer: DeviceImporter | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._closing = False

        self.settings = settings if settings is not None else KeyFileSettingsStore()
        units, font = load_preferences(self.settings)
        self.context = AppContext(units=units, divelist_font=font)

        self.profile_view = DiveProfileView()
        self.info_form = DiveInfoForm()
        self.dive_list = DiveListColumnView()
        self.top_paned.set_start_child(self.profile_view)
        self.top_paned.set_end_child(self.info_form)
        self.dive_list_window.set_child(self.dive_list)

        dive_list_adapter = DiveListAdapter(self.dive_list)
        dive_info_adapter = DiveInfoAdapter(self.info_form, self)
        self.divelist = DiveListPresenter(self.context, dive_list_adapter)
        self.info = DiveInfoPresenter(self.context, dive_info_adapter)
        dive_list_adapter.presenter = self.divelist
        dive_info_adapter.presenter = self.info

        self.controller = ShellController(
            self.context,
            WindowShellView(self),
            self.divelist,
            self.info,
            parser=parse_file,
            writer=save_dives,
            settings=self.settings,
            importer=importer,
        )
        self.divelist.repaint = self.controller.repaint

        self.actions = {}

        for action in [
            "open",
            "save",
            "print",
            "import",
            "renumber",
            "preferences",
            "about",
            "quit",
        ]:
            gaction = Gio.SimpleAction.new(action, None)
            gaction.connect("activate", getattr(self, f"_on_{action}_activate"))
            self.actions[action] = gaction
            self.add_action(gaction)
        logger.debug("actions added")

        self.connect("close-request", self._on_close_request)

        self.divelist.set_font(font)
        self.divelist.rebuild()
        logger.debug("window created")

    def open_files(self, paths):
        self.controller.open_files(paths)

    @Gtk.Template.Callback()
    def on_error_banner_clicked(self, _):
        self.controller.errors.dismiss()

    def _on_open_activate(self, obj, pspec):
        logger.debug("open activated")
        dialog = Gtk.FileDialog(title="Open File")
        filters = Gio.ListStore.new(Gtk.FileFilter)
        filters.append(xml_filter())
        dialog.set_filters(filters)
        dialog.open_multiple(self, None, self._on_open_response)

    def _on_open_response(self, dialog, result):
        try:
            files = dialog.open_multiple_finish(result)
        except GLib.Error as e:
            logger.debug(f"open dialog dismissed: {e.message}")
            return
        self.open_files(
            [files.get_item(i).get_path() for i in range(files.get_n_items())]
        )

    def _on_save_activate(self, obj, pspec):
        logger.debug("save activated")
        self.save_dialog()

    def save_dialog(self, then=None):
        dialog = Gtk.FileDialog(title="Save File")
        if self.context.filename is None:
            dialog.set_initial_name("Untitled document")
        else:
            dialog.set_initial_file(Gio.File.new_for_path(self.context.filename))

        def on_response(dialog, result):
            try:
                file = dialog.save_finish(result)
            except GLib.Error as e:
                logger.debug(f"save dialog dismissed: {e.message}")
            else:
                self.controller.save(file.get_path())
            if then is not None:
                then()

        dialog.save(self, None, on_response)

    def _on_print_activate(self, obj, pspec):
        logger.debug("print activated")
        self.controller.print_dive()

    def _on_import_activate(self, obj, pspec):
        logger.debug("import activated")
        ImportDialog(self._on_import_accept).present(self)

    def _on_import_accept(self, data: DeviceData):
        data.progress = self.update_progressbar
        self.progress_bar.set_fraction(0)
        self.progress_bar.set_text(f"Importing from {data.name}")
        self.progress_bar.set_visible(True)
        try:
            self.controller.import_from_device(data)
        finally:
            self.progress_bar.set_visible(False)

    def update_progressbar(self, value):
        self.progress_bar.set_fraction(value)
        process_ui_events()

    def _on_renumber_activate(self, obj, pspec):
        logger.debug("renumber activated")
        RenumberDialog(self.controller.renumber).present(self)

    def _on_preferences_activate(self, obj, pspec):
        logger.debug("preferences activated")
        PreferencesDialog(
            self.context.units, self.context.divelist_font, self._on_preferences_accept
        ).present(self)

    def _on_preferences_accept(self, units: Units, font):
        self.controller.apply_preferences(units, font)

    def _on_about_activate(self, obj, pspec):
        try:
            version = importlib.metadata.version("divelog")
        except importlib.metadata.PackageNotFoundError:
            version = "unknown"
        dialog = Adw.AboutDialog(
            application_name="Divelog",
            comments="Dive log software",
            license_type=Gtk.License.GPL_2_0,
            version=version,
        )
        dialog.present(self)

    def _on_quit_activate(self, obj, pspec):
        self.close()

    def _on_close_request(self, window):
        if self._closing:
            return False
        if not self.controller.on_close():
            return False
        SaveChangesDialog(self._on_save_changes_response).present(self)
        return True

    def _on_save_changes_response(self, save):
        if save:
            self.save_dialog(then=self._force_close)
        else:
            self._force_close()

    def _force_close(self):
        self._closing = True
        self.close()
