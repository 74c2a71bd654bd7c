import abc
import logging
from typing import Callable, Iterable

from divelog.context import AppContext
from divelog.device import DeviceData, DeviceImporter
from divelog.dive import Dive
from divelog.divelist import DiveListPresenter
from divelog.errors import DeviceImportError, DiveLogError, ParseError, SettingsError
from divelog.info import DiveInfoPresenter
from divelog.settings import SettingsStore, save_preferences
from divelog.units import Units

logger = logging.getLogger(__name__)

MIN_DIVE_NUMBER = 1
MAX_DIVE_NUMBER = 50000


class ShellView(abc.ABC):
    def show_error(self, message):
        raise NotImplementedError

    def hide_error(self):
        raise NotImplementedError

    def queue_profile_draw(self):
        raise NotImplementedError

    def print_profile(self):
        raise NotImplementedError


class ErrorReporter:
    """Collects the errors of a batch onto a single dismissable notice."""

    view: ShellView
    count: int = 0
    only_open_errors: bool = True

    def __init__(self, view):
        self.view = view
        self.count = 0
        self.only_open_errors = True

    @property
    def visible(self):
        return self.count > 0

    def report(self, error):
        if error is None:
            return
        logger.warning(f"{error}")
        self.only_open_errors = self.only_open_errors and isinstance(error, ParseError)
        self.count += 1
        if self.count == 1:
            self.view.show_error(str(error))
        elif self.only_open_errors:
            self.view.show_error(f"Failed to open {self.count} files.")
        else:
            self.view.show_error(f"{self.count} errors occurred.")

    def dismiss(self):
        self.count = 0
        self.only_open_errors = True
        self.view.hide_error()


class ShellController:
    context: AppContext
    divelist: DiveListPresenter
    info: DiveInfoPresenter
    errors: ErrorReporter
    shown_dive: Dive | None

    def __init__(
        self,
        context: AppContext,
        view: ShellView,
        divelist: DiveListPresenter,
        info: DiveInfoPresenter,
        parser: Callable[[str], list[Dive]],
        writer: Callable[[str, Iterable[Dive]], None],
        settings: SettingsStore,
        importer: DeviceImporter | None = None,
    ):
        self.context = context
        self.view = view
        self.divelist = divelist
        self.info = info
        self.parser = parser
        self.writer = writer
        self.settings = settings
        self.importer = importer
        self.errors = ErrorReporter(view)
        self.shown_dive = None

    def update_dive(self, dive: Dive | None):
        """Flush the form into the dive it shows, then show ``dive`` in it."""
        shown = self.shown_dive
        if shown is not None and self.info.flush(shown):
            self.divelist.refresh_one(shown)
        if dive is not None:
            self.info.show(dive)
            self.shown_dive = dive

    def repaint(self):
        dive = self.context.current_dive
        self.update_dive(dive)
        if dive is None:
            self.info.show(None)
            self.shown_dive = None
        self.view.queue_profile_draw()

    def report_dives(self, dives: list[Dive]):
        for dive in dives:
            self.context.dives.append(dive.fixup())
        self.context.dives.sort()
        logger.info(f"{len(dives)} new dives, {len(self.context.dives)} in total")

    def open_files(self, paths):
        self.update_dive(None)
        dives = []
        for path in paths:
            logger.info(f"opening {path}")
            try:
                dives.extend(self.parser(path))
            except ParseError as e:
                self.errors.report(e)
                continue
            if self.context.filename is None:
                self.context.filename = str(path)
        self.report_dives(dives)
        self.divelist.rebuild()

    def save(self, path):
        self.update_dive(None)
        logger.info(f"saving {len(self.context.dives)} dives to {path}")
        try:
            self.writer(path, list(self.context.dives))
        except (OSError, DiveLogError) as e:
            self.errors.report(e)
            return False
        self.context.filename = str(path)
        self.context.mark_changed(False)
        return True

    def apply_preferences(self, units: Units, font):
        # flush edits made while the old units were shown
        self.update_dive(None)

        self.divelist.set_font(font)
        self.context.units = units.copy()
        self.divelist.refresh_units()
        self.repaint()
        try:
            save_preferences(self.settings, self.context.units, font)
        except (OSError, SettingsError) as e:
            self.errors.report(e)

    def renumber(self, start):
        start = int(start)
        if not MIN_DIVE_NUMBER <= start <= MAX_DIVE_NUMBER:
            raise ValueError(
                f"first dive number must be between {MIN_DIVE_NUMBER} and {MAX_DIVE_NUMBER}"
            )
        self.update_dive(None)
        self.context.dives.renumber(start)
        self.divelist.refresh_all()
        self.repaint()

    def import_from_device(self, data: DeviceData):
        self.update_dive(None)
        if self.importer is None:
            self.errors.report(DeviceImportError("No dive computer support available"))
        else:
            logger.info(f"importing from {data.name} on {data.devname}")
            try:
                self.report_dives(self.importer.do_import(data))
            except DeviceImportError as e:
                self.errors.report(e)
        self.divelist.rebuild()

    def print_dive(self):
        self.update_dive(None)
        if self.context.current_dive is None:
            logger.debug("nothing to print")
            return False
        logger.info(f"printing {self.context.current_dive!r}")
        self.view.print_profile()
        return True

    def on_close(self):
        """Return whether the user should be asked to save before exiting."""
        self.update_dive(None)
        return self.context.unsaved_changes()
