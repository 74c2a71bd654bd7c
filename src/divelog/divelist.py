import abc
import dataclasses
import logging

from divelog import formatting
from divelog.context import AppContext
from divelog.dive import Dive
from divelog.gas_consumption import get_sac
from divelog.units import Units, depth_unit_title, temperature_unit_title

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class DiveRow:
    """
    One line of the dive list.

    The string fields are what the list shows; the raw fields are kept so a
    view can sort numerically.
    """

    index: int
    when: int = 0
    maxdepth: int = 0
    duration_seconds: int = 0
    watertemp: int = 0
    o2: int = 0
    sac_value: int = 0

    date: str = ""
    depth: str = ""
    duration: str = ""
    temperature: str = ""
    nitrox: str = ""
    sac: str = ""
    location: str = ""
    cylinder: str = ""

    @classmethod
    def from_dive(cls, index, dive: Dive, units: Units):
        row = cls(index)
        row.fill(dive, units)
        return row

    def fill(self, dive: Dive, units: Units):
        self.when = dive.when
        self.maxdepth = dive.maxdepth
        self.duration_seconds = dive.duration
        self.watertemp = dive.watertemp
        self.o2 = dive.first_cylinder.gasmix.o2
        self.sac_value = get_sac(dive)

        self.date = formatting.format_date(dive.when)
        self.depth = formatting.format_depth(dive.maxdepth, units.length)
        self.duration = formatting.format_duration(dive.duration)
        self.temperature = formatting.format_temperature(
            dive.watertemp, units.temperature
        )
        self.nitrox = formatting.format_nitrox(self.o2)
        self.sac = formatting.format_sac(self.sac_value, units.volume)
        self.location = formatting.truncate(dive.location)
        self.cylinder = formatting.truncate(dive.first_cylinder.description)


class DiveListView(abc.ABC):
    """What the dive list presenter needs from the toolkit."""

    def set_rows(self, rows: list[DiveRow]):
        raise NotImplementedError

    def update_row(self, position, row: DiveRow):
        raise NotImplementedError

    def set_column_titles(self, depth, temperature):
        raise NotImplementedError

    def select_row(self, position):
        raise NotImplementedError

    def set_font(self, font):
        raise NotImplementedError


class DiveListPresenter:
    context: AppContext
    view: DiveListView
    rows: list[DiveRow]

    def __init__(self, context, view, repaint=None):
        self.context = context
        self.view = view
        self.repaint = repaint if repaint is not None else lambda: None
        self.rows = []

    def rebuild(self):
        logger.debug(f"rebuilding dive list with {len(self.context.dives)} dives")
        units = self.context.units
        self.rows = [
            DiveRow.from_dive(i, dive, units)
            for i, dive in enumerate(self.context.dives)
        ]
        self.view.set_rows(list(self.rows))
        self.refresh_units()

        if self.rows:
            self.view.select_row(0)
            self.select(0)
        else:
            self.context.selected_index = -1
            self.repaint()

    def refresh_units(self):
        units = self.context.units
        self.view.set_column_titles(
            depth_unit_title(units.length), temperature_unit_title(units.temperature)
        )
        self.refresh_all()

    def refresh_all(self):
        for position in range(len(self.rows)):
            self._refresh_row(position)

    def refresh_one(self, dive: Dive):
        for position, row in enumerate(self.rows):
            if self.context.dives.get(row.index) is dive:
                self._refresh_row(position)
                return True
        return False

    def _refresh_row(self, position):
        row = self.rows[position]
        dive = self.context.dives.get(row.index)
        if dive is None:
            return
        row.fill(dive, self.context.units)
        self.view.update_row(position, row)

    def select(self, position):
        if position < 0 or position >= len(self.rows):
            logger.debug(f"ignoring selection of row {position}")
            return
        self.context.selected_index = self.rows[position].index
        logger.debug(f"selected dive {self.context.selected_index}")
        self.repaint()

    def on_selection_changed(self, position):
        self.select(position)

    def set_font(self, font):
        self.context.divelist_font = font
        self.view.set_font(font)

    def mark_changed(self, changed=True):
        self.context.mark_changed(changed)

    def unsaved_changes(self):
        return self.context.unsaved_changes()
