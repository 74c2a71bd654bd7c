import dataclasses
import logging

from divelog.dive import Dive, DiveTable
from divelog.units import Units

logger = logging.getLogger(__name__)

DIVELIST_DEFAULT_FONT = "Sans 8"


@dataclasses.dataclass
class AppContext:
    """Single owner of the state shared by the presenters and the shell."""

    dives: DiveTable = dataclasses.field(default_factory=DiveTable)
    units: Units = dataclasses.field(default_factory=Units)
    selected_index: int = -1
    changed: bool = False
    divelist_font: str = DIVELIST_DEFAULT_FONT
    filename: str | None = None

    @property
    def current_dive(self) -> Dive | None:
        return self.dives.get(self.selected_index)

    def mark_changed(self, changed=True):
        if changed != self.changed:
            logger.debug(f"unsaved changes: {changed}")
        self.changed = changed

    def unsaved_changes(self):
        return self.changed
