import abc
import logging
import time

from divelog.context import AppContext
from divelog.dive import Dive
from divelog.formatting import weekday

logger = logging.getLogger(__name__)

APPLICATION_NAME = "Divelog"

FIELDS = ["location", "divemaster", "buddy", "notes"]


def text_changed(old, new):
    """Absent and empty text count as the same value."""
    return (old or "") != new


def dive_title(dive: Dive):
    if dive.location:
        title = f"Dive #{dive.number} - {dive.location}"
    else:
        tm = time.gmtime(dive.when)
        title = (
            f"Dive #{dive.number} - {weekday(dive.when)} "
            f"{tm.tm_mon:02d}/{tm.tm_mday:02d}/{tm.tm_year:04d} "
            f"at {tm.tm_hour}:{tm.tm_min:02d}"
        )
    if not dive.number:
        title = title[len("Dive #0 - ") :]
    return title


class DiveInfoView(abc.ABC):
    """The four editable fields of the dive info form plus the window title."""

    def get_text(self, field) -> str:
        raise NotImplementedError

    def set_text(self, field, text):
        raise NotImplementedError

    def set_title(self, title):
        raise NotImplementedError


class DiveInfoPresenter:
    context: AppContext
    view: DiveInfoView
    dirty: dict[str, bool]

    def __init__(self, context, view):
        self.context = context
        self.view = view
        # the first flush always picks up whatever the form holds
        self.dirty = {field: True for field in FIELDS}

    def show(self, dive: Dive | None):
        if dive is None:
            self.view.set_title(APPLICATION_NAME)
        else:
            self.view.set_title(dive_title(dive))

        for field in FIELDS:
            value = getattr(dive, field) if dive is not None else None
            self.view.set_text(field, value or "")

    def flush(self, dive: Dive | None):
        if dive is None:
            return False

        changed = False
        for field in FIELDS:
            if not self.dirty[field]:
                continue
            old_text = getattr(dive, field)
            new_text = self.view.get_text(field)
            setattr(dive, field, new_text)
            if text_changed(old_text, new_text):
                logger.debug(f"{field} of {dive!r} changed")
                changed = True

        if changed:
            self.context.mark_changed(True)
        return changed

    def on_field_edited(self, field):
        if field not in self.dirty:
            raise KeyError(f"unknown dive info field {field}")
        self.dirty[field] = True

    def reset_dirty(self):
        for field in FIELDS:
            self.dirty[field] = False
