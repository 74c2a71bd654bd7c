import abc
import logging
import os

from divelog.context import DIVELIST_DEFAULT_FONT
from divelog.errors import SettingsError
from divelog.units import Length, Pressure, Temperature, Units, Volume

logger = logging.getLogger(__name__)

GROUP = "divelog"


class SettingsStore(abc.ABC):
    def get_bool(self, key) -> bool:
        raise NotImplementedError

    def set_bool(self, key, value: bool):
        raise NotImplementedError

    def get_string(self, key) -> str | None:
        raise NotImplementedError

    def set_string(self, key, value: str):
        raise NotImplementedError

    def save(self):
        raise NotImplementedError


class MemorySettingsStore(SettingsStore):
    values: dict
    saves: int = 0

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.saves = 0

    def get_bool(self, key):
        return bool(self.values.get(key, False))

    def set_bool(self, key, value):
        self.values[key] = bool(value)

    def get_string(self, key):
        return self.values.get(key)

    def set_string(self, key, value):
        self.values[key] = value

    def save(self):
        self.saves += 1


class KeyFileSettingsStore(SettingsStore):
    """Settings kept in a GLib key file, written back by ``save``."""

    def __init__(self, path=None):
        from gi.repository import GLib

        self._error = GLib.Error
        if path is None:
            path = os.path.join(GLib.get_user_config_dir(), "divelog", "settings.ini")
        self.path = path
        self.key_file = GLib.KeyFile.new()
        try:
            self.key_file.load_from_file(path, GLib.KeyFileFlags.KEEP_COMMENTS)
        except GLib.Error as e:
            logger.debug(f"no settings loaded from {path}: {e.message}")

    def get_bool(self, key):
        try:
            return self.key_file.get_boolean(GROUP, key)
        except self._error:
            return False

    def set_bool(self, key, value):
        self.key_file.set_boolean(GROUP, key, bool(value))

    def get_string(self, key):
        try:
            return self.key_file.get_string(GROUP, key)
        except self._error:
            return None

    def set_string(self, key, value):
        self.key_file.set_string(GROUP, key, value)

    def save(self):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        try:
            self.key_file.save_to_file(self.path)
        except self._error as e:
            raise SettingsError(
                f"Failed to save settings to {self.path}: {e.message}"
            ) from e
        logger.debug(f"settings saved to {self.path}")


def load_preferences(store: SettingsStore):
    units = Units()
    if store.get_bool("feet"):
        units.length = Length.FEET
    if store.get_bool("psi"):
        units.pressure = Pressure.PSI
    if store.get_bool("cuft"):
        units.volume = Volume.CUFT
    if store.get_bool("fahrenheit"):
        units.temperature = Temperature.FAHRENHEIT

    font = store.get_string("divelist_font")
    if not font:
        font = DIVELIST_DEFAULT_FONT
    return units, font


def save_preferences(store: SettingsStore, units: Units, font):
    store.set_bool("feet", units.length == Length.FEET)
    store.set_bool("psi", units.pressure == Pressure.PSI)
    store.set_bool("cuft", units.volume == Volume.CUFT)
    store.set_bool("fahrenheit", units.temperature == Temperature.FAHRENHEIT)
    store.set_string("divelist_font", font)
    store.save()
