import pytest

from divelog.settings import MemorySettingsStore, load_preferences, save_preferences
from divelog.units import Length, Pressure, Temperature, Units, Volume


class TestPreferences:
    def test_defaults(self):
        units, font = load_preferences(MemorySettingsStore())
        assert units == Units()
        assert font == "Sans 8"

    def test_save_and_load(self):
        store = MemorySettingsStore()
        units = Units(Length.FEET, Pressure.PSI, Volume.CUFT, Temperature.FAHRENHEIT)
        save_preferences(store, units, "Monospace 10")
        assert store.saves == 1
        assert load_preferences(store) == (units, "Monospace 10")

    def test_partial(self):
        units, _ = load_preferences(MemorySettingsStore({"cuft": True}))
        assert units == Units(volume=Volume.CUFT)


class TestKeyFileSettingsStore:
    def test_persists(self, tmp_path):
        pytest.importorskip("gi.repository.GLib")
        from divelog.settings import KeyFileSettingsStore

        path = str(tmp_path / "divelog" / "settings.ini")
        store = KeyFileSettingsStore(path)
        assert not store.get_bool("feet")
        assert store.get_string("divelist_font") is None

        store.set_bool("feet", True)
        store.set_string("divelist_font", "Monospace 10")
        assert not (tmp_path / "divelog").exists()
        store.save()

        store = KeyFileSettingsStore(path)
        assert store.get_bool("feet")
        assert store.get_string("divelist_font") == "Monospace 10"

    def test_write_failure(self, tmp_path):
        pytest.importorskip("gi.repository.GLib")
        from divelog.errors import SettingsError
        from divelog.settings import KeyFileSettingsStore

        path = tmp_path / "settings.ini"
        path.mkdir()
        store = KeyFileSettingsStore(str(path))
        store.set_bool("feet", True)
        with pytest.raises(SettingsError):
            store.save()
