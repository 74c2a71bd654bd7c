import calendar

import pytest

import divelog.formatting as formatting
from divelog.errors import UnitError
from divelog.units import Length, Temperature, Volume


class TestDepth:
    def test_metric_shows_tenths_below_twenty(self):
        assert formatting.format_depth(19000, Length.METERS) == "19.0"
        assert formatting.format_depth(1234, Length.METERS) == "1.2"

    def test_metric_rounds_to_nearest_tenth(self):
        assert formatting.format_depth(1251, Length.METERS) == "1.3"
        assert formatting.format_depth(1250, Length.METERS) == "1.2"

    def test_metric_whole_number_from_twenty(self):
        assert formatting.format_depth(20500, Length.METERS) == "20"
        assert formatting.format_depth(19999, Length.METERS) == "20"
        assert formatting.format_depth(35240, Length.METERS) == "35"

    def test_feet(self):
        assert formatting.format_depth(30000, Length.FEET) == "98"
        assert formatting.format_depth(0, Length.FEET) == "0"

    def test_unknown_unit(self):
        with pytest.raises(UnitError):
            formatting.format_depth(1000, "fathoms")


class TestDuration:
    def test_pads_seconds(self):
        assert formatting.format_duration(2730) == "45:30"
        assert formatting.format_duration(65) == "1:05"
        assert formatting.format_duration(0) == "0:00"


class TestTemperature:
    @pytest.mark.parametrize("unit", list(Temperature))
    def test_zero_is_unknown(self, unit):
        assert formatting.format_temperature(0, unit) == ""

    def test_celsius(self):
        assert formatting.format_temperature(291150, Temperature.CELSIUS) == "18.0"

    def test_fahrenheit(self):
        assert formatting.format_temperature(291150, Temperature.FAHRENHEIT) == "64.4"

    def test_kelvin(self):
        assert formatting.format_temperature(300000, Temperature.KELVIN) == "300.0"


class TestNitrox:
    def test_air(self):
        assert formatting.format_nitrox(0) == "air"

    def test_percentage(self):
        assert formatting.format_nitrox(320) == "32.0"
        assert formatting.format_nitrox(209) == "20.9"


class TestSac:
    def test_zero_is_blank(self):
        assert formatting.format_sac(0, Volume.LITER) == ""
        assert formatting.format_sac(0, Volume.CUFT) == ""

    def test_liters(self):
        assert formatting.format_sac(7400, Volume.LITER) == " 7.4"
        assert formatting.format_sac(20000, Volume.LITER) == "20.0"

    def test_cubic_feet(self):
        assert formatting.format_sac(7400, Volume.CUFT) == "0.26"

    def test_unknown_unit(self):
        with pytest.raises(UnitError):
            formatting.format_sac(7400, "gallons")


class TestDate:
    def test_epoch(self):
        assert formatting.format_date(0) == "Thu, Jan 1, 1970 00:00"

    def test_date(self):
        when = calendar.timegm((2011, 9, 3, 9, 5, 0))
        assert formatting.format_date(when) == "Sat, Sep 3, 2011 09:05"
        assert formatting.weekday(when) == "Sat"


class TestTruncate:
    def test_none(self):
        assert formatting.truncate(None) == ""

    def test_long_text(self):
        text = "x" * 50
        assert formatting.truncate(text) == "x" * 40
        assert formatting.truncate("2nd Cathedral, Lanai") == "2nd Cathedral, Lanai"
