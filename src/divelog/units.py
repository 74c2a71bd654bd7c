import dataclasses
import enum

from divelog.errors import UnitError

UTF8_DEGREE = "°"
LITERS_PER_CUFT = 28.317


class Length(enum.Enum):
    METERS = "meters"
    FEET = "feet"


class Pressure(enum.Enum):
    BAR = "bar"
    PSI = "psi"


class Volume(enum.Enum):
    LITER = "liter"
    CUFT = "cuft"


class Temperature(enum.Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


@dataclasses.dataclass
class Units:
    length: Length = Length.METERS
    pressure: Pressure = Pressure.BAR
    volume: Volume = Volume.LITER
    temperature: Temperature = Temperature.CELSIUS

    def copy(self):
        return dataclasses.replace(self)


# (label, value) pairs offered by the preferences dialog, per unit group
UNIT_CHOICES = {
    "length": ("Depth:", [("Meter", Length.METERS), ("Feet", Length.FEET)]),
    "pressure": ("Pressure:", [("Bar", Pressure.BAR), ("PSI", Pressure.PSI)]),
    "volume": ("Volume:", [("Liter", Volume.LITER), ("CuFt", Volume.CUFT)]),
    "temperature": (
        "Temperature:",
        [("Celsius", Temperature.CELSIUS), ("Fahrenheit", Temperature.FAHRENHEIT)],
    ),
}


def mm_to_feet(mm):
    return mm * 0.00328084


def mkelvin_to_C(mkelvin):
    return (mkelvin - 273150) / 1000.0


def mkelvin_to_F(mkelvin):
    return mkelvin * 9 / 5000.0 - 459.670


def mkelvin_to(mkelvin, unit: Temperature):
    if unit == Temperature.CELSIUS:
        return mkelvin_to_C(mkelvin)
    if unit == Temperature.FAHRENHEIT:
        return mkelvin_to_F(mkelvin)
    if unit == Temperature.KELVIN:
        return mkelvin / 1000.0
    raise UnitError(f"unknown temperature unit {unit}")


def depth_unit_title(unit: Length):
    if unit == Length.METERS:
        return "m"
    if unit == Length.FEET:
        return "ft"
    raise UnitError(f"unknown length unit {unit}")


def temperature_unit_title(unit: Temperature):
    if unit == Temperature.CELSIUS:
        return UTF8_DEGREE + "C"
    if unit == Temperature.FAHRENHEIT:
        return UTF8_DEGREE + "F"
    if unit == Temperature.KELVIN:
        return "Kelvin"
    raise UnitError(f"unknown temperature unit {unit}")
