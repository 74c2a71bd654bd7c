import abc
import dataclasses
import enum
import logging
from typing import Callable

from divelog.dive import Dive

logger = logging.getLogger(__name__)

DEFAULT_DEVICE_PATH = "/dev/ttyUSB0"


class DeviceType(enum.IntEnum):
    SUUNTO_SOLUTION = enum.auto()
    SUUNTO_EON = enum.auto()
    SUUNTO_VYPER = enum.auto()
    SUUNTO_VYPER2 = enum.auto()
    SUUNTO_D9 = enum.auto()
    UWATEC_ALADIN = enum.auto()
    UWATEC_MEMOMOUSE = enum.auto()
    UWATEC_SMART = enum.auto()
    REEFNET_SENSUS = enum.auto()
    REEFNET_SENSUSPRO = enum.auto()
    REEFNET_SENSUSULTRA = enum.auto()
    OCEANIC_VTPRO = enum.auto()
    OCEANIC_VEO250 = enum.auto()
    OCEANIC_ATOM2 = enum.auto()
    MARES_NEMO = enum.auto()
    MARES_PUCK = enum.auto()
    MARES_ICONHD = enum.auto()
    HW_OSTC = enum.auto()
    CRESSI_EDY = enum.auto()
    ZEAGLE_N2ITION3 = enum.auto()
    ATOMICS_COBALT = enum.auto()


DEVICE_LIST: list[tuple[str, DeviceType]] = [
    ("Suunto Solution", DeviceType.SUUNTO_SOLUTION),
    ("Suunto Eon", DeviceType.SUUNTO_EON),
    ("Suunto Vyper", DeviceType.SUUNTO_VYPER),
    ("Suunto Vyper Air", DeviceType.SUUNTO_VYPER2),
    ("Suunto D9", DeviceType.SUUNTO_D9),
    ("Uwatec Aladin", DeviceType.UWATEC_ALADIN),
    ("Uwatec Memo Mouse", DeviceType.UWATEC_MEMOMOUSE),
    ("Uwatec Smart", DeviceType.UWATEC_SMART),
    ("ReefNet Sensus", DeviceType.REEFNET_SENSUS),
    ("ReefNet Sensus Pro", DeviceType.REEFNET_SENSUSPRO),
    ("ReefNet Sensus Ultra", DeviceType.REEFNET_SENSUSULTRA),
    ("Oceanic VT Pro", DeviceType.OCEANIC_VTPRO),
    ("Oceanic Veo250", DeviceType.OCEANIC_VEO250),
    ("Oceanic Atom 2", DeviceType.OCEANIC_ATOM2),
    ("Mares Nemo", DeviceType.MARES_NEMO),
    ("Mares Puck", DeviceType.MARES_PUCK),
    ("Mares Icon HD", DeviceType.MARES_ICONHD),
    ("OSTC", DeviceType.HW_OSTC),
    ("Cressi Edy", DeviceType.CRESSI_EDY),
    ("Zeagle N2iTiON 3", DeviceType.ZEAGLE_N2ITION3),
    ("Atomic Aquatics Cobalt", DeviceType.ATOMICS_COBALT),
]


@dataclasses.dataclass
class DeviceData:
    type: DeviceType
    name: str
    devname: str = DEFAULT_DEVICE_PATH
    progress: Callable[[float], None] = lambda fraction: None


class DeviceImporter(abc.ABC):
    """Downloads dives from a dive computer."""

    @abc.abstractmethod
    def do_import(self, data: DeviceData) -> list[Dive]:
        """
        Return the downloaded dives.

        Implementations report progress through ``data.progress`` with a
        fraction between 0 and 1 and raise DeviceImportError on failure.
        """
