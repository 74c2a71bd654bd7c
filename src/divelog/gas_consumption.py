import logging

import numpy as np

from divelog.dive import Dive

logger = logging.getLogger(__name__)

MBAR_PER_KILO_ATM = 1013250.0


def calculate_airuse(dive: Dive):
    """Return the air used over all cylinders, in liters at 1 atm."""
    sizes = np.array([cylinder.size for cylinder in dive.cylinders], dtype=float)
    used = np.array(
        [cylinder.start - cylinder.end for cylinder in dive.cylinders], dtype=float
    )
    sizes_set = sizes != 0
    # liters at 1 atm == milliliters at 1000 atm
    kilo_atm = used[sizes_set] / MBAR_PER_KILO_ATM
    return float(np.sum(kilo_atm * sizes[sizes_set]))


def mean_pressure(dive: Dive):
    """Mean ambient pressure in atm, 1 atm per 10 m."""
    return 1 + dive.meandepth / 10000.0


def get_sac(dive: Dive):
    """Surface air consumption in ml/min, 0 when it cannot be computed."""
    airuse = calculate_airuse(dive)
    if not airuse:
        return 0
    if not dive.duration:
        return 0

    sac = airuse / mean_pressure(dive) * 60 / dive.duration
    logger.debug(f"{dive!r} used {airuse:.1f} l, sac {sac:.2f} l/min")
    return int(sac * 1000)
