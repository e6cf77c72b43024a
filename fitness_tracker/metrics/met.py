"""Metabolic-equivalent (MET) lookup tables for treadmill walking and running.

Each table is a list of (upper bound km/h, MET) pairs in ascending order.
Bands are half-open `[previous upper, upper)`: the first band whose upper
bound is strictly greater than the speed wins, so a speed sitting exactly on
a boundary belongs to the faster band. Speeds past the last bound use the
table's ceiling value.
"""

from __future__ import annotations

WALKING_MET_BANDS: list[tuple[float, float]] = [
    (3.2, 2.0),
    (4.0, 2.5),
    (4.8, 3.0),
    (5.6, 3.5),
    (6.4, 4.0),
]
WALKING_MET_CEILING = 4.5

RUNNING_MET_BANDS: list[tuple[float, float]] = [
    (8.0, 8.0),
    (8.4, 9.0),
    (9.7, 10.0),
    (10.8, 11.0),
    (11.3, 11.5),
    (12.1, 12.5),
    (12.9, 13.5),
    (13.8, 14.0),
    (14.5, 15.0),
    (16.1, 16.0),
]
RUNNING_MET_CEILING = 18.0

# Standard resting oxygen uptake (ml O2 / kg / min) and the kcal conversion
# divisor used by the MET calorie formula.
OXYGEN_ML_PER_KG_MIN = 3.5
KCAL_DIVISOR = 200.0


def lookup_met(speed_kmh: float, bands: list[tuple[float, float]], ceiling: float) -> float:
    """Return the MET of the first band whose upper bound exceeds the speed."""
    for upper, met in bands:
        if speed_kmh < upper:
            return met
    return ceiling


def walking_met(speed_kmh: float) -> float:
    """MET for walking at the given speed."""
    return lookup_met(speed_kmh, WALKING_MET_BANDS, WALKING_MET_CEILING)


def running_met(speed_kmh: float) -> float:
    """MET for running at the given speed."""
    return lookup_met(speed_kmh, RUNNING_MET_BANDS, RUNNING_MET_CEILING)


def segment_calories(met: float, weight_kg: float, duration_minutes: float) -> float:
    """Calories burned for one activity segment.

    kcal = (MET * 3.5 * weight_kg * minutes) / 200
    """
    return (met * OXYGEN_ML_PER_KG_MIN * weight_kg * duration_minutes) / KCAL_DIVISOR
