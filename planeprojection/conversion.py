"""
Module for unit conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters', 'degrees_to_dms', 'dms_to_degrees']

from typing import Tuple

from planeprojection.utils.functions import round_half_up

_METERS_PER_UNIT = {
    'km': 1000,
    'mi': 1609.34,
    'ft': 0.3048,
    'nmi': 1852,
    'yd': 0.9144,
}


def _meters_per_unit(unit: str) -> float:
    try:
        return _METERS_PER_UNIT[unit.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown distance unit '{unit}'. Options: {list(_METERS_PER_UNIT.keys())}"
        ) from None


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _meters_per_unit(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters, e.g. from PlaneProjection.distance(), to another unit.
    Accepts the same units as convert_to_meters().
    """
    return distance / _meters_per_unit(unit)


def dms_to_degrees(dms: Tuple[int, int, float, str]) -> float:
    """
    Converts a Degrees Minutes Seconds value to decimal degrees.

    The hemisphere value should consist of either 'E'/'W' (longitude) or 'N'/'S' (latitude)

    Args:
        dms:
            A 4-tuple of
            ( <degrees> (int),  <minutes> (int), <seconds> (float), <hemisphere> (str) )

    Returns:
        float
    """
    mult = -1 if dms[3] in ('S', 'W') else 1
    return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))


def degrees_to_dms(value: float, is_latitude: bool) -> Tuple[int, int, float, str]:
    """
    Convert a value (latitude or longitude) in decimal degrees to a tuple of
    degrees, minutes, seconds, hemisphere

    Args:
        value:
            The latitude or longitude, in decimal degrees

        is_latitude:
            Whether the value is a latitude (N/S) rather than a longitude (E/W)

    Returns:
        converted value as (degrees, minutes, seconds, hemisphere)
    """
    minutes, seconds = divmod(abs(value) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)
    if is_latitude:
        hemisphere = 'N' if value >= 0 else 'S'
    else:
        hemisphere = 'E' if value >= 0 else 'W'

    return int(degrees), int(minutes), round_half_up(seconds, 5), hemisphere
