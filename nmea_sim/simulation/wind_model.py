"""
Wind Model
==========

Apparent wind from true wind and boat velocity.
"""

import math
from typing import NamedTuple


class ApparentWind(NamedTuple):
    """Apparent wind as felt on board."""
    speed: float    # Apparent wind speed (knots)
    angle: float    # Apparent wind angle (degrees, -180..180, +ve starboard)


def compute_apparent_wind(tws: float, twd: float, boat_speed: float, cog: float) -> ApparentWind:
    """
    Calculate apparent wind from true wind and boat motion.

    Vectors are in a north-referenced plane (x east, y north) with angles
    measured clockwise from north.

    Args:
        tws: True wind speed (knots)
        twd: True wind direction (degrees)
        boat_speed: Boat speed (knots)
        cog: Course over ground (degrees)

    Returns:
        ApparentWind(speed, angle) with angle in (-180, 180]
    """
    twd_rad = math.radians(twd)
    cog_rad = math.radians(cog)

    # True wind components
    tw_x = tws * math.sin(twd_rad)
    tw_y = tws * math.cos(twd_rad)

    # Boat velocity components
    bv_x = boat_speed * math.sin(cog_rad)
    bv_y = boat_speed * math.cos(cog_rad)

    aw_x = tw_x - bv_x
    aw_y = tw_y - bv_y

    aws = math.hypot(aw_x, aw_y)
    if aws == 0.0:
        return ApparentWind(0.0, 0.0)

    awa = math.degrees(math.atan2(aw_x, aw_y))
    if awa > 180:
        awa -= 360
    if awa <= -180:
        awa += 360

    return ApparentWind(aws, awa)
