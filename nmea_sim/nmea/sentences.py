"""
NMEA Sentence Encoder
=====================

Formats the three sentences streamed each tick:

    - GLL: Geographic position (latitude/longitude) with UTC time
    - MWV: Wind speed and angle, relative (apparent) reference
    - VHW: Water speed and heading

Decimal fields round half away from zero, as NMEA tooling written
against JavaScript's toFixed() expects.

Inputs must be finite numbers. NaN or infinity is rendered as-is into the
sentence text.
"""

import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from .checksum import compute_checksum

KNOTS_TO_KMH = 1.852


def _finish(body: str) -> str:
    """Append '*' and checksum to a sentence body."""
    return f"{body}*{compute_checksum(body)}"


def _fixed(value: float, places: int) -> str:
    """Render value with a fixed number of decimals, ties away from zero."""
    if not math.isfinite(value):
        return f"{value:.{places}f}"
    if value == 0:
        value = 0.0     # -0.0 renders without sign
    # Decimal(float) is exact, so only true binary ties round up
    quantized = Decimal(value).quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def _degrees_minutes(value: float, degree_digits: int) -> str:
    """Render abs(value) as DDMM.MMMM (or DDDMM.MMMM for 3 degree digits)."""
    magnitude = abs(value)
    degrees = magnitude // 1
    minutes = (magnitude - degrees) * 60
    return f"{degrees:0{degree_digits}.0f}{_fixed(minutes, 4).rjust(7, '0')}"


def format_gll(latitude: float, longitude: float, timestamp: float) -> str:
    """
    Format a GLL position sentence.

    Args:
        latitude: Decimal degrees, positive north
        longitude: Decimal degrees, positive east
        timestamp: POSIX time (seconds) reported as UTC hhmmss

    Returns:
        Complete sentence, e.g. $GPGLL,3749.1940,N,12228.6980,W,143005,A*32
    """
    # Truncate to whole seconds; fromtimestamp rounds to the microsecond
    utc = datetime.fromtimestamp(math.floor(timestamp), tz=timezone.utc)
    lat_dir = 'N' if latitude >= 0 else 'S'
    lon_dir = 'E' if longitude >= 0 else 'W'

    body = (
        f"$GPGLL,{_degrees_minutes(latitude, 2)},{lat_dir},"
        f"{_degrees_minutes(longitude, 3)},{lon_dir},"
        f"{utc:%H%M%S},A"
    )
    return _finish(body)


def format_mwv(angle: float, speed: float) -> str:
    """
    Format an MWV apparent wind sentence.

    Args:
        angle: Apparent wind angle (degrees, -180..180, +ve starboard)
        speed: Apparent wind speed (knots)
    """
    if angle < 0:
        angle += 360
    return _finish(f"$IIMWV,{_fixed(angle, 1)},R,{_fixed(speed, 1)},N,A")


def format_vhw(cog: float, boat_speed: float) -> str:
    """
    Format a VHW speed and heading sentence.

    Magnetic variation is not modeled, so the true heading is reported
    for both the true and magnetic fields.
    """
    return _finish(
        f"$IIVHW,{_fixed(cog, 1)},T,{_fixed(cog, 1)},M,"
        f"{_fixed(boat_speed, 1)},N,{_fixed(boat_speed * KNOTS_TO_KMH, 1)},K"
    )
