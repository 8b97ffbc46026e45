"""
NMEA-0183 Encoding
==================

Checksum and sentence formatting for the GLL, MWV and VHW sentences
emitted by the simulator.
"""

from .checksum import compute_checksum, verify_checksum
from .sentences import format_gll, format_mwv, format_vhw, KNOTS_TO_KMH

__all__ = [
    'compute_checksum', 'verify_checksum',
    'format_gll', 'format_mwv', 'format_vhw', 'KNOTS_TO_KMH',
]
