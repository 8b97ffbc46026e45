"""
NMEA Checksum
=============

XOR checksum shared by every sentence the simulator emits.
"""

import string


def compute_checksum(body: str) -> str:
    """
    Compute XOR checksum for an NMEA sentence body.

    Args:
        body: Sentence text starting with '$', without the '*XX' suffix

    Returns:
        Two-character uppercase hex checksum
    """
    checksum = 0
    for c in body[1:]:
        checksum ^= ord(c)
    return f"{checksum:02X}"


def verify_checksum(sentence: str) -> bool:
    """
    Verify checksum of a complete NMEA sentence.

    Args:
        sentence: Full sentence including '$' and '*XX'

    Returns:
        True if checksum is valid
    """
    sentence = sentence.rstrip('\r\n')
    if not sentence.startswith('$') or sentence.count('*') != 1:
        return False

    body, expected = sentence.split('*')
    if len(expected) != 2 or any(c not in string.hexdigits for c in expected):
        return False

    return compute_checksum(body) == expected.upper()
