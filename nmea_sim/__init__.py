"""
NMEA Sailing Simulator
======================

Simulates a sailing yacht and streams its telemetry as NMEA-0183
sentences over a WebSocket, for exercising chart plotters and
navigation software without real instruments.
"""

__version__ = "0.1.0"
