"""
Simulation Module
=================

Vessel motion and wind for the NMEA stream.
Provides dead-reckoning motion with random drift, apparent wind
calculation, and the per-connection session that ties them together.
"""

from .motion_model import MotionModel, SimulationConfig, SimulationState, clamp, wrap_degrees
from .wind_model import ApparentWind, compute_apparent_wind
from .session import SimulationSession, SessionState
from .timer import TickTimer

__all__ = [
    'MotionModel', 'SimulationConfig', 'SimulationState', 'clamp', 'wrap_degrees',
    'ApparentWind', 'compute_apparent_wind',
    'SimulationSession', 'SessionState',
    'TickTimer',
]
