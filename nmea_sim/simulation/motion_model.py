"""
Motion Model
============

Dead-reckoning update of the simulated yacht with bounded random drift
on boat speed, course and true wind.

Position uses a flat-earth approximation: one knot is taken as 1/3600
degree per second in both latitude and longitude, with no latitude
scaling. This is intentional; the simulator feeds plotters with
plausible motion, not accurate navigation.
"""

import math
import time
from dataclasses import dataclass
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything with uniform(low, high), e.g. random.Random or numpy Generator."""

    def uniform(self, low: float, high: float) -> float:
        ...


@dataclass
class SimulationConfig:
    """Configuration for the simulated yacht and its stream."""
    # Initial state (San Francisco Bay, off the Golden Gate)
    latitude: float = 37.8199
    longitude: float = -122.4783
    boat_speed: float = 5.5             # knots
    cog: float = 225.0                  # degrees
    tws: float = 12.0                   # knots
    twd: float = 270.0                  # degrees

    # Per-tick perturbation half-widths (not scaled by elapsed time)
    boat_speed_noise: float = 0.05      # knots
    cog_noise: float = 0.5              # degrees
    tws_noise: float = 0.1              # knots
    twd_noise: float = 1.0              # degrees

    # Clamp ranges
    boat_speed_min: float = 2.0
    boat_speed_max: float = 8.0
    tws_min: float = 5.0
    tws_max: float = 20.0

    # Stream
    update_rate_hz: float = 1.0
    seed: Optional[int] = None          # Random seed for reproducibility

    @property
    def update_interval(self) -> float:
        """Time between ticks in seconds."""
        return 1.0 / self.update_rate_hz


@dataclass
class SimulationState:
    """Current simulation state, owned by a single session."""
    # Position
    latitude: float = 37.8199
    longitude: float = -122.4783

    # Speed and course
    boat_speed: float = 5.5        # Speed (knots)
    cog: float = 225.0             # Course over ground (degrees)

    # Wind
    tws: float = 12.0              # True wind speed (knots)
    twd: float = 270.0             # True wind direction (degrees)

    # Time (POSIX seconds)
    sim_time: float = 0.0          # Time reported in sentences
    last_update: float = 0.0       # Time of previous tick

    @classmethod
    def initial(cls, config: Optional[SimulationConfig] = None,
                now: Optional[float] = None) -> 'SimulationState':
        """Create the seeded state a new session starts from."""
        config = config or SimulationConfig()
        now = time.time() if now is None else now
        return cls(
            latitude=config.latitude,
            longitude=config.longitude,
            boat_speed=config.boat_speed,
            cog=wrap_degrees(config.cog),
            tws=config.tws,
            twd=wrap_degrees(config.twd),
            sim_time=now,
            last_update=now,
        )


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value to [low, high]."""
    return max(low, min(high, value))


def wrap_degrees(value: float) -> float:
    """Wrap an angle to [0, 360)."""
    wrapped = value % 360.0
    # -1e-15 % 360 rounds to 360.0
    if wrapped >= 360.0:
        wrapped = 0.0
    return wrapped


class MotionModel:
    """
    Advances a SimulationState by one tick.

    Randomness is injected per call so sessions stay independent and
    tests can supply a deterministic source.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()

    def advance(self, state: SimulationState, elapsed_seconds: float,
                rng: RandomSource) -> None:
        """
        Move the yacht and perturb speed, course and wind in place.

        Args:
            state: State to mutate
            elapsed_seconds: Time since previous tick (seconds)
            rng: Source of uniform noise
        """
        self._update_position(state, elapsed_seconds)
        self._perturb(state, rng)

    def _update_position(self, state: SimulationState, dt: float):
        """Dead-reckon position from current speed and course."""
        speed_deg_per_sec = state.boat_speed / 3600.0
        cog_rad = math.radians(state.cog)

        state.longitude += math.sin(cog_rad) * speed_deg_per_sec * dt
        state.latitude += math.cos(cog_rad) * speed_deg_per_sec * dt

    def _perturb(self, state: SimulationState, rng: RandomSource):
        """Apply bounded random drift. Not scaled by elapsed time."""
        cfg = self.config

        state.boat_speed = clamp(
            state.boat_speed + rng.uniform(-cfg.boat_speed_noise, cfg.boat_speed_noise),
            cfg.boat_speed_min, cfg.boat_speed_max
        )
        state.cog = wrap_degrees(state.cog + rng.uniform(-cfg.cog_noise, cfg.cog_noise))

        state.tws = clamp(
            state.tws + rng.uniform(-cfg.tws_noise, cfg.tws_noise),
            cfg.tws_min, cfg.tws_max
        )
        state.twd = wrap_degrees(state.twd + rng.uniform(-cfg.twd_noise, cfg.twd_noise))
