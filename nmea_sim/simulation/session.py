"""
Simulation Session
==================

One streaming session: owns a SimulationState, advances it once per tick
and produces the GLL/MWV/VHW payload for the transport to send.

Lifecycle:
    CREATED  -> state seeded, no tick yet
    RUNNING  -> entered on the first tick
    CLOSED   -> terminal; ticks are ignored
"""

import random
import threading
import time
from enum import Enum, auto
from typing import Optional, Protocol
import logging

from ..nmea.sentences import format_gll, format_mwv, format_vhw
from .motion_model import MotionModel, RandomSource, SimulationConfig, SimulationState
from .wind_model import compute_apparent_wind

logger = logging.getLogger(__name__)

SENTENCE_SEPARATOR = "\r\n"


class Cancellable(Protocol):
    """Timer handle owned by a session."""

    def cancel(self) -> None:
        ...


class SessionState(Enum):
    """Session lifecycle states."""
    CREATED = auto()
    RUNNING = auto()
    CLOSED = auto()


class SimulationSession:
    """
    Drives the motion and wind models for one connection.

    The session is independent of the transport: the transport calls
    tick() on its own schedule and close() from its close/error handling.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 rng: Optional[RandomSource] = None,
                 now: Optional[float] = None,
                 motion_model: Optional[MotionModel] = None):
        """
        Initialize a session.

        Args:
            config: Simulation configuration
            rng: Noise source; defaults to random.Random(config.seed)
            now: Session start time (POSIX seconds), defaults to time.time()
            motion_model: Motion model; defaults to one built from config
        """
        self.config = config or SimulationConfig()
        self._rng = rng if rng is not None else random.Random(self.config.seed)
        self._motion = motion_model or MotionModel(self.config)
        self._sim = SimulationState.initial(self.config, now)

        self._state = SessionState.CREATED
        self._timer: Optional[Cancellable] = None
        self._tick_count = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is SessionState.CLOSED

    @property
    def simulation(self) -> SimulationState:
        """The live simulation state."""
        return self._sim

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def bind_timer(self, timer: Cancellable):
        """
        Take ownership of the timer driving this session.

        close() cancels it. A timer bound after close is cancelled at once.
        """
        with self._lock:
            if self._state is SessionState.CLOSED:
                timer.cancel()
                return
            self._timer = timer

    def tick(self, now: Optional[float] = None) -> Optional[str]:
        """
        Advance the simulation to `now` and format the sentences.

        Args:
            now: Current time (POSIX seconds), defaults to time.time()

        Returns:
            GLL, MWV and VHW sentences joined by CRLF, or None if closed
        """
        now = time.time() if now is None else now

        with self._lock:
            if self._state is SessionState.CLOSED:
                return None
            if self._state is SessionState.CREATED:
                self._state = SessionState.RUNNING
                logger.debug("Session running")

            sim = self._sim
            elapsed = now - sim.last_update
            self._motion.advance(sim, elapsed, self._rng)
            sim.last_update = now
            sim.sim_time = now
            self._tick_count += 1

            wind = compute_apparent_wind(sim.tws, sim.twd, sim.boat_speed, sim.cog)
            payload = SENTENCE_SEPARATOR.join((
                format_gll(sim.latitude, sim.longitude, sim.sim_time),
                format_mwv(wind.angle, wind.speed),
                format_vhw(sim.cog, sim.boat_speed),
            ))

        logger.debug(
            f"Tick {self._tick_count}: dt={elapsed:.3f}s "
            f"pos=({sim.latitude:.5f}, {sim.longitude:.5f}) "
            f"AWA={wind.angle:.1f} AWS={wind.speed:.1f}"
        )
        return payload

    def close(self):
        """Stop the session and cancel its timer. Safe to call repeatedly."""
        with self._lock:
            if self._state is SessionState.CLOSED:
                return
            self._state = SessionState.CLOSED
            timer, self._timer = self._timer, None

        if timer is not None:
            timer.cancel()
        logger.info(f"Session closed after {self._tick_count} ticks")
