"""
Shared test fixtures for simulator unit tests.
"""

import random
import threading

import pytest
from werkzeug.serving import make_server

from nmea_sim import server as server_module
from nmea_sim.simulation import SimulationConfig, SimulationState


class FixedRandom:
    """Noise source returning a fixed fraction of each range."""

    def __init__(self, fraction: float = 0.5):
        self.fraction = fraction
        self.calls = []

    def uniform(self, low, high):
        self.calls.append((low, high))
        return low + (high - low) * self.fraction


# 2024-01-01 14:30:04 UTC
T0 = 1704119404.0


@pytest.fixture
def zero_rng():
    """Noise source with no drift (midpoint of every symmetric range)."""
    return FixedRandom(0.5)


@pytest.fixture
def seeded_rng():
    """Deterministic pseudo-random noise source."""
    return random.Random(42)


@pytest.fixture
def sim_config():
    """Default simulation configuration."""
    return SimulationConfig()


@pytest.fixture
def initial_state(sim_config):
    """Seeded simulation state at T0."""
    return SimulationState.initial(sim_config, now=T0)


@pytest.fixture
def live_server(monkeypatch):
    """Run the stream server on a free port at 20 Hz; yields its ws:// URL."""
    monkeypatch.setattr(server_module, 'sim_config',
                        SimulationConfig(update_rate_hz=20.0, seed=1))

    httpd = make_server('127.0.0.1', 0, server_module.app, threaded=True)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()

    yield f"ws://127.0.0.1:{httpd.server_port}/"

    httpd.shutdown()
    thread.join(timeout=2.0)
