#!/usr/bin/env python3
"""
NMEA Stream Server
==================

Flask server that provides:
- WebSocket streaming of simulated NMEA-0183 sentences (GLL, MWV, VHW)
- One independent simulated yacht per connection

Plain HTTP requests are rejected with 426 Upgrade Required.

Usage:
    nmea-sim --host 0.0.0.0 --port 8080
    nmea-sim --rate 5 --seed 42
"""

import argparse
import logging
import time
from dataclasses import dataclass

from flask import Flask, Response, request
from flask_sock import Sock
from simple_websocket import ConnectionClosed

from .simulation import SimulationConfig, SimulationSession, TickTimer

logger = logging.getLogger(__name__)

app = Flask(__name__)
sock = Sock(app)


@dataclass
class ServerConfig:
    """Network configuration for the stream server."""
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False


# Simulation settings applied to every new connection
sim_config = SimulationConfig()


# =============================================================================
# Upgrade check
# =============================================================================

@app.before_request
def require_websocket():
    """Reject anything that is not a WebSocket upgrade."""
    if request.headers.get('Upgrade', '').lower() != 'websocket':
        return Response("Expected WebSocket", status=426, mimetype='text/plain')
    return None


# =============================================================================
# WebSocket Streaming
# =============================================================================

def serve_session(ws, peer):
    """
    Stream NMEA sentences for one simulated yacht until the client leaves.

    Sends one message per tick containing GLL, MWV and VHW sentences
    separated by CRLF. The session is closed on every exit path;
    unexpected errors are logged and re-raised.
    """
    session = SimulationSession(sim_config)
    timer = TickTimer(sim_config.update_interval)
    session.bind_timer(timer)

    logger.info(f"Client connected: {peer} ({sim_config.update_rate_hz:g} Hz)")

    try:
        while timer.wait():
            if not ws.connected:
                logger.info(f"Client disconnected: {peer}")
                break
            payload = session.tick(time.time())
            if payload is None:
                break
            ws.send(payload)
    except ConnectionClosed:
        logger.info(f"Client disconnected: {peer}")
    except Exception:
        logger.exception(f"Stream to {peer} failed")
        raise
    finally:
        session.close()


@sock.route('/')
def stream(ws):
    """WebSocket endpoint: one simulated yacht per connection."""
    serve_session(ws, request.remote_addr)



# =============================================================================
# Main
# =============================================================================

def main():
    global sim_config

    parser = argparse.ArgumentParser(description='NMEA-0183 sailing simulator over WebSocket')
    parser.add_argument('--host', default='0.0.0.0',
                        help='Host to bind to (default: 0.0.0.0)')
    parser.add_argument('--port', '-p', type=int, default=8080,
                        help='Port to run server on (default: 8080)')
    parser.add_argument('--rate', type=float, default=1.0,
                        help='Sentences per second per client (default: 1.0)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible drift')
    parser.add_argument('--debug', action='store_true',
                        help='Enable Flask debug mode')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.rate <= 0:
        parser.error("--rate must be positive")

    config = ServerConfig(host=args.host, port=args.port, debug=args.debug)
    sim_config = SimulationConfig(update_rate_hz=args.rate, seed=args.seed)

    logger.info(f"Starting server at ws://{config.host}:{config.port}/")
    app.run(host=config.host, port=config.port, debug=config.debug, threaded=True)


if __name__ == '__main__':
    main()
