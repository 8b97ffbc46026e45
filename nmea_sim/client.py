#!/usr/bin/env python3
"""
NMEA Stream Listener
====================

Connects to the stream server, prints every sentence and flags any
with a bad checksum.

Usage:
    nmea-sim-listen ws://localhost:8080/
    nmea-sim-listen ws://localhost:8080/ --count 10
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

import simple_websocket

from .nmea.checksum import verify_checksum

logger = logging.getLogger(__name__)


def iter_sentences(message: str) -> list[str]:
    """Split one stream message into its sentences."""
    return [line for line in message.split("\r\n") if line]


def listen(url: str, count: Optional[int] = None, verify: bool = True,
           out: Optional[TextIO] = None, timeout: Optional[float] = None) -> int:
    """
    Receive and print stream messages.

    Args:
        url: WebSocket URL of the stream server
        count: Stop after this many messages (None = until closed)
        verify: Check each sentence's checksum
        out: Output stream (default: stdout)
        timeout: Seconds to wait for each message (None = forever)

    Returns:
        Number of messages received
    """
    out = out or sys.stdout
    ws = simple_websocket.Client.connect(url)
    logger.info(f"Connected to {url}")

    received = 0
    try:
        while count is None or received < count:
            message = ws.receive(timeout=timeout)
            if message is None:
                logger.warning(f"No data within {timeout}s")
                break
            received += 1

            for sentence in iter_sentences(message):
                if verify and not verify_checksum(sentence):
                    logger.warning(f"Bad checksum: {sentence}")
                print(sentence, file=out)
    except simple_websocket.ConnectionClosed:
        logger.info("Server closed the connection")
    finally:
        ws.close()

    return received


def main():
    parser = argparse.ArgumentParser(description='Print sentences from an NMEA stream server')
    parser.add_argument('url', nargs='?', default='ws://localhost:8080/',
                        help='Server URL (default: ws://localhost:8080/)')
    parser.add_argument('--count', '-n', type=int, default=None,
                        help='Number of messages to receive')
    parser.add_argument('--no-verify', action='store_true',
                        help='Skip checksum verification')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        listen(args.url, count=args.count, verify=not args.no_verify)
    except (OSError, simple_websocket.ConnectionError) as e:
        logger.error(f"Failed to connect to {args.url}: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == '__main__':
    main()
