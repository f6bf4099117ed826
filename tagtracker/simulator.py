#!/usr/bin/env python3
"""
Field simulator: posts random tag events to the API server.
"""
import argparse
import random
import sys
import time
from typing import List, Optional, Tuple
import requests
from .client import ApiClient, ApiError
from .config import API_BASE, EVENT_TYPES
from .log import debug_log, log, log_error, set_debug
from .models import TagEvent

TAG_IDS = ("NFC-101", "NFC-102", "NFC-103", "device-01", "device-02")
SOURCES = ("gate-1", "gate-2", "kiosk-3", "dock-4")


def generate_event(rng: random.Random) -> Tuple[str, str, str]:
    """Pick a (tag_id, source, type) triple as if read in the field."""
    return rng.choice(TAG_IDS), rng.choice(SOURCES), rng.choice(EVENT_TYPES)


def run(client: ApiClient, count: int, interval: float,
        rng: Optional[random.Random] = None) -> List[TagEvent]:
    """
    Post `count` simulated events, pausing `interval` seconds between them.

    Stops at the first transport or server error; nothing is retried.

    Returns:
        Events accepted by the server
    """
    rng = rng or random.Random()
    sent: List[TagEvent] = []

    for i in range(count):
        tag_id, source, type_ = generate_event(rng)
        try:
            event = client.create_event(tag_id, source, type_)
        except (requests.RequestException, ApiError) as e:
            log_error(f"Could not save event: {e}")
            break

        sent.append(event)
        log(f"#{event.id} {event.type:<8} tag={event.tag_id} source={event.source}")

        if i < count - 1 and interval > 0:
            time.sleep(interval)

    debug_log(f"Simulator finished: {len(sent)}/{count} events accepted")
    return sent


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate IoT/NFC tag events")
    parser.add_argument("--count", type=int, default=10, help="number of events to send")
    parser.add_argument("--interval", type=float, default=1.0, help="seconds between events")
    parser.add_argument("--api", default=API_BASE, help="API base URL")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--debug", action="store_true", help="enable debug output")
    args = parser.parse_args(argv)

    set_debug(args.debug)
    client = ApiClient(args.api)
    try:
        sent = run(client, args.count, args.interval, random.Random(args.seed))
    except KeyboardInterrupt:
        log("\nStopped.")
        return 130
    return 0 if len(sent) == args.count else 1


if __name__ == "__main__":
    sys.exit(main())
