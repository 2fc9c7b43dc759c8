#!/usr/bin/env python
"""
Start the hotel booking backend under uvicorn.

Configuration comes from the environment (or ``backend/.env``); at minimum
set ``JWT_SECRET`` and point ``MONGODB_URI`` at a running MongoDB:

    JWT_SECRET=change-me MONGODB_URI=mongodb://localhost:27017/hotel_booking \\
        python run_api.py --port 5000

Flags override the matching settings for this run only.
"""

import argparse
import sys
from typing import Optional, Sequence

import uvicorn

from shared.config import Settings, get_settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the hotel booking REST API")
    parser.add_argument("--host", help="interface to bind (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="port to listen on (default: PORT or 5000)")
    parser.add_argument("--reload", action="store_true", help="restart on code changes")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    return parser.parse_args(argv)


def server_options(settings: Settings, args: argparse.Namespace) -> dict:
    """Keyword arguments for ``uvicorn.run``; flags win over settings."""
    debug = args.debug or settings.debug
    return {
        "host": args.host or settings.host,
        "port": args.port or settings.port,
        "reload": args.reload or settings.reload,
        "log_level": "debug" if debug else "info",
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()

    # The app refuses to start without a signing secret; say so before uvicorn boots
    if not settings.jwt_secret:
        print("JWT_SECRET is not set; refusing to start.", file=sys.stderr)
        return 1

    uvicorn.run("api:app", **server_options(settings, args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
