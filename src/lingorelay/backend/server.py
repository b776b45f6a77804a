"""Development server entrypoint for the relay."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Sequence

from lingorelay.backend.app import create_app

DEFAULT_PORT = 3000

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str | None) -> None:
    level = logging.getLevelName((level_name or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _default_port() -> int:
    raw = os.getenv("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid value for PORT: %s", raw)
        return DEFAULT_PORT


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the LingoRelay development server.")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to bind")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on")
    parser.add_argument("--debug", action="store_true", help="Enable the Flask debugger")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Configure logging and serve the application until interrupted."""

    args = _build_argument_parser().parse_args(argv)
    _configure_logging(os.getenv("LINGORELAY_LOG_LEVEL"))

    port = args.port or _default_port()
    app = create_app()
    logger.info("LingoRelay listening on http://%s:%d", args.host, port)
    app.run(host=args.host, port=port, debug=args.debug)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
