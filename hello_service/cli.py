"""hello-service CLI: run the greeting/health HTTP server."""

from __future__ import annotations

import argparse
from typing import Any

from pydantic import ValidationError

from hello_service import __version__
from hello_service.core.config import Settings, get_settings
from hello_service.core.logging import setup_logging


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the hello-service CLI."""
    parser = argparse.ArgumentParser(
        prog="hello-service",
        description="Serve a Hello World greeting and a /health endpoint.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--host", default=None, help="Bind address (default: HELLO_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=_port, default=None, help="Bind port (default: HELLO_PORT or 3000)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Answer 404 for paths other than / and /health instead of greeting",
    )
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides: dict[str, Any] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.strict:
        overrides["routing_policy"] = "strict"
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as exc:
        parser.error(f"invalid configuration:\n{exc}")

    # Importing the server loads hello_service.api.app, which configures logging
    # from the process environment; settings-driven configuration must run after it.
    from hello_service.server import serve

    settings = _apply_overrides(settings, args)
    setup_logging(log_level=settings.log_level)

    serve(settings)
