"""
CLI entrypoint for bunny-app.

Commands:
    serve    run the web service under uvicorn
    breed    print a random rabbit breed
    greet    print the location greeting for a set of headers
    headers  print the Bunny headers that survive the allow-list

Pretty output goes to stdout via oprint().
Diagnostics go to stderr via logging.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Sequence

from pydantic import ValidationError

from bunny_app.api.contracts.ui_labels import UiLabels
from bunny_app.api.settings import HOST_ENV, LOG_LEVEL_ENV, PORT_ENV, get_settings
from bunny_app.cli.logging_setup import setup_cli_logging
from bunny_app.shared.cdn_headers import collect_known_headers, greeting_from_location
from bunny_app.shared.rabbit_breeds import pick_random_breed

logger = logging.getLogger("bunny_app.cli")


def oprint(*args, **kwargs) -> None:
    """
    User-facing output printer (stdout).
    """
    try:
        print(*args, file=sys.stdout, flush=True, **kwargs)
    except BrokenPipeError:
        raise SystemExit(0)


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw!r}")
    return name.strip(), value


def _headers_from_args(pairs: Sequence[tuple[str, str]] | None) -> dict[str, str]:
    return {name: value for name, value in (pairs or [])}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bunny-app", description="Bunny Magic Containers demo")
    parser.add_argument("--trace", action="store_true", help="Enable DEBUG logs on stderr")
    parser.add_argument("--quiet", action="store_true", help="Only ERROR logs on stderr")

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the web service")
    serve.add_argument("--host", default=None, help="Defaults to $BUNNY_APP_HOST or 0.0.0.0")
    serve.add_argument("--port", type=int, default=None, help="Defaults to $PORT or 8080")
    serve.add_argument("--log-level", default=None, help="Defaults to $BUNNY_APP_LOG_LEVEL or INFO")

    sub.add_parser("breed", help="Print a random rabbit breed")

    header_help = "Request header as NAME=VALUE (repeatable)"

    greet = sub.add_parser("greet", help="Print the greeting for the given headers")
    greet.add_argument("--header", dest="headers", action="append", type=_parse_header, help=header_help)

    headers = sub.add_parser("headers", help="Print the allow-listed Bunny headers")
    headers.add_argument("--header", dest="headers", action="append", type=_parse_header, help=header_help)
    headers.add_argument("--output", choices=["pretty", "json"], default="pretty")

    return parser


def _export_serve_options(args: argparse.Namespace) -> None:
    """
    Push CLI options into the environment.

    uvicorn imports bunny_app.api.main:app, and create_app() reads its
    settings from the environment, so this is how the options reach the app.
    """
    if args.host is not None:
        os.environ[HOST_ENV] = args.host
    if args.port is not None:
        os.environ[PORT_ENV] = str(args.port)
    if args.log_level is not None:
        os.environ[LOG_LEVEL_ENV] = args.log_level.upper()


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    _export_serve_options(args)
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("invalid server settings: %s", e)
        return 2

    logger.info("starting server on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "bunny_app.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


def _print_headers(args: argparse.Namespace) -> int:
    entries = collect_known_headers(_headers_from_args(args.headers))

    if args.output == "json":
        oprint(json.dumps([e.to_dict() for e in entries]))
        return 0

    if not entries:
        oprint(UiLabels().no_headers)
        return 0

    for e in entries:
        oprint(f"{e.name}: {e.value}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_cli_logging(trace=args.trace, quiet=args.quiet)

    if args.command == "serve":
        return _serve(args)

    if args.command == "breed":
        oprint(pick_random_breed())
        return 0

    if args.command == "greet":
        oprint(greeting_from_location(_headers_from_args(args.headers)))
        return 0

    return _print_headers(args)


if __name__ == "__main__":
    raise SystemExit(main())
