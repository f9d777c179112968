#!/usr/bin/env python3
"""
Auth Service -- username/password authentication with opaque session tokens.

Usage:
  python main.py serve
  python main.py serve --host 0.0.0.0 --port 8080
  python main.py health-check
  python main.py health-check --url http://auth:50051 --interval 5
  python main.py health-check --iterations 1

Environment variables (see core/config.py for the full list):
  HOST, PORT                  Bind address for `serve` (default [::]:50051).
  AUTH_SERVICE_HOST_NAME      Host the health check targets (default [::1]).
                              Set to the service name under Docker Compose.
  AUTH_SERVICE_URL            Full base URL; overrides the host name + port.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from core.config import get_settings
from healthcheck.client import AuthClient, AuthClientError
from healthcheck.runner import run_health_check

logger = logging.getLogger("authservice.cli")


def _serve(args: argparse.Namespace) -> int:
    # Imported here so `health-check` does not pay for FastAPI/uvicorn startup.
    import uvicorn

    settings = get_settings()
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port
    logger.info("Listening on [%s]:%d", host, port)
    uvicorn.run("api.main:app", host=host, port=port, log_level=settings.effective_log_level.lower())
    return 0


def _health_check(args: argparse.Namespace) -> int:
    settings = get_settings()
    url = args.url or settings.auth_service_url
    interval = args.interval if args.interval is not None else settings.health_check_interval_seconds
    if interval <= 0:
        print("  [!] --interval must be greater than 0.", file=sys.stderr)
        return 2
    if args.iterations is not None and args.iterations < 1:
        print("  [!] --iterations must be at least 1.", file=sys.stderr)
        return 2

    logger.info("Health check targeting %s every %.1fs", url, interval)
    with AuthClient(url, timeout=settings.request_timeout_seconds) as client:
        try:
            results = run_health_check(client, interval=interval, iterations=args.iterations)
        except AuthClientError as e:
            logger.error("Auth service unreachable: %s", e)
            return 1
        except KeyboardInterrupt:
            return 0
    return 0 if all(r.healthy for r in results) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authservice",
        description="In-memory sign-up / sign-in / sign-out service.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    serve = sub.add_parser("serve", help="Run the auth service")
    serve.add_argument("--host", default=None, help="Bind address (default: HOST or ::)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: PORT or 50051)")
    serve.set_defaults(handler=_serve)

    check = sub.add_parser("health-check", help="Exercise a running service in a loop")
    check.add_argument("--url", default=None, metavar="URL", help="Service base URL (default: AUTH_SERVICE_URL)")
    check.add_argument(
        "--interval",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Pause between rounds (default: HEALTH_CHECK_INTERVAL_SECONDS or 3)",
    )
    check.add_argument(
        "--iterations",
        type=int,
        default=None,
        metavar="N",
        help="Stop after N rounds; exit status 1 if any round failed (default: run forever)",
    )
    check.set_defaults(handler=_health_check)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "command", None):
        parser.print_help()
        return 0

    logging.basicConfig(
        level=get_settings().effective_log_level,
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
