"""CLI interface for spawning a Jamsocket backend and fetching its response."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

from jamsocket_launcher.config import LauncherConfig, get_launcher_config
from jamsocket_launcher.errors import JamsocketError
from jamsocket_launcher.launcher import run_launcher

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s", stream=sys.stderr)
    else:
        root.setLevel(level)


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a number, got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value!r}")
    return parsed


def _apply_overrides(config: LauncherConfig, args: argparse.Namespace) -> LauncherConfig:
    overrides = {
        "tag": args.tag,
        "poll_interval": args.poll_interval,
        "ready_timeout": args.ready_timeout,
        "request_timeout": args.request_timeout,
    }
    return dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Spawn a Jamsocket backend, wait until it is ready and print its response. "
            "Requires JAMSOCKET_TOKEN, JAMSOCKET_ACCOUNT and JAMSOCKET_SERVICE."
        )
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--env-file", type=Path, default=None, help="Path to a .env file (default: ./.env if present)")
    parser.add_argument("--tag", type=str, default=None, help="Image tag to spawn (default: latest)")
    parser.add_argument("--poll-interval", type=_positive_float, default=None, help="Seconds between status checks (default: 1)")
    parser.add_argument("--ready-timeout", type=_positive_float, default=None, help="Give up if not ready after this many seconds (default: wait forever)")
    parser.add_argument("--request-timeout", type=_positive_float, default=None, help="Per-request timeout in seconds (default: none)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _apply_overrides(get_launcher_config(args.env_file), args)
        body = run_launcher(config)
    except JamsocketError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    print(body)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
