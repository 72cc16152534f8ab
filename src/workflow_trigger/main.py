"""CLI entrypoint: trigger a repository dispatch event."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from workflow_trigger import __version__
from workflow_trigger.client import configure
from workflow_trigger.config import TriggerConfig
from workflow_trigger.context import CancelToken
from workflow_trigger.errors import TriggerError
from workflow_trigger.logging import configure_logging

logger = logging.getLogger(__name__)

# Checked in this order; the first empty value aborts the run.
_REQUIRED: tuple[tuple[str, str], ...] = (
    ("owner", "must provide repository owner"),
    ("repository", "must provide repository name"),
    ("access_token", "must provide personal access token"),
    ("event_type", "must provide event type"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-trigger",
        description=(
            "Trigger a GitHub Actions workflow through a repository_dispatch event. "
            "Every option falls back to its WORKFLOW_TRIGGER_* environment variable."
        ),
    )
    parser.add_argument("--version", action="version", version=f"workflow-trigger {__version__}")

    parser.add_argument("--owner", default=None, help="Repository owner")
    parser.add_argument(
        "--repo",
        "--repository",
        dest="repository",
        default=None,
        help="GitHub repository name",
    )
    parser.add_argument(
        "--access-token",
        default=None,
        help="Personal access token (prefer WORKFLOW_TRIGGER_ACCESS_TOKEN)",
    )
    parser.add_argument("--event-type", default=None, help="A custom webhook event name")
    parser.add_argument("--host", default=None, help="API host (default: api.github.com)")
    parser.add_argument(
        "--max-retries",
        type=int,
        default=None,
        help="Maximum number of attempts; 1 disables retries (default: 1)",
    )
    parser.add_argument(
        "--retry-delay",
        type=float,
        default=None,
        help="Seconds to wait between attempts (default: 5)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-attempt HTTP timeout in seconds, 0 disables (default: 30)",
    )
    parser.add_argument(
        "--deadline",
        type=float,
        default=0.0,
        help="Give up on the whole call after this many seconds (0 means no deadline)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    keys = (
        "owner",
        "repository",
        "access_token",
        "event_type",
        "host",
        "max_retries",
        "retry_delay",
        "timeout",
        "log_level",
    )
    return {key: getattr(args, key) for key in keys if getattr(args, key) is not None}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = TriggerConfig(**_overrides(args))
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your flags and .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    try:
        configure_logging(config.log_level)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    for key, message in _REQUIRED:
        if not getattr(config, key).strip():
            logger.error(message)
            return 1

    client = configure(config)
    token = CancelToken.with_timeout(args.deadline) if args.deadline > 0 else CancelToken()

    logger.info(
        "Triggering workflow",
        extra={
            "repo": config.repository_slug,
            "event_type": config.event_type,
            "max_retries": client.transport.max_retries,
        },
    )
    try:
        client.trigger_context(token)
    except KeyboardInterrupt:
        token.cancel()
        logger.warning("Interrupted", extra={"repo": config.repository_slug})
        return 130
    except TriggerError as e:
        logger.error(
            "Trigger failed",
            extra={"repo": config.repository_slug, "error": str(e), "kind": type(e).__name__},
        )
        print(e, file=sys.stderr)
        return 1

    logger.info("Workflow triggered", extra={"repo": config.repository_slug})
    print(f"Dispatched '{config.event_type}' to {config.repository_slug}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
