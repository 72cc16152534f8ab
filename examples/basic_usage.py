#!/usr/bin/env python3
"""Programmatic dispatch example.

This demonstrates using the client directly:

* load settings from `.env` / `WORKFLOW_TRIGGER_*` variables
* retry transient failures a few times
* give up on the whole call after a deadline

Repository selection is passed as arguments; the token comes from the environment.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from workflow_trigger import CancelToken, TriggerConfig, TriggerError, configure
from workflow_trigger.logging import configure_logging


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Trigger a workflow (programmatic example).")
    parser.add_argument("--owner", required=True, help="Repository owner")
    parser.add_argument("--repo", required=True, help="Repository name")
    parser.add_argument("--event-type", default="deploy", help="Dispatch event type")
    parser.add_argument("--deadline", type=float, default=60.0, help="Overall deadline in seconds")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    config = TriggerConfig(
        owner=args.owner,
        repository=args.repo,
        event_type=args.event_type,
        max_retries=3,
        retry_delay=2.0,
    )
    configure_logging(config.log_level)

    client = configure(config)
    try:
        client.trigger_context(CancelToken.with_timeout(args.deadline))
    except TriggerError as e:
        print(f"Dispatch failed: {e}")
        return 1

    print(f"Dispatched '{config.event_type}' to {config.repository_slug}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
