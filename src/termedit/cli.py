"""Command line entry point."""

from __future__ import annotations

import argparse
import os
from dataclasses import replace
from typing import Optional, Sequence

from termedit.config import ENV_PREFIX, EditorConfig
from termedit.runtime import telemetry

UI_CHOICES = ("terminal", "textual")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="termedit", description="A small terminal text editor.")
    parser.add_argument("path", nargs="?", help="File to open (created on first save)")
    parser.add_argument(
        "--ui",
        choices=UI_CHOICES,
        default=os.environ.get(f"{ENV_PREFIX}UI", "terminal"),
        help="Front end to run (default: terminal)",
    )
    parser.add_argument(
        "--coalesce-ms",
        type=int,
        default=None,
        help="Edits closer together than this many ms undo as one action",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "testing"),
        default=None,
        help="telelog preset to use instead of the TERMEDIT_LOG_* settings",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    config = EditorConfig.from_env()
    if args.coalesce_ms is not None:
        config = replace(config, coalesce_window_ms=max(0, args.coalesce_ms))

    if args.ui == "textual":
        from termedit.adapters.textual.app import run_textual

        return run_textual(args.path, config)

    from termedit.adapters.terminal import run_terminal

    return run_terminal(args.path, config)


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
