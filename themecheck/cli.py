"""Command-line entry point for themecheck."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from . import __version__
from .config import ConfigError, load_config
from .console import Console
from .hooks import HookError, install_pre_push_hook
from .result import ScanResult
from .runner import CheckRunner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themecheck",
        description="Pre-push checks for theme components: style rules, metadata and linters.",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Let stylelint, prettier and eslint rewrite files instead of only reporting.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Theme root directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Path to a YAML settings file (defaults to <root>/.themecheck.yml).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each external tool before giving up.",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the structured JSON report.",
    )
    parser.add_argument(
        "--install-hook",
        action="store_true",
        help="Install a git pre-push hook that runs these checks, then exit.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="With --install-hook, replace an existing pre-push hook.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def write_output(result: ScanResult, output_path: str | None) -> None:
    if not output_path:
        return
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
    print(f"Report written to {output_path}")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    console = Console()
    root = Path(args.root)

    if args.install_hook:
        try:
            hook_path = install_pre_push_hook(root, force=args.force)
        except (HookError, OSError) as exc:
            console.error(str(exc))
            return 1
        console.success(f"Installed pre-push hook at {hook_path}")
        return 0

    try:
        config = load_config(
            root,
            fix=args.fix,
            config_path=Path(args.config_path) if args.config_path else None,
            overrides={"tool_timeout": args.timeout},
        )
    except ConfigError as exc:
        console.error(str(exc))
        return 1

    result = CheckRunner(console=console).run(config)
    write_output(result, args.output_path)
    return result.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
