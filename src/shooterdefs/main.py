"""Entry-point for linting definition content."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .data.errors import DataError, InvalidRegistryError
from .services.diagnostics import format_diagnostic
from .services.loader_service import load_registry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shooterdefs",
        description="Validate weapon and bot definitions and report diagnostics.",
    )
    parser.add_argument("--definitions", help="Directory holding weapons.json and bots.json.")
    parser.add_argument("--strict", action="store_true", help="Treat warnings as failures.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the linter and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.CRITICAL)

    try:
        registry, warnings = load_registry(args.definitions)
    except InvalidRegistryError as exc:
        for diagnostic in exc.diagnostics:
            print(format_diagnostic(diagnostic))
        print(f"FAILED: {len(exc.fatal)} fatal, {len(exc.diagnostics) - len(exc.fatal)} warning(s).")
        return 1
    except DataError as exc:
        print(f"FAILED: {exc}")
        return 1

    for diagnostic in warnings:
        print(format_diagnostic(diagnostic))
    print(
        f"OK: {len(registry.weapon_ids())} weapon(s), {len(registry.bot_ids())} bot(s), "
        f"{len(warnings)} warning(s)."
    )
    if args.strict and warnings:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
