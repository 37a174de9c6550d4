"""taiz CLI entrypoint backed by the taiz command registry."""

from __future__ import annotations

import argparse
import inspect
import sys
from pathlib import Path
from typing import Iterable, Sequence

import colorama

from taiz_core import console
from taiz_core.app import TaizApp
from taiz_core.errors import TaizError
from taiz_core.registry import AmbiguousFeatureError, FeatureNotFoundError
from taiz_core.registry.entry import TaizRegistryEntry

CLI_VERSION = "1.0.0"


def main(
    argv: Sequence[str] | None = None,
    *,
    start_dir: Path | str | None = None,
) -> int:
    """Resolve and run a taiz command."""

    tokens = list(argv) if argv is not None else list(sys.argv[1:])
    colorama.just_fix_windows_console()
    app = TaizApp(start_dir=start_dir)
    app.configure_logging()
    app.bootstrap()
    entries = app.feature_registry.entries()

    if not tokens or tokens[0] in ("-h", "--help"):
        return _print_overview(entries)

    if tokens[0] in ("-V", "--version"):
        print(f"taiz v{CLI_VERSION}")
        return 0

    try:
        entry = app.feature_registry.resolve(tokens[0])
    except FeatureNotFoundError:
        console.error("cli", f"Invalid command: {' '.join(tokens)}")
        console.warn("cli", "See --help for a list of available commands.")
        return 1
    except AmbiguousFeatureError as exc:
        candidates = ", ".join(exc.candidates)
        console.error("cli", f"Command is ambiguous ({candidates}); use group:name to disambiguate.")
        return 1

    parser = argparse.ArgumentParser(
        prog=f"taiz {entry.name}",
        description=_command_description(entry),
    )
    entry.target.configure(parser)
    if start_dir is not None:
        parser.set_defaults(project_dir=str(start_dir))

    try:
        parsed_args = parser.parse_args(tokens[1:])
    except SystemExit as exc:
        return exc.code or 0

    command = entry.target()
    try:
        result = command.run(parsed_args)
    except TaizError as exc:
        console.error(entry.name, str(exc))
        for hint in exc.hints:
            console.note(entry.name, hint)
        return 1

    if entry.name == "help":
        return _print_overview(entries, include_long=getattr(command, "long_format", False))

    return to_int(result)


def _print_overview(entries: Iterable[TaizRegistryEntry], *, include_long: bool = False) -> int:
    """Show the global help listing."""

    print(f"taiz v{CLI_VERSION} - a polyglot package manager for developers\n")
    print("Usage: taiz <command> [args...]\n")
    print("Commands:")
    for entry in entries:
        display = entry.name
        if entry.aliases:
            display += f" ({', '.join(entry.aliases)})"
        description = _command_description(entry).strip()
        lines = description.splitlines()
        short = lines[0] if lines else ""
        print(f"  {display:<20} {short}")
        if include_long and len(lines) > 1:
            for extra in lines[1:]:
                print(f"    {extra}")
    print("\nUse taiz <command> --help for command options.")
    return 0


def _command_description(entry: TaizRegistryEntry) -> str:
    doc = inspect.getdoc(entry.target) or ""
    return doc.strip()


def to_int(result: int | None) -> int:
    return 0 if result is None else result
