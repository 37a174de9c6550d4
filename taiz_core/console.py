"""Prefixed, coloured terminal output for taiz commands."""

from __future__ import annotations

import sys

from colorama import Fore, Style


def _emit(color: str, scope: str, message: str, *, stream=None) -> None:
    target = stream or sys.stdout
    print(f"{color}[taiz:{scope}] {message}{Style.RESET_ALL}", file=target, flush=True)


def info(scope: str, message: str) -> None:
    _emit(Fore.CYAN, scope, message)


def note(scope: str, message: str) -> None:
    _emit(Style.DIM, scope, message)


def success(scope: str, message: str) -> None:
    _emit(Fore.GREEN, scope, message)


def warn(scope: str, message: str) -> None:
    _emit(Fore.YELLOW, scope, message)


def error(scope: str, message: str) -> None:
    _emit(Fore.RED, scope, f"error: {message}", stream=sys.stderr)
