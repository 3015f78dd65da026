# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Strict positional parser for the process argument vector.

No options are defined. Every token beginning with ``-`` (``-x``,
``--bogus``, ``-1``) is rejected with :class:`argparse.ArgumentError`; a
lone ``-`` is a positional and a bare ``--`` ends option parsing so later
tokens are taken as positionals.
The first positional is the command name, the rest are its arguments.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

ArgumentError = argparse.ArgumentError


@dataclass(frozen=True)
class ParsedCommand:
    """Result of :func:`parse`: a command token and its positional arguments."""

    command: str | None
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


def build_parser(
    command_completer: Callable[..., Any] | None = None,
) -> argparse.ArgumentParser:
    """Return the argparse parser used by :func:`parse`.

    *command_completer* is attached to the command positional for argcomplete.
    """
    parser = argparse.ArgumentParser(
        prog="dispatchctl",
        add_help=False,
        allow_abbrev=False,
    )
    _a = parser.add_argument("command", nargs="?", default=None)
    if command_completer is not None:
        _a.completer = command_completer  # type: ignore[attr-defined]
    parser.add_argument("args", nargs="*", default=[])
    return parser


def parse(
    raw_args: Sequence[str],
    skip: int = 0,
    parser: argparse.ArgumentParser | None = None,
) -> ParsedCommand:
    """Split *raw_args* into a command name and its positional arguments.

    The first *skip* tokens are runtime-supplied leading entries (interpreter,
    script path) and are dropped before parsing.

    Raises:
        argparse.ArgumentError: if any remaining token is an option.
        ValueError: if *skip* is negative.
    """
    if skip < 0:
        raise ValueError(f"skip must be non-negative, got {skip}")
    tokens = list(raw_args)[skip:]
    parser = parser if parser is not None else build_parser()

    options = _option_tokens(tokens)
    if options:
        raise ArgumentError(None, f"unrecognized arguments: {' '.join(options)}")

    ns, extras = parser.parse_known_args(tokens)
    if extras:
        raise ArgumentError(None, f"unrecognized arguments: {' '.join(extras)}")

    return ParsedCommand(command=ns.command, args=tuple(ns.args))


def _option_tokens(tokens: list[str]) -> list[str]:
    """Return every option-marked token that precedes a bare ``--``."""
    found = []
    for token in tokens:
        if token == "--":
            break
        if token.startswith("-") and len(token) > 1:
            found.append(token)
    return found
