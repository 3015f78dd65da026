# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Resolve a parsed command to its handler and run it.

Unknown commands are not an error: the dispatcher prints the list of
registered command names instead. Exceptions raised by a handler are not
caught here.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .._util.ansi import supports_color, violet
from .._util.logging_utils import _log_debug
from .config import DEFAULT_COMMAND
from .parser import ParsedCommand
from .registry import CommandRegistry

LISTING_HEADER = "Available commands:"


def print_available_commands(registry: CommandRegistry, out: TextIO | None = None) -> None:
    """Print the header and one ``- name`` line per registered command."""
    out = out if out is not None else sys.stdout
    color_enabled = supports_color(out)
    print(LISTING_HEADER, file=out)
    for name in registry.list_names():
        print(f"- {violet(name, color_enabled)}", file=out)


class Dispatcher:
    """Single-shot dispatch of one :class:`ParsedCommand` against a registry."""

    def __init__(
        self,
        registry: CommandRegistry,
        default_command: str = DEFAULT_COMMAND,
        out: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self.default_command = default_command
        self._out = out

    def run(self, parsed: ParsedCommand) -> None:
        if parsed.command is None:
            self._run_default()
            return

        handler = self.registry.lookup(parsed.command)
        if handler is None:
            _log_debug(f"dispatch: unknown command {parsed.command!r}")
            print_available_commands(self.registry, self._out)
            return

        _log_debug(f"dispatch: {parsed.command} args={parsed.args!r}")
        handler(list(parsed.args))

    def _run_default(self) -> None:
        handler = self.registry.lookup(self.default_command)
        if handler is None:
            # No default registered: the listing always exists.
            _log_debug(f"dispatch: default command {self.default_command!r} missing")
            print_available_commands(self.registry, self._out)
            return
        _log_debug(f"dispatch: {self.default_command} (default)")
        handler([])
