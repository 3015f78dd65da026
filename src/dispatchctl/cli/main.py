#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import sys
from collections.abc import Sequence

import argcomplete

from ..lib.core.config import get_argv_skip, get_default_command
from ..lib.core.dispatcher import Dispatcher
from ..lib.core.parser import ArgumentError, build_parser, parse
from ..lib.core.registry import CommandRegistry
from .commands import hello, info
from .commands._completers import complete_command_names


def build_registry() -> CommandRegistry:
    """Return a fresh registry holding every built-in command."""
    registry = CommandRegistry()
    hello.register(registry)
    info.register(registry)
    return registry


def main(argv: Sequence[str] | None = None, skip: int | None = None) -> None:
    """Run one command from *argv* (default ``sys.argv``).

    *skip* is the number of leading runtime tokens before the command name;
    it defaults to ``dispatch.argv_skip`` from the global config (1, the
    script path).
    """
    if argv is None:
        argv = sys.argv
    if skip is None:
        skip = get_argv_skip()

    registry = build_registry()
    parser = build_parser(complete_command_names(registry))

    # Bash completion: eval "$(register-python-argcomplete dispatchctl)"
    argcomplete.autocomplete(parser)

    try:
        parsed = parse(argv, skip=skip, parser=parser)
    except ArgumentError as e:
        raise SystemExit(f"dispatchctl: error: {e}") from e

    Dispatcher(registry, default_command=get_default_command()).run(parsed)


if __name__ == "__main__":
    main()
