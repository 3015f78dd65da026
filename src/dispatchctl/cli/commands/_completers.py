# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Shared argcomplete completers for the CLI."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from ...lib.core.registry import CommandRegistry


def complete_command_names(
    registry: CommandRegistry,
) -> Callable[..., list[str]]:
    """Return an argcomplete completer offering names registered in *registry*."""

    def _complete(
        prefix: str, parsed_args: argparse.Namespace | None = None, **kwargs: object
    ) -> list[str]:
        names = registry.list_names()
        if prefix:
            names = [n for n in names if n.startswith(prefix)]
        return names

    return _complete
