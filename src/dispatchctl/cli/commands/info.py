# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Informational commands: command listing and version."""

from __future__ import annotations

from collections.abc import Sequence

from ...lib.core.dispatcher import print_available_commands
from ...lib.core.registry import CommandRegistry
from ...lib.core.version import format_version_string, get_version_info


def register(registry: CommandRegistry) -> None:
    """Register ``help`` and ``version``.

    ``help`` lists whatever is in *registry* at the time it runs, so commands
    registered after it still show up.
    """

    def _cmd_help(args: Sequence[str]) -> None:
        print_available_commands(registry)

    registry.register("help", _cmd_help)
    registry.register("version", _cmd_version)


def _cmd_version(args: Sequence[str]) -> None:
    version, revision = get_version_info()
    print(f"dispatchctl {format_version_string(version, revision)}")
