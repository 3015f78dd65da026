# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""The ``hw`` command."""

from __future__ import annotations

from collections.abc import Sequence

from ...lib.core.registry import CommandRegistry


def register(registry: CommandRegistry) -> None:
    """Register the ``hw`` command."""
    registry.register("hw", _cmd_hello_world)


def _cmd_hello_world(args: Sequence[str]) -> None:
    print("Hello world")
