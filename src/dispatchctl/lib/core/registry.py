# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Command registry: maps command names to handler functions.

A registry is constructed explicitly by the entry point and passed to
whoever needs it; there is no module-level instance, so tests can build as
many independent registries as they like.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

Handler = Callable[[Sequence[str]], None]


class CommandRegistry:
    """Ordered mapping of command name to handler.

    Registration order is preserved for :meth:`list_names`. Registering a
    name twice silently replaces the handler; the name keeps its original
    position.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Insert or overwrite the handler for *name*."""
        if not isinstance(name, str) or not name:
            raise ValueError(f"Command name must be a non-empty string, got {name!r}")
        self._handlers[name] = handler

    def command(self, name: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`; returns the function unchanged."""

        def decorator(func: Handler) -> Handler:
            self.register(name, func)
            return func

        return decorator

    def lookup(self, name: str) -> Handler | None:
        """Return the handler for *name*, or None if it is not registered."""
        return self._handlers.get(name)

    def list_names(self) -> list[str]:
        """Return all registered command names in registration order."""
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
