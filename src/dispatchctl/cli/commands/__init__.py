# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Built-in CLI command modules.

Each module exposes ``register(registry)`` to add its handlers to a
:class:`~dispatchctl.lib.core.registry.CommandRegistry`.  Handlers take the
list of positional arguments that followed the command name.
"""
