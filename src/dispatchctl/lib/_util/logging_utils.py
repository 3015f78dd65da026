# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""

import time

LOG_FILE_NAME = "dispatchctl.log"


def _log_debug(message: str) -> None:
    """Append a simple debug line to the dispatchctl log.

    Writes timestamped lines to ``state_root()/dispatchctl.log``. Best-effort:
    IO errors are ignored so this function never raises or changes what a
    command prints.
    """
    from ..core.config import state_root

    try:
        log_path = state_root() / LOG_FILE_NAME
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        pass
