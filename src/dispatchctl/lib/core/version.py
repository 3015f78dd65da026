# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version and revision information for dispatchctl.

Single source of truth for the ``version`` built-in command.
"""

import json
from importlib import metadata
from typing import Any


def get_version_info() -> tuple[str, str | None]:
    """Get version and VCS revision information.

    VERSION DETECTION:
      - Primary: ``dispatchctl.__version__`` (installed package metadata,
        or pyproject.toml in a source checkout)
      - Fallback: ``"unknown"``

    REVISION DETECTION:
      When installed from a VCS URL (``pip install git+https://...``), pip
      records PEP 610 metadata in direct_url.json. The requested revision
      (or commit id) is returned for display. Releases and local installs
      return None.

    Returns:
        tuple: (version_string, revision) where revision is None when not
               installed from a VCS URL
    """
    try:
        from dispatchctl import __version__

        version = __version__
    except (ImportError, AttributeError):
        version = "unknown"

    return version, _get_pep610_revision()


def _get_pep610_revision(dist_name: str = "dispatchctl") -> str | None:
    """Return VCS revision from PEP 610 metadata, if available."""
    try:
        dist = metadata.distribution(dist_name)
        direct_url = dist.read_text("direct_url.json")
    except (metadata.PackageNotFoundError, UnicodeDecodeError, OSError):
        return None

    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info") if isinstance(data, dict) else None
    if not isinstance(vcs_info, dict):
        return None

    def validate_and_strip(value: Any) -> str | None:
        """Validate that value is a non-empty string after stripping whitespace."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped:
                return stripped
        return None

    # Try requested_revision first, then commit_id
    if result := validate_and_strip(vcs_info.get("requested_revision")):
        return result

    return validate_and_strip(vcs_info.get("commit_id"))


def format_version_string(version: str, revision: str | None) -> str:
    """Format version and revision into a display string.

    Args:
        version: The version string (e.g., "0.1.0")
        revision: The VCS revision or None

    Returns:
        Formatted string like "0.1.0" or "0.1.0 [main]"
    """
    if revision:
        return f"{version} [{revision}]"
    return version
