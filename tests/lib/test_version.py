# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Tests for version and PEP 610 revision detection."""

import json
import unittest
import unittest.mock
from importlib import metadata

from dispatchctl.lib.core import version as version_mod


class _FakeDist:
    def __init__(self, direct_url: str | None) -> None:
        self._direct_url = direct_url

    def read_text(self, name: str) -> str | None:
        return self._direct_url if name == "direct_url.json" else None


def _patch_dist(direct_url: str | None):
    return unittest.mock.patch.object(
        version_mod.metadata, "distribution", return_value=_FakeDist(direct_url)
    )


class Pep610RevisionTests(unittest.TestCase):
    def test_requested_revision_preferred(self) -> None:
        payload = json.dumps(
            {"vcs_info": {"vcs": "git", "requested_revision": "main", "commit_id": "abc123"}}
        )
        with _patch_dist(payload):
            self.assertEqual(version_mod._get_pep610_revision(), "main")

    def test_commit_id_fallback(self) -> None:
        payload = json.dumps({"vcs_info": {"vcs": "git", "requested_revision": "  ", "commit_id": "abc123"}})
        with _patch_dist(payload):
            self.assertEqual(version_mod._get_pep610_revision(), "abc123")

    def test_local_install_has_no_revision(self) -> None:
        with _patch_dist(json.dumps({"url": "file:///src", "dir_info": {"editable": True}})):
            self.assertIsNone(version_mod._get_pep610_revision())

    def test_invalid_json(self) -> None:
        with _patch_dist("{not json"):
            self.assertIsNone(version_mod._get_pep610_revision())

    def test_missing_distribution(self) -> None:
        with unittest.mock.patch.object(
            version_mod.metadata,
            "distribution",
            side_effect=metadata.PackageNotFoundError("dispatchctl"),
        ):
            self.assertIsNone(version_mod._get_pep610_revision())


class VersionInfoTests(unittest.TestCase):
    def test_get_version_info_uses_package_version(self) -> None:
        with (
            unittest.mock.patch("dispatchctl.__version__", "9.9.9"),
            unittest.mock.patch.object(version_mod, "_get_pep610_revision", return_value=None),
        ):
            self.assertEqual(version_mod.get_version_info(), ("9.9.9", None))

    def test_format_version_string(self) -> None:
        self.assertEqual(version_mod.format_version_string("0.1.0", None), "0.1.0")
        self.assertEqual(version_mod.format_version_string("0.1.0", "main"), "0.1.0 [main]")
