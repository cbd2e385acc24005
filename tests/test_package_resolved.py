"""Tests for Package.resolved discovery and parsing."""

import os

import pytest

from conftest import v1_resolved, v2_resolved
from xcode.package_resolved import (
    CouldNotFindResolvedFile,
    find_package_resolved_files,
    get_resolved_values,
    parse_package_resolved,
)

NUKE = ("https://github.com/kean/Nuke", {"revision": "a002b7fd786f2df2ed4333fe73a9727499fd9d97", "version": "12.1.6"})
ELSE = ("https://github.com/Something/Else.git", {"revision": "f3b7d4b1e0e7c1f3b9a2", "version": "12.1.6"})
TRACKED = ("https://github.com/org/Tracked", {"branch": "main", "revision": "0123abcd"})


class TestParsePackageResolved:
    """Test the v1 and v2 layouts."""

    def test_v2(self):
        assert parse_package_resolved(v2_resolved([NUKE, TRACKED])) == {
            "github.com/kean/Nuke": "12.1.6",
            "github.com/org/Tracked": "0123abcd",
        }

    def test_v1(self):
        assert parse_package_resolved(v1_resolved([ELSE])) == {"github.com/Something/Else": "12.1.6"}

    def test_incomplete_pins_skipped(self):
        data = {"pins": [{"identity": "x", "state": {"version": "1.0.0"}}, {"location": "https://a/b", "state": {}}]}
        assert parse_package_resolved(data) == {}

    def test_empty(self):
        assert parse_package_resolved({}) == {}


class TestGetResolvedValues:
    """Test discovery of Package.resolved next to the project."""

    def test_project_location(self, make_project):
        path = make_project([], project_resolved=v2_resolved([NUKE]))
        assert get_resolved_values(path) == {"github.com/kean/Nuke": "12.1.6"}

    def test_workspace_location(self, make_project):
        path = make_project([], workspace_resolved=v1_resolved([ELSE]))
        assert get_resolved_values(path) == {"github.com/Something/Else": "12.1.6"}

    def test_both_locations_merged(self, make_project):
        path = make_project(
            [],
            project_resolved=v2_resolved([NUKE]),
            workspace_resolved=v2_resolved([ELSE, (NUKE[0], {"version": "12.0.0"})]),
        )
        files = find_package_resolved_files(path)
        assert [os.path.basename(os.path.dirname(os.path.dirname(os.path.dirname(f)))) for f in files] == [
            "App.xcworkspace",
            "project.xcworkspace",
        ]
        # Project-level file is read last and wins.
        assert get_resolved_values(path) == {
            "github.com/Something/Else": "12.1.6",
            "github.com/kean/Nuke": "12.1.6",
        }

    def test_none_found(self, make_project):
        path = make_project([])
        with pytest.raises(CouldNotFindResolvedFile):
            get_resolved_values(path)

    def test_none_found_is_file_not_found(self, make_project):
        path = make_project([])
        with pytest.raises(FileNotFoundError):
            get_resolved_values(path)
