"""Tests for reading Swift package declarations from project.pbxproj."""

import pytest

from versioning.models import (
    Branch,
    Commit,
    ExactVersion,
    UnknownRequirementKind,
    UpToNextMajorVersion,
    VersionRange,
)
from xcode.project import XcodeprojPathMustBeSet, get_declared_requirements, parse_remote_packages


def document(objects):
    """Wrap object definitions in a minimal pbxproj document."""
    return (
        "// !$*UTF8*$!\n{\n\tarchiveVersion = 1;\n\tobjectVersion = 60;\n\tobjects = {\n"
        + objects
        + "\t};\n\trootObject = AA;\n}\n"
    )


class TestParseRemotePackages:
    """Test extraction of remote package references from pbxproj text."""

    def test_quoted_and_unquoted_values(self):
        text = document(
            """
		AA /* XCRemoteSwiftPackageReference "Nuke" */ = {
			isa = XCRemoteSwiftPackageReference;
			repositoryURL = "https://github.com/kean/Nuke";
			requirement = {
				kind = versionRange;
				maximumVersion = "13.0.0";
				minimumVersion = 12.1.6;
			};
		};
"""
        )
        assert list(parse_remote_packages(text)) == [
            (
                "https://github.com/kean/Nuke",
                {"kind": "versionRange", "maximumVersion": "13.0.0", "minimumVersion": "12.1.6"},
            )
        ]

    def test_ignores_other_objects(self):
        text = document(
            """
		AA = {
			isa = XCLocalSwiftPackageReference;
			relativePath = "../Local";
		};
		BB = {
			isa = XCSwiftPackageProductDependency;
			package = AA;
			productName = Local;
		};
"""
        )
        assert list(parse_remote_packages(text)) == []

    def test_reference_without_requirement_skipped(self):
        text = document(
            """
		AA = {
			isa = XCRemoteSwiftPackageReference;
			repositoryURL = "https://github.com/kean/Nuke";
		};
"""
        )
        assert list(parse_remote_packages(text)) == []

    def test_braces_and_semicolons_inside_strings(self):
        text = document(
            """
		AA = {
			isa = XCRemoteSwiftPackageReference;
			repositoryURL = "https://github.com/kean/Nuke";
			requirement = {
				branch = "feature/{x};y";
				kind = branch;
			};
		};
		BB = {
			isa = PBXFileReference;
			name = "isa = XCRemoteSwiftPackageReference;";
		};
"""
        )
        assert list(parse_remote_packages(text)) == [
            ("https://github.com/kean/Nuke", {"branch": "feature/{x};y", "kind": "branch"})
        ]

    def test_no_objects_section(self):
        assert list(parse_remote_packages("// !$*UTF8*$!\n{\n\tarchiveVersion = 1;\n}\n")) == []


class TestGetDeclaredRequirements:
    """Test the project reader end to end."""

    def test_reads_requirements_in_order(self, make_project):
        path = make_project(
            [
                ("https://github.com/kean/Nuke", {"kind": "upToNextMajorVersion", "minimumVersion": "12.1.6"}),
                ("git@github.com:Something/Else.git", {"kind": "exactVersion", "version": "1.0.0"}),
                ("https://github.com/org/Tracked.git", {"kind": "branch", "branch": "main"}),
                ("https://github.com/org/Pinned", {"kind": "revision", "revision": "abc"}),
                (
                    "ssh://github.com/org/Ranged.git",
                    {"kind": "versionRange", "minimumVersion": "1.0.0", "maximumVersion": "2.0.0"},
                ),
            ]
        )

        declared = get_declared_requirements(path)

        assert list(declared) == [
            "github.com/kean/Nuke",
            "git@github.com:Something/Else",
            "github.com/org/Tracked",
            "github.com/org/Pinned",
            "github.com/org/Ranged",
        ]
        assert declared["github.com/kean/Nuke"] == UpToNextMajorVersion("12.1.6")
        assert declared["git@github.com:Something/Else"] == ExactVersion("1.0.0")
        assert declared["github.com/org/Tracked"] == Branch("main")
        assert declared["github.com/org/Pinned"] == Commit("abc")
        assert declared["github.com/org/Ranged"] == VersionRange("1.0.0", "2.0.0")

    @pytest.mark.parametrize("path", [None, ""])
    def test_path_must_be_set(self, path):
        with pytest.raises(XcodeprojPathMustBeSet):
            get_declared_requirements(path)

    def test_unknown_kind(self, make_project):
        path = make_project([("https://github.com/kean/Nuke", {"kind": "latest"})])
        with pytest.raises(UnknownRequirementKind):
            get_declared_requirements(path)

    def test_missing_pbxproj(self, tmp_path):
        with pytest.raises(OSError):
            get_declared_requirements(str(tmp_path / "Missing.xcodeproj"))
