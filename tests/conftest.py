"""Shared fixtures: on-disk Xcode project trees."""

import json
import os

import pytest

PBXPROJ_HEADER = """// !$*UTF8*$!
{
	archiveVersion = 1;
	classes = {
	};
	objectVersion = 60;
	objects = {

/* Begin PBXProject section */
		0A0000000000000000000001 /* Project object */ = {
			isa = PBXProject;
			packageReferences = (
			);
		};
/* End PBXProject section */

/* Begin XCRemoteSwiftPackageReference section */
"""

PBXPROJ_FOOTER = """/* End XCRemoteSwiftPackageReference section */
	};
	rootObject = 0A0000000000000000000001 /* Project object */;
}
"""


def pbxproj_reference(index, url, requirement):
    """Render one XCRemoteSwiftPackageReference object."""
    lines = [
        f'\t\t0B00000000000000000000{index:02d} /* XCRemoteSwiftPackageReference "pkg{index}" */ = {{',
        "\t\t\tisa = XCRemoteSwiftPackageReference;",
        f'\t\t\trepositoryURL = "{url}";',
        "\t\t\trequirement = {",
    ]
    for key, value in requirement.items():
        lines.append(f"\t\t\t\t{key} = {value};")
    lines.extend(["\t\t\t};", "\t\t};", ""])
    return "\n".join(lines)


def v2_resolved(pins):
    """Package.resolved v2 payload from (url, state) pairs."""
    return {
        "pins": [
            {"identity": url.rstrip("/").split("/")[-1].lower(), "kind": "remoteSourceControl", "location": url, "state": state}
            for url, state in pins
        ],
        "version": 2,
    }


def v1_resolved(pins):
    """Package.resolved v1 payload from (url, state) pairs."""
    return {
        "object": {
            "pins": [
                {"package": url.rstrip("/").split("/")[-1], "repositoryURL": url, "state": state}
                for url, state in pins
            ]
        },
        "version": 1,
    }


@pytest.fixture
def make_project(tmp_path):
    """Build an .xcodeproj with declared packages and optional resolved files.

    Args (to the returned factory):
        packages: list of (repositoryURL, requirement dict).
        project_resolved: payload for <proj>/project.xcworkspace/.../Package.resolved, or None.
        workspace_resolved: payload for <name>.xcworkspace/.../Package.resolved, or None.
    """

    def _make(packages, project_resolved=None, workspace_resolved=None, name="App"):
        project = tmp_path / f"{name}.xcodeproj"
        project.mkdir()
        body = "".join(pbxproj_reference(i, url, req) for i, (url, req) in enumerate(packages))
        (project / "project.pbxproj").write_text(PBXPROJ_HEADER + body + PBXPROJ_FOOTER, encoding="utf-8")

        if project_resolved is not None:
            swiftpm = project / "project.xcworkspace" / "xcshareddata" / "swiftpm"
            swiftpm.mkdir(parents=True)
            (swiftpm / "Package.resolved").write_text(json.dumps(project_resolved), encoding="utf-8")
        if workspace_resolved is not None:
            swiftpm = tmp_path / f"{name}.xcworkspace" / "xcshareddata" / "swiftpm"
            swiftpm.mkdir(parents=True)
            (swiftpm / "Package.resolved").write_text(json.dumps(workspace_resolved), encoding="utf-8")
        return os.fspath(project)

    return _make
