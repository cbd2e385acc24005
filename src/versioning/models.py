"""Data models for requirement evaluation and update reporting."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Union

from repository.url_normalize import normalize_repo_url


class InvalidVersionFormat(ValueError):
    """Raised when text is not a MAJOR.MINOR.PATCH[-prerelease][+build] version."""


class UnknownRequirementKind(ValueError):
    """Raised when a declared requirement uses a kind this tool does not know."""


class RequirementKind(Enum):
    """Enum for the requirement kinds a package reference may declare."""
    EXACT = "exactVersion"
    UP_TO_NEXT_MAJOR = "upToNextMajorVersion"
    UP_TO_NEXT_MINOR = "upToNextMinorVersion"
    RANGE = "versionRange"
    BRANCH = "branch"
    COMMIT = "revision"


# Alternate spellings seen in older project files.
_KIND_ALIASES = {
    "range": RequirementKind.RANGE,
    "commit": RequirementKind.COMMIT,
}


@dataclass(frozen=True)
class ExactVersion:
    """Pinned to exactly one version."""
    version: str
    kind = RequirementKind.EXACT


@dataclass(frozen=True)
class UpToNextMajorVersion:
    """Any version from minimum_version up to the next major."""
    minimum_version: str
    kind = RequirementKind.UP_TO_NEXT_MAJOR


@dataclass(frozen=True)
class UpToNextMinorVersion:
    """Any version from minimum_version up to the next minor."""
    minimum_version: str
    kind = RequirementKind.UP_TO_NEXT_MINOR


@dataclass(frozen=True)
class VersionRange:
    """Half-open range [minimum_version, maximum_version)."""
    minimum_version: str
    maximum_version: str
    kind = RequirementKind.RANGE


@dataclass(frozen=True)
class Branch:
    """Tracks the head of a branch."""
    name: str
    kind = RequirementKind.BRANCH


@dataclass(frozen=True)
class Commit:
    """Pinned to a revision; never checked for updates."""
    revision: Optional[str] = None
    kind = RequirementKind.COMMIT


Requirement = Union[ExactVersion, UpToNextMajorVersion, UpToNextMinorVersion, VersionRange, Branch, Commit]


def requirement_from_dict(raw: Mapping[str, Any]) -> Requirement:
    """Build a Requirement from an Xcode-style requirement mapping.

    Args:
        raw: Mapping with a "kind" key plus the kind-specific fields
            (version, minimumVersion, maximumVersion, branch, revision).

    Returns:
        The matching Requirement variant.

    Raises:
        UnknownRequirementKind: If "kind" is missing or not recognized.
    """
    kind_text = str(raw.get("kind", ""))
    kind = _KIND_ALIASES.get(kind_text)
    if kind is None:
        try:
            kind = RequirementKind(kind_text)
        except ValueError as exc:
            raise UnknownRequirementKind(f"Unknown requirement kind: {kind_text!r}") from exc

    if kind is RequirementKind.EXACT:
        return ExactVersion(version=str(raw.get("version", "")))
    if kind is RequirementKind.UP_TO_NEXT_MAJOR:
        return UpToNextMajorVersion(minimum_version=str(raw.get("minimumVersion", "")))
    if kind is RequirementKind.UP_TO_NEXT_MINOR:
        return UpToNextMinorVersion(minimum_version=str(raw.get("minimumVersion", "")))
    if kind is RequirementKind.RANGE:
        return VersionRange(
            minimum_version=str(raw.get("minimumVersion", "")),
            maximum_version=str(raw.get("maximumVersion", "")),
        )
    if kind is RequirementKind.BRANCH:
        return Branch(name=str(raw.get("branch", "")))
    return Commit(revision=raw.get("revision"))


@dataclass(frozen=True)
class PolicyConfig:
    """Reporting policy applied to one evaluation batch."""
    check_when_exact: bool = False
    report_above_maximum: bool = False
    report_pre_releases: bool = False
    ignored_repositories: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def create(
        cls,
        check_when_exact: bool = False,
        report_above_maximum: bool = False,
        report_pre_releases: bool = False,
        ignore_repos: Optional[Iterable[str]] = None,
    ) -> "PolicyConfig":
        """Build a config, normalizing the raw ignore list."""
        return cls(
            check_when_exact=bool(check_when_exact),
            report_above_maximum=bool(report_above_maximum),
            report_pre_releases=bool(report_pre_releases),
            ignored_repositories=frozenset(normalize_repo_url(url) for url in (ignore_repos or ())),
        )


@dataclass(frozen=True)
class ExactUpdate:
    """Newer version exists for an exactly pinned dependency."""
    name: str
    candidate: str
    pinned: str


@dataclass(frozen=True)
class BoundedUpdate:
    """Newer version exists within the up-to-next-major/minor bound."""
    name: str
    candidate: str


@dataclass(frozen=True)
class AboveBoundNotice:
    """Newest version lies beyond the configured bound.

    bound is "major" or "minor" for bounded requirements, or the maximum
    version text for ranges.
    """
    name: str
    newest_overall: str
    bound: str


@dataclass(frozen=True)
class RangeUpdate:
    """Newer version exists below the range maximum."""
    name: str
    candidate: str


@dataclass(frozen=True)
class BranchUpdate:
    """The tracked branch has moved past the resolved commit."""
    name: str
    branch: str
    commit: str


Report = Union[ExactUpdate, BoundedUpdate, AboveBoundNotice, RangeUpdate, BranchUpdate]
