"""Per-dependency update decision engine.

Given one declared requirement, the value pinned in Package.resolved and
access to the remote's versions or branch head, decide which update
records (if any) to surface. The engine performs no I/O of its own; remote
data arrives through the injected suppliers, each called at most once.
"""

from typing import Callable, List, Optional

from repository.url_normalize import display_name

from . import version as semver
from .models import (
    AboveBoundNotice,
    BoundedUpdate,
    Branch,
    BranchUpdate,
    Commit,
    ExactUpdate,
    ExactVersion,
    PolicyConfig,
    RangeUpdate,
    Report,
    Requirement,
    UpToNextMajorVersion,
    UpToNextMinorVersion,
    VersionRange,
)
from .version import Version

VersionsSupplier = Callable[[str], List[Version]]
BranchCommitSupplier = Callable[[str, str], str]


def evaluate(
    url: str,
    requirement: Requirement,
    resolved_value: Optional[str],
    versions_supplier: VersionsSupplier,
    branch_commit_supplier: BranchCommitSupplier,
    config: PolicyConfig,
) -> List[Report]:
    """Decide which update records to report for one dependency.

    Args:
        url: Normalized repository URL of the dependency.
        requirement: Declared requirement for the dependency.
        resolved_value: Pinned version (or commit for branches); None if unresolved.
        versions_supplier: Returns available versions for url, newest first.
        branch_commit_supplier: Returns the head commit of (url, branch).
        config: Reporting policy.

    Returns:
        Zero, one or two report records, in emission order.

    Raises:
        InvalidVersionFormat: If the resolved value or a range maximum is not
            a valid version where one is needed.
    """
    if isinstance(requirement, Commit) or url in config.ignored_repositories or resolved_value is None:
        return []

    name = display_name(url)

    if isinstance(requirement, Branch):
        last_commit = branch_commit_supplier(url, requirement.name)
        if last_commit == resolved_value:
            return []
        return [BranchUpdate(name=name, branch=requirement.name, commit=last_commit)]

    if isinstance(requirement, ExactVersion) and not config.check_when_exact:
        return []

    available = versions_supplier(url)
    if not available or str(available[0]) == resolved_value:
        return []

    if isinstance(requirement, ExactVersion):
        return _exact(name, available, resolved_value, config)
    if isinstance(requirement, UpToNextMajorVersion):
        return _bounded("major", semver.major, name, available, resolved_value, config)
    if isinstance(requirement, UpToNextMinorVersion):
        return _bounded("minor", semver.minor, name, available, resolved_value, config)
    if isinstance(requirement, VersionRange):
        return _range(requirement, name, available, resolved_value, config)
    raise TypeError(f"Unsupported requirement: {requirement!r}")


def _allowed(candidate: Version, config: PolicyConfig) -> bool:
    return config.report_pre_releases or not semver.is_prerelease(candidate)


def _newest(available: List[Version], predicate: Callable[[Version], bool]) -> Optional[Version]:
    for candidate in available:
        if predicate(candidate):
            return candidate
    return None


def _same(a: Optional[Version], b: Optional[Version]) -> bool:
    if a is None or b is None:
        return a is b
    return semver.compare(a, b) == 0


def _exact(name, available, resolved_value, config) -> List[Report]:
    candidate = _newest(available, lambda v: _allowed(v, config))
    if candidate is None or str(candidate) == resolved_value:
        return []
    return [ExactUpdate(name=name, candidate=str(candidate), pinned=resolved_value)]


def _bounded(field_name, field, name, available, resolved_value, config) -> List[Report]:
    resolved = semver.parse(resolved_value)
    reports: List[Report] = []

    newest_meeting_reqs = _newest(
        available, lambda v: field(v) == field(resolved) and _allowed(v, config)
    )
    if newest_meeting_reqs is not None and str(newest_meeting_reqs) != resolved_value:
        reports.append(BoundedUpdate(name=name, candidate=str(newest_meeting_reqs)))

    if not config.report_above_maximum:
        return reports

    newest_above_bound = _newest(available, lambda v: _allowed(v, config))
    if _same(newest_above_bound, newest_meeting_reqs) or str(newest_above_bound) == resolved_value:
        return reports
    reports.append(AboveBoundNotice(name=name, newest_overall=str(available[0]), bound=field_name))
    return reports


def _range(requirement, name, available, resolved_value, config) -> List[Report]:
    max_version = semver.parse(requirement.maximum_version)
    newest = available[0]
    if semver.compare(newest, max_version) < 0:
        return [RangeUpdate(name=name, candidate=str(newest))]

    reports: List[Report] = []
    newest_meeting_reqs = _newest(
        available, lambda v: semver.compare(v, max_version) < 0 and _allowed(v, config)
    )
    if newest_meeting_reqs is not None and str(newest_meeting_reqs) != resolved_value:
        reports.append(RangeUpdate(name=name, candidate=str(newest_meeting_reqs)))
    if config.report_above_maximum:
        reports.append(AboveBoundNotice(name=name, newest_overall=str(newest), bound=str(max_version)))
    return reports
