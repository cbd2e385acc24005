"""Batch update check over every package declared in an Xcode project.

Reads declarations and pins, runs the decision engine per dependency in
declaration order, and collects the resulting reports.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from common.logging_utils import extra_context
from repository import git_remote
from repository.url_normalize import display_name
from versioning.engine import BranchCommitSupplier, VersionsSupplier, evaluate
from versioning.models import InvalidVersionFormat, PolicyConfig, Report, RequirementKind
from versioning.report import format_report
from xcode.package_resolved import get_resolved_values
from xcode.project import get_declared_requirements

logger = logging.getLogger(__name__)


def collect_reports(
    xcodeproj_path: str,
    config: PolicyConfig,
    versions_supplier: Optional[VersionsSupplier] = None,
    branch_commit_supplier: Optional[BranchCommitSupplier] = None,
) -> List[Report]:
    """Evaluate every declared dependency and return report records in declaration order.

    Dependencies without a pinned value, or whose versions cannot be parsed,
    are logged and skipped. Errors raised by the suppliers propagate.
    """
    versions_supplier = versions_supplier or git_remote.version_tags
    branch_commit_supplier = branch_commit_supplier or git_remote.branch_last_commit

    declared = get_declared_requirements(xcodeproj_path)
    resolved_values = get_resolved_values(xcodeproj_path)

    reports: List[Report] = []
    for repository_url, requirement in declared.items():
        name = display_name(repository_url)
        resolved_value = resolved_values.get(repository_url)
        if requirement.kind is RequirementKind.COMMIT:
            continue
        if resolved_value is None and repository_url not in config.ignored_repositories:
            logger.warning(
                "Unable to locate the current version for %s (%s)",
                name,
                repository_url,
                extra=extra_context(event="missing_resolution", component="checker", target=repository_url),
            )
            continue
        try:
            found = evaluate(
                repository_url,
                requirement,
                resolved_value,
                versions_supplier,
                branch_commit_supplier,
                config,
            )
        except InvalidVersionFormat as exc:
            logger.warning("Skipping %s: %s", name, exc)
            continue
        logger.info(
            "Checked %s (%s): %d update(s)",
            name,
            requirement.kind.value,
            len(found),
            extra=extra_context(event="dependency_checked", component="checker", target=repository_url),
        )
        reports.extend(found)
    return reports


def check_for_updates(
    xcodeproj_path: str,
    config: Optional[PolicyConfig] = None,
    versions_supplier: Optional[VersionsSupplier] = None,
    branch_commit_supplier: Optional[BranchCommitSupplier] = None,
) -> List[str]:
    """Return update messages for the project, in declaration order."""
    reports = collect_reports(
        xcodeproj_path,
        config or PolicyConfig(),
        versions_supplier=versions_supplier,
        branch_commit_supplier=branch_commit_supplier,
    )
    return [format_report(report) for report in reports]
