"""Human-readable rendering of update records."""

from .models import (
    AboveBoundNotice,
    BoundedUpdate,
    BranchUpdate,
    ExactUpdate,
    RangeUpdate,
    Report,
)

EXACT_TEMPLATE = (
    "Newer version of {name}: {candidate} (but this package is set to exact version {pinned})\n"
)
NEWER_TEMPLATE = "Newer version of {name}: {candidate}"
ABOVE_BOUND_TEMPLATE = (
    "Newest version of {name}: {newest} (but this package is configured up to the next {bound} version)\n"
)
BRANCH_TEMPLATE = "Newer commit available for {name} ({branch}): {commit}"


def format_report(report: Report) -> str:
    """Render one report record as message text."""
    if isinstance(report, ExactUpdate):
        return EXACT_TEMPLATE.format(name=report.name, candidate=report.candidate, pinned=report.pinned)
    if isinstance(report, (BoundedUpdate, RangeUpdate)):
        return NEWER_TEMPLATE.format(name=report.name, candidate=report.candidate)
    if isinstance(report, AboveBoundNotice):
        return ABOVE_BOUND_TEMPLATE.format(
            name=report.name, newest=report.newest_overall, bound=report.bound
        )
    if isinstance(report, BranchUpdate):
        return BRANCH_TEMPLATE.format(name=report.name, branch=report.branch, commit=report.commit)
    raise TypeError(f"Unsupported report: {report!r}")
