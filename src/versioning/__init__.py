"""Version parsing, requirement models and the update decision engine.

- version.py: semantic version parsing and ordering
- models.py: requirement kinds, policy config and report records
- engine.py: per-dependency update decisions
- report.py: message text for report records
"""

from .engine import evaluate
from .models import (
    InvalidVersionFormat,
    PolicyConfig,
    Report,
    Requirement,
    requirement_from_dict,
)
from .report import format_report

__all__ = [
    "evaluate",
    "format_report",
    "InvalidVersionFormat",
    "PolicyConfig",
    "Report",
    "Requirement",
    "requirement_from_dict",
]
