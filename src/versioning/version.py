"""Semantic version parsing and ordering.

Thin layer over semantic_version.Version so callers get one failure type
(InvalidVersionFormat) and an explicit three-way compare. Ordering follows
SemVer 2.0.0 precedence: build metadata never participates.
"""

from typing import Iterable, List

import semantic_version

from .models import InvalidVersionFormat

Version = semantic_version.Version


def parse(text: str) -> Version:
    """Parse a strict MAJOR.MINOR.PATCH[-prerelease][+build] string.

    Raises:
        InvalidVersionFormat: If text is not a valid semantic version.
    """
    try:
        return semantic_version.Version(str(text).strip())
    except ValueError as exc:
        raise InvalidVersionFormat(f"Invalid version format: {text!r}") from exc


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 as a sorts before, equal to, or after b."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def is_prerelease(version: Version) -> bool:
    """True when the version carries pre-release identifiers."""
    return bool(version.prerelease)


def major(version: Version) -> int:
    return version.major


def minor(version: Version) -> int:
    return version.minor


def sort_descending(versions: Iterable[Version]) -> List[Version]:
    """Return versions newest first."""
    return sorted(versions, reverse=True)
