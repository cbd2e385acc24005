"""Package.resolved parser for Xcode projects and workspaces.

Supports the v1 layout ({"object": {"pins": [...]}} with "repositoryURL")
and the v2/v3 layout ({"pins": [...]} with "location").
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

from constants import Constants
from repository.url_normalize import normalize_repo_url

logger = logging.getLogger(__name__)


class CouldNotFindResolvedFile(FileNotFoundError):
    """Raised when no Package.resolved exists next to the Xcode project."""


def find_package_resolved_files(xcodeproj_path: str) -> List[str]:
    """Locate Package.resolved files, workspace first, then project.

    Args:
        xcodeproj_path: Path to the .xcodeproj bundle.

    Returns:
        Existing Package.resolved paths in precedence order (later wins on merge).
    """
    locations = []
    base, _ = os.path.splitext(os.path.normpath(xcodeproj_path))
    workspace = base + Constants.WORKSPACE_EXTENSION
    if os.path.isdir(workspace):
        path = os.path.join(workspace, *Constants.SWIFTPM_DIR, Constants.PACKAGE_RESOLVED_FILE)
        if os.path.isfile(path):
            locations.append(path)

    path = os.path.join(
        xcodeproj_path, Constants.PROJECT_WORKSPACE_DIR, *Constants.SWIFTPM_DIR, Constants.PACKAGE_RESOLVED_FILE
    )
    if os.path.isfile(path):
        locations.append(path)

    logger.info("Searching for resolved packages in: %s", locations)
    return locations


def _pin_value(pin: Dict[str, Any]) -> Optional[str]:
    state = pin.get("state") or {}
    return state.get("version") or state.get("revision")


def parse_package_resolved(data: Dict[str, Any]) -> Dict[str, str]:
    """Map normalized repository URL to pinned version (or revision).

    Pins without a URL or a pinned value are skipped.
    """
    pins = data.get("pins")
    if pins is None:
        pins = (data.get("object") or {}).get("pins") or []

    resolved: Dict[str, str] = {}
    for pin in pins:
        if not isinstance(pin, dict):
            continue
        url = pin.get("location") or pin.get("repositoryURL")
        value = _pin_value(pin)
        if not url or not value:
            logger.debug("Skipping incomplete pin: %s", pin.get("identity") or pin.get("package"))
            continue
        resolved[normalize_repo_url(url)] = value
    return resolved


def get_resolved_values(xcodeproj_path: str) -> Dict[str, str]:
    """Extract resolved versions from Package.resolved relative to an Xcode project.

    Raises:
        CouldNotFindResolvedFile: If no Package.resolved files were found.
        ValueError: If a Package.resolved file is not valid JSON.
    """
    resolved_paths = find_package_resolved_files(xcodeproj_path)
    if not resolved_paths:
        raise CouldNotFindResolvedFile(f"No {Constants.PACKAGE_RESOLVED_FILE} found for {xcodeproj_path}")

    resolved: Dict[str, str] = {}
    for resolved_path in resolved_paths:
        with open(resolved_path, encoding="utf-8") as fh:
            resolved.update(parse_package_resolved(json.load(fh)))
    return resolved
