"""Reader for Swift package declarations in an Xcode project.

Decodes project.pbxproj (an OpenStep property list) and maps the
normalized repository URL of every XCRemoteSwiftPackageReference object to
its declared requirement.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Iterator, Tuple

from openstep_parser import OpenStepDecoder

from constants import Constants
from repository.url_normalize import normalize_repo_url
from versioning.models import Requirement, requirement_from_dict

logger = logging.getLogger(__name__)

_REMOTE_REFERENCE = "XCRemoteSwiftPackageReference"


class XcodeprojPathMustBeSet(ValueError):
    """Raised when no Xcode project path was supplied."""


def parse_remote_packages(text: str) -> Iterator[Tuple[str, Dict[str, str]]]:
    """Yield (repositoryURL, requirement mapping) pairs from pbxproj text, in file order."""
    tree = OpenStepDecoder.ParseFromString(text)
    objects = tree.get("objects", {}) if isinstance(tree, dict) else {}
    for object_id, entry in objects.items():
        if not isinstance(entry, dict) or entry.get("isa") != _REMOTE_REFERENCE:
            continue
        repository_url = entry.get("repositoryURL")
        requirement = entry.get("requirement")
        if not repository_url or not isinstance(requirement, dict):
            logger.debug("Skipping remote package reference %s without URL or requirement", object_id)
            continue
        yield repository_url, {key: str(value) for key, value in requirement.items()}


def get_declared_requirements(xcodeproj_path) -> Dict[str, Requirement]:
    """Find the configured SPM dependencies in the xcodeproj.

    Args:
        xcodeproj_path: Path to the .xcodeproj bundle.

    Returns:
        Mapping of normalized repository URL to Requirement, in declaration order.

    Raises:
        XcodeprojPathMustBeSet: If xcodeproj_path is None or empty.
        UnknownRequirementKind: If a package declares an unsupported kind.
        OSError: If project.pbxproj cannot be read.
    """
    if not xcodeproj_path:
        raise XcodeprojPathMustBeSet("The path to the Xcode project must be set")

    pbxproj = os.path.join(xcodeproj_path, Constants.PBXPROJ_FILE)
    with open(pbxproj, encoding="utf-8") as fh:
        text = fh.read()

    declared: Dict[str, Requirement] = {}
    for repository_url, raw_requirement in parse_remote_packages(text):
        declared[normalize_repo_url(repository_url)] = requirement_from_dict(raw_requirement)
    logger.debug("Found %d remote package declarations in %s", len(declared), pbxproj)
    return declared
