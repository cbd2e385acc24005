"""Constants used in the project."""

import logging
import os
from enum import Enum

import yaml

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    GIT_ERROR = 2
    EXIT_WARNINGS = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    DEFAULT_CONFIG_FILE = ".spmcheck.yml"

    # git ls-remote
    GIT_BINARY = "git"
    GIT_TIMEOUT_SEC = 60
    GIT_DEFAULT_SCHEME = "https://"
    GIT_TAGS_MARKER = "/tags/"
    GIT_HEADS_MARKER = "\trefs/heads/"

    # Xcode project layout
    PBXPROJ_FILE = "project.pbxproj"
    PACKAGE_RESOLVED_FILE = "Package.resolved"
    SWIFTPM_DIR = ("xcshareddata", "swiftpm")
    PROJECT_WORKSPACE_DIR = "project.xcworkspace"
    WORKSPACE_EXTENSION = ".xcworkspace"

    # Policy defaults
    CHECK_WHEN_EXACT = False
    REPORT_ABOVE_MAXIMUM = False
    REPORT_PRE_RELEASES = False


def _load_yaml_config(path):
    """Load a YAML configuration mapping from disk.

    Args:
        path (str): Path to the YAML file.

    Returns:
        dict: Parsed mapping, empty when the file is missing, empty or malformed.
    """
    if not path or not os.path.isfile(path):
        return {}
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to load config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be a mapping", path)
        return {}
    return data
