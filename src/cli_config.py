"""Policy configuration assembly for the CLI.

Merges built-in defaults, an optional YAML config file and CLI flags, with
CLI flags taking highest precedence.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from constants import Constants, _load_yaml_config
from versioning.models import PolicyConfig

logger = logging.getLogger(__name__)

_BOOL_KEYS = ("check_when_exact", "report_above_maximum", "report_pre_releases")


def resolve_config_path(args) -> Optional[str]:
    """Return the config path from --config, else the default file when present."""
    explicit = getattr(args, "CONFIG", None)
    if explicit:
        if not os.path.isfile(explicit):
            logger.warning("Config file not found: %s", explicit)
        return explicit
    if os.path.isfile(Constants.DEFAULT_CONFIG_FILE):
        return Constants.DEFAULT_CONFIG_FILE
    return None


def _coerce_bool(key: str, value: Any, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    logger.warning("Ignoring config key %s: expected true/false, got %r", key, value)
    return fallback


def _ignore_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value]
    logger.warning("Ignoring config key ignore_repos: expected a list, got %r", value)
    return []


def apply_file_config(data: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a YAML mapping into PolicyConfig.create keyword arguments.

    Also applies the git_timeout tunable to Constants.
    """
    settings: Dict[str, Any] = {
        "check_when_exact": Constants.CHECK_WHEN_EXACT,
        "report_above_maximum": Constants.REPORT_ABOVE_MAXIMUM,
        "report_pre_releases": Constants.REPORT_PRE_RELEASES,
        "ignore_repos": [],
    }
    for key in _BOOL_KEYS:
        if key in data:
            settings[key] = _coerce_bool(key, data[key], settings[key])
    settings["ignore_repos"] = _ignore_list(data.get("ignore_repos"))

    timeout = data.get("git_timeout")
    if timeout is not None:
        try:
            Constants.GIT_TIMEOUT_SEC = int(timeout)
        except (TypeError, ValueError):
            logger.warning("Ignoring config key git_timeout: expected seconds, got %r", timeout)
    return settings


def build_policy_config(args) -> PolicyConfig:
    """Build the PolicyConfig for a run from defaults, config file and CLI args."""
    settings = apply_file_config(_load_yaml_config(resolve_config_path(args)))

    if getattr(args, "CHECK_WHEN_EXACT", None):
        settings["check_when_exact"] = True
    if getattr(args, "REPORT_ABOVE_MAXIMUM", None):
        settings["report_above_maximum"] = True
    if getattr(args, "REPORT_PRE_RELEASES", None):
        settings["report_pre_releases"] = True
    settings["ignore_repos"] = settings["ignore_repos"] + list(getattr(args, "IGNORE_REPOS", None) or [])

    return PolicyConfig.create(**settings)
