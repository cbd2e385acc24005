"""Remote tag and branch lookups via `git ls-remote`.

These functions are the default suppliers for the decision engine. They
perform exactly one git invocation per call, with no caching or retries.
"""
from __future__ import annotations

import logging
import subprocess
from typing import List

from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants
from versioning.models import InvalidVersionFormat
from versioning.version import Version, parse, sort_descending

logger = logging.getLogger(__name__)


class GitCommandError(RuntimeError):
    """Raised when git fails, is missing, or times out."""


class BranchNotFound(LookupError):
    """Raised when the requested branch does not exist on the remote."""


def remote_url(url: str) -> str:
    """Return a URL git can reach; normalized URLs get the default scheme back."""
    if "://" in url or url.startswith("git@"):
        return url
    return f"{Constants.GIT_DEFAULT_SCHEME}{url}"


def ls_remote(flag: str, url: str) -> str:
    """Run `git ls-remote <flag> <url>` and return its stdout.

    Raises:
        GitCommandError: On a missing binary, timeout, or non-zero exit.
    """
    target = remote_url(url)
    command = [Constants.GIT_BINARY, "ls-remote", flag, target]
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "git request",
                extra=extra_context(event="git_request", component="git_remote", action=flag, target=target),
            )
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=Constants.GIT_TIMEOUT_SEC,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitCommandError(f"{Constants.GIT_BINARY} executable not found") from exc
        except subprocess.TimeoutExpired as exc:
            raise GitCommandError(
                f"git ls-remote {flag} {target} timed out after {Constants.GIT_TIMEOUT_SEC} seconds"
            ) from exc

        if result.returncode != 0:
            raise GitCommandError(
                f"git ls-remote {flag} {target} failed ({result.returncode}): {result.stderr.strip()}"
            )
        if is_debug_enabled(logger):
            logger.debug(
                "git response ok",
                extra=extra_context(
                    event="git_response",
                    component="git_remote",
                    action=flag,
                    outcome="success",
                    duration_ms=t.duration_ms(),
                    target=target,
                ),
            )
    return result.stdout


def parse_version_tags(output: str) -> List[Version]:
    """Parse `git ls-remote -t` output into versions, newest first.

    Tags that are not semantic versions are dropped.
    """
    versions = []
    for line in output.splitlines():
        if not line.strip():
            continue
        tag = line.split(Constants.GIT_TAGS_MARKER)[-1]
        try:
            versions.append(parse(tag))
        except InvalidVersionFormat:
            continue
    return sort_descending(versions)


def parse_branch_commit(output: str, branch_name: str) -> str:
    """Find the head commit of branch_name in `git ls-remote -h` output.

    Raises:
        BranchNotFound: If no line references refs/heads/<branch_name>.
    """
    for line in output.splitlines():
        parts = line.split(Constants.GIT_HEADS_MARKER)
        if len(parts) == 2 and parts[1].strip() == branch_name:
            return parts[0].strip()
    raise BranchNotFound(f"Branch {branch_name!r} not found")


def version_tags(url: str) -> List[Version]:
    """List semantic-version tags of the repository at url, newest first."""
    return parse_version_tags(ls_remote("-t", url))


def branch_last_commit(url: str, branch_name: str) -> str:
    """Return the latest commit hash on branch_name of the repository at url."""
    try:
        return parse_branch_commit(ls_remote("-h", url), branch_name)
    except BranchNotFound as exc:
        raise BranchNotFound(f"Branch {branch_name!r} not found in {url}") from exc
