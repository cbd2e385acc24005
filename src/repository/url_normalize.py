"""Repository URL normalization.

Declarations in the project file, pins in Package.resolved and entries in
the ignore list spell the same repository differently (https vs ssh, with
or without ".git"). Normalized forms compare equal.
"""
from __future__ import annotations

import re

_SCHEME_SEPARATOR = "://"
_GIT_SUFFIX = ".git"
_NAME_RE = re.compile(r"([\w-]+/[\w-]+)(\.git)?$")


def normalize_repo_url(raw: str) -> str:
    """Strip any "<scheme>://" prefix and one trailing ".git".

    Everything up to the last "://" goes. Only a single ".git" is removed,
    so "repo.git.git" becomes "repo.git".
    """
    url = raw.strip()
    _, sep, rest = url.rpartition(_SCHEME_SEPARATOR)
    if sep:
        url = rest
    if url.endswith(_GIT_SUFFIX):
        url = url[: -len(_GIT_SUFFIX)]
    return url


def display_name(url: str) -> str:
    """Readable "org/repo" name for a repository URL, else the URL itself."""
    match = _NAME_RE.search(url)
    if match:
        return match.group(1)
    return url
