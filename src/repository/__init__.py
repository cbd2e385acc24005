"""Repository URL handling and remote git lookups.

- url_normalize.py: canonical repository URLs and display names
- git_remote.py: tags and branch heads via git ls-remote
"""
