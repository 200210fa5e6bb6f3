"""Extraction of (owner, repository) pairs from GitHub URLs."""

import re
from typing import Optional, Tuple

GITHUB_URL_PATTERN = re.compile(
    r"^https?://github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?$"
)


def extract_owner_repo(url: str) -> Optional[Tuple[str, str]]:
    """
    Extract owner and repository name from a GitHub repository URL.

    Args:
        url: Repository URL, e.g. "https://github.com/JuliaLang/Julia.git"

    Returns:
        (owner, repo) tuple, or None if the URL is not a canonical
        github.com repository URL
    """
    if not isinstance(url, str):
        return None

    match = GITHUB_URL_PATTERN.fullmatch(url)
    if match is None:
        return None
    return match.group("owner"), match.group("repo")
