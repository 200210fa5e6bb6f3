#!/usr/bin/env python3
"""Script to print statistics for a single GitHub repository."""

import logging
import sys
import os

# Add repo root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from repostats.infrastructure.github_client import GitHubGraphQLClient
from repostats.application.registry_sweep_service import RegistrySweepService

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main(argv=None):
    """Look up one repository given as 'owner/repo' (argument or REPO env var)."""
    argv = sys.argv[1:] if argv is None else argv
    target = argv[0] if argv else os.getenv("REPO", "")

    if target.count("/") != 1 or target.startswith("/") or target.endswith("/"):
        logger.error(f"Expected 'owner/repo', got: {target!r}")
        return 1
    owner, repo = target.split("/")

    try:
        # Token comes from GITHUB_TOKEN
        service = RegistrySweepService(GitHubGraphQLClient())
        stats = service.get_repo_stats(owner, repo)
        print(stats.format())
        return 0

    except Exception as e:
        logger.error(f"Lookup failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
