#!/usr/bin/env python3
"""Script to collect GitHub statistics for every package in a Julia registry."""

import logging
import sys
import os

# Add repo root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from repostats.config import Settings
from repostats.infrastructure.github_client import GitHubGraphQLClient
from repostats.infrastructure.registry_source import load_registry
from repostats.application.registry_sweep_service import RegistrySweepService

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Sweep the registry and write the CSV report."""
    try:
        settings = Settings.from_env()
        if not settings.token:
            logger.warning("GITHUB_TOKEN not found. Using unauthenticated requests (limited rate).")

        registry = load_registry(settings.registry_path)

        github_client = GitHubGraphQLClient(token=settings.token)
        service = RegistrySweepService(github_client, output_file=settings.output_file)

        table = service.collect_registry_stats(
            registry,
            max_repos=settings.max_repos,
            show_progress=settings.show_progress,
            delay=settings.delay,
        )
        logger.info(f"Sweep completed with {len(table)} rows")
        return 0

    except Exception as e:
        logger.error(f"Sweep failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
