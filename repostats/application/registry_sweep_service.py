"""Application service for collecting repository statistics across a package registry."""

import logging
import time
from typing import List, Mapping, Optional, Tuple

from repostats.domain.report import (
    Candidate,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
    ReportRow,
    ResultTable,
    summarize,
)
from repostats.domain.repository import RepositoryRecord
from repostats.domain.url_parser import extract_owner_repo
from repostats.infrastructure.github_client import GitHubGraphQLClient
from repostats.infrastructure.report_writer import write_csv

logger = logging.getLogger(__name__)


class RegistrySweepService:
    """Service for fetching GitHub statistics for every package in a registry."""

    OUTPUT_FILE = "github_repo_stats.csv"
    DEFAULT_DELAY_SECONDS = 0.5  # Pause between API calls to respect the rate limit

    def __init__(self, github_client: GitHubGraphQLClient, output_file: Optional[str] = None):
        """
        Initialize sweep service.

        Args:
            github_client: GitHub API client
            output_file: CSV destination. Defaults to OUTPUT_FILE in the working directory.
        """
        self.github_client = github_client
        self.output_file = output_file or self.OUTPUT_FILE

    def get_repo_stats(self, owner: str, repo: str) -> RepositoryRecord:
        """Look up a single repository. Errors propagate to the caller."""
        return self.github_client.get_repo_stats(owner, repo)

    @staticmethod
    def build_candidates(registry: Mapping[str, str], max_repos: Optional[int] = None) -> List[Candidate]:
        """
        Turn registry entries into fetch candidates.

        Entries whose URL is not a github.com repository URL are dropped.

        Args:
            registry: Package name -> declared repository URL
            max_repos: Keep at most this many candidates, in registry order

        Returns:
            List of candidates
        """
        candidates = []
        for package, url in registry.items():
            parsed = extract_owner_repo(url)
            if parsed is None:
                continue
            owner, repo = parsed
            candidates.append(Candidate(owner=owner, repository=repo, package=package))

        if max_repos is not None:
            candidates = candidates[:max(max_repos, 0)]

        return candidates

    def _fetch_one(self, candidate: Candidate) -> FetchOutcome:
        try:
            record = self.github_client.get_repo_stats(candidate.owner, candidate.repository)
        except Exception as e:
            return FetchFailure(candidate=candidate, error=e)
        return FetchSuccess(candidate=candidate, record=record)

    def fetch_candidates(
        self,
        candidates: List[Candidate],
        show_progress: bool = True,
        delay: float = DEFAULT_DELAY_SECONDS,
    ) -> Tuple[List[FetchSuccess], List[FetchFailure]]:
        """
        Fetch statistics for each candidate, one at a time.

        A failed lookup is logged and recorded; it never stops the run.

        Args:
            candidates: Candidates to fetch, in order
            show_progress: Log a progress line per candidate
            delay: Seconds to wait between lookups; 0 or less disables the pause

        Returns:
            Tuple of (successes, failures), each in candidate order
        """
        successes: List[FetchSuccess] = []
        failures: List[FetchFailure] = []
        total = len(candidates)

        for i, candidate in enumerate(candidates, 1):
            outcome = self._fetch_one(candidate)

            if isinstance(outcome, FetchSuccess):
                successes.append(outcome)
                if show_progress:
                    logger.info(
                        f"[{i}/{total}] {candidate.full_name}: {outcome.record.stars} stars"
                    )
            else:
                failures.append(outcome)
                logger.warning(f"[{i}/{total}] {candidate.full_name}: {outcome.error}")

            if i < total and delay > 0:
                time.sleep(delay)

        return successes, failures

    def collect_registry_stats(
        self,
        registry: Mapping[str, str],
        max_repos: Optional[int] = None,
        show_progress: bool = True,
        delay: float = DEFAULT_DELAY_SECONDS,
    ) -> ResultTable:
        """
        Collect statistics for every GitHub-hosted package in a registry.

        The table is written to the output file (replacing it) even when
        it has no rows.

        Args:
            registry: Package name -> declared repository URL
            max_repos: Maximum number of repositories to process
            show_progress: Log progress and a summary
            delay: Seconds to wait between API calls

        Returns:
            ResultTable with one row per successful lookup
        """
        candidates = self.build_candidates(registry, max_repos=max_repos)

        if show_progress:
            logger.info(f"Number of repositories to process: {len(candidates)}")

        successes, failures = self.fetch_candidates(
            candidates, show_progress=show_progress, delay=delay
        )

        table = ResultTable()
        for success in successes:
            table.append(ReportRow.from_record(success.candidate.package, success.record))

        if show_progress:
            summary = summarize(table)
            logger.info(
                f"Successfully collected: {summary.success_count} repositories "
                f"({len(failures)} failed)"
            )
            if summary.mean_stars is not None:
                logger.info(f"Average stars: {summary.mean_stars:.1f}")
                logger.info(f"Maximum stars: {summary.max_stars}")

        write_csv(table, self.output_file)
        logger.info(f"Results saved to {self.output_file}")

        return table
