"""GitHub GraphQL API client for repository statistics."""

import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

import requests

from repostats.domain.repository import RepositoryRecord

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """Base class for failed repository lookups."""
    pass


class AuthenticationError(GitHubAPIError):
    """Raised on HTTP 401: the token is missing, expired or invalid."""

    def __init__(self):
        super().__init__("Authentication failed. Please check your GitHub token.")


class RateLimitOrPermissionError(GitHubAPIError):
    """Raised on HTTP 403."""

    def __init__(self):
        super().__init__(
            "Rate limit exceeded or insufficient permissions. Consider using a GitHub token."
        )


class TransportError(GitHubAPIError):
    """Raised on any other non-2xx response."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error {status_code}: {body}")


class QueryError(GitHubAPIError):
    """Raised when a 2xx response carries GraphQL errors."""

    def __init__(self, errors: Any):
        self.errors = errors
        super().__init__(f"GraphQL query failed: {errors}")


class NotFoundError(GitHubAPIError):
    """Raised when the repository does not exist or is not visible to the token."""

    def __init__(self, owner: str, repo: str):
        self.owner = owner
        self.repo = repo
        super().__init__(f"Repository {owner}/{repo} not found or not accessible")


def parse_updated_at(value: str) -> datetime:
    """
    Parse a GitHub timestamp as a naive UTC datetime.

    Only the "YYYY-MM-DDTHH:MM:SS" prefix is used; any zone designator or
    offset is dropped without converting.
    """
    return datetime.strptime(value[:19], "%Y-%m-%dT%H:%M:%S")


class GitHubGraphQLClient:
    """Client for the GitHub GraphQL API. One POST per lookup, no retries."""

    GRAPHQL_ENDPOINT = "https://api.github.com/graphql"
    USER_AGENT = "repostats"

    REPO_STATS_QUERY = """
    query GetRepoStats($owner: String!, $name: String!) {
        repository(owner: $owner, name: $name) {
            name
            owner {
                login
            }
            stargazerCount
            updatedAt
            description
        }
    }
    """

    def __init__(self, token: Optional[str] = None):
        """
        Initialize GitHub GraphQL client.

        Args:
            token: GitHub personal access token. If None, uses GITHUB_TOKEN env var.
        """
        if token is None:
            token = os.getenv("GITHUB_TOKEN")

        self.token = token
        self.headers = {
            "Content-Type": "application/json",
            "User-Agent": self.USER_AGENT,
        }

        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"
            logger.debug("Using authenticated GitHub API")
        else:
            logger.debug("No GitHub token set; requests are unauthenticated")

    def _execute_query(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The "data" member of the GraphQL response

        Raises:
            AuthenticationError: On HTTP 401
            RateLimitOrPermissionError: On HTTP 403
            TransportError: On any other non-2xx status
            QueryError: If the response contains GraphQL errors
            requests.RequestException: If the request itself fails
        """
        payload = {"query": query, "variables": variables}

        response = requests.post(
            self.GRAPHQL_ENDPOINT,
            json=payload,
            headers=self.headers,
        )

        if response.status_code == 401:
            raise AuthenticationError()
        elif response.status_code == 403:
            raise RateLimitOrPermissionError()
        elif not 200 <= response.status_code < 300:
            raise TransportError(response.status_code, response.text)

        data = response.json()

        if "errors" in data:
            raise QueryError(data["errors"])

        return data.get("data") or {}

    def get_repo_stats(self, owner: str, repo: str) -> RepositoryRecord:
        """
        Fetch statistics for a single repository.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name

        Returns:
            RepositoryRecord built from the response

        Raises:
            NotFoundError: If the repository is null in the response
            GitHubAPIError: For the other failures listed in _execute_query
        """
        logger.debug(f"Querying repository {owner}/{repo}")
        data = self._execute_query(self.REPO_STATS_QUERY, {"owner": owner, "name": repo})

        node = data.get("repository")
        if node is None:
            raise NotFoundError(owner, repo)

        return RepositoryRecord(
            name=node["name"],
            owner=node["owner"]["login"],
            stars=node["stargazerCount"],
            updated_at=parse_updated_at(node["updatedAt"]),
            description=node.get("description"),
        )
