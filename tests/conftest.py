"""Shared fixtures for repostats tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    def _make_response(status_code=200, payload=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        response.text = text
        return response
    return _make_response


@pytest.fixture
def repository_payload():
    """Factory for successful GraphQL response bodies."""
    def _repository_payload(name="X", login="Y", stars=5, updated_at="2023-01-01T12:00:00Z",
                            description="D"):
        return {
            "data": {
                "repository": {
                    "name": name,
                    "owner": {"login": login},
                    "stargazerCount": stars,
                    "updatedAt": updated_at,
                    "description": description,
                }
            }
        }
    return _repository_payload


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the environment variables repostats reads."""
    for name in ("GITHUB_TOKEN", "REGISTRY_PATH", "MAX_REPOS", "SHOW_PROGRESS",
                 "REQUEST_DELAY", "OUTPUT_FILE", "REPO"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
