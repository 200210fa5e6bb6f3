"""Runtime settings read from environment variables."""

import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_REGISTRY_PATH = os.path.join("~", ".julia", "registries", "General")
DEFAULT_OUTPUT_FILE = "github_repo_stats.csv"
DEFAULT_DELAY = 0.5

FALSE_VALUES = {"0", "false", "no", "off"}


def _get_int(name: str) -> Optional[int]:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {value!r}")


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {value!r}")


@dataclass(frozen=True)
class Settings:
    """Settings for a single lookup or a registry sweep."""

    token: Optional[str] = field(default=None, repr=False)
    registry_path: str = DEFAULT_REGISTRY_PATH
    max_repos: Optional[int] = None
    show_progress: bool = True
    delay: float = DEFAULT_DELAY
    output_file: str = DEFAULT_OUTPUT_FILE

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        Raises:
            ValueError: If MAX_REPOS or REQUEST_DELAY is not a number
        """
        return cls(
            token=os.getenv("GITHUB_TOKEN") or None,
            registry_path=os.path.expanduser(os.getenv("REGISTRY_PATH") or DEFAULT_REGISTRY_PATH),
            max_repos=_get_int("MAX_REPOS"),
            show_progress=os.getenv("SHOW_PROGRESS", "true").strip().lower() not in FALSE_VALUES,
            delay=_get_float("REQUEST_DELAY", DEFAULT_DELAY),
            output_file=os.getenv("OUTPUT_FILE") or DEFAULT_OUTPUT_FILE,
        )
