"""Domain entities for GitHub repositories."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RepositoryRecord:
    """Immutable snapshot of one repository's statistics."""

    name: str
    owner: str
    stars: int
    updated_at: datetime
    description: Optional[str]

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def format(self) -> str:
        """Render the record as a human-readable block."""
        description = self.description if self.description is not None else "No description"
        return (
            f"Repository: {self.full_name}\n"
            f"Stars: {self.stars}\n"
            f"Last Updated: {self.updated_at.isoformat()}\n"
            f"Description: {description}\n"
        )

    def __str__(self) -> str:
        return self.format()
