"""Domain entities for the registry statistics report."""

from dataclasses import dataclass, field
from datetime import datetime
from statistics import mean
from typing import Any, Iterator, List, Optional, Union

from repostats.domain.repository import RepositoryRecord


@dataclass(frozen=True)
class Candidate:
    """A registry package whose declared URL points at a GitHub repository."""

    owner: str
    repository: str
    package: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repository}"


@dataclass(frozen=True)
class FetchSuccess:
    """A candidate whose lookup returned a record."""

    candidate: Candidate
    record: RepositoryRecord


@dataclass(frozen=True)
class FetchFailure:
    """A candidate whose lookup raised; the error is kept for reporting."""

    candidate: Candidate
    error: Exception


FetchOutcome = Union[FetchSuccess, FetchFailure]


@dataclass(frozen=True)
class ReportRow:
    """One line of the report: a package and its repository statistics."""

    package: str
    repository: str
    owner: str
    stars: int
    updated_at: datetime
    description: Optional[str]

    @classmethod
    def from_record(cls, package: str, record: RepositoryRecord) -> "ReportRow":
        return cls(
            package=package,
            repository=record.name,
            owner=record.owner,
            stars=record.stars,
            updated_at=record.updated_at,
            description=record.description,
        )

    def values(self) -> tuple:
        """Row values in ResultTable.COLUMNS order."""
        return (
            self.package,
            self.repository,
            self.owner,
            self.stars,
            self.updated_at,
            self.description,
        )


@dataclass
class ResultTable:
    """Ordered collection of report rows with a fixed column layout."""

    COLUMNS = ("pkg", "repository", "owner", "stars", "updated_at", "description")

    rows: List[ReportRow] = field(default_factory=list)

    @property
    def columns(self) -> List[str]:
        return list(self.COLUMNS)

    def append(self, row: ReportRow) -> None:
        self.rows.append(row)

    def column(self, name: str) -> List[Any]:
        """
        Get all values of one column.

        Raises:
            KeyError: If the column name is unknown
        """
        if name not in self.COLUMNS:
            raise KeyError(f"Unknown column: {name}")
        index = self.COLUMNS.index(name)
        return [row.values()[index] for row in self.rows]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ReportRow]:
        return iter(self.rows)


@dataclass(frozen=True)
class SweepSummary:
    """Counts and star statistics for a finished sweep."""

    success_count: int
    mean_stars: Optional[float]
    max_stars: Optional[int]


def summarize(table: ResultTable) -> SweepSummary:
    """
    Summarize a result table.

    Rows with zero stars count as successes but are left out of the
    mean and maximum.
    """
    starred = [row.stars for row in table if row.stars > 0]
    if not starred:
        return SweepSummary(success_count=len(table), mean_stars=None, max_stars=None)
    return SweepSummary(
        success_count=len(table),
        mean_stars=mean(starred),
        max_stars=max(starred),
    )
