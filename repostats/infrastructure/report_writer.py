"""CSV output for the registry statistics report."""

import csv
import logging

from repostats.domain.report import ResultTable

logger = logging.getLogger(__name__)


def write_csv(table: ResultTable, output_file: str) -> None:
    """
    Write the report table to CSV, replacing any existing file.

    Every present value is quoted; an absent description is written as an
    empty unquoted field, so it stays distinct from an empty string ("").

    Args:
        table: Report rows to write
        output_file: Destination path
    """
    with open(output_file, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_NOTNULL)
        writer.writerow(table.columns)
        for row in table:
            writer.writerow([
                row.package,
                row.repository,
                row.owner,
                row.stars,
                row.updated_at.isoformat(timespec="seconds"),
                row.description,
            ])

    logger.debug(f"Wrote {len(table)} rows to {output_file}")
