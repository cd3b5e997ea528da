from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import humanize
from openpyxl import load_workbook
from rich.table import Table

from .core import START_COL, START_ROW
from .schemas.storage import BucketRecord


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _excel_datetime(value: datetime) -> datetime:
    # openpyxl refuses timezone-aware datetimes
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def record_to_row(record: BucketRecord) -> list[Any]:
    """The report columns of a bucket, in workbook order."""
    values = [
        record.name,
        _excel_datetime(record.creation_date),
        record.size_bytes,
        record.object_count,
        _yes_no(record.is_public_access),
        _yes_no(record.has_public_policy),
        record.classification.importance.value,
        record.classification.removable,
    ]
    return ["" if v is None else v for v in values]


def write_workbook(
    records: Sequence[BucketRecord],
    path: str | Path,
    start_row: int = START_ROW,
    start_col: int = START_COL,
) -> int:
    """
    Writes one row per bucket into the first sheet of an existing workbook
    and saves it back in place. Returns the number of rows written.
    """
    path = Path(path)
    workbook = load_workbook(path)
    sheet = workbook.worksheets[0]

    for row_offset, record in enumerate(records):
        for col_offset, value in enumerate(record_to_row(record)):
            sheet.cell(
                row=start_row + row_offset,
                column=start_col + col_offset,
                value=value,
            )

    workbook.save(path)
    return len(records)


def humanize_size(value: int | None) -> str:
    if value is None:
        return "-"
    return str(humanize.naturalsize(value, binary=True))


def render_table(
    records: Sequence[BucketRecord], region: str, limit: int | None = None
) -> Table:
    """Builds the console summary of the inventory."""
    table = Table(title=f"S3 Inventory ({region})")
    table.add_column("Bucket", style="bold green")
    table.add_column("Created", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Objects", justify="right")
    table.add_column("Public Access", justify="center")
    table.add_column("Public Policy", justify="center")
    table.add_column("Importance")
    table.add_column("Removable", justify="center")

    styles = {"irrelevant": "dim", "important": "yellow", "critical": "bold red"}

    shown = records if limit is None else records[:limit]
    for record in shown:
        importance = record.classification.importance.value
        style = styles[importance]
        table.add_row(
            record.name,
            record.creation_date.strftime("%Y-%m-%d"),
            humanize_size(record.size_bytes),
            humanize.intcomma(record.object_count)
            if record.object_count is not None
            else "-",
            _yes_no(record.is_public_access),
            _yes_no(record.has_public_policy),
            f"[{style}]{importance}[/{style}]",
            _yes_no(record.classification.removable),
        )

    return table
