from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence

import pandas as pd

from synth_dashboard.core.errors import EmptyDataset
from .delivery import FileDelivery
from .model import CSV_FILENAME, CSV_MIME_TYPE, ExportedFile

logger = logging.getLogger(__name__)

DELIMITER = ","
LINE_TERMINATOR = "\n"
QUOTE = "\""
_NEEDS_QUOTING = (DELIMITER, QUOTE, "\r", "\n")


def _headers_for(records: Sequence[Mapping[str, Any]]) -> List[str]:
    """
    Column headers from the first record's key order.

    Every other record must carry exactly the same keys, otherwise a row would
    silently shift or drop values.
    """
    headers = list(records[0].keys())
    expected = set(headers)
    for idx, record in enumerate(records[1:], start=1):
        if set(record.keys()) != expected:
            raise ValueError(
                f"Record {idx} has fields {sorted(record.keys())}, expected {sorted(expected)}"
            )
    return headers


def _quote(text: str) -> str:
    """Wrap a field in quotes (doubling inner quotes) if it holds a delimiter, quote, CR or LF."""
    if any(ch in text for ch in _NEEDS_QUOTING):
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def records_to_csv(records: Sequence[Mapping[str, Any]]) -> str:
    """
    Serialize uniform records into comma separated text.

    - header row first, columns in the first record's key order
    - one line per record, joined with a newline, no trailing newline
    - every value is written as str(value): None becomes "None", NaN becomes "nan"
    - values containing a comma, quote, carriage return or newline are quoted RFC-4180 style

    :raises EmptyDataset: if records is empty
    :raises ValueError: if records do not share the same fields
    """
    if not records:
        raise EmptyDataset()

    headers = _headers_for(records)

    # Stringify up front so None/NaN keep their text instead of becoming blank fields
    frame = pd.DataFrame(
        [[str(record[h]) for h in headers] for record in records],
        columns=headers,
        dtype=object,
    )

    lines = [DELIMITER.join(_quote(str(h)) for h in headers)]
    lines.extend(
        DELIMITER.join(_quote(value) for value in row)
        for row in frame.itertuples(index=False, name=None)
    )
    return LINE_TERMINATOR.join(lines)


def export_csv(
        records: Sequence[Mapping[str, Any]],
        delivery: FileDelivery,
        filename: str = CSV_FILENAME,
) -> None:
    """
    Serialize records and hand them to `delivery` as a CSV download.

    Nothing is delivered when serialization fails.

    :raises EmptyDataset: if records is empty
    """
    content = records_to_csv(records).encode("utf-8")
    delivery.deliver(ExportedFile(filename=filename, content=content, mime_type=CSV_MIME_TYPE))

    logger.info(
        "csv_exported",
        extra={"export_filename": filename, "n_records": len(records), "n_bytes": len(content)},
    )
