# statement_recon/core/csv_parser.py

"""
CSV input for the reconciliation engine.

Turns uploaded bytes or files on disk into lists of raw rows. The header
line names the columns; data lines whose cell count differs from the
header are dropped.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Union

from statement_recon.models import RawRow
from statement_recon.core.errors import InputTooShortError, MalformedInputError, ReadFailureError

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def decode_upload(data: bytes, encoding: str = "utf-8") -> str:
    """Decode uploaded bytes to text, dropping a leading BOM."""
    try:
        text = data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ReadFailureError(f"Failed to read file: {e}")
    return text.lstrip(_BOM)


def _clean(cell: str) -> str:
    return cell.strip()


def parse_csv(text: str, delimiter: str = ",") -> list[RawRow]:
    """
    Parse CSV text into raw rows keyed by header name.

    Blank lines are ignored. Raises MalformedInputError when the text cannot
    be tokenized and InputTooShortError when fewer than a
    header and one data line remain.
    """
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    try:
        lines = [cells for cells in reader if any(cell.strip() for cell in cells)]
    except csv.Error as e:
        raise MalformedInputError(f"Failed to parse CSV file: {e}")

    if len(lines) < 2:
        raise InputTooShortError()

    headers = [_clean(h) for h in lines[0]]
    rows: list[RawRow] = []
    dropped = 0

    for cells in lines[1:]:
        if len(cells) != len(headers):
            dropped += 1
            continue
        rows.append({header: _clean(value) for header, value in zip(headers, cells)})

    if dropped:
        logger.debug(f"Dropped {dropped} CSV rows with a field count different from the header")

    return rows


def read_csv_file(
    path: Union[str, Path],
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[RawRow]:
    """Read and parse a CSV file from disk."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise ReadFailureError(f"Failed to read file {path}: {e.strerror or e}")
    return parse_csv(decode_upload(data, encoding), delimiter=delimiter)
