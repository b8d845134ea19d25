# statement_recon/core/export.py

"""
CSV export of one reconciliation category.

Each category has its own column set and a dated download filename, e.g.
perfect-matches-2025-01-15.csv.
"""

import csv
import io
from datetime import date
from typing import Optional, Sequence

from statement_recon.models import (
    Category,
    CATEGORIES,
    RawRow,
    DATE_FIELD,
)
from statement_recon.core.errors import ExportError
from statement_recon.core.matching import ReconciliationResult
from statement_recon.core.normalizers import extract_key, extract_amount, extract_status


# ============================================
# Category metadata
# ============================================

CATEGORY_LABELS: dict[str, str] = {
    "matched": "Perfect Matches",
    "mismatched": "Mismatched Transactions",
    "internal_only": "Internal Only Transactions",
    "provider_only": "Provider Only Transactions",
}

CATEGORY_FILE_PREFIXES: dict[str, str] = {
    "matched": "perfect-matches",
    "mismatched": "mismatched-transactions",
    "internal_only": "internal-only",
    "provider_only": "provider-only",
}

CATEGORY_HEADERS: dict[str, list[str]] = {
    "matched": ["Transaction Reference", "Amount", "Status", "Date", "Match Type"],
    "mismatched": [
        "Transaction Reference",
        "Internal Amount",
        "Provider Amount",
        "Internal Status",
        "Provider Status",
        "Amount Match",
        "Status Match",
    ],
    "internal_only": ["Transaction Reference", "Amount", "Status", "Date", "Source"],
    "provider_only": ["Transaction Reference", "Amount", "Status", "Date", "Source"],
}

_ONLY_SOURCES = {
    "internal_only": "Internal System Only",
    "provider_only": "Provider Statement Only",
}


def _check_category(category: str) -> None:
    if category not in CATEGORIES:
        raise ExportError("Invalid export type")


def _money(row: RawRow) -> str:
    return f"{extract_amount(row):.2f}"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _row_values(category: str, record) -> list[str]:
    if category == "matched":
        return [
            record.key,
            _money(record.internal),
            extract_status(record.internal),
            record.internal.get(DATE_FIELD) or "",
            "Perfect Match",
        ]

    if category == "mismatched":
        return [
            record.key,
            _money(record.internal),
            _money(record.provider),
            extract_status(record.internal),
            extract_status(record.provider),
            _yes_no(record.amount_match),
            _yes_no(record.status_match),
        ]

    return [
        extract_key(record) or "",
        _money(record),
        extract_status(record),
        record.get(DATE_FIELD) or "",
        _ONLY_SOURCES[category],
    ]


# ============================================
# Public API
# ============================================

def to_csv(category: Category, records: Sequence, delimiter: str = ",") -> str:
    """
    Serialize one category's records to CSV text.

    Values containing the delimiter, a quote or a newline are quoted with
    inner quotes doubled.
    """
    _check_category(category)

    output = io.StringIO()
    writer = csv.writer(output, delimiter=delimiter, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CATEGORY_HEADERS[category])
    for record in records:
        writer.writerow(_row_values(category, record))
    return output.getvalue()


def export_filename(category: Category, on: Optional[date] = None) -> str:
    """Download filename for a category, dated with the ISO date."""
    _check_category(category)
    on = on or date.today()
    return f"{CATEGORY_FILE_PREFIXES[category]}-{on.isoformat()}.csv"


def export_category(
    result: ReconciliationResult,
    category: Category,
    on: Optional[date] = None,
    delimiter: str = ",",
) -> tuple[str, str]:
    """
    Build the (filename, content) pair for one category of a result.

    Raises ExportError for an unknown or empty category.
    """
    _check_category(category)

    records = result.category(category)
    if not records:
        raise ExportError(f"No {CATEGORY_LABELS[category].lower()} found to export.")

    return export_filename(category, on), to_csv(category, records, delimiter=delimiter)
