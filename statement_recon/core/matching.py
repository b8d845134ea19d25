# statement_recon/core/matching.py

"""
Core reconciliation engine.

Joins the internal ledger against the provider statement on the
transaction key and sorts every keyed record into one of four buckets:
matched, mismatched, internal-only or provider-only.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from statement_recon.models import (
    RawRow,
    Category,
    CATEGORIES,
    MatchRecord,
    ReconciliationSummary,
)
from statement_recon.core.normalizers import (
    extract_key,
    extract_amount,
    extract_status,
    normalize_status,
)

logger = logging.getLogger(__name__)

# Amounts closer than this are considered equal.
AMOUNT_TOLERANCE = 0.01


class ReconciliationResult:
    """Result of a reconciliation run."""

    def __init__(self):
        self.matched: list[MatchRecord] = []
        self.mismatched: list[MatchRecord] = []
        self.internal_only: list[RawRow] = []
        self.provider_only: list[RawRow] = []
        self.summary: Optional[ReconciliationSummary] = None

    def category(self, name: Category) -> list:
        """Return the output sequence for one category."""
        if name not in CATEGORIES:
            raise KeyError(name)
        return getattr(self, name)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "summary": self.summary.model_dump() if self.summary else None,
            "matched": [m.model_dump() for m in self.matched],
            "mismatched": [m.model_dump() for m in self.mismatched],
            "internal_only": [dict(r) for r in self.internal_only],
            "provider_only": [dict(r) for r in self.provider_only],
        }


def build_index(rows: Iterable[Mapping[str, Any]]) -> dict[str, RawRow]:
    """
    Index rows by transaction key.

    Rows without a key are skipped. A repeated key replaces the stored row
    but keeps the position of its first occurrence.
    """
    index: dict[str, RawRow] = {}
    for row in rows:
        key = extract_key(row)
        if key is None:
            continue
        index[key] = row
    return index


def compare_rows(key: str, internal: RawRow, provider: RawRow) -> MatchRecord:
    """Compare amount and status of two rows sharing a key."""
    amount_match = abs(extract_amount(internal) - extract_amount(provider)) < AMOUNT_TOLERANCE
    status_match = normalize_status(extract_status(internal)) == normalize_status(extract_status(provider))

    return MatchRecord(
        key=key,
        internal=internal,
        provider=provider,
        amount_match=amount_match,
        status_match=status_match,
        fully_matched=amount_match and status_match,
    )


def reconcile(
    internal_rows: Sequence[RawRow],
    provider_rows: Sequence[RawRow],
) -> ReconciliationResult:
    """
    Main reconciliation function.

    1. Index both sides by transaction key (last write wins)
    2. Walk the internal index: compare against provider or mark internal-only
    3. Walk the provider index: collect provider-only rows
    4. Summarize

    Empty inputs are valid and produce zero counts on that side.
    """
    result = ReconciliationResult()

    internal_index = build_index(internal_rows)
    provider_index = build_index(provider_rows)

    # ============================================
    # Internal side: matched / mismatched / internal-only
    # ============================================
    for key, internal in internal_index.items():
        provider = provider_index.get(key)
        if provider is None:
            result.internal_only.append(internal)
            continue

        record = compare_rows(key, internal, provider)
        if record.fully_matched:
            result.matched.append(record)
        else:
            result.mismatched.append(record)

    # ============================================
    # Provider side: provider-only
    # ============================================
    for key, provider in provider_index.items():
        if key not in internal_index:
            result.provider_only.append(provider)

    # ============================================
    # Calculate summary
    # ============================================
    result.summary = ReconciliationSummary(
        total_internal=len(internal_rows),
        total_provider=len(provider_rows),
        matched_count=len(result.matched),
        mismatched_count=len(result.mismatched),
        internal_only_count=len(result.internal_only),
        provider_only_count=len(result.provider_only),
    )

    logger.info(
        f"Reconciled {result.summary.total_internal} internal / "
        f"{result.summary.total_provider} provider rows: "
        f"{result.summary.matched_count} matched, "
        f"{result.summary.mismatched_count} mismatched, "
        f"{result.summary.internal_only_count} internal-only, "
        f"{result.summary.provider_only_count} provider-only"
    )

    return result
