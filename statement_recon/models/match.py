# statement_recon/models/match.py

from typing import Any, Literal
from pydantic import BaseModel, Field


# ============================================
# Match Record
# ============================================

class MatchRecord(BaseModel):
    """A transaction key present on both sides, with its field comparison."""

    key: str
    internal: dict[str, Any]
    provider: dict[str, Any]
    amount_match: bool
    status_match: bool
    fully_matched: bool


# ============================================
# Output Categories
# ============================================

Category = Literal["matched", "mismatched", "internal_only", "provider_only"]

CATEGORIES: tuple[Category, ...] = ("matched", "mismatched", "internal_only", "provider_only")


class ReconciliationSummary(BaseModel):
    """Counts for a reconciliation run."""

    total_internal: int = Field(ge=0, description="Internal rows parsed, including keyless rows")
    total_provider: int = Field(ge=0, description="Provider rows parsed, including keyless rows")
    matched_count: int = Field(ge=0)
    mismatched_count: int = Field(ge=0)
    internal_only_count: int = Field(ge=0)
    provider_only_count: int = Field(ge=0)
