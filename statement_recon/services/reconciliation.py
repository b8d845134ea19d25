# statement_recon/services/reconciliation.py

"""
Orchestration between CSV input and the reconciliation engine.

Decodes and parses both uploads, rejects empty datasets, then runs the
engine. Parser failures surface here and never reach the engine.
"""

import logging
from typing import Optional

from statement_recon.config import Settings, get_settings
from statement_recon.core.csv_parser import decode_upload, parse_csv
from statement_recon.core.errors import EmptyDatasetError
from statement_recon.core.matching import reconcile, ReconciliationResult
from statement_recon.models import RawRow

logger = logging.getLogger(__name__)


def load_rows(data: bytes, settings: Optional[Settings] = None) -> list[RawRow]:
    """Decode and parse one uploaded CSV file."""
    settings = settings or get_settings()
    text = decode_upload(data, settings.upload_encoding)
    return parse_csv(text, delimiter=settings.csv_delimiter)


def reconcile_rows(
    internal_rows: list[RawRow],
    provider_rows: list[RawRow],
) -> ReconciliationResult:
    """Run the engine after checking both sides have data."""
    if not internal_rows or not provider_rows:
        raise EmptyDatasetError()
    return reconcile(internal_rows, provider_rows)


def run_reconciliation(
    internal_data: bytes,
    provider_data: bytes,
    settings: Optional[Settings] = None,
) -> ReconciliationResult:
    """
    Full pipeline for two uploaded files.

    Raises ReconError subclasses for unreadable, too short or empty input.
    """
    internal_rows = load_rows(internal_data, settings)
    provider_rows = load_rows(provider_data, settings)

    logger.info(f"Parsed {len(internal_rows)} internal and {len(provider_rows)} provider rows")

    return reconcile_rows(internal_rows, provider_rows)
