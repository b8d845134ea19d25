# statement_recon/core/normalizers.py

"""
Field extraction for raw CSV rows.

Absent and empty values are treated the same everywhere: both fall back
to the default.
"""

import logging
import math
import re
from typing import Any, Mapping, Optional

from statement_recon.models import KEY_FIELDS, AMOUNT_FIELD, STATUS_FIELD

logger = logging.getLogger(__name__)

# Plain decimal, optional sign and exponent. No underscores, no nan/inf.
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def extract_key(row: Mapping[str, Any]) -> Optional[str]:
    """
    Extract the transaction key used to join both sides.

    Tries transaction_reference, then reference, then id. The first value
    that is non-empty after trimming wins. Returns None when all three are
    absent or blank.
    """
    for field in KEY_FIELDS:
        candidate = _text(row.get(field)).strip()
        if candidate:
            return candidate
    return None


def extract_amount(row: Mapping[str, Any]) -> float:
    """
    Parse the amount field as a float.

    Absent, blank or unparsable amounts become 0.0.
    """
    raw = _text(row.get(AMOUNT_FIELD)).strip()
    if not raw:
        return 0.0

    if not _DECIMAL.fullmatch(raw):
        logger.debug(f"Unparsable amount {raw!r}, treating as 0")
        return 0.0

    amount = float(raw)
    if not math.isfinite(amount):
        logger.debug(f"Out of range amount {raw!r}, treating as 0")
        return 0.0

    return amount


def extract_status(row: Mapping[str, Any]) -> str:
    """Raw status text, empty string when absent."""
    return _text(row.get(STATUS_FIELD))


def normalize_status(status: Optional[str]) -> str:
    """Case-fold and trim a status for comparison."""
    if not status:
        return ""
    return status.strip().casefold()
