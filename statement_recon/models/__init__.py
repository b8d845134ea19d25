# statement_recon/models/__init__.py

from statement_recon.models.transaction import (
    RawRow,
    Side,
    KEY_FIELDS,
    AMOUNT_FIELD,
    STATUS_FIELD,
    DATE_FIELD,
)
from statement_recon.models.match import (
    MatchRecord,
    Category,
    CATEGORIES,
    ReconciliationSummary,
)

__all__ = [
    # Transaction
    "RawRow",
    "Side",
    "KEY_FIELDS",
    "AMOUNT_FIELD",
    "STATUS_FIELD",
    "DATE_FIELD",
    # Match
    "MatchRecord",
    "Category",
    "CATEGORIES",
    "ReconciliationSummary",
]
