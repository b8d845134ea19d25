# statement_recon/models/transaction.py

from typing import Literal

# One parsed CSV record: header name -> cell text, no coercion.
RawRow = dict[str, str]

Side = Literal["internal", "provider"]

# Fields tried, in order, for the transaction key.
KEY_FIELDS: tuple[str, ...] = ("transaction_reference", "reference", "id")

AMOUNT_FIELD = "amount"
STATUS_FIELD = "status"
DATE_FIELD = "date"
