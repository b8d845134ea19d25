# statement_recon/core/__init__.py

from statement_recon.core.matching import reconcile, ReconciliationResult, build_index, compare_rows
from statement_recon.core.normalizers import (
    extract_key,
    extract_amount,
    extract_status,
    normalize_status,
)
from statement_recon.core.csv_parser import parse_csv, decode_upload, read_csv_file
from statement_recon.core.export import to_csv, export_filename, export_category
from statement_recon.core.errors import (
    ReconError,
    InputTooShortError,
    ReadFailureError,
    EmptyDatasetError,
    ExportError,
    MalformedInputError,
)

__all__ = [
    "reconcile",
    "ReconciliationResult",
    "build_index",
    "compare_rows",
    "extract_key",
    "extract_amount",
    "extract_status",
    "normalize_status",
    "parse_csv",
    "decode_upload",
    "read_csv_file",
    "to_csv",
    "export_filename",
    "export_category",
    "ReconError",
    "InputTooShortError",
    "ReadFailureError",
    "EmptyDatasetError",
    "ExportError",
    "MalformedInputError",
]
