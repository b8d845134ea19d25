# statement_recon/core/errors.py

"""
Errors raised around the reconciliation engine.

The engine itself is total; these come from parsing, orchestration and
export, and carry the message shown to the user.
"""


class ReconError(Exception):
    """Base class for user-facing reconciliation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputTooShortError(ReconError):
    """CSV text has no header + data line."""

    def __init__(self, message: str = "CSV file must have at least a header and one data row"):
        super().__init__(message)


class ReadFailureError(ReconError):
    """Underlying file could not be read or decoded."""

    def __init__(self, message: str = "Failed to read file"):
        super().__init__(message)


class EmptyDatasetError(ReconError):
    """One or both parsed datasets contain no rows."""

    def __init__(self, message: str = "One or both CSV files are empty"):
        super().__init__(message)


class ExportError(ReconError):
    """Unknown export category, or nothing in it to export."""


class MalformedInputError(ReconError):
    """CSV text could not be tokenized."""

    def __init__(self, message: str = "Failed to parse CSV file"):
        super().__init__(message)
