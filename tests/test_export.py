# tests/test_export.py

"""
Tests for per-category CSV export.
"""

from datetime import date

import pytest

from statement_recon.core.errors import ExportError
from statement_recon.core.export import to_csv, export_filename, export_category
from statement_recon.core.matching import reconcile


EXPORT_DAY = date(2025, 1, 15)


@pytest.fixture
def result():
    internal = [
        {"id": "T1", "amount": "10", "status": "Completed", "date": "2025-01-15"},
        {"id": "T2", "amount": "10.00", "status": "Completed", "date": "2025-01-15"},
        {"id": "T3", "amount": "7.5", "status": "pending", "date": "2025-01-16"},
    ]
    provider = [
        {"id": "T1", "amount": "10.00", "status": "completed"},
        {"id": "T2", "amount": "10.50", "status": "Failed"},
        {"reference": "P9", "amount": "abc", "status": "settled", "date": "2025-01-17"},
    ]
    return reconcile(internal, provider)


class TestExportFilename:

    @pytest.mark.parametrize("category, expected", [
        ("matched", "perfect-matches-2025-01-15.csv"),
        ("mismatched", "mismatched-transactions-2025-01-15.csv"),
        ("internal_only", "internal-only-2025-01-15.csv"),
        ("provider_only", "provider-only-2025-01-15.csv"),
    ])
    def test_pattern(self, category, expected):
        assert export_filename(category, EXPORT_DAY) == expected

    def test_defaults_to_today(self):
        assert export_filename("matched").endswith(f"{date.today().isoformat()}.csv")

    def test_invalid_category(self):
        with pytest.raises(ExportError) as exc:
            export_filename("everything", EXPORT_DAY)

        assert exc.value.message == "Invalid export type"


class TestToCsv:

    def test_matched(self, result):
        content = to_csv("matched", result.matched)

        assert content == (
            "Transaction Reference,Amount,Status,Date,Match Type\n"
            "T1,10.00,Completed,2025-01-15,Perfect Match\n"
        )

    def test_mismatched(self, result):
        content = to_csv("mismatched", result.mismatched)

        assert content == (
            "Transaction Reference,Internal Amount,Provider Amount,Internal Status,"
            "Provider Status,Amount Match,Status Match\n"
            "T2,10.00,10.50,Completed,Failed,No,No\n"
        )

    def test_internal_only(self, result):
        content = to_csv("internal_only", result.internal_only)

        assert content.splitlines()[1] == "T3,7.50,pending,2025-01-16,Internal System Only"

    def test_provider_only_uses_fallback_key_and_zero_amount(self, result):
        content = to_csv("provider_only", result.provider_only)

        assert content.splitlines()[1] == "P9,0.00,settled,2025-01-17,Provider Statement Only"

    def test_escaping(self):
        rows = [{"id": "T9", "amount": "1", "status": 'Done, "final"', "date": "line1\nline2"}]

        content = to_csv("internal_only", rows)

        assert content == (
            "Transaction Reference,Amount,Status,Date,Source\n"
            'T9,1.00,"Done, ""final""","line1\nline2",Internal System Only\n'
        )

    def test_custom_delimiter(self):
        rows = [{"id": "T9", "amount": "1", "status": "a;b"}]

        content = to_csv("internal_only", rows, delimiter=";")

        assert content.splitlines()[1] == 'T9;1.00;"a;b";;Internal System Only'


class TestExportCategory:

    def test_returns_filename_and_content(self, result):
        filename, content = export_category(result, "mismatched", on=EXPORT_DAY)

        assert filename == "mismatched-transactions-2025-01-15.csv"
        assert content.startswith("Transaction Reference,Internal Amount")

    def test_empty_category(self):
        empty = reconcile([{"id": "A"}], [{"id": "A"}])

        with pytest.raises(ExportError) as exc:
            export_category(empty, "mismatched", on=EXPORT_DAY)

        assert exc.value.message == "No mismatched transactions found to export."

    def test_invalid_category(self, result):
        with pytest.raises(ExportError):
            export_category(result, "nope")
