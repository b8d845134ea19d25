# tests/test_normalizers.py

"""
Tests for raw row field extraction.
"""

import pytest

from statement_recon.core.normalizers import (
    extract_key,
    extract_amount,
    extract_status,
    normalize_status,
)


class TestExtractKey:

    def test_priority_order(self):
        row = {"transaction_reference": "TR", "reference": "R", "id": "I"}
        assert extract_key(row) == "TR"

    def test_falls_back_to_reference_then_id(self):
        assert extract_key({"reference": "R", "id": "I"}) == "R"
        assert extract_key({"id": "I"}) == "I"

    def test_blank_values_are_skipped(self):
        row = {"transaction_reference": "", "reference": "   ", "id": " I-9 "}
        assert extract_key(row) == "I-9"

    def test_absent_key(self):
        assert extract_key({"amount": "5"}) is None
        assert extract_key({"id": ""}) is None

    def test_non_string_values_converted(self):
        assert extract_key({"id": 42}) == "42"

    def test_header_case_is_significant(self):
        assert extract_key({"ID": "X"}) is None


class TestExtractAmount:

    @pytest.mark.parametrize("raw, expected", [
        ("10.50", 10.5),
        (" -3 ", -3.0),
        ("1e2", 100.0),
        ("", 0.0),
        ("abc", 0.0),
        ("$10", 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        ("1_000", 0.0),
        ("1e999", 0.0),
        (".5", 0.5),
        ("+2.", 2.0),
    ])
    def test_parsing(self, raw, expected):
        assert extract_amount({"amount": raw}) == expected

    def test_absent_amount(self):
        assert extract_amount({}) == 0.0


class TestStatus:

    def test_extract_status(self):
        assert extract_status({"status": "Completed"}) == "Completed"
        assert extract_status({}) == ""

    def test_normalize_status(self):
        assert normalize_status("  COMPLETED ") == "completed"
        assert normalize_status(None) == ""
        assert normalize_status("") == ""
