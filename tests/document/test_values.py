"""Unit tests for document value classification, coercion and parsing."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import sys

import pytest

from rate_inference.document.values import (
    ValueKind,
    coerce_float,
    coerce_int,
    display_text,
    is_numeric_like,
    parse_document,
    value_kind,
)
from rate_inference.errors import DocumentParseError, DocumentTooLargeError, RateInferenceError


class TestValueKind:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.NUMBER),
            (2.5, ValueKind.NUMBER),
            ("x", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
        ],
    )
    def test_classification(self, value, expected):
        assert value_kind(value) is expected

    def test_non_document_value_rejected(self):
        with pytest.raises(TypeError):
            value_kind({1, 2})

    def test_numeric_like(self):
        assert is_numeric_like(3)
        assert is_numeric_like("32.50")
        assert is_numeric_like(" 4 dias")
        assert not is_numeric_like("quatro")
        assert not is_numeric_like(True)
        assert not is_numeric_like(None)


class TestCoercion:

    def test_float_from_number_and_string(self):
        assert coerce_float(31.4) == pytest.approx(31.4)
        assert coerce_float("32.50") == pytest.approx(32.5)
        assert coerce_float("19.9 BRL") == pytest.approx(19.9)

    def test_float_fallback_zero(self):
        assert coerce_float(None) == 0.0
        assert coerce_float("grátis") == 0.0
        assert coerce_float({"value": 3}) == 0.0
        assert coerce_float(True) == 0.0
        assert coerce_float(float("nan")) == 0.0

    def test_int_truncates(self):
        assert coerce_int(4.8) == 4
        assert coerce_int("4") == 4
        assert coerce_int("3 a 5 dias") == 3
        assert coerce_int("2.9") == 2

    def test_int_fallback_zero(self):
        assert coerce_int("") == 0
        assert coerce_int([1]) == 0

    def test_display_text(self):
        assert display_text("Jadlog", "—") == "Jadlog"
        assert display_text(11, "—") == "11"
        assert display_text(1.5, "—") == "1.5"
        assert display_text(None, "—") == "—"
        assert display_text("", "x") == "x"
        assert display_text(0, "custom_0") == "custom_0"
        assert display_text(2.0, "—") == "2"

    def test_integers_beyond_float_range(self):
        huge = 10**400
        assert coerce_float(huge) == 0.0
        assert coerce_int(huge) == huge
        assert coerce_int(float("inf")) == 0
        assert display_text(huge, "—") == "1" + "0" * 400


class TestParseDocument:

    def test_valid_document(self):
        assert parse_document('{"options": [1, 2]}') == {"options": [1, 2]}

    def test_scalar_root_is_valid(self):
        assert parse_document("42") == 42

    def test_bom_is_ignored(self):
        assert parse_document('\ufeff[{"a": 1}]') == [{"a": 1}]

    def test_malformed_carries_parser_message(self):
        with pytest.raises(DocumentParseError) as excinfo:
            parse_document('{"options": [1, 2,]')
        error = excinfo.value
        assert str(error).startswith("Invalid JSON:")
        assert error.parser_message
        assert error.line == 1
        assert error.column is not None

    def test_parse_error_is_library_error(self):
        with pytest.raises(RateInferenceError):
            parse_document("not json")

    def test_too_large(self):
        with pytest.raises(DocumentTooLargeError):
            parse_document('{"a": "' + "x" * 64 + '"}', max_bytes=16)

    def test_too_large_is_a_parse_error(self):
        with pytest.raises(DocumentParseError):
            parse_document("[" + "1," * 20 + "1]", max_bytes=8)

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="interpreter has no integer digit limit")
    def test_integer_past_digit_limit_is_parse_error(self):
        with pytest.raises(DocumentParseError) as excinfo:
            parse_document('{"options": [{"price": 1' + "0" * 5000 + "}]}")
        assert str(excinfo.value).startswith("Invalid JSON:")
        assert excinfo.value.line is None
