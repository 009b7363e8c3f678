"""Unit tests for delimiter detection and quote-aware tokenizing."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from rate_inference.errors import FormatError
from rate_inference.table.tokenizer import detect_delimiter, parse_table, tokenize_line


class TestDetectDelimiter:

    def test_tab_wins_when_at_least_as_frequent(self):
        assert detect_delimiter("a\tb;c") == "\t"

    def test_semicolon_beats_fewer_commas(self):
        assert detect_delimiter("a;b,c;d") == ";"

    def test_comma_is_default(self):
        assert detect_delimiter("a,b,c") == ","
        assert detect_delimiter("single") == ","

    def test_comma_wins_semicolon_tie(self):
        assert detect_delimiter("a;b,c") == ","

    def test_tab_loses_to_more_commas(self):
        assert detect_delimiter("a\tb,c,d") == ","

    def test_only_first_line_is_examined(self):
        assert detect_delimiter("a,b\nc;d;e;f") == ","


class TestTokenizeLine:

    def test_escaped_quotes_inside_quoted_field(self):
        assert tokenize_line('"He said ""hi"", ok";10', ";") == ['He said "hi", ok', "10"]

    def test_delimiter_inside_quotes_is_literal(self):
        assert tokenize_line('"1,5",2', ",") == ["1,5", "2"]

    def test_cells_are_trimmed(self):
        assert tokenize_line("  a ;  b  ; c", ";") == ["a", "b", "c"]

    def test_empty_cells_are_kept(self):
        assert tokenize_line(";;x;", ";") == ["", "", "x", ""]

    def test_no_padding_or_truncation(self):
        assert tokenize_line("only", ";") == ["only"]


class TestParseTable:

    def test_basic_table(self):
        table = parse_table("a;b\n1;2\n3;4")
        assert table.headers == ("a", "b")
        assert table.rows == (("1", "2"), ("3", "4"))
        assert table.delimiter == ";"

    def test_strips_bom_crlf_and_blank_lines(self):
        table = parse_table("\ufeffx,y\r\n\r\n1,2\r\n   \r\n3,4\r\n")
        assert table.headers == ("x", "y")
        assert len(table.rows) == 2

    def test_explicit_delimiter_overrides_detection(self):
        table = parse_table("a;b|c\n1;2|3", delimiter="|")
        assert table.headers == ("a;b", "c")

    def test_ragged_rows_are_kept_as_is(self):
        table = parse_table("a,b,c\n1,2\n1,2,3,4")
        assert table.rows == (("1", "2"), ("1", "2", "3", "4"))

    def test_single_line_is_format_error(self):
        with pytest.raises(FormatError, match="header line and at least one data line"):
            parse_table("cep_inicio;cep_fim;valor")

    def test_blank_lines_do_not_count_as_data(self):
        with pytest.raises(FormatError):
            parse_table("a;b\n\n   \n")

    def test_single_column_header_is_format_error(self):
        with pytest.raises(FormatError, match="at least 2"):
            parse_table("valor\n10\n20")

    def test_empty_text_is_format_error(self):
        with pytest.raises(FormatError):
            parse_table("")
