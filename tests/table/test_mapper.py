"""Unit tests for header-to-field auto-mapping."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from itertools import combinations

from rate_inference.normalize import normalize_header
from rate_inference.table.mapper import auto_map_columns
from rate_inference.table.patterns import COLUMN_ALIASES


class TestAliasMapping:

    def test_portuguese_short_aliases(self):
        mapping = auto_map_columns(["cep_de", "cep_ate", "valor"])
        assert mapping.bound() == {"range_start": 0, "range_end": 1, "price": 2}

    def test_raw_headers_are_normalized_first(self):
        mapping = auto_map_columns(["CEP Início", "CEP Fim", "Peso Máx", "Preço", "Prazo (dias)"])
        assert mapping.range_start == 0
        assert mapping.range_end == 1
        assert mapping.weight_max == 2
        assert mapping.price == 3
        assert mapping.lead_time == 4
        assert mapping.weight_min is None

    def test_english_headers(self):
        mapping = auto_map_columns(["zip_from", "zip_to", "weight_min", "weight_max", "price", "delivery_days"])
        assert mapping.bound() == {
            "range_start": 0,
            "range_end": 1,
            "weight_min": 2,
            "weight_max": 3,
            "price": 4,
            "lead_time": 5,
        }

    def test_field_name_itself_matches(self):
        mapping = auto_map_columns(["Range Start", "rangeend", "x"])
        assert mapping.range_start == 0
        assert mapping.range_end == 1

    def test_first_matching_column_wins(self):
        mapping = auto_map_columns(["valor", "preco", "cep_de", "cep_ate"])
        assert mapping.price == 0

    def test_unmatched_fields_stay_unbound(self):
        mapping = auto_map_columns(["foo", "bar"])
        assert mapping.bound() == {}

    def test_alias_sets_are_disjoint(self):
        for (_, left), (_, right) in combinations(COLUMN_ALIASES.items(), 2):
            assert not left & right

    def test_aliases_are_already_normalized(self):
        for aliases in COLUMN_ALIASES.values():
            for alias in aliases:
                assert normalize_header(alias) == alias


class TestPositionalFallback:

    def test_faixa_columns(self):
        mapping = auto_map_columns(["faixa1", "faixa2"])
        assert mapping.range_start == 0
        assert mapping.range_end == 1

    def test_skips_non_postal_headers_and_stops_after_two(self):
        mapping = auto_map_columns(["regiao", "CEP A", "valor", "CEP B", "zip c"])
        assert mapping.range_start == 1
        assert mapping.range_end == 3
        assert mapping.price == 2

    def test_single_postal_header_binds_start_only(self):
        mapping = auto_map_columns(["zip code", "valor"])
        assert mapping.range_start == 0
        assert mapping.range_end is None

    def test_not_applied_when_one_range_field_matched(self):
        mapping = auto_map_columns(["cep_de", "faixa_x", "faixa_y"])
        assert mapping.range_start == 0
        assert mapping.range_end is None

    def test_not_applied_with_single_header(self):
        mapping = auto_map_columns(["faixa"])
        assert mapping.bound() == {}
