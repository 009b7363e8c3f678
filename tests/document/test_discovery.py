"""Tests for record-array discovery and candidate scoring."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from rate_inference.document.discovery import find_array_candidates, rank_candidates, score_candidate
from rate_inference.document.patterns import CARRIER_NAME, PRICE
from rate_inference.document.schema import ArrayCandidate, FieldDescriptor
from rate_inference.document.values import ValueKind


def _field(key, role=None):
    return FieldDescriptor(path=key, key=key, value_kind=ValueKind.STRING, detected_role=role)


def _nest(levels: int, leaf):
    """Wrap *leaf* in *levels* single-key objects: {"k1": {"k2": ... leaf}}."""
    value = leaf
    for i in range(levels, 0, -1):
        value = {f"k{i}": value}
    return value


class TestScoring:

    def test_price_and_name_bonuses(self):
        fields = [_field("a", CARRIER_NAME), _field("b", PRICE)]
        assert score_candidate(fields, 1) == 2 * 2 + 3 + 2

    def test_multi_record_bonus(self):
        assert score_candidate([_field("a", PRICE)], 2) == 2 + 3 + 1

    def test_duplicate_roles_count_once(self):
        fields = [_field("a", CARRIER_NAME), _field("b", CARRIER_NAME)]
        assert score_candidate(fields, 1) == 2 + 2

    def test_no_roles_single_record(self):
        assert score_candidate([_field("a")], 1) == 0

    def test_rank_is_stable_on_ties(self):
        first = ArrayCandidate(path="a", length=1, fields=(), score=3)
        second = ArrayCandidate(path="b", length=1, fields=(), score=5)
        third = ArrayCandidate(path="c", length=1, fields=(), score=3)
        assert [c.path for c in rank_candidates([first, second, third])] == ["b", "a", "c"]


class TestFindArrayCandidates:

    def test_single_candidate_discovery(self):
        document = {"status": "ok", "data": {"options": [{"name": "PAC", "price": 20}, {"name": "SEDEX", "price": 35}]}}
        candidates = find_array_candidates(document)
        assert len(candidates) == 1
        candidate = candidates[0]
        assert candidate.path == "data.options"
        assert candidate.length == 2
        assert candidate.field_keys() == ["name", "price"]
        assert candidate.score == 10
        assert [f.path for f in candidate.fields] == ["data.options.name", "data.options.price"]
        assert [f.depth for f in candidate.fields] == [3, 3]

    def test_nested_candidates(self, nested_quote):
        candidates = find_array_candidates(nested_quote)
        assert [(c.path, c.score) for c in candidates] == [("request.items", 0), ("data.quotes", 16)]

    def test_root_array(self):
        candidates = find_array_candidates([{"transportadora": "Jadlog"}])
        assert candidates[0].path == ""

    def test_array_of_scalars_is_not_a_candidate(self):
        assert not find_array_candidates({"list": [1, 2, 3], "tags": ["a", "b"]})

    def test_non_record_items_are_ignored_in_length(self):
        candidates = find_array_candidates({"opts": [1, {"price": 2}, None, {"price": 3}]})
        assert candidates[0].length == 2

    def test_scalar_root(self):
        assert not find_array_candidates("just a string")
        assert not find_array_candidates(None)

    def test_array_at_max_depth_is_found(self):
        document = _nest(5, [{"price": 1}])
        assert [c.path for c in find_array_candidates(document)] == ["k1.k2.k3.k4.k5"]

    def test_array_beyond_max_depth_is_not_found(self):
        assert not find_array_candidates(_nest(6, [{"price": 1}]))

    def test_arrays_inside_array_elements(self, packages_quote):
        candidates = find_array_candidates(packages_quote)
        assert [(c.path, c.score) for c in candidates] == [("packages", 1), ("packages[].quotations", 10)]
        # First element's array is the representative
        assert candidates[1].length == 2

    def test_only_first_elements_are_fanned_out(self):
        items = [{"sub": [{"price": i}]} if i == 3 else {"x": i} for i in range(5)]
        candidates = find_array_candidates({"items": items})
        assert [c.path for c in candidates] == ["items"]

    def test_discovery_is_idempotent(self, nested_quote):
        assert find_array_candidates(nested_quote) == find_array_candidates(nested_quote)
