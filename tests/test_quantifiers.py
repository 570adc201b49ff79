import pytest

from underline import any, every, none


@pytest.mark.parametrize("quantifier, expected", [(every, True), (none, True), (any, False)])
def test_empty_sequence_identities(quantifier, expected):
    assert quantifier([], lambda x: True) is expected
    assert quantifier([], lambda x: False) is expected


def test_every():
    assert every([2, 4, 6], lambda x: x % 2 == 0)
    assert not every([2, 3, 6], lambda x: x % 2 == 0)


def test_none():
    assert none([1, 3], lambda x: x % 2 == 0)
    assert not none([1, 2], lambda x: x % 2 == 0)


def test_any():
    assert any([1, 2], lambda x: x % 2 == 0)
    assert not any([1, 3], lambda x: x % 2 == 0)


def test_default_predicate_is_truthiness():
    assert every([1, "a", [0]])
    assert not every([1, 0])
    assert any([0, None, 5])
    assert none([0, "", None])


@pytest.mark.parametrize(
    "quantifier, predicate, stop_at",
    [
        (every, lambda x: x < 2, 2),
        (none, lambda x: x == 1, 1),
        (any, lambda x: x == 1, 1),
    ],
)
def test_quantifiers_short_circuit(quantifier, predicate, stop_at):
    visited = []

    def tracking(x):
        visited.append(x)
        return predicate(x)

    quantifier([0, 1, 2, 3, 4], tracking)
    assert visited == list(range(stop_at + 1))


def test_predicate_receives_index_and_collection():
    items = ["a", "b"]
    assert every(items, lambda x, i, coll: coll[i] == x)


def test_quantifiers_over_mapping_values():
    assert every({"a": 1, "b": 2}, lambda v: v > 0)
    assert any({"a": 1, "b": 2}, lambda v, k: k == "b")
