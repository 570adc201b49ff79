import operator

from underline import identity, reduce
from underline.core import fit_arity, positional_arity


def test_reduce_sums_with_memo():
    assert reduce([1, 2, 3], lambda memo, item: memo + item, 10) == 16


def test_reduce_passes_index_and_collection():
    items = ["a", "b"]
    steps = []

    def record(memo, item, index, coll):
        steps.append((memo, item, index, coll is items))
        return memo + item

    assert reduce(items, record, "") == "ab"
    assert steps == [("", "a", 0, True), ("a", "b", 1, True)]


def test_reduce_empty_returns_initial_memo():
    memo = object()
    assert reduce([], operator.add, memo) is memo


def test_reduce_append_reproduces_sequence():
    items = [3, 1, 2, 1]
    assert reduce(items, lambda memo, item: memo + [item], []) == items


def test_reduce_over_mapping_gets_keys():
    result = reduce({"a": 1, "b": 2}, lambda memo, value, key: memo + [(key, value)], [])
    assert result == [("a", 1), ("b", 2)]


def test_positional_arity():
    assert positional_arity(lambda: None) == 0
    assert positional_arity(lambda a, b: None) == 2
    assert positional_arity(lambda a, *rest: None) is None
    assert positional_arity(identity) == 1


def test_fit_arity_drops_surplus_arguments():
    assert fit_arity(identity)(1, 2, 3) == 1
    assert fit_arity(lambda a, b: a + b)(1, 2, 3) == 3
    assert fit_arity(lambda *args: args)(1, 2, 3) == (1, 2, 3)


def test_reduce_with_opaque_builtins():
    assert reduce([3, 7, 2], max, 0) == 7
    assert reduce([3, 7, 2], min, 5) == 2


def test_fit_arity_minimum_for_opaque_builtins():
    assert positional_arity(max) == 1
    assert positional_arity(max, default=2) == 2
    assert fit_arity(max, minimum=2)(1, 4, [1, 4]) == 4
