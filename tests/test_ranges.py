import pytest

from underline import ArityError, RangeSpec, range, range_of


@pytest.mark.parametrize(
    "args, expected",
    [
        ((5,), [0, 1, 2, 3, 4]),
        ((2, 5), [2, 3, 4]),
        ((5, 2, -1), [5, 4, 3]),
        ((5, 2), []),
        ((0,), []),
        ((-3,), []),
        ((2, 5, -1), []),
        ((3, 3), []),
        ((0, 10, 3), [0, 3, 6, 9]),
        ((0, 9, 3), [0, 3, 6]),
        ((1, 11, 5), [1, 6]),
        ((0, -10, -5), [0, -5]),
        ((-2, 2), [-2, -1, 0, 1]),
    ],
)
def test_range(args, expected):
    assert range(*args) == expected


def test_range_with_float_step():
    assert range(0, 2, 0.5) == [0, 0.5, 1.0, 1.5]


@pytest.mark.parametrize("args", [(), (1, 2, 3, 4)])
def test_range_arity(args):
    with pytest.raises(ArityError, match=f"called with {len(args)} arguments"):
        range(*args)


def test_arity_error_is_type_error():
    assert issubclass(ArityError, TypeError)


def test_range_zero_step():
    with pytest.raises(ValueError):
        range(0, 5, 0)


def test_range_spec_defaults():
    spec = RangeSpec.from_args(7)
    assert spec == RangeSpec(end=7, start=0, step=1)
    assert RangeSpec.from_args(None, 3, None) == RangeSpec(end=3)


def test_range_spec_length():
    assert RangeSpec(end=10, start=0, step=3).length == 4
    assert len(RangeSpec(end=2, start=5)) == 0


def test_range_accepts_spec():
    spec = RangeSpec(end=2, start=5, step=-1)
    assert range(spec) == range_of(spec) == [5, 4, 3]
