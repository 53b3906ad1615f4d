import math

import pytest

from kdforge.output import Output


def test_default_output():
    out = Output()
    assert out.idx == 0
    assert out.dst == math.inf


def test_default_compares_farther_than_any_distance():
    out = Output()
    for d in [0, 1, 10**18, 1e300]:
        assert d < out.dst


def test_fields_can_be_updated():
    out = Output()
    out.idx = 7
    out.dst = 12
    assert out == Output(7, 12)


def test_add_then_sub_round_trip():
    a = Output(3, 2.5)
    b = Output(9, 4.25)
    assert (a + b) - b == a
    assert (a - b) + b == a


def test_add_is_componentwise():
    a = Output(3, 2.5)
    b = Output(9, 4.25)
    s = a + b
    assert s.idx == a.idx + b.idx
    assert s.dst == a.dst + b.dst


def test_sub_of_self_is_zero():
    a = Output(5, 17)
    assert a - a == Output(0, 0)


def test_scalar_multiplication_matches_repeated_add():
    a = Output(4, 1.5)
    assert 2 * a == a + a
    assert 3 * a == a + a + a


def test_scalar_multiplication_by_zero_and_one():
    a = Output(11, 6)
    assert 1 * a == a
    assert 0 * a == Output(0, 0)


def test_augmented_add_does_not_touch_other():
    a = Output(1, 1)
    b = Output(2, 3)
    a += b
    assert a == Output(1, 1) + Output(2, 3)
    assert b == Output(2, 3)


def test_add_with_non_output_raises():
    with pytest.raises(TypeError):
        Output(1, 1) + 5


def test_multiply_by_non_number_raises():
    with pytest.raises(TypeError):
        "x" * Output(1, 1)