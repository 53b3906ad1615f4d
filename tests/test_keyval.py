import pytest

from kdforge.keyval import (
    KeyVal,
    default_less,
    default_swap,
    default_swap_if,
)

DIM = 2


def _points(rows):
    return [list(r) for r in rows]


STEP0_ARR = [
    (10, 15), (46, 63), (68, 21), (40, 33), (25, 54),
    (15, 43), (44, 58), (45, 40), (62, 69), (53, 67),
]
STEP0_ANS = [
    (10, 15), (15, 43), (25, 54), (40, 33), (44, 58),
    (45, 40), (46, 63), (53, 67), (62, 69), (68, 21),
]
STEP0_TAG = [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]

STEP1_ARR = STEP0_ANS
STEP1_ANS = [
    (46, 63), (10, 15), (40, 33), (45, 40), (15, 43),
    (25, 54), (44, 58), (68, 21), (53, 67), (62, 69),
]
STEP1_TAG = [1, 1, 1, 1, 1, 1, 0, 2, 2, 2]

STEP2_ARR = STEP1_ANS
STEP2_ANS = [
    (46, 63), (15, 43), (53, 67), (10, 15), (40, 33),
    (45, 40), (25, 54), (44, 58), (68, 21), (62, 69),
]
STEP2_TAG = [0, 3, 3, 3, 1, 4, 4, 5, 2, 6]


@pytest.mark.parametrize(
    "lvl, arr, tag, ans",
    [
        (0, STEP0_ARR, STEP0_TAG, STEP0_ANS),
        (1, STEP1_ARR, STEP1_TAG, STEP1_ANS),
        (2, STEP2_ARR, STEP2_TAG, STEP2_ANS),
    ],
)
def test_sort_by_step(lvl, arr, tag, ans):
    points = _points(arr)
    tags = list(tag)
    kv = KeyVal(tags, points, lvl % DIM)
    kv.sort()
    assert points == _points(ans)
    assert tags == sorted(tag)


def test_sort_keeps_pairs_together():
    points = _points(STEP1_ARR)
    tags = list(STEP1_TAG)
    before = sorted(zip(STEP1_TAG, map(tuple, STEP1_ARR)))
    KeyVal(tags, points, 1).sort()
    after = sorted(zip(tags, map(tuple, points)))
    assert before == after


def test_sort_result_is_ordered_under_less():
    points = _points(STEP2_ARR)
    tags = list(STEP2_TAG)
    kv = KeyVal(tags, points, 0)
    kv.sort()
    assert all(not kv.less(i + 1, i) for i in range(len(kv) - 1))


def test_less_orders_by_key_then_axis():
    kv = KeyVal([1, 1, 0], [[5, 9], [3, 20], [100, 100]], 0)
    assert kv.less(1, 0)
    assert not kv.less(0, 1)
    assert kv.less(2, 0)
    assert not kv.less(0, 2)
    assert not kv.less(0, 0)
    kv.axis = 1
    assert kv.less(0, 1)


def test_swap_and_getitem():
    tags = [0, 1]
    points = [[1, 2], [3, 4]]
    kv = KeyVal(tags, points, 0)
    kv.swap(0, 1)
    assert kv[0] == (1, [3, 4])
    assert kv[1] == (0, [1, 2])
    assert tags == [1, 0]
    assert len(kv) == 2


def test_swap_if():
    tags = [0, 1]
    points = [[1, 2], [3, 4]]
    kv = KeyVal(tags, points, 0)
    kv.swap_if(False, 0, 1)
    assert tags == [0, 1] and points == [[1, 2], [3, 4]]
    kv.swap_if(True, 0, 1)
    assert tags == [1, 0] and points == [[3, 4], [1, 2]]


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        KeyVal([0, 1], [[1, 2]], 0)


def test_negative_axis_rejected():
    with pytest.raises(ValueError):
        KeyVal([0], [[1, 2]], -1)


def test_default_helpers():
    seq = [3, 1, 2]
    assert default_less(seq, 1, 0)
    assert not default_less(seq, 0, 1)
    default_swap(seq, 0, 1)
    assert seq == [1, 3, 2]
    default_swap_if(False, seq, 1, 2)
    assert seq == [1, 3, 2]
    default_swap_if(True, seq, 1, 2)
    assert seq == [1, 2, 3]