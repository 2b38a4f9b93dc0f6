import pytest

from eventsched.dsa.segment_tree import SegmentTreeScheduler

ARRAY = [5, 3, 8, 6, 1, 4, 7]


def test_tree_layout():
    tree = SegmentTreeScheduler(ARRAY).tree
    n = len(ARRAY)
    assert len(tree) == 2 * n
    assert tree[n:] == ARRAY
    assert tree[1] == sum(ARRAY)


def test_all_ranges_match_slice_sums():
    st = SegmentTreeScheduler(ARRAY)
    for left in range(len(ARRAY) + 1):
        for right in range(left, len(ARRAY) + 1):
            assert st.range_query(left, right) == sum(ARRAY[left:right])


def test_update_changes_queries():
    st = SegmentTreeScheduler(ARRAY)
    st.update(2, 100)
    expected = list(ARRAY)
    expected[2] = 100
    assert st.range_query(0, len(expected)) == sum(expected)
    assert st.range_query(2, 3) == 100
    assert st.range_query(3, len(expected)) == sum(expected[3:])


def test_empty_range_is_zero():
    st = SegmentTreeScheduler(ARRAY)
    assert st.range_query(3, 3) == 0


@pytest.mark.parametrize("index", [-1, len(ARRAY)])
def test_update_out_of_range(index):
    with pytest.raises(IndexError):
        SegmentTreeScheduler(ARRAY).update(index, 1)


def test_query_out_of_range():
    st = SegmentTreeScheduler(ARRAY)
    with pytest.raises(IndexError):
        st.range_query(0, len(ARRAY) + 1)
    with pytest.raises(IndexError):
        st.range_query(-1, 2)