import pytest

from dsakit.bst import (
    BSTIterator,
    bst_lowest_common_ancestor,
    ceil,
    delete,
    floor,
    from_preorder,
    inorder_successor,
    insert,
    is_valid_bst,
    kth_smallest,
    search,
)
from dsakit.properties import lowest_common_ancestor
from dsakit.tree import TreeNode, inorder, preorder

VALUES = [50, 30, 70, 20, 40, 60, 80]


def _bst(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


@pytest.mark.parametrize(
    "values", [VALUES, [5, 4, 3, 2, 1], [1, 2, 3], [7, 3, 7, 3, 9], [42]]
)
def test_insert_keeps_inorder_sorted(values):
    assert list(inorder(_bst(values))) == sorted(values)


def test_insert_into_empty_tree():
    root = insert(None, 13)
    assert root.value == 13
    assert root.left is None and root.right is None


def test_search_finds_every_value():
    root = _bst(VALUES)
    for value in VALUES:
        assert search(root, value).value == value


def test_search_missing():
    assert search(_bst(VALUES), 45) is None
    assert search(None, 45) is None


def test_ceil():
    root = _bst(VALUES)
    assert ceil(root, 40) == 40
    assert ceil(root, 45) == 50
    assert ceil(root, 1) == min(VALUES)
    assert ceil(root, 1000) is None


def test_floor():
    root = _bst(VALUES)
    assert floor(root, 60) == 60
    assert floor(root, 45) == 40
    assert floor(root, 1000) == max(VALUES)
    assert floor(root, 1) is None


@pytest.mark.parametrize("key", VALUES)
def test_delete_each_value(key):
    root = delete(_bst(VALUES), key)
    remaining = list(VALUES)
    remaining.remove(key)
    assert list(inorder(root)) == sorted(remaining)
    assert is_valid_bst(root)


def test_delete_missing_key_leaves_tree_alone():
    root = delete(_bst(VALUES), 45)
    assert list(inorder(root)) == sorted(VALUES)


def test_delete_from_empty_tree():
    assert delete(None, 5) is None


@pytest.mark.parametrize("k", range(1, len(VALUES) + 1))
def test_kth_smallest(k):
    assert kth_smallest(_bst(VALUES), k) == sorted(VALUES)[k - 1]


@pytest.mark.parametrize("k", [0, len(VALUES) + 1])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest(_bst(VALUES), k)


def test_inserted_tree_is_valid():
    assert is_valid_bst(_bst(VALUES))
    assert is_valid_bst(None)


def test_duplicates_are_not_a_valid_bst():
    assert not is_valid_bst(_bst([5, 5]))


def test_deep_violation_is_detected():
    root = TreeNode(10, TreeNode(5, None, TreeNode(15)), TreeNode(20))
    assert not is_valid_bst(root)


def test_bst_lowest_common_ancestor_agrees_with_general_search():
    root = _bst(VALUES)
    nodes = [search(root, value) for value in VALUES]
    for p in nodes:
        for q in nodes:
            assert bst_lowest_common_ancestor(root, p, q) is lowest_common_ancestor(root, p, q)


@pytest.mark.parametrize("values", [VALUES, [8, 5, 1, 7, 10, 12], [3, 2, 1]])
def test_from_preorder_round_trip(values):
    order = list(preorder(_bst(values)))
    root = from_preorder(order)
    assert list(preorder(root)) == order
    assert is_valid_bst(root)


def test_from_empty_preorder():
    assert from_preorder([]) is None


def test_inorder_successor():
    root = _bst(VALUES)
    ordered = sorted(VALUES)
    for current, following in zip(ordered, ordered[1:]):
        assert inorder_successor(root, search(root, current)).value == following
    assert inorder_successor(root, search(root, ordered[-1])) is None


def test_iterator_yields_sorted_values():
    assert list(BSTIterator(_bst(VALUES))) == sorted(VALUES)


def test_iterator_has_next_and_exhaustion():
    iterator = BSTIterator(_bst([2, 1]))
    assert iterator.has_next()
    assert next(iterator) == 1
    assert next(iterator) == 2
    assert not iterator.has_next()
    with pytest.raises(StopIteration):
        next(iterator)


def test_iterator_over_empty_tree():
    iterator = BSTIterator(None)
    assert not iterator.has_next()
    assert list(iterator) == []