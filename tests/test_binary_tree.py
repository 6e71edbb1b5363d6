import pytest

from drills.binary_tree import BinaryTree

SOURCE_VALUES = [121, 21, 133, 4, 12, 74, 55, 124, 188]
FIRST_EXAMPLE = [21, 1, 33, 44, 12, 74, 55, 124, 188]


def test_level_order_of_source_example():
    tree = BinaryTree(SOURCE_VALUES)
    assert tree.level_order() == [121, 21, 133, 4, 74, 124, 188, 12, 55]


@pytest.mark.parametrize("values", [SOURCE_VALUES, FIRST_EXAMPLE, [3, 3, 1, 2, 3]])
def test_inorder_iterative_is_sorted(values):
    assert BinaryTree(values).inorder_iterative() == sorted(values)


@pytest.mark.parametrize("values", [SOURCE_VALUES, FIRST_EXAMPLE, [3, 3, 1, 2, 3]])
def test_inorder_recursive_is_sorted(values):
    assert BinaryTree(values).inorder_recursive() == sorted(values)


def test_both_inorders_agree():
    tree = BinaryTree(FIRST_EXAMPLE)
    assert tree.inorder_iterative() == tree.inorder_recursive()


def test_level_order_starts_with_first_insert():
    tree = BinaryTree(FIRST_EXAMPLE)
    order = tree.level_order()
    assert order[0] == FIRST_EXAMPLE[0]
    assert sorted(order) == sorted(FIRST_EXAMPLE)


def test_insert_one_at_a_time():
    tree = BinaryTree()
    for value in SOURCE_VALUES:
        tree.insert(value)
    assert tree.inorder_iterative() == sorted(SOURCE_VALUES)
    assert tree.root.value == SOURCE_VALUES[0]


def test_equal_values_go_left():
    tree = BinaryTree([5, 5])
    assert tree.root.left.value == 5
    assert tree.root.right is None


def test_empty_tree_traversals():
    tree = BinaryTree()
    assert tree.level_order() == []
    assert tree.inorder_iterative() == []
    assert tree.inorder_recursive() == []