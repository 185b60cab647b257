import random

from cpkit.bst import BinarySearchTree

SOURCE_VALUES = [50, 40, 80, 30, 45, 70, 90, 20, 48, 88, 100]


def test_inorder_is_sorted():
    tree = BinarySearchTree(SOURCE_VALUES)
    assert tree.inorder() == sorted(SOURCE_VALUES)
    assert len(tree) == len(SOURCE_VALUES)


def test_preorder_starts_with_root_and_holds_all_values():
    tree = BinarySearchTree(SOURCE_VALUES)
    pre = tree.preorder()
    assert pre[0] == SOURCE_VALUES[0]
    assert sorted(pre) == tree.inorder()


def test_preorder_round_trip_rebuilds_same_tree():
    tree = BinarySearchTree(SOURCE_VALUES)
    rebuilt = BinarySearchTree(tree.preorder())
    assert rebuilt.preorder() == tree.preorder()
    assert rebuilt.inorder() == tree.inorder()


def test_preorder_left_subtree_before_right():
    tree = BinarySearchTree(SOURCE_VALUES)
    pre = tree.preorder()
    root = pre[0]
    rest = pre[1:]
    smaller = [v for v in rest if v < root]
    assert rest[: len(smaller)] == smaller


def test_duplicates_are_kept():
    values = [5, 3, 5, 7, 3]
    tree = BinarySearchTree(values)
    assert tree.inorder() == sorted(values)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.preorder() == []
    assert len(tree) == 0


def test_incremental_insert_random():
    rng = random.Random(7)
    values = [rng.randint(-100, 100) for _ in range(200)]
    tree = BinarySearchTree()
    for v in values:
        tree.insert(v)
    assert tree.inorder() == sorted(values)
    assert sorted(tree.preorder()) == sorted(values)