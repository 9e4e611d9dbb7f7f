"""Binary search tree drills: insertion, search, deletion and list conversions.

Trees are made of :class:`dsadrills.binary_tree.TreeNode`.  Values equal to a
node go into its right subtree.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from dsadrills.binary_tree import TreeNode


def insert(root: TreeNode | None, value: int) -> TreeNode:
    """Insert ``value`` and return the root of the tree."""
    node = TreeNode(value)
    if root is None:
        return node
    current = root
    while True:
        if current.val > value:
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_bst(values: Iterable[int]) -> TreeNode | None:
    """Build a tree by inserting ``values`` one after another."""
    root: TreeNode | None = None
    for value in values:
        root = insert(root, value)
    return root


def minimum(root: TreeNode | None) -> int:
    """Return the smallest value in the tree."""
    if root is None:
        raise ValueError("minimum of an empty tree")
    while root.left is not None:
        root = root.left
    return root.val


def maximum(root: TreeNode | None) -> int:
    """Return the largest value in the tree."""
    if root is None:
        raise ValueError("maximum of an empty tree")
    while root.right is not None:
        root = root.right
    return root.val


def contains(root: TreeNode | None, target: int) -> bool:
    """Return True if ``target`` is stored in the tree."""
    while root is not None:
        if root.val == target:
            return True
        root = root.left if root.val > target else root.right
    return False


def delete(root: TreeNode | None, target: int) -> TreeNode | None:
    """Remove one node holding ``target`` and return the new root.

    A node with two children takes the largest value of its left subtree.
    The tree is returned unchanged when ``target`` is absent.
    """
    if root is None:
        return None
    if root.val == target:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        replacement = maximum(root.left)
        root.val = replacement
        root.left = delete(root.left, replacement)
    elif root.val > target:
        root.left = delete(root.left, target)
    else:
        root.right = delete(root.right, target)
    return root


def from_sorted(values: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced tree from ascending ``values``."""

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        middle = (start + end) // 2
        node = TreeNode(values[middle])
        node.left = build(start, middle - 1)
        node.right = build(middle + 1, end)
        return node

    return build(0, len(values) - 1)


def to_linked_list(root: TreeNode | None) -> TreeNode | None:
    """Relink the tree in place into an ascending doubly linked list.

    ``left`` points to the previous node and ``right`` to the next one.
    Returns the head, the node with the smallest value.
    """
    ordered: list[TreeNode] = []
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        ordered.append(node)
        node = node.right
    previous: TreeNode | None = None
    for current in ordered:
        current.left = previous
        current.right = None
        if previous is not None:
            previous.right = current
        previous = current
    return ordered[0] if ordered else None


def linked_list_to_bst(head: TreeNode | None, count: int) -> TreeNode | None:
    """Build a balanced tree in place from the first ``count`` list nodes.

    The list is linked through ``right`` and must be in ascending order.
    """
    cursor = head

    def build(n: int) -> TreeNode | None:
        nonlocal cursor
        if cursor is None or n <= 0:
            return None
        left = build(n // 2)
        node = cursor
        if node is None:
            raise ValueError("linked list is shorter than the requested count")
        node.left = left
        cursor = node.right
        node.right = build(n - n // 2 - 1)
        return node

    return build(count)