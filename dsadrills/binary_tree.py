"""Binary tree drills: construction, traversals, shape metrics and path queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_EMPTY = -1


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_from_preorder(values: Iterable[int]) -> TreeNode | None:
    """Build a tree from a preorder listing where -1 marks an empty subtree."""
    stream = iter(values)

    def build() -> TreeNode | None:
        try:
            value = next(stream)
        except StopIteration:
            raise ValueError("preorder listing ended before the tree was complete") from None
        if value == _EMPTY:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: TreeNode | None) -> list[int]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.val, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.val, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list[int]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.val]


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by level, top level first, each level left to right."""
    if root is None:
        return []
    levels = []
    current = deque([root])
    while current:
        levels.append([node.val for node in current])
        following: deque[TreeNode] = deque()
        for node in current:
            following.extend(child for child in (node.left, node.right) if child)
        current = following
    return levels


def max_depth(root: TreeNode | None) -> int:
    """Number of levels, counted breadth first."""
    return len(level_order(root))


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _height_and_diameter(root: TreeNode | None) -> tuple[int, int]:
    if root is None:
        return 0, 0
    left_height, left_diameter = _height_and_diameter(root.left)
    right_height, right_diameter = _height_and_diameter(root.right)
    through_root = left_height + right_height
    return (
        max(left_height, right_height) + 1,
        max(left_diameter, right_diameter, through_root),
    )


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def _balanced_height(root: TreeNode | None) -> int | None:
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left is None:
        return None
    right = _balanced_height(root.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    return _balanced_height(root) is not None


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest node having both ``p`` and ``q`` below or at it, matched by value.

    When one of them is found first, that one is returned; None when neither
    occurs in the tree.
    """
    if root is None:
        return None
    if root.val == p.val:
        return p
    if root.val == q.val:
        return q
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def has_path_sum(root: TreeNode | None, target: int) -> bool:
    """True if some root-to-leaf path adds up to ``target``."""
    if root is None:
        return False
    remaining = target - root.val
    if root.left is None and root.right is None:
        return remaining == 0
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def path_sums(root: TreeNode | None, target: int) -> list[list[int]]:
    """Every root-to-leaf path adding up to ``target``, left paths first."""
    found: list[list[int]] = []

    def walk(node: TreeNode | None, path: list[int], total: int) -> None:
        if node is None:
            return
        path = [*path, node.val]
        total += node.val
        if node.left is None and node.right is None:
            if total == target:
                found.append(path)
            return
        walk(node.left, path, total)
        walk(node.right, path, total)

    walk(root, [], 0)
    return found


def _positions(inorder_values: Sequence[int], other: Sequence[int]) -> dict[int, int]:
    if len(inorder_values) != len(other):
        raise ValueError("traversals must have the same length")
    return {value: index for index, value in enumerate(inorder_values)}


def _position(positions: dict[int, int], value: int) -> int:
    try:
        return positions[value]
    except KeyError:
        raise ValueError(f"value {value} does not occur in the inorder listing") from None


def build_from_preorder_inorder(
    preorder_values: Sequence[int], inorder_values: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its preorder and inorder listings."""
    positions = _positions(inorder_values, preorder_values)
    size = len(preorder_values)
    next_index = 0

    def build(start: int, end: int) -> TreeNode | None:
        nonlocal next_index
        if next_index >= size or start > end:
            return None
        value = preorder_values[next_index]
        next_index += 1
        node = TreeNode(value)
        position = _position(positions, value)
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, size - 1)


def build_from_postorder_inorder(
    postorder_values: Sequence[int], inorder_values: Sequence[int]
) -> TreeNode | None:
    """Rebuild a tree from its postorder and inorder listings."""
    positions = _positions(inorder_values, postorder_values)
    size = len(postorder_values)
    next_index = size - 1

    def build(start: int, end: int) -> TreeNode | None:
        nonlocal next_index
        if next_index < 0 or start > end:
            return None
        value = postorder_values[next_index]
        next_index -= 1
        node = TreeNode(value)
        position = _position(positions, value)
        node.right = build(position + 1, end)
        node.left = build(start, position - 1)
        return node

    return build(0, size - 1)