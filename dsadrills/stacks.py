"""Stack drills built on recursion-free list operations.

A stack is a list whose last element is the top.  Every function leaves its
argument untouched and returns a new list.
"""

from collections.abc import Sequence


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing every character and popping them back."""
    stack = list(text)
    reversed_chars = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


def _middle_index(stack: Sequence[int]) -> int:
    if not stack:
        raise IndexError("empty stack has no middle element")
    return len(stack) - 1 - len(stack) // 2


def middle_element(stack: Sequence[int]) -> int:
    """Return the element reached after popping ``len(stack) // 2`` items from the top."""
    return stack[_middle_index(stack)]


def delete_middle(stack: Sequence[int]) -> list[int]:
    """Return the stack without the element :func:`middle_element` names."""
    index = _middle_index(stack)
    return [*stack[:index], *stack[index + 1:]]


def insert_at_bottom(stack: Sequence[int], item: int) -> list[int]:
    """Return the stack with ``item`` placed beneath every other element."""
    return [item, *stack]


def insert_at_position(stack: Sequence[int], position: int, item: int) -> list[int]:
    """Insert ``item`` below the top ``position`` elements.

    A position of zero or less pushes onto the top; a position beyond the
    height of the stack places the item at the bottom.
    """
    depth = max(position, 0)
    index = max(len(stack) - depth, 0)
    return [*stack[:index], item, *stack[index:]]


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack turned upside down."""
    return list(reversed(stack))


def insert_sorted(stack: Sequence[int], item: int) -> list[int]:
    """Insert ``item`` into a stack sorted ascending from bottom to top."""
    result = list(stack)
    held = []
    while result and item <= result[-1]:
        held.append(result.pop())
    result.append(item)
    result.extend(reversed(held))
    return result


def sort_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack sorted so the largest element is on top."""
    result: list[int] = []
    for item in stack:
        result = insert_sorted(result, item)
    return result