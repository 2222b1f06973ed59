"""Binary tree construction, traversal and structural queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            value = next(items, _MISSING)
            if value is _MISSING:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    """Height of ``node``, or ``None`` as soon as any subtree is unbalanced."""
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None:
        return None
    if abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: Optional[TreeNode]) -> bool:
    """True if every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def _walk_pre(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _walk_pre(node.left)
        yield from _walk_pre(node.right)


def _walk_in(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _walk_in(node.left)
        yield node.val
        yield from _walk_in(node.right)


def _walk_post(node: Optional[TreeNode]) -> Iterator[int]:
    if node is not None:
        yield from _walk_post(node.left)
        yield from _walk_post(node.right)
        yield node.val


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root-left-right order."""
    return list(_walk_pre(root))


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left-root-right order."""
    return list(_walk_in(root))


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left-right-root order."""
    return list(_walk_post(root))


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """The deepest node that has both ``p`` and ``q`` as descendants (or is one of them)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is None:
        return right
    if right is None:
        return left
    return root


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best