"""Binary tree algorithms."""

from __future__ import annotations

from typing import Optional

from algopractice.nodes import TreeNode


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the node values in pre-order (node, left, right)."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def _depth_and_balance(node: Optional[TreeNode]) -> tuple[int, bool]:
    if node is None:
        return 0, True
    left_depth, left_ok = _depth_and_balance(node.left)
    right_depth, right_ok = _depth_and_balance(node.right)
    balanced = left_ok and right_ok and abs(left_depth - right_depth) <= 1
    return max(left_depth, right_depth) + 1, balanced


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Whether every node's subtrees differ in depth by at most one."""
    return _depth_and_balance(root)[1]


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest path between two nodes."""
    longest = 0

    def depth(node: Optional[TreeNode]) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        longest = max(longest, left + right + 1)
        return max(left, right) + 1

    depth(root)
    return longest