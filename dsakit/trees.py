"""Binary tree nodes, binary-search-tree insertion and search, and traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node holding ``data`` and two optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert ``key`` into the search tree at ``root`` and return the root.

    A key already present leaves the tree unchanged.
    """
    if root is None:
        return TreeNode(key)
    if root.data == key:
        return root
    if root.data < key:
        root.right = insert(root.right, key)
    else:
        root.left = insert(root.left, key)
    return root


def search(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key`` in the search tree, or None."""
    node = root
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree, node, right subtree."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values node, left subtree, right subtree."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree, right subtree, node."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data