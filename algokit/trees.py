"""Binary trees: level-order construction, traversals, counts and views."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node. ``height`` is maintained only by AVL insertion."""

    data: int
    left: Optional[Node] = None
    right: Optional[Node] = None
    height: int = 1


def build_level_order(values):
    """Build a tree from values given in level order.

    The first value is the root; after that each node in turn takes a left
    and then a right child. ``None`` marks a missing child, and children
    beyond the end of ``values`` are missing too.
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = Node(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, None)
        if left is not None:
            node.left = Node(left)
            queue.append(node.left)
        right = next(items, None)
        if right is not None:
            node.right = Node(right)
            queue.append(node.right)
    return root


def preorder(root):
    """Values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root):
    """Values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root):
    """Values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def iterative_preorder(root):
    """Preorder traversal using an explicit stack."""
    order = []
    stack = []
    node = root
    while node is not None or stack:
        if node is not None:
            order.append(node.data)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right
    return order


def iterative_inorder(root):
    """Inorder traversal using an explicit stack."""
    order = []
    stack = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            order.append(node.data)
            node = node.right
    return order


def _nodes_by_level(root):
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def level_order(root):
    """Values level by level, left to right."""
    return [node.data for node in _nodes_by_level(root)]


def count_nodes(root):
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def count_leaves(root):
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def count_full_nodes(root):
    """Number of nodes with both a left and a right child."""
    return sum(
        1
        for node in _nodes_by_level(root)
        if node.left is not None and node.right is not None
    )


def node_sum(root):
    """Sum of all values in the tree."""
    if root is None:
        return 0
    return node_sum(root.left) + node_sum(root.right) + root.data


def height(root):
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _leaves_in_order(root):
    if root is None:
        return []
    if root.left is None and root.right is None:
        return [root.data]
    return _leaves_in_order(root.left) + _leaves_in_order(root.right)


def boundary_order(root):
    """Root, the left edge top-down, all leaves, then the right edge bottom-up.

    The edges follow the left (resp. right) child where there is one and the
    other child otherwise, down to a leaf, so the leaves at the ends of the
    edges appear both on the edge and among the leaves.
    """
    if root is None:
        return []
    result = [root.data]

    node = root
    while node.left is not None or node.right is not None:
        node = node.left if node.left is not None else node.right
        result.append(node.data)

    result.extend(_leaves_in_order(root))

    right_edge = []
    node = root
    while node.left is not None or node.right is not None:
        node = node.right if node.right is not None else node.left
        right_edge.append(node.data)
    result.extend(reversed(right_edge))
    return result


def _columns(root):
    if root is None:
        return
    queue = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        yield node, column
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))


def top_view(root):
    """Values seen from above, ordered by horizontal column."""
    seen = {}
    for node, column in _columns(root):
        seen.setdefault(column, node.data)
    return [seen[column] for column in sorted(seen)]


def bottom_view(root):
    """Values seen from below, ordered by horizontal column."""
    seen = {}
    for node, column in _columns(root):
        seen[column] = node.data
    return [seen[column] for column in sorted(seen)]


def path_to(root, key):
    """Values on the path from the root to the first node (preorder) holding ``key``.

    Returns an empty list when ``key`` is not in the tree.
    """
    path = []

    def walk(node):
        if node is None:
            return False
        path.append(node.data)
        if node.data == key or walk(node.left) or walk(node.right):
            return True
        path.pop()
        return False

    walk(root)
    return path


def children_sum_transform(root):
    """Raise values in place so every inner node equals the sum of its children."""
    if root is None:
        return None
    children = sum(child.data for child in (root.left, root.right) if child is not None)
    if children >= root.data:
        root.data = children
    else:
        for child in (root.left, root.right):
            if child is not None:
                child.data = root.data
    children_sum_transform(root.left)
    children_sum_transform(root.right)
    if root.left is not None or root.right is not None:
        root.data = sum(
            child.data for child in (root.left, root.right) if child is not None
        )
    return root


def burn_time(root, target):
    """Steps for fire starting at node ``target`` to reach every node of the tree."""
    if target is None:
        raise ValueError("no node to start burning from")
    parents = {}
    for node in _nodes_by_level(root):
        for child in (node.left, node.right):
            if child is not None:
                parents[child] = node

    burnt = {target}
    frontier = [target]
    steps = -1
    while frontier:
        steps += 1
        following = []
        for node in frontier:
            for neighbour in (node.left, node.right, parents.get(node)):
                if neighbour is not None and neighbour not in burnt:
                    burnt.add(neighbour)
                    following.append(neighbour)
        frontier = following
    return steps