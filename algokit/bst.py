"""Binary search trees and AVL insertion built on :class:`algokit.trees.Node`."""

from algokit.trees import Node


def bst_search(root, key):
    """Tell whether ``key`` is stored in the search tree."""
    node = root
    while node is not None:
        if node.data == key:
            return True
        node = node.right if node.data < key else node.left
    return False


def bst_insert(root, key):
    """Insert ``key`` (equal keys go right) and return the root."""
    fresh = Node(key)
    if root is None:
        return fresh
    node = root
    while True:
        if node.data > key:
            if node.left is None:
                node.left = fresh
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = fresh
                return root
            node = node.right


def inorder_predecessor(node):
    """Return the rightmost node of ``node``'s left subtree."""
    if node is None or node.left is None:
        raise ValueError("node has no left subtree")
    current = node.left
    while current.right is not None:
        current = current.right
    return current


def bst_delete(root, key):
    """Remove one occurrence of ``key`` and return the new root."""
    if root is None:
        return None
    if root.data == key and (root.left is None or root.right is None):
        return root.left if root.left is not None else root.right
    if key < root.data:
        root.left = bst_delete(root.left, key)
    elif key > root.data:
        root.right = bst_delete(root.right, key)
    else:
        predecessor = inorder_predecessor(root)
        root.data = predecessor.data
        root.left = bst_delete(root.left, predecessor.data)
    return root


def bst_from_preorder(values):
    """Rebuild a search tree from its preorder sequence."""
    items = list(values)
    if not items:
        raise ValueError("preorder sequence is empty")
    root = Node(items[0])
    stack = [root]
    for value in items[1:]:
        node = Node(value)
        if value < stack[-1].data:
            stack[-1].left = node
        else:
            parent = stack.pop()
            while stack and stack[-1].data <= value:
                parent = stack.pop()
            parent.right = node
        stack.append(node)
    return root


def _height(node):
    return node.height if node is not None else 0


def _refresh(node):
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node):
    return _height(node.left) - _height(node.right)


def _rotate_right(node):
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def _rotate_left(node):
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh(node)
    _refresh(pivot)
    return pivot


def avl_insert(root, key):
    """Insert ``key`` into an AVL tree, ignoring duplicates; return the new root."""
    if root is None:
        return Node(key)
    if key > root.data:
        root.right = avl_insert(root.right, key)
    elif key < root.data:
        root.left = avl_insert(root.left, key)
    else:
        return root
    _refresh(root)
    balance = _balance(root)
    if balance > 1:
        if _balance(root.left) < 0:
            root.left = _rotate_left(root.left)
        return _rotate_right(root)
    if balance < -1:
        if _balance(root.right) > 0:
            root.right = _rotate_right(root.right)
        return _rotate_left(root)
    return root