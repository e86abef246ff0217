# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfTree - A mutable hierarchical key-value store for configuration data.

This module provides the ConfTree class, the container behind a
configuration subsystem. A ConfTree is a named node holding two ordered
collections: child ConfTree nodes (sub-sections) and ConfLeaf entries
(string values). Nodes and leaves live in separate namespaces, so a node
and a leaf may share a name.

Key Features:
    - **Strict ownership**: a tree owns its children and leaves, children
      hold no reference back to their parent, so no cycle can form
    - **Change reporting**: mutators return True only when observable state
      changed, which is all a caller needs to mark configuration dirty or
      notify listeners
    - **Insertion order**: children and leaves iterate in the order they
      were added
    - **Single-segment names**: every lookup works on one level; splitting
      dotted paths is left to the caller

Lookups are linear scans and the first match wins. Configuration trees are
small and shallow, and first-match semantics keep trees that contain
duplicate names (see create_node) well defined.

Example:
    Basic usage::

        root = ConfTree('root')
        root.set_leaf('theme', 'dark')           # True
        window = root.add_node('window')
        window.set_leaf('width', '800')          # True
        root.set_leaf('theme', 'dark')           # False, unchanged
        root.get_leaf('theme')                   # 'dark'
        root.set_leaf('theme', None)             # True, leaf removed
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .exceptions import DuplicateNameError, OutOfRangeError
from .leaf import ConfLeaf
from .loading import load_from_dict, load_from_list, load_from_tree

logger = logging.getLogger(__name__)


class ConfTree:
    """A named node of a configuration tree.

    ConfTree provides:
    - get_node / add_node / create_node / remove_node: child navigation
    - get_leaf / set_leaf: value access with change reporting
    - get_node_at / get_leaf_at, iter_nodes / iter_leaves: positional access
      and one-pass iteration, used by format writers

    Attributes:
        name: The node's name, unique among its siblings when created
            through add_node. Renaming does not re-check uniqueness.

    Example:
        >>> root = ConfTree('root')
        >>> root.add_node('window') is root.add_node('window')
        True
        >>> root.get_node_count()
        1
    """

    __slots__ = ('name', '_nodes', '_leaves')

    def __init__(
        self,
        name: str,
        source: dict | list | ConfTree | None = None,
    ) -> None:
        """Initialize a ConfTree.

        Args:
            name: The node's name.
            source: Optional initial content. Can be:
                - dict: keys are names, dict values become nodes and
                  str values become leaves
                - list: list of (name, value) tuples
                - ConfTree: deep copy of another tree's content

        Example:
            >>> ConfTree('root', {'theme': 'dark', 'window': {'width': '800'}})
            >>> ConfTree('root', [('theme', 'dark')])
            >>> ConfTree('copy', other_tree)
        """
        self.name = name
        self._nodes: list[ConfTree] = []
        self._leaves: list[ConfLeaf] = []

        if source is not None:
            self._load_source(source)

    def _load_source(self, source: dict | list | ConfTree) -> None:
        """Load data from source into this tree.

        Raises:
            TypeError: If source is not dict, list, or ConfTree.
        """
        if isinstance(source, dict):
            load_from_dict(self, source)
        elif isinstance(source, ConfTree):
            load_from_tree(self, source)
        elif isinstance(source, list):
            load_from_list(self, source)
        else:
            raise TypeError(
                f"source must be dict, list, or ConfTree, not {type(source).__name__}"
            )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return (
            f"ConfTree({self.name!r}, nodes={[n.name for n in self._nodes]}, "
            f"leaves={[leaf.name for leaf in self._leaves]})"
        )

    # ==================== Node Access ====================

    def get_node(self, name: str) -> ConfTree | None:
        """Return the first child named name, or None if there is none."""
        for node in self._nodes:
            if node.name == name:
                return node
        return None

    def add_node(self, name: str) -> ConfTree:
        """Return the child named name, creating it if needed.

        Calling add_node twice with the same name returns the same
        instance, so this path never produces duplicate siblings.

        Args:
            name: Name of the child node.

        Returns:
            The existing child, or the newly appended empty one.
        """
        node = self.get_node(name)
        if node is None:
            node = ConfTree(name)
            self._nodes.append(node)
            logger.debug("Added node %r under %r", name, self.name)
        return node

    def create_node(self, name: str) -> ConfTree:
        """Append a new empty child without looking for an existing one.

        This is a fast path for callers that already know no child with
        this name exists, such as a reader filling a tree from a format
        that cannot hold duplicate keys at one level. Keeping that
        promise is the caller's obligation: if a sibling with this name
        is already there, the tree ends up with two children sharing it
        and every name lookup only ever sees the first one. When in
        doubt, use add_node.

        Args:
            name: Name of the child node.

        Returns:
            The newly appended node.
        """
        node = ConfTree(name)
        self._nodes.append(node)
        logger.debug("Created node %r under %r", name, self.name)
        return node

    def _attach_node(self, node: ConfTree) -> None:
        """Append an already built tree as a child.

        No name check, no ownership check. Reserved for code that builds
        subtrees off-line and grafts them in, such as a configuration
        manager swapping in a freshly read section.
        """
        self._nodes.append(node)

    def remove_node(self, node: ConfTree) -> None:
        """Remove the given child, matched by identity.

        Does nothing if node is not a direct child. The removed node keeps
        its own children and leaves.
        """
        for i, child in enumerate(self._nodes):
            if child is node:
                del self._nodes[i]
                logger.debug("Removed node %r from %r", node.name, self.name)
                return

    def get_node_count(self) -> int:
        """Return the number of direct children."""
        return len(self._nodes)

    def get_node_at(self, index: int) -> ConfTree:
        """Return the child at the given position.

        Raises:
            OutOfRangeError: If index is not in [0, get_node_count()).
        """
        if index < 0 or index >= len(self._nodes):
            raise OutOfRangeError(
                f"Node index {index} out of range (0-{len(self._nodes) - 1})"
            )
        return self._nodes[index]

    def iter_nodes(self) -> Iterator[ConfTree]:
        """Yield direct children in insertion order.

        Do not add or remove children while the iterator is in use;
        loop over nodes() instead when the loop mutates the tree.
        """
        yield from self._nodes

    def nodes(self) -> list[ConfTree]:
        """Return a snapshot list of direct children in insertion order."""
        return list(self._nodes)

    def has_nodes(self) -> bool:
        """True if this tree has at least one child."""
        return bool(self._nodes)

    # ==================== Leaf Access ====================

    def _get_leaf_instance(self, name: str) -> ConfLeaf | None:
        for leaf in self._leaves:
            if leaf.name == name:
                return leaf
        return None

    def get_leaf(self, name: str) -> str | None:
        """Return the value of the leaf named name, or None if there is none."""
        leaf = self._get_leaf_instance(name)
        return None if leaf is None else leaf.value

    def set_leaf(self, name: str, value: str | None) -> bool:
        """Create, update or remove the leaf named name.

        The result tells whether the tree changed, so callers can mark
        configuration dirty or fire their own notifications without
        comparing values themselves:

        - No such leaf, value None or blank: nothing happens, False.
        - No such leaf, any other value: the leaf is created, True.
        - Leaf exists, value None: the leaf is removed, True.
        - Leaf exists, value equal to the current one: False.
        - Leaf exists, any other value: overwritten in place, True.

        Note that blank values only count as "absent" on creation. An
        existing leaf set to '' keeps the empty string as its value.

        Args:
            name: Name of the leaf.
            value: New value, or None to remove the leaf.

        Returns:
            True if the tree was modified by this call, False otherwise.
        """
        leaf = self._get_leaf_instance(name)
        if leaf is None:
            if value is None or not value.strip():
                return False
            self._leaves.append(ConfLeaf(name, value))
            return True

        if value is None:
            self._leaves.remove(leaf)
            logger.debug("Removed leaf %r from %r", name, self.name)
            return True
        if leaf.value == value:
            return False
        leaf.value = value
        return True

    def get_leaf_count(self) -> int:
        """Return the number of direct leaves."""
        return len(self._leaves)

    def get_leaf_at(self, index: int) -> ConfLeaf:
        """Return the leaf at the given position.

        Raises:
            OutOfRangeError: If index is not in [0, get_leaf_count()).
        """
        if index < 0 or index >= len(self._leaves):
            raise OutOfRangeError(
                f"Leaf index {index} out of range (0-{len(self._leaves) - 1})"
            )
        return self._leaves[index]

    def iter_leaves(self) -> Iterator[ConfLeaf]:
        """Yield direct leaves in insertion order.

        Same caveat as iter_nodes: do not mutate leaves while iterating.
        """
        yield from self._leaves

    def leaves(self) -> list[ConfLeaf]:
        """Return a snapshot list of direct leaves in insertion order."""
        return list(self._leaves)

    def has_leaves(self) -> bool:
        """True if this tree has at least one leaf."""
        return bool(self._leaves)

    # ==================== Walk ====================

    def walk(self) -> Iterator[tuple[tuple[str, ...], ConfLeaf]]:
        """Yield every leaf of this subtree with the names leading to it.

        Depth-first: a node's own leaves come before its children. The
        name tuple starts below this tree and ends with the leaf's name.

        Example:
            >>> for names, leaf in root.walk():
            ...     print(names, leaf.value)
            ('theme',) dark
            ('window', 'width') 800
        """
        def _walk_gen(
            tree: ConfTree, prefix: tuple[str, ...]
        ) -> Iterator[tuple[tuple[str, ...], ConfLeaf]]:
            for leaf in tree._leaves:
                yield prefix + (leaf.name,), leaf
            for node in tree._nodes:
                yield from _walk_gen(node, prefix + (node.name,))

        return _walk_gen(self, ())

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to a nested plain dict.

        Leaves become str values, child nodes become nested dicts.

        Raises:
            DuplicateNameError: If two entries of one level share a name,
                either duplicate siblings from create_node or a leaf and
                a node with the same name.
        """
        result: dict[str, Any] = {}
        for leaf in self._leaves:
            if leaf.name in result:
                raise DuplicateNameError(
                    f"Duplicate name {leaf.name!r} in {self.name!r}"
                )
            result[leaf.name] = leaf.value
        for node in self._nodes:
            if node.name in result:
                raise DuplicateNameError(
                    f"Duplicate name {node.name!r} in {self.name!r}"
                )
            result[node.name] = node.as_dict()
        return result

    def copy(self) -> ConfTree:
        """Return a deep copy of this subtree."""
        return ConfTree(self.name, self)

    def clear(self) -> bool:
        """Remove all children and leaves.

        Returns:
            True if anything was removed.
        """
        if not self._nodes and not self._leaves:
            return False
        self._nodes.clear()
        self._leaves.clear()
        logger.debug("Cleared %r", self.name)
        return True

    def update(self, other: dict | list | ConfTree) -> bool:
        """Merge another source into this tree.

        Every leaf is written through set_leaf on this tree, whatever
        the source type, so a dict and a ConfTree holding the same data
        give the same result. Existing nodes are merged recursively and
        missing ones are copied in. Leaves absent from other are left
        untouched.

        A ConfTree source is copied before merging, so any tree may be
        merged into any other, including an ancestor into its own
        descendant.

        Args:
            other: Source data (dict, list of tuples, or ConfTree).

        Returns:
            True if this tree was modified.

        Example:
            >>> tree = ConfTree('root', {'window': {'width': '800'}})
            >>> tree.update({'window': {'width': '1024', 'height': '600'}})
            True
            >>> tree.update({'window': {'width': '1024'}})
            False
        """
        if isinstance(other, dict):
            return load_from_dict(self, other)
        if isinstance(other, list):
            return load_from_list(self, other)
        if isinstance(other, ConfTree):
            return self._update_from_tree(other.copy())
        raise TypeError(
            f"other must be dict, list, or ConfTree, not {type(other).__name__}"
        )

    def _update_from_tree(self, other: ConfTree) -> bool:
        changed = False
        for leaf in other._leaves:
            if self.set_leaf(leaf.name, leaf.value):
                changed = True
        for other_node in other._nodes:
            node = self.get_node(other_node.name)
            if node is None:
                load_from_tree(self.create_node(other_node.name), other_node)
                changed = True
            elif node._update_from_tree(other_node):
                changed = True
        return changed
