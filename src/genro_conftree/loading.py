# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for populating a ConfTree from in-memory data.

Values are always strings: a str becomes a leaf, a dict or a list of
(name, value) tuples becomes a child node. Leaves are written through
set_leaf, so blank strings do not create leaves.

Example:
    >>> tree = ConfTree('root')
    >>> load_from_dict(tree, {'theme': 'dark', 'window': {'width': '800'}})
    >>> tree.get_node('window').get_leaf('width')
    '800'
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from .leaf import ConfLeaf

if TYPE_CHECKING:
    from .tree import ConfTree


def _load_value(tree: ConfTree, name: str, value: Any) -> bool:
    """Store one (name, value) pair into tree, reporting whether it changed."""
    if value is None:
        return False
    if isinstance(value, str):
        return tree.set_leaf(name, value)
    if isinstance(value, (dict, list)):
        created = tree.get_node(name) is None
        node = tree.add_node(name)
        if isinstance(value, dict):
            loaded = load_from_dict(node, value)
        else:
            loaded = load_from_list(node, value)
        return created or loaded
    raise TypeError(
        f"value for {name!r} must be str, dict, or list, "
        f"not {type(value).__name__}"
    )


def load_from_dict(tree: ConfTree, source: dict[str, Any]) -> bool:
    """Populate tree from a nested dict.

    Args:
        tree: Target tree.
        source: Mapping of names to str, dict, list or None values.
            None values are skipped.

    Returns:
        True if tree was modified.

    Raises:
        TypeError: If a value has any other type.
    """
    changed = False
    for name, value in source.items():
        if _load_value(tree, name, value):
            changed = True
    return changed


def load_from_list(tree: ConfTree, source: list) -> bool:
    """Populate tree from a list of (name, value) tuples.

    Args:
        tree: Target tree.
        source: Items as (name, value); value follows load_from_dict rules.

    Returns:
        True if tree was modified.

    Raises:
        ValueError: If an item is not a 2-item tuple or list.
    """
    changed = False
    for item in source:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise ValueError(f"List items must be (name, value), got {item!r}")
        name, value = item
        if _load_value(tree, name, value):
            changed = True
    return changed


def load_from_tree(tree: ConfTree, source: ConfTree) -> None:
    """Deep copy source's leaves and children into tree.

    Order is preserved, and so are leaves holding blank values and
    duplicate siblings made with create_node.
    """
    for leaf in source.iter_leaves():
        # Bypasses set_leaf so blank values survive the copy.
        tree._leaves.append(ConfLeaf(leaf.name, leaf.value))
    for node in source.iter_nodes():
        load_from_tree(tree.create_node(node.name), node)
