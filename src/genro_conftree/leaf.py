# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfTree leaf class."""

from __future__ import annotations


class ConfLeaf:
    """A named string value held by a ConfTree.

    The name is fixed at construction. The value is overwritten
    unconditionally: deciding whether a write is a real change is
    ConfTree.set_leaf's job, not the leaf's.

    Example:
        >>> leaf = ConfLeaf('theme', 'dark')
        >>> leaf.name
        'theme'
        >>> leaf.value = 'light'
        >>> leaf.value
        'light'
    """

    __slots__ = ('_name', 'value')

    def __init__(self, name: str, value: str) -> None:
        self._name = name
        self.value = value

    @property
    def name(self) -> str:
        """The leaf's name, unique among its siblings."""
        return self._name

    def __repr__(self) -> str:
        return f"ConfLeaf({self._name!r}, {self.value!r})"
