# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ConfTree - Hierarchical key-value store for configuration data.

A lightweight, zero-dependency library providing the in-memory tree behind
configuration readers, writers and change notifiers of the Genro ecosystem.
"""

__version__ = "0.1.0"

from .exceptions import (
    ConfTreeError,
    DuplicateNameError,
    OutOfRangeError,
)
from .leaf import ConfLeaf
from .loading import load_from_dict, load_from_list, load_from_tree
from .tree import ConfTree

__all__ = [
    # Core classes
    "ConfTree",
    "ConfLeaf",
    # Loading
    "load_from_dict",
    "load_from_list",
    "load_from_tree",
    # Exceptions
    "ConfTreeError",
    "OutOfRangeError",
    "DuplicateNameError",
]
