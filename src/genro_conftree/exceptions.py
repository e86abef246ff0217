# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfTree exceptions."""

from __future__ import annotations


class ConfTreeError(Exception):
    """Base exception for ConfTree errors."""

    pass


class OutOfRangeError(ConfTreeError, IndexError):
    """Raised when a positional lookup falls outside [0, count)."""

    pass


class DuplicateNameError(ConfTreeError):
    """Raised when two entries of one level map to the same key."""

    pass
