# SPDX-License-Identifier: MIT
"""Three-way comparison result shared by the comparison functions."""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Ordering(IntEnum):
    """Result of a three-way comparison.

    Members compare equal to -1, 0 and 1, so an Ordering can be used anywhere
    a classic ``cmp``-style integer is expected.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: Any, right: Any) -> "Ordering":
        """Compare two mutually orderable values."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> "Ordering":
        """Return the ordering seen from the other operand."""
        return Ordering(-self.value)
