# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Position tracking for the header value parser.

A cursor marks the current read position inside a fixed ``[lower, upper)``
range of a buffer. It never inspects the buffer itself, so the same cursor can
be threaded through pair-, element- and list-level parsing calls.
"""

# ###############
# Public Interface
# ###############


class ParserCursor:
    """Mutable read position bounded by an immutable range.

    Attributes:
        lower_bound: First index of the range (inclusive).
        upper_bound: End of the range (exclusive).
        pos: Current position, always within ``[lower_bound, upper_bound]``.
    """

    __slots__ = ("_lower_bound", "_upper_bound", "_pos")

    def __init__(self, lower_bound: int, upper_bound: int) -> None:
        if lower_bound < 0:
            raise ValueError("Lower bound cannot be negative")
        if lower_bound > upper_bound:
            raise ValueError("Lower bound cannot be greater than upper bound")
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self._pos = lower_bound

    @property
    def lower_bound(self) -> int:
        return self._lower_bound

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    @property
    def pos(self) -> int:
        return self._pos

    def update_pos(self, pos: int) -> None:
        """Move the cursor to ``pos``.

        Raises:
            IndexError: If ``pos`` lies outside ``[lower_bound, upper_bound]``.
        """
        if pos < self._lower_bound:
            raise IndexError(f"pos: {pos} < lower_bound: {self._lower_bound}")
        if pos > self._upper_bound:
            raise IndexError(f"pos: {pos} > upper_bound: {self._upper_bound}")
        self._pos = pos

    def at_end(self) -> bool:
        """Return True once the cursor has reached the upper bound."""
        return self._pos >= self._upper_bound

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParserCursor):
            return NotImplemented
        return (self._lower_bound, self._upper_bound, self._pos) == (
            other._lower_bound,
            other._upper_bound,
            other._pos,
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"ParserCursor(lower_bound={self._lower_bound}, upper_bound={self._upper_bound}, pos={self._pos})"

    def __str__(self) -> str:
        return f"[{self._lower_bound}>{self._pos}>{self._upper_bound}]"
