"""Rank range bounds and their resolution against a catalog."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class BoundKind(Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"
    UNBOUNDED = "unbounded"


@dataclass(frozen=True)
class Bound:
    """One side of a rank range."""
    kind: BoundKind
    value: int = 0

    @classmethod
    def included(cls, value: int) -> "Bound":
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: int) -> "Bound":
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)

    def __repr__(self):
        if self.kind is BoundKind.UNBOUNDED:
            return "Bound(unbounded)"
        return f"Bound({self.kind.value} {self.value})"


@dataclass(frozen=True)
class WordRange:
    """A pair of rank bounds, e.g. ``995..1000`` or ``..=4``."""
    start: Bound = Bound.unbounded()
    end: Bound = Bound.unbounded()

    @classmethod
    def half_open(cls, start: int, end: int) -> "WordRange":
        """``start..end``"""
        return cls(Bound.included(start), Bound.excluded(end))

    @classmethod
    def closed(cls, start: int, end: int) -> "WordRange":
        """``start..=end``"""
        return cls(Bound.included(start), Bound.included(end))

    @classmethod
    def starting_at(cls, start: int) -> "WordRange":
        """``start..``"""
        return cls(Bound.included(start), Bound.unbounded())

    @classmethod
    def up_to(cls, end: int) -> "WordRange":
        """``..end``"""
        return cls(Bound.unbounded(), Bound.excluded(end))

    @classmethod
    def up_to_inclusive(cls, end: int) -> "WordRange":
        """``..=end``"""
        return cls(Bound.unbounded(), Bound.included(end))

    @classmethod
    def full(cls) -> "WordRange":
        """``..``"""
        return cls()

    @classmethod
    def from_slice(cls, s: slice) -> Optional["WordRange"]:
        """Read a slice as a half-open range.

        Returns None for slices with a step other than 1, which select
        no contiguous block of ranks.
        """
        if s.step not in (None, 1):
            return None
        start = Bound.unbounded() if s.start is None else Bound.included(s.start)
        end = Bound.unbounded() if s.stop is None else Bound.excluded(s.stop)
        return cls(start, end)

    def __repr__(self):
        start = '' if self.start.kind is BoundKind.UNBOUNDED else str(self.start.value)
        if self.end.kind is BoundKind.UNBOUNDED:
            end = ''
        elif self.end.kind is BoundKind.INCLUDED:
            end = f"={self.end.value}"
        else:
            end = str(self.end.value)
        return f"WordRange({start}..{end})"


RangeLike = Union[WordRange, slice, range]


def to_word_range(value: RangeLike) -> Optional[WordRange]:
    """Normalize a WordRange, slice or range to a WordRange.

    ``range`` objects must have step 1; anything else gives None.
    """
    if isinstance(value, WordRange):
        return value
    if isinstance(value, slice):
        return WordRange.from_slice(value)
    if isinstance(value, range):
        if value.step != 1:
            return None
        return WordRange.half_open(value.start, value.stop)
    raise TypeError(f"Expected WordRange, slice or range, got {type(value).__name__}")


def resolve(value: RangeLike, size: int) -> Optional[tuple[int, int]]:
    """Resolve a range to inclusive ``(start_index, end_index)`` ranks.

    An excluded start resolves to 0. An excluded end of 0 is invalid.
    Returns None when the range is empty, reaches past ``size - 1``, or
    uses a negative bound.
    """
    word_range = to_word_range(value)
    if word_range is None:
        return None

    start, end = word_range.start, word_range.end
    if start.kind is BoundKind.INCLUDED:
        start_index = start.value
    else:
        start_index = 0

    if end.kind is BoundKind.INCLUDED:
        end_index = end.value
    elif end.kind is BoundKind.EXCLUDED:
        if end.value <= 0:
            return None
        end_index = end.value - 1
    else:
        end_index = size - 1

    if start_index < 0 or end_index < 0:
        return None
    if start_index > end_index or end_index >= size:
        return None
    return start_index, end_index
