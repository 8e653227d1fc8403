"""Sets of 64-bit values that elements range over."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

_END = object()


class Set:
    """A set of values, either a sorted member list or an inclusive range."""

    def __init__(
        self,
        var_type: int,
        elements: Iterable[int] | None = None,
        low: int | None = None,
        high: int | None = None,
    ) -> None:
        self.var_type = var_type
        if low is not None or high is not None:
            if elements is not None:
                raise ValueError("a set takes either elements or a range, not both")
            if low is None or high is None:
                raise ValueError("a range set needs both low and high")
            if high < low:
                raise ValueError(f"empty range: low={low} > high={high}")
            self.is_range = True
            self.low = low
            self.high = high
            self._members: list[int] | None = None
        else:
            self.is_range = False
            # For member sets, low counts the unique items handed out.
            self.low = 0
            self.high = 0
            self._members = sorted(elements) if elements is not None else []

    @property
    def is_mutable(self) -> bool:
        return False

    @property
    def members(self) -> tuple[int, ...] | None:
        """The sorted members, or None for a range set."""
        return None if self._members is None else tuple(self._members)

    def exists(self, element: int) -> bool:
        """Whether element belongs to the set."""
        if self.is_range:
            return self.low <= element <= self.high
        position = bisect_left(self._members, element)
        return position < len(self._members) and self._members[position] == element

    def __contains__(self, element: object) -> bool:
        return isinstance(element, int) and self.exists(element)

    def __len__(self) -> int:
        if self.is_range:
            return self.high - self.low + 1
        return len(self._members)

    def __iter__(self) -> Iterator[int]:
        if self.is_range:
            return iter(range(self.low, self.high + 1))
        return iter(self._members)

    def element_at(self, index: int) -> int:
        """The value at position index in ascending order."""
        if not 0 <= index < len(self):
            raise IndexError(f"set index {index} out of range")
        if self.is_range:
            return self.low + index
        return self._members[index]

    def union_size(self, other: "Set") -> int:
        """Size of the union of two sets, merging their ascending values."""
        mine, theirs = iter(self), iter(other)
        x, y = next(mine, _END), next(theirs, _END)
        count = 0
        while x is not _END and y is not _END:
            if y < x:
                y = next(theirs, _END)
            elif x < y:
                x = next(mine, _END)
            else:
                x, y = next(mine, _END), next(theirs, _END)
            count += 1
        count += (x is not _END) + sum(1 for _ in mine)
        count += (y is not _END) + sum(1 for _ in theirs)
        return count

    def new_unique_item(self) -> int:
        """Hand out the next unused item, counting up from low."""
        item = self.low
        self.low += 1
        return item

    def describe(self) -> str:
        """A readable one-line description."""
        if self.is_range:
            return f"{{Set({self.var_type}):Range: low={self.low}, high={self.high}}}"
        listed = "".join(f"{member}, " for member in self._members)
        return f"{{Set({self.var_type}):Members: {listed}}}"

    def __repr__(self) -> str:
        return self.describe()


class MutableSet(Set):
    """A member set that grows; finalize() restores ascending order."""

    def __init__(self, var_type: int) -> None:
        super().__init__(var_type)

    @property
    def is_mutable(self) -> bool:
        return True

    def add_element(self, element: int) -> None:
        """Append an element; call finalize() before searching."""
        self._members.append(element)

    def finalize(self) -> None:
        """Sort the members."""
        self._members.sort()