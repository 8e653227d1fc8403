"""Finite tables mapping input tuples to outputs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from satune.sets import Set


@dataclass(frozen=True)
class TableEntry:
    """One row of a table: inputs and the output they map to."""

    inputs: tuple[int, ...]
    output: int


class Table:
    """A partial map from input tuples to outputs in range_set.

    A table without a range is a predicate table whose outputs are booleans.
    """

    def __init__(self, range_set: Set | None) -> None:
        self.range_set = range_set
        self._entries: dict[tuple[int, ...], TableEntry] = {}

    def add_entry(self, inputs: Iterable[int], result: int) -> TableEntry:
        """Add a row; inputs must not already be present."""
        key = tuple(inputs)
        if self.range_set is None and result not in (0, 1):
            raise ValueError(f"table without range needs a boolean result, got {result}")
        if key in self._entries:
            raise ValueError(f"duplicate table entry for inputs {key}")
        entry = TableEntry(key, int(result))
        self._entries[key] = entry
        return entry

    def get_entry(self, inputs: Iterable[int]) -> TableEntry | None:
        """The row for inputs, or None."""
        return self._entries.get(tuple(inputs))

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def describe(self) -> str:
        """A readable description of all rows."""
        rows = "".join(
            "<" + "".join(f"{value}, " for value in entry.inputs) + f" == {entry.output}>"
            for entry in self
        )
        return "{Table:\n" + rows + "}\n"