"""Grouping of honeycomb cells by letter."""

from collections import Counter, defaultdict


class LetterIndex:
    """Map each letter to the ids of the cells holding it.

    Ids are kept in insertion order, which the honeycomb builder makes ring-major and
    position-minor.  The index accepts new cells until `freeze` is called and is read-only
    afterwards.
    """

    def __init__(self) -> None:
        self._building: defaultdict[str, list[int]] | None = defaultdict(list)
        self._buckets: dict[str, tuple[int, ...]] = {}

    def add(self, letter: str, cell_id: int) -> None:
        """Append a cell to the bucket for `letter`."""
        if self._building is None:
            raise RuntimeError("Cannot add cells to a frozen letter index.")
        self._building[letter].append(cell_id)

    def freeze(self) -> None:
        """Stop accepting cells.  Calling this more than once has no effect."""
        if self._building is None:
            return
        self._buckets = {letter: tuple(ids) for letter, ids in self._building.items()}
        self._building = None

    @property
    def frozen(self) -> bool:
        return self._building is None

    def lookup(self, letter: str) -> tuple[int, ...]:
        """Return the ids of all cells holding `letter`, or an empty tuple."""
        if self._building is not None:
            raise RuntimeError("Letter index must be frozen before lookups.")
        return self._buckets.get(letter, ())

    def counts(self) -> Counter[str]:
        """Return the number of cells holding each letter."""
        if self._building is not None:
            raise RuntimeError("Letter index must be frozen before counting.")
        return Counter({letter: len(ids) for letter, ids in self._buckets.items()})
