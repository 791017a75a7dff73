"""Classes and functions for representing the honeycomb grid."""

import re
from collections.abc import Sequence
from numbers import Integral
from typing import NamedTuple, TextIO

import numpy as np

from hexsearch.adjacency import SIDES, Position, neighbor_positions, ring_size
from hexsearch.letter_index import LetterIndex

NO_NEIGHBOR = -1
"""Value stored in the neighbor table for an empty slot."""

VALID_RING_PATTERN = re.compile(r"^[A-Z]+$")
"""Regex pattern for validating ring strings (uppercase letters A-Z only)."""


class HoneycombError(ValueError):
    """Raised when ring strings do not describe a valid honeycomb."""


class Cell(NamedTuple):
    """A single lettered cell of the honeycomb."""

    id: int
    """Index of the cell in `Honeycomb.cells`."""

    letter: str
    """Uppercase letter held by the cell."""

    ring: int
    """Ring of the cell (0 = center)."""

    position: int
    """Position of the cell within its ring."""


def validate_rings(rings: Sequence[str]) -> None:
    """Check that the ring strings describe a complete honeycomb.

    Raises:
        HoneycombError: If there are no rings, a ring has the wrong number of cells, or a
            ring contains anything other than uppercase letters.
    """
    if len(rings) == 0:
        raise HoneycombError("A honeycomb needs at least one ring.")
    for ring, layer in enumerate(rings):
        if not VALID_RING_PATTERN.match(layer):
            bad = sorted(set(layer) - set("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
            raise HoneycombError(
                f"Ring {ring} contains invalid characters: {bad or 'empty ring'}"
            )
        expected = ring_size(ring)
        if len(layer) != expected:
            raise HoneycombError(
                f"Ring {ring} has {len(layer)} cells, expected {expected}."
            )


class Honeycomb:
    """A honeycomb of lettered cells and the adjacency between them.

    Cells live in a single list and are referred to everywhere else by their id (index in
    that list).  Use `Honeycomb.build` to construct a connected honeycomb from ring strings.
    """

    def __init__(self, rings: Sequence[str]) -> None:
        """Create the cells of the honeycomb, without neighbors.

        Args:
            rings: One string per ring, ring 0 first.
        """
        validate_rings(rings)

        self.cells: list[Cell] = []
        """All cells, in ring-major, position-minor order."""

        self.ring_ids: list[list[int]] = []
        """Position index: `ring_ids[ring][position]` is the id of the cell at that spot."""

        self.letter_index = LetterIndex()
        """Cell ids grouped by letter.  Frozen once neighbors are resolved."""

        for ring, layer in enumerate(rings):
            ids: list[int] = []
            for position, letter in enumerate(layer):
                cell = Cell(len(self.cells), letter, ring, position)
                self.cells.append(cell)
                ids.append(cell.id)
                self.letter_index.add(letter, cell.id)
            self.ring_ids.append(ids)

        self.letters: str = "".join(rings)
        """Letters of all cells, indexed by cell id."""

        self.neighbors: np.ndarray = np.full((len(self.cells), SIDES), NO_NEIGHBOR, dtype=np.int32)
        """Neighbor table: row `i` holds the six neighbor slots of cell `i`."""

        self.adjacency: list[tuple[int, ...]] = [() for _ in self.cells]
        """Non-empty neighbor ids of each cell, in slot order (hot-path copy of `neighbors`)."""

    @classmethod
    def build(cls, rings: Sequence[str]) -> "Honeycomb":
        """Build a fully connected honeycomb from ring strings."""
        honeycomb = cls(rings)
        honeycomb.resolve_neighbors()
        return honeycomb

    @property
    def ring_count(self) -> int:
        """Number of rings."""
        return len(self.ring_ids)

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, idx: int | tuple[int, int]) -> Cell:
        """Get a cell by id or by `(ring, position)`."""
        if isinstance(idx, Integral):
            # Ids read from the numpy neighbor table are numpy integers
            return self.cells[int(idx)]
        if isinstance(idx, tuple) and len(idx) == 2:
            return self.cells[self.cell_id(*idx)]
        raise IndexError("Invalid index type for Honeycomb.")

    def cell_id(self, ring: int, position: int) -> int:
        """Convert a `(ring, position)` pair to a cell id."""
        if not 0 <= ring < self.ring_count or not 0 <= position < len(self.ring_ids[ring]):
            raise IndexError(f"No cell at ring {ring}, position {position}.")
        return self.ring_ids[ring][position]

    def rings(self) -> list[str]:
        """Return the ring strings the honeycomb was built from."""
        return ["".join(self.cells[i].letter for i in ids) for ids in self.ring_ids]

    def __str__(self) -> str:
        """Returns a string representation of the honeycomb, one ring per line."""
        return "\n".join(self.rings())

    def print(self, stream: TextIO | None = None) -> None:
        """Print the honeycomb, one ring per line prefixed by its index.

        Args:
            stream: Output stream.  Defaults to the console.
        """
        for ring, layer in enumerate(self.rings()):
            print(f"{ring:>3} {layer}", file=stream, flush=True)

    def resolve_neighbors(self) -> None:
        """Fill the neighbor table from ring geometry and freeze the letter index.

        Must be called once every cell exists, which `__init__` guarantees.
        """
        ring_count = self.ring_count
        for cell in self.cells:
            slots = neighbor_positions(cell.ring, cell.position, ring_count)
            for slot, target in enumerate(slots):
                if target is not None:
                    self.neighbors[cell.id, slot] = self._target_id(target)

        self.adjacency = [
            tuple(n for n in row if n != NO_NEIGHBOR) for row in self.neighbors.tolist()
        ]
        self.letter_index.freeze()

    def _target_id(self, target: Position) -> int:
        return self.ring_ids[target.ring][target.position]

    def neighbor_slots(self, cell_id: int) -> tuple[int | None, ...]:
        """Return the six neighbor slots of a cell, with `None` for empty slots."""
        return tuple(None if n == NO_NEIGHBOR else n for n in self.neighbors[cell_id].tolist())

    def neighbors_of(self, cell_id: int) -> tuple[int, ...]:
        """Return the ids of the neighbors of a cell, in slot order."""
        return self.adjacency[cell_id]

    def asymmetric_links(self) -> list[tuple[int, int]]:
        """Return `(source, target)` pairs where `target` does not list `source` back."""
        sources, slots = np.nonzero(self.neighbors != NO_NEIGHBOR)
        targets = self.neighbors[sources, slots]
        linked_back = np.any(self.neighbors[targets] == sources[:, None], axis=1)
        return [
            (int(s), int(t)) for s, t in zip(sources[~linked_back], targets[~linked_back])
        ]

    def is_symmetric(self) -> bool:
        """Check that every neighbor relation goes both ways."""
        return not self.asymmetric_links()
