"""Neighbor arithmetic for honeycombs of concentric hexagonal rings.

Cells are addressed by `(ring, position)`.  Ring 0 is the single center cell and ring `r > 0`
holds `6 * r` cells, numbered clockwise from one of the six corners.  Every cell has six
neighbor slots, filled in the order given by the `SLOT_*` constants below.  Slot 5 is shared:
edge cells use it for their second inward neighbor and corner cells for their extra outward
neighbor, so a cell never needs both.
"""

from enum import IntEnum
from typing import NamedTuple

SIDES = 6
"""Number of sides of a hexagon, and the number of neighbor slots of each cell."""


class Slot(IntEnum):
    """Neighbor slot indexes.  Searches visit neighbors in this order."""

    INWARD = 0
    LEFT = 1
    RIGHT = 2
    OUTWARD_MIDDLE = 3
    OUTWARD_RIGHT = 4
    SECONDARY = 5
    """Inward-secondary neighbor for edge cells, outward-left neighbor for corner cells."""


class Position(NamedTuple):
    """Location of a cell in the honeycomb."""

    ring: int
    position: int


Neighbors = tuple[Position | None, ...]
"""Six neighbor slots; `None` marks a slot with no cell behind it."""


def ring_size(ring: int) -> int:
    """Return the number of cells in the given ring."""
    if ring < 0:
        raise ValueError(f"Ring index must be non-negative, got {ring}.")
    return 1 if ring == 0 else SIDES * ring


def is_corner(ring: int, position: int) -> bool:
    """Return whether `(ring, position)` sits on one of the six points of its ring.

    The center cell counts as a corner.
    """
    _check_position(ring, position)
    return ring == 0 or position % ring == 0


def neighbor_positions(ring: int, position: int, ring_count: int) -> Neighbors:
    """Compute the neighbor slots of a cell.

    Args:
        ring: Ring of the cell (0 = center).
        position: Position of the cell within its ring.
        ring_count: Total number of rings in the honeycomb.

    Returns:
        A tuple of six slots, indexed by `Slot`.  Slots pointing past the outermost ring are
        `None`.

    Raises:
        ValueError: If the cell does not exist in a honeycomb of `ring_count` rings.
    """
    if not 0 <= ring < ring_count:
        raise ValueError(f"Ring {ring} does not exist in a honeycomb of {ring_count} rings.")
    _check_position(ring, position)

    slots: list[Position | None] = [None] * SIDES

    if ring == 0:
        # The center touches every cell of ring 1, in position order
        if ring_count > 1:
            for slot in range(SIDES):
                slots[slot] = Position(1, slot)
        return tuple(slots)

    count = ring_size(ring)
    last = count - 1
    side, offset = divmod(position, ring)
    corner = offset == 0

    inward = (ring - 1) * side + offset
    if position < last:
        slots[Slot.INWARD] = Position(ring - 1, inward)
    else:
        slots[Slot.INWARD] = Position(ring - 1, 0)
    if not corner:
        # For the last cell of the ring this lands on the last cell of the inner ring
        slots[Slot.SECONDARY] = Position(ring - 1, inward - 1)

    slots[Slot.LEFT] = Position(ring, position - 1 if position > 0 else last)
    slots[Slot.RIGHT] = Position(ring, position + 1 if position < last else 0)

    if ring + 1 < ring_count:
        outward = (ring + 1) * side + offset
        slots[Slot.OUTWARD_MIDDLE] = Position(ring + 1, outward)
        slots[Slot.OUTWARD_RIGHT] = Position(ring + 1, outward + 1)
        if corner:
            if position > 0:
                slots[Slot.SECONDARY] = Position(ring + 1, outward - 1)
            else:
                slots[Slot.SECONDARY] = Position(ring + 1, ring_size(ring + 1) - 1)

    return tuple(slots)


def _check_position(ring: int, position: int) -> None:
    """Raise ValueError unless `position` is a valid index into `ring`."""
    size = ring_size(ring)
    if not 0 <= position < size:
        raise ValueError(f"Position {position} is out of range for ring {ring} ({size} cells).")
