"""Backtracking search for words traced through adjacent honeycomb cells.

A word is found when its letters can be read along a path of neighboring cells that visits
no cell twice.  The search is a depth-first search bounded by the word length.  It runs on
an explicit stack, so neither the honeycomb size nor the word length touches the call stack.

On-path state lives in a `bitarray` with one bit per cell id.  Each top-level call creates
its own unless the caller supplies one, and every bit the search sets is cleared again before
the call returns, so independent searches never see each other's state.
"""

from bitarray import bitarray
from bitarray.util import zeros

from hexsearch.honeycomb import Honeycomb


def search(
    honeycomb: Honeycomb,
    word: str,
    start: int,
    *,
    on_path: bitarray | None = None,
) -> bool:
    """Return whether `word` can be traced along a simple path beginning at cell `start`.

    Args:
        honeycomb: A honeycomb with resolved neighbors.
        word: The word to trace, in uppercase.
        start: Id of the first cell of the path.
        on_path: Optional marker set (one bit per cell) of cells the path may not use.
            Restored to its original contents before returning.
    """
    return find_path(honeycomb, word, start, on_path=on_path) is not None


def find_path(
    honeycomb: Honeycomb,
    word: str,
    start: int,
    *,
    on_path: bitarray | None = None,
) -> list[int] | None:
    """Like `search`, but return the cell ids of the path found (or None)."""
    if not 0 <= start < len(honeycomb):
        raise IndexError(f"Cell {start} does not exist ({len(honeycomb)} cells).")
    if on_path is None:
        on_path = zeros(len(honeycomb))
    elif len(on_path) != len(honeycomb):
        raise ValueError(
            f"on_path has {len(on_path)} bits, expected one per cell ({len(honeycomb)})."
        )

    if not word or honeycomb.letters[start] != word[0] or on_path[start]:
        return None

    path = [start]
    if _extend(honeycomb.adjacency, honeycomb.letters, word, path, on_path):
        return path
    return None


def _extend(
    adjacency: list[tuple[int, ...]],
    letters: str,
    word: str,
    path: list[int],
    on_path: bitarray,
) -> bool:
    """Grow `path` until it spells `word`.

    `path` already spells `word[: len(path)]`.  On success `path` holds the full path; on
    failure it is left as it was passed in.

    Backtracking keeps its own stack of neighbor iterators, one per marked cell, so word
    length is not limited by the interpreter's recursion limit.  `frames[i]` walks the
    neighbors of `path[base - 1 + i]`, and exactly those cells are marked in `on_path`.
    """
    base = len(path)
    if base == len(word):
        return True

    frames = [iter(adjacency[path[-1]])]
    on_path[path[-1]] = 1
    try:
        while frames:
            next_letter = word[len(path)]
            for neighbor in frames[-1]:
                if not on_path[neighbor] and letters[neighbor] == next_letter:
                    break
            else:
                # Neighbors exhausted: backtrack one cell
                frames.pop()
                on_path[path[-1]] = 0
                if frames:
                    path.pop()
                continue

            path.append(neighbor)
            if len(path) == len(word):
                return True
            on_path[neighbor] = 1
            frames.append(iter(adjacency[neighbor]))
        return False
    finally:
        for cell in path[base - 1 : base - 1 + len(frames)]:
            on_path[cell] = 0


def locate_word(honeycomb: Honeycomb, word: str) -> list[int] | None:
    """Return a path spelling `word`, trying start cells in letter-index order."""
    if not word:
        return None
    on_path = zeros(len(honeycomb))
    for start in honeycomb.letter_index.lookup(word[0]):
        path = find_path(honeycomb, word, start, on_path=on_path)
        if path is not None:
            return path
    return None


def find_word(honeycomb: Honeycomb, word: str) -> bool:
    """Return whether `word` appears anywhere in the honeycomb."""
    return locate_word(honeycomb, word) is not None
