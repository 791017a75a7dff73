"""Hexagonal Word Search.

Finds the dictionary words that can be traced through a honeycomb of lettered hexagonal
cells.  Words are formed by paths through adjacent cells, and no cell may be used twice in
the same word.  Uses a depth-first backtracking search starting from every cell that holds
the first letter of the word.
"""

import sys
from sys import argv, exit

from .honeycomb import Honeycomb, HoneycombError
from .search import find_word, search
from .solver.config import config as solver_config
from .solver.solver import find_words, run

__all__ = [
    "Honeycomb",
    "HoneycombError",
    "find_word",
    "find_words",
    "main",
    "search",
]


def main() -> None:
    """Main entry point for the hexsearch solver."""
    # Expect the honeycomb file and, optionally, the dictionary file
    if len(argv) not in (2, 3):
        print("Usage: python -m hexsearch <honeycomb_file> [<dictionary_file>]")
        exit(1)
    honeycomb_path = argv[1]
    dictionary_path = argv[2] if len(argv) == 3 else solver_config.dictionary_path

    try:
        found = run(honeycomb_path, dictionary_path)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        exit(1)

    for word in found:
        print(word)
