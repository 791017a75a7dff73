"""Utility functions for the hexsearch solver."""

from collections import Counter
from functools import lru_cache

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def is_traceable(to_trace: Counter[str], letters: Counter[str]) -> bool:
    """Returns whether the honeycomb holds enough cells of each letter for a word.

    A path never visits a cell twice, so this is a necessary condition for finding the word.

    Args:
        to_trace (Counter[str]): A counter of the letters of the word.
        letters (Counter[str]): A counter of the letters of the honeycomb cells.
    """
    return all(to_trace[ch] <= letters[ch] for ch in to_trace)


@lru_cache(maxsize=300_000)
def get_word_counter(word: str) -> Counter[str]:
    """Return a cached Counter for a word.

    Note: the returned Counter must be treated as immutable.
    """
    return Counter(word)


def prefilter(words: list[str], letters: Counter[str]) -> list[str]:
    """Drop words that cannot be traced with the given cell letters, keeping order."""
    cell_count = letters.total()
    return [
        w
        for w in words
        if 0 < len(w) <= cell_count and is_traceable(get_word_counter(w), letters)
    ]


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
