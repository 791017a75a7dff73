"""Module for dictionary loading in hexsearch."""

import re
from collections import Counter
from os import PathLike
from pathlib import Path

VALID_WORD_PATTERN = re.compile(r"^[A-Z]+$")
"""Regex pattern for validating dictionary words (after uppercasing)."""


def load_word_list(word_list_path: PathLike | str) -> list[str]:
    """Load a dictionary file, one word per line.

    Words are stripped and uppercased, blank lines are skipped and repeated words are
    dropped (keeping the first occurrence).

    Args:
        word_list_path: Path to the dictionary file.

    Returns:
        The words, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a word contains characters other than letters A-Z.
    """
    path = Path(word_list_path)
    if not path.is_file():
        raise FileNotFoundError(f"Word list file not found: {path}")

    words: dict[str, None] = {}
    with path.open("r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            word = line.strip().upper()
            if not word:
                continue
            if not VALID_WORD_PATTERN.match(word):
                raise ValueError(f"Invalid word on line {line_no} of {path}: '{line.strip()}'")
            words[word] = None
    return list(words)


def get_letter_frequency(words: list[str]) -> dict[str, float]:
    """Compute the frequency of each letter in the given words, as percentages.

    Args:
        words (list[str]): A list of words.
    """
    letter_freq: Counter[str] = Counter()
    for word in words:
        letter_freq.update(word)
    total_letter_count = letter_freq.total()
    if total_letter_count == 0:
        return {}
    return {ch: freq / total_letter_count * 100 for ch, freq in letter_freq.items()}
