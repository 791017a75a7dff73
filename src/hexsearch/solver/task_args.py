"""Task arguments shared by the in-process and parallel solvers."""

from collections import Counter
from datetime import datetime
from time import time

from hexsearch.honeycomb_config import HoneycombConfig
from hexsearch.solver.config import config as solver_config
from hexsearch.solver.utils import TIMESTAMP_FMT, prefilter


class TaskArgs:
    """Wrapper for task arguments for the solver.

    Pickleable, so that it can be used with multiprocessing (passed to worker processes).
    """

    def __init__(
        self, *, config: HoneycombConfig, words: list[str], letters: Counter[str]
    ) -> None:
        """Initialize the task with the given honeycomb and word list.

        Args:
            config (HoneycombConfig): The honeycomb to search.
            words (list[str]): The dictionary words.
            letters (Counter[str]): Number of cells holding each letter, for the prefilter.
        """
        self.honeycomb_config = config.to_dict()
        """dict representing the honeycomb configuration."""

        self.words_total = len(words)
        """Number of dictionary words before prefiltering."""

        if solver_config.prefilter_words:
            words = prefilter(words, letters)
        self.words = list(words)
        """Words to search for."""

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        config = HoneycombConfig.from_dict(self.honeycomb_config)
        return {
            "honeycomb": str(config),
            "words_total": self.words_total,
            "words_searched": len(self.words),
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
