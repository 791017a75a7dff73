"""Main solver module: search a whole dictionary in a honeycomb."""

import os
import sys
from concurrent.futures import ProcessPoolExecutor
from datetime import datetime
from io import StringIO
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from os import PathLike
from pathlib import Path
from time import time
from typing import TextIO

from sortedcontainers import SortedSet

from hexsearch.honeycomb import Honeycomb
from hexsearch.honeycomb_config import HoneycombConfig, load_honeycomb
from hexsearch.search import find_word
from hexsearch.solver.config import config as solver_config
from hexsearch.solver.parallel import search_with_parallel_chunks
from hexsearch.solver.task_args import TaskArgs
from hexsearch.solver.utils import TIMESTAMP_FMT, int_comma, time_str
from hexsearch.solver.worker import init_worker_globals
from hexsearch.wordlist import get_letter_frequency, load_word_list


def get_executor(*, n_workers: int | None = None, config: HoneycombConfig) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers each hold a copy of the honeycomb.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.
        config (HoneycombConfig): The honeycomb the workers will search.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers < 1:
        raise ValueError(f"Number of workers must be positive, got {n_workers}")
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, config.name, list(config.rings)),
    )


def search_in_process(honeycomb: Honeycomb, words: list[str]) -> SortedSet:
    """Search for each word in turn in the current process."""
    return SortedSet(w for w in words if find_word(honeycomb, w))


def find_words(
    honeycomb: Honeycomb,
    words: list[str],
    *,
    max_workers: int | None = None,
    parallel: bool | None = None,
    logf: TextIO | None = None,
    name: str = "honeycomb",
) -> list[str]:
    """Return the words that can be traced in the honeycomb, sorted and without repeats.

    Args:
        honeycomb (Honeycomb): A honeycomb with resolved neighbors.
        words (list[str]): The dictionary words, in uppercase.
        max_workers (int | None): Worker processes for the parallel search.  If None,
            uses the `max_workers` setting.
        parallel (bool | None): Force (True) or disable (False) the parallel search.  If None
            (default), dictionaries of at least `parallel_min_words` words are searched in
            parallel.
        logf: File object to log the solving process.  Discarded if None.
        name (str): Name of the honeycomb, for the log and worker process titles.
    """
    logf = logf if logf is not None else StringIO()
    config = HoneycombConfig(name=name, rings=tuple(honeycomb.rings()))
    task_args = TaskArgs(
        config=config, words=words, letters=honeycomb.letter_index.counts()
    )

    if task_args.words_total != len(task_args.words):
        print(
            f"Prefilter skipped {int_comma(task_args.words_total - len(task_args.words))} words "
            "the honeycomb's letters cannot spell.",
            file=logf,
            flush=True,
        )

    if parallel is None:
        parallel = len(task_args.words) >= solver_config.parallel_min_words

    if not parallel or not task_args.words:
        print("Using in-process solver...", file=logf, flush=True)
        found = search_in_process(honeycomb, task_args.words)
    else:
        if max_workers is None:
            max_workers = solver_config.max_workers
        with get_executor(n_workers=max_workers, config=config) as executor:
            try:
                print("Using chunked parallel solver...", file=logf, flush=True)
                found = search_with_parallel_chunks(executor, task_args, logf)
            except BaseException:
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    print(
        f"Found {int_comma(len(found))} of {int_comma(task_args.words_total)} words "
        f"in {time_str(time() - task_args.start_time)}.",
        file=logf,
        flush=True,
    )
    return list(found)


def solve_one(config: HoneycombConfig, words: list[str], *, logf: TextIO) -> list[str]:
    """Search a honeycomb for all dictionary words, logging the run.

    Args:
        config (HoneycombConfig): The honeycomb to search.
        words (list[str]): The dictionary words.
        logf: File object to log the solving process.

    Returns:
        The found words, sorted.
    """
    honeycomb = Honeycomb.build(config.rings)

    print(f"Selected honeycomb: {config}", file=logf, flush=True)
    print("Rings:", file=logf, flush=True)
    print("", file=logf, flush=True)
    honeycomb.print(stream=logf)
    print("", file=logf, flush=True)
    print(f"Dictionary words: {int_comma(len(words))}", file=logf, flush=True)

    frequency = get_letter_frequency(words)
    common = sorted(frequency, key=lambda ch: (-frequency[ch], ch))[:5]
    print(
        f"Most common dictionary letters: {', '.join(f'{ch} {frequency[ch]:.1f}%' for ch in common)}",
        file=logf,
        flush=True,
    )

    start_time_str = datetime.now().astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    return find_words(honeycomb, words, logf=logf, name=config.name)


def run(honeycomb_path: PathLike | str, dictionary_path: PathLike | str) -> list[str]:
    """Run the solver on the given honeycomb and dictionary files.

    A log of the run is written to `<log_dir>/<honeycomb name>.log`.

    Args:
        honeycomb_path: Path to the honeycomb file.
        dictionary_path: Path to the dictionary file.

    Returns:
        The found words, sorted.
    """
    config = load_honeycomb(honeycomb_path)
    words = load_word_list(dictionary_path)

    logfile = Path(solver_config.log_dir) / f"{config.name}.log"
    print(f"Log file: {logfile}", file=sys.stderr)

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            return solve_one(config, words, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.", file=sys.stderr)
            sys.exit(1)
