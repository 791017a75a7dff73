"""Main module for worker tasks in the parallel solver."""

from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized

from setproctitle import setproctitle

from hexsearch.honeycomb import Honeycomb
from hexsearch.search import find_word


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    honeycomb: Honeycomb
    """The worker's own copy of the honeycomb, built once at startup."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: Synchronized,
    name: str,
    rings: list[str],
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        name (str): Name of the honeycomb, used in the process title.
        rings (list[str]): Ring strings of the honeycomb to search.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    setproctitle(f"hexsearch: worker {worker_idx} [{name}]")
    worker_state = WorkerState(
        worker_idx=worker_idx,
        honeycomb=Honeycomb.build(rings),
    )


def worker_task(words: list[str]) -> list[str]:
    """Search the worker's honeycomb for a chunk of words.

    Args:
        words (list[str]): The words to search for.

    Returns:
        The words that were found, in input order.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    return [w for w in words if find_word(worker_state.honeycomb, w)]
