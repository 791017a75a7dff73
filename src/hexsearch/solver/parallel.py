"""Implementation of the parallel solver: task distribution and worker management."""

import traceback
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from pprint import pprint
from typing import Literal, TextIO

from sortedcontainers import SortedSet

from hexsearch.solver.config import config as solver_config
from hexsearch.solver.task_args import TaskArgs
from hexsearch.solver.utils import int_comma
from hexsearch.solver.worker import worker_task


def chunked(words: list[str], size: int) -> list[list[str]]:
    """Split the word list into consecutive chunks of at most `size` words."""
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}.")
    return [words[i : i + size] for i in range(0, len(words), size)]


def search_with_parallel_chunks(
    executor: ProcessPoolExecutor,
    task_args: TaskArgs,
    logf: TextIO,
) -> SortedSet:
    """Search for the task's words using chunk-based parallelism.

    Args:
        executor (ProcessPoolExecutor): Executor for managing worker processes.
        task_args (TaskArgs): The honeycomb and the words to search for.
        logf: File object to log the solving process.

    Returns:
        The found words, as a SortedSet.

    Raises:
        RuntimeError: If any chunk failed.  All chunks are processed before raising.
    """
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)
    print("Solver initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)

    chunks = chunked(task_args.words, solver_config.chunk_size)
    print(
        f"Starting parallel search: {int_comma(len(task_args.words))} words "
        f"in {len(chunks)} chunks...",
        file=logf,
        flush=True,
    )

    # Send tasks to worker processes, read results as they complete
    futures = {executor.submit(_worker_task, idx, chunk): idx for idx, chunk in enumerate(chunks)}
    found: SortedSet = SortedSet()
    failed: list[int] = []
    for future in as_completed(futures):
        result = future.result()
        if result.status == "success":
            found.update(result.found)
            print(
                f"Chunk {result.chunk_idx}: {len(result.found)} words found.",
                file=logf,
                flush=True,
            )
        else:
            print(f"Chunk {result.chunk_idx} encountered an error:", file=logf, flush=True)
            print(result.err_msg, file=logf, flush=True)
            failed.append(result.chunk_idx)

    if failed:
        raise RuntimeError(
            f"{len(failed)} of {len(chunks)} chunks failed: {sorted(failed)}. See the run log."
        )

    print("All chunks processed.", file=logf, flush=True)
    return found


@dataclass
class Result:
    """Wrapper for worker task results."""

    chunk_idx: int
    status: Literal["success", "error"]
    found: list[str]
    err_msg: str | None = None


def _worker_task(chunk_idx: int, words: list[str]) -> Result:
    """Worker task to search for a chunk of words.

    Args:
        chunk_idx (int): Index of the chunk, for reporting.
        words (list[str]): The words to search for.

    Returns:
        A Result wrapper.
    """
    try:
        return Result(chunk_idx=chunk_idx, status="success", found=worker_task(words))
    except Exception as e:
        return Result(
            chunk_idx=chunk_idx,
            status="error",
            found=[],
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )
