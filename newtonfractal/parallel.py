"""Master/worker computation of the fractal grid, one row per task."""

from __future__ import annotations

import multiprocessing
import time
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import chain

from newtonfractal.fractal import (
    BASE_HEIGHT,
    BASE_WIDTH,
    DEFAULT_REGION,
    Region,
    compute_row,
    convergence_iterations,
    pixel_coordinate,
)


@dataclass(frozen=True)
class RowResult:
    """Iteration counts a worker computed for one row of the grid."""

    row: int
    values: list[int]


def hybrid_dimensions(multiplier: int, threads: int) -> tuple[int, int]:
    """Grid ``(width, height)`` for a run with ``threads`` threads per worker.

    Rows are made ``threads`` times wider and the grid ``threads`` times
    shorter, so each thread does as much work as a single-threaded worker.
    """
    if multiplier <= 0 or threads <= 0:
        raise ValueError("multiplier and threads must be greater than 0")
    return BASE_WIDTH * multiplier * threads, BASE_HEIGHT // threads


def worker_thread_count(threads: int, on_master_host: bool) -> int:
    """Threads a worker uses; one fewer on the master's machine, never below one."""
    active = threads - 1 if on_master_host else threads
    return max(active, 1)


def compute_row_threaded(
    row: int,
    width: int,
    height: int,
    region: Region = DEFAULT_REGION,
    threads: int = 1,
) -> list[int]:
    """Iteration counts for one row, its columns shared out among threads."""
    if threads < 1:
        raise ValueError(f"threads must be at least 1, got {threads}")
    if threads == 1 or width <= 1:
        return compute_row(row, width, height, region)

    imaginary = pixel_coordinate(row, height, region.y_min, region.y_max)

    def segment(columns: range) -> list[int]:
        return [
            convergence_iterations(
                complex(
                    pixel_coordinate(x, width, region.x_min, region.x_max), imaginary
                )
            )
            for x in columns
        ]

    chunk = -(-width // threads)
    segments = [
        range(start, min(start + chunk, width)) for start in range(0, width, chunk)
    ]
    with ThreadPoolExecutor(max_workers=threads) as pool:
        return list(chain.from_iterable(pool.map(segment, segments)))


def _worker(rank, tasks, results, width, height, region, threads) -> None:
    """Compute rows handed out by the master until told to stop."""
    while True:
        row = tasks.get()
        if row is None:
            break
        try:
            values = compute_row_threaded(row, width, height, region, threads)
        except Exception as error:  # reported to the master, which raises
            results.put((rank, RuntimeError(repr(error))))
            break
        results.put((rank, RowResult(row, values)))


def run_master_worker(
    width: int,
    height: int,
    workers: int,
    threads: int = 1,
    region: Region = DEFAULT_REGION,
) -> tuple[list[list[int]], float]:
    """Compute the grid with ``workers`` processes pulling rows from a shared bag.

    Each worker first gets one row; whenever it returns a result it gets the
    next row, or a stop signal once none are left. Returns the matrix and the
    wall-clock seconds the distribution took.
    """
    if workers < 1:
        raise ValueError(f"at least one worker is needed, got {workers}")
    if threads < 1:
        raise ValueError(f"threads must be at least 1, got {threads}")
    if width < 0 or height < 0:
        raise ValueError("width and height must not be negative")

    context = multiprocessing.get_context()
    results = context.Queue()
    task_queues = [context.Queue() for _ in range(workers)]
    processes = [
        context.Process(
            target=_worker,
            args=(rank, queue, results, width, height, region, threads),
            daemon=True,
        )
        for rank, queue in enumerate(task_queues)
    ]
    for process in processes:
        process.start()

    matrix: list[list[int] | None] = [None] * height
    stopped: set[int] = set()
    finished = False
    try:
        start = time.perf_counter()
        rows: Iterator[int] = iter(range(height))
        active = 0
        for queue in task_queues:
            row = next(rows, None)
            if row is None:
                break
            queue.put(row)
            active += 1

        while active:
            rank, message = results.get()
            if isinstance(message, BaseException):
                raise RuntimeError(f"worker {rank} failed") from message
            matrix[message.row] = message.values
            row = next(rows, None)
            if row is None:
                task_queues[rank].put(None)
                stopped.add(rank)
                active -= 1
            else:
                task_queues[rank].put(row)
        elapsed = time.perf_counter() - start
        finished = True
    finally:
        for rank, queue in enumerate(task_queues):
            if rank not in stopped:
                queue.put(None)
        for process in processes:
            if finished:
                process.join()
            else:
                process.terminate()
                process.join()

    return [row for row in matrix if row is not None], elapsed