"""Command-line entry points for the sequential and parallel fractal runs."""

from __future__ import annotations

import argparse
import os
import re
import socket
import sys
import time
from collections.abc import Sequence

from newtonfractal.fractal import BASE_HEIGHT, BASE_WIDTH, DEFAULT_REGION, compute_grid
from newtonfractal.output import (
    hybrid_filename,
    mpi_filename,
    sequential_filename,
    write_result,
)
from newtonfractal.parallel import (
    hybrid_dimensions,
    run_master_worker,
    worker_thread_count,
)

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _default_processes() -> int:
    return max(2, os.cpu_count() or 1)


def _parser(prog: str, description: str, *, processes: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    if processes:
        parser.add_argument(
            "-n",
            "--processes",
            type=int,
            default=_default_processes(),
            help="total processes, the master included (default: CPU count)",
        )
    parser.add_argument("multiplier", help="work multiplier (weak scaling)")
    return parser


def _save(filename: str, matrix, elapsed: float) -> bool:
    try:
        write_result(filename, matrix, elapsed, DEFAULT_REGION)
    except OSError as error:
        print(f"Error opening output file: {error}", file=sys.stderr)
        return False
    return True


def main_seq(argv: Sequence[str] | None = None) -> int:
    """Compute the fractal in a single process."""
    parser = _parser("newton-seq", "Sequential Newton fractal.", processes=False)
    args = parser.parse_args(argv)
    multiplier = _atoi(args.multiplier)
    if multiplier <= 0:
        print("Invalid value for work multiplier.", file=sys.stderr)
        return 1

    width = BASE_WIDTH * multiplier
    height = BASE_HEIGHT
    filename = sequential_filename(multiplier)

    print(f"Sequential run with work multiplier = {multiplier}")
    start = time.process_time()
    matrix = compute_grid(width, height, DEFAULT_REGION)
    elapsed = time.process_time() - start

    if not _save(filename, matrix, elapsed):
        return 1
    print(f"Execution time: {elapsed:.4f} seconds")
    return 0


def main_mpi(argv: Sequence[str] | None = None) -> int:
    """Compute the fractal with a master handing rows to worker processes."""
    parser = _parser("newton-mpi", "Master/worker Newton fractal.", processes=True)
    args = parser.parse_args(argv)
    multiplier = _atoi(args.multiplier)
    if multiplier <= 0:
        print("Invalid value for work multiplier.", file=sys.stderr)
        return 1
    size = args.processes
    if size < 2:
        print("At least 2 processes are needed.", file=sys.stderr)
        return 1

    width = BASE_WIDTH * multiplier
    height = BASE_HEIGHT

    print(f"Parallel run with {size} cores and work multiplier = {multiplier}")
    matrix, elapsed = run_master_worker(width, height, size - 1, 1, DEFAULT_REGION)

    if not _save(mpi_filename(size, multiplier), matrix, elapsed):
        return 1
    print(f"Execution time: {elapsed:.4f} seconds")
    return 0


def _run_hybrid(argv: Sequence[str] | None, prog: str, optimized: bool) -> int:
    parser = _parser(prog, "Master/worker Newton fractal with threads.", processes=True)
    parser.add_argument("threads", help="threads per worker process")
    args = parser.parse_args(argv)
    multiplier = _atoi(args.multiplier)
    threads = _atoi(args.threads)
    if multiplier <= 0 or threads <= 0:
        print("Invalid parameters. They must be greater than 0.", file=sys.stderr)
        return 1
    size = args.processes
    if size < 2:
        print("At least 2 processes are needed.", file=sys.stderr)
        return 1

    width, height = hybrid_dimensions(multiplier, threads)

    print(
        f"Parallel run with {size} processes, {threads} threads per process.\n"
        f" Total workers = {(size - 1) * threads}\n"
        f" Work multiplier = {multiplier}"
    )

    worker_threads = threads
    if optimized:
        master_host = socket.gethostname()
        worker_host = socket.gethostname()  # workers run on this machine
        worker_threads = worker_thread_count(threads, worker_host == master_host)
        for rank in range(1, size):
            print(
                f"Rank {rank} on {worker_host} (master on {master_host}): "
                f"using {worker_threads} threads"
            )

    matrix, elapsed = run_master_worker(
        width, height, size - 1, worker_threads, DEFAULT_REGION
    )

    if not _save(hybrid_filename(size, threads, multiplier), matrix, elapsed):
        return 1
    print(f"Execution time: {elapsed:.4f} seconds")
    return 0


def main_hybrid(argv: Sequence[str] | None = None) -> int:
    """Master/worker run with several threads inside every worker."""
    return _run_hybrid(argv, "newton-hybrid", optimized=False)


def main_optimized(argv: Sequence[str] | None = None) -> int:
    """Hybrid run that leaves one thread free on the master's machine."""
    return _run_hybrid(argv, "newton-optimized", optimized=True)