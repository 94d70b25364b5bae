# newtonfractal

Computes the Newton-Raphson fractal of `f(z) = z³ - 1` over a small square
of the complex plane, `[-0.05, 0.05] × [-0.05, 0.05]`. For every pixel the
point is iterated with `z ← z - f(z) / f'(z)` and the number of steps until
`|f(z)| < 1e-6` is recorded, up to a limit of 1000 iterations. Points that
hit a zero derivative or overflow count as not converging (1000).

The grid can be computed in one process, or by a master that hands out one
row at a time to a pool of worker processes. This makes the package handy
for comparing strong and weak scaling of the same workload.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Commands

All commands take a *work multiplier*: the base grid is 7000 × 7000 and the
width is multiplied by this value, so the problem grows with it. The result
file is written to the current directory.

```
newton-seq <multiplier>
```

Computes the grid in a single process and writes
`newton_seq_mult<multiplier>_output.dat`. The reported time is the CPU time
of the computation.

```
newton-mpi [-n PROCESSES] <multiplier>
```

Computes the grid with a master/worker row distribution and writes
`newton_<processes>cores_parallel_mult<multiplier>_output.dat`.
`-n/--processes` is the total process count, the master included; it
defaults to the CPU count (at least 2) and must be at least 2.

```
newton-hybrid [-n PROCESSES] <multiplier> <threads>
newton-optimized [-n PROCESSES] <multiplier> <threads>
```

Each worker splits its row across `<threads>` threads. To keep the total
work equal to the plain master/worker run, the width is multiplied by the
thread count and the height divided by it (integer division).
`newton-optimized` gives workers on the master's host one thread fewer,
never less than one, and prints the thread count of every worker rank.
Both write
`newton_<processes>coresMpi_<threads>threadsOmp_mult<multiplier>_output.dat`.

For the parallel commands the reported time is the wall-clock time of the
row distribution.

The multiplier and thread count are read from the leading digits of the
argument (`"4x"` is 4, text without digits is 0); values that are not
greater than zero are rejected with a message and exit status 1. Each
command prints the elapsed time when it finishes.

## Output format

The result file is plain text. The first line is a header:

```
<width> <height> <seconds> <x_min> <x_max> <y_min> <y_max>
```

with the time printed to four decimal places and the region bounds to
seventeen. Each following line is one row of the grid: the iteration counts,
separated by single spaces.

## Library use

```python
from newtonfractal.fractal import Region, compute_grid, convergence_iterations
from newtonfractal.output import write_result, read_result

region = Region()
grid = compute_grid(64, 64, region)
write_result("small.dat", grid, 0.0, region)
matrix, elapsed, region_read = read_result("small.dat")

print(convergence_iterations(1 + 0j, 1000, 1e-6))  # 0: already a root
```

`newtonfractal.fractal` also has `pixel_coordinate`, `Region.point` and
`compute_row`. `newtonfractal.output` has `format_header` and the file-name
helpers `sequential_filename`, `mpi_filename` and `hybrid_filename`;
`read_result` raises `ValueError` when the header or row sizes do not match.

`newtonfractal.parallel` offers `run_master_worker(width, height, workers,
threads, region)`, which distributes rows over a pool of worker processes,
collects their `RowResult` values into the grid and returns
`(matrix, elapsed)`; `compute_row_threaded` for splitting one row across
threads; `hybrid_dimensions` and `worker_thread_count`.

## Limitations

All workers are local processes started with `multiprocessing`; the package
does not spread work across several machines. It produces only the text
result file and draws no image of the fractal.