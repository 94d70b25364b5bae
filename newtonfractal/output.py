"""Reading and writing the plain-text result files."""

from __future__ import annotations

import os
from collections.abc import Sequence

from newtonfractal.fractal import DEFAULT_REGION, Region

_HEADER_FIELDS = 7


def format_header(width: int, height: int, elapsed: float, region: Region) -> str:
    """Header line (without newline): size, elapsed seconds and region bounds."""
    return (
        f"{width:d} {height:d} {elapsed:.4f} "
        f"{region.x_min:.17f} {region.x_max:.17f} "
        f"{region.y_min:.17f} {region.y_max:.17f}"
    )


def write_result(
    path: str | os.PathLike[str],
    matrix: Sequence[Sequence[int]],
    elapsed: float,
    region: Region = DEFAULT_REGION,
) -> None:
    """Write a header line followed by one space-separated line per row."""
    width = len(matrix[0]) if matrix else 0
    if any(len(row) != width for row in matrix):
        raise ValueError("all rows of the matrix must have the same length")
    with open(path, "w", encoding="ascii") as stream:
        stream.write(format_header(width, len(matrix), elapsed, region) + "\n")
        for row in matrix:
            stream.write(" ".join(str(value) for value in row) + "\n")


def read_result(
    path: str | os.PathLike[str],
) -> tuple[list[list[int]], float, Region]:
    """Read a result file back as ``(matrix, elapsed, region)``."""
    with open(path, encoding="ascii") as stream:
        header = stream.readline().split()
        if len(header) != _HEADER_FIELDS:
            raise ValueError(
                f"header must have {_HEADER_FIELDS} fields, found {len(header)}"
            )
        try:
            width, height = int(header[0]), int(header[1])
            elapsed = float(header[2])
            region = Region(*(float(field) for field in header[3:]))
        except ValueError as error:
            raise ValueError(f"malformed header: {error}") from None

        matrix = []
        for number, line in enumerate(stream, start=2):
            if not line.strip():
                continue
            row = [int(value) for value in line.split()]
            if len(row) != width:
                raise ValueError(
                    f"line {number} has {len(row)} values, expected {width}"
                )
            matrix.append(row)

    if len(matrix) != height:
        raise ValueError(f"file has {len(matrix)} rows, expected {height}")
    return matrix, elapsed, region


def sequential_filename(multiplier: int) -> str:
    """Output file name of a sequential run."""
    return f"newton_seq_mult{multiplier}_output.dat"


def mpi_filename(cores: int, multiplier: int) -> str:
    """Output file name of a master/worker run with one thread per worker."""
    return f"newton_{cores}cores_parallel_mult{multiplier}_output.dat"


def hybrid_filename(cores: int, threads: int, multiplier: int) -> str:
    """Output file name of a master/worker run with several threads per worker."""
    return f"newton_{cores}coresMpi_{threads}threadsOmp_mult{multiplier}_output.dat"