"""Newton-Raphson iteration for f(z) = z**3 - 1 over a rectangular grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

BASE_WIDTH = 7000
BASE_HEIGHT = 7000
MAX_ITERATIONS = 1000
EPSILON = 1e-6

X_MIN = -0.05
X_MAX = 0.05
Y_MIN = -0.05
Y_MAX = 0.05


def convergence_iterations(
    z: complex,
    max_iterations: int = MAX_ITERATIONS,
    epsilon: float = EPSILON,
) -> int:
    """Return how many Newton steps ``z`` needs to reach a root of z**3 - 1.

    Returns ``max_iterations`` when the iteration does not converge, including
    when it hits a zero derivative or overflows.
    """
    for iteration in range(max_iterations):
        try:
            square = z * z
            f = square * z - 1
            derivative = 3 * square
            if abs(f) < epsilon:
                return iteration
            z = z - f / derivative
        except (ZeroDivisionError, OverflowError):
            # The point runs off to infinity and can never converge.
            return max_iterations
    return max_iterations


def pixel_coordinate(index: int, count: int, low: float, high: float) -> float:
    """Map ``index`` in ``0..count-1`` linearly onto ``[low, high]``.

    A single-sample axis has no spacing; its coordinate is NaN, which never
    converges.
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    denominator = count - 1
    if denominator == 0:
        return math.nan
    return low + (high - low) * index / denominator


@dataclass(frozen=True)
class Region:
    """Rectangle of the complex plane that the grid covers."""

    x_min: float = X_MIN
    x_max: float = X_MAX
    y_min: float = Y_MIN
    y_max: float = Y_MAX

    def point(self, x: int, y: int, width: int, height: int) -> complex:
        """Complex number at pixel ``(x, y)`` of a ``width`` x ``height`` grid."""
        real = pixel_coordinate(x, width, self.x_min, self.x_max)
        imaginary = pixel_coordinate(y, height, self.y_min, self.y_max)
        return complex(real, imaginary)


DEFAULT_REGION = Region()


def compute_row(
    row: int, width: int, height: int, region: Region = DEFAULT_REGION
) -> list[int]:
    """Iteration counts for every pixel of one grid row."""
    imaginary = pixel_coordinate(row, height, region.y_min, region.y_max)
    return [
        convergence_iterations(
            complex(pixel_coordinate(x, width, region.x_min, region.x_max), imaginary)
        )
        for x in range(width)
    ]


def compute_grid(
    width: int, height: int, region: Region = DEFAULT_REGION
) -> list[list[int]]:
    """Iteration counts for the whole grid, one list per row."""
    return [compute_row(row, width, height, region) for row in range(height)]