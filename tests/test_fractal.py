import cmath
import math

import pytest

from newtonfractal.fractal import (
    EPSILON,
    MAX_ITERATIONS,
    Region,
    compute_grid,
    compute_row,
    convergence_iterations,
    pixel_coordinate,
)


def test_root_converges_immediately():
    assert convergence_iterations(1 + 0j) == 0


def test_complex_roots_converge_immediately():
    for k in (1, 2):
        root = cmath.exp(2j * math.pi * k / 3)
        assert convergence_iterations(root) == 0


def test_zero_never_converges():
    assert convergence_iterations(0j) == MAX_ITERATIONS


def test_nan_never_converges():
    assert convergence_iterations(complex(math.nan, math.nan)) == MAX_ITERATIONS


def test_custom_limit_is_respected():
    assert convergence_iterations(0j, max_iterations=7) == 7


def test_distant_point_takes_several_steps():
    result = convergence_iterations(2 + 0j)
    assert 0 < result < MAX_ITERATIONS


def test_loose_epsilon_converges_no_later():
    z = 0.3 + 0.4j
    assert convergence_iterations(z, epsilon=0.5) <= convergence_iterations(z, epsilon=EPSILON)


@pytest.mark.parametrize("z", [0.01 + 0.02j, -0.03 + 0.04j, 1.5 - 0.7j, -2 + 1j])
def test_conjugate_symmetry(z):
    assert convergence_iterations(z) == convergence_iterations(z.conjugate())


def test_pixel_coordinate_endpoints():
    assert pixel_coordinate(0, 11, -0.05, 0.05) == pytest.approx(-0.05)
    assert pixel_coordinate(10, 11, -0.05, 0.05) == pytest.approx(0.05)


def test_pixel_coordinate_is_increasing():
    values = [pixel_coordinate(i, 9, -1.0, 1.0) for i in range(9)]
    assert values == sorted(values)
    assert len(set(values)) == 9


def test_pixel_coordinate_single_sample_is_nan():
    value = pixel_coordinate(0, 1, -1.0, 1.0)
    assert repr(value) == "nan"


def test_pixel_coordinate_rejects_empty_axis():
    with pytest.raises(ValueError):
        pixel_coordinate(0, 0, -1.0, 1.0)


def test_default_region_matches_source_bounds():
    region = Region()
    assert (region.x_min, region.x_max, region.y_min, region.y_max) == (
        -0.05,
        0.05,
        -0.05,
        0.05,
    )


def test_region_point_corners():
    region = Region(-2.0, 2.0, -1.0, 1.0)
    assert region.point(0, 0, 5, 3) == pytest.approx(complex(-2.0, -1.0))
    assert region.point(4, 2, 5, 3) == pytest.approx(complex(2.0, 1.0))


def test_region_point_centre_of_odd_grid_is_origin():
    region = Region(-2.0, 2.0, -1.0, 1.0)
    assert region.point(2, 1, 5, 3) == 0j


def test_compute_row_length_and_bounds():
    row = compute_row(0, 12, 4)
    assert len(row) == 12
    assert all(0 <= value <= MAX_ITERATIONS for value in row)


def test_compute_row_matches_pointwise_iterations():
    region = Region(-1.5, 1.5, -1.5, 1.5)
    row = compute_row(2, 6, 5, region)
    assert row == [convergence_iterations(region.point(x, 2, 6, 5)) for x in range(6)]


def test_compute_grid_rows_equal_compute_row():
    region = Region(-1.0, 1.0, -1.0, 1.0)
    grid = compute_grid(5, 4, region)
    assert len(grid) == 4
    assert grid == [compute_row(y, 5, 4, region) for y in range(4)]


def test_grid_is_symmetric_about_real_axis():
    region = Region(-1.0, 1.0, -1.0, 1.0)
    grid = compute_grid(7, 6, region)
    assert grid == grid[::-1]


def test_origin_pixel_never_converges():
    grid = compute_grid(3, 3, Region(-1.0, 1.0, -1.0, 1.0))
    assert grid[1][1] == MAX_ITERATIONS