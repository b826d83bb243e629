from __future__ import annotations

import math

from mars_rover.projection import (
    MERCATOR_LAT_LIMIT,
    graticule,
    mercator,
    project_lat,
    project_lon,
    to_screen,
)


def test_longitude_is_linear() -> None:
    assert project_lon(-180.0) == 0.0
    assert project_lon(0.0) == 0.5
    assert project_lon(180.0) == 1.0
    assert math.isclose(project_lon(90.0), 0.75)


def test_latitude_endpoints_and_equator() -> None:
    assert math.isclose(project_lat(90.0), 0.0, abs_tol=1e-12)
    assert math.isclose(project_lat(-90.0), 1.0, abs_tol=1e-12)
    assert math.isclose(project_lat(0.0), 0.5, abs_tol=1e-12)


def test_mercator_is_clamped_near_poles() -> None:
    assert mercator(90.0) == mercator(MERCATOR_LAT_LIMIT)
    assert mercator(-90.0) == mercator(-MERCATOR_LAT_LIMIT)
    assert math.isfinite(mercator(90.0))


def test_north_maps_to_smaller_y() -> None:
    lats = [-89.0, -60.0, -10.0, 0.0, 5.0, 45.0, 80.0, 89.9]
    ys = [project_lat(lat) for lat in lats]
    for lower, higher in zip(ys, ys[1:]):
        assert lower > higher


def test_to_screen_scales_both_axes_by_grid_size() -> None:
    x, y = to_screen(0.0, 0.0, grid_size=600)
    assert math.isclose(x, 300.0)
    assert math.isclose(y, 300.0, abs_tol=1e-9)

    x, y = to_screen(90.0, 180.0, grid_size=600)
    assert math.isclose(x, 600.0)
    assert math.isclose(y, 0.0, abs_tol=1e-9)


def test_graticule_lines() -> None:
    g = graticule(num_lines=10, grid_size=600)
    assert len(g.lat_lines) == 11
    assert len(g.lon_lines) == 11
    assert math.isclose(g.lat_lines[0], 0.0, abs_tol=1e-9)
    assert math.isclose(g.lat_lines[-1], 600.0, abs_tol=1e-9)
    assert math.isclose(g.lat_lines[5], 300.0, abs_tol=1e-9)
    assert g.lon_lines[1] == 60.0
    # Parallels crowd toward the equator with this projection.
    assert g.lat_lines[1] - g.lat_lines[0] > g.lat_lines[5] - g.lat_lines[4]
