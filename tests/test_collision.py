from __future__ import annotations

import random

from mars_rover.geometry_utils import Position
from mars_rover.world import (
    Obstacle,
    generate_obstacle_field,
    is_collision,
    nearest_obstacle,
    obstacle_field_from_list,
)


def test_empty_field_never_collides() -> None:
    assert not is_collision(Position(lat=0.0, lon=0.0), (), 8.0)
    assert not is_collision(Position(lat=0.0, lon=0.0), (), 1e9)
    assert nearest_obstacle(Position(lat=0.0, lon=0.0), ()) is None


def test_threshold_is_strict() -> None:
    field = (Obstacle(lat=0.0, lon=8.0),)
    assert not is_collision(Position(lat=0.0, lon=0.0), field, 8.0)
    assert is_collision(Position(lat=0.0, lon=0.5), field, 8.0)


def test_any_obstacle_within_threshold_collides() -> None:
    field = (
        Obstacle(lat=50.0, lon=50.0),
        Obstacle(lat=-60.0, lon=100.0),
        Obstacle(lat=10.0, lon=0.0),
    )
    assert is_collision(Position(lat=15.0, lon=0.0), field, 8.0)
    assert not is_collision(Position(lat=-10.0, lon=0.0), field, 8.0)


def test_diagonal_distance() -> None:
    field = (Obstacle(lat=3.0, lon=4.0),)  # 5 degrees from origin
    assert is_collision(Position(lat=0.0, lon=0.0), field, 5.01)
    assert not is_collision(Position(lat=0.0, lon=0.0), field, 5.0)


def test_nearest_obstacle() -> None:
    field = (Obstacle(lat=20.0, lon=0.0), Obstacle(lat=0.0, lon=-6.0))
    obs, dist = nearest_obstacle(Position(lat=0.0, lon=0.0), field)
    assert obs == Obstacle(lat=0.0, lon=-6.0)
    assert dist == 6.0


def test_generation_is_deterministic_with_seeded_rng() -> None:
    a = generate_obstacle_field(15, random.Random(42))
    b = generate_obstacle_field(15, random.Random(42))
    assert a == b
    assert len(a) == 15
    assert isinstance(a, tuple)
    for o in a:
        assert -90.0 <= o.lat < 90.0
        assert -180.0 <= o.lon < 180.0


def test_generation_count_edge_cases() -> None:
    assert generate_obstacle_field(0, random.Random(0)) == ()
    assert generate_obstacle_field(-3, random.Random(0)) == ()


def test_field_from_records() -> None:
    field = obstacle_field_from_list([{"lat": 10, "lon": "-5.5"}])
    assert field == (Obstacle(lat=10.0, lon=-5.5),)
