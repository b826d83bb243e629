from __future__ import annotations

import math

from mars_rover.geometry_utils import Position
from mars_rover.rover import HEADING_AXIS, Heading, Rover, rotate_heading


def test_initial_state() -> None:
    rover = Rover()
    state = rover.get_state()
    assert state.position == Position(lat=0.0, lon=0.0)
    assert state.heading is Heading.NORTH


def test_every_heading_has_an_axis() -> None:
    assert set(HEADING_AXIS) == set(Heading)


def test_rotation_cycles() -> None:
    for heading in Heading:
        h = heading
        for _ in range(4):
            h = rotate_heading(h, left=False)
        assert h is heading
        assert rotate_heading(rotate_heading(heading, left=True), left=False) is heading
        assert rotate_heading(rotate_heading(heading, left=False), left=True) is heading


def test_rotation_order() -> None:
    assert rotate_heading(Heading.NORTH, left=False) is Heading.EAST
    assert rotate_heading(Heading.NORTH, left=True) is Heading.WEST
    assert rotate_heading(Heading.WEST, left=False) is Heading.NORTH


def test_rotate_keeps_position() -> None:
    rover = Rover()
    rover.reset(lat=12.5, lon=-40.0, heading=Heading.SOUTH)
    state = rover.rotate(left=True)
    assert state.position == Position(lat=12.5, lon=-40.0)
    assert state.heading is Heading.EAST


def test_move_table() -> None:
    expected = {
        (Heading.NORTH, True): (10.0, 0.0),
        (Heading.NORTH, False): (-10.0, 0.0),
        (Heading.SOUTH, True): (-10.0, 0.0),
        (Heading.SOUTH, False): (10.0, 0.0),
        (Heading.EAST, True): (0.0, 10.0),
        (Heading.EAST, False): (0.0, -10.0),
        (Heading.WEST, True): (0.0, -10.0),
        (Heading.WEST, False): (0.0, 10.0),
    }
    for (heading, forward), (lat, lon) in expected.items():
        rover = Rover(move_step=10.0)
        rover.reset(heading=heading)
        candidate = rover.propose_move(forward=forward)
        assert candidate == Position(lat=lat, lon=lon)
        # Proposing does not commit.
        assert rover.get_state().position == Position(lat=0.0, lon=0.0)


def test_commit_keeps_heading() -> None:
    rover = Rover()
    rover.reset(heading=Heading.WEST)
    state = rover.commit(rover.propose_move(forward=True))
    assert state.heading is Heading.WEST
    assert math.isclose(state.lon, -10.0)


def test_propose_move_wraps_over_pole() -> None:
    rover = Rover()
    rover.reset(lat=85.0, lon=20.0, heading=Heading.NORTH)
    assert rover.propose_move(forward=True) == Position(lat=-85.0, lon=20.0)


def test_to_dict() -> None:
    rover = Rover()
    assert rover.to_dict() == {"lat": 0.0, "lon": 0.0, "heading": "N"}
