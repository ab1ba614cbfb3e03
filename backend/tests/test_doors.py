"""Tests for floorplan/services/doors.py."""
import pytest

from floorplan.services.doors import alternating_swing, place_door, with_door
from floorplan.services.geometry import Rect
from floorplan.services.plan_types import DoorDirection, DoorSwing, Room, RoomType

RECT = Rect(2, 1, 4, 3)


class TestPlaceDoor:
    def test_bottom_wall(self):
        door = place_door(RECT, DoorDirection.DOWN, 0.25, DoorSwing.CW)
        assert (door.x, door.y) == (pytest.approx(3.0), pytest.approx(4.0))
        assert door.direction == DoorDirection.DOWN
        assert door.swing == DoorSwing.CW

    def test_top_wall(self):
        door = place_door(RECT, DoorDirection.UP, 0.5, DoorSwing.CCW)
        assert (door.x, door.y) == (pytest.approx(4.0), pytest.approx(1.0))
        assert door.direction == DoorDirection.UP

    def test_left_wall(self):
        door = place_door(RECT, DoorDirection.LEFT, 0.5, DoorSwing.CW)
        assert (door.x, door.y) == (pytest.approx(2.0), pytest.approx(2.5))
        assert door.direction == DoorDirection.LEFT

    def test_right_wall(self):
        door = place_door(RECT, DoorDirection.RIGHT, 0.4, DoorSwing.CW)
        assert (door.x, door.y) == (pytest.approx(6.0), pytest.approx(2.2))
        assert door.direction == DoorDirection.RIGHT

    def test_door_lies_on_room_boundary(self):
        for side in DoorDirection:
            door = place_door(RECT, side, 0.3, DoorSwing.CW)
            on_vertical = door.x in (RECT.x, RECT.right) and RECT.y <= door.y <= RECT.bottom
            on_horizontal = door.y in (RECT.y, RECT.bottom) and RECT.x <= door.x <= RECT.right
            assert on_vertical or on_horizontal


class TestAlternatingSwing:
    def test_even_is_clockwise(self):
        assert [alternating_swing(i) for i in range(4)] == [
            DoorSwing.CW, DoorSwing.CCW, DoorSwing.CW, DoorSwing.CCW,
        ]


class TestWithDoor:
    def test_replaces_doors_only(self):
        room = Room(id="bed-1", type=RoomType.BEDROOM, label="Bed", x=2, y=1, w=4, h=3)
        placed = with_door(room, DoorDirection.DOWN, 0.5, DoorSwing.CW)
        assert len(placed.doors) == 1
        assert (placed.x, placed.y, placed.w, placed.h) == (2, 1, 4, 3)
        assert room.doors == ()
