"""Tests for floorplan/services/plan_integrity.py."""
from floorplan.services.plan_integrity import (
    IntegrityIssue, LayoutIntegrityError, check_floor_plan,
)
from floorplan.services.plan_types import (
    Door, DoorDirection, DoorSwing, FloorPlanResult, Room, RoomType,
)


def _door(x, y):
    return Door(x=x, y=y, direction=DoorDirection.UP, swing=DoorSwing.CW)


def _room(room_id, x, y, w, h, room_type=RoomType.COMMON, doors=None):
    if doors is None:
        doors = (_door(x, y),)
    return Room(id=room_id, type=room_type, label=room_id, x=x, y=y, w=w, h=h, doors=doors)


def _plan(*rooms, wall=0.15):
    return FloorPlanResult(width=10, height=8, rooms=rooms, wall_thickness=wall)


class TestCleanPlan:
    def test_passes(self):
        report = check_floor_plan(_plan(
            _room("a", 0.2, 0.2, 4, 3),
            _room("b", 4.2, 0.2, 4, 3),
            _room("hall", 0.15, 3.2, 9.7, 1, RoomType.CORRIDOR, doors=()),
        ))
        assert report.passed
        assert report.codes() == []

    def test_generated_plan_passes(self, family_home):
        from floorplan.services.layout_engine import generate_floor_plan
        for variant in (0, 1, 2):
            assert check_floor_plan(generate_floor_plan(family_home, variant)).passed


class TestIssues:
    def test_room_outside_plot(self):
        report = check_floor_plan(_plan(_room("a", 0.1, 0.2, 4, 3)))
        assert report.codes() == ["ROOM_OUTSIDE_PLOT"]
        assert report.issues[0].room_ids == ("a",)

    def test_room_past_far_wall(self):
        report = check_floor_plan(_plan(_room("a", 6, 5, 4, 3)))
        assert report.codes() == ["ROOM_OUTSIDE_PLOT"]

    def test_overlap(self):
        report = check_floor_plan(_plan(_room("a", 1, 1, 3, 3), _room("b", 2, 2, 3, 3)))
        assert report.codes() == ["ROOM_OVERLAP"]
        assert report.issues[0].room_ids == ("a", "b")
        assert "1.0000" not in report.issues[0].message
        assert "4.0000" in report.issues[0].message

    def test_corridor_with_door(self):
        corridor = _room("hall", 1, 1, 5, 1, RoomType.CORRIDOR)
        assert check_floor_plan(_plan(corridor)).codes() == ["CORRIDOR_HAS_DOOR"]

    def test_room_without_door(self):
        room = _room("bed-1", 1, 1, 3, 3, RoomType.BEDROOM, doors=())
        assert check_floor_plan(_plan(room)).codes() == ["DOOR_COUNT"]

    def test_room_with_two_doors(self):
        room = _room("bed-1", 1, 1, 3, 3, RoomType.BEDROOM, doors=(_door(1, 1), _door(2, 1)))
        assert check_floor_plan(_plan(room)).codes() == ["DOOR_COUNT"]

    def test_wall_thickness(self):
        report = check_floor_plan(_plan(_room("a", 1, 1, 2, 2), wall=0.2))
        assert report.codes() == ["WALL_THICKNESS"]

    def test_issues_accumulate(self):
        report = check_floor_plan(_plan(
            _room("a", 0, 0, 3, 3, doors=()),
            _room("b", 2, 2, 3, 3),
        ))
        assert report.codes() == ["ROOM_OUTSIDE_PLOT", "ROOM_OVERLAP", "DOOR_COUNT"]


class TestLayoutIntegrityError:
    def test_message_lists_issues(self):
        issues = [IntegrityIssue(code="ROOM_OVERLAP", message="a overlaps b by 1.0000m²")]
        err = LayoutIntegrityError(2, issues)
        assert err.variant == 2
        assert err.issues == issues
        assert "variant 2" in str(err)
        assert "a overlaps b" in str(err)
