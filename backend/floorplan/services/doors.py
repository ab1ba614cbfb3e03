# backend/floorplan/services/doors.py
"""
Door placement for placed rooms.

Every non-corridor room gets exactly one door, on the wall that faces its
circulation path (or, for an ensuite, the wall shared with its bedroom).
The door's direction is the side of the wall it sits on: a door on the
bottom wall swings down, one on the left wall swings left, and so on.
"""

from dataclasses import replace

from .plan_types import Door, DoorDirection, DoorSwing, Room


def alternating_swing(index: int) -> DoorSwing:
    """Alternate handedness within a group of rooms: even -> cw, odd -> ccw."""
    return DoorSwing.CW if index % 2 == 0 else DoorSwing.CCW


def place_door(rect, side: DoorDirection, fraction: float, swing: DoorSwing) -> Door:
    """
    Put a door on one wall of a rectangle.

    Args:
        rect: Room rectangle (x, y, w, h)
        side: Wall to use; also the direction the door swings toward
        fraction: Position along that wall, from its top/left end (0..1)
        swing: Arc handedness

    Returns:
        Door in absolute plot coordinates
    """
    if side == DoorDirection.DOWN:
        x, y = rect.x + rect.w * fraction, rect.y + rect.h
    elif side == DoorDirection.UP:
        x, y = rect.x + rect.w * fraction, rect.y
    elif side == DoorDirection.LEFT:
        x, y = rect.x, rect.y + rect.h * fraction
    else:
        x, y = rect.x + rect.w, rect.y + rect.h * fraction

    return Door(x=x, y=y, direction=DoorDirection(side), swing=swing)


def with_door(room: Room, side: DoorDirection, fraction: float, swing: DoorSwing) -> Room:
    """Return a copy of `room` carrying a single door on `side`."""
    return replace(room, doors=(place_door(room, side, fraction, swing),))
