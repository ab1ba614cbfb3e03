# backend/floorplan/services/room_placement.py
"""
Room placement for the three layout variants.

Each strategy takes the requirements and the variant's ZonePlan and returns
the placed rooms in paint order, doors included. Rooms of one category are
spread uniformly across their zone (side by side or stacked), then inset by
half the padding so neighbouring rooms show a wall gap. Ensuites are carved
out of their bedroom's slot and share an edge with the bedroom.
"""

from typing import Callable, Dict, List, Optional
import logging

from .doors import alternating_swing, with_door
from .geometry import Rect
from .plan_types import (
    DoorDirection, DoorSwing, LayoutVariant, Room, RoomConfig, RoomType,
    UserRequirements,
)
from .zones import BATHROOMS, BEDROOMS, COMMON, CORRIDOR, MASTER, SECONDARY, ZonePlan

logger = logging.getLogger(__name__)


# =============================================================================
# PROPORTIONS
# =============================================================================

# Linear: ensuite beside the bedroom
LINEAR_ENSUITE_WIDTH_SHARE = 0.30    # of the bedroom slot width
LINEAR_ENSUITE_HEIGHT_SHARE = 0.6    # of the bedroom height

# L-shaped: ensuite below the bedroom
L_ENSUITE_HEIGHT_SHARE = 0.35        # of the bedroom slot height
L_ENSUITE_WIDTH_SHARE = 0.6          # of the bedroom width

# Split: master ensuite below, secondary ensuites beside
SPLIT_MASTER_ENSUITE_HEIGHT_SHARE = 0.35    # of the interior height
SPLIT_MASTER_ENSUITE_WIDTH_SHARE = 0.7      # of the master bedroom width
SPLIT_SECONDARY_ENSUITE_WIDTH_SHARE = 0.35  # of the secondary zone width
SPLIT_SECONDARY_ENSUITE_HEIGHT_SHARE = 0.6  # of the bedroom height

ENSUITE_LABEL = 'Ensuite'
MASTER_ENSUITE_LABEL = 'Master\nEnsuite'
CORRIDOR_ID = 'corridor'


# =============================================================================
# HELPERS
# =============================================================================

def _row_slots(zone: Rect, count: int) -> List[Rect]:
    """Split a zone into `count` equal slots side by side."""
    slot_w = zone.w / count
    return [Rect(zone.x + idx * slot_w, zone.y, slot_w, zone.h) for idx in range(count)]


def _column_slots(zone: Rect, count: int) -> List[Rect]:
    """Split a zone into `count` equal slots stacked top to bottom."""
    slot_h = zone.h / count
    return [Rect(zone.x, zone.y + idx * slot_h, zone.w, slot_h) for idx in range(count)]


def _padded(slot: Rect, padding: float, trim_w: float = 0, trim_h: float = 0) -> Rect:
    """Room rectangle inside a slot: half the padding off each side, minus any carve-out."""
    return Rect(
        slot.x + padding / 2,
        slot.y + padding / 2,
        slot.w - trim_w - padding,
        slot.h - trim_h - padding,
    )


def _room(
    room_id: str, room_type: RoomType, label: str, rect: Rect,
    has_ensuite: Optional[bool] = None,
) -> Room:
    return Room(
        id=room_id, type=room_type, label=label,
        x=rect.x, y=rect.y, w=rect.w, h=rect.h,
        has_ensuite=has_ensuite,
    )


def _bedroom(config: RoomConfig, rect: Rect, side: DoorDirection, fraction: float, swing: DoorSwing) -> Room:
    room = _room(config.id, RoomType.BEDROOM, config.name, rect, config.has_ensuite)
    return with_door(room, side, fraction, swing)


def _ensuite(
    bedroom: RoomConfig, rect: Rect, side: DoorDirection, fraction: float,
    label: str = ENSUITE_LABEL,
) -> Room:
    """Ensuite attached to `bedroom`; its door faces the bedroom."""
    room = _room(f"{bedroom.id}-ensuite", RoomType.ENSUITE, label, rect)
    return with_door(room, side, fraction, DoorSwing.CCW)


def _corridor(zone: Rect, label: str) -> Room:
    return _room(CORRIDOR_ID, RoomType.CORRIDOR, label, zone)


# =============================================================================
# LINEAR
# =============================================================================

def place_linear(req: UserRequirements, plan: ZonePlan) -> List[Room]:
    """Bedrooms across the top, bathrooms in the top-right strip, hallway, then common areas."""
    p = plan.settings.padding
    rooms: List[Room] = []

    if req.bedrooms:
        for idx, (bed, slot) in enumerate(zip(req.bedrooms, _row_slots(plan[BEDROOMS], len(req.bedrooms)))):
            ensuite_w = slot.w * LINEAR_ENSUITE_WIDTH_SHARE if bed.has_ensuite else 0
            rect = _padded(slot, p, trim_w=ensuite_w)
            # Door toward the hallway, a quarter of the way in
            rooms.append(_bedroom(bed, rect, DoorDirection.DOWN, 0.25, alternating_swing(idx)))
            if bed.has_ensuite:
                ensuite = Rect(rect.right, rect.y, ensuite_w - p / 2, rect.h * LINEAR_ENSUITE_HEIGHT_SHARE)
                rooms.append(_ensuite(bed, ensuite, DoorDirection.LEFT, 0.7))

    if req.bathrooms:
        zone = plan[BATHROOMS]
        bath_h = (zone.h - p) / len(req.bathrooms)
        for idx, bath in enumerate(req.bathrooms):
            rect = Rect(zone.x + p / 2, zone.y + idx * bath_h + p / 2, zone.w - p, bath_h - p)
            room = _room(bath.id, RoomType.BATHROOM, bath.name, rect)
            rooms.append(with_door(room, DoorDirection.LEFT, 0.5, DoorSwing.CW))

    rooms.append(_corridor(plan[CORRIDOR], 'Hallway'))

    if req.common_areas:
        for idx, (area, slot) in enumerate(zip(req.common_areas, _row_slots(plan[COMMON], len(req.common_areas)))):
            room = _room(area.id, RoomType.COMMON, area.name, _padded(slot, p))
            rooms.append(with_door(room, DoorDirection.UP, 0.5, alternating_swing(idx)))

    return rooms


# =============================================================================
# L-SHAPED
# =============================================================================

def place_l_shaped(req: UserRequirements, plan: ZonePlan) -> List[Room]:
    """Bedrooms stacked on the left, vertical corridor, bathrooms and common areas on the right."""
    p = plan.settings.padding
    rooms: List[Room] = []

    if req.bedrooms:
        for idx, (bed, slot) in enumerate(zip(req.bedrooms, _column_slots(plan[BEDROOMS], len(req.bedrooms)))):
            ensuite_h = slot.h * L_ENSUITE_HEIGHT_SHARE if bed.has_ensuite else 0
            rect = _padded(slot, p, trim_h=ensuite_h)
            rooms.append(_bedroom(bed, rect, DoorDirection.RIGHT, 0.3, alternating_swing(idx)))
            if bed.has_ensuite:
                ensuite = Rect(rect.x, rect.bottom, rect.w * L_ENSUITE_WIDTH_SHARE, ensuite_h - p / 2)
                rooms.append(_ensuite(bed, ensuite, DoorDirection.UP, 0.5))

    rooms.append(_corridor(plan[CORRIDOR], ''))

    if req.bathrooms:
        for bath, slot in zip(req.bathrooms, _row_slots(plan[BATHROOMS], len(req.bathrooms))):
            room = _room(bath.id, RoomType.BATHROOM, bath.name, _padded(slot, p))
            rooms.append(with_door(room, DoorDirection.LEFT, 0.5, DoorSwing.CW))

    if req.common_areas:
        for idx, (area, slot) in enumerate(zip(req.common_areas, _column_slots(plan[COMMON], len(req.common_areas)))):
            room = _room(area.id, RoomType.COMMON, area.name, _padded(slot, p))
            rooms.append(with_door(room, DoorDirection.LEFT, 0.4, alternating_swing(idx)))

    return rooms


# =============================================================================
# SPLIT
# =============================================================================

def place_split(req: UserRequirements, plan: ZonePlan) -> List[Room]:
    """Master bedroom on the left, secondary bedrooms on the right, shared rooms in the middle."""
    s = plan.settings
    p = s.padding
    rooms: List[Room] = []

    if req.bedrooms:
        master = req.bedrooms[0]
        ensuite_h = s.inner_h * SPLIT_MASTER_ENSUITE_HEIGHT_SHARE if master.has_ensuite else 0
        rect = _padded(plan[MASTER], p, trim_h=ensuite_h)
        rooms.append(_bedroom(master, rect, DoorDirection.RIGHT, 0.4, DoorSwing.CW))
        if master.has_ensuite:
            ensuite = Rect(rect.x, rect.bottom, rect.w * SPLIT_MASTER_ENSUITE_WIDTH_SHARE, ensuite_h - p / 2)
            rooms.append(_ensuite(master, ensuite, DoorDirection.UP, 0.5, label=MASTER_ENSUITE_LABEL))

    secondary = req.bedrooms[1:]
    if secondary:
        zone = plan[SECONDARY]
        for idx, (bed, slot) in enumerate(zip(secondary, _column_slots(zone, len(secondary)))):
            ensuite_w = zone.w * SPLIT_SECONDARY_ENSUITE_WIDTH_SHARE if bed.has_ensuite else 0
            rect = _padded(slot, p, trim_w=ensuite_w)
            rooms.append(_bedroom(bed, rect, DoorDirection.LEFT, 0.4, alternating_swing(idx)))
            if bed.has_ensuite:
                ensuite = Rect(rect.right, rect.y, ensuite_w - p / 2, rect.h * SPLIT_SECONDARY_ENSUITE_HEIGHT_SHARE)
                rooms.append(_ensuite(bed, ensuite, DoorDirection.LEFT, 0.5))

    if req.bathrooms:
        for bath, slot in zip(req.bathrooms, _row_slots(plan[BATHROOMS], len(req.bathrooms))):
            room = _room(bath.id, RoomType.BATHROOM, bath.name, _padded(slot, p))
            rooms.append(with_door(room, DoorDirection.DOWN, 0.5, DoorSwing.CW))

    if req.common_areas:
        for idx, (area, slot) in enumerate(zip(req.common_areas, _column_slots(plan[COMMON], len(req.common_areas)))):
            room = _room(area.id, RoomType.COMMON, area.name, _padded(slot, p))
            rooms.append(with_door(room, DoorDirection.UP, 0.5, alternating_swing(idx)))

    return rooms


PlacementStrategy = Callable[[UserRequirements, ZonePlan], List[Room]]

LAYOUT_STRATEGIES: Dict[LayoutVariant, PlacementStrategy] = {
    LayoutVariant.LINEAR: place_linear,
    LayoutVariant.L_SHAPED: place_l_shaped,
    LayoutVariant.SPLIT: place_split,
}
