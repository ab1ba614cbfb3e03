# backend/floorplan/services/room_sizing.py
# Room size templates and area totals for the requirements wizard
#
# New rooms start from fixed templates: the first bedroom is the master
# (with ensuite), the first common area is the living room.

from typing import Dict
from dataclasses import replace
import logging

from .plan_types import PlanStyle, RoomConfig, UserRequirements

logger = logging.getLogger(__name__)

# =============================================================================
# ROOM TEMPLATES
# =============================================================================

BEDROOMS = 'bedrooms'
BATHROOMS = 'bathrooms'
COMMON_AREAS = 'commonAreas'

ROOM_CATEGORIES = (BEDROOMS, BATHROOMS, COMMON_AREAS)

# (min, max, preferred) in m²
MASTER_BEDROOM_SIZES = (18, 35, 25)
BEDROOM_SIZES = (12, 20, 15)
BATHROOM_SIZES = (4, 15, 8)
MAIN_COMMON_SIZES = (20, 50, 35)
COMMON_SIZES = (12, 30, 18)

COMMON_AREA_NAMES = ['Living Room', 'Kitchen', 'Dining Room', 'Study']

ID_PREFIXES: Dict[str, str] = {
    BEDROOMS: 'bed',
    BATHROOMS: 'bath',
    COMMON_AREAS: 'common',
}

DEFAULT_PLOT_WIDTH = 12.0   # meters
DEFAULT_PLOT_DEPTH = 10.0   # meters


class UnknownRoomCategory(ValueError):
    """Raised for a category outside ROOM_CATEGORIES."""


def new_room_config(category: str, position: int) -> RoomConfig:
    """
    Default config for the room added at `position` (1-based) in a category.

    Args:
        category: 'bedrooms', 'bathrooms' or 'commonAreas'
        position: 1 for the first room of the category, 2 for the next...

    Returns:
        RoomConfig with template sizes and a `<prefix>-<position>` id
    """
    if category not in ID_PREFIXES:
        raise UnknownRoomCategory(f"Unknown room category: {category}")

    room_id = f"{ID_PREFIXES[category]}-{position}"
    has_ensuite = None

    if category == BEDROOMS:
        if position == 1:
            name, sizes, has_ensuite = 'Master Bedroom', MASTER_BEDROOM_SIZES, True
        else:
            name, sizes, has_ensuite = f"Bedroom {position}", BEDROOM_SIZES, False
    elif category == BATHROOMS:
        name, sizes = f"Bathroom {position}", BATHROOM_SIZES
    else:
        if 1 <= position <= len(COMMON_AREA_NAMES):
            name = COMMON_AREA_NAMES[position - 1]
        else:
            name = f"Room {position}"
        sizes = MAIN_COMMON_SIZES if position == 1 else COMMON_SIZES

    min_size, max_size, preferred_size = sizes
    return RoomConfig(
        id=room_id,
        name=name,
        min_size=float(min_size),
        max_size=float(max_size),
        preferred_size=float(preferred_size),
        num_doors=1,
        has_ensuite=has_ensuite,
    )


def create_default_requirements() -> UserRequirements:
    """Empty wizard state: 12m x 10m compact plot, no rooms yet."""
    return UserRequirements(
        plot_width=DEFAULT_PLOT_WIDTH,
        plot_depth=DEFAULT_PLOT_DEPTH,
        style=PlanStyle.COMPACT,
    )


# =============================================================================
# AREA TOTALS
# =============================================================================

def total_room_area(requirements: UserRequirements) -> float:
    """Sum of preferred sizes over every requested room (m²)."""
    return sum(room.preferred_size for room in requirements.all_rooms)


def plot_area(requirements: UserRequirements) -> float:
    return requirements.plot_width * requirements.plot_depth


def plot_coverage(requirements: UserRequirements) -> float:
    """
    Share of the plot taken by the requested rooms.

    Returns:
        Percentage rounded to one decimal (0.0 for an empty plot)
    """
    area = plot_area(requirements)
    if area <= 0:
        return 0.0
    return round(total_room_area(requirements) / area * 100, 1)


# =============================================================================
# WIZARD EDITS
# =============================================================================

_CATEGORY_FIELDS = {
    BEDROOMS: 'bedrooms',
    BATHROOMS: 'bathrooms',
    COMMON_AREAS: 'common_areas',
}


def add_room(requirements: UserRequirements, category: str) -> UserRequirements:
    """Append the next template room to a category; returns new requirements."""
    if category not in _CATEGORY_FIELDS:
        raise UnknownRoomCategory(f"Unknown room category: {category}")
    attr = _CATEGORY_FIELDS[category]
    rooms = getattr(requirements, attr)
    room = new_room_config(category, len(rooms) + 1)
    return replace(requirements, **{attr: rooms + (room,)})


def remove_room(requirements: UserRequirements, category: str, index: int) -> UserRequirements:
    """Drop the room at `index` from a category; other rooms keep their ids."""
    if category not in _CATEGORY_FIELDS:
        raise UnknownRoomCategory(f"Unknown room category: {category}")
    attr = _CATEGORY_FIELDS[category]
    rooms = getattr(requirements, attr)
    return replace(requirements, **{attr: rooms[:index] + rooms[index + 1:]})
