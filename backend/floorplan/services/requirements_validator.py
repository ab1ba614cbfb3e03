# backend/floorplan/services/requirements_validator.py
# Requirement checks that gate floor plan generation
#
# Errors are collected and returned as data. An empty list means the
# requirements can be handed to the layout engine; anything else blocks it.

from typing import List
import logging
import math

from .plan_types import RoomConfig, UserRequirements, ValidationError

logger = logging.getLogger(__name__)

# =============================================================================
# LIMITS
# =============================================================================

MAX_PLOT_COVERAGE = 0.95    # rooms may use at most 95% of the plot
MIN_TOTAL_AREA = 10.0       # m² - minimum viable livable area

# Bathrooms use fixed bounds regardless of their own min/max fields
BATHROOM_MIN_AREA = 4.0     # m²
BATHROOM_MAX_AREA = 15.0    # m²


def _fmt_size(value: float) -> str:
    """Format a size the way users typed it (18 rather than 18.0)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _round_half_up(value: float) -> int:
    """Whole m², with halves rounded up (76.5 -> 77)."""
    return math.floor(value + 0.5)


def _check_room_bounds(
    room: RoomConfig, field: str, min_size: float, max_size: float
) -> List[ValidationError]:
    """Too-small and too-large checks; both may fire for the same room."""
    errors = []
    if room.preferred_size < min_size:
        errors.append(ValidationError(
            field=field,
            message=f'"{room.name}" too small. Minimum: {_fmt_size(min_size)} m²'
        ))
    if room.preferred_size > max_size:
        errors.append(ValidationError(
            field=field,
            message=f'"{room.name}" too large. Maximum: {_fmt_size(max_size)} m²'
        ))
    return errors


def validate_requirements(requirements: UserRequirements) -> List[ValidationError]:
    """
    Validate requirements before generation.

    Args:
        requirements: Plot, style and room lists

    Returns:
        Ordered list of errors; empty when generation may proceed
    """
    errors: List[ValidationError] = []

    # Rule 1: at least one room (nothing else is worth checking without one)
    if not requirements.all_rooms:
        errors.append(ValidationError(field='rooms', message='Add at least one room'))
        return errors

    total_room_area = sum(r.preferred_size for r in requirements.all_rooms)
    plot_area = requirements.plot_width * requirements.plot_depth

    # Rule 2: rooms must fit the plot
    max_allowed_area = plot_area * MAX_PLOT_COVERAGE
    if total_room_area > max_allowed_area:
        errors.append(ValidationError(
            field='rooms',
            message=(
                f"Total area ({_round_half_up(total_room_area)} m²) exceeds plot capacity "
                f"({_round_half_up(max_allowed_area)} m²). Reduce room sizes."
            )
        ))

    # Rule 3: minimum viable layout
    if total_room_area < MIN_TOTAL_AREA:
        errors.append(ValidationError(
            field='rooms',
            message=f"Total area too small. Rooms must total at least {_fmt_size(MIN_TOTAL_AREA)} m²."
        ))

    # Rule 4: bedrooms against their own bounds
    for idx, bed in enumerate(requirements.bedrooms):
        errors.extend(_check_room_bounds(bed, f"bedroom-{idx}", bed.min_size, bed.max_size))

    # Rule 5: bathrooms against the fixed bounds
    for idx, bath in enumerate(requirements.bathrooms):
        errors.extend(_check_room_bounds(
            bath, f"bathroom-{idx}", BATHROOM_MIN_AREA, BATHROOM_MAX_AREA
        ))

    # Rule 6: common areas against their own bounds
    for idx, room in enumerate(requirements.common_areas):
        errors.extend(_check_room_bounds(room, f"common-{idx}", room.min_size, room.max_size))

    if errors:
        logger.debug(f"Requirements failed validation with {len(errors)} error(s)")

    return errors
