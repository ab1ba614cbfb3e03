# backend/floorplan/services/geometry.py
# Rectangle arithmetic for floor plan layouts
# Zone rectangles, overlap detection and containment checks
#
# Functions accept anything with x, y, w, h attributes (Rect or Room).

from typing import List, Sequence, Tuple
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# TOLERANCES
# =============================================================================

OVERLAP_TOLERANCE = 1e-6      # m² - smaller intersections are float noise
CONTAINMENT_TOLERANCE = 1e-9  # m  - edges computed as sums may overshoot by this


# =============================================================================
# RECTANGLE TYPE
# =============================================================================

@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, origin top-left, y grows downward."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


def get_bounds(rect) -> Tuple[float, float, float, float]:
    """
    Get the bounding box of a rectangle.

    Returns: (min_x, min_y, max_x, max_y)
    """
    return (rect.x, rect.y, rect.x + rect.w, rect.y + rect.h)


# =============================================================================
# OVERLAP DETECTION
# =============================================================================

def get_overlap_area(rect1, rect2) -> float:
    """
    Calculate the overlapping area between two rectangles.

    Returns 0 if they don't overlap; shared edges count as no overlap.
    """
    x1, y1, r1, b1 = get_bounds(rect1)
    x2, y2, r2, b2 = get_bounds(rect2)

    overlap_x = max(0.0, min(r1, r2) - max(x1, x2))
    overlap_y = max(0.0, min(b1, b2) - max(y1, y2))

    return overlap_x * overlap_y


def rects_overlap(rect1, rect2, tolerance: float = OVERLAP_TOLERANCE) -> bool:
    """Check if two rectangles share interior space."""
    return get_overlap_area(rect1, rect2) > tolerance


def find_all_overlaps(
    rooms: Sequence, tolerance: float = OVERLAP_TOLERANCE
) -> List[Tuple[str, str, float]]:
    """
    Find all overlapping room pairs in a layout.

    Args:
        rooms: Placed rooms (need id, x, y, w, h)
        tolerance: Minimum overlap area to report

    Returns:
        List of (room1_id, room2_id, overlap_area) tuples
    """
    overlaps = []

    for i, room1 in enumerate(rooms):
        for room2 in rooms[i + 1:]:
            area = get_overlap_area(room1, room2)
            if area > tolerance:
                overlaps.append((room1.id, room2.id, area))

    return overlaps


# =============================================================================
# CONTAINMENT
# =============================================================================

def interior_bounds(width: float, height: float, wall: float) -> Rect:
    """The usable interior of a plot: the plot minus its outer wall."""
    return Rect(wall, wall, width - 2 * wall, height - 2 * wall)


def rect_within(
    rect, bounds: Rect, tolerance: float = CONTAINMENT_TOLERANCE
) -> bool:
    """
    Check if a rectangle lies inside `bounds`.

    Args:
        rect: Rectangle to test
        bounds: Enclosing rectangle
        tolerance: Allowed overshoot on each edge

    Returns:
        True if the rectangle fits, False if any edge crosses the bounds
    """
    min_x, min_y, max_x, max_y = get_bounds(rect)
    return (
        min_x >= bounds.x - tolerance
        and min_y >= bounds.y - tolerance
        and max_x <= bounds.right + tolerance
        and max_y <= bounds.bottom + tolerance
    )
