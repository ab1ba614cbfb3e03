# backend/floorplan/services/plan_integrity.py
"""
Floor Plan Integrity Checks
===========================

Geometric checks run on every generated plan:
- Every room lies inside the plot interior (inside the outer wall)
- No two rooms overlap
- Corridors carry no doors, every other room exactly one
- Wall thickness is the shared constant

Rooms are disjoint by construction, so an issue found on validated
requirements points at a bug in the placement formulas.
"""

import logging
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .geometry import find_all_overlaps, interior_bounds, rect_within
from .plan_types import FloorPlanResult, RoomType, WALL_THICKNESS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntegrityIssue:
    """Single geometry problem in a generated plan."""
    code: str
    message: str
    room_ids: Tuple[str, ...] = ()


class LayoutIntegrityError(Exception):
    """Raised in strict mode when a generated plan fails its integrity checks."""

    def __init__(self, variant: Optional[int], issues: List[IntegrityIssue]):
        self.variant = variant
        self.issues = issues
        summary = "; ".join(issue.message for issue in issues[:5])
        super().__init__(f"Layout variant {variant} failed integrity checks: {summary}")


@dataclass
class IntegrityReport:
    """Result of checking one plan."""
    issues: List[IntegrityIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues

    def codes(self) -> List[str]:
        return [issue.code for issue in self.issues]


def _check_containment(plan: FloorPlanResult) -> List[IntegrityIssue]:
    bounds = interior_bounds(plan.width, plan.height, plan.wall_thickness)
    issues = []
    for room in plan.rooms:
        if not rect_within(room, bounds):
            issues.append(IntegrityIssue(
                code="ROOM_OUTSIDE_PLOT",
                message=(
                    f"{room.id} ({room.x:.3f}, {room.y:.3f}, {room.w:.3f} x {room.h:.3f}) "
                    f"extends past the outer wall"
                ),
                room_ids=(room.id,),
            ))
    return issues


def _check_overlaps(plan: FloorPlanResult) -> List[IntegrityIssue]:
    return [
        IntegrityIssue(
            code="ROOM_OVERLAP",
            message=f"{first} overlaps {second} by {area:.4f}m²",
            room_ids=(first, second),
        )
        for first, second, area in find_all_overlaps(list(plan.rooms))
    ]


def _check_doors(plan: FloorPlanResult) -> List[IntegrityIssue]:
    issues = []
    for room in plan.rooms:
        if room.type == RoomType.CORRIDOR:
            if room.doors:
                issues.append(IntegrityIssue(
                    code="CORRIDOR_HAS_DOOR",
                    message=f"Corridor {room.id} has {len(room.doors)} door(s)",
                    room_ids=(room.id,),
                ))
        elif len(room.doors) != 1:
            issues.append(IntegrityIssue(
                code="DOOR_COUNT",
                message=f"{room.id} has {len(room.doors)} doors, expected 1",
                room_ids=(room.id,),
            ))
    return issues


def check_floor_plan(plan: FloorPlanResult) -> IntegrityReport:
    """
    Run all integrity checks on a generated plan.

    Args:
        plan: Generated floor plan

    Returns:
        IntegrityReport listing every issue found
    """
    report = IntegrityReport()

    if plan.wall_thickness != WALL_THICKNESS:
        report.issues.append(IntegrityIssue(
            code="WALL_THICKNESS",
            message=f"Wall thickness {plan.wall_thickness} differs from {WALL_THICKNESS}",
        ))

    report.issues.extend(_check_containment(plan))
    report.issues.extend(_check_overlaps(plan))
    report.issues.extend(_check_doors(plan))

    return report
