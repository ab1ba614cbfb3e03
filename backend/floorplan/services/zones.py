# backend/floorplan/services/zones.py
"""
Zone allocation for the three layout variants.

The usable interior (plot minus outer wall) is split into a private zone
(bedrooms, bathrooms), circulation and a public zone (common areas). Each
variant assigns these regions differently:

    LINEAR    private strip on top, corridor across, public strip below
    L_SHAPED  bedrooms in a side strip beside a vertical corridor,
              bathrooms and common areas wrap the rest
    SPLIT     master bedroom on the left, secondary bedrooms on the right,
              bathrooms and common areas in a central column
"""

from typing import Dict
from dataclasses import dataclass, field
import logging

from .geometry import Rect
from .plan_types import LayoutVariant, UserRequirements, WALL_THICKNESS

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

PRIVATE_ZONE_RATIOS = {
    LayoutVariant.LINEAR: 0.45,
    LayoutVariant.L_SHAPED: 0.50,
    LayoutVariant.SPLIT: 0.48,
}

CORRIDOR_WIDTH = {'compact': 1.0, 'spacious': 1.2}     # meters
ROOM_PADDING = {'compact': 0.05, 'spacious': 0.15}     # meters, gap between rooms

# Linear: bedrooms take this share of the width when there are bathrooms
LINEAR_BEDROOM_SHARE = 0.75

# L-shaped: bedroom strip (corridor included) and bathroom band
L_BEDROOM_ZONE_SHARE = 0.40
L_BATHROOM_BAND_SHARE = 0.30

# Split: master and central column widths, bathroom band height
SPLIT_MASTER_ZONE_SHARE = 0.35
SPLIT_CENTRAL_ZONE_SHARE = 0.35
SPLIT_BATHROOM_BAND_SHARE = 0.35

# Zone names
BEDROOMS = 'bedrooms'
MASTER = 'master'
SECONDARY = 'secondary'
BATHROOMS = 'bathrooms'
CORRIDOR = 'corridor'
COMMON = 'common'


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class LayoutSettings:
    """Dimensions shared by every variant for one set of requirements."""
    wall: float
    inner_w: float
    inner_h: float
    corridor_w: float
    padding: float

    @classmethod
    def from_requirements(cls, requirements: UserRequirements) -> "LayoutSettings":
        style = 'spacious' if requirements.is_spacious else 'compact'
        wall = WALL_THICKNESS
        return cls(
            wall=wall,
            inner_w=requirements.plot_width - wall * 2,
            inner_h=requirements.plot_depth - wall * 2,
            corridor_w=CORRIDOR_WIDTH[style],
            padding=ROOM_PADDING[style],
        )


@dataclass(frozen=True)
class ZonePlan:
    """Zone rectangles for one variant.

    Zone rectangles are nominal slots; rooms are inset from them by half the
    padding. Only variants with a `corridor` zone emit a corridor room.
    """
    variant: LayoutVariant
    settings: LayoutSettings
    private_zone_h: float
    public_zone_h: float
    zones: Dict[str, Rect] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Rect:
        return self.zones[name]


# =============================================================================
# ALLOCATION
# =============================================================================

def _linear_zones(req: UserRequirements, s: LayoutSettings, private_h: float, public_h: float) -> Dict[str, Rect]:
    bedroom_area_w = s.inner_w * LINEAR_BEDROOM_SHARE if req.bathrooms else s.inner_w
    corridor_y = s.wall + private_h
    return {
        BEDROOMS: Rect(s.wall, s.wall, bedroom_area_w, private_h),
        BATHROOMS: Rect(s.wall + bedroom_area_w, s.wall, s.inner_w - bedroom_area_w, private_h),
        CORRIDOR: Rect(s.wall, corridor_y, s.inner_w, s.corridor_w),
        COMMON: Rect(s.wall, corridor_y + s.corridor_w, s.inner_w, public_h),
    }


def _l_shaped_zones(req: UserRequirements, s: LayoutSettings) -> Dict[str, Rect]:
    bedroom_zone_w = s.inner_w * L_BEDROOM_ZONE_SHARE
    living_zone_w = s.inner_w - bedroom_zone_w - s.corridor_w
    living_x = s.wall + bedroom_zone_w
    bath_band_h = s.inner_h * L_BATHROOM_BAND_SHARE
    common_offset = bath_band_h if req.bathrooms else 0

    return {
        BEDROOMS: Rect(s.wall, s.wall, bedroom_zone_w - s.corridor_w, s.inner_h),
        CORRIDOR: Rect(s.wall + bedroom_zone_w - s.corridor_w, s.wall, s.corridor_w, s.inner_h),
        BATHROOMS: Rect(living_x, s.wall, living_zone_w, bath_band_h),
        COMMON: Rect(living_x, s.wall + common_offset, living_zone_w, s.inner_h - common_offset),
    }


def _split_zones(req: UserRequirements, s: LayoutSettings) -> Dict[str, Rect]:
    master_zone_w = s.inner_w * SPLIT_MASTER_ZONE_SHARE if req.bedrooms else 0
    central_zone_w = s.inner_w * SPLIT_CENTRAL_ZONE_SHARE
    secondary_zone_w = s.inner_w - master_zone_w - central_zone_w
    central_x = s.wall + master_zone_w
    bath_band_h = s.inner_h * SPLIT_BATHROOM_BAND_SHARE
    common_offset = bath_band_h if req.bathrooms else 0

    # The master zone gives up a corridor-wide strip next to the central column
    return {
        MASTER: Rect(s.wall, s.wall, master_zone_w - s.corridor_w, s.inner_h),
        SECONDARY: Rect(central_x + central_zone_w, s.wall, secondary_zone_w, s.inner_h),
        BATHROOMS: Rect(central_x, s.wall, central_zone_w, bath_band_h),
        COMMON: Rect(central_x, s.wall + common_offset, central_zone_w, s.inner_h - common_offset),
    }


def allocate_zones(requirements: UserRequirements, variant: LayoutVariant) -> ZonePlan:
    """
    Split the plot interior into zones for one layout variant.

    Args:
        requirements: Validated requirements
        variant: Layout algorithm

    Returns:
        ZonePlan with named zone rectangles
    """
    settings = LayoutSettings.from_requirements(requirements)
    ratio = PRIVATE_ZONE_RATIOS[variant]
    private_zone_h = settings.inner_h * ratio
    public_zone_h = settings.inner_h - private_zone_h - settings.corridor_w

    if variant == LayoutVariant.LINEAR:
        zones = _linear_zones(requirements, settings, private_zone_h, public_zone_h)
    elif variant == LayoutVariant.L_SHAPED:
        zones = _l_shaped_zones(requirements, settings)
    else:
        zones = _split_zones(requirements, settings)

    logger.debug(f"Allocated {len(zones)} zones for {variant.name} layout")

    return ZonePlan(
        variant=variant,
        settings=settings,
        private_zone_h=private_zone_h,
        public_zone_h=public_zone_h,
        zones=zones,
    )
