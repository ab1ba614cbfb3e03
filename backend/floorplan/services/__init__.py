# backend/floorplan/services/__init__.py
# Floor plan layout services

from .plan_types import (
    RoomConfig,
    UserRequirements,
    ValidationError,
    Door,
    Room,
    FloorPlanResult,
    PlanBuilder,
    PlanStyle,
    RoomType,
    DoorDirection,
    DoorSwing,
    LayoutVariant,
    WALL_THICKNESS
)

from .requirements_validator import (
    validate_requirements,
    MAX_PLOT_COVERAGE,
    MIN_TOTAL_AREA,
    BATHROOM_MIN_AREA,
    BATHROOM_MAX_AREA
)

from .geometry import (
    Rect,
    get_overlap_area,
    rects_overlap,
    find_all_overlaps,
    interior_bounds,
    rect_within
)

from .zones import (
    allocate_zones,
    LayoutSettings,
    ZonePlan
)

from .doors import (
    place_door,
    alternating_swing
)

from .room_placement import (
    place_linear,
    place_l_shaped,
    place_split,
    LAYOUT_STRATEGIES
)

from .plan_integrity import (
    check_floor_plan,
    IntegrityIssue,
    IntegrityReport,
    LayoutIntegrityError
)

from .layout_engine import generate_floor_plan

from .floor_plan_generator import (
    FloorPlanGenerator,
    GenerationOutcome,
    generate_floor_plans,
    design_floor_plans
)

from .room_sizing import (
    new_room_config,
    create_default_requirements,
    add_room,
    remove_room,
    total_room_area,
    plot_area,
    plot_coverage,
    UnknownRoomCategory,
    ROOM_CATEGORIES
)
