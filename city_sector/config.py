"""
Configuration constants for City Sector Generator.

Contains all tunable parameters for sector generation, including
numeric tolerances, plot validation thresholds and roof layer defaults.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# NUMERIC TOLERANCES
# =============================================================================

# General tolerance for geometric comparisons (meters)
GEOMETRIC_EPSILON = 1e-5
GEOMETRIC_EPSILON_SQ = GEOMETRIC_EPSILON * GEOMETRIC_EPSILON

# Collinearity test for circumcenters (closer to machine precision)
HIGH_PRECISION_EPSILON = 1e-9

# =============================================================================
# SECTOR LAYOUT
# =============================================================================

DEFAULT_SEED_COUNT = 50
DEFAULT_SECTOR_WIDTH = 500.0
DEFAULT_SECTOR_HEIGHT = 500.0

# Seeds are kept this far inside the sector edge
DEFAULT_BOUNDS_PADDING = 50.0

DEFAULT_STREET_WIDTH = 8.0

# Building footprint inset from the pavement edge
DEFAULT_BUILDING_INSET = 0.5

# Grid snapping of clipped cells; 0 disables it
DEFAULT_PLOT_SNAP_SIZE = 0.0

# =============================================================================
# PLOT VALIDATION
# =============================================================================

MIN_PLOT_SIDE_LENGTH = 5.0
MIN_PLOT_ANGLE_DEG = 15.0
MIN_PLOT_AREA = 25.0

# Lenient thresholds used when deciding whether a footprint can carry
# a pavement outset
PAVEMENT_MIN_SIDE_LENGTH = 0.01
PAVEMENT_MIN_ANGLE_DEG = 1.0
PAVEMENT_MIN_AREA = 0.01

# =============================================================================
# FLOORS
# =============================================================================

DEFAULT_MIN_FLOORS = 2
DEFAULT_MAX_FLOORS = 7
DEFAULT_FLOOR_HEIGHT = 10.0

# =============================================================================
# ROOF LAYERS
# =============================================================================

MANSARD_HORIZONTAL_DISTANCE = 1.5
MANSARD_RISE = 2.0
ATTIC_HORIZONTAL_DISTANCE = 1.0
ATTIC_RISE = 1.5

# Extra offset for the flat cap: positive overhangs, negative insets
FLAT_ROOF_EDGE_OFFSET = 0.0


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class RoofConfig:
    """
    Parameters of the mansard -> attic -> flat cap roof sequence.

    A layer with a horizontal distance of (near) zero is skipped.
    """
    use_mansard: bool = True
    mansard_distance: float = MANSARD_HORIZONTAL_DISTANCE
    mansard_rise: float = MANSARD_RISE

    use_attic: bool = True
    attic_distance: float = ATTIC_HORIZONTAL_DISTANCE
    attic_rise: float = ATTIC_RISE

    flat_roof_edge_offset: float = FLAT_ROOF_EDGE_OFFSET

    def __post_init__(self):
        """Validate configuration values."""
        if self.mansard_distance < 0 or self.mansard_rise < 0:
            raise ValueError("mansard distance and rise must be non-negative")

        if self.attic_distance < 0 or self.attic_rise < 0:
            raise ValueError("attic distance and rise must be non-negative")


@dataclass
class SectorConfig:
    """
    Runtime configuration for one sector generation pass.

    This class holds all configurable parameters that can be
    adjusted per-run via CLI arguments or programmatically.
    """

    # Seeds
    seed_count: int = DEFAULT_SEED_COUNT
    sector_width: float = DEFAULT_SECTOR_WIDTH
    sector_height: float = DEFAULT_SECTOR_HEIGHT
    bounds_padding: float = DEFAULT_BOUNDS_PADDING

    # Random seed for deterministic generation (None = nondeterministic)
    seed: Optional[int] = 12345

    # Plot carving
    street_width: float = DEFAULT_STREET_WIDTH
    building_inset: float = DEFAULT_BUILDING_INSET
    plot_vertex_snap_size: float = DEFAULT_PLOT_SNAP_SIZE

    # Plot validation
    min_side_length: float = MIN_PLOT_SIDE_LENGTH
    min_angle_deg: float = MIN_PLOT_ANGLE_DEG
    min_area: float = MIN_PLOT_AREA

    # Floors
    min_floors: int = DEFAULT_MIN_FLOORS
    max_floors: int = DEFAULT_MAX_FLOORS
    floor_height: float = DEFAULT_FLOOR_HEIGHT

    # Pavement outset around the footprint (defaults to building_inset)
    pavement_outset: Optional[float] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.seed_count < 3:
            raise ValueError("seed_count must be at least 3")

        if self.sector_width <= 0 or self.sector_height <= 0:
            raise ValueError("sector size must be positive")

        if self.bounds_padding < 0:
            raise ValueError("bounds_padding must be non-negative")

        if self.street_width <= 0:
            raise ValueError("street_width must be positive")

        if self.building_inset < 0:
            raise ValueError("building_inset must be non-negative")

        if self.plot_vertex_snap_size < 0:
            raise ValueError("plot_vertex_snap_size must be non-negative")

        if self.min_side_length <= 0 or self.min_area <= 0:
            raise ValueError("min_side_length and min_area must be positive")

        if not (0 < self.min_angle_deg < 180):
            raise ValueError("min_angle_deg must be between 0 and 180")

        if self.min_floors < 1 or self.max_floors < self.min_floors:
            raise ValueError("floors must satisfy 1 <= min_floors <= max_floors")

        if self.floor_height <= 0:
            raise ValueError("floor_height must be positive")

        if self.pavement_outset is None:
            self.pavement_outset = self.building_inset


# Default configuration instance
DEFAULT_CONFIG = SectorConfig()
