"""Layout engine constants.

All lengths are in millimeters. Values are kept together so the solvers and
their tests share a single source for tolerances and clearances.
"""

# Partition tree limits
MAX_PARTITION_COUNT = 20

# Numeric tolerance for fit checks
EPSILON_MM = 1.0e-3

# Bay ranges
MIN_BAY_WIDTH_MM = 5.0

# Shelf clearances
FRONT_SETBACK_MM = 3.0
REAR_CLEARANCE_MM = 2.0
MIN_VERTICAL_GAP_MM = 20.0
MIN_DEPTH_MM = 5.0

# Fronts
DOOR_THICKNESS_MM = 19.0
REVEAL_EDGE_MM = 2.0
REVEAL_CENTER_MM = 2.0
REVEAL_TOP_MM = 2.0
REVEAL_BOTTOM_MM = 2.0
MIN_DOUBLE_LEAF_WIDTH_MM = 140.0

# Carcass fallbacks
DEFAULT_WIDTH_MM = 600.0
DEFAULT_DEPTH_MM = 600.0
DEFAULT_HEIGHT_MM = 720.0
DEFAULT_PANEL_THICKNESS_MM = 18.0
DEFAULT_TOE_KICK_HEIGHT_MM = 100.0
DEFAULT_TOE_KICK_DEPTH_MM = 50.0
DEFAULT_SHELF_COUNT = 2
MAX_SHELF_COUNT = 20
