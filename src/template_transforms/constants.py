"""
Template Transforms - Constants and Configuration

This module contains all constant values used by the transform engine:
- Frame size constraints
- Rotation conventions
- Alignment and distribution modes
- Rounding and comparison tolerances
- Command merging behaviour
"""

# ======================================================================
# FRAME CONSTRAINTS
# ======================================================================

# Width/height never drop below this after a numeric transform or clamp
MIN_FRAME_SIZE = 1

# ======================================================================
# ROTATION
# ======================================================================

# Rotation is in degrees, clockwise, about the frame's own center
FULL_ROTATION = 360
HALF_ROTATION = 180

# Rotations treated as "no rotation" by the rotated bbox fast path
IDENTITY_ROTATIONS = (0, 360, -360)

# ======================================================================
# ASPECT RATIO
# ======================================================================

# Ratio returned when height is zero (never divide by zero)
FALLBACK_ASPECT_RATIO = 1

# Default tolerance for comparing two aspect ratios
ASPECT_RATIO_TOLERANCE = 0.01

# ======================================================================
# ROUNDING
# ======================================================================

DEFAULT_ROUND_DECIMALS = 0        # round_to()
DEFAULT_FRAME_ROUND_DECIMALS = 2  # round_frame()

# ======================================================================
# ALIGNMENT / DISTRIBUTION
# ======================================================================

HORIZONTAL_ALIGN_MODES = ('left', 'center', 'right')
VERTICAL_ALIGN_MODES = ('top', 'middle', 'bottom')
ALIGN_MODES = HORIZONTAL_ALIGN_MODES + VERTICAL_ALIGN_MODES

DISTRIBUTE_MODES = ('horizontal', 'vertical')

# Minimum unlocked selection sizes
MIN_ALIGN_SELECTION = 2
MIN_DISTRIBUTE_SELECTION = 3

# ======================================================================
# GROUP TRANSFORMS
# ======================================================================

# resize_group scales each member uniformly by min(scale_x, scale_y) and
# scales the member offsets per axis. Members never distort, so the filled
# group extent can differ from the requested width x height.
RESIZE_GROUP_POLICY = 'uniform_min'

# ======================================================================
# COMMANDS (undo/redo records)
# ======================================================================

# Tolerance used when comparing frames for equality
FRAME_EQUAL_TOLERANCE = 0.001

# Seconds of inactivity before a pending merged command auto-commits
COMMAND_MERGE_DELAY = 0.5
