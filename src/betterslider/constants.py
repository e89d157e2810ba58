"""Shared constants and style defaults for BetterSlider."""

# Default bounds (closed unit interval)
DEFAULT_LOWER_BOUND = 0.0
DEFAULT_UPPER_BOUND = 1.0

# Style defaults (points)
DEFAULT_TRACK_HEIGHT = 4.0
DEFAULT_HANDLE_SIZE = 28.0
STEP_MARKER_HEIGHT_RATIO = 0.8  # Step marker height relative to handle size when unset

# Minimum separation between range handles when no step is set,
# as a fraction of the bounds span.
MIN_GAP_FRACTION = 1e-4

# Accessibility text
ACCESSIBILITY_DECIMALS = 3
RANGE_SEPARATOR = " to "
