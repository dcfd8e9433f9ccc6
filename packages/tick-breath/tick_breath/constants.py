"""Layout, timing and curve constants."""

# Timing
PHASE_DURATION_MS = 4000
PULSE_INTERVAL_MS = 1000
PULSE_DURATION_MS = 500

# Canvas
CANVAS_W = 400
CANVAS_H = 300
ROTATION_CENTER = (200.0, 150.0)

# Triangle: circumscribed circle, side length ~200
TRIANGLE_RADIUS = 115.47
TRIANGLE_CENTER = (200.0, 175.0)
TRIANGLE_ANGLES = (0.0, 120.0, 240.0)  # degrees

# Square: clockwise from top-left
SQUARE_POINTS = (
    (100.0, 75.0),
    (300.0, 75.0),
    (300.0, 275.0),
    (100.0, 275.0),
)

# Nominal path lengths, keyed by ShapeKind value
PATH_LENGTHS: dict[str, float] = {
    "triangle": 600.0,
    "square": 800.0,
}

TRAIL_LENGTH_RATIO = 1 / 6

# Scale / glow curves
MIN_SCALE = 0.95
MAX_SCALE = 1.10
MIN_GLOW = 0.0
MAX_GLOW = 1.0
DIM_GLOW = 0.3

# Marker
CIRCLE_RADIUS_NORMAL = 6
CIRCLE_RADIUS_PULSE = 10
RIPPLE_MAX_RADIUS = 30

PHASE_LABELS: dict[str, tuple[str, ...]] = {
    "triangle": ("Breathe In", "Hold", "Breathe Out"),
    "square": ("Breathe In", "Hold", "Breathe Out", "Hold"),
}
