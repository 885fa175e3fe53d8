"""Food particle configuration constants."""

FOOD_SIZE = 3
FOOD_COLOR = "#8B4513"

# Vertical velocity is uniform in [MIN, MIN + RANGE): always sinking
FOOD_MIN_SINK_SPEED = 1.0
FOOD_SINK_SPEED_RANGE = 1.0

# Horizontal drift is uniform in [-DRIFT/2, DRIFT/2)
FOOD_DRIFT_RANGE = 0.5
