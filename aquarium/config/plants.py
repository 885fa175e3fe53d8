"""Plant decoration configuration constants."""

PLANT_COUNT = 10

PLANT_MIN_HEIGHT = 100
PLANT_HEIGHT_RANGE = 150

# Plants are green with a randomized green channel in [MIN, MIN + RANGE)
PLANT_GREEN_MIN = 100
PLANT_GREEN_RANGE = 100

# Stems root this far above the tank floor
PLANT_ROOT_OFFSET = 50

PLANT_SWAY_AMPLITUDE = 20
PLANT_STROKE_WIDTH = 8
PLANT_CURVE_SEGMENTS = 12
