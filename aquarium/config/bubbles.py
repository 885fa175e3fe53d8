"""Ambient bubble configuration constants."""

# Probability of spawning one bubble at the tank floor each frame
BUBBLE_SPAWN_CHANCE = 0.05

BUBBLE_MIN_SIZE = 1.0
BUBBLE_SIZE_RANGE = 3.0
BUBBLE_MIN_RISE_SPEED = 0.5
BUBBLE_RISE_SPEED_RANGE = 1.0

BUBBLE_WOBBLE_STEP = 0.05
BUBBLE_WOBBLE_AMPLITUDE = 0.5

# Bubbles above this y have left the visible area
BUBBLE_EXPIRY_Y = -10

BUBBLE_STROKE_COLOR = (255, 255, 255)
BUBBLE_STROKE_ALPHA = 0.4
BUBBLE_FILL_COLOR = (255, 255, 255)
BUBBLE_FILL_ALPHA = 0.1
