"""Fish steering and species configuration constants.

These values drive the IDLE/CHASING state machine in
``aquarium.entities.fish``. Distances are in tank pixels, rates per frame.
"""

# =============================================================================
# PERCEPTION AND CAPTURE
# =============================================================================
PERCEPTION_RADIUS = 200.0  # Food farther than this is invisible
CAPTURE_RADIUS = 10.0  # Food closer than this is eaten
CHASE_SPEED_MULTIPLIER = 1.5  # Speed boost while chasing

# =============================================================================
# IDLE BEHAVIOR
# =============================================================================
WALL_MARGIN = 50.0  # Distance from an edge that triggers avoidance
WANDER_CHANCE = 0.01  # Per-frame chance of picking a new heading
WANDER_ANGLE_RANGE = 1.0  # New heading within +/- this many radians

# =============================================================================
# ANIMATION
# =============================================================================
TAIL_PHASE_RATE = 0.1  # Tail phase advance per unit of speed
FIN_PHASE_STEP = 0.1  # Fin phase advance per frame, speed independent
TAIL_WIGGLE_AMPLITUDE = 5.0
TAIL_LENGTH = 10.0
TAIL_HALF_WIDTH = 5.0

# =============================================================================
# SPAWNING
# =============================================================================
SPAWN_VERTICAL_MARGIN = 50  # Fish spawn with y in [margin, height - margin)

# =============================================================================
# SPECIES
# =============================================================================
# Closed set of species. Order matters: the UI binds keys 1..N in this order.
FISH_TYPES = [
    {
        "name": "Goldfish",
        "color": "#FFD700",
        "fin_color": "#FF8C00",
        "speed": 2.0,
        "size": 15.0,
        "turn_speed": 0.05,
        "tall": False,
    },
    {
        "name": "Neon Tetra",
        "color": "#00FFFF",
        "fin_color": "#FF0000",
        "speed": 3.5,
        "size": 8.0,
        "turn_speed": 0.08,
        "tall": False,
    },
    {
        "name": "Angelfish",
        "color": "#C0C0C0",
        "fin_color": "#000000",
        "speed": 1.5,
        "size": 20.0,
        "turn_speed": 0.03,
        "tall": True,
    },
]

# Species added silently when the tank is first set up
INITIAL_SPECIES = ("Goldfish", "Neon Tetra")
