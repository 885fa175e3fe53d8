"""Display and UI configuration constants."""

# Default tank (window) dimensions in pixels
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

# The frame rate for the driver loop, in frames per second
FRAME_RATE = 60

WINDOW_CAPTION = "Aquarium"

# HUD
HUD_FONT_SIZE = 22
HUD_TEXT_COLOR = (230, 240, 255)
HUD_PANEL_COLOR = (10, 20, 35)
HUD_PANEL_ALPHA = 150
HUD_MARGIN = 10
HUD_LINE_HEIGHT = 20
