"""Layout constants and color definitions."""

# Timing
FPS = 1000
MIN_FPS = 30
DURATION = 10.0  # seconds per lap

# Layout dimensions
SCREEN_W = 800
SCREEN_H = 800
BOX_SIZE = 200
TRACK_SIZE = SCREEN_W - BOX_SIZE  # boxes are positioned by their top-left corner

# Text
FONT_NAME = "monospace"
FONT_SIZE = 30
TEXT_POS = (10, 10)

# Colors
BG_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)

DEFAULT_EASING_A = "cubic_in_out"
DEFAULT_EASING_B = "quad_in_out"
