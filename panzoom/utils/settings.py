# panzoom/utils/settings.py
"""
Centralized settings and constants for the pan/zoom camera.
"""

# --- Zoom bounds ---
# Zoom is an inverse magnification: 2.0 shows twice as much world as 1.0.
MIN_ZOOM = 0.5
MAX_ZOOM = 2.0

# --- Gesture tuning ---
ZOOM_SENSITIVITY = 10.0      # px of motion / pinch-distance change ignored as jitter
ZOOM_INCREMENT = 0.05        # zoom step per recognized pinch change
MOUSE_ZOOM_INCREMENT = 0.1   # zoom step per wheel notch
PINCH_PAN_FACTOR = 0.5       # two fingers each report motion, so halve it

# --- Input toggles ---
MOVE_WHILE_ZOOMING = True
HANDLE_MOUSE_EVENTS = True

# Reserved contact id for the emulated mouse (pygame finger ids are >= 0).
MOUSE_CONTACT_ID = -1

# --- Scroll limits (world units) ---
ANCHOR_MODE = "center"  # "center" or "top_left"
SCROLL_LIMIT_LEFT = -10_000_000.0
SCROLL_LIMIT_TOP = -10_000_000.0
SCROLL_LIMIT_RIGHT = 10_000_000.0
SCROLL_LIMIT_BOTTOM = 10_000_000.0

# --- Demo window ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
CAPTION = "PanZoom"
