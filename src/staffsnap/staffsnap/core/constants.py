"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

COUNTDOWN_SECONDS = 3
TICK_SECONDS = 1.0
CAPTURE_DELAY_SECONDS = 0.3
JPEG_QUALITY = 80
CAMERA_WIDTH = 1280
CAMERA_HEIGHT = 720

DEFAULT_GREETING_MODEL = "gemini-2.5-flash"
DEFAULT_HISTORY_LIMIT = 50

CLOCK_IN_FALLBACK = "Welcome, {name}. Have a great day!"
CLOCK_OUT_FALLBACK = "Goodbye, {name}. See you next time!"
EMPTY_REPLY_GREETING = "Welcome back, {name}!"
