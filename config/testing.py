SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = False

GEMINI_API_KEY = ""
GREETING_MODEL = "gemini-2.5-flash"

CAMERA_SOURCE = "0"
CAMERA_WIDTH = 1280
CAMERA_HEIGHT = 720
COUNTDOWN_SECONDS = 3
CAPTURE_DELAY_SECONDS = 0.3

DEFAULT_LOCATION_ACCURACY = "high"
KIOSK_LATITUDE = ""
KIOSK_LONGITUDE = ""
