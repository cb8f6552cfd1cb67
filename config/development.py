import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load the demo admin/staff accounts and two sample records on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# Greeting model; without a key every scan gets the templated greeting
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", ""))
GREETING_MODEL = os.getenv("GREETING_MODEL", "gemini-2.5-flash")

# Kiosk webcam (index or stream URL) used by the server-side capture endpoint
CAMERA_SOURCE = os.getenv("CAMERA_SOURCE", "0")
CAMERA_WIDTH = int(os.getenv("CAMERA_WIDTH", "1280"))
CAMERA_HEIGHT = int(os.getenv("CAMERA_HEIGHT", "720"))
COUNTDOWN_SECONDS = int(os.getenv("COUNTDOWN_SECONDS", "3"))
CAPTURE_DELAY_SECONDS = float(os.getenv("CAPTURE_DELAY_SECONDS", "0.3"))

DEFAULT_LOCATION_ACCURACY = os.getenv("DEFAULT_LOCATION_ACCURACY", "high")
KIOSK_LATITUDE = os.getenv("KIOSK_LATITUDE", "")
KIOSK_LONGITUDE = os.getenv("KIOSK_LONGITUDE", "")
