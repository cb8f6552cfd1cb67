import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", ""))
GREETING_MODEL = os.getenv("GREETING_MODEL", "gemini-2.5-flash")

CAMERA_SOURCE = os.getenv("CAMERA_SOURCE", "0")
CAMERA_WIDTH = int(os.getenv("CAMERA_WIDTH", "1280"))
CAMERA_HEIGHT = int(os.getenv("CAMERA_HEIGHT", "720"))
COUNTDOWN_SECONDS = int(os.getenv("COUNTDOWN_SECONDS", "3"))
CAPTURE_DELAY_SECONDS = float(os.getenv("CAPTURE_DELAY_SECONDS", "0.3"))

DEFAULT_LOCATION_ACCURACY = os.getenv("DEFAULT_LOCATION_ACCURACY", "high")
KIOSK_LATITUDE = os.getenv("KIOSK_LATITUDE", "")
KIOSK_LONGITUDE = os.getenv("KIOSK_LONGITUDE", "")
