import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

# Token used when no user session exists (e.g. `flask process-absentees`)
SERVICE_TOKEN = os.getenv("SERVICE_TOKEN", "")

# Empty means "<instance folder>/attendance_settings.json"
ATTENDANCE_SETTINGS_PATH = os.getenv("ATTENDANCE_SETTINGS_PATH", "")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
