import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

SERVICE_TOKEN = os.getenv("SERVICE_TOKEN", "")

ATTENDANCE_SETTINGS_PATH = os.getenv("ATTENDANCE_SETTINGS_PATH", "")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
