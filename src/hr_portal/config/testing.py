import os

SECRET_KEY = "test-secret"

API_BASE_URL = os.getenv("API_BASE_URL", "http://backend.test/api")
API_TIMEOUT = 2.0

SERVICE_TOKEN = "service-test-token"

ATTENDANCE_SETTINGS_PATH = os.getenv("ATTENDANCE_SETTINGS_PATH", "")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
