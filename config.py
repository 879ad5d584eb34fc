import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    BACKEND_API_URL = os.getenv("BACKEND_API_URL", "http://localhost:8000/api")
    ENROLL_SERVICE_URL = os.getenv(
        "ENROLL_SERVICE_URL",
        "https://enrollstudents.azurewebsites.net/api/enrollStudent",
    )
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))
    MAX_CONTENT_LENGTH = 8 * 1024 * 1024
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    WTF_CSRF_ENABLED = True

class TestConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    BACKEND_API_URL = "http://backend.test/api"
    ENROLL_SERVICE_URL = "http://enroll.test/api/enrollStudent"
