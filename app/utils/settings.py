# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
