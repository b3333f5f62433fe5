# config.py

import os

# -------------------
# Service
# -------------------
APP_NAME = os.environ.get("AGRI_APP_NAME", "AGRI Crop Health API")
APP_VERSION = "1.0.0"

# -------------------
# Analysis
# -------------------
# Language used when a request does not name one (unsupported codes fall back to English text)
DEFAULT_LANGUAGE = os.environ.get("AGRI_DEFAULT_LANGUAGE", "en")
MAX_UPLOAD_BYTES = int(os.environ.get("AGRI_MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# -------------------
# HTTP
# -------------------
HOST = os.environ.get("AGRI_HOST", "0.0.0.0")
PORT = int(os.environ.get("AGRI_PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("AGRI_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# -------------------
# Logging
# -------------------
LOG_LEVEL = os.environ.get("AGRI_LOG_LEVEL", "INFO").upper()
