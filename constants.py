import os
import logging

# Backend location
API_BASE_URL = os.environ.get("CATEGORY_ADMIN_API_URL", "http://localhost:5000/api").rstrip("/")
API_TOKEN = os.environ.get("CATEGORY_ADMIN_TOKEN") or None

_DEFAULT_TIMEOUT = 10.0
try:
    REQUEST_TIMEOUT = float(os.environ.get("CATEGORY_ADMIN_TIMEOUT", _DEFAULT_TIMEOUT))
except ValueError:
    logging.warning("CATEGORY_ADMIN_TIMEOUT is not a number, using %ss", _DEFAULT_TIMEOUT)
    REQUEST_TIMEOUT = _DEFAULT_TIMEOUT

# Limits
MIN_NAME_LEN = 3
MAX_NAME_LEN = 50
FORBIDDEN_NAME_CHARS = "!@#$%^&*()_+=[]{};':\"\\|,.<>/?"
SHORT_ID_LEN = 8

# App info
APP_NAME = "Category Admin"
APP_VERSION = "1.0.0"
