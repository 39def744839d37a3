import os
from utils.config_utils import load_dynamic_config

# === Employee Record Rules ===
MIN_NAME_LENGTH = 2             # Minimum trimmed name length
MAX_NUMBER_DIGITS = 10          # Employee number is 1-10 decimal digits

# === Photo Upload ===
MAX_PHOTO_BYTES = 2 * 1024 * 1024   # 2MB, checked when the file is selected
ALLOWED_PHOTO_TYPES = ("image/jpeg", "image/jpg", "image/png")
PHOTO_MARKER = "data:image/"        # Stored photos are data URLs

# === API & Network Settings ===
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_VERSION = "1.0.0"
MAX_BODY_BYTES = 10 * 1024 * 1024   # Request body ceiling (inline photos)

# === Client Settings ===
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

_dynamic_config = load_dynamic_config()
SUCCESS_MESSAGE_SECONDS = _dynamic_config.get("SUCCESS_MESSAGE_SECONDS", 5)  # Clear after create/update
DELETE_MESSAGE_SECONDS = _dynamic_config.get("DELETE_MESSAGE_SECONDS", 3)    # Clear after delete
