"""Configuration: env, bind address, error style, seed data."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of albumstore package)
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

# API
API_HOST = os.getenv("ALBUMSTORE_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("ALBUMSTORE_API_PORT", "3000"))
API_RELOAD = os.getenv("ALBUMSTORE_RELOAD", "0").lower() in ("1", "true", "yes")
CORS_ORIGINS = [
    o.strip() for o in os.getenv("ALBUMSTORE_CORS_ORIGINS", "*").split(",") if o.strip()
]

# "structured": {status, code?, error?}; "adhoc": {code, success, err}
ERROR_STYLES = ("structured", "adhoc")
ERROR_STYLE = os.getenv("ALBUMSTORE_ERROR_STYLE", "structured").lower()

LOG_LEVEL = os.getenv("ALBUMSTORE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

# Start with the three sample albums
SEED_ALBUMS = os.getenv("ALBUMSTORE_SEED_ALBUMS", "1").lower() in ("1", "true", "yes")

# New ids are drawn from [ID_MIN, ID_MAX]
ID_MIN = 10
ID_MAX = 109
