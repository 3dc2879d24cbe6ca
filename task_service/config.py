from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tasks.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Only the browser client's origin may call the API.
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:5173").strip()
CORS_ORIGINS = [CORS_ORIGIN] if CORS_ORIGIN else []

MAX_TITLE_LENGTH = 200

# Ids and owner references are 32-bit signed integers.
MAX_ID = 2**31 - 1
