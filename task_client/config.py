from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

TASKS_API_URL = os.getenv("TASKS_API_URL", "http://localhost:8000")

# The client has no login; every task it creates belongs to this user.
DEFAULT_USER_ID = int(os.getenv("DEFAULT_USER_ID", "1"))

MAX_TITLE_LENGTH = 200
