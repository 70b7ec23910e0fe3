import os
from pathlib import Path

# Project root = the checkout containing batch_maker/
PROJECT_ROOT = Path(__file__).resolve().parents[2]

DATA_DIR = Path(os.getenv("BATCH_MAKER_DATA_DIR", str(PROJECT_ROOT / "data")))
WORKFLOW_DB = DATA_DIR / "workflows.sqlite3"

# --- Version / build metadata (override via systemd env) ---
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
GIT_SHA = os.getenv("GIT_SHA", "unknown")
BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

# Applied by the HTTP layer; the parser itself takes whatever timeout it is handed.
FETCH_TIMEOUT_S = float(os.getenv("FETCH_TIMEOUT_S", "30"))
