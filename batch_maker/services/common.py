import sqlite3
from pathlib import Path

from batch_maker.core import config

WORKFLOWS_SCHEMA = """
CREATE TABLE IF NOT EXISTS workflows (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    source_url TEXT,
    workflow_json TEXT NOT NULL,
    step_count INTEGER NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL
)
"""


def workflow_db() -> sqlite3.Connection:
    path = Path(config.WORKFLOW_DB)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.row_factory = sqlite3.Row
    conn.execute(WORKFLOWS_SCHEMA)
    return conn


def is_url(s: str) -> bool:
    s = (s or "").strip().lower()
    return s.startswith("http://") or s.startswith("https://")
