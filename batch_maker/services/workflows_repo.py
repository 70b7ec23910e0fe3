# batch_maker/services/workflows_repo.py
from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Optional

from batch_maker.models.workflow import Workflow
from batch_maker.services import common


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def save_workflow(workflow: Workflow, *, source_url: Optional[str] = None) -> str:
    """
    Upserts into `workflows` keyed by the generated workflow id.
    The full workflow (steps included) is stored as JSON in workflow_json.
    """
    payload = json.dumps(workflow.model_dump(), ensure_ascii=False)

    with common.workflow_db() as conn:
        conn.execute(
            """
            INSERT OR REPLACE INTO workflows (id, name, source_url, workflow_json, step_count, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (workflow.id, workflow.name.strip(), source_url, payload, len(workflow.steps), _now_iso()),
        )
        conn.commit()
    return workflow.id


def list_workflows(limit: int = 50) -> list[dict[str, Any]]:
    with common.workflow_db() as conn:
        rows = conn.execute(
            """
            SELECT id, name, source_url, step_count, created_at
            FROM workflows
            ORDER BY created_at DESC
            LIMIT ?
            """,
            (int(limit),),
        ).fetchall()

    return [
        {"id": r[0], "name": r[1], "source_url": r[2], "step_count": r[3], "created_at": r[4]}
        for r in rows
    ]


def get_workflow(workflow_id: str) -> Optional[dict[str, Any]]:
    with common.workflow_db() as conn:
        row = conn.execute(
            """
            SELECT id, name, source_url, workflow_json, created_at
            FROM workflows
            WHERE id = ?
            """,
            (workflow_id,),
        ).fetchone()

    if not row:
        return None

    return {
        "id": row[0],
        "name": row[1],
        "source_url": row[2],
        "workflow": json.loads(row[3]),
        "created_at": row[4],
    }
