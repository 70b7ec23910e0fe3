from __future__ import annotations

from fastapi import APIRouter, HTTPException

from batch_maker.models.workflow import WorkflowGetResponse, WorkflowListResponse
from batch_maker.services import workflows_repo

router = APIRouter(prefix="/workflow", tags=["workflow"])


@router.get("/list", response_model=WorkflowListResponse)
def workflow_list(limit: int = 50) -> WorkflowListResponse:
    items = workflows_repo.list_workflows(limit=limit)
    return WorkflowListResponse(items=items)


@router.get("/get/{workflow_id}", response_model=WorkflowGetResponse)
def workflow_get(workflow_id: str) -> WorkflowGetResponse:
    w = workflows_repo.get_workflow(workflow_id)
    if not w:
        raise HTTPException(status_code=404, detail="Workflow not found")
    return WorkflowGetResponse(workflow=w)
