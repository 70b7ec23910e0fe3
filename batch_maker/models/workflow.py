# batch_maker/models/workflow.py
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class WorkflowStep(BaseModel):
    id: str
    title: str
    description: str
    timer_minutes: Optional[int] = None
    completed: bool = False


class Workflow(BaseModel):
    id: str
    name: str
    steps: List[WorkflowStep] = Field(default_factory=list)


class ImportErrorCode(str, Enum):
    PARSE_FAILURE = "PARSE_FAILURE"
    FETCH_FAILURE = "FETCH_FAILURE"
    UNKNOWN = "UNKNOWN"


class ImportResult(BaseModel):
    success: bool
    workflow_id: Optional[str] = None
    workflow_name: Optional[str] = None
    step_count: int = 0
    error: Optional[ImportErrorCode] = None
    message: Optional[str] = None


class WorkflowListResponse(BaseModel):
    items: list[dict[str, Any]]


class WorkflowGetResponse(BaseModel):
    workflow: dict[str, Any]
