# batch_maker/services/workflow_convert.py
from __future__ import annotations

import re
import time
from typing import Optional

from batch_maker.models.recipe import ParsedRecipe, ParsedStep
from batch_maker.models.workflow import Workflow, WorkflowStep

CHECKLIST_HEADER = "📋 Checklist:"
CHECKBOX = "☐"

_WS_RE = re.compile(r"\s+")


def _now_ms() -> int:
    return int(time.time() * 1000)


def slugify_title(title: str) -> str:
    return _WS_RE.sub("_", (title or "").lower())


def step_description(step: ParsedStep) -> str:
    description = step.instructions

    if step.temperature:
        description += f"\n\nTarget Temperature: {step.temperature}"

    if step.ingredients:
        description += f"\n\n{CHECKLIST_HEADER}\n"
        description += "\n".join(f"{CHECKBOX} {ing.full_text}" for ing in step.ingredients)

    return description.strip()


def convert_to_workflow(recipe: ParsedRecipe, *, now_ms: Optional[int] = None) -> Workflow:
    stamp = _now_ms() if now_ms is None else now_ms
    workflow_id = f"{slugify_title(recipe.title)}_{stamp}"

    steps = [
        WorkflowStep(
            id=f"{workflow_id}_step_{i}",
            title=step.title,
            description=step_description(step),
            timer_minutes=step.timer_minutes,
            completed=False,
        )
        for i, step in enumerate(recipe.steps, start=1)
    ]

    return Workflow(id=workflow_id, name=recipe.title, steps=steps)
