# batch_maker/routers/recipes_ops.py
from __future__ import annotations

from fastapi import APIRouter

from batch_maker.core import config
from batch_maker.models.recipe import RecipeParseRequest, RecipeTextRequest
from batch_maker.models.workflow import ImportResult
from batch_maker.services.recipe_import import import_recipe_from_text, import_recipe_from_url

router = APIRouter(prefix="/recipe", tags=["recipe"])


# Failures come back as ImportResult(success=False) with a 200 so the
# dashboard can show the message as-is.
@router.post("/import", response_model=ImportResult)
async def recipe_import(req: RecipeParseRequest) -> ImportResult:
    return await import_recipe_from_url(req.url, timeout=config.FETCH_TIMEOUT_S)


@router.post("/import_text", response_model=ImportResult)
def recipe_import_text(req: RecipeTextRequest) -> ImportResult:
    return import_recipe_from_text(req.text)
