# batch_maker/routers/recipes_parse.py
from __future__ import annotations

import httpx
from fastapi import APIRouter, HTTPException

from batch_maker.core import config
from batch_maker.core.errors import RecipeFetchError, RecipeImportError
from batch_maker.models.recipe import ParsedRecipe, RecipeParseRequest, RecipeTextRequest
from batch_maker.models.workflow import Workflow
from batch_maker.services.recipe_text import parse_recipe_text
from batch_maker.services.recipes_parse import parse_recipe_from_url
from batch_maker.services.workflow_convert import convert_to_workflow

router = APIRouter(prefix="/recipe", tags=["recipe"])


@router.post("/parse", response_model=ParsedRecipe)
async def recipe_parse(req: RecipeParseRequest) -> ParsedRecipe:
    try:
        return await parse_recipe_from_url(req.url, timeout=config.FETCH_TIMEOUT_S)
    except (RecipeFetchError, httpx.HTTPError) as e:
        raise HTTPException(status_code=400, detail=f"Failed to fetch URL: {e}")
    except RecipeImportError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/parse_text", response_model=ParsedRecipe)
def recipe_parse_text(req: RecipeTextRequest) -> ParsedRecipe:
    try:
        return parse_recipe_text(req.text)
    except RecipeImportError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/convert", response_model=Workflow)
def recipe_convert(recipe: ParsedRecipe) -> Workflow:
    return convert_to_workflow(recipe)
