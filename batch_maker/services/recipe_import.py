# batch_maker/services/recipe_import.py
from __future__ import annotations

import logging
from typing import Optional

import httpx

from batch_maker.core.errors import RecipeFetchError, RecipeImportError
from batch_maker.models.recipe import ParsedRecipe
from batch_maker.models.workflow import ImportErrorCode, ImportResult
from batch_maker.services import common, workflows_repo
from batch_maker.services.recipe_text import parse_recipe_text
from batch_maker.services.recipes_parse import parse_recipe_from_url
from batch_maker.services.workflow_convert import convert_to_workflow

log = logging.getLogger("batch_maker.import")


def _failure(code: ImportErrorCode, detail: str) -> ImportResult:
    return ImportResult(success=False, error=code, message=f"Could not import recipe: {detail}")


def _unexpected(e: Exception, event: str) -> ImportResult:
    log.exception(event)
    return _failure(ImportErrorCode.UNKNOWN, str(e) or type(e).__name__)


def _save(recipe: ParsedRecipe) -> ImportResult:
    try:
        workflow = convert_to_workflow(recipe)
        workflows_repo.save_workflow(workflow, source_url=recipe.source)
    except Exception as e:
        return _unexpected(e, "workflow_save_failed")

    log.info("workflow_imported", extra={"workflow_id": workflow.id, "steps": len(workflow.steps)})
    return ImportResult(
        success=True,
        workflow_id=workflow.id,
        workflow_name=workflow.name,
        step_count=len(workflow.steps),
        message=f"Imported {workflow.name}",
    )


async def import_recipe_from_url(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> ImportResult:
    url = (url or "").strip()
    if not url:
        return ImportResult(success=False, error=ImportErrorCode.PARSE_FAILURE, message="Please enter a URL")
    if not common.is_url(url):
        return ImportResult(
            success=False,
            error=ImportErrorCode.PARSE_FAILURE,
            message="Please enter an http(s) URL",
        )

    try:
        recipe = await parse_recipe_from_url(url, client=client, timeout=timeout)
    except (RecipeFetchError, httpx.HTTPError) as e:
        return _failure(ImportErrorCode.FETCH_FAILURE, str(e) or type(e).__name__)
    except RecipeImportError as e:
        return _failure(ImportErrorCode.PARSE_FAILURE, str(e))
    except Exception as e:
        return _unexpected(e, "recipe_url_import_failed")

    return _save(recipe)


def import_recipe_from_text(text: str) -> ImportResult:
    if not (text or "").strip():
        return ImportResult(success=False, error=ImportErrorCode.PARSE_FAILURE, message="Please paste a recipe")

    try:
        recipe = parse_recipe_text(text)
    except RecipeImportError as e:
        return _failure(ImportErrorCode.PARSE_FAILURE, str(e))
    except Exception as e:
        return _unexpected(e, "recipe_text_import_failed")

    # a workflow needs at least one step to run as a batch
    if not recipe.steps:
        return _failure(ImportErrorCode.PARSE_FAILURE, "no steps found")

    return _save(recipe)
