# batch_maker/services/recipes_parse.py
from __future__ import annotations

import logging
from typing import Optional

import httpx

from batch_maker.core.errors import RecipeFetchError, RecipeImportError, RecipeNotFoundError
from batch_maker.models.recipe import ParsedRecipe
from batch_maker.services.recipe_jsonld import extract_recipe_from_html

log = logging.getLogger("batch_maker.parser")


async def fetch_html(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> str:
    if client is None:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as own:
            return await fetch_html(url, client=own)

    r = await client.get(url)
    if not r.is_success:
        raise RecipeFetchError(r.status_code, r.reason_phrase)
    return r.text


async def parse_recipe_from_url(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
) -> ParsedRecipe:
    """
    Fetch `url` and parse the recipe on it.

    Raises RecipeFetchError on a non-2xx response and RecipeNotFoundError when
    the page yields no steps; transport errors from httpx propagate untouched.
    """
    log.info("recipe_fetch", extra={"url": url})

    try:
        html = await fetch_html(url, client=client, timeout=timeout)
        recipe = extract_recipe_from_html(html, url)
        if recipe is None or not recipe.steps:
            raise RecipeNotFoundError()
    except (RecipeImportError, httpx.HTTPError) as e:
        log.warning("recipe_url_failed", extra={"url": url, "error": str(e)})
        raise

    log.info(
        "recipe_parsed",
        extra={
            "url": url,
            "title": recipe.title,
            "steps": len(recipe.steps),
            "ingredients": len(recipe.ingredients),
        },
    )
    return recipe
