# batch_maker/services/recipe_jsonld.py
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Iterator, List, Optional, Union

from batch_maker.core.errors import EmptyRecipeError
from batch_maker.core.text import html_to_text
from batch_maker.models.jsonld import (
    HowToSection,
    HowToStep,
    Instruction,
    JsonLdRecipe,
    TextInstruction,
    UnsupportedInstruction,
    as_list,
    instruction_from_jsonld,
    jsonld_types,
)
from batch_maker.models.recipe import ParsedRecipe, ParsedStep
from batch_maker.services.extractors import extract_temperature, extract_time
from batch_maker.services.ingredients import parse_ingredient
from batch_maker.services.recipe_text import SHORT_LINE_LEN, parse_recipe_text

log = logging.getLogger("batch_maker.parser")

DEFAULT_TITLE = "Imported Recipe"

_JSONLD_RE = re.compile(
    r'<script[^>]+type=["\']application/ld\+json["\'][^>]*>(.*?)</script>',
    flags=re.DOTALL | re.IGNORECASE,
)


def _find_jsonld_scripts(html: str) -> List[str]:
    blocks = _JSONLD_RE.findall(html or "")
    return [b.strip() for b in blocks if b and b.strip()]


def _recipe_in(data: Any) -> Optional[Dict[str, Any]]:
    if isinstance(data, list):
        for item in data:
            found = _recipe_in(item)
            if found is not None:
                return found
        return None

    if not isinstance(data, dict):
        return None
    if "Recipe" in jsonld_types(data):
        return data
    for item in as_list(data.get("@graph")):
        if "Recipe" in jsonld_types(item):
            return item
    return None


def find_jsonld_recipe(html: str) -> Optional[Dict[str, Any]]:
    """First schema.org Recipe object embedded in the page, if any."""
    for block in _find_jsonld_scripts(html):
        try:
            data = json.loads(block)
        except ValueError as e:
            log.debug("jsonld_malformed", extra={"error": str(e)})
            continue

        recipe = _recipe_in(data)
        if recipe is not None:
            return recipe
    return None


def _flatten(instructions: List[Instruction]) -> Iterator[Union[TextInstruction, HowToStep]]:
    for ins in instructions:
        if isinstance(ins, HowToSection):
            yield from _flatten([instruction_from_jsonld(e) for e in ins.items])
        elif isinstance(ins, UnsupportedInstruction):
            log.debug("jsonld_instruction_skipped", extra={"raw": repr(ins.raw)[:200]})
        elif isinstance(ins, TextInstruction) and not ins.text.strip():
            continue
        else:
            yield ins


def _step_from_instruction(ins: Union[TextInstruction, HowToStep], number: int) -> ParsedStep:
    text = ins.text.strip()
    if isinstance(ins, TextInstruction):
        title = text if len(text) < SHORT_LINE_LEN else f"Step {number}"
    else:
        title = (ins.name or "").strip() or f"Step {number}"

    return ParsedStep(
        number=number,
        title=title,
        instructions=text,
        timer_minutes=extract_time(text),
        temperature=extract_temperature(text),
    )


def parse_recipe_from_jsonld(data: Dict[str, Any], source_url: Optional[str] = None) -> ParsedRecipe:
    recipe = JsonLdRecipe.model_validate(data)

    steps: List[ParsedStep] = []
    for ins in _flatten(recipe.instructions):
        steps.append(_step_from_instruction(ins, len(steps) + 1))

    ingredients = [
        parse_ingredient(i) for i in recipe.recipe_ingredient if isinstance(i, str) and i.strip()
    ]

    return ParsedRecipe(
        title=(recipe.name or "").strip() or DEFAULT_TITLE,
        source=source_url,
        prep_time=recipe.prep_time,
        cook_time=recipe.cook_time,
        total_time=recipe.total_time,
        servings=recipe.servings,
        ingredients=ingredients,
        steps=steps,
    )


def extract_recipe_from_html(html: str, source_url: Optional[str] = None) -> Optional[ParsedRecipe]:
    """
    Structured data first, visible text second.

    Returns None only when the page has no JSON-LD Recipe and no visible text
    at all.
    """
    data = find_jsonld_recipe(html)
    if data is not None:
        log.debug("jsonld_recipe_found", extra={"source": source_url})
        return parse_recipe_from_jsonld(data, source_url)

    try:
        return parse_recipe_text(html_to_text(html), source=source_url)
    except EmptyRecipeError:
        log.info("recipe_page_empty", extra={"source": source_url})
        return None
