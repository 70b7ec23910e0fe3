# batch_maker/services/recipe_text.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from batch_maker.core.errors import EmptyRecipeError
from batch_maker.models.recipe import ParsedIngredient, ParsedRecipe, ParsedStep
from batch_maker.services.classifiers import LineKind, classify_line
from batch_maker.services.extractors import extract_temperature, extract_time
from batch_maker.services.ingredients import parse_ingredient

log = logging.getLogger("batch_maker.parser")

MIN_LINE_LEN = 3
SHORT_LINE_LEN = 60

_NUMBER_PREFIX_RE = re.compile(r"^\d+[.)]\s*")
_STEP_PREFIX_RE = re.compile(r"^step\s+\d+[:.)]?\s*", flags=re.IGNORECASE)
_TRAILING_COLON_RE = re.compile(r":$")


@dataclass
class _StepDraft:
    number: int
    title: str
    lines: List[str] = field(default_factory=list)
    ingredients: List[ParsedIngredient] = field(default_factory=list)
    timer_minutes: Optional[int] = None
    temperature: Optional[str] = None

    def absorb_timing(self, text: str) -> None:
        # first hit wins for each field
        if self.timer_minutes is None:
            self.timer_minutes = extract_time(text)
        if self.temperature is None:
            self.temperature = extract_temperature(text)

    def build(self) -> ParsedStep:
        return ParsedStep(
            number=self.number,
            title=self.title,
            instructions="\n".join(self.lines),
            ingredients=list(self.ingredients),
            timer_minutes=self.timer_minutes,
            temperature=self.temperature,
        )


def step_title_from_header(line: str, number: int) -> str:
    title = _NUMBER_PREFIX_RE.sub("", line, count=1)
    title = _STEP_PREFIX_RE.sub("", title, count=1)
    title = _TRAILING_COLON_RE.sub("", title).strip()
    return title or f"Step {number}"


def parse_recipe_text(text: str, *, source: Optional[str] = None) -> ParsedRecipe:
    """
    Build a ParsedRecipe from free text, one line at a time.

    The first non-blank line is the title. Header lines open a new step,
    ingredient lines attach to the open step (and to the recipe-wide list,
    deduplicated by full text), and everything else is instruction prose.
    Raises EmptyRecipeError if there is nothing but whitespace. A result with
    zero steps is returned as-is.
    """
    lines = [ln.strip() for ln in (text or "").splitlines()]
    lines = [ln for ln in lines if ln]
    if not lines:
        raise EmptyRecipeError()

    title = lines[0]
    ingredients: List[ParsedIngredient] = []
    seen: set[str] = set()
    steps: List[ParsedStep] = []
    current: Optional[_StepDraft] = None
    step_number = 0

    for line in lines[1:]:
        if len(line) < MIN_LINE_LEN:
            continue

        kind = classify_line(line)

        if kind is LineKind.HEADER:
            if current is not None:
                steps.append(current.build())
            step_number += 1
            current = _StepDraft(number=step_number, title=step_title_from_header(line, step_number))
            current.absorb_timing(line)
            continue

        if kind is LineKind.INGREDIENT:
            ingredient = parse_ingredient(line)
            if ingredient.full_text not in seen:
                seen.add(ingredient.full_text)
                ingredients.append(ingredient)
            if current is not None:
                current.ingredients.append(ingredient)
            continue

        if current is None:
            step_number += 1
            short = len(line) < SHORT_LINE_LEN
            current = _StepDraft(
                number=step_number,
                title=line if short else "Preparation",
                lines=[] if short else [line],
            )
        else:
            current.lines.append(line)
        current.absorb_timing(line)

    if current is not None:
        steps.append(current.build())

    log.debug(
        "recipe_text_parsed",
        extra={"title": title, "steps": len(steps), "ingredients": len(ingredients)},
    )
    return ParsedRecipe(title=title, source=source, ingredients=ingredients, steps=steps)
