# batch_maker/services/ingredients.py
from __future__ import annotations

import re

from batch_maker.models.recipe import ParsedIngredient

# Metric and imperial volume/mass words plus the count-ish ones recipes use.
UNITS = frozenset(
    {
        "g", "kg", "mg", "gram", "grams", "kilogram", "kilograms",
        "ml", "l", "milliliter", "milliliters", "liter", "liters",
        "oz", "lb", "ounce", "ounces", "pound", "pounds",
        "cup", "cups", "tablespoon", "tablespoons", "tbsp", "tbs", "tb",
        "teaspoon", "teaspoons", "tsp", "ts",
        "pinch", "dash", "handful", "piece", "pieces",
        "can", "cans", "package", "packages", "pkg",
        "clove", "cloves", "stick", "sticks",
        "slice", "slices", "sheet", "sheets",
    }
)

# Mixed number first so "1 1/2" isn't cut short at "1".
_AMOUNT_RE = re.compile(r"^(\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?)")


def is_unit_word(token: str) -> bool:
    t = (token or "").lower()
    if not t:
        return False
    return t in UNITS or (t.endswith("s") and t[:-1] in UNITS)


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Split one ingredient line into amount / unit / name.

    Best effort: anything that isn't recognised stays in `name`, and
    `full_text` is always the trimmed line.
    """
    cleaned = (text or "").strip()

    amount = None
    remaining = cleaned
    m = _AMOUNT_RE.match(cleaned)
    if m:
        amount = m.group(1)
        remaining = cleaned[m.end():].strip()

    unit = None
    first = remaining.split(None, 1)[0].lower() if remaining else ""
    if is_unit_word(first):
        unit = first
        remaining = remaining[len(first):].strip()

    return ParsedIngredient(
        name=remaining or cleaned,
        amount=amount,
        unit=unit,
        full_text=cleaned,
    )
