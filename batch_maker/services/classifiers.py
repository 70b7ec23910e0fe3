# batch_maker/services/classifiers.py
"""
Line classifiers for the plain-text recipe assembler.

Each signal is its own predicate; `is_step_header` and `is_ingredient_line`
OR them together. `classify_line` decides ties: a line that looks like both
a header and an ingredient is a header.
"""
from __future__ import annotations

import re
from enum import Enum

from batch_maker.services.ingredients import is_unit_word

COOKING_VERBS = frozenset(
    {
        "mix", "stir", "whisk", "beat", "fold", "knead", "blend",
        "heat", "boil", "simmer", "cook", "bake", "roast", "grill", "fry",
        "add", "combine", "pour", "place", "spread", "cover",
        "let", "allow", "wait", "rest", "rise", "proof",
        "cut", "chop", "dice", "slice", "mince", "grate",
        "preheat", "prepare", "season", "garnish",
    }
)

SECTION_HEADER_MAX_LEN = 60

# "1." / "2)" but not a decimal like "1.5 cups"
_NUMBERED_RE = re.compile(r"^\d+[.)](?!\d)")
_STEP_N_RE = re.compile(r"^step\s+\d+", flags=re.IGNORECASE)
_LEADING_DIGIT_RE = re.compile(r"^\d")


class LineKind(str, Enum):
    HEADER = "header"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


def _first_word(line: str) -> str:
    parts = (line or "").strip().lower().split(None, 1)
    return parts[0].rstrip(".,;:!") if parts else ""


def is_numbered_header(line: str) -> bool:
    line = (line or "").strip()
    return bool(_NUMBERED_RE.match(line) or _STEP_N_RE.match(line))


def is_section_header(line: str) -> bool:
    line = (line or "").strip()
    return len(line) < SECTION_HEADER_MAX_LEN and line.endswith(":")


def starts_with_cooking_verb(line: str) -> bool:
    return _first_word(line) in COOKING_VERBS


def is_step_header(line: str) -> bool:
    return is_numbered_header(line) or is_section_header(line) or starts_with_cooking_verb(line)


def starts_with_digit(line: str) -> bool:
    return bool(_LEADING_DIGIT_RE.match((line or "").strip()))


def contains_unit_token(line: str) -> bool:
    # a trailing unit word ("... with a slice") is prose, not a quantity
    tokens = (line or "").lower().split()[:-1]
    return any(is_unit_word(tok) for tok in tokens)


def is_ingredient_line(line: str) -> bool:
    return starts_with_digit(line) or contains_unit_token(line)


def classify_line(line: str) -> LineKind:
    if is_step_header(line):
        return LineKind.HEADER
    if is_ingredient_line(line):
        return LineKind.INGREDIENT
    return LineKind.INSTRUCTION
