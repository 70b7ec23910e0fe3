from __future__ import annotations

import pytest

from batch_maker.core.errors import EmptyRecipeError
from batch_maker.services.recipe_text import parse_recipe_text, step_title_from_header

BANANA_BREAD = (
    "Banana Bread\n"
    "2 cups flour\n"
    "1. Preheat oven to 350F\n"
    "2. Mix ingredients and bake for 45 minutes"
)


def _synthetic_recipe(n: int) -> str:
    lines = ["Test Loaf"]
    for k in range(1, n + 1):
        lines.append(f"{k}. Stage {k}")
        lines.append(f"{k} cups item{k}")
        lines.append(f"Keep going with part {k}")
    return "\n".join(lines)


def test_banana_bread_scenario():
    recipe = parse_recipe_text(BANANA_BREAD)

    assert recipe.title == "Banana Bread"
    assert len(recipe.ingredients) == 1
    flour = recipe.ingredients[0]
    assert (flour.amount, flour.unit, flour.name) == ("2", "cups", "flour")

    assert [s.number for s in recipe.steps] == [1, 2]
    assert recipe.steps[0].title == "Preheat oven to 350F"
    assert recipe.steps[0].temperature == "350°F"
    assert recipe.steps[1].timer_minutes == 45
    # flour came before any step opened
    assert recipe.steps[0].ingredients == []


@pytest.mark.parametrize("text", ["", "   ", "\n \n\t\n"])
def test_empty_text_raises(text: str):
    with pytest.raises(EmptyRecipeError):
        parse_recipe_text(text)


@pytest.mark.parametrize("n", [1, 2, 5])
def test_numbered_steps_round_trip(n: int):
    recipe = parse_recipe_text(_synthetic_recipe(n))

    assert len(recipe.steps) == n
    for k, step in enumerate(recipe.steps, start=1):
        assert step.number == k
        assert step.title == f"Stage {k}"
        assert [i.full_text for i in step.ingredients] == [f"{k} cups item{k}"]
        assert step.instructions == f"Keep going with part {k}"
    assert len(recipe.ingredients) == n


def test_recipe_level_ingredients_deduplicated_but_kept_per_step():
    text = "Two Sauces\n1. First sauce\n1 tbsp butter\n2. Second sauce\n1 tbsp butter\n1 tbsp Butter"
    recipe = parse_recipe_text(text)

    assert [i.full_text for i in recipe.ingredients] == ["1 tbsp butter", "1 tbsp Butter"]
    assert [i.full_text for i in recipe.steps[0].ingredients] == ["1 tbsp butter"]
    assert [i.full_text for i in recipe.steps[1].ingredients] == ["1 tbsp butter", "1 tbsp Butter"]


def test_instruction_lines_joined_and_first_timing_kept():
    text = (
        "Cookies\n"
        "1. Bake\n"
        "until golden, about 12 minutes\n"
        "check again after 3 minutes at 190C\n"
    )
    recipe = parse_recipe_text(text)
    step = recipe.steps[0]

    assert step.instructions == "until golden, about 12 minutes\ncheck again after 3 minutes at 190C"
    assert step.timer_minutes == 12
    assert step.temperature == "190°C"


def test_short_lines_skipped():
    recipe = parse_recipe_text("Toast\n1. Toast the bread\nok\n--")

    assert len(recipe.steps) == 1
    assert recipe.steps[0].instructions == ""


def test_prose_before_any_header_synthesises_short_step():
    recipe = parse_recipe_text("Toast\nServe it warm on a plate\nwith jam on the side")

    assert len(recipe.steps) == 1
    step = recipe.steps[0]
    assert step.number == 1
    assert step.title == "Serve it warm on a plate"
    assert step.instructions == "with jam on the side"


def test_prose_before_any_header_synthesises_long_step():
    prose = "Everything here happens in one bowl and takes about 20 minutes overall"
    recipe = parse_recipe_text(f"Quick Dip\n{prose}")

    step = recipe.steps[0]
    assert step.title == "Preparation"
    assert step.instructions == prose
    assert step.timer_minutes == 20


def test_zero_steps_is_not_rejected():
    assert parse_recipe_text("Just a title").steps == []

    recipe = parse_recipe_text("Pantry list\n2 cups flour")
    assert recipe.steps == []
    assert len(recipe.ingredients) == 1


def test_source_is_attached():
    recipe = parse_recipe_text(BANANA_BREAD, source="https://example.com/bread")

    assert recipe.source == "https://example.com/bread"


@pytest.mark.parametrize(
    "line, number, expected",
    [
        ("1. Mix the dough", 1, "Mix the dough"),
        ("2) Shape", 2, "Shape"),
        ("Step 3: Proof overnight", 3, "Proof overnight"),
        ("For the glaze:", 4, "For the glaze"),
        ("5.", 5, "Step 5"),
        ("Step 6:", 6, "Step 6"),
    ],
)
def test_step_title_from_header(line: str, number: int, expected: str):
    assert step_title_from_header(line, number) == expected


def test_huge_duration_does_not_break_parse():
    huge = "9" * 400
    recipe = parse_recipe_text(f"Stew\n1. Simmer\nsimmer for {huge} minutes\nkeep it going for {huge} minutes")

    assert len(recipe.steps) == 2
    assert [s.timer_minutes for s in recipe.steps] == [None, None]
    assert recipe.steps[1].instructions == f"keep it going for {huge} minutes"


def test_trailing_unit_word_stays_in_instructions():
    recipe = parse_recipe_text("Soup\n1. Serve\nTop each bowl with a slice")

    assert recipe.steps[0].instructions == "Top each bowl with a slice"
    assert recipe.ingredients == []
