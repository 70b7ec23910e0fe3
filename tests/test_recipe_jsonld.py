from __future__ import annotations

import json
from typing import Any

import batch_maker.services.recipe_jsonld as rj

SOURCE = "https://example.com/sourdough"

SOURDOUGH_LD: dict[str, Any] = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Sourdough Loaf",
    "prepTime": "PT30M",
    "cookTime": "PT45M",
    "totalTime": "PT1H15M",
    "recipeYield": ["2", "2 loaves"],
    "recipeIngredient": ["500 g flour", "350 g water", "10 g salt"],
    "recipeInstructions": [
        {"@type": "HowToStep", "name": "Autolyse", "text": "Mix flour and water, rest 1 hour."},
        {"@type": "HowToStep", "text": "Bake at 250°C for 20-25 minutes."},
        "Cool on a rack.",
    ],
}


def _page(ld: Any, body: str = "") -> str:
    return (
        "<html><head>"
        f'<script type="application/ld+json">{json.dumps(ld)}</script>'
        "<style>p { color: red; }</style>"
        f"</head><body>{body}</body></html>"
    )


def test_jsonld_recipe_is_parsed():
    recipe = rj.extract_recipe_from_html(_page(SOURDOUGH_LD), SOURCE)

    assert recipe is not None
    assert recipe.title == "Sourdough Loaf"
    assert recipe.source == SOURCE
    assert (recipe.prep_time, recipe.cook_time, recipe.total_time) == ("PT30M", "PT45M", "PT1H15M")
    assert recipe.servings == "2,2 loaves"

    assert [(i.amount, i.unit, i.name) for i in recipe.ingredients] == [
        ("500", "g", "flour"),
        ("350", "g", "water"),
        ("10", "g", "salt"),
    ]

    first, second, third = recipe.steps
    assert (first.number, first.title, first.timer_minutes) == (1, "Autolyse", 60)
    assert first.instructions == "Mix flour and water, rest 1 hour."
    assert (second.number, second.title) == (2, "Step 2")
    assert second.temperature == "250°C"
    assert second.timer_minutes == 20
    assert (third.number, third.title, third.instructions) == (3, "Cool on a rack.", "Cool on a rack.")


def test_jsonld_takes_precedence_over_visible_prose():
    body = "<h1>Weeknight Chili</h1><p>1. Brown the beef</p><p>2 cans tomatoes</p>"
    recipe = rj.extract_recipe_from_html(_page(SOURDOUGH_LD, body), SOURCE)

    assert recipe.title == "Sourdough Loaf"
    assert len(recipe.steps) == 3
    assert "tomatoes" not in [i.name for i in recipe.ingredients]


def test_recipe_found_in_top_level_array():
    ld = [{"@type": "WebSite", "name": "Example"}, SOURDOUGH_LD]

    assert rj.find_jsonld_recipe(_page(ld))["name"] == "Sourdough Loaf"


def test_recipe_found_in_graph_with_type_list():
    recipe = dict(SOURDOUGH_LD, **{"@type": ["Recipe", "NewsArticle"]})
    ld = {"@context": "https://schema.org", "@graph": [{"@type": "Organization"}, recipe]}

    assert rj.find_jsonld_recipe(_page(ld))["name"] == "Sourdough Loaf"


def test_later_block_checked_when_first_is_not_a_recipe():
    html = _page({"@type": "BreadcrumbList"}) + _page(SOURDOUGH_LD)

    assert rj.find_jsonld_recipe(html)["name"] == "Sourdough Loaf"


def test_malformed_jsonld_falls_back_to_text():
    html = (
        '<script type="application/ld+json">{not json</script>'
        "<h1>Pancakes</h1><p>1. Whisk the batter</p><p>2 cups milk</p>"
    )
    recipe = rj.extract_recipe_from_html(html, SOURCE)

    assert recipe.title == "Pancakes"
    assert recipe.source == SOURCE
    assert [s.title for s in recipe.steps] == ["Whisk the batter"]
    assert [i.full_text for i in recipe.steps[0].ingredients] == ["2 cups milk"]


def test_non_recipe_jsonld_falls_back_to_text():
    html = _page({"@type": "Article", "name": "News"}, "<h1>Soup</h1><p>Simmer the stock</p>")
    recipe = rj.extract_recipe_from_html(html, SOURCE)

    assert recipe.title == "Soup"
    assert recipe.steps[0].title == "Simmer the stock"


def test_text_fallback_unescapes_entities():
    html = "<h1>Mac &amp; Cheese</h1><p>1. Stir&nbsp;in the &quot;good&quot; cheese</p>"
    recipe = rj.extract_recipe_from_html(html, SOURCE)

    assert recipe.title == "Mac & Cheese"
    assert recipe.steps[0].title == 'Stir in the "good" cheese'


def test_page_without_text_yields_none():
    assert rj.extract_recipe_from_html("<html><script>var x = 1;</script></html>", SOURCE) is None


def test_sections_are_flattened_and_unsupported_entries_skipped():
    ld = {
        "@type": "Recipe",
        "name": "Focaccia",
        "recipeInstructions": [
            {
                "@type": "HowToSection",
                "name": "Dough",
                "itemListElement": [
                    {"@type": "HowToStep", "text": "Knead for 10 minutes."},
                    {"@type": "HowToStep", "name": "Proof", "text": "Leave to rise 2 hours."},
                ],
            },
            {"@type": "Comment", "text": "Lovely!"},
            "   ",
            {"@type": "HowToStep", "text": "Bake at 220C."},
        ],
    }
    recipe = rj.parse_recipe_from_jsonld(ld, SOURCE)

    assert [s.number for s in recipe.steps] == [1, 2, 3]
    assert [s.title for s in recipe.steps] == ["Step 1", "Proof", "Step 3"]
    assert [s.timer_minutes for s in recipe.steps] == [10, 120, None]
    assert recipe.steps[2].temperature == "220°C"


def test_defaults_and_scalar_shapes():
    ld = {
        "@type": "Recipe",
        "recipeYield": 4,
        "recipeIngredient": "1 cup rice",
        "recipeInstructions": "Stir well and serve.",
    }
    recipe = rj.parse_recipe_from_jsonld(ld)

    assert recipe.title == "Imported Recipe"
    assert recipe.servings == "4"
    assert [i.full_text for i in recipe.ingredients] == ["1 cup rice"]
    assert len(recipe.steps) == 1
    assert recipe.steps[0].title == "Stir well and serve."


def test_long_text_instruction_gets_numbered_title():
    text = "Fold the butter into the dough in three turns, chilling it between each of the turns."
    recipe = rj.parse_recipe_from_jsonld({"@type": "Recipe", "name": "Croissant", "recipeInstructions": [text]})

    assert recipe.steps[0].title == "Step 1"
    assert recipe.steps[0].instructions == text
