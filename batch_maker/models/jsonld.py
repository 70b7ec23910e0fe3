# batch_maker/models/jsonld.py
"""
schema.org Recipe markup as it shows up in the wild.

`recipeInstructions` entries come in several shapes; each is lifted into one
variant of `Instruction` so callers can branch on the type instead of probing
dicts.
"""
from __future__ import annotations

from typing import Any, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_list(x: Any) -> list:
    if x is None:
        return []
    return x if isinstance(x, list) else [x]


def jsonld_types(obj: Any) -> List[str]:
    if not isinstance(obj, dict):
        return []
    return [t for t in as_list(obj.get("@type")) if isinstance(t, str)]


def _text_or_none(v: Any) -> Optional[str]:
    if v is None:
        return None
    return v if isinstance(v, str) else str(v)


class TextInstruction(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class HowToStep(BaseModel):
    kind: Literal["HowToStep"] = "HowToStep"
    text: str = ""
    name: Optional[str] = None


class HowToSection(BaseModel):
    kind: Literal["HowToSection"] = "HowToSection"
    name: Optional[str] = None
    items: List[Any] = Field(default_factory=list)


class UnsupportedInstruction(BaseModel):
    kind: Literal["unsupported"] = "unsupported"
    raw: Any = None


Instruction = Union[TextInstruction, HowToStep, HowToSection, UnsupportedInstruction]


def instruction_from_jsonld(entry: Any) -> Instruction:
    if isinstance(entry, str):
        return TextInstruction(text=entry)

    types = jsonld_types(entry)
    if "HowToStep" in types:
        return HowToStep(
            text=_text_or_none(entry.get("text")) or "",
            name=_text_or_none(entry.get("name")),
        )
    if "HowToSection" in types:
        return HowToSection(
            name=_text_or_none(entry.get("name")),
            items=as_list(entry.get("itemListElement")),
        )
    return UnsupportedInstruction(raw=entry)


class JsonLdRecipe(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    prep_time: Optional[str] = Field(default=None, alias="prepTime")
    cook_time: Optional[str] = Field(default=None, alias="cookTime")
    total_time: Optional[str] = Field(default=None, alias="totalTime")
    recipe_yield: Any = Field(default=None, alias="recipeYield")
    recipe_ingredient: List[Any] = Field(default_factory=list, alias="recipeIngredient")
    recipe_instructions: List[Any] = Field(default_factory=list, alias="recipeInstructions")

    @field_validator("name", "prep_time", "cook_time", "total_time", mode="before")
    @classmethod
    def _coerce_text(cls, v: Any) -> Optional[str]:
        return _text_or_none(v)

    @field_validator("recipe_ingredient", "recipe_instructions", mode="before")
    @classmethod
    def _coerce_list(cls, v: Any) -> list:
        return as_list(v)

    @property
    def servings(self) -> Optional[str]:
        y = self.recipe_yield
        if y is None:
            return None
        if isinstance(y, list):
            return ",".join(str(v) for v in y)
        return str(y)

    @property
    def instructions(self) -> List[Instruction]:
        return [instruction_from_jsonld(e) for e in self.recipe_instructions]
