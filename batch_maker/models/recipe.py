# batch_maker/models/recipe.py
from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class RecipeParseRequest(BaseModel):
    url: str


class RecipeTextRequest(BaseModel):
    text: str


class ParsedIngredient(BaseModel):
    name: str
    amount: Optional[str] = None
    unit: Optional[str] = None
    full_text: str


class ParsedStep(BaseModel):
    number: int = Field(ge=1)
    title: str
    instructions: str = ""
    ingredients: List[ParsedIngredient] = Field(default_factory=list)
    timer_minutes: Optional[int] = Field(default=None, ge=0)
    temperature: Optional[str] = None


class ParsedRecipe(BaseModel):
    title: str
    source: Optional[str] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    total_time: Optional[str] = None
    servings: Optional[str] = None
    ingredients: List[ParsedIngredient] = Field(default_factory=list)
    steps: List[ParsedStep] = Field(default_factory=list)
