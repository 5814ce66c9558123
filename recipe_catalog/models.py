"""
Recipe models for the catalog.

This module defines the canonical recipe schema shared by the Record Store
adapter, the catalog list, the dashboard metrics and the editor.

# NOTE: Field names on the wire (the `recipes` table) are camelCase, e.g.
    prepTime, cookTime, techniqueTitle. Python attributes are snake_case and
    declared with the wire name as alias. Models accept either form, and
    to_record() always emits the wire names.

Field expectations:
- Required: id, name, region, category, difficulty, prepTime, cookTime, image
- Optional narrative fields: alias, description, techniqueTitle, ...
- ingredients: ordered list of {item, amount}, free text
- steps: ordered list of free-text strings
"""

import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


REGIONS = ["Sud", "Centre", "Nord", "National"]

CATEGORIES = [
    "Pâtes et Céréales (Wɔ̌)",
    "Sauces (Nùsúnnú)",
    "Plats de Résistance & Ragoûts",
    "Protéines & Grillades",
    "Street Food & Snacks (Amuse-bouche)",
    "Boissons & Douceurs",
    "Condiments & Accompagnements",
]

DIFFICULTIES = [
    "Très Facile",
    "Facile",
    "Intermédiaire",
    "Moyen",
    "Difficile",
    "Très Difficile",
    "Extrême",
    "N/A",
]

# Defaults for a record synthesized by the editor's "new" action
DEFAULT_REGION = "Sud"
DEFAULT_CATEGORY = "Plats de Résistance & Ragoûts"
DEFAULT_DIFFICULTY = "Moyen"
DEFAULT_PREP_TIME = "20 min"
DEFAULT_COOK_TIME = "30 min"


class Ingredient(BaseModel):
    """One ingredient row. Both fields are free text (no unit parsing)."""
    item: str = Field(default="", description="Ingredient name")
    amount: str = Field(default="", description="Quantity as typed, e.g. '2 cuillères'")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("item", "amount", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Recipe(BaseModel):
    """
    A recipe record as stored in the `recipes` relation.

    `id` is a client-generated UUID string. It is the upsert conflict key
    and the delete key and never changes once assigned.
    """
    # Identity
    id: str = Field(..., min_length=1, description="UUID string, assigned at creation")

    # Required descriptive attributes
    name: str = Field(default="", description="Human title of the dish")
    region: str = Field(default="", description="One of REGIONS (not strictly validated)")
    category: str = Field(default="", description="One of CATEGORIES (not strictly validated)")
    difficulty: str = Field(default="", description="One of DIFFICULTIES")
    prep_time: str = Field(default="", alias="prepTime", description="Display string, e.g. '20 min'")
    cook_time: str = Field(default="", alias="cookTime", description="Display string, e.g. '30 min'")
    image: str = Field(default="", description="Public URL of the recipe image, possibly empty")

    # Optional attributes
    alias: Optional[str] = None
    description: Optional[str] = None
    technique_title: Optional[str] = Field(None, alias="techniqueTitle")
    technique_description: Optional[str] = Field(None, alias="techniqueDescription")
    diaspora_substitutes: Optional[str] = Field(None, alias="diasporaSubstitutes")
    suggested_sides: Optional[List[str]] = Field(None, alias="suggestedSides")
    benefits: Optional[str] = None
    pedagogical_note: Optional[str] = Field(None, alias="pedagogicalNote")
    type: Optional[str] = None
    base: Optional[str] = None
    style: Optional[str] = None
    origine_humaine: Optional[str] = None
    video_url: Optional[str] = Field(None, alias="videoUrl")
    rating: Optional[float] = None

    # Composite sub-entities
    ingredients: Optional[List[Ingredient]] = None
    steps: Optional[List[str]] = None

    model_config = ConfigDict(
        populate_by_name=True,  # Accept both prep_time and prepTime
        extra="allow",  # Keep columns we don't model (e.g. created_at) through edit + upsert
        validate_assignment=True,
    )

    @field_validator(
        "name", "region", "category", "difficulty", "prep_time", "cook_time", "image",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        # Rows created outside the admin may carry NULL in these columns
        return "" if value is None else value

    def clone(self) -> "Recipe":
        """Return a fully independent deep copy (no shared lists)."""
        return self.model_copy(deep=True)

    def to_record(self) -> Dict[str, Any]:
        """
        Build the upsert payload for the Record Store.

        Every field that was loaded from the store or assigned since is
        sent, including fields cleared to None (sent as null), so the row is
        fully overwritten. Optional fields never set are left out. Required
        fields and extra columns are always included.

        Returns:
            Dictionary keyed by wire (camelCase) names
        """
        record = self.model_dump(by_alias=True, exclude_unset=True, mode="json")
        if "ingredients" in record and self.ingredients is not None:
            # Rows always carry both item and amount
            record["ingredients"] = [i.model_dump(mode="json") for i in self.ingredients]
        for name in REQUIRED_FIELDS:
            info = Recipe.model_fields[name]
            record.setdefault(info.alias or name, getattr(self, name))
        for key, value in (self.model_extra or {}).items():
            record.setdefault(key, value)
        return record


# Columns present in every upsert payload
REQUIRED_FIELDS = ("id", "name", "region", "category", "difficulty", "prep_time", "cook_time", "image")


# Scalar attributes an editor may replace; id and the list fields are excluded
EDITABLE_FIELDS = frozenset(
    name for name in Recipe.model_fields
    if name not in ("id", "ingredients", "steps")
)


def generate_recipe_id() -> str:
    """Generate a fresh record identifier (string form of a random UUID)."""
    return str(uuid.uuid4())


def new_recipe() -> Recipe:
    """
    Synthesize the default record used when creating a new dish.

    Returns:
        Recipe with a fresh id, region "Sud", the default category and
        difficulty, 20/30 minute times, no image and empty ingredient and
        step lists.
    """
    return Recipe(
        id=generate_recipe_id(),
        name="",
        region=DEFAULT_REGION,
        category=DEFAULT_CATEGORY,
        difficulty=DEFAULT_DIFFICULTY,
        prep_time=DEFAULT_PREP_TIME,
        cook_time=DEFAULT_COOK_TIME,
        image="",
        ingredients=[],
        steps=[],
        description="",
    )
