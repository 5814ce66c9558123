"""
Recipe catalog administration core.

This package holds everything the admin front-end needs that is not
presentation: the recipe data model, the Record Store adapter (Supabase
table + storage bucket), the catalog list/filter, the dashboard metrics and
the record editor.
"""

from .models import Ingredient, Recipe, new_recipe

__all__ = [
    "Ingredient",
    "Recipe",
    "new_recipe",
]
