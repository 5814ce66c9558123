"""
Catalog list and filter.

The Catalog owns the in-memory set of fetched recipes. It is only ever
replaced wholesale by a fetch (never patched locally after a write): every
successful write elsewhere is followed by fetch_all() to resynchronize with
the Record Store.

Failure policy:
- fetch failure: logged, previous set retained, no user-facing error
- delete failure: logged, set left as-is, no user-facing error
"""

import logging
from typing import List, Optional, Sequence

from .models import Recipe
from .store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)


def filter_recipes(recipes: Sequence[Recipe], query: Optional[str]) -> List[Recipe]:
    """
    Filter recipes by a free-text query on name and region.

    Args:
        recipes: Recipes in display order
        query: Text matched case-insensitively as a substring of name or
               region. None or empty returns every recipe.

    Returns:
        Matching recipes, in the input order
    """
    if not query:
        return list(recipes)

    query_lower = query.lower()
    return [
        r for r in recipes
        if query_lower in r.name.lower() or query_lower in r.region.lower()
    ]


class Catalog:
    """
    In-memory recipe list backed by a RecordStore.

    Attributes:
        loaded: True once a fetch has succeeded at least once
        last_error: Message of the most recent swallowed failure, if any
    """

    def __init__(self, store: RecordStore):
        self._store = store
        self._recipes: List[Recipe] = []
        self.loaded = False
        self.last_error: Optional[str] = None

    @property
    def recipes(self) -> List[Recipe]:
        """Current recipe set (a new list; the Recipe objects are shared, do not mutate them)."""
        return list(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        """Find a recipe by id in the current set."""
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def fetch_all(self) -> bool:
        """
        Replace the in-memory set with every record from the store.

        Returns:
            True on success. On failure the previous set is kept and False
            is returned; nothing is raised.
        """
        try:
            recipes = self._store.list_recipes()
        except RecordStoreError as e:
            logger.warning("Catalog fetch failed, keeping %d cached recipes: %s", len(self._recipes), e)
            self.last_error = str(e)
            return False

        self._recipes = recipes
        self.loaded = True
        self.last_error = None
        logger.debug("Catalog refreshed: %d recipes", len(recipes))
        return True

    def filter(self, query: Optional[str]) -> List[Recipe]:
        """Derived view of the current set matching query (see filter_recipes)."""
        return filter_recipes(self._recipes, query)

    def delete(self, recipe_id: str) -> bool:
        """
        Delete a recipe by id, then resynchronize from the store.

        The local set is not touched before the store confirms the delete.

        Returns:
            True if the delete request succeeded, False otherwise
        """
        try:
            self._store.delete_recipe(recipe_id)
        except RecordStoreError as e:
            logger.warning("Delete of recipe id=%s failed: %s", recipe_id, e)
            self.last_error = str(e)
            return False

        self.fetch_all()
        return True
