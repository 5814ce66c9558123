"""
Record editor for a single recipe.

The editor holds a private working copy of one recipe: a deep clone of an
existing record, or a freshly synthesized default record for "new". Edits
are invisible to the catalog until save() upserts the whole working copy
and the catalog re-fetches.

States:
    closed -> clean -> dirty -> saving -> saved       (auto-closes after SAVED_CLOSE_DELAY)
                                      +-> save_failed (stays open, editable)

save() and upload_image() reject re-entrant calls with EditorBusyError
while a call of the same kind is still in flight.
"""

import logging
import time
import uuid
from enum import Enum
from typing import Any, Callable, List, Optional

from .models import EDITABLE_FIELDS, Ingredient, Recipe, new_recipe
from .store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

# Seconds between a successful save and the automatic close
SAVED_CLOSE_DELAY = 1.5

# Upload progress checkpoints (percent). Coarse UI feedback, not byte-accurate.
UPLOAD_STARTED = 10
UPLOAD_SENDING = 30
UPLOAD_RESOLVING = 70
UPLOAD_DONE = 100

INGREDIENT_FIELDS = ("item", "amount")

# Wire names (prepTime, videoUrl, ...) accepted by set_field as well
_FIELD_ALIASES = {
    info.alias: name
    for name, info in Recipe.model_fields.items()
    if info.alias and name in EDITABLE_FIELDS
}


class EditorState(str, Enum):
    """Lifecycle state of the record editor."""
    CLOSED = "closed"
    CLEAN = "clean"
    DIRTY = "dirty"
    SAVING = "saving"
    SAVED = "saved"
    SAVE_FAILED = "save_failed"


class EditorError(Exception):
    """Base class for editor misuse errors."""


class EditorClosedError(EditorError):
    """Raised when the working copy is accessed while the editor is closed."""


class EditorBusyError(EditorError):
    """Raised when save or upload is called again while one is in flight."""


def random_object_name(filename: str) -> str:
    """
    Build a randomized storage name that keeps the original extension.

    The extension is the text after the last '.' of filename.
    """
    extension = filename.rsplit(".", 1)[-1]
    return f"{uuid.uuid4().hex}.{extension}"


class RecipeEditor:
    """
    Working-copy editor for one recipe at a time.

    Attributes:
        state: Current EditorState
        working_copy: The private Recipe being edited, None while closed
        upload_progress: Last upload checkpoint (0 when idle)
        upload_error: Message of the last failed upload, None otherwise
        revision: Incremented on open and on structural list changes, so a
                  UI can key per-row widgets safely
    """

    def __init__(
        self,
        store: RecordStore,
        on_saved: Optional[Callable[[], Any]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self._on_saved = on_saved
        self._clock = clock

        self.state = EditorState.CLOSED
        self.working_copy: Optional[Recipe] = None
        self.upload_progress = 0
        self.upload_error: Optional[str] = None
        self.revision = 0

        self._saved_at: Optional[float] = None
        self._saving = False
        self._uploading = False

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self.state != EditorState.CLOSED

    @property
    def is_dirty(self) -> bool:
        return self.state == EditorState.DIRTY

    @property
    def is_busy(self) -> bool:
        """True while a save or an upload is in flight."""
        return self._saving or self._uploading

    def open(self, recipe: Optional[Recipe] = None) -> Recipe:
        """
        Start editing a clone of recipe, or a new default record if None.

        Returns:
            The working copy
        """
        self.working_copy = recipe.clone() if recipe is not None else new_recipe()
        self.state = EditorState.CLEAN
        self.upload_progress = 0
        self.upload_error = None
        self._saved_at = None
        self.revision += 1
        logger.debug("Editor opened for recipe id=%s (new=%s)", self.working_copy.id, recipe is None)
        return self.working_copy

    def close(self) -> None:
        """Discard the working copy without saving."""
        self.state = EditorState.CLOSED
        self.working_copy = None
        self.upload_progress = 0
        self.upload_error = None
        self._saved_at = None

    def seconds_until_close(self) -> Optional[float]:
        """Remaining auto-close delay after a save, or None if not in the saved state."""
        if self.state != EditorState.SAVED or self._saved_at is None:
            return None
        return max(0.0, SAVED_CLOSE_DELAY - (self._clock() - self._saved_at))

    def close_if_due(self, now: Optional[float] = None) -> bool:
        """
        Perform the automatic close once SAVED_CLOSE_DELAY has elapsed after a save.

        Returns:
            True if the editor was closed
        """
        if self.state != EditorState.SAVED or self._saved_at is None:
            return False
        now = self._clock() if now is None else now
        if now - self._saved_at < SAVED_CLOSE_DELAY:
            return False
        self.close()
        return True

    # ------------------------------------------------------------------
    # Field mutations
    # ------------------------------------------------------------------

    def _require_open(self) -> Recipe:
        if self.state == EditorState.CLOSED or self.working_copy is None:
            raise EditorClosedError("The editor is closed")
        return self.working_copy

    def _mark_dirty(self) -> None:
        if self.state in (EditorState.CLEAN, EditorState.SAVED, EditorState.SAVE_FAILED):
            self.state = EditorState.DIRTY
            # Editing after a save cancels the pending auto-close
            self._saved_at = None

    def set_field(self, field: str, value: Any) -> None:
        """
        Replace one scalar field of the working copy.

        Args:
            field: Attribute name (prep_time) or wire name (prepTime)
            value: New value

        Raises:
            EditorClosedError: If the editor is closed
            ValueError: If field is unknown or not editable (id, ingredients, steps)
        """
        recipe = self._require_open()
        name = _FIELD_ALIASES.get(field, field)
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be edited")
        setattr(recipe, name, value)
        self._mark_dirty()

    def _ingredients(self) -> List[Ingredient]:
        recipe = self._require_open()
        if recipe.ingredients is None:
            recipe.ingredients = []
        return recipe.ingredients

    def _steps(self) -> List[str]:
        recipe = self._require_open()
        if recipe.steps is None:
            recipe.steps = []
        return recipe.steps

    def add_ingredient(self) -> None:
        """Append an empty ingredient row."""
        self._ingredients().append(Ingredient(item="", amount=""))
        self.revision += 1
        self._mark_dirty()

    def update_ingredient(self, index: int, field: str, value: str) -> None:
        """
        Replace the item or amount of the ingredient at index.

        Raises:
            ValueError: If field is not "item" or "amount"
        """
        if field not in INGREDIENT_FIELDS:
            raise ValueError(f"Unknown ingredient field '{field}'")
        ingredients = self._ingredients()
        setattr(ingredients[index], field, value)
        self._mark_dirty()

    def remove_ingredient(self, index: int) -> None:
        """Remove the ingredient at index; later rows shift down by one."""
        del self._ingredients()[index]
        self.revision += 1
        self._mark_dirty()

    def add_step(self) -> None:
        """Append an empty step."""
        self._steps().append("")
        self.revision += 1
        self._mark_dirty()

    def update_step(self, index: int, value: str) -> None:
        """Replace the text of the step at index."""
        self._steps()[index] = value
        self._mark_dirty()

    def remove_step(self, index: int) -> None:
        """Remove the step at index; later steps shift down by one."""
        del self._steps()[index]
        self.revision += 1
        self._mark_dirty()

    # ------------------------------------------------------------------
    # Remote side effects
    # ------------------------------------------------------------------

    def _set_progress(self, value: int, on_progress: Optional[Callable[[int], Any]]) -> None:
        self.upload_progress = value
        if on_progress is not None:
            on_progress(value)

    def reset_upload_progress(self) -> None:
        """Hide the progress indicator after a finished upload."""
        self.upload_progress = 0

    def upload_image(
        self,
        filename: str,
        data: bytes,
        content_type: Optional[str] = None,
        on_progress: Optional[Callable[[int], Any]] = None,
    ) -> bool:
        """
        Upload an image and point the working copy's image at its public URL.

        Sequence: randomize the file name (keeping the extension), upload the
        bytes under the store's image prefix, resolve the public URL, then set
        working_copy.image. No other field is touched.

        Args:
            filename: Original file name, used only for its extension
            data: Raw file bytes
            content_type: Optional MIME type
            on_progress: Optional callback receiving each progress checkpoint

        Returns:
            True on success. On failure image is left unchanged, upload_error
            is set, progress goes back to 0 and False is returned.

        Raises:
            EditorClosedError: If the editor is closed
            EditorBusyError: If another upload is in flight
        """
        recipe = self._require_open()
        if self._uploading:
            raise EditorBusyError("An image upload is already in progress")

        self._uploading = True
        self.upload_error = None
        try:
            self._set_progress(UPLOAD_STARTED, on_progress)
            object_name = random_object_name(filename)

            self._set_progress(UPLOAD_SENDING, on_progress)
            path = self._store.upload_image(object_name, data, content_type)

            self._set_progress(UPLOAD_RESOLVING, on_progress)
            public_url = self._store.get_public_url(path)
        except RecordStoreError as e:
            logger.error("Image upload for recipe id=%s failed: %s", recipe.id, e)
            self.upload_error = f"Upload error: {e}"
            self._set_progress(0, on_progress)
            return False
        finally:
            self._uploading = False

        recipe.image = public_url
        if recipe is self.working_copy:
            self._mark_dirty()
        self._set_progress(UPLOAD_DONE, on_progress)
        logger.info("Image for recipe id=%s set to %s", recipe.id, public_url)
        return True

    def save(self) -> bool:
        """
        Upsert the whole working copy keyed by its id.

        On success the state becomes saved, the on_saved callback runs (the
        catalog re-fetch) and the editor auto-closes after SAVED_CLOSE_DELAY
        via close_if_due(). On failure the state becomes save_failed and the
        working copy is kept unchanged.

        Returns:
            True if the upsert succeeded

        Raises:
            EditorClosedError: If the editor is closed
            EditorBusyError: If a save is already in flight
        """
        recipe = self._require_open()
        if self._saving:
            raise EditorBusyError("A save is already in progress")

        self._saving = True
        self.state = EditorState.SAVING
        try:
            self._store.upsert_recipe(recipe)
        except RecordStoreError as e:
            logger.error("Save of recipe id=%s failed: %s", recipe.id, e)
            self.state = EditorState.SAVE_FAILED
            return False
        finally:
            self._saving = False

        self.state = EditorState.SAVED
        self._saved_at = self._clock()
        if self._on_saved is not None:
            self._on_saved()
        return True
