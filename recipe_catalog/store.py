"""
Record Store adapter for the recipe catalog.

The Record Store is an external Supabase project: a `recipes` table plus an
object-storage bucket for recipe images. This module is the single place
that talks to the Supabase client; everything else receives a RecordStore
instance explicitly (it is never a module-level global).

Operations:
- list_recipes(): select all rows ordered by name
- upsert_recipe(): single-row upsert keyed on id, full record payload
- delete_recipe(): single-row delete keyed on id
- upload_image(): write raw bytes under <prefix>/<object name>
- get_public_url(): resolve the public URL of a stored object

Every client exception is re-raised as RecordStoreError so callers only have
one failure type to handle.
"""

import logging
import mimetypes
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from supabase import Client, create_client

from .config import SupabaseConfig, validate_required_config
from .models import Recipe

logger = logging.getLogger(__name__)


class RecordStoreError(Exception):
    """Raised when a call to the Record Store fails."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


class RecordStore:
    """
    Thin adapter over a Supabase client for recipe records and images.

    Attributes:
        table: Name of the recipes relation
        bucket: Name of the image bucket
        image_prefix: Path prefix for uploaded images inside the bucket
    """

    def __init__(
        self,
        client: Client,
        table: str = "recipes",
        bucket: str = "recipe-images",
        image_prefix: str = "recipes",
    ):
        self._client = client
        self.table = table
        self.bucket = bucket
        self.image_prefix = image_prefix.strip("/")

    @classmethod
    def from_config(cls) -> "RecordStore":
        """
        Build a RecordStore from environment configuration.

        Raises:
            RuntimeError: If SUPABASE_URL or SUPABASE_ANON_KEY is missing
        """
        validate_required_config()
        client = create_client(SupabaseConfig.get_url(), SupabaseConfig.get_key())
        logger.info(
            "Record Store client created (table=%s bucket=%s)",
            SupabaseConfig.get_table(), SupabaseConfig.get_bucket(),
        )
        return cls(
            client,
            table=SupabaseConfig.get_table(),
            bucket=SupabaseConfig.get_bucket(),
            image_prefix=SupabaseConfig.get_image_prefix(),
        )

    # ------------------------------------------------------------------
    # Table operations
    # ------------------------------------------------------------------

    def list_recipes(self) -> List[Recipe]:
        """
        Fetch every recipe, ordered by name as the store sorts it.

        Rows that do not validate as a Recipe are skipped with a warning.

        Raises:
            RecordStoreError: If the query fails
        """
        try:
            response = self._client.table(self.table).select("*").order("name").execute()
        except Exception as e:
            raise RecordStoreError("list_recipes", str(e)) from e

        rows = response.data or []
        recipes = []
        for row in rows:
            try:
                recipes.append(Recipe.model_validate(row))
            except ValidationError as e:
                logger.warning("Skipping invalid recipe row id=%r: %s", row.get("id"), e)

        logger.debug("Fetched %d recipe rows (%d valid)", len(rows), len(recipes))
        return recipes

    def upsert_recipe(self, recipe: Recipe) -> List[Recipe]:
        """
        Insert the recipe, or fully overwrite the row with the same id.

        Returns:
            The written row(s) as returned by the store

        Raises:
            RecordStoreError: If the upsert fails or returns an invalid row
        """
        record = recipe.to_record()
        try:
            response = (
                self._client.table(self.table)
                .upsert(record, on_conflict="id")
                .execute()
            )
        except Exception as e:
            raise RecordStoreError("upsert_recipe", str(e)) from e

        try:
            written = [Recipe.model_validate(row) for row in (response.data or [])]
        except ValidationError as e:
            raise RecordStoreError("upsert_recipe", f"invalid row returned: {e}") from e
        logger.info("Upserted recipe id=%s name=%r", recipe.id, recipe.name)
        return written

    def delete_recipe(self, recipe_id: str) -> None:
        """
        Delete the row keyed by recipe_id. Deleting a missing id is a no-op.

        Raises:
            RecordStoreError: If the delete request fails
        """
        try:
            self._client.table(self.table).delete().eq("id", recipe_id).execute()
        except Exception as e:
            raise RecordStoreError("delete_recipe", str(e)) from e
        logger.info("Deleted recipe id=%s", recipe_id)

    def ping(self) -> bool:
        """
        Check whether the recipes table is reachable.

        Returns:
            True if a minimal query succeeds, False otherwise. Never raises.
        """
        try:
            self._client.table(self.table).select("id").limit(1).execute()
            return True
        except Exception as e:
            logger.warning("Record Store ping failed: %s", e)
            return False

    # ------------------------------------------------------------------
    # Object storage
    # ------------------------------------------------------------------

    def image_path(self, object_name: str) -> str:
        """Full object path inside the bucket, e.g. 'recipes/abc.jpg'."""
        if not self.image_prefix:
            return object_name
        return f"{self.image_prefix}/{object_name}"

    def upload_image(
        self,
        object_name: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Upload raw image bytes to the image bucket.

        Args:
            object_name: File name inside the prefix (already randomized by the caller)
            data: Raw file bytes
            content_type: MIME type; guessed from object_name if omitted

        Returns:
            Stored object path (prefix included)

        Raises:
            RecordStoreError: If the upload fails
        """
        path = self.image_path(object_name)
        content_type = content_type or mimetypes.guess_type(object_name)[0] or "application/octet-stream"
        file_options: Dict[str, Any] = {"content-type": content_type}

        try:
            self._client.storage.from_(self.bucket).upload(path, data, file_options=file_options)
        except Exception as e:
            raise RecordStoreError("upload_image", str(e)) from e

        logger.info("Uploaded image %s (%d bytes, %s)", path, len(data), content_type)
        return path

    def get_public_url(self, path: str) -> str:
        """
        Resolve the public URL of a stored object.

        Raises:
            RecordStoreError: If the URL cannot be resolved
        """
        try:
            url = self._client.storage.from_(self.bucket).get_public_url(path)
        except Exception as e:
            raise RecordStoreError("get_public_url", str(e)) from e

        if not url:
            raise RecordStoreError("get_public_url", f"no public URL returned for {path}")
        return url
