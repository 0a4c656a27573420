"""Store-facing building blocks used by the seeder."""

from menu_seeder.infrastructure.cleanup import (
    clear_collection,
    clear_storage,
    delete_document_safely,
    delete_file_safely,
)
from menu_seeder.infrastructure.images import DEFAULT_PLACEHOLDER_URL, ImageMaterializer

__all__ = [
    "DEFAULT_PLACEHOLDER_URL",
    "ImageMaterializer",
    "clear_collection",
    "clear_storage",
    "delete_document_safely",
    "delete_file_safely",
]
