"""Custom exceptions for Menu Seeder."""

from typing import Any


class AppwriteError(Exception):
    """
    Base exception for failed Appwrite API calls.

    Mirrors the error body Appwrite returns on every failed request:
    ``{"message": ..., "code": ..., "type": ...}``.
    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        type: str | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.type = type
        self.response = response


class ResourceNotFound(AppwriteError):
    """
    Raised when Appwrite returns 404 for a document, file or collection.

    The deletion helpers treat this as success: the record is already gone.
    """

    pass


class StoreUnavailable(AppwriteError):
    """
    Raised when Appwrite cannot be reached or fails on its side.

    Examples:
    - Appwrite returns 5xx errors
    - Network timeout
    - Connection errors
    """

    pass


class ImageFetchError(Exception):
    """Raised when a source image URL answers with a non-success status."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"Failed to fetch image {url} (status: {status_code})")
        self.url = url
        self.status_code = status_code


class SeedDataError(Exception):
    """Raised when the seed dataset cannot be read or parsed."""

    pass
