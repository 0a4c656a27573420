"""Appwrite client for the Databases and Storage REST APIs."""

import json
import secrets
import time
from typing import Any

import httpx
import structlog

from menu_seeder.models.exceptions import AppwriteError, ResourceNotFound, StoreUnavailable

logger = structlog.get_logger(__name__)

RESPONSE_FORMAT = "1.5.0"


def unique_id(padding: int = 7) -> str:
    """
    Generate a unique document/file ID the way the Appwrite SDKs do.

    Hex seconds since the epoch, five hex digits of milliseconds, then
    ``padding`` random hex digits (20 characters by default).
    """
    now = time.time()
    seconds = int(now)
    millis = int((now - seconds) * 1000)
    random_padding = secrets.token_hex((padding + 1) // 2)[:padding]
    return f"{seconds:x}{millis:05x}{random_padding}"


def query(method: str, *values: Any) -> str:
    """Encode an Appwrite query (``limit``, ``cursorAfter``, ...) as JSON."""
    return json.dumps({"method": method, "values": list(values)})


class AppwriteClient:
    """
    Async client for the subset of the Appwrite API used by the seeder.

    Authenticates as a server (project ID + API key headers) and maps
    failed responses onto the Appwrite exception hierarchy:

    - 404 -> ResourceNotFound
    - 5xx, timeouts and connection errors -> StoreUnavailable
    - any other 4xx -> AppwriteError
    """

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        api_key: str,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the Appwrite client.

        Args:
            endpoint: Appwrite API endpoint (e.g., "https://cloud.appwrite.io/v1")
            project_id: Project ID sent in the X-Appwrite-Project header
            api_key: Server API key sent in the X-Appwrite-Key header
            timeout_seconds: Request timeout in seconds (default: 30.0)
            transport: Optional httpx transport (used by tests to fake Appwrite)
        """
        self.endpoint = endpoint.rstrip("/")
        self.project_id = project_id
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.http_client = httpx.AsyncClient(
            base_url=self.endpoint,
            timeout=timeout_seconds,
            transport=transport,
            headers={
                "X-Appwrite-Project": project_id,
                "X-Appwrite-Key": api_key,
                "X-Appwrite-Response-Format": RESPONSE_FORMAT,
            },
        )

        logger.info(
            "appwrite_client_initialized",
            endpoint=self.endpoint,
            project_id=project_id,
            timeout_seconds=timeout_seconds,
        )

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def __aenter__(self) -> "AppwriteClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    # ------------------------------------------------------------------
    # Databases
    # ------------------------------------------------------------------

    async def list_documents(
        self,
        database_id: str,
        collection_id: str,
        queries: list[str] | None = None,
    ) -> dict[str, Any]:
        """
        List one page of documents in a collection.

        Returns:
            Appwrite document list: {"total": int, "documents": [...]}
        """
        response = await self._request(
            "GET",
            f"/databases/{database_id}/collections/{collection_id}/documents",
            params={"queries[]": queries} if queries else None,
        )
        return response.json()

    async def list_all_documents(
        self,
        database_id: str,
        collection_id: str,
        page_size: int = 100,
    ) -> list[dict[str, Any]]:
        """List every document in a collection, following the cursor page by page."""
        return await self._list_all(
            f"/databases/{database_id}/collections/{collection_id}/documents",
            key="documents",
            page_size=page_size,
        )

    async def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Create a document.

        Args:
            database_id: Database ID
            collection_id: Collection ID
            document_id: New document ID (see unique_id())
            data: Document attributes

        Returns:
            The created document, including its "$id"
        """
        response = await self._request(
            "POST",
            f"/databases/{database_id}/collections/{collection_id}/documents",
            json={"documentId": document_id, "data": data},
        )
        return response.json()

    async def delete_document(self, database_id: str, collection_id: str, document_id: str) -> None:
        """Delete a document. Raises ResourceNotFound if it does not exist."""
        await self._request(
            "DELETE",
            f"/databases/{database_id}/collections/{collection_id}/documents/{document_id}",
        )

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    async def list_files(self, bucket_id: str, queries: list[str] | None = None) -> dict[str, Any]:
        """
        List one page of files in a bucket.

        Returns:
            Appwrite file list: {"total": int, "files": [...]}
        """
        response = await self._request(
            "GET",
            f"/storage/buckets/{bucket_id}/files",
            params={"queries[]": queries} if queries else None,
        )
        return response.json()

    async def list_all_files(self, bucket_id: str, page_size: int = 100) -> list[dict[str, Any]]:
        """List every file in a bucket, following the cursor page by page."""
        return await self._list_all(
            f"/storage/buckets/{bucket_id}/files",
            key="files",
            page_size=page_size,
        )

    async def create_file(
        self,
        bucket_id: str,
        file_id: str,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> dict[str, Any]:
        """
        Upload a file in a single multipart request.

        Appwrite requires chunked uploads above 5MB; menu images stay well
        below that.

        Returns:
            The created file, including its "$id"
        """
        response = await self._request(
            "POST",
            f"/storage/buckets/{bucket_id}/files",
            data={"fileId": file_id},
            files={"file": (filename, content, content_type)},
        )
        return response.json()

    async def delete_file(self, bucket_id: str, file_id: str) -> None:
        """Delete a file. Raises ResourceNotFound if it does not exist."""
        await self._request("DELETE", f"/storage/buckets/{bucket_id}/files/{file_id}")

    def get_file_view_url(self, bucket_id: str, file_id: str) -> str:
        """Public URL that serves the file's content."""
        url = httpx.URL(
            f"{self.endpoint}/storage/buckets/{bucket_id}/files/{file_id}/view",
            params={"project": self.project_id},
        )
        return str(url)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _list_all(self, path: str, key: str, page_size: int) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        cursor: str | None = None

        while True:
            queries = [query("limit", page_size)]
            if cursor is not None:
                queries.append(query("cursorAfter", cursor))

            response = await self._request("GET", path, params={"queries[]": queries})
            page = response.json().get(key, [])
            items.extend(page)

            if len(page) < page_size:
                break
            cursor = page[-1]["$id"]

        logger.debug("appwrite_list_complete", path=path, count=len(items))
        return items

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self.http_client.request(method, path, **kwargs)
        except httpx.TimeoutException as e:
            logger.error("appwrite_timeout", method=method, path=path, error=str(e))
            raise StoreUnavailable("Appwrite request timed out", type="timeout") from e
        except httpx.RequestError as e:
            # Network errors, connection errors, etc.
            logger.error("appwrite_request_error", method=method, path=path, error=str(e))
            raise StoreUnavailable(f"Appwrite request error: {e}", type="request_error") from e

        if response.status_code < 400:
            return response

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = body.get("message") or response.text or f"HTTP {response.status_code}"
        code = body.get("code", response.status_code)
        error_type = body.get("type")

        if response.status_code == 404:
            logger.debug("appwrite_not_found", method=method, path=path, type=error_type)
            raise ResourceNotFound(message, code=code, type=error_type, response=body)

        if response.status_code >= 500:
            logger.error(
                "appwrite_server_error",
                method=method,
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise StoreUnavailable(message, code=code, type=error_type, response=body)

        logger.warning(
            "appwrite_request_failed",
            method=method,
            path=path,
            status_code=response.status_code,
            type=error_type,
            message=message,
        )
        raise AppwriteError(message, code=code, type=error_type, response=body)
