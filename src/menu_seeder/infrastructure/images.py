"""Copies remote menu images into the Appwrite storage bucket."""

import time
from urllib.parse import unquote, urlsplit

import httpx
import structlog

from menu_seeder.clients.appwrite_client import AppwriteClient, unique_id
from menu_seeder.models.exceptions import ImageFetchError

logger = structlog.get_logger(__name__)

DEFAULT_PLACEHOLDER_URL = "https://via.placeholder.com/150"


def filename_from_url(url: str) -> str:
    """Last path segment of the URL, or a timestamped name when there is none."""
    segment = unquote(urlsplit(url).path.rsplit("/", 1)[-1])
    if segment:
        return segment
    return f"file-{int(time.time() * 1000)}.jpg"


class ImageMaterializer:
    """
    Fetches a source image and re-hosts it in the storage bucket.

    A failure anywhere in the pipeline (non-success status, network error,
    rejected upload) never reaches the caller: the placeholder URL is
    returned instead and a warning is logged. There is no retry.
    """

    def __init__(
        self,
        client: AppwriteClient,
        bucket_id: str,
        placeholder_url: str = DEFAULT_PLACEHOLDER_URL,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            client: Appwrite client used for the upload
            bucket_id: Bucket the images are uploaded to
            placeholder_url: URL returned when an image cannot be materialized
            timeout_seconds: Timeout for fetching source images
            transport: Optional httpx transport for the source image fetches
        """
        self.client = client
        self.bucket_id = bucket_id
        self.placeholder_url = placeholder_url
        # Source images are fetched without the Appwrite credentials
        self.http_client = httpx.AsyncClient(
            timeout=timeout_seconds,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "ImageMaterializer":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def materialize(self, source_url: str) -> str:
        """
        Upload the image at ``source_url`` and return its public view URL.

        Args:
            source_url: Where to fetch the image from

        Returns:
            The bucket view URL, or the placeholder URL on any failure
        """
        try:
            response = await self.http_client.get(source_url)
            if not response.is_success:
                raise ImageFetchError(source_url, response.status_code)

            content = response.content
            content_type = response.headers.get("content-type", "application/octet-stream")

            uploaded = await self.client.create_file(
                self.bucket_id,
                unique_id(),
                filename=filename_from_url(source_url),
                content=content,
                content_type=content_type,
            )
            file_id = uploaded["$id"]
            view_url = self.client.get_file_view_url(self.bucket_id, file_id)
        except Exception as e:
            logger.warning(
                "image_upload_failed_using_placeholder",
                source_url=source_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            return self.placeholder_url

        logger.debug(
            "image_materialized",
            source_url=source_url,
            file_id=file_id,
            size=len(content),
        )
        return view_url
