"""Idempotent deletion helpers and bulk clearing of collections and buckets."""

import asyncio

import structlog

from menu_seeder.clients.appwrite_client import AppwriteClient
from menu_seeder.models.exceptions import ResourceNotFound

logger = structlog.get_logger(__name__)


async def delete_document_safely(
    client: AppwriteClient,
    database_id: str,
    collection_id: str,
    document_id: str,
) -> None:
    """Delete a document, treating an already-missing document as deleted.

    Any other failure propagates to the caller.
    """
    try:
        await client.delete_document(database_id, collection_id, document_id)
    except ResourceNotFound:
        logger.debug(
            "document_already_deleted",
            collection_id=collection_id,
            document_id=document_id,
        )


async def delete_file_safely(client: AppwriteClient, bucket_id: str, file_id: str) -> None:
    """Delete a storage file, treating an already-missing file as deleted."""
    try:
        await client.delete_file(bucket_id, file_id)
    except ResourceNotFound:
        logger.debug("file_already_deleted", bucket_id=bucket_id, file_id=file_id)


async def clear_collection(
    client: AppwriteClient,
    database_id: str,
    collection_id: str,
    page_size: int = 100,
) -> int:
    """Delete every document in a collection.

    Lists the whole collection page by page first, then issues all deletions
    concurrently. Returns once every deletion has finished; the first
    unexpected failure is raised.

    Args:
        client: Appwrite client
        database_id: Database ID
        collection_id: Collection to empty
        page_size: Documents fetched per listing page

    Returns:
        int: Number of documents that were listed and deleted
    """
    documents = await client.list_all_documents(database_id, collection_id, page_size=page_size)

    await asyncio.gather(*[
        delete_document_safely(client, database_id, collection_id, doc["$id"])
        for doc in documents
    ])

    logger.info("collection_cleared", collection_id=collection_id, count=len(documents))
    return len(documents)


async def clear_storage(client: AppwriteClient, bucket_id: str, page_size: int = 100) -> int:
    """Delete every file in a storage bucket.

    Same contract as clear_collection().

    Returns:
        int: Number of files that were listed and deleted
    """
    files = await client.list_all_files(bucket_id, page_size=page_size)

    await asyncio.gather(*[
        delete_file_safely(client, bucket_id, f["$id"])
        for f in files
    ])

    logger.info("storage_cleared", bucket_id=bucket_id, count=len(files))
    return len(files)
