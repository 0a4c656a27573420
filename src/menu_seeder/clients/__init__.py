"""Clients for remote services."""

from menu_seeder.clients.appwrite_client import AppwriteClient, query, unique_id

__all__ = ["AppwriteClient", "query", "unique_id"]
