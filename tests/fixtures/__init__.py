"""Shared test fixtures for Menu Seeder.

- appwrite_fixtures: in-memory Appwrite fake, fake image host and the
  clients wired to them
"""
