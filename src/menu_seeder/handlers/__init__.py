"""Seed run handlers."""

from menu_seeder.handlers.seeder import MenuSeeder, run_seed

__all__ = ["MenuSeeder", "run_seed"]
