"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- The in-memory Appwrite fake and clients bound to it
- Seed datasets
- A MenuSeeder factory
"""

import pytest

from menu_seeder.handlers.seeder import MenuSeeder
from menu_seeder.models.seed_data import Category, Customization, MenuItem, SeedData

pytest_plugins = [
    "tests.fixtures.appwrite_fixtures",
]

MARGHERITA_IMAGE_URL = "https://images.test/menu/margherita.png"


@pytest.fixture
def pizza_data():
    """Two categories, one customization and one linked menu item."""
    return SeedData(
        categories=[
            Category(name="Pizza", description="Oven-baked pizzas"),
            Category(name="Drinks", description="Cold drinks"),
        ],
        customizations=[
            Customization(name="Extra Cheese", price=1.5, type="topping"),
        ],
        menu=[
            MenuItem(
                name="Margherita",
                description="Tomato, mozzarella, basil",
                image_url=MARGHERITA_IMAGE_URL,
                price=9.99,
                rating=4.5,
                calories=800,
                protein=30,
                category_name="Pizza",
                customizations=["Extra Cheese"],
            ),
        ],
    )


@pytest.fixture
def make_seeder(appwrite_client, collections, materializer):
    """
    Factory for MenuSeeder instances bound to the fake project.

    Usage:
        def test_something(make_seeder, pizza_data):
            seeder = make_seeder(pizza_data)
            report = await seeder.seed()
    """
    def _make_seeder(data: SeedData, page_size: int = 100) -> MenuSeeder:
        return MenuSeeder(
            client=appwrite_client,
            collections=collections,
            materializer=materializer,
            data=data,
            page_size=page_size,
        )

    return _make_seeder
