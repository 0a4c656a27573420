"""Domain models for Menu Seeder."""

from menu_seeder.models.exceptions import (
    AppwriteError,
    ImageFetchError,
    ResourceNotFound,
    SeedDataError,
    StoreUnavailable,
)
from menu_seeder.models.id_map import IdMap
from menu_seeder.models.report import (
    EntityKind,
    EntityOutcome,
    OutcomeStatus,
    SeedReport,
    SeedStatus,
)
from menu_seeder.models.seed_data import (
    Category,
    Customization,
    MenuItem,
    SeedData,
    load_seed_data,
)

__all__ = [
    "AppwriteError",
    "Category",
    "Customization",
    "EntityKind",
    "EntityOutcome",
    "IdMap",
    "ImageFetchError",
    "MenuItem",
    "OutcomeStatus",
    "ResourceNotFound",
    "SeedData",
    "SeedDataError",
    "SeedReport",
    "SeedStatus",
    "StoreUnavailable",
    "load_seed_data",
]
