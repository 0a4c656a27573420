"""
Seed run orchestration.

Resets the Appwrite project and writes the demo dataset:
- Clear the four collections and the image bucket
- Create categories
- Create customizations
- Create menu items (image re-hosted, category linked) and their
  menu/customization join records

Failures are contained as close to the failing record as possible. Only a
failure while clearing ends the run early, and even then seed() reports it
instead of raising.
"""

import asyncio
import uuid

import structlog

from menu_seeder.clients.appwrite_client import AppwriteClient, unique_id
from menu_seeder.config import CollectionSettings, Settings
from menu_seeder.infrastructure.cleanup import clear_collection, clear_storage
from menu_seeder.infrastructure.images import ImageMaterializer
from menu_seeder.models.id_map import IdMap
from menu_seeder.models.report import EntityKind, SeedReport, SeedStatus
from menu_seeder.models.seed_data import SeedData, load_seed_data

logger = structlog.get_logger(__name__)


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__


class MenuSeeder:
    """
    Clears and repopulates the menu collections of one Appwrite database.

    Each instance owns a lock so that a second seed() call made while a run
    is in flight returns immediately instead of starting another
    clear/create cycle.
    """

    def __init__(
        self,
        client: AppwriteClient,
        collections: CollectionSettings,
        materializer: ImageMaterializer,
        data: SeedData,
        page_size: int = 100,
    ) -> None:
        self.client = client
        self.collections = collections
        self.materializer = materializer
        self.data = data
        self.page_size = page_size
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    async def seed(self) -> SeedReport:
        """
        Run one complete reset-and-repopulate cycle.

        Returns:
            SeedReport with status COMPLETED, FAILED (clearing or another
            unexpected error ended the run) or SKIPPED_ALREADY_RUNNING.
        """
        report = SeedReport(run_id=str(uuid.uuid4()))

        if self._lock.locked():
            logger.info("seed_already_running_ignoring_request", run_id=report.run_id)
            report.finish(SeedStatus.SKIPPED_ALREADY_RUNNING)
            return report

        async with self._lock:
            with structlog.contextvars.bound_contextvars(seed_run_id=report.run_id):
                try:
                    logger.info(
                        "seed_started",
                        database_id=self.collections.database_id,
                        categories=len(self.data.categories),
                        customizations=len(self.data.customizations),
                        menu_items=len(self.data.menu),
                    )

                    await self._clear_all(report)
                    category_ids = await self._create_categories(report)
                    customization_ids = await self._create_customizations(report)
                    await self._create_menu_items(report, category_ids, customization_ids)

                    report.finish(SeedStatus.COMPLETED)
                    logger.info(
                        "seed_completed",
                        counts=report.counts(),
                        failures=len(report.failures()),
                        duration_seconds=report.duration_seconds,
                    )
                except Exception as e:
                    report.finish(SeedStatus.FAILED, error=_describe(e))
                    logger.error("seed_failed", error=_describe(e), exc_info=True)

        return report

    async def _clear_all(self, report: SeedReport) -> None:
        logger.info("clearing_collections_and_storage")
        database_id = self.collections.database_id

        for collection_id in (
            self.collections.categories_collection_id,
            self.collections.customizations_collection_id,
            self.collections.menu_collection_id,
            self.collections.menu_customizations_collection_id,
        ):
            report.cleared[collection_id] = await clear_collection(
                self.client, database_id, collection_id, page_size=self.page_size
            )

        report.cleared[self.collections.bucket_id] = await clear_storage(
            self.client, self.collections.bucket_id, page_size=self.page_size
        )

    async def _create_categories(self, report: SeedReport) -> IdMap:
        category_ids = IdMap(EntityKind.CATEGORY.value)

        for category in self.data.categories:
            try:
                doc = await self.client.create_document(
                    self.collections.database_id,
                    self.collections.categories_collection_id,
                    unique_id(),
                    category.to_document(),
                )
            except Exception as e:
                logger.warning("category_create_failed", name=category.name, error=_describe(e))
                report.record_failed(EntityKind.CATEGORY, category.name, _describe(e))
                continue

            category_ids.register(category.name, doc["$id"])
            report.record_created(EntityKind.CATEGORY, category.name, doc["$id"])

        return category_ids

    async def _create_customizations(self, report: SeedReport) -> IdMap:
        customization_ids = IdMap(EntityKind.CUSTOMIZATION.value)

        for customization in self.data.customizations:
            try:
                doc = await self.client.create_document(
                    self.collections.database_id,
                    self.collections.customizations_collection_id,
                    unique_id(),
                    customization.to_document(),
                )
            except Exception as e:
                logger.warning(
                    "customization_create_failed", name=customization.name, error=_describe(e)
                )
                report.record_failed(EntityKind.CUSTOMIZATION, customization.name, _describe(e))
                continue

            customization_ids.register(customization.name, doc["$id"])
            report.record_created(EntityKind.CUSTOMIZATION, customization.name, doc["$id"])

        return customization_ids

    async def _create_menu_items(
        self,
        report: SeedReport,
        category_ids: IdMap,
        customization_ids: IdMap,
    ) -> None:
        # One item at a time: image upload, then document, then its links
        for item in self.data.menu:
            category_id = category_ids.resolve(item.category_name)
            if category_id is None:
                logger.warning(
                    "menu_item_category_missing",
                    name=item.name,
                    category_name=item.category_name,
                )

            try:
                image_url = await self.materializer.materialize(item.image_url)
                menu_doc = await self.client.create_document(
                    self.collections.database_id,
                    self.collections.menu_collection_id,
                    unique_id(),
                    item.to_document(image_url=image_url, category_id=category_id),
                )
            except Exception as e:
                logger.warning("menu_item_create_failed", name=item.name, error=_describe(e))
                report.record_failed(EntityKind.MENU_ITEM, item.name, _describe(e))
                continue

            report.record_created(EntityKind.MENU_ITEM, item.name, menu_doc["$id"])

            for customization_name in item.customizations:
                link_name = f"{item.name}/{customization_name}"
                try:
                    link = await self.client.create_document(
                        self.collections.database_id,
                        self.collections.menu_customizations_collection_id,
                        unique_id(),
                        {
                            "menu": menu_doc["$id"],
                            "customizations": customization_ids.resolve(customization_name),
                        },
                    )
                except Exception as e:
                    logger.warning(
                        "menu_customization_create_failed",
                        menu_item=item.name,
                        customization=customization_name,
                        error=_describe(e),
                    )
                    report.record_failed(EntityKind.MENU_CUSTOMIZATION, link_name, _describe(e))
                    continue

                report.record_created(EntityKind.MENU_CUSTOMIZATION, link_name, link["$id"])


async def run_seed(settings: Settings, data: SeedData | None = None) -> SeedReport:
    """
    Build a seeder from settings, run it once and close its connections.

    Args:
        settings: Application settings
        data: Dataset to write; loaded from settings.seed.data_path (or the
              bundled dataset) when omitted

    Returns:
        SeedReport of the run

    Raises:
        SeedDataError: If the dataset cannot be loaded
    """
    if data is None:
        data = load_seed_data(settings.seed.data_path)

    async with AppwriteClient(
        endpoint=settings.appwrite.endpoint,
        project_id=settings.appwrite.project_id,
        api_key=settings.appwrite.api_key,
        timeout_seconds=settings.appwrite.timeout_seconds,
    ) as client:
        async with ImageMaterializer(
            client,
            bucket_id=settings.collections.bucket_id,
            placeholder_url=settings.seed.placeholder_image_url,
            timeout_seconds=settings.seed.image_timeout_seconds,
        ) as materializer:
            seeder = MenuSeeder(
                client=client,
                collections=settings.collections,
                materializer=materializer,
                data=data,
                page_size=settings.appwrite.page_size,
            )
            return await seeder.seed()
