"""
Seed Data Script - Creates indexes and the status / vehicle class catalogs
Run: python -m scripts.seed_data
"""
from license_tracker.config.settings import settings
from license_tracker.repositories.catalog_repo import CatalogRepository
from license_tracker.repositories.mongo_client import MongoStore
from license_tracker.services.catalog_service import CatalogService


def seed_catalogs() -> None:
    """Create indexes and insert any missing built-in catalog entries"""
    store = MongoStore.from_settings(settings).connect()
    try:
        store.create_indexes()
        service = CatalogService(
            statuses=CatalogRepository.statuses(store.database),
            vehicle_classes=CatalogRepository.vehicle_classes(store.database)
        )
        added = service.seed_defaults()
        print(f"Seeded {added} catalog entries into {settings.mongo_db}")
        print(f"  Statuses: {', '.join(service.list_statuses())}")
        print(f"  Vehicle classes: {', '.join(service.list_vehicle_classes())}")
    finally:
        store.close()


if __name__ == "__main__":
    seed_catalogs()
