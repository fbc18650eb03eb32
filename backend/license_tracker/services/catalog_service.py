"""Catalog Service - Status and vehicle class reference data"""
from typing import List

from ..domain.enums import TaskStatus, VehicleClass
from ..repositories.catalog_repo import CatalogRepository


class CatalogService:
    """Read and seed the status and vehicle class catalogs"""

    def __init__(self, statuses: CatalogRepository, vehicle_classes: CatalogRepository):
        self.statuses = statuses
        self.vehicle_classes = vehicle_classes

    def list_statuses(self) -> List[str]:
        return self.statuses.list_names()

    def list_vehicle_classes(self) -> List[str]:
        return self.vehicle_classes.list_names()

    def is_known_status(self, status: str) -> bool:
        return self.statuses.contains(status)

    def seed_defaults(self) -> int:
        """Make sure the built-in statuses and vehicle classes exist"""
        added = self.statuses.seed(s.value for s in TaskStatus)
        added += self.vehicle_classes.seed(v.value for v in VehicleClass)
        return added
