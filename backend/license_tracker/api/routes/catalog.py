"""Catalog API Routes - Status and vehicle class reference data"""
from typing import List
from fastapi import APIRouter, Depends

from ..deps import get_catalog_service
from ...services.catalog_service import CatalogService

router = APIRouter()


@router.get("/statuses", response_model=List[str])
async def list_statuses(service: CatalogService = Depends(get_catalog_service)):
    """Status names, alphabetical"""
    return service.list_statuses()


@router.get("/vehicle-classes", response_model=List[str])
async def list_vehicle_classes(service: CatalogService = Depends(get_catalog_service)):
    """Vehicle class names, alphabetical"""
    return service.list_vehicle_classes()
