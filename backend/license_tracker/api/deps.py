"""API Dependencies - Common dependencies for routes"""
from typing import Optional
from fastapi import Depends, Header, Request

from ..config.settings import Settings, get_settings
from ..domain.models import ActorContext
from ..domain.errors import AuthenticationError
from ..engine.status_workflow import StatusWorkflow
from ..repositories.mongo_client import MongoStore
from ..repositories.task_repo import TaskRepository
from ..repositories.catalog_repo import CatalogRepository
from ..repositories.user_repo import UserRepository
from ..services.task_service import TaskService
from ..services.catalog_service import CatalogService
from ..services.auth_service import AuthService
from ..utils.jwt import JWTService


# =============================================================================
# Settings, Store & Repositories
# =============================================================================

def get_app_settings(request: Request) -> Settings:
    """The settings the application was created with, else the environment's"""
    config = getattr(request.app.state, "settings", None)
    return config if config is not None else get_settings()


def get_store(request: Request) -> MongoStore:
    """The store opened by the application lifespan"""
    return request.app.state.store


def get_task_repository(store: MongoStore = Depends(get_store)) -> TaskRepository:
    return TaskRepository(store.database)


def get_user_repository(store: MongoStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store.database)


# =============================================================================
# Services
# =============================================================================

def get_catalog_service(store: MongoStore = Depends(get_store)) -> CatalogService:
    return CatalogService(
        statuses=CatalogRepository.statuses(store.database),
        vehicle_classes=CatalogRepository.vehicle_classes(store.database)
    )


def get_task_service(
    repo: TaskRepository = Depends(get_task_repository),
    catalog: CatalogService = Depends(get_catalog_service),
    config: Settings = Depends(get_app_settings)
) -> TaskService:
    workflow = StatusWorkflow(
        is_known_status=catalog.is_known_status if config.enforce_status_catalog else None,
        timezone_name=config.business_timezone
    )
    return TaskService(repo, workflow)


def get_jwt_service(config: Settings = Depends(get_app_settings)) -> JWTService:
    return JWTService(config)


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    tokens: JWTService = Depends(get_jwt_service)
) -> AuthService:
    return AuthService(users, tokens)


# =============================================================================
# Request Context
# =============================================================================

async def get_optional_user_dep(
    authorization: Optional[str] = Header(None),
    tokens: JWTService = Depends(get_jwt_service)
) -> Optional[ActorContext]:
    """
    Dependency to optionally get current user

    Returns None if no token provided.
    Raises error if token is provided but invalid.
    """
    if not authorization:
        return None
    return tokens.get_actor_context(authorization)


async def require_user_if_enabled(
    actor: Optional[ActorContext] = Depends(get_optional_user_dep),
    config: Settings = Depends(get_app_settings)
) -> Optional[ActorContext]:
    """
    Router-level guard for /api routes

    Only enforced when AUTH_REQUIRED is set.
    """
    if config.auth_required and actor is None:
        raise AuthenticationError("Authorization header is missing")
    return actor
