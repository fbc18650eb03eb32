"""API module - Routes and dependencies"""
from .deps import get_optional_user_dep, require_user_if_enabled

__all__ = ["get_optional_user_dep", "require_user_if_enabled"]
