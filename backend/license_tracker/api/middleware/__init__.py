"""
API Middleware Module

Request tracing and error rendering.

Modules:
    - correlation: X-Correlation-Id propagation into log lines
    - error_handlers: Domain, request-validation and fallback exception handlers
"""

from .correlation import CorrelationIdMiddleware
from .error_handlers import register_error_handlers

__all__ = ["CorrelationIdMiddleware", "register_error_handlers"]
