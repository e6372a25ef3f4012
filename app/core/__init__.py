"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

This package provides:
- Custom exception handling with consistent error responses
- FastAPI dependencies for service access and pagination
- Exception factory functions for common error scenarios

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from app.core import AppException, get_product_service

    # Or use exception factory functions via module
    from app.core import exceptions
    raise exceptions.product_not_found("_jappko")

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import (
    get_product_service,
    get_pagination,
)

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_product_service",
    "get_pagination",
]
