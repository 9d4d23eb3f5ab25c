"""Middleware package initialization."""

from orgstructure.middleware.error_handler import error_handler_middleware
from orgstructure.middleware.logging import logging_middleware

__all__ = [
    "error_handler_middleware",
    "logging_middleware",
]
