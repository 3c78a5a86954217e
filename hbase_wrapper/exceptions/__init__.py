# Base exception class
from .base import HBaseWrapperError

from .domain_exceptions import (
    ValidationError,
    NotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
    StoreError,
)

__all__ = [
    # Base exception
    "HBaseWrapperError",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "StoreError",
    "ValidationError",
]
