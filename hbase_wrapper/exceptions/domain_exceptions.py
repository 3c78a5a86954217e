"""
Domain-Specific Exceptions for the HBase Wrapper

Every failure raised by the store client (thriftpy2 exceptions coming out of
happybase, socket errors, HBase shell failures) is translated into one of the
classes below by ``core.table_gateway.map_hbase_error``.

Organized by category:
1. Input Validation Errors
2. Table Not Found Errors
3. Conflict Errors
4. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import HBaseWrapperError


# =============================================================================
# Input Validation Errors
# =============================================================================

class ValidationError(HBaseWrapperError):
    """Raised when a request is rejected as malformed.

    Used for:
    - Pydantic DTO validation failures (table schema, column pairs)
    - ``IllegalArgument`` responses from the Thrift gateway
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        self.errors = errors or {}
        context = {'validation_errors': self.errors} if self.errors else {}
        super().__init__(message, original_error, context)


# =============================================================================
# Table Not Found Errors
# =============================================================================

class NotFoundError(HBaseWrapperError):
    """Raised when the target table does not exist."""

    def __init__(self, message: str, table_name: Optional[str] = None, operation: Optional[str] = None, original_error: Optional[Exception] = None):
        super().__init__(message, original_error, {'operation': operation, 'table_name': table_name})


# =============================================================================
# Conflict Errors
# =============================================================================

class ConflictError(HBaseWrapperError):
    """Raised when the table is not in the state the operation requires.

    Used for:
    - Creating a table that already exists
    - Deleting a table that is still enabled
    """

    def __init__(self, message: str, table_name: Optional[str] = None, operation: Optional[str] = None, original_error: Optional[Exception] = None):
        super().__init__(message, original_error, {'operation': operation, 'table_name': table_name})


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(HBaseWrapperError):
    """Raised when the Thrift gateway cannot be reached.

    Used for:
    - Connection refused / unknown host
    - Socket timeouts
    - Transport closed mid-request
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(HBaseWrapperError):
    """Raised for transient region server conditions.

    The wrapper never retries; this class only tells the caller that
    repeating the call later may succeed.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class StoreError(HBaseWrapperError):
    """Raised for any other I/O failure reported by HBase."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)
