"""
Thin HBase Table Gateway

This module wraps a happybase ``Table`` and translates store failures into
the wrapper's exception hierarchy. It deliberately adds nothing else:

- rows go in and come out as happybase ``{b"family:qualifier": b"value"}`` dicts
- no retries, no caching, no result shaping

Result shaping (decoding, the ``"row"`` entry) lives in the handler layer.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from thriftpy2.thrift import TException
from thriftpy2.transport import TTransportException

from ..exceptions import (
    ConflictError,
    ConnectionError,
    HBaseWrapperError,
    NotFoundError,
    RetryableError,
    StoreError,
    ValidationError,
)
from ..utils import to_bytes
from .connection import HBaseConnection

logger = logging.getLogger(__name__)

# Exceptions the store client raises for any I/O failure
STORE_ERRORS = (TException, OSError)

# Java exception class names found in Thrift IOError messages
NOT_FOUND_MARKERS = ('TableNotFoundException',)
CONFLICT_MARKERS = ('TableExistsException', 'TableNotDisabledException', 'TableNotEnabledException')
VALIDATION_MARKERS = ('NoSuchColumnFamilyException', 'IllegalArgumentException', 'DoNotRetryIOException')
RETRYABLE_MARKERS = (
    'NotServingRegionException',
    'RegionTooBusyException',
    'RetriesExhaustedException',
    'ServerNotRunningYetException',
    'RegionOfflineException',
    'CallQueueTooBigException',
    'PleaseHoldException',
    'RegionServerStoppedException',
)


def _error_message(error: Exception) -> str:
    message = getattr(error, 'message', None)
    if isinstance(message, bytes):
        message = message.decode('utf-8', errors='replace')
    return message or str(error) or type(error).__name__


def map_hbase_error(
    error: Exception,
    operation: str,
    table_name: Optional[str] = None,
    row_key: Optional[Any] = None
) -> HBaseWrapperError:
    """Map a store client exception to a domain-specific exception.

    Args:
        error: Exception raised by happybase/thriftpy2 or the socket layer
        operation: The operation that failed (e.g., "Put", "CreateTable")
        table_name: The table the operation targeted
        row_key: Optional row key for context

    Returns:
        Appropriate domain exception
    """
    if isinstance(error, HBaseWrapperError):
        return error

    message = _error_message(error)
    context = {'operation': operation, 'table_name': table_name, 'row_key': row_key}
    target = f"{operation} on {table_name}" if table_name else operation
    full_message = f"{target}: {message}"

    # Transport failures: the Thrift server is unreachable or went away
    if isinstance(error, (TTransportException, OSError)):
        return ConnectionError(f"Connection failed - {full_message}", error, context)

    error_type = type(error).__name__

    if error_type == 'AlreadyExists':
        return ConflictError(f"Table already exists - {full_message}", table_name, operation, error)

    if error_type == 'IllegalArgument':
        return ValidationError(f"Illegal argument - {full_message}", original_error=error)

    if error_type == 'IOError':
        if any(marker in message for marker in NOT_FOUND_MARKERS):
            return NotFoundError(f"Table not found - {full_message}", table_name, operation, error)
        if any(marker in message for marker in CONFLICT_MARKERS):
            return ConflictError(f"Table state conflict - {full_message}", table_name, operation, error)
        if any(marker in message for marker in VALIDATION_MARKERS):
            return ValidationError(f"Request rejected - {full_message}", original_error=error)
        if any(marker in message for marker in RETRYABLE_MARKERS):
            return RetryableError(f"Region unavailable - {full_message}", error, context)
        return StoreError(f"HBase I/O error - {full_message}", error, context)

    logger.warning(f"Unknown HBase error type '{error_type}' mapped to StoreError")
    return StoreError(f"HBase operation failed - {full_message}", error, context)


class TableGateway:
    """
    Thin gateway for row operations on one HBase table.

    Provides the happybase primitives the handlers need (get, scan, put,
    delete, batch delete, regions) with uniform error mapping.
    """

    def __init__(self, connection: HBaseConnection, table_name: str):
        """Initialize table gateway.

        Args:
            connection: Owned HBase connection
            table_name: Short table name (prefix is applied by happybase)
        """
        self.connection = connection
        self.table_name = table_name
        self._table = None

    @property
    def table(self):
        """happybase Table handle, created on first use."""
        if self._table is None:
            self._table = self.connection.table(self.table_name)
        return self._table

    def row(self, row_key: str, columns: Optional[List[bytes]] = None) -> Dict[bytes, bytes]:
        """Fetch the latest version of a row's cells (empty dict if absent)."""
        try:
            return self.table.row(to_bytes(row_key), columns=columns)
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "Get", self.table_name, row_key) from e

    def scan(self, **kwargs) -> List[Tuple[bytes, Dict[bytes, bytes]]]:
        """
        Execute a scan and materialize the results.

        Raw pass-through of happybase ``Table.scan`` keyword arguments.
        Rows come back in ascending row key order.
        """
        if not any(k in kwargs for k in ('row_start', 'row_stop', 'row_prefix', 'limit')):
            logger.warning(f"Full table scan on {self.table_name} - consider a row range or limit")
        try:
            return list(self.table.scan(**kwargs))
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "Scan", self.table_name) from e

    def put(self, row_key: str, data: Dict[bytes, bytes]) -> None:
        """Write all cells of ``data`` to one row in a single mutation."""
        try:
            self.table.put(to_bytes(row_key), data)
            logger.info(f"Put {len(data)} cell(s) in {self.table_name}: {row_key}")
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "Put", self.table_name, row_key) from e

    def delete(self, row_key: str, columns: Optional[List[bytes]] = None) -> None:
        """Delete a whole row, or only the given families/columns."""
        try:
            self.table.delete(to_bytes(row_key), columns=columns)
            logger.info(f"Deleted from {self.table_name}: {row_key} {columns or ''}".rstrip())
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "Delete", self.table_name, row_key) from e

    def delete_many(self, row_keys: Iterable[str]) -> int:
        """
        Delete several rows in one batch.

        The batch is sent as one request but is not atomic across rows.

        Returns:
            Number of delete mutations sent
        """
        count = 0
        try:
            with self.table.batch() as batch:
                for row_key in row_keys:
                    batch.delete(to_bytes(row_key))
                    count += 1
            logger.info(f"Deleted {count} row(s) from {self.table_name}")
            return count
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "BatchDelete", self.table_name) from e

    def regions(self) -> List[Dict[str, Any]]:
        """Region descriptions as reported by the Thrift server."""
        try:
            return self.table.regions()
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "GetRegions", self.table_name) from e


def create_table_gateway(connection: HBaseConnection, table_name: str) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        connection: Owned HBase connection
        table_name: Short table name

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(connection, table_name)
