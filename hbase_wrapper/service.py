"""
HBase service facade.

``HBaseService`` is the single entry point most applications need: it owns
nothing but a reference to an ``HBaseConnection`` and exposes every table and
row operation. Each call returns an ``OperationResult``; failures are logged
and reported in the result instead of being raised, for reads and writes
alike. Callers who prefer exceptions use ``result.unwrap()`` or the
underlying Read/Write APIs.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from .core import HBaseConnection
from .exceptions import ConflictError, HBaseWrapperError
from .handlers import RowReadApi, RowWriteApi, TableReadApi, TableWriteApi
from .models import OperationResult, RegionInfo
from .utils import ColumnValues

logger = logging.getLogger(__name__)


class HBaseService:
    """Table and row operations over one owned HBase connection."""

    def __init__(self, connection: HBaseConnection):
        self.connection = connection
        self.tables = TableReadApi(connection)
        self.table_writer = TableWriteApi(connection)
        self.rows = RowReadApi(connection)
        self.row_writer = RowWriteApi(connection)

    def _run(self, operation: str, default: Any, func: Callable[..., Any], *args, **kwargs) -> OperationResult:
        try:
            return OperationResult.ok(func(*args, **kwargs))
        except HBaseWrapperError as e:
            if isinstance(e, ConflictError):
                logger.warning(f"{operation} skipped: {e}")
            else:
                logger.error(f"{operation} failed: {e}")
            return OperationResult.fail(e, default)

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def table_exists(self, table_name: str) -> OperationResult[bool]:
        return self._run("TableExists", False, self.tables.table_exists, table_name)

    def list_tables(self) -> OperationResult[List[str]]:
        return self._run("ListTables", [], self.tables.list_tables)

    def get_regions(self, table_name: str) -> OperationResult[List[RegionInfo]]:
        return self._run("GetRegions", [], self.tables.get_regions, table_name)

    def create_table(
        self,
        table_name: str,
        column_families: List[str],
        split_keys: Optional[List[str]] = None
    ) -> OperationResult[bool]:
        """
        Create a table unless it already exists.

        An existing table yields a failed result holding ``ConflictError``
        and value ``False``; the table itself is left untouched.
        """
        return self._run(
            "CreateTable", False, self.table_writer.create_table,
            table_name, column_families, split_keys
        )

    def drop_table(self, table_name: str) -> OperationResult[bool]:
        """Disable and delete a table. Value is False if it did not exist."""
        return self._run("DropTable", False, self.table_writer.drop_table, table_name)

    # -------------------------------------------------------------------------
    # Rows
    # -------------------------------------------------------------------------

    def put_value(self, table_name: str, row_key: str, family: str, column: str, value: str) -> OperationResult[bool]:
        return self._run("Put", False, self.row_writer.put_value, table_name, row_key, family, column, value)

    def put_values(self, table_name: str, row_key: str, family: str, columns: ColumnValues) -> OperationResult[bool]:
        return self._run("Put", False, self.row_writer.put_values, table_name, row_key, family, columns)

    def get_all_rows(self, table_name: str) -> OperationResult[List[Dict[str, str]]]:
        return self._run("Scan", [], self.rows.get_all_rows, table_name)

    def get_row(self, table_name: str, row_key: str) -> OperationResult[Dict[str, str]]:
        return self._run("Get", {}, self.rows.get_row, table_name, row_key)

    def get_cell(self, table_name: str, row_key: str, family: str, qualifier: str) -> OperationResult[str]:
        return self._run("Get", "", self.rows.get_cell, table_name, row_key, family, qualifier)

    def delete_row(self, table_name: str, row_key: str) -> OperationResult[bool]:
        return self._run("Delete", False, self.row_writer.delete_row, table_name, row_key)

    def delete_family(self, table_name: str, row_key: str, family: str) -> OperationResult[bool]:
        return self._run("Delete", False, self.row_writer.delete_family, table_name, row_key, family)

    def delete_column(self, table_name: str, row_key: str, family: str, column: str) -> OperationResult[bool]:
        return self._run("Delete", False, self.row_writer.delete_column, table_name, row_key, family, column)

    def delete_rows(self, table_name: str, row_keys: Iterable[str]) -> OperationResult[int]:
        """Delete several rows in one best-effort batch. Value is the number of rows sent."""
        return self._run("BatchDelete", 0, self.row_writer.delete_rows, table_name, row_keys)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> 'HBaseService':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
