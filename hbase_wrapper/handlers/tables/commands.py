"""
Table Write API

Table creation (optionally pre-split) and teardown. Creation is guarded by an
existence check; teardown follows the disable-then-delete order HBase
requires.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from ...core import AdminGateway, HBaseConnection
from ...exceptions import ConflictError, ValidationError
from ...models import TableSchema
from ...utils import require_non_empty

logger = logging.getLogger(__name__)


class TableWriteApi:
    """
    Write-only API for table lifecycle.

    Provides:
    - Idempotence guard on create (existing tables are never altered)
    - Pre-split creation from unordered, possibly duplicated boundary keys
    - Safe drop of enabled or already disabled tables
    """

    def __init__(self, connection: HBaseConnection):
        """Initialize write API with the owned connection."""
        self.connection = connection
        self.admin = AdminGateway(connection)

    def create_table(
        self,
        table_name: str,
        column_families: List[str],
        split_keys: Optional[List[str]] = None
    ) -> bool:
        """
        Create a table with one column family descriptor per name.

        Args:
            table_name: Short table name
            column_families: Families to declare
            split_keys: Optional region boundaries; sorted and deduplicated
                        before use, giving ``len(unique keys) + 1`` regions

        Returns:
            True when the table was created

        Raises:
            ValidationError: Invalid name, families or split keys
            ConflictError: Table already exists
        """
        try:
            schema = TableSchema(
                table_name=table_name,
                column_families=column_families,
                split_keys=split_keys
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid table schema: {e}", original_error=e) from e

        return self.create_table_from_schema(schema)

    def create_table_from_schema(self, schema: TableSchema) -> bool:
        """Create a table from a validated ``TableSchema``."""
        if self.admin.table_exists(schema.table_name):
            logger.info(f"Table {schema.table_name} already exists, not creating it")
            raise ConflictError(
                f"Table already exists: {schema.table_name}",
                schema.table_name,
                "CreateTable"
            )

        self.admin.create_table(
            schema.table_name,
            schema.column_families,
            schema.boundary_keys() or None
        )
        return True

    def drop_table(self, table_name: str) -> bool:
        """
        Disable then delete a table.

        Args:
            table_name: Short table name

        Returns:
            True if the table was dropped, False if it did not exist
        """
        require_non_empty(table_name=table_name)
        if not self.admin.table_exists(table_name):
            logger.info(f"Table {table_name} does not exist, nothing to drop")
            return False

        if self.admin.is_table_enabled(table_name):
            self.admin.disable_table(table_name)
        self.admin.delete_table(table_name)
        return True
