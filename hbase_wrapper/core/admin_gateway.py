"""
Thin HBase Admin Gateway

Table-level operations (list, exists, create, enable/disable, delete) on top
of the owned happybase connection, with the same error mapping as
``TableGateway``. Pre-split creation is routed to the HBase shell.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..utils import to_str
from .connection import HBaseConnection
from .table_gateway import STORE_ERRORS, map_hbase_error

logger = logging.getLogger(__name__)

# HBase's own column family defaults; the Thrift IDL would otherwise keep 3 versions
DEFAULT_FAMILY_OPTIONS = {'max_versions': 1}


class AdminGateway:
    """Thin gateway for table administration."""

    def __init__(self, connection: HBaseConnection):
        self.connection = connection

    def list_tables(self) -> List[str]:
        """Names of all tables visible through the configured prefix."""
        try:
            return [to_str(name) for name in self.connection.connection.tables()]
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "ListTables") from e

    def table_exists(self, table_name: str) -> bool:
        return table_name in self.list_tables()

    def create_table(
        self,
        table_name: str,
        families: Sequence[str],
        split_keys: Optional[Sequence[bytes]] = None
    ) -> None:
        """
        Create a table with one descriptor per column family.

        Args:
            table_name: Short table name
            families: Column family names, default options
            split_keys: Sorted, unique region boundaries; single region if omitted
        """
        if split_keys:
            self.connection.shell.create_presplit_table(table_name, families, split_keys)
            return

        family_options: Dict[str, dict] = {family: dict(DEFAULT_FAMILY_OPTIONS) for family in families}
        try:
            self.connection.connection.create_table(table_name, family_options)
            logger.info(f"Created table {table_name} with families {list(families)}")
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "CreateTable", table_name) from e

    def is_table_enabled(self, table_name: str) -> bool:
        try:
            return self.connection.connection.is_table_enabled(table_name)
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "IsTableEnabled", table_name) from e

    def disable_table(self, table_name: str) -> None:
        try:
            self.connection.connection.disable_table(table_name)
            logger.info(f"Disabled table {table_name}")
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "DisableTable", table_name) from e

    def delete_table(self, table_name: str) -> None:
        """Delete a table; HBase refuses unless it is disabled first."""
        try:
            self.connection.connection.delete_table(table_name)
            logger.info(f"Deleted table {table_name}")
        except STORE_ERRORS as e:
            raise map_hbase_error(e, "DeleteTable", table_name) from e
