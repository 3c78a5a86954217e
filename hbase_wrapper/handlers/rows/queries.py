"""
Row Read API

Read operations returning plain ``str`` mappings:
- full table scans, one mapping per row in row key order
- single-row point lookups
- single-cell point lookups

Every row mapping is keyed by ``"family:qualifier"`` and carries the row key
under ``"row"``. Only the latest cell version is read.
"""

import logging
from typing import Dict, List, Optional

from ...core import HBaseConnection, create_table_gateway
from ...utils import column_name, flatten_row, require_non_empty, to_str

logger = logging.getLogger(__name__)


class RowReadApi:
    """Read-only API for row and cell data."""

    def __init__(self, connection: HBaseConnection):
        """Initialize read API with the owned connection."""
        self.connection = connection

    def get_all_rows(
        self,
        table_name: str,
        row_prefix: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, str]]:
        """
        Scan a table and flatten every row.

        Args:
            table_name: Short table name
            row_prefix: Only rows whose key starts with this prefix
            limit: Maximum number of rows to return

        Returns:
            Row mappings in ascending row key order
        """
        require_non_empty(table_name=table_name)
        scan_kwargs = {}
        if row_prefix:
            scan_kwargs['row_prefix'] = row_prefix.encode('utf-8')
        if limit is not None:
            scan_kwargs['limit'] = limit

        gateway = create_table_gateway(self.connection, table_name)
        rows = [flatten_row(data, key) for key, data in gateway.scan(**scan_kwargs)]
        logger.debug(f"Scanned {len(rows)} row(s) from {table_name}")
        return rows

    def get_row(self, table_name: str, row_key: str) -> Dict[str, str]:
        """
        Get all latest cells of one row.

        Returns:
            Flattened row including ``"row"``, or an empty dict if the row is absent
        """
        require_non_empty(table_name=table_name, row_key=row_key)
        data = create_table_gateway(self.connection, table_name).row(row_key)
        if not data:
            return {}
        return flatten_row(data, row_key)

    def get_cell(self, table_name: str, row_key: str, family: str, qualifier: str) -> str:
        """
        Get the latest value of one cell.

        Returns:
            The cell value, or an empty string if the cell is absent
        """
        require_non_empty(table_name=table_name, row_key=row_key, family=family, qualifier=qualifier)
        column = column_name(family, qualifier)
        data = create_table_gateway(self.connection, table_name).row(row_key, columns=[column])
        return to_str(data.get(column))
