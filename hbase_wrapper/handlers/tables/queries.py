"""
Table Read API

Read-only table administration queries: existence, listing and region
layout. Store failures are raised as domain exceptions.
"""

import logging
from typing import List

from ...core import AdminGateway, HBaseConnection, create_table_gateway
from ...models import RegionInfo
from ...utils import require_non_empty

logger = logging.getLogger(__name__)


class TableReadApi:
    """Read-only API for table metadata."""

    def __init__(self, connection: HBaseConnection):
        """Initialize read API with the owned connection."""
        self.connection = connection
        self.admin = AdminGateway(connection)

    def table_exists(self, table_name: str) -> bool:
        """
        Check whether a table is registered.

        Args:
            table_name: Short table name

        Returns:
            True if the table exists
        """
        require_non_empty(table_name=table_name)
        return self.admin.table_exists(table_name)

    def list_tables(self) -> List[str]:
        return self.admin.list_tables()

    def get_regions(self, table_name: str) -> List[RegionInfo]:
        """
        Describe the regions of a table, ordered by start key.

        A table created with ``n`` unique split keys reports ``n + 1`` regions.
        """
        require_non_empty(table_name=table_name)
        gateway = create_table_gateway(self.connection, table_name)
        regions = [RegionInfo.from_thrift(region) for region in gateway.regions()]
        return sorted(regions, key=lambda region: region.start_key)
