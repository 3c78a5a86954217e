"""
Core infrastructure components for HBase operations.

This module contains the foundational components used by the handlers:
- HBaseConnection: owned, lazily opened happybase connection
- AdminGateway: table administration (exists, create, disable, delete)
- TableGateway: thin wrapper over happybase row operations
- HBaseShell: shell runner for pre-split table creation
"""

from .connection import HBaseConnection, create_connection
from .shell import HBaseShell
from .table_gateway import TableGateway, create_table_gateway, map_hbase_error
from .admin_gateway import AdminGateway

__all__ = [
    "AdminGateway",
    "HBaseConnection",
    "HBaseShell",
    "TableGateway",
    "create_connection",
    "create_table_gateway",
    "map_hbase_error",
]
