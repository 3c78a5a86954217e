"""
HBase Wrapper

Table management and row-level CRUD for Apache HBase on top of happybase,
configured with Pydantic and returning structured operation results.
"""

from .config import HBaseConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    HBaseWrapperError,
    NotFoundError,
    RetryableError,
    StoreError,
    ValidationError,
)
from .models import (
    OperationResult,
    RegionInfo,
    TableSchema,
)
from .core import (
    AdminGateway,
    HBaseConnection,
    TableGateway,
    create_connection,
    create_table_gateway,
)
from .handlers import (
    RowReadApi,
    RowWriteApi,
    TableReadApi,
    TableWriteApi,
)
from .service import HBaseService
from .utils import build_split_keys

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "HBaseConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "HBaseWrapperError",
    "NotFoundError",
    "RetryableError",
    "StoreError",
    "ValidationError",

    # Models
    "OperationResult",
    "RegionInfo",
    "TableSchema",

    # Connection and gateways
    "AdminGateway",
    "HBaseConnection",
    "TableGateway",
    "create_connection",
    "create_table_gateway",

    # CQRS APIs
    "RowReadApi",
    "RowWriteApi",
    "TableReadApi",
    "TableWriteApi",

    # Facade
    "HBaseService",

    # Utilities
    "build_split_keys",
]
