"""
Table Administration CQRS APIs

Read API:
- Existence checks and table listing
- Region layout of pre-split tables

Write API:
- Guarded table creation, optionally pre-split
- Disable-then-delete teardown

Usage:
    read_api = TableReadApi(connection)
    write_api = TableWriteApi(connection)
"""

from .queries import TableReadApi
from .commands import TableWriteApi

__all__ = [
    "TableReadApi",
    "TableWriteApi",
]
