"""
Row Data CQRS APIs

Read API:
- Full scans, single-row and single-cell lookups flattened to str mappings

Write API:
- Single and multi-column puts in one row mutation
- Row, family, column and multi-row deletes
"""

from .queries import RowReadApi
from .commands import RowWriteApi

__all__ = [
    "RowReadApi",
    "RowWriteApi",
]
