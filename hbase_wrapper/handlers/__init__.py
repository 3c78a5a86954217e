"""
Handler Layer for the HBase Wrapper

Application layer handlers split by Command Query Responsibility
Segregation (CQRS):

- tables/: table administration (queries.py: exists, list, regions;
  commands.py: create, drop)
- rows/: row data (queries.py: scans and lookups; commands.py: puts, deletes)

Handlers validate arguments, shape results into plain ``str`` mappings, and
let domain exceptions propagate.

Architecture:
service.py -> handlers/ (this layer) -> core/ (infrastructure) -> HBase
"""

from .tables.queries import TableReadApi
from .tables.commands import TableWriteApi
from .rows.queries import RowReadApi
from .rows.commands import RowWriteApi

__all__ = [
    'RowReadApi',
    'RowWriteApi',
    'TableReadApi',
    'TableWriteApi',
]
