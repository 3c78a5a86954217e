"""
Row Write API

Puts and deletes against single rows, plus a batched multi-row delete.
Columns are supplied as ``(column, value)`` pairs (or a mapping) so a column
can never lose its value.
"""

import logging
from typing import Iterable

from ...core import HBaseConnection, create_table_gateway
from ...exceptions import ValidationError
from ...utils import ColumnValues, build_put_data, column_name, require_non_empty

logger = logging.getLogger(__name__)


class RowWriteApi:
    """
    Write-only API for row mutations.

    Every method issues exactly one mutation (one batch for ``delete_rows``)
    and raises domain exceptions on failure.
    """

    def __init__(self, connection: HBaseConnection):
        """Initialize write API with the owned connection."""
        self.connection = connection

    def put_value(self, table_name: str, row_key: str, family: str, column: str, value: str) -> bool:
        """Write one cell."""
        return self.put_values(table_name, row_key, family, [(column, value)])

    def put_values(self, table_name: str, row_key: str, family: str, columns: ColumnValues) -> bool:
        """
        Write several columns of one family to a row in one atomic mutation.

        Args:
            table_name: Short table name
            row_key: Row key
            family: Column family
            columns: ``(column, value)`` pairs or a ``{column: value}`` mapping

        Returns:
            True once the mutation is applied

        Raises:
            ValidationError: Empty arguments or no columns
        """
        require_non_empty(table_name=table_name, row_key=row_key, family=family)
        data = build_put_data(family, columns)
        create_table_gateway(self.connection, table_name).put(row_key, data)
        return True

    def delete_row(self, table_name: str, row_key: str) -> bool:
        """Delete every cell of a row."""
        require_non_empty(table_name=table_name, row_key=row_key)
        create_table_gateway(self.connection, table_name).delete(row_key)
        return True

    def delete_family(self, table_name: str, row_key: str, family: str) -> bool:
        """Delete all cells of one column family from a row."""
        require_non_empty(table_name=table_name, row_key=row_key, family=family)
        create_table_gateway(self.connection, table_name).delete(row_key, columns=[column_name(family)])
        return True

    def delete_column(self, table_name: str, row_key: str, family: str, column: str) -> bool:
        """Delete one column from a row."""
        require_non_empty(table_name=table_name, row_key=row_key, family=family, column=column)
        create_table_gateway(self.connection, table_name).delete(
            row_key, columns=[column_name(family, column)]
        )
        return True

    def delete_rows(self, table_name: str, row_keys: Iterable[str]) -> int:
        """
        Delete several rows in one batch.

        Best effort: the batch is not atomic, and rows deleted before a
        failure stay deleted.

        Returns:
            Number of rows a delete was sent for
        """
        require_non_empty(table_name=table_name)
        if isinstance(row_keys, (str, bytes)):
            raise ValidationError(
                f"row_keys must be a collection of row keys, not a single {type(row_keys).__name__}",
                errors={'row_keys': repr(row_keys)}
            )
        row_keys = list(row_keys)
        for row_key in row_keys:
            require_non_empty(row_key=row_key)
        if not row_keys:
            return 0
        return create_table_gateway(self.connection, table_name).delete_many(row_keys)
