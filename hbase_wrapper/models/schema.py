"""
Table schema DTO and region view.

``TableSchema`` is the write-side model validated before a table is created;
``RegionInfo`` is the read-side view of a table region as reported by the
Thrift gateway.
"""

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from ..utils import build_split_keys, to_str

# Optional namespace, then a qualifier that does not start with '.' or '-'
TABLE_NAME_PATTERN = r'^(?:[a-zA-Z0-9_]+:)?[a-zA-Z0-9_][a-zA-Z0-9_.\-]*$'


class TableSchema(BaseModel):
    """
    Write-side DTO describing a table to create.

    Enforces what HBase would reject anyway, before any round trip:
    - legal table name characters
    - at least one column family, no duplicates, no ':' in a family name
    - no empty split key
    """

    table_name: str = Field(..., min_length=1, max_length=255, pattern=TABLE_NAME_PATTERN,
                            description="Table name, optionally 'namespace:qualifier'")
    column_families: List[str] = Field(..., min_length=1, description="Column families to declare")
    split_keys: Optional[List[str]] = Field(None, description="Region boundary keys for pre-splitting")

    @field_validator('column_families')
    @classmethod
    def validate_column_families(cls, v: List[str]) -> List[str]:
        """Validate family names and reject duplicates."""
        seen = set()
        for family in v:
            if not family:
                raise ValueError("Column family names must not be empty")
            if ':' in family:
                raise ValueError(f"Column family name must not contain ':': {family!r}")
            if family.startswith('.'):
                raise ValueError(f"Column family name must not start with '.': {family!r}")
            if family in seen:
                raise ValueError(f"Duplicate column family: {family!r}")
            seen.add(family)
        return v

    @field_validator('split_keys')
    @classmethod
    def validate_split_keys(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None and any(key == "" for key in v):
            raise ValueError("Split keys must not be empty")
        return v

    @property
    def is_presplit(self) -> bool:
        return bool(self.split_keys)

    def boundary_keys(self) -> List[bytes]:
        """Sorted, deduplicated region boundaries (empty when not pre-split)."""
        if not self.split_keys:
            return []
        return build_split_keys(self.split_keys)


class RegionInfo(BaseModel):
    """Read-side view of one table region."""

    name: str = Field(..., description="Region name")
    start_key: bytes = Field(b"", description="Inclusive start key, empty for the first region")
    end_key: bytes = Field(b"", description="Exclusive end key, empty for the last region")
    region_id: Optional[int] = Field(None, description="Region id")
    server_name: Optional[str] = Field(None, description="Hosting region server")
    port: Optional[int] = Field(None, description="Region server port")

    @classmethod
    def from_thrift(cls, region: Mapping[str, Any]) -> 'RegionInfo':
        """Build from one entry of ``happybase.Table.regions()``."""
        server_name = region.get('server_name')
        return cls(
            name=to_str(region.get('name')),
            start_key=region.get('start_key') or b"",
            end_key=region.get('end_key') or b"",
            region_id=region.get('id'),
            server_name=to_str(server_name) if server_name is not None else None,
            port=region.get('port'),
        )
