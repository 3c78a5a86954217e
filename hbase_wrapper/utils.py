"""
HBase Wrapper Utilities

Byte/str conversion, split-key construction and result flattening shared by
the gateway and handler layers.

HBase stores everything as bytes. Callers of this library work with ``str``;
conversion happens here, at the boundary, always as UTF-8.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

ROW_KEY_FIELD = "row"

BytesLike = Union[str, bytes]


# =============================================================================
# Byte Conversion
# =============================================================================

def to_bytes(value: BytesLike) -> bytes:
    """Encode a value the way HBase's ``Bytes.toBytes(String)`` does (UTF-8)."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode('utf-8')
    raise ValidationError(f"Expected str or bytes, got {type(value).__name__}")


def to_str(value: Optional[bytes]) -> str:
    """Decode bytes read from HBase. Invalid UTF-8 sequences are replaced."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode('utf-8', errors='replace')


def column_name(family: BytesLike, qualifier: Optional[BytesLike] = None) -> bytes:
    """Build a happybase column specifier: ``b"family:qualifier"`` or ``b"family"``."""
    if qualifier is None:
        return to_bytes(family)
    return to_bytes(family) + b":" + to_bytes(qualifier)


# =============================================================================
# Split Keys
# =============================================================================

def build_split_keys(keys: Iterable[BytesLike]) -> List[bytes]:
    """Build the region boundary array for a pre-split table.

    Keys are UTF-8 encoded, deduplicated and sorted byte-lexicographically,
    which is the order HBase compares row keys in.

    Example:
        >>> build_split_keys(["30", "10", "20", "10"])
        [b'10', b'20', b'30']

    Boundaries ``[k1, ..., kn]`` produce ``n + 1`` regions:
    ``(-inf, k1)``, ``[k1, k2)``, ..., ``[kn, +inf)``.

    Args:
        keys: Boundary keys in any order, duplicates allowed

    Returns:
        Sorted list of unique byte keys

    Raises:
        ValidationError: If a key is empty (HBase rejects empty split keys)
    """
    unique = set()
    for key in keys:
        encoded = to_bytes(key)
        if not encoded:
            raise ValidationError("Split keys must not be empty")
        unique.add(encoded)
    # bytes compare as unsigned octets, matching Bytes.BYTES_COMPARATOR
    return sorted(unique)


# =============================================================================
# Column/Value Pairs
# =============================================================================

ColumnValues = Union[Mapping[str, str], Sequence[Tuple[str, str]]]


def normalize_column_values(columns: ColumnValues) -> List[Tuple[str, str]]:
    """Turn a mapping or a sequence of ``(column, value)`` pairs into a list of pairs.

    Raises:
        ValidationError: If no columns are given or an entry is not a pair
    """
    if isinstance(columns, Mapping):
        pairs = list(columns.items())
    elif not isinstance(columns, Sequence) or isinstance(columns, (str, bytes)):
        raise ValidationError(
            f"Columns must be a mapping or a sequence of (column, value) pairs, got {type(columns).__name__}",
            errors={'columns': type(columns).__name__}
        )
    else:
        pairs = []
        for entry in columns:
            if not isinstance(entry, (tuple, list)) or len(entry) != 2:
                raise ValidationError(
                    f"Columns must be (column, value) pairs, got {entry!r}",
                    errors={'columns': repr(entry)}
                )
            pairs.append((entry[0], entry[1]))

    if not pairs:
        raise ValidationError("At least one (column, value) pair is required")
    return pairs


def build_put_data(family: str, columns: ColumnValues) -> Dict[bytes, bytes]:
    """Build the ``{b"family:column": b"value"}`` mapping for ``Table.put``."""
    return {
        column_name(family, column): to_bytes(value)
        for column, value in normalize_column_values(columns)
    }


# =============================================================================
# Result Flattening
# =============================================================================

def flatten_row(data: Mapping[bytes, bytes], row_key: Optional[BytesLike] = None) -> Dict[str, str]:
    """Flatten a happybase row into ``{"family:qualifier": value}``.

    happybase already returns cells keyed by ``b"family:qualifier"`` with the
    latest version only, so flattening is a decode. When ``row_key`` is
    given, it is added under the ``"row"`` key.

    Example:
        >>> flatten_row({b"cf1:c1": b"v1"}, b"r1")
        {'row': 'r1', 'cf1:c1': 'v1'}
    """
    flat: Dict[str, str] = {}
    if row_key is not None:
        flat[ROW_KEY_FIELD] = to_str(to_bytes(row_key))
    for column, value in data.items():
        flat[to_str(column)] = to_str(value)
    return flat


# =============================================================================
# Argument Checks
# =============================================================================

def require_non_empty(**values: Optional[BytesLike]) -> None:
    """Raise ValidationError naming every empty or missing argument."""
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ValidationError(
            f"Required argument(s) empty: {', '.join(missing)}",
            errors={name: "must not be empty" for name in missing}
        )
