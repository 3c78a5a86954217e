from .results import OperationResult
from .schema import RegionInfo, TableSchema

__all__ = [
    # Write-side DTOs
    "TableSchema",

    # Read-side views
    "RegionInfo",

    # Facade results
    "OperationResult",
]
