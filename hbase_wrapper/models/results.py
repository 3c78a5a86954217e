"""
Operation results returned by the service facade.

Instead of swallowing store failures and handing back sentinel values, every
facade call returns an ``OperationResult``. On failure it still carries the
default value the caller would have received (``False``, ``{}``, ``[]``,
``""``), together with the structured error, so the caller decides whether
to log, retry or raise.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import HBaseWrapperError

T = TypeVar('T')


class OperationResult(BaseModel, Generic[T]):
    """Outcome of a single facade operation."""

    success: bool = Field(..., description="Whether the operation did what was asked")
    value: Optional[T] = Field(None, description="Operation value, or the default on failure")
    error: Optional[HBaseWrapperError] = Field(None, description="Failure cause")

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True
    )

    @classmethod
    def ok(cls, value: Any = None) -> 'OperationResult':
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: HBaseWrapperError, value: Any = None) -> 'OperationResult':
        return cls(success=False, value=value, error=error)

    def unwrap(self) -> Any:
        """Return the value, raising the recorded error if the operation failed.

        Raises:
            HBaseWrapperError: The failure cause
        """
        if not self.success and self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value if self.success else default

    def __bool__(self) -> bool:
        return self.success
