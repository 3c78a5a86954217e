from typing import Any, Dict, Optional


class HBaseWrapperError(Exception):
    """Base exception for all HBase wrapper errors.

    Attributes:
        message: Human-readable error message
        original_error: The store client exception that caused this error (if any)
        context: Additional context (operation, table, row key, ...)
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = {k: v for k, v in (context or {}).items() if v is not None}
        super().__init__(message)

    @property
    def operation(self) -> Optional[str]:
        """Store operation that failed, e.g. ``"Put"`` or ``"CreateTable"``."""
        return self.context.get('operation')

    @property
    def table_name(self) -> Optional[str]:
        """Table the failed operation targeted."""
        return self.context.get('table_name')

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} (Context: {context_str})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"original_error={self.original_error!r}, context={self.context!r})"
        )
