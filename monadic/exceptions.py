"""
Exception hierarchy for monadic containers.

Only contract violations are raised. Expected failures in calling code
are values (``Left``), never exceptions.
"""

from typing import Any

type ErrorContextData = str | int | float | bool | None
type ErrorContextDict = dict[str, ErrorContextData]


class MonadError(Exception):
    """
    Base exception for all container contract violations.

    Carries an error code and a structured context for logging.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
        }


class TypeMismatchError(MonadError, TypeError):
    """A traversed element is not an Either."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        actual_type: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.index = index
        self.actual_type = actual_type

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context.update({"index": self.index, "actual_type": self.actual_type})
        return context


class CoercionError(MonadError, TypeError):
    """Value cannot be coerced to a List."""

    def __init__(self, message: str, invalid_value: Any = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.invalid_value = invalid_value

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context["invalid_value"] = repr(self.invalid_value)
        return context


class MissingTransformError(MonadError, TypeError):
    """A mapping operation was called without a function."""


__all__ = [
    "CoercionError",
    "ErrorContextData",
    "ErrorContextDict",
    "MissingTransformError",
    "MonadError",
    "TypeMismatchError",
]
