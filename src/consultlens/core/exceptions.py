"""Exception hierarchy for ConsultLens.

The aggregation functions themselves never raise for empty input or zero
totals. These errors are raised where data enters the system (loading,
validation) or when a caller passes an argument outside its domain.
"""

from typing import Any, Dict, Optional


class ConsultLensError(Exception):
    """Base exception for all ConsultLens errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class DataValidationError(ConsultLensError):
    """Incoming data breaks a structural invariant."""

    def __init__(
        self,
        message: str,
        field: str = "",
        value: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({
            "field": self.field,
            "value": repr(self.value),
        })
        return data


class DataSourceError(ConsultLensError):
    """A data source could not be read or parsed."""

    def __init__(
        self,
        message: str,
        source: str = "",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source


class InvalidFilterError(ConsultLensError, ValueError):
    """Unknown sentiment filter value."""


class InvalidBucketSizeError(ConsultLensError, ValueError):
    """Bucket size must be a positive integer."""
