"""Catalogue error hierarchy."""
from typing import Iterable


class CatalogError(ValueError):
    """Base class for catalogue lookup errors."""


class UnsupportedModel(CatalogError):
    """Raised when a string does not name a supported model.

    The offending input is kept verbatim on `model_name` so callers can report
    exactly what was configured or received.
    """

    def __init__(self, model_name: object, supported: Iterable[str] = ()):
        self.model_name = model_name
        self.supported = list(supported)
        message = f"Unsupported model: {model_name!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class UnsupportedRole(CatalogError):
    """Raised when a string is not one of the message role names."""

    def __init__(self, role: object, supported: Iterable[str] = ()):
        self.role = role
        self.supported = list(supported)
        message = f"Unsupported role: {role!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)
