"""
Portal error taxonomy.

Services raise these; the exception handlers in main.py turn every one of
them into an error notification so a failed action never takes the API down.
"""

from typing import Dict, Optional


class PortalError(Exception):
    """Base class for errors recovered at the API boundary."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PermissionDenied(PortalError):
    status_code = 403


class NotFound(PortalError):
    status_code = 404


class ValidationFailure(PortalError):
    """A draft failed its required-field rules. Nothing was created."""

    status_code = 422

    def __init__(self, field_errors: Dict[str, str], message: str = "Please fix the form errors before submitting"):
        super().__init__(message)
        self.field_errors = field_errors


class SimulatedTransportFailure(PortalError):
    status_code = 502


class ResourceBusy(PortalError):
    """Another mutation on the same resource kind is still in flight."""

    status_code = 409


class StorageError(PortalError):
    status_code = 500

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key
