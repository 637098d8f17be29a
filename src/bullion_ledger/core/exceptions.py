"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code=code)


class InvalidInputError(ValidationError):
    """Raised when a valuation input is not a finite number."""

    def __init__(self, name: str, value: object):
        super().__init__(f"{name} must be a finite number, got {value!r}", code="INVALID_INPUT")
        self.name = name
        self.value = value


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class NetworkError(AppError):
    """
    Raised when a ledger store call fails or returns a non-2xx response.

    status_code is None when the request never produced a response.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, code="NETWORK_ERROR")
        self.status_code = status_code
