"""Custom exceptions for the application."""


class PraiseBoardException(Exception):
    """Base exception for all Praise Board errors."""
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


# Authentication Exceptions
class InvalidCredentialsError(PraiseBoardException):
    """Invalid username or password."""
    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message, status_code=401)


class UnauthorizedError(PraiseBoardException):
    """Missing or invalid session token."""
    def __init__(self, message: str = "You must be logged in to access this page."):
        super().__init__(message, status_code=401)


# Validation Exceptions
class ValidationError(PraiseBoardException):
    """Required form field missing or empty."""
    def __init__(self, message: str = "Praise is required"):
        super().__init__(message, status_code=400)
