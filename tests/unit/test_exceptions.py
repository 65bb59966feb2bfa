"""Unit tests for exception hierarchy."""

from praiseboard.core.exceptions import (
    InvalidCredentialsError,
    PraiseBoardException,
    UnauthorizedError,
    ValidationError,
)


def test_base_exception():
    exc = PraiseBoardException("boom")
    assert exc.message == "boom"
    assert exc.status_code == 400
    assert str(exc) == "boom"


def test_invalid_credentials_error():
    exc = InvalidCredentialsError()
    assert exc.status_code == 401
    assert exc.message == "Invalid username or password"


def test_unauthorized_error():
    exc = UnauthorizedError()
    assert exc.status_code == 401
    assert "logged in" in exc.message


def test_validation_error():
    exc = ValidationError()
    assert exc.status_code == 400
    assert exc.message == "Praise is required"


def test_exception_inheritance():
    """Test exception hierarchy."""
    assert issubclass(InvalidCredentialsError, PraiseBoardException)
    assert issubclass(UnauthorizedError, PraiseBoardException)
    assert issubclass(ValidationError, PraiseBoardException)
