"""Tests for error handling."""

import pytest

from compact_jwt.errors import (
    InvalidTokenError,
    JwtError,
    MissingAlgorithmError,
    UnsupportedAlgorithmError,
)


class TestJwtError:
    """Test JwtError exception."""

    def test_error_creation(self):
        """Test creating JwtError."""
        error = JwtError(
            {"error": "invalid_token", "error_description": "Invalid token"}, 401
        )

        assert error.error["error"] == "invalid_token"
        assert error.error["error_description"] == "Invalid token"
        assert error.status_code == 401

    def test_error_message(self):
        """Test error message extraction."""
        error = JwtError({"error": "invalid_token", "error_description": "Bad"})

        assert str(error) == "Bad"

    def test_error_default_status_code(self):
        """Test default status code is 401."""
        error = JwtError({"error": "invalid_token", "error_description": "Bad"})

        assert error.status_code == 401

    def test_error_without_description(self):
        """Test error without error_description."""
        error = JwtError({"error": "invalid_token"})

        assert str(error) == "Token error"


class TestErrorKinds:
    """Test the concrete error kinds."""

    def test_missing_algorithm(self):
        """Test MissingAlgorithmError details."""
        error = MissingAlgorithmError()

        assert isinstance(error, JwtError)
        assert error.status_code == 400
        assert error.error["error"] == "invalid_request"
        assert "algorithm" in str(error).lower()

    def test_unsupported_algorithm(self):
        """Test UnsupportedAlgorithmError keeps the rejected algorithm."""
        error = UnsupportedAlgorithmError("RS256")

        assert isinstance(error, JwtError)
        assert error.algorithm == "RS256"
        assert error.status_code == 400
        assert "unsupported" in str(error).lower()

    def test_invalid_token_is_uniform(self):
        """Test every InvalidTokenError carries the same description."""
        first = InvalidTokenError()
        second = InvalidTokenError()

        assert first.status_code == 401
        assert first.error == second.error
        assert first.error["error"] == "invalid_token"

    def test_error_can_be_raised(self):
        """Test that errors can be caught through the base class."""
        with pytest.raises(JwtError) as exc_info:
            raise InvalidTokenError()

        assert exc_info.value.status_code == 401
