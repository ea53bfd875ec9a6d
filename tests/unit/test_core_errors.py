"""Unit tests for the error taxonomy.

Every variant carries a non-empty code and message; messages that depend on
fields are built from them.
"""

import pytest

from stockroom.core.enums import ErrorCode
from stockroom.core.errors import (
    DatabaseError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from stockroom.domain.errors import (
    AuthenticationError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    TokenExpiredError,
)

ALL_VARIANTS = [
    ValidationError(),
    NotFoundError(resource="Item", resource_id="42"),
    DatabaseError(),
    AuthenticationError(),
    InvalidCredentialsError(),
    TokenExpiredError(),
    InvalidTokenError(),
    EmailAlreadyExistsError(email="a@b.com"),
]


@pytest.mark.unit
class TestErrorVariants:
    """Test defaults and derived messages."""

    @pytest.mark.parametrize("error", ALL_VARIANTS, ids=lambda e: type(e).__name__)
    def test_code_and_message_are_non_empty(self, error):
        assert isinstance(error, DomainError)
        assert len(error.code.value) > 0
        assert len(error.message) > 0

    def test_error_codes_are_their_names(self):
        for code in ErrorCode:
            assert code.value == code.name

    def test_not_found_message_names_resource_and_id(self):
        error = NotFoundError(resource="Item", resource_id="42")

        assert error.code == ErrorCode.NOT_FOUND
        assert error.message == "Item with id '42' not found"

    def test_email_already_exists_message(self):
        error = EmailAlreadyExistsError(email="a@b.com")

        assert error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert error.message == "Email 'a@b.com' is already registered"

    def test_email_already_exists_keeps_explicit_message(self):
        error = EmailAlreadyExistsError(email="a@b.com", message="Taken")

        assert error.message == "Taken"

    def test_default_messages(self):
        assert AuthenticationError().message == "Authentication failed"
        assert InvalidCredentialsError().message == "Invalid email or password"
        assert TokenExpiredError().message == "Token has expired"
        assert InvalidTokenError().message == "Invalid token"
        assert ValidationError().message == "Validation failed"

    def test_database_error_cause_not_in_repr_or_equality(self):
        first = DatabaseError(message="Failed", cause=RuntimeError("driver detail"))
        second = DatabaseError(message="Failed", cause=None)

        assert first == second
        assert "driver detail" not in repr(first)

    def test_str_includes_code_and_message(self):
        assert str(InvalidTokenError()) == "INVALID_TOKEN: Invalid token"
