"""Unit tests for error-to-HTTP translation.

Tests cover:
- The fixed code -> status table
- Body shape {code, message, details?}
- Database causes never rendered
"""

import json

import pytest

from stockroom.core.enums import ErrorCode
from stockroom.core.errors import DatabaseError, NotFoundError, ValidationError
from stockroom.domain.errors import EmailAlreadyExistsError
from stockroom.presentation.api.v1.errors import ErrorResponseBuilder, error_to_status


@pytest.mark.unit
class TestErrorToStatus:
    """Test status mapping."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (ErrorCode.VALIDATION_ERROR, 400),
            (ErrorCode.INVALID_CREDENTIALS, 400),
            (ErrorCode.EMAIL_ALREADY_EXISTS, 400),
            (ErrorCode.NOT_FOUND, 404),
            (ErrorCode.TOKEN_EXPIRED, 401),
            (ErrorCode.INVALID_TOKEN, 401),
            (ErrorCode.AUTHENTICATION_ERROR, 401),
            (ErrorCode.UNAUTHORIZED, 401),
            (ErrorCode.DATABASE_ERROR, 500),
            (ErrorCode.INTERNAL_ERROR, 500),
        ],
    )
    def test_status_for_code(self, code, expected):
        assert error_to_status(code) == expected


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Test response bodies."""

    def test_not_found_body_has_no_details(self):
        response = ErrorResponseBuilder.from_domain_error(
            NotFoundError(resource="Item", resource_id="7")
        )

        assert response.status_code == 404
        assert json.loads(response.body) == {
            "code": "NOT_FOUND",
            "message": "Item with id '7' not found",
        }

    def test_validation_details_rendered(self):
        error = ValidationError(details={"email": ["invalid"]})

        body = ErrorResponseBuilder.body(error)

        assert body["details"] == {"email": ["invalid"]}

    def test_empty_details_omitted(self):
        assert "details" not in ErrorResponseBuilder.body(ValidationError())

    def test_database_cause_not_rendered(self):
        error = DatabaseError(
            message="Failed to create user", cause=RuntimeError("password=hunter2")
        )

        response = ErrorResponseBuilder.from_domain_error(error)

        assert response.status_code == 500
        assert b"hunter2" not in response.body

    def test_email_exists_maps_to_400(self):
        response = ErrorResponseBuilder.from_domain_error(
            EmailAlreadyExistsError(email="a@b.com")
        )

        assert response.status_code == 400
        assert json.loads(response.body)["code"] == "EMAIL_ALREADY_EXISTS"
