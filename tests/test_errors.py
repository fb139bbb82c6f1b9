import pytest

from app.utils.errors import (
    ConfigurationError,
    DesiFitException,
    ProviderError,
    ValidationRejection,
)


@pytest.mark.parametrize("cls,status,message", [
    (ConfigurationError, 503, "API Key is missing."),
    (ProviderError, 502, "Plan generation failed"),
    (ValidationRejection, 422, "Weight out of range"),
    (DesiFitException, 500, "An error occurred"),
])
def test_defaults(cls, status, message):
    exc = cls()
    assert exc.status_code == status
    assert exc.message == message
    assert exc.detail == message
    assert str(exc) == message


def test_detail_kept_separate_from_message():
    exc = ProviderError("Malformed response from AI", detail="Expecting value: line 1")
    assert exc.message == "Malformed response from AI"
    assert exc.detail == "Expecting value: line 1"
    assert exc.status_code == 502


def test_status_override_does_not_leak_to_class():
    exc = DesiFitException("Storage unavailable", status_code=507)
    assert exc.status_code == 507
    assert DesiFitException().status_code == 500
