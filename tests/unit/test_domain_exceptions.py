"""Tests for domain exceptions (error_code, message, details, to_dict)."""

from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DictionaryRebuildException,
    MarketplaceException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_marketplace_exception_default_error_code() -> None:
    """Base MarketplaceException uses class name as error_code when not provided."""
    exc = MarketplaceException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "MarketplaceException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = MarketplaceException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Search query must not be blank", field="q")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "q"}
    assert ValidationException("Invalid").details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_resource_and_action() -> None:
    exc = AuthorizationException("search_dictionary", "rebuild")
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"resource": "search_dictionary", "action": "rebuild"}



def test_sql_not_configured_exception() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_dictionary_rebuild_exception() -> None:
    exc = DictionaryRebuildException("disk full", words_attempted=42)
    assert exc.error_code == "DICTIONARY_REBUILD_ERROR"
    assert exc.details == {"reason": "disk full", "words_attempted": 42}
