"""Tests for error hierarchy and status classification."""

import pytest

from isohttp.errors import (
    ConfigurationError,
    ErrorClass,
    ErrorContext,
    HttpStatusError,
    IsoHttpError,
    TransportUnavailableError,
    ValidationError,
    classify_status,
    extract_error_message,
)


class TestErrorHierarchy:
    """All library errors share a base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("bad"),
            ConfigurationError("bad"),
            TransportUnavailableError("bad"),
            HttpStatusError.from_response(500),
        ],
    )
    def test_base_class(self, error: Exception) -> None:
        assert isinstance(error, IsoHttpError)

    def test_context_in_message(self) -> None:
        err = ValidationError("Unsupported HTTP method", field="method")
        assert "[validation]" in str(err)
        assert "at 'method'" in str(err)

    def test_with_hint(self) -> None:
        err = TransportUnavailableError("no fetch", transport="fetch").with_hint("use Pyodide")
        assert err.context.hint == "use Pyodide"
        assert err.context.details["transport"] == "fetch"

    def test_empty_context(self) -> None:
        assert str(ErrorContext()) == ""
        assert str(IsoHttpError("plain")) == "plain"

    def test_configuration_errors_kept(self) -> None:
        err = ConfigurationError("invalid", errors=[{"loc": "environment", "msg": "bad"}])
        assert err.errors == [{"loc": "environment", "msg": "bad"}]


class TestClassifyStatus:
    """Tests for classify_status."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (400, ErrorClass.INVALID_REQUEST),
            (401, ErrorClass.AUTHENTICATION),
            (403, ErrorClass.PERMISSION_DENIED),
            (404, ErrorClass.NOT_FOUND),
            (419, ErrorClass.PERMISSION_DENIED),
            (429, ErrorClass.RATE_LIMITED),
            (418, ErrorClass.INVALID_REQUEST),
            (503, ErrorClass.SERVER_ERROR),
            (302, ErrorClass.OTHER),
        ],
    )
    def test_mapping(self, status: int, expected: ErrorClass) -> None:
        assert classify_status(status) is expected


class TestExtractErrorMessage:
    """Tests for extract_error_message."""

    def test_nested_error(self) -> None:
        assert extract_error_message({"error": {"message": "nope"}}) == "nope"

    def test_string_error(self) -> None:
        assert extract_error_message({"error": "nope"}) == "nope"

    def test_message_field(self) -> None:
        assert extract_error_message({"message": "nope"}) == "nope"

    def test_detail_list(self) -> None:
        assert extract_error_message({"detail": ["first", "second"]}) == "first"

    def test_raw_text(self) -> None:
        assert extract_error_message("  Internal Server Error\n") == "Internal Server Error"

    def test_nothing_useful(self) -> None:
        assert extract_error_message(None) is None
        assert extract_error_message([1, 2]) is None
        assert extract_error_message({"other": 1}) is None

    def test_fallback_message(self) -> None:
        assert HttpStatusError.from_response(404, body={}).message == "HTTP 404"
