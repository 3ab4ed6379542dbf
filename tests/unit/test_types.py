"""Tests for request and response types."""

import pytest

from isohttp.errors import ErrorClass, HttpStatusError, ValidationError
from isohttp.types import HttpMethod, RequestConfig, Response


class TestHttpMethod:
    """Tests for HttpMethod parsing."""

    @pytest.mark.parametrize("value", ["GET", "get", "Get", HttpMethod.GET])
    def test_parse_any_casing(self, value: str) -> None:
        assert HttpMethod.parse(value) is HttpMethod.GET

    @pytest.mark.parametrize("value", ["PATCH", "HEAD", "", 42])
    def test_unsupported(self, value: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            HttpMethod.parse(value)  # type: ignore[arg-type]
        assert exc_info.value.field == "method"

    def test_is_str(self) -> None:
        assert HttpMethod.DELETE == "DELETE"


class TestRequestConfig:
    """Tests for RequestConfig."""

    def test_from_options_defaults(self) -> None:
        config = RequestConfig.from_options("GET", "/posts")
        assert config.method is HttpMethod.GET
        assert config.endpoint == "/posts"
        assert config.headers == {}
        assert config.data is None
        assert config.extra == {}
        assert not config.has_body

    def test_from_options_recognized_fields(self) -> None:
        config = RequestConfig.from_options(
            "post",
            "/posts",
            {"headers": {"Accept": "application/json"}, "data": {"title": "x"}},
        )
        assert config.method is HttpMethod.POST
        assert config.headers == {"Accept": "application/json"}
        assert config.data == {"title": "x"}
        assert config.has_body

    def test_extra_fields_kept(self) -> None:
        """Unrecognized options travel in extra."""
        config = RequestConfig.from_options("GET", "/posts", {"retry_hint": 3, "tag": "a"})
        assert config.extra == {"retry_hint": 3, "tag": "a"}
        assert config["tag"] == "a"
        assert config.get("missing", "default") == "default"
        assert config["endpoint"] == "/posts"

    def test_options_override_endpoint(self) -> None:
        """An endpoint option wins over the positional endpoint."""
        config = RequestConfig.from_options("GET", "/a", {"endpoint": "/b"})
        assert config.endpoint == "/b"

    def test_method_option_does_not_override(self) -> None:
        """The positional method is kept; a method option lands in extra."""
        config = RequestConfig.from_options("GET", "/a", {"method": "PATCH"})
        assert config.method is HttpMethod.GET
        assert config["method"] is HttpMethod.GET
        assert config.extra == {"method": "PATCH"}

    def test_headers_copied(self) -> None:
        """The caller's header dict is never mutated."""
        headers = {"A": "1"}
        config = RequestConfig.from_options("GET", "/", {"headers": headers})
        config.headers["B"] = "2"
        assert headers == {"A": "1"}

    def test_falsy_body_still_sent(self) -> None:
        """Only None means 'no body'."""
        assert RequestConfig.from_options("POST", "/", {"data": 0}).has_body
        assert RequestConfig.from_options("POST", "/", {"data": []}).has_body

    def test_snapshot_is_independent(self) -> None:
        config = RequestConfig.from_options(
            "POST", "/posts", {"headers": {"A": "1"}, "data": {"items": [1]}}
        )
        snap = config.snapshot()
        config.headers["A"] = "changed"
        config.data["items"].append(2)
        assert snap.headers == {"A": "1"}
        assert snap.data == {"items": [1]}

    def test_snapshot_normalizes_method(self) -> None:
        """A method set as a plain string by an interceptor is parsed."""
        config = RequestConfig.from_options("GET", "/")
        config.method = "put"  # type: ignore[assignment]
        assert config.snapshot().method is HttpMethod.PUT


class TestResponse:
    """Tests for Response."""

    def test_ok(self) -> None:
        assert Response(status=204).ok
        assert not Response(status=404).ok

    def test_raise_for_status_success(self) -> None:
        response = Response(data={}, status=200)
        assert response.raise_for_status() is response

    def test_raise_for_status_error(self) -> None:
        response = Response(
            data={"error": {"message": "CSRF token mismatch"}},
            status=403,
            url="https://api.example.com/posts",
        )
        with pytest.raises(HttpStatusError) as exc_info:
            response.raise_for_status()
        err = exc_info.value
        assert err.status_code == 403
        assert err.error_class is ErrorClass.PERMISSION_DENIED
        assert err.message == "CSRF token mismatch"
        assert err.url == "https://api.example.com/posts"

    def test_raise_for_status_raw_text(self) -> None:
        with pytest.raises(HttpStatusError) as exc_info:
            Response(data="Bad Gateway", status=502).raise_for_status()
        assert exc_info.value.message == "Bad Gateway"
        assert exc_info.value.error_class is ErrorClass.SERVER_ERROR
