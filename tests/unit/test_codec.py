"""Tests for the body/header codec shared by both transports."""

import json

from isohttp.transport import (
    JSON_CONTENT_TYPE,
    build_wire_headers,
    decode_body,
    encode_body,
    flatten_headers,
)
from isohttp.types import RequestConfig


class TestEncodeBody:
    """Tests for encode_body."""

    def test_compact_json(self) -> None:
        assert encode_body({"title": "x"}) == '{"title":"x"}'

    def test_unicode_kept(self) -> None:
        assert json.loads(encode_body({"name": "café"})) == {"name": "café"}


class TestBuildWireHeaders:
    """Tests for build_wire_headers."""

    def test_adds_content_type_for_body(self) -> None:
        config = RequestConfig.from_options("POST", "/", {"data": {"a": 1}})
        assert build_wire_headers(config) == {"Content-Type": JSON_CONTENT_TYPE}

    def test_no_content_type_without_body(self) -> None:
        config = RequestConfig.from_options("GET", "/", {"headers": {"Accept": "*/*"}})
        assert build_wire_headers(config) == {"Accept": "*/*"}

    def test_caller_content_type_wins(self) -> None:
        config = RequestConfig.from_options(
            "PUT", "/", {"data": "x", "headers": {"content-type": "application/merge-patch+json"}}
        )
        assert build_wire_headers(config) == {"content-type": "application/merge-patch+json"}

    def test_disabled(self) -> None:
        config = RequestConfig.from_options("POST", "/", {"data": {"a": 1}})
        assert build_wire_headers(config, json_content_type=False) == {}

    def test_config_not_mutated(self) -> None:
        config = RequestConfig.from_options("POST", "/", {"data": {"a": 1}})
        build_wire_headers(config)
        assert config.headers == {}


class TestDecodeBody:
    """Tests for decode_body."""

    def test_json(self) -> None:
        assert decode_body('{"id": 1}') == ({"id": 1}, True)

    def test_json_scalar(self) -> None:
        assert decode_body("42") == (42, True)

    def test_raw_text_fallback(self) -> None:
        assert decode_body("<html>oops</html>") == ("<html>oops</html>", False)

    def test_empty_body(self) -> None:
        assert decode_body("") == ("", False)


class TestFlattenHeaders:
    """Tests for flatten_headers."""

    def test_mapping(self) -> None:
        assert flatten_headers({"Content-Type": "text/plain"}) == {"content-type": "text/plain"}

    def test_pairs_with_repeats(self) -> None:
        pairs = [("Set-Cookie", "a=1"), ("set-cookie", "b=2"), ("X-Id", "7")]
        assert flatten_headers(pairs) == {"set-cookie": "a=1, b=2", "x-id": "7"}

    def test_entries_object(self) -> None:
        class HeadersLike:
            def entries(self):
                return iter([("ETag", "abc")])

        assert flatten_headers(HeadersLike()) == {"etag": "abc"}

    def test_none(self) -> None:
        assert flatten_headers(None) == {}
