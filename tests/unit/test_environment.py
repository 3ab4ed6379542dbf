"""Tests for runtime environment detection."""

import pytest

from isohttp import _environment
from isohttp._environment import Environment, is_server_environment, resolve_environment


class TestIsServerEnvironment:
    """Tests for is_server_environment."""

    def test_cpython_is_server(self) -> None:
        """A regular interpreter with sockets is a server runtime."""
        assert is_server_environment() is True

    def test_idempotent(self) -> None:
        """Repeated calls agree."""
        assert is_server_environment() == is_server_environment()

    @pytest.mark.usefixtures("browser_platform")
    def test_emscripten_is_browser(self) -> None:
        """Pyodide reports sys.platform == 'emscripten'."""
        assert is_server_environment() is False

    def test_wasi_is_browser(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """WASI builds have no server sockets."""
        monkeypatch.setattr("sys.platform", "wasi")
        assert is_server_environment() is False

    def test_missing_sockets_is_browser(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Absence of the socket extension means no server runtime."""
        monkeypatch.setattr(_environment, "_has_native_sockets", lambda: False)
        assert is_server_environment() is False

    def test_probe_failure_never_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A failing probe is treated as 'not a server'."""

        def boom() -> bool:
            raise RuntimeError("probe failed")

        monkeypatch.setattr(_environment, "_has_native_sockets", boom)
        assert is_server_environment() is False

    def test_evaluated_per_call(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """No cached answer survives a runtime change."""
        assert is_server_environment() is True
        monkeypatch.setattr("sys.platform", "emscripten")
        assert is_server_environment() is False


class TestResolveEnvironment:
    """Tests for resolve_environment."""

    def test_auto_on_server(self) -> None:
        assert resolve_environment("auto") is Environment.SERVER

    @pytest.mark.usefixtures("browser_platform")
    def test_auto_in_browser(self) -> None:
        assert resolve_environment("auto") is Environment.BROWSER

    @pytest.mark.usefixtures("browser_platform")
    def test_forced_server(self) -> None:
        """An explicit preference ignores detection."""
        assert resolve_environment("server") is Environment.SERVER

    def test_forced_browser(self) -> None:
        assert resolve_environment(Environment.BROWSER) is Environment.BROWSER

    def test_unknown_preference(self) -> None:
        with pytest.raises(ValueError):
            resolve_environment("desktop")
