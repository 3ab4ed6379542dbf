"""运行时环境检测：判断当前解释器是服务端进程还是浏览器宿主环境。

Runtime environment detection.

Decides whether the interpreter is a server-style process (native sockets
available) or a browser-hosted one (Pyodide / Emscripten / WASI), which
in turn decides which transport performs the request.
"""
from __future__ import annotations

import importlib.util
import sys
from enum import Enum

# Platforms where the interpreter runs inside a browser or WASM host
_BROWSER_PLATFORMS: frozenset[str] = frozenset({"emscripten", "wasi"})


class Environment(str, Enum):
    """Concrete runtime environment."""

    SERVER = "server"
    BROWSER = "browser"


def _has_native_sockets() -> bool:
    """Check whether the C socket extension can be located."""
    return importlib.util.find_spec("_socket") is not None


def is_server_environment() -> bool:
    """Return True when running in a server-style process.

    Evaluated fresh on each call. Never raises: if the probe itself fails
    the answer is False and the browser transport is assumed.
    """
    try:
        if sys.platform in _BROWSER_PLATFORMS:
            return False
        return _has_native_sockets()
    except Exception:
        return False


def resolve_environment(preference: str | Environment = "auto") -> Environment:
    """Resolve a configured preference to a concrete environment.

    Args:
        preference: 'auto', 'server' or 'browser'

    Returns:
        The environment whose transport should be used
    """
    if preference == "auto":
        return Environment.SERVER if is_server_environment() else Environment.BROWSER
    return Environment(preference)
