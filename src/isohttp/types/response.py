"""
Response type returned by every transport and shaped by response interceptors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from isohttp.errors import HttpStatusError


@dataclass
class Response:
    """Unified HTTP response.

    Attributes:
        data: Parsed JSON body, or the raw text when the body is not JSON
        status: HTTP status code
        headers: Response headers with lower-cased names
        url: Absolute URL the request was sent to
        is_json: Whether ``data`` came from a successful JSON decode
    """

    data: Any = None
    status: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    url: str | None = None
    is_json: bool = False

    @property
    def ok(self) -> bool:
        """Check if the status is 2xx."""
        return 200 <= self.status < 300

    def raise_for_status(self) -> Response:
        """Raise HttpStatusError for 4xx/5xx responses.

        Returns:
            Self, so the call can be chained

        Raises:
            HttpStatusError: If the status is 400 or above
        """
        if self.status >= 400:
            raise HttpStatusError.from_response(
                status_code=self.status,
                body=self.data,
                url=self.url,
            )
        return self
