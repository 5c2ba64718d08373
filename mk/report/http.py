"""HTTP client abstraction for report uploads.

This module provides:
- HttpClient: Protocol for posting JSON (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from mk import __version__
from mk.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "MockHttpClient",
    "RealHttpClient",
]


@dataclass(frozen=True, slots=True)
class HttpResponse:
    status: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
        body: Response body, when the server sent one
    """

    url: str
    status: int
    message: str
    body: str = ""

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations used by the reporter."""

    def post_json(self, url: str, body: bytes) -> Result[HttpResponse, HttpError]:
        """POST ``body`` as application/json.

        Returns:
            Ok with the response (any status the transport returned), or
            Err with HttpError for network failures and error statuses.
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    One request per call, no retries.
    """

    def __init__(self, timeout: float = 30.0, user_agent: str = f"mk-cli/{__version__}") -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def post_json(self, url: str, body: bytes) -> Result[HttpResponse, HttpError]:
        try:
            req = urllib.request.Request(
                url,
                data=body,
                method="POST",
                headers={
                    "Content-Type": "application/json; charset=utf-8",
                    "User-Agent": self.user_agent,
                },
            )
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                text = response.read().decode("utf-8", errors="replace")
                return Ok(HttpResponse(status=response.status, body=text))
        except urllib.error.HTTPError as e:
            text = e.read().decode("utf-8", errors="replace") if e.fp is not None else ""
            return Err(HttpError(url=url, status=e.code, message=str(e.reason), body=text))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except http.client.HTTPException as e:
            return Err(HttpError(url=url, status=0, message=str(e) or type(e).__name__))
        except ValueError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_response("https://errors.example.com", HttpResponse(200))
        result = client.post_json("https://errors.example.com", b"{}")
        assert client.requests == [("https://errors.example.com", b"{}")]
    """

    def __init__(self) -> None:
        self._responses: dict[str, HttpResponse | HttpError] = {}
        self.requests: list[tuple[str, bytes]] = []

    def set_response(self, url: str, response: HttpResponse | HttpError) -> None:
        """Set the response returned for URL."""
        self._responses[url] = response

    def post_json(self, url: str, body: bytes) -> Result[HttpResponse, HttpError]:
        self.requests.append((url, body))

        if url not in self._responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)
