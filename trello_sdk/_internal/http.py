"""Shared HTTP client configuration and the default transport."""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

import httpx

from trello_sdk._version import __version__
from trello_sdk.exceptions import TrelloConfigError

DEFAULT_BASE_URI = "https://api.trello.com/"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"trello-sdk/{__version__}"

HOOK_EVENTS = ("request", "response")

# Request options forwarded to httpx.Client.request as keyword arguments.
PASSTHROUGH_OPTIONS = ("timeout", "follow_redirects", "cookies", "extensions")

# Raised before the request leaves the process.
CLIENT_LOGIC_ERRORS: tuple[type[BaseException], ...] = (
    httpx.InvalidURL,
    httpx.UnsupportedProtocol,
    httpx.LocalProtocolError,
    ValueError,
    TypeError,
)

TRANSPORT_RUNTIME_ERRORS: tuple[type[BaseException], ...] = (
    httpx.HTTPError,
    httpx.StreamError,
    OSError,
    RuntimeError,
)


class Transport(Protocol):
    """Anything that can perform a request for HttpClient."""

    def request(self, method: str, path: str, options: dict[str, Any]) -> Any: ...


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.
        user_agent: Value of the default User-Agent header.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": user_agent},
    )


def error_code(exc: BaseException) -> int | None:
    """Best numeric code for a transport failure (HTTP status or errno)."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    if isinstance(exc, OSError):
        return exc.errno
    return None


class HttpxTransport:
    """Transport backed by an httpx.Client.

    Options understood by ``request``:
        body: Encoded request payload (str or bytes) or None.
        headers: Request headers.
        http_errors: Raise httpx.HTTPStatusError for 4xx/5xx responses.
        timeout, follow_redirects, cookies, extensions: passed to httpx.
    """

    def __init__(self, client: httpx.Client | None = None, *, http_errors: bool = True) -> None:
        self._client = client or create_http_client()
        self._http_errors = http_errors

    @property
    def client(self) -> httpx.Client:
        return self._client

    @property
    def base_url(self) -> httpx.URL:
        return self._client.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self._client.base_url = value

    def request(self, method: str, path: str, options: dict[str, Any]) -> httpx.Response:
        kwargs = {key: options[key] for key in PASSTHROUGH_OPTIONS if key in options}
        response = self._client.request(
            method,
            path,
            content=options.get("body"),
            headers=options.get("headers"),
            **kwargs,
        )
        if options.get("http_errors", self._http_errors):
            response.raise_for_status()
        return response

    def add_listener(self, event_name: str, listener: Callable[..., Any]) -> None:
        """Register an httpx event hook ("request" or "response")."""
        if event_name not in HOOK_EVENTS:
            raise TrelloConfigError(
                f"Unknown event {event_name!r}, expected one of {', '.join(HOOK_EVENTS)}"
            )
        hooks: Mapping[str, list[Callable[..., Any]]] = self._client.event_hooks
        self._client.event_hooks = {
            **hooks,
            event_name: [*hooks.get(event_name, []), listener],
        }

    def close(self) -> None:
        self._client.close()
