"""HTTP request layer for the Trello REST API."""

import os
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from pydantic import ValidationError

from trello_sdk._internal.http import (
    CLIENT_LOGIC_ERRORS,
    TRANSPORT_RUNTIME_ERRORS,
    HttpxTransport,
    Transport,
    create_http_client,
    error_code,
)
from trello_sdk._internal.http_client.encoding import Params, build_query
from trello_sdk._internal.http_client.models import (
    BODY_METHODS,
    FORM_CONTENT_TYPE,
    HTTP_METHODS,
    ClientOptions,
    RequestDescriptor,
)
from trello_sdk._internal.http_client.redaction import redact_mapping, redact_query
from trello_sdk.exceptions import (
    ErrorKind,
    TrelloConfigError,
    TrelloHttpError,
    TrelloValidationError,
)

Listener = Callable[..., Any]


class EventSubscriber(Protocol):
    """Groups several listeners, keyed by event name."""

    def get_events(self) -> Mapping[str, Listener | Sequence[Listener]]: ...


class HttpClient:
    """Builds requests for the Trello API and hands them to a transport.

    Every call prefixes the path with the configured API version, encodes
    parameters (query string for GET, form body otherwise), merges the
    active headers with per-call headers and records the last successful
    request/response pair.

    Transport failures surface as TrelloHttpError, tagged CLIENT_LOGIC when
    the request was rejected before leaving the process and
    TRANSPORT_RUNTIME otherwise. Failed calls leave ``last_request`` and
    ``last_response`` untouched.

    Use `HttpClient.from_env()` to create a client from environment variables.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            options: Configuration merged over the defaults of ClientOptions.
            transport: Transport to dispatch through. Defaults to an
                HttpxTransport built from the options; the client closes
                only a transport it built itself.
        """
        self._options = _build_options(options or {})
        self._owns_transport = transport is None
        if transport is None:
            transport = HttpxTransport(
                create_http_client(
                    timeout=self._options.timeout,
                    base_url=self._options.base_uri,
                    user_agent=self._options.user_agent,
                ),
                http_errors=self._options.http_errors,
            )
        self._transport = transport
        self._headers: dict[str, Any] = {}
        self._last_request: RequestDescriptor | None = None
        self._last_response: Any = None

        self.reset_headers()

    @classmethod
    def from_env(cls, transport: Transport | None = None) -> "HttpClient":
        """Create a client from environment variables.

        Optional environment variables:
            TRELLO_BASE_URI: API endpoint.
            TRELLO_USER_AGENT: User-Agent header value.
            TRELLO_TIMEOUT: Request timeout in seconds.
            TRELLO_API_VERSION: API version number.
            TRELLO_HTTP_DEBUG: Set to "1" to enable debug logging.
            TRELLO_API_KEY, TRELLO_TOKEN: When both are set the client is
                authenticated with them.

        Raises:
            TrelloConfigError: If a value is malformed.
        """
        env_options = {
            "base_uri": os.environ.get("TRELLO_BASE_URI"),
            "user_agent": os.environ.get("TRELLO_USER_AGENT"),
            "timeout": os.environ.get("TRELLO_TIMEOUT"),
            "api_version": os.environ.get("TRELLO_API_VERSION"),
        }
        options: dict[str, Any] = {k: v for k, v in env_options.items() if v is not None}
        options["debug"] = os.environ.get("TRELLO_HTTP_DEBUG", "") == "1"

        client = cls(options, transport=transport)

        api_key = os.environ.get("TRELLO_API_KEY")
        token = os.environ.get("TRELLO_TOKEN")
        if api_key and token:
            client.authenticate(api_key, token)
        return client

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def options(self) -> ClientOptions:
        """A copy of the active configuration."""
        return self._options.model_copy()

    @property
    def headers(self) -> dict[str, Any]:
        """A copy of the active headers."""
        return dict(self._headers)

    @property
    def transport(self) -> Transport:
        return self._transport

    def configure(self, options: Mapping[str, Any]) -> None:
        """Merge options into the configuration, last write wins per key.

        Raises:
            TrelloConfigError: If a recognized option gets an invalid value.
                The previous configuration stays active.
        """
        self._options = _build_options({**self._options.model_dump(), **options})
        owned_httpx = self._owns_transport and isinstance(self._transport, HttpxTransport)
        if "base_uri" in options and owned_httpx:
            self._transport.base_url = self._options.base_uri

    def set_option(self, name: str, value: Any) -> None:
        self.configure({name: value})

    def set_headers(self, headers: Mapping[str, Any]) -> None:
        self._headers = {**self._headers, **headers}

    def reset_headers(self) -> None:
        """Drop custom headers and go back to Accept and User-Agent only."""
        self._headers = {
            "Accept": f"application/vnd.{self._options.vendor}.{self._options.api_version}+json",
            "User-Agent": self._options.user_agent,
        }

    def authenticate(self, identifier: str, secret: str) -> None:
        """Set the OAuth Authorization header.

        Values are embedded verbatim; callers must not pass quotes or commas.
        """
        self.set_headers({
            "Authorization": f'OAuth oauth_consumer_key="{identifier}", oauth_token="{secret}"'
        })

    # =========================================================================
    # Event Hooks
    # =========================================================================

    def add_listener(self, event_name: str, listener: Listener) -> None:
        """Register a listener with the transport's event hooks.

        Raises:
            TrelloConfigError: If the transport has no event hooks or does not
                know the event.
        """
        add_listener = getattr(self._transport, "add_listener", None)
        if add_listener is None:
            raise TrelloConfigError(
                f"{type(self._transport).__name__} does not support event hooks"
            )
        add_listener(event_name, listener)

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, listeners in subscriber.get_events().items():
            if callable(listeners):
                listeners = [listeners]
            for listener in listeners:
                self.add_listener(event_name, listener)

    # =========================================================================
    # Verbs
    # =========================================================================

    def get(
        self,
        path: str,
        params: Params | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.request(path, params, "GET", headers)

    def post(
        self,
        path: str,
        body: Params | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.request(path, body, "POST", headers)

    def put(
        self,
        path: str,
        body: Params | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.request(path, body, "PUT", headers)

    def patch(
        self,
        path: str,
        body: Params | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.request(path, body, "PATCH", headers)

    def delete(
        self,
        path: str,
        body: Params | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.request(path, body, "DELETE", headers)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def request(
        self,
        path: str,
        body: Params | None = None,
        method: str = "GET",
        headers: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Build a request and send it through the transport.

        Args:
            path: Path relative to the API version, e.g. "boards/abc123".
            body: Query parameters for GET, form body for other methods.
                Mappings are URL-encoded; strings and bytes pass through.
            method: HTTP method, case-insensitive.
            headers: Per-call headers, winning over the active headers.
            options: Extra transport options (timeout, http_errors, ...).

        Returns:
            The transport's response, unmodified.

        Raises:
            TrelloValidationError: If the method is not supported or raw
                GET params are not UTF-8.
            TrelloHttpError: If the transport fails.
        """
        descriptor = self._create_request(method, path, body, headers or {}, options or {})
        self._log_debug(
            f"{descriptor.method} {redact_query(descriptor.path)} "
            f"headers={redact_mapping(descriptor.headers)}"
        )

        try:
            response = self._transport.request(
                descriptor.method,
                descriptor.path,
                descriptor.transport_options(),
            )
        except CLIENT_LOGIC_ERRORS as e:
            self._log_debug(f"Request rejected: {redact_query(str(e))}")
            raise TrelloHttpError(str(e), kind=ErrorKind.CLIENT_LOGIC, code=error_code(e)) from e
        except TRANSPORT_RUNTIME_ERRORS as e:
            self._log_debug(f"Request failed: {redact_query(str(e))}")
            raise TrelloHttpError(
                str(e), kind=ErrorKind.TRANSPORT_RUNTIME, code=error_code(e)
            ) from e

        self._last_request = descriptor
        self._last_response = response
        return response

    dispatch = request

    @property
    def last_request(self) -> RequestDescriptor | None:
        return self._last_request

    @property
    def last_response(self) -> Any:
        return self._last_response

    def _create_request(
        self,
        method: str,
        path: str,
        body: Params | None,
        headers: Mapping[str, Any],
        options: Mapping[str, Any],
    ) -> RequestDescriptor:
        """Normalize call arguments into a RequestDescriptor."""
        method = method.upper()
        if method not in HTTP_METHODS:
            raise TrelloValidationError(
                f"Unsupported HTTP method {method!r}, expected one of {', '.join(HTTP_METHODS)}"
            )

        path = f"{self._options.api_version}/{path.lstrip('/')}"

        if method == "GET" and body:
            query = build_query(body)
            if query:
                path += ("&" if "?" in path else "?") + query

        payload: str | bytes | None = None
        if body and method != "GET":
            payload = body if isinstance(body, (str, bytes)) else build_query(body) or None

        merged_headers = {**self._headers, **headers}
        if method in BODY_METHODS and not _has_header(merged_headers, "Content-Type"):
            merged_headers["Content-Type"] = FORM_CONTENT_TYPE

        return RequestDescriptor(
            method=method,
            path=path,
            body=payload,
            headers=merged_headers,
            options={
                "timeout": self._options.timeout,
                "http_errors": self._options.http_errors,
                **options,
            },
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the transport if this client created it."""
        close = getattr(self._transport, "close", None)
        if self._owns_transport and close is not None:
            close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._options.debug:
            print(f"[trello-sdk] {message}", file=sys.stderr)


def _build_options(options: Mapping[str, Any]) -> ClientOptions:
    try:
        return ClientOptions(**options)
    except ValidationError as e:
        raise TrelloConfigError(f"Invalid client options: {e}") from e


def _has_header(headers: Mapping[str, Any], name: str) -> bool:
    name = name.lower()
    return any(key.lower() == name for key in headers)


def get_http_client() -> HttpClient:
    """Get an HttpClient configured from environment variables.

    Returns:
        A configured HttpClient instance.
    """
    return HttpClient.from_env()
