"""Pydantic models for the HTTP request layer."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from trello_sdk._internal.http import DEFAULT_BASE_URI, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

# =============================================================================
# Constants
# =============================================================================

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE")
BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT", "PATCH"})

DEFAULT_API_VERSION = 1
DEFAULT_VENDOR = "trello"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# =============================================================================
# Configuration
# =============================================================================


class ClientOptions(BaseModel):
    """Configuration of an HttpClient.

    Recognized fields:
        base_uri: Endpoint every request path is resolved against
        user_agent: Value of the default User-Agent header
        timeout: Request timeout in seconds, handed to the transport
        api_version: Used in the Accept header and as the path prefix
        vendor: Media-type vendor in the Accept header
        http_errors: Treat 4xx/5xx responses as transport failures
        debug: Print debug lines to stderr

    Unknown keys are kept as extra fields.
    """

    base_uri: str = DEFAULT_BASE_URI
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    api_version: int = Field(default=DEFAULT_API_VERSION, ge=1)
    vendor: str = Field(default=DEFAULT_VENDOR, min_length=1)
    http_errors: bool = True
    debug: bool = False

    model_config = {"extra": "allow"}


# =============================================================================
# Request Descriptor
# =============================================================================


class RequestDescriptor(BaseModel):
    """A normalized request, as handed to the transport.

    ``path`` already carries the API version prefix and, for GET, the query
    string. ``body`` is the encoded payload or None.
    """

    method: HttpMethod
    path: str
    body: str | bytes | None = None
    headers: dict[str, Any] = Field(default_factory=dict)
    options: dict[str, Any] = Field(default_factory=dict)

    def transport_options(self) -> dict[str, Any]:
        """Options mapping passed to ``Transport.request``."""
        return {**self.options, "body": self.body, "headers": dict(self.headers)}
