"""Trello SDK for Python.

This SDK provides the HTTP request layer for the Trello REST API.

Public API:
    HttpClient - Builds, dispatches and records API requests
    HttpxTransport - Default transport backed by httpx
    ClientOptions, RequestDescriptor - Configuration and request models
"""

from trello_sdk._internal.http import HttpxTransport, Transport
from trello_sdk._internal.http_client import (
    ClientOptions,
    EventSubscriber,
    HttpClient,
    HttpMethod,
    RequestDescriptor,
    get_http_client,
)
from trello_sdk._version import __version__
from trello_sdk.exceptions import (
    ErrorKind,
    TrelloConfigError,
    TrelloError,
    TrelloHttpError,
    TrelloValidationError,
)

__all__ = [
    "__version__",
    "HttpClient",
    "get_http_client",
    "HttpxTransport",
    "Transport",
    "EventSubscriber",
    "ClientOptions",
    "HttpMethod",
    "RequestDescriptor",
    "ErrorKind",
    "TrelloError",
    "TrelloHttpError",
    "TrelloConfigError",
    "TrelloValidationError",
]
