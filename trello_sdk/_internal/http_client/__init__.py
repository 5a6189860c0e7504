"""HTTP request layer for the Trello REST API."""

from trello_sdk._internal.http_client.client import EventSubscriber, HttpClient, get_http_client
from trello_sdk._internal.http_client.encoding import build_query
from trello_sdk._internal.http_client.models import (
    ClientOptions,
    HttpMethod,
    RequestDescriptor,
)

__all__ = [
    "HttpClient",
    "get_http_client",
    "EventSubscriber",
    "ClientOptions",
    "HttpMethod",
    "RequestDescriptor",
    "build_query",
]
