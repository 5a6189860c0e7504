"""Internal modules for the Trello SDK.

Import public names from ``trello_sdk`` instead.

Modules:
    http - httpx client factory and the default transport
    http_client - Request building and dispatch
"""
