"""Form and query-string encoding of request parameters."""

from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlencode

from trello_sdk.exceptions import TrelloValidationError

Params = Mapping[str, Any] | str | bytes


def build_query(params: Params) -> str:
    """Encode parameters as ``application/x-www-form-urlencoded``.

    Nested mappings and sequences use bracket keys (``list[name]=x``,
    ``ids[0]=a``). None values are skipped and booleans become ``1``/``0``.
    Raw strings are returned as they are; raw bytes must be UTF-8.

    Args:
        params: Mapping of parameters, or an already encoded string.

    Returns:
        The encoded string, ``&``-joined.

    Raises:
        TrelloValidationError: If raw bytes are not valid UTF-8.
    """
    if isinstance(params, bytes):
        try:
            return params.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TrelloValidationError(f"Query parameters are not valid UTF-8: {e}") from e
    if isinstance(params, str):
        return params
    return urlencode(list(_flatten(params)))


def _flatten(obj: Any, prefix: str | None = None) -> Iterator[tuple[str, str]]:
    """Yield (key, value) pairs for a nested structure."""
    if isinstance(obj, Mapping):
        items = obj.items()
    elif isinstance(obj, (list, tuple)):
        items = enumerate(obj)
    else:
        if obj is not None and prefix is not None:
            yield prefix, _scalar(obj)
        return

    for key, value in items:
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        yield from _flatten(value, name)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
