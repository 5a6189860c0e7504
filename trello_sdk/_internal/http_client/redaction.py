"""Redaction of credentials in debug output."""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote_plus

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "key",
    "token",
    "api_key",
    "oauth_token",
    "oauth_consumer_key",
    "secret",
    "password",
})

REDACTED_VALUE = "[REDACTED]"

# A key=value pair of a query string, wherever it appears in a line of text.
_QUERY_PAIR = re.compile(r"(?<=[?&])([^=&#\s'\"]+)=([^&#\s'\"]*)")


def redact_mapping(values: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``values`` with sensitive entries replaced.

    Keys are matched case-insensitively; nested mappings are redacted too.
    The original mapping is never mutated.
    """
    result: dict[str, Any] = {}
    for key, value in values.items():
        key_lower = key.lower() if isinstance(key, str) else key
        if key_lower in REDACT_KEYS:
            result[key] = REDACTED_VALUE
        elif isinstance(value, Mapping):
            result[key] = redact_mapping(value)
        else:
            result[key] = value
    return result


def redact_query(text: str) -> str:
    """Replace the values of sensitive query parameters in ``text``.

    Works on bare paths (``1/members/me?key=k&token=t``) and on messages
    that embed a URL. Bracketed keys match on their base name, so
    ``token[0]`` counts as ``token``.
    """

    def _replace(match: re.Match[str]) -> str:
        name = unquote_plus(match.group(1)).split("[", 1)[0].lower()
        if name in REDACT_KEYS:
            return f"{match.group(1)}={REDACTED_VALUE}"
        return match.group(0)

    return _QUERY_PAIR.sub(_replace, text)
