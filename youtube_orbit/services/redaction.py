from __future__ import annotations
from typing import Any, Mapping

from pydantic import SecretStr

# Query / header names that must never reach a log line
SENSITIVE_KEYS = {
    "key", "api_key", "apikey",
    "token", "access_token",
    "authorization",
}

REDACTED = "**********"


def redact_params(value: Any, *, extra_keys: set[str] | None = None) -> Any:
    sensitive = set(SENSITIVE_KEYS)
    if extra_keys:
        sensitive |= {k.lower() for k in extra_keys}

    def _walk(v: Any) -> Any:
        if isinstance(v, SecretStr):
            return REDACTED
        if isinstance(v, Mapping):
            out = {}
            for k, vv in v.items():
                if isinstance(k, str) and k.lower() in sensitive:
                    out[k] = REDACTED
                else:
                    out[k] = _walk(vv)
            return out
        if isinstance(v, (list, tuple)):
            return [_walk(x) for x in v]
        return v

    return _walk(value)
