from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Literal

import httpx


HttpMethod = Literal["GET", "POST"]
QueryValue = str | int | float | bool


@dataclass(frozen=True)
class HttpResult:
    ok: bool
    status_code: int | None
    detail: dict[str, Any]

    error_code: str | None = None
    error_message: str | None = None

    elapsed_ms: int | None = None


def _is_json_response(resp: httpx.Response) -> bool:
    ct = (resp.headers.get("content-type") or "").lower()
    return "application/json" in ct or ct.endswith("+json")


def _cap_text(s: str, *, max_chars: int) -> str:
    if len(s) <= max_chars:
        return s
    return s[:max_chars] + f"...(truncated, {len(s)} chars)"


class HttpClient:
    """
    Shared HTTP client wrapper for the YouTube and Orbit clients.

    - Uses one AsyncClient instance (connection pooling).
    - One shot per call: no retries, no backoff.
    - Never raises for HTTP or transport failures; callers inspect HttpResult.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float = 20.0,
        max_response_body_chars: int = 20_000,
        default_headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = httpx.Timeout(timeout_seconds)
        self._max_body = max_response_body_chars
        self._default_headers = dict(default_headers or {})
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request_json(
        self,
        *,
        method: HttpMethod,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, QueryValue] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> HttpResult:
        # Merge headers (caller wins)
        h = dict(self._default_headers)
        if headers:
            h.update(dict(headers))

        try:
            resp = await self._client.request(
                method=method,
                url=url,
                headers=h,
                params=dict(params or {}),
                json=json_body,
            )
        except httpx.TimeoutException as e:
            return HttpResult(
                ok=False,
                status_code=None,
                detail={"error": "timeout"},
                error_code="TIMEOUT",
                error_message=str(e) or type(e).__name__,
            )
        except httpx.RequestError as e:
            # DNS errors, connection refused, TLS, etc.
            return HttpResult(
                ok=False,
                status_code=None,
                detail={"error": "request_error"},
                error_code="REQUEST_ERROR",
                error_message=str(e) or type(e).__name__,
            )

        detail: dict[str, Any]
        if _is_json_response(resp):
            try:
                parsed = resp.json()
                detail = parsed if isinstance(parsed, dict) else {"data": parsed}
            except ValueError:
                detail = {"raw": _cap_text(resp.text, max_chars=self._max_body)}
        else:
            # Non-JSON response (HTML, text, etc.)
            detail = {
                "raw": _cap_text(resp.text, max_chars=self._max_body),
                "content_type": resp.headers.get("content-type"),
            }

        try:
            elapsed_ms = int(resp.elapsed.total_seconds() * 1000)
        except RuntimeError:
            # elapsed is only set once the response has been closed
            elapsed_ms = None

        if 200 <= resp.status_code < 300:
            return HttpResult(ok=True, status_code=resp.status_code, detail=detail, elapsed_ms=elapsed_ms)

        return HttpResult(
            ok=False,
            status_code=resp.status_code,
            detail=detail,
            error_code=f"HTTP_{resp.status_code}",
            error_message=f"HTTP {resp.status_code}",
            elapsed_ms=elapsed_ms,
        )

    # helpers
    async def get_json(self, *, url: str, headers: Mapping[str, str] | None = None, params: Mapping[str, QueryValue] | None = None) -> HttpResult:
        return await self.request_json(method="GET", url=url, headers=headers, params=params)

    async def post_json(self, *, url: str, headers: Mapping[str, str] | None = None, params: Mapping[str, QueryValue] | None = None, json_body: dict[str, Any] | None = None) -> HttpResult:
        return await self.request_json(method="POST", url=url, headers=headers, params=params, json_body=json_body)
