"""Low-level HTTP transport layer for the tracking backend, wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from gpstelemetry.exceptions import (
    GpsTelemetryAPIError,
    GpsTelemetryConnectionError,
    GpsTelemetryTimeoutError,
)

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT = 30.0


def _error_message(response: httpx.Response) -> str:
    """Pull the message out of a backend error body, falling back to raw text.

    Error bodies look like {"statusCode": 404, "message": "...", "error": "Not Found"};
    request validation failures carry a list of messages instead of a string.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text
    if not isinstance(body, dict) or "message" not in body:
        return response.text
    message = body["message"]
    if isinstance(message, list):
        return "; ".join(str(m) for m in message)
    return str(message)


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return the parsed response envelope."""
    if response.status_code >= 400:
        raise GpsTelemetryAPIError(
            status_code=response.status_code,
            message=_error_message(response),
        )
    return response.json()  # type: ignore[no-any-return]


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform a GET request and return the parsed envelope."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise GpsTelemetryConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise GpsTelemetryTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Perform an async GET request and return the parsed envelope."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise GpsTelemetryConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise GpsTelemetryTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
