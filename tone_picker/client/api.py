"""
HTTP client for the tone adjustment API.

Every request and response is logged through httpx event hooks. Failures are turned
into ``ApiError`` with a message fit to show the user, then wrapped once more with the
name of the operation that failed.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from tone_picker.config import settings
from tone_picker.exceptions import ApiError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_STATUS_MESSAGES = {
    400: "Invalid request. Please check your input.",
    401: "Authentication failed. Please check your API key.",
    429: "Rate limit exceeded. Please try again later.",
    500: "Server error. Please try again later.",
}
NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def _log_request(request: httpx.Request) -> None:
    logger.info("API Request: %s %s", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    logger.info("API Response: %s %s", response.status_code, response.request.url)


def _server_error_text(response: httpx.Response) -> str | None:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return data["error"]
    return None


def classify_error(error: Exception) -> ApiError:
    """Map a failed call to a user-facing ``ApiError``."""
    if isinstance(error, httpx.HTTPStatusError):
        # The server answered with an error status
        status = error.response.status_code
        message = _server_error_text(error.response) or _STATUS_MESSAGES.get(
            status, f"Request failed with status {status}"
        )
        return ApiError(message, status_code=status)
    if isinstance(error, httpx.RequestError):
        # No response: connection refused, DNS, timeout
        return ApiError(NETWORK_ERROR_MESSAGE)
    return ApiError(str(error) or UNEXPECTED_ERROR_MESSAGE)


class ToneApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            event_hooks={"request": [_log_request], "response": [_log_response]},
            transport=transport,
        )

    def __enter__(self) -> ToneApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
        except Exception as e:
            logger.error("API Response Error: %s", e)
            raise classify_error(e) from e

    def adjust_tone(self, text: str, x: int | str, y: int | str) -> dict[str, Any]:
        """Rewrite ``text`` in the tone at grid point (x, y).

        Returns the response body: ``adjustedText``, ``tone`` and ``cached``.
        """
        try:
            payload = {"text": text.strip(), "x": int(x), "y": int(y)}
            return self._request("POST", "/adjust-tone", json=payload)
        except Exception as e:
            raise ApiError(f"Failed to adjust tone: {_message(e)}", status_code=_status(e)) from e

    def check_health(self) -> dict[str, Any]:
        try:
            return self._request("GET", "/health")
        except ApiError as e:
            raise ApiError(f"Health check failed: {e.message}", status_code=e.status_code) from e

    def test_connection(self) -> bool:
        try:
            self.check_health()
        except ApiError as e:
            logger.error("API connection test failed: %s", e)
            return False
        return True


def _message(error: Exception) -> str:
    if isinstance(error, ApiError):
        return error.message
    return str(error) or UNEXPECTED_ERROR_MESSAGE


def _status(error: Exception) -> int | None:
    return error.status_code if isinstance(error, ApiError) else None
