# SPDX-License-Identifier: MIT

"""Thin JSON client for the trip planner API."""

import logging
from types import TracebackType
from typing import Any, Optional

import httpx

from itinerary.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)

# raised while converting a response body with missing or unparsable fields
MALFORMED_PAYLOAD_ERRORS = (KeyError, TypeError, ValueError)


class ApiError(Exception):
    """A request to the trip API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, path: str) -> dict[str, Any]:
        return self.__request("GET", path)

    def post(self, path: str, json: dict[str, Any]) -> dict[str, Any]:
        return self.__request("POST", path, json)

    def put(self, path: str, json: dict[str, Any]) -> dict[str, Any]:
        return self.__request("PUT", path, json)

    def __request(
        self, method: str, path: str, json: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(f"could not reach the trip API: {exc}") from exc

        if response.is_error:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise ApiError(
                _error_message(response),
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(
                "trip API returned a body that is not JSON",
                status_code=response.status_code,
            ) from exc
        if not isinstance(body, dict):
            raise ApiError(
                "trip API returned an unexpected payload",
                status_code=response.status_code,
            )
        return body


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return f"trip API error {response.status_code}: {body['message']}"
    return f"trip API error {response.status_code}"


def malformed_payload_error(what: str, exc: Exception) -> ApiError:
    """A 2xx response whose body lacks fields or holds values that do not parse."""
    return ApiError(f"trip API returned a malformed {what}: {exc!r}")


def get_api_client(transport: Optional[httpx.BaseTransport] = None) -> ApiClient:
    config = CONFIGURATION_REPO.get_config()
    return ApiClient(
        config["api_url"],
        timeout_seconds=config["request_timeout_seconds"],
        transport=transport,
    )
