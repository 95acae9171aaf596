"""HTTP transport for the Last.fm API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from lastfmpy.adapters.http_resilience import ResilientClient, build_limiter
from lastfmpy.config.lastfm import LASTFM_BASE_URL, LastFmConfig, get_lastfm_config
from lastfmpy.domain.ports import LastFmTransport

from .schema import ErrorResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from lastfmpy.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


class LastFmAPIError(RuntimeError):
    """Raised when the Last.fm API returns an application-level error."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


def encode_parameters(parameters: Mapping[str, object]) -> dict[str, str]:
    """Render request parameters as query values, leaving out unset ones."""

    encoded: dict[str, str] = {}
    for name, value in parameters.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[name] = "1" if value else "0"
        else:
            encoded[name] = str(value)
    return encoded


class LastFmAPIClient:
    """Sends one request per :meth:`call` and returns the decoded JSON object.

    The public surface is synchronous. Calls run on one event loop owned by the instance,
    each with a short-lived async client, so the rate limiter holds across calls.
    Close the instance (or use it as a context manager) to release the loop.
    """

    def __init__(
        self,
        *,
        config: LastFmConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_lastfm_config()
        self._resilience = self._config.resilience
        self._limiter = build_limiter(self._resilience.ratelimit)
        self._transport = transport
        self._client_factory = client_factory or self._default_client_factory
        self._runner = asyncio.Runner()
        self._closed = False

    def __enter__(self) -> LastFmAPIClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._closed = True
        self._runner.close()

    def call(self, parameters: Mapping[str, object]) -> dict[str, object]:
        if self._closed:
            raise RuntimeError("LastFmAPIClient is closed")
        if "method" not in parameters:
            raise ValueError("Last.fm request parameters must name a 'method'")
        params = encode_parameters(parameters)
        params["api_key"] = self._config.api_key
        params["format"] = "json"
        return self._runner.run(self._call_async(params))

    def _default_client_factory(self, resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, limiter=self._limiter, transport=self._transport)

    async def _call_async(self, params: dict[str, str]) -> dict[str, object]:
        base_url = self._resilience.base_url or LASTFM_BASE_URL
        async with self._client_factory(self._resilience) as client:
            response = await client.get(base_url, params=httpx.QueryParams(params))
        return self._decode(params["method"], response)

    def _decode(self, method: str, response: httpx.Response) -> dict[str, object]:
        payload = self._read_json(response)
        if isinstance(payload, dict) and "error" in payload:
            error_payload = ErrorResponse.model_validate(payload)
            log.error(
                "Last.fm API error %s on %s: %s",
                error_payload.error,
                method,
                error_payload.message,
            )
            raise LastFmAPIError(error_payload.message, code=error_payload.error) from None

        response.raise_for_status()
        if not isinstance(payload, dict):
            raise LastFmAPIError(f"Unexpected Last.fm response payload for {method}")
        return payload

    @staticmethod
    def _read_json(response: httpx.Response) -> object:
        # Last.fm reports service errors with 4xx statuses and a JSON body; prefer the body.
        try:
            return response.json()
        except ValueError:
            response.raise_for_status()
            raise LastFmAPIError("Last.fm returned a non-JSON response") from None


if TYPE_CHECKING:
    _transport_check: LastFmTransport = LastFmAPIClient()
