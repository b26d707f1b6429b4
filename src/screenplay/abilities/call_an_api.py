"""Ability to call a HTTP API and capture the most recent response."""

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from screenplay.abilities.ability import Ability, UsesAbilities
from screenplay.config import get_settings
from screenplay.errors import LogicError, TestCompromisedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fallbacks for transports that only describe failures in the message
TIMEOUT_PATTERN = re.compile(r"timeout.*exceeded")
NETWORK_ERROR_PATTERN = re.compile(r"Network Error")

CONFIGURATION_ERRORS = (TypeError, ValidationError, httpx.InvalidURL, httpx.UnsupportedProtocol)


async def _read_body(response: httpx.Response) -> None:
    await response.aread()


class RequestConfig(BaseModel):
    """Per-request settings, merged over the client's defaults.

    Only the fields that are set are passed on, so anything left out
    falls back to what the client was configured with.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, arbitrary_types_allowed=True)

    method: str = "GET"
    url: str = ""
    params: dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    cookies: dict[str, str] | None = None
    content: bytes | str | None = None
    data: dict[str, Any] | None = None
    json_body: Any = Field(default=None, alias="json")
    # An explicit None disables the timeout for this request
    timeout: float | httpx.Timeout | None = None

    def to_request_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for httpx.AsyncClient.build_request."""
        kwargs = self.model_dump(by_alias=True, exclude_none=True, exclude={"timeout"})
        if "timeout" in self.model_fields_set:
            kwargs["timeout"] = self.timeout
        return kwargs


class CallAnApi(Ability):
    """Enables an actor to call a HTTP API.

    Wraps a pre-configured httpx.AsyncClient and keeps the single most
    recent response, so that questions about "the last response" can be
    answered without re-issuing the request. Concurrent requests on the
    same instance race for that slot; whichever finishes last wins.

    Transport failures are classified so test code can tell a broken
    environment (TestCompromisedError) from a broken test (LogicError).
    HTTP error statuses are never failures: they are data to assert on.
    """

    def __init__(self, client: httpx.AsyncClient):
        self._client = client
        self._last_response: httpx.Response | None = None
        self._read_body_before_hooks()

    @classmethod
    def at(cls, base_url: str) -> "CallAnApi":
        """
        Call an API at the given base URL.

        The client times out after 2s and sends
        `Accept: application/json,application/xml` unless the
        SCREENPLAY_* settings say otherwise.
        """
        settings = get_settings()
        return cls(
            httpx.AsyncClient(
                base_url=base_url,
                timeout=settings.api_timeout_seconds,
                headers={"Accept": settings.api_accept_header},
            )
        )

    @classmethod
    def using(cls, client: httpx.AsyncClient) -> "CallAnApi":
        """Call an API using a client configured by the caller (proxies, auth, hooks)."""
        return cls(client)

    @classmethod
    def as_(cls, actor: UsesAbilities) -> "CallAnApi":
        """Retrieve the actor's ability to call an API."""
        return actor.ability_to(cls)

    def modify_config(self, fn: Callable[[httpx.AsyncClient], Any]) -> None:
        """Change the client's defaults (headers, params, timeout...) after creation."""
        fn(self._client)

    async def request(self, config: RequestConfig | Mapping[str, Any] | None = None) -> httpx.Response:
        """
        Send a HTTP request and capture the response.

        Resolves with the response for any HTTP status, including errors
        raised by the client that carry a response. Raises
        TestCompromisedError or LogicError when no usable response exists.
        """
        self._read_body_before_hooks()

        try:
            request = self._build_request(config)
            logger.debug("Sending %s %s", request.method, request.url)
            response = await self._client.send(request)
        except Exception as error:
            response = self._response_carried_by(error)

        logger.debug("Captured response with status %s", getattr(response, "status_code", None))
        self._last_response = response
        return response

    def map_last_response(self, fn: Callable[[httpx.Response], T]) -> T:
        """Map the last captured response, e.g. to extract its status or body."""
        if self._last_response is None:
            raise LogicError("Make sure to perform a HTTP API call before checking on the response")

        return fn(self._last_response)

    async def aclose(self) -> None:
        """Close the underlying client."""
        await self._client.aclose()

    def _read_body_before_hooks(self) -> None:
        """Read each response before the client's own hooks run.

        httpx closes a response unread when a hook raises, so an error
        status raised by `raise_for_status` would otherwise leave a body
        nobody can look at. Hooks replaced through modify_config lose this
        one, so it is re-installed before every request.
        """
        hooks = self._client.event_hooks["response"]
        if _read_body not in hooks:
            hooks.insert(0, _read_body)

    def _build_request(self, config: RequestConfig | Mapping[str, Any] | None) -> httpx.Request:
        if not isinstance(config, RequestConfig):
            config = RequestConfig.model_validate(config or {})
        return self._client.build_request(**config.to_request_kwargs())

    def _response_carried_by(self, error: Exception) -> httpx.Response:
        """Classify a failed call; return its response if it has one, raise otherwise."""
        message = str(error)

        if isinstance(error, httpx.TimeoutException) or TIMEOUT_PATTERN.search(message):
            logger.warning("Request timed out: %s", message)
            raise TestCompromisedError("The request has timed out", error) from error

        if isinstance(error, httpx.NetworkError) or NETWORK_ERROR_PATTERN.search(message):
            logger.warning("Network error: %s", message)
            raise TestCompromisedError("A network error has occurred", error) from error

        if isinstance(error, CONFIGURATION_ERRORS):
            logger.warning("Invalid request configuration: %s", message)
            raise LogicError(
                "Looks like there was an issue with the HTTP client configuration", error
            ) from error

        response = getattr(error, "response", None)
        if response is None:
            logger.warning("API call failed without a response: %s", message)
            raise TestCompromisedError("The API call has failed", error) from error

        return response
