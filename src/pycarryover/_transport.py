"""HTTP transport for authenticated official-server calls."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pycarryover._redact import redact_for_log
from pycarryover.config import CarryoverConfig
from pycarryover.exceptions import CarryoverTransportError
from pycarryover.session import OfficialSession

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ServiceResponse:
    """Status and decoded JSON body of one official-server call.

    ``body`` is the request body that was sent, kept so failures can
    name the offending request (e.g. the ``contractId`` of a challenge
    request).
    """

    status: int
    data: Any
    endpoint: str
    body: Mapping[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.status == 200


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`OfficialServerTransport`) concrete.
    Non-success HTTP statuses are returned, not raised; endpoint modules
    decide what a failure means.
    """

    async def call(
        self,
        endpoint: str,
        use_get: bool,
        body: Mapping[str, Any] | None = None,
    ) -> ServiceResponse:
        ...


class OfficialServerTransport:
    """HTTP transport that sends bearer-authenticated JSON requests."""

    def __init__(
        self,
        config: CarryoverConfig,
        session: OfficialSession,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._session = session
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    @property
    def session(self) -> OfficialSession:
        return self._session

    def _headers(self) -> dict[str, str]:
        return {
            "accept": "application/json",
            "authorization": f"bearer {self._session.access_token}",
            "content-type": "application/json; charset=utf-8",
            "user-agent": self._config.user_agent,
            "version": self._session.client_version,
        }

    async def call(
        self,
        endpoint: str,
        use_get: bool,
        body: Mapping[str, Any] | None = None,
    ) -> ServiceResponse:
        """Send one request and decode its JSON body.

        Raises
        ------
        CarryoverTransportError
            On network failure, timeout, or when a successful response is not JSON.
        """
        method = "GET" if use_get else "POST"
        payload = None if use_get else json.dumps(dict(body or {}), separators=(",", ":"))

        _logger.debug("%s %s body=%s", method, endpoint, redact_for_log(body))

        try:
            async with self._http.request(
                method,
                endpoint,
                data=payload,
                headers=self._headers(),
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise CarryoverTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        data: Any = None
        if text.strip():
            try:
                data = json.loads(text)
            except json.JSONDecodeError as exc:
                if status == 200:
                    raise CarryoverTransportError(
                        f"Invalid JSON from {endpoint}: {text[:200]}",
                        status_code=status,
                        endpoint=endpoint,
                    ) from exc
                data = text[:200]

        _logger.debug("%s %s -> HTTP %d", method, endpoint, status)
        return ServiceResponse(status=status, data=data, endpoint=endpoint, body=body)
