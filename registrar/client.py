"""Dynadot API client — authenticated GET against ``/api3.json``.

Every command is a single GET with ``key``, ``command`` and the flat
parameters in the query string.  Transient failures (HTTP 408, 429,
5xx gateway statuses, timeouts) are retried with exponential backoff.
The retry policy is uniform: the registrar, not this client, decides
whether a repeated ``register`` or ``delete`` is harmful.
"""

from __future__ import annotations

import os
import threading
from typing import Any

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from contracts.audit import AuditEntry, AuditEvent, AuditLogger, current_request_id
from contracts.config import ApiConfig
from contracts.errors import ApiError, ConfigError
from contracts.tool_sdk import FlatParams, FlatValue
from contracts.transport import Transport

from registrar.normalize import envelope_error

API_PATH = "/api3.json"
RETRYABLE_STATUS = frozenset({408, 429, 500, 502, 503, 504})


class TransientStatusError(Exception):
    """A retryable HTTP status; converted to ``ApiError`` once retries run out."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, (TransientStatusError, httpx.TimeoutException))


def encode_value(value: FlatValue) -> str:
    """Query-string form of a flat value (``True`` -> ``"true"``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_params(params: FlatParams | None) -> dict[str, str]:
    return {k: encode_value(v) for k, v in (params or {}).items() if v is not None}


class DynadotClient(Transport):
    """Registrar transport.  Read-only after construction; safe to share."""

    def __init__(
        self,
        config: ApiConfig | None = None,
        *,
        api_key: str | None = None,
        audit: AuditLogger | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ApiConfig()
        key = api_key or self._config.api_key or os.environ.get(self._config.api_key_env)
        if not key:
            raise ConfigError(
                f"API key required: set api.api_key in the config file "
                f"or the {self._config.api_key_env} environment variable"
            )
        self._api_key = key
        self._audit = audit
        self._http = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=http_transport,
        )

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def config(self) -> ApiConfig:
        return self._config

    async def execute(self, command: str, params: FlatParams | None = None) -> dict[str, Any]:
        query = {"key": self._api_key, "command": command, **encode_params(params)}
        attempts = self._config.max_retries + 1

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(attempts),
                wait=wait_exponential(multiplier=self._config.retry_delay),
                retry=retry_if_exception(_is_transient),
                before_sleep=self._record_retry(command),
                reraise=True,
            ):
                with attempt:
                    response = await self._http.get(API_PATH, params=query)
                    if response.status_code in RETRYABLE_STATUS:
                        raise TransientStatusError(response.status_code)
                    response.raise_for_status()
        except TransientStatusError as exc:
            raise ApiError(
                f"Registrar returned HTTP {exc.status_code} after {attempts} attempt(s)",
                command=command,
            ) from exc
        except httpx.TimeoutException as exc:
            raise ApiError(
                f"Registrar request timed out after {attempts} attempt(s)",
                command=command,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise ApiError(f"Registrar returned HTTP {exc.response.status_code}", command=command) from exc
        except httpx.HTTPError as exc:
            raise ApiError(f"Registrar request failed: {exc}", command=command) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ApiError("Registrar returned a non-JSON response", command=command) from exc
        if not isinstance(data, dict):
            raise ApiError("Registrar returned an unexpected JSON document", command=command)

        error = envelope_error(data)
        if error is not None:
            raise ApiError(error, command=command)
        return data

    async def aclose(self) -> None:
        await self._http.aclose()

    # ── internal ────────────────────────────────────────────────────

    def _record_retry(self, command: str):
        def before_sleep(state: RetryCallState) -> None:
            if self._audit is None:
                return
            exc = state.outcome.exception() if state.outcome else None
            self._audit.log(AuditEntry(
                request_id=current_request_id.get(),
                event=AuditEvent.API_RETRY,
                detail={
                    "command": command,
                    "attempt": state.attempt_number,
                    "reason": str(exc) or type(exc).__name__,
                },
            ))

        return before_sleep


# ── Process default ──────────────────────────────────────────────────

_default: DynadotClient | None = None
_default_lock = threading.Lock()


def get_client(config: ApiConfig | None = None, *, audit: AuditLogger | None = None) -> DynadotClient:
    """Return the process-wide client, constructing it on first use.

    *config* and *audit* only take effect on the first call.
    """
    global _default  # noqa: PLW0603
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = DynadotClient(config, audit=audit)
    return _default


def reset_client() -> None:
    """Forget the process default (tests, config reload)."""
    global _default  # noqa: PLW0603
    with _default_lock:
        _default = None
