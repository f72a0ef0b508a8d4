import asyncio
import random
import time
from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import Any, Mapping, Optional

from httpx import (
    AsyncClient,
    Client,
    Headers,
    HTTPError,
    Response,
    TransportError,
)
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from .._config import Config
from .._utils import Err, HttpMethod, Ok, Result, encode_params
from .._utils._errors import error_from_exception, error_from_response
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    HEADER_API_VERSION,
    HEADER_AUTHORIZATION,
    HEADER_CONNECT_ACCOUNT,
    HEADER_IDEMPOTENCY_KEY,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    OPT_API_KEY,
    OPT_API_VERSION,
    OPT_CONNECT_ACCOUNT,
    OPT_IDEMPOTENCY_KEY,
    SDK_VERSION,
)
from ..models.errors import StripeError

_BODY_METHODS = (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)


def is_retryable_exception(exception: BaseException) -> bool:
    return isinstance(exception, TransportError)


def is_retryable_status_code(response: Response) -> bool:
    return response.status_code >= 500 and response.status_code < 600


def _return_last_outcome(retry_state: RetryCallState) -> Response:
    # re-raises the last exception, or returns the last 5xx response
    assert retry_state.outcome is not None
    return retry_state.outcome.result()


class BaseService:
    """HTTP transport shared by every resource service.

    Owns authentication, parameter encoding, retries and the mapping of HTTP
    failures to ``StripeError``. Implements the ``Transport`` protocol
    consumed by :func:`make_request`.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs = {
            **get_httpx_client_kwargs(self._config.timeout),
            "base_url": self._config.base_url + "/",
            "headers": Headers(self.default_headers),
        }

        self._client = Client(**client_kwargs)
        self._client_async = AsyncClient(**client_kwargs)

        super().__init__()

    def close(self) -> None:
        """Close the underlying sync HTTP connection pool."""
        self._client.close()

    async def aclose(self) -> None:
        """Close both HTTP connection pools from async code."""
        self._client.close()
        await self._client_async.aclose()

    def _parse_retry_after(self, headers: Headers) -> float:
        """Parse Retry-After header (RFC 6585/7231).

        Args:
            headers: HTTP response headers

        Returns:
            float: Seconds to wait before retry (minimum 0.0, default 1.0 if missing/invalid).
        """
        DEFAULT_RETRY_AFTER = 1.0
        retry_after = headers.get("Retry-After")
        if not retry_after:
            return DEFAULT_RETRY_AFTER

        try:
            return max(float(retry_after), 0.0)
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(retry_after)
            delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
            return max(delta, 0.0)
        except (ValueError, TypeError):
            return DEFAULT_RETRY_AFTER

    def _retry_kwargs(self) -> dict[str, Any]:
        return {
            "retry": (
                retry_if_exception(is_retryable_exception)
                | retry_if_result(is_retryable_status_code)
            ),
            "stop": stop_after_attempt(self._config.max_network_retries + 1),
            "wait": wait_exponential(multiplier=0.5, min=0.5, max=8),
            "retry_error_callback": _return_last_outcome,
        }

    def _build_request(
        self,
        params: Mapping[str, Any],
        method: HttpMethod,
        headers: Mapping[str, str],
        opts: Mapping[str, Any],
    ) -> dict[str, Any]:
        request_headers = {
            **self._option_headers(opts),
            **headers,
        }
        kwargs: dict[str, Any] = {"headers": request_headers}

        encoded = encode_params(params)
        if method in _BODY_METHODS:
            kwargs["data"] = encoded
        elif encoded:
            kwargs["params"] = encoded
        return kwargs

    def _option_headers(self, opts: Mapping[str, Any]) -> dict[str, str]:
        headers: dict[str, str] = {}
        if opts.get(OPT_API_KEY):
            headers[HEADER_AUTHORIZATION] = f"Bearer {opts[OPT_API_KEY]}"
        if opts.get(OPT_API_VERSION):
            headers[HEADER_API_VERSION] = opts[OPT_API_VERSION]
        if opts.get(OPT_CONNECT_ACCOUNT):
            headers[HEADER_CONNECT_ACCOUNT] = opts[OPT_CONNECT_ACCOUNT]
        if opts.get(OPT_IDEMPOTENCY_KEY):
            headers[HEADER_IDEMPOTENCY_KEY] = opts[OPT_IDEMPOTENCY_KEY]
        return headers

    def _handle_response(self, response: Response) -> Result[Any, StripeError]:
        if response.is_success:
            try:
                return Ok(response.json())
            except ValueError:
                return Ok(response.text)
        error = error_from_response(response)
        self._logger.debug(f"Request failed: {error!r}")
        return Err(error)

    def _send(self, method: HttpMethod, endpoint: str, **kwargs: Any) -> Response:
        for attempt in range(self._config.max_network_retries + 1):
            response = self._client.request(method.value.upper(), endpoint, **kwargs)

            if response.status_code == 429:
                if attempt < self._config.max_network_retries:
                    retry_after = self._parse_retry_after(response.headers)
                    jitter = random.uniform(0, 0.1 * retry_after)
                    sleep_time = retry_after + jitter
                    self._logger.warning(
                        f"Rate limited (429). Retrying after {sleep_time:.2f}s "
                        f"(attempt {attempt + 1}/{self._config.max_network_retries})"
                    )
                    response.close()
                    time.sleep(sleep_time)
                    continue
                break

            break

        return response

    async def _send_async(
        self, method: HttpMethod, endpoint: str, **kwargs: Any
    ) -> Response:
        for attempt in range(self._config.max_network_retries + 1):
            response = await self._client_async.request(
                method.value.upper(), endpoint, **kwargs
            )

            if response.status_code == 429:
                if attempt < self._config.max_network_retries:
                    retry_after = self._parse_retry_after(response.headers)
                    jitter = random.uniform(0, 0.1 * retry_after)
                    sleep_time = retry_after + jitter
                    self._logger.warning(
                        f"Rate limited (429). Retrying after {sleep_time:.2f}s "
                        f"(attempt {attempt + 1}/{self._config.max_network_retries})"
                    )
                    await response.aclose()
                    await asyncio.sleep(sleep_time)
                    continue
                break

            break

        return response

    def request(
        self,
        params: Mapping[str, Any],
        method: HttpMethod,
        endpoint: str,
        headers: Optional[Mapping[str, str]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Any, StripeError]:
        """Send a request and decode its JSON body.

        Args:
            params: Request parameters; encoded into the query string for GET
                and DELETE and into a form body otherwise.
            method: The HTTP method.
            endpoint: Path relative to the API base URL, e.g. ``charges/ch_1``.
            headers: Extra headers, applied last.
            opts: Per-request options (``api_key``, ``api_version``,
                ``connect_account``, ``idempotency_key``).

        Returns:
            Result[Any, StripeError]: The decoded body, or the error reported
            by the network or the API.
        """
        self._logger.debug(f"Request: {method.value.upper()} {endpoint}")
        kwargs = self._build_request(params, method, headers or {}, opts or {})

        try:
            response = Retrying(**self._retry_kwargs())(
                self._send, method, endpoint, **kwargs
            )
        except HTTPError as e:
            self._logger.debug(f"Request failed without response: {e}")
            return Err(error_from_exception(e))

        return self._handle_response(response)

    async def request_async(
        self,
        params: Mapping[str, Any],
        method: HttpMethod,
        endpoint: str,
        headers: Optional[Mapping[str, str]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Any, StripeError]:
        """Asynchronously send a request and decode its JSON body.

        See :meth:`request`.
        """
        self._logger.debug(f"Request: {method.value.upper()} {endpoint}")
        kwargs = self._build_request(params, method, headers or {}, opts or {})

        try:
            response = await AsyncRetrying(**self._retry_kwargs())(
                self._send_async, method, endpoint, **kwargs
            )
        except HTTPError as e:
            self._logger.debug(f"Request failed without response: {e}")
            return Err(error_from_exception(e))

        return self._handle_response(response)

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            HEADER_USER_AGENT: f"StripeSDK/Python/{SDK_VERSION}",
            HEADER_API_VERSION: self._config.api_version,
            **self.auth_headers,
            **self.custom_headers,
        }

    @property
    def auth_headers(self) -> dict[str, str]:
        header = f"Bearer {self._config.secret}"
        return {HEADER_AUTHORIZATION: header}

    @property
    def custom_headers(self) -> dict[str, str]:
        return {}
