from functools import cached_property
from logging import getLogger
from os import environ as env
from typing import Any, List, Optional, Type, TypeVar

from dotenv import load_dotenv
from pydantic import ValidationError

from ._config import Config
from ._services import (
    ApiClient,
    BaseService,
    ChargesService,
    CouponsService,
    SkusService,
)
from ._utils import setup_logging
from ._utils.constants import (
    ENV_API_KEY,
    ENV_API_VERSION,
    ENV_BASE_URL,
    ENV_MAX_NETWORK_RETRIES,
    LOGGER_NAME,
)
from .models.errors import ApiKeyMissingError

load_dotenv()

S = TypeVar("S", bound=BaseService)


class StripeSDK:
    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        max_network_retries: Optional[int] = None,
        debug: bool = False,
    ) -> None:
        api_key_value = api_key or env.get(ENV_API_KEY)
        if not api_key_value:
            raise ApiKeyMissingError()

        overrides = {
            "base_url": base_url or env.get(ENV_BASE_URL),
            "api_version": api_version or env.get(ENV_API_VERSION),
            "max_network_retries": (
                max_network_retries
                if max_network_retries is not None
                else env.get(ENV_MAX_NETWORK_RETRIES)
            ),
        }

        try:
            self._config = Config(
                secret=api_key_value,
                debug=debug,
                **{key: value for key, value in overrides.items() if value is not None},
            )
        except ValidationError as e:
            raise ValueError(f"Invalid SDK configuration: {e}") from e

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(f"{self._config!r}\n")

        self._services: List[BaseService] = []

    @cached_property
    def charges(self) -> ChargesService:
        return self._service(ChargesService)

    @cached_property
    def coupons(self) -> CouponsService:
        return self._service(CouponsService)

    @cached_property
    def skus(self) -> SkusService:
        return self._service(SkusService)

    @cached_property
    def api_client(self) -> ApiClient:
        return self._service(ApiClient)

    def _service(self, service_cls: Type[S]) -> S:
        service = service_cls(self._config)
        self._services.append(service)
        return service

    def close(self) -> None:
        """Close the connection pools of every service created so far."""
        for service in self._services:
            service.close()

    async def aclose(self) -> None:
        for service in self._services:
            await service.aclose()

    def __enter__(self) -> "StripeSDK":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "StripeSDK":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
