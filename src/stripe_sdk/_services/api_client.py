from typing import Any, Optional

from .._config import Config
from .._utils import RequestSpec, Result, convert_result, traced
from ..models.errors import StripeError
from ._base_service import BaseService
from ._request_executor import Converter, make_request, make_request_async


class ApiClient(BaseService):
    """
    Low-level client for executing hand-built requests.

    Use it to reach endpoints the resource services do not cover yet, while
    keeping the same authentication, retries, ID casting and conversion.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    @traced(name="api_client_execute")
    def execute(
        self, spec: RequestSpec, converter: Optional[Converter] = None
    ) -> Result[Any, StripeError]:
        """
        Execute a request built with :func:`new_request`.

        Args:
            spec (RequestSpec): The request to send.
            converter (Optional[Converter]): Maps the decoded response body.
                Defaults to the typed object converter.

        Returns:
            Result[Any, StripeError]: The converted response or the error.

        Example:
            ```python
            spec = (
                new_request()
                .put_endpoint(lambda params: f"customers/{params['customer']}/sources")
                .put_method("post")
                .put_params({"customer": customer, "source": "tok_visa"})
                .cast_to_id(["customer"])
            )
            sdk.api_client.execute(spec)
            ```
        """
        return make_request(spec, self, converter or convert_result)

    @traced(name="api_client_execute")
    async def execute_async(
        self, spec: RequestSpec, converter: Optional[Converter] = None
    ) -> Result[Any, StripeError]:
        return await make_request_async(spec, self, converter or convert_result)
