from typing import Any, Mapping, Optional, Union

from .._config import Config
from .._utils import RequestSpec, Result, get_id, new_request, traced
from ..models import Sku, StripeList
from ..models.errors import StripeError
from ._base_service import BaseService
from ._request_executor import make_request, make_request_async

SkuRef = Union[str, Sku]


class SkusService(BaseService):
    """Service for working with SKUs, the purchasable variants of a product."""

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)
        self._base_url = "skus"

    @traced(name="skus_create")
    def create(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Sku, StripeError]:
        """Create a SKU. ``product`` may be given as an object."""
        return make_request(self._create_spec(params, opts), self)

    @traced(name="skus_create")
    async def create_async(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Sku, StripeError]:
        return await make_request_async(self._create_spec(params, opts), self)

    @traced(name="skus_retrieve")
    def retrieve(
        self, sku: SkuRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Sku, StripeError]:
        return make_request(self._retrieve_spec(sku, opts), self)

    @traced(name="skus_retrieve")
    async def retrieve_async(
        self, sku: SkuRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Sku, StripeError]:
        return await make_request_async(self._retrieve_spec(sku, opts), self)

    @traced(name="skus_update")
    def update(
        self,
        sku: SkuRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Sku, StripeError]:
        return make_request(self._update_spec(sku, params, opts), self)

    @traced(name="skus_update")
    async def update_async(
        self,
        sku: SkuRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Sku, StripeError]:
        return await make_request_async(self._update_spec(sku, params, opts), self)

    @traced(name="skus_delete")
    def delete(
        self, sku: SkuRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Sku, StripeError]:
        return make_request(self._delete_spec(sku, opts), self)

    @traced(name="skus_delete")
    async def delete_async(
        self, sku: SkuRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Sku, StripeError]:
        return await make_request_async(self._delete_spec(sku, opts), self)

    @traced(name="skus_list")
    def list(
        self,
        params: Optional[Mapping[str, Any]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[StripeList, StripeError]:
        """List SKUs.

        Args:
            params (Optional[Mapping[str, Any]]): Filters such as ``product``,
                ``active`` or ``in_stock``, and pagination cursors.
            opts (Optional[Mapping[str, Any]]): Per-request options.

        Returns:
            Result[StripeList, StripeError]: A page of ``Sku`` objects.
        """
        return make_request(self._list_spec(params, opts), self)

    @traced(name="skus_list")
    async def list_async(
        self,
        params: Optional[Mapping[str, Any]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[StripeList, StripeError]:
        return await make_request_async(self._list_spec(params, opts), self)

    def _create_spec(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]]
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(self._base_url)
            .put_method("post")
            .put_params(params)
            .cast_to_id(["product"])
        )

    def _retrieve_spec(self, sku: SkuRef, opts: Optional[Mapping[str, Any]]) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(sku)}")
            .put_method("get")
        )

    def _update_spec(
        self,
        sku: SkuRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]],
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(sku)}")
            .put_method("post")
            .put_params(params)
        )

    def _delete_spec(self, sku: SkuRef, opts: Optional[Mapping[str, Any]]) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(sku)}")
            .put_method("delete")
        )

    def _list_spec(
        self,
        params: Optional[Mapping[str, Any]],
        opts: Optional[Mapping[str, Any]],
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(self._base_url)
            .put_method("get")
            .put_params(params or {})
            .cast_to_id(["product", "ending_before", "starting_after"])
        )
