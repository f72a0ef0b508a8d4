from typing import Any, Mapping, Optional, Union

from .._config import Config
from .._utils import RequestSpec, Result, get_id, new_request, traced
from ..models import Coupon, StripeList
from ..models.errors import StripeError
from ._base_service import BaseService
from ._request_executor import make_request, make_request_async

CouponRef = Union[str, Coupon]


class CouponsService(BaseService):
    """Service for working with coupons.

    A coupon describes a discount (``percent_off`` or ``amount_off``) that can
    be applied to customers and subscriptions.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)
        self._base_url = "coupons"

    @traced(name="coupons_create")
    def create(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Coupon, StripeError]:
        """Create a coupon.

        Args:
            params (Mapping[str, Any]): Coupon attributes, e.g. ``duration`` and ``percent_off``.
            opts (Optional[Mapping[str, Any]]): Per-request options.

        Returns:
            Result[Coupon, StripeError]: The created coupon.
        """
        return make_request(self._create_spec(params, opts), self)

    @traced(name="coupons_create")
    async def create_async(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Coupon, StripeError]:
        return await make_request_async(self._create_spec(params, opts), self)

    @traced(name="coupons_retrieve")
    def retrieve(
        self, coupon: CouponRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Coupon, StripeError]:
        return make_request(self._retrieve_spec(coupon, opts), self)

    @traced(name="coupons_retrieve")
    async def retrieve_async(
        self, coupon: CouponRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Coupon, StripeError]:
        return await make_request_async(self._retrieve_spec(coupon, opts), self)

    @traced(name="coupons_update")
    def update(
        self,
        coupon: CouponRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Coupon, StripeError]:
        """Update a coupon. Only ``metadata`` can be changed after creation."""
        return make_request(self._update_spec(coupon, params, opts), self)

    @traced(name="coupons_update")
    async def update_async(
        self,
        coupon: CouponRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Coupon, StripeError]:
        return await make_request_async(self._update_spec(coupon, params, opts), self)

    @traced(name="coupons_delete")
    def delete(
        self, coupon: CouponRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Coupon, StripeError]:
        """Delete a coupon.

        Returns:
            Result[Coupon, StripeError]: The deleted coupon, with ``deleted`` set.
        """
        return make_request(self._delete_spec(coupon, opts), self)

    @traced(name="coupons_delete")
    async def delete_async(
        self, coupon: CouponRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Coupon, StripeError]:
        return await make_request_async(self._delete_spec(coupon, opts), self)

    @traced(name="coupons_list")
    def list(
        self,
        params: Optional[Mapping[str, Any]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[StripeList, StripeError]:
        return make_request(self._list_spec(params, opts), self)

    @traced(name="coupons_list")
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
        )

    def _retrieve_spec(
        self, coupon: CouponRef, opts: Optional[Mapping[str, Any]]
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(coupon)}")
            .put_method("get")
        )

    def _update_spec(
        self,
        coupon: CouponRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]],
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(coupon)}")
            .put_method("post")
            .put_params(params)
        )

    def _delete_spec(
        self, coupon: CouponRef, opts: Optional[Mapping[str, Any]]
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(coupon)}")
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
            .cast_to_id(["ending_before", "starting_after"])
        )
