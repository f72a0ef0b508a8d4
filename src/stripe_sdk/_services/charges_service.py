from typing import Any, Mapping, Optional, Union

from .._config import Config
from .._utils import RequestSpec, Result, get_id, new_request, traced
from ..models import Charge, StripeList
from ..models.errors import StripeError
from ._base_service import BaseService
from ._request_executor import make_request, make_request_async

ChargeRef = Union[str, Charge]


class ChargesService(BaseService):
    """Service for working with charges.

    A charge represents a payment made with a card or another payment source.
    You can create, retrieve, update, capture and list charges.

    Every operation returns a ``Result``: ``Ok`` holding the typed response,
    or ``Err`` holding a ``StripeError``.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)
        self._base_url = "charges"

    @traced(name="charges_create")
    def create(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Charge, StripeError]:
        """Create a charge.

        ``customer``, ``source``, ``on_behalf_of`` and ``destination.account``
        may be given as objects; only their IDs are sent.

        Args:
            params (Mapping[str, Any]): Charge attributes, e.g. ``amount`` and ``currency``.
            opts (Optional[Mapping[str, Any]]): Per-request options such as ``idempotency_key``.

        Returns:
            Result[Charge, StripeError]: The created charge.

        Examples:
            ```python
            from stripe_sdk import StripeSDK

            sdk = StripeSDK()

            sdk.charges.create({"amount": 500, "currency": "usd", "customer": customer})
            ```
        """
        return make_request(self._create_spec(params, opts), self)

    @traced(name="charges_create")
    async def create_async(
        self, params: Mapping[str, Any], opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Charge, StripeError]:
        """Asynchronously create a charge. See :meth:`create`."""
        return await make_request_async(self._create_spec(params, opts), self)

    @traced(name="charges_retrieve")
    def retrieve(
        self, charge: ChargeRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Charge, StripeError]:
        """Retrieve a charge by ID or object.

        Raises:
            InvalidIdentifierError: If ``charge`` carries no ID.
        """
        return make_request(self._retrieve_spec(charge, opts), self)

    @traced(name="charges_retrieve")
    async def retrieve_async(
        self, charge: ChargeRef, opts: Optional[Mapping[str, Any]] = None
    ) -> Result[Charge, StripeError]:
        return await make_request_async(self._retrieve_spec(charge, opts), self)

    @traced(name="charges_update")
    def update(
        self,
        charge: ChargeRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Charge, StripeError]:
        """Update a charge.

        Only ``description``, ``metadata``, ``receipt_email``,
        ``fraud_details``, ``shipping`` and ``transfer_group`` are accepted by
        the API; parameters not provided are left unchanged.
        """
        return make_request(self._update_spec(charge, params, opts), self)

    @traced(name="charges_update")
    async def update_async(
        self,
        charge: ChargeRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Charge, StripeError]:
        return await make_request_async(self._update_spec(charge, params, opts), self)

    @traced(name="charges_capture")
    def capture(
        self,
        charge: ChargeRef,
        params: Optional[Mapping[str, Any]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Charge, StripeError]:
        """Capture an uncaptured charge.

        This is the second half of the two-step payment flow, where the charge
        was first created with ``capture`` set to false. Uncaptured charges
        expire seven days after creation.

        Args:
            charge (ChargeRef): The charge ID or object.
            params (Optional[Mapping[str, Any]]): e.g. ``amount``, ``receipt_email``.
            opts (Optional[Mapping[str, Any]]): Per-request options.

        Returns:
            Result[Charge, StripeError]: The captured charge.
        """
        return make_request(self._capture_spec(charge, params, opts), self)

    @traced(name="charges_capture")
    async def capture_async(
        self,
        charge: ChargeRef,
        params: Optional[Mapping[str, Any]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Charge, StripeError]:
        return await make_request_async(
            self._capture_spec(charge, params, opts), self
        )

    @traced(name="charges_list")
    def list(
        self,
        params: Optional[Mapping[str, Any]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[StripeList, StripeError]:
        """List charges, most recent first.

        ``customer``, ``ending_before`` and ``starting_after`` may be given as
        objects.
        """
        return make_request(self._list_spec(params, opts), self)

    @traced(name="charges_list")
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
            .put_params(params)
            .put_method("post")
            .cast_path_to_id(["destination", "account"])
            .cast_to_id(["on_behalf_of", "customer", "source"])
        )

    def _retrieve_spec(
        self, charge: ChargeRef, opts: Optional[Mapping[str, Any]]
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(charge)}")
            .put_method("get")
        )

    def _update_spec(
        self,
        charge: ChargeRef,
        params: Mapping[str, Any],
        opts: Optional[Mapping[str, Any]],
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(charge)}")
            .put_method("post")
            .put_params(params)
        )

    def _capture_spec(
        self,
        charge: ChargeRef,
        params: Optional[Mapping[str, Any]],
        opts: Optional[Mapping[str, Any]],
    ) -> RequestSpec:
        return (
            new_request(opts)
            .put_endpoint(f"{self._base_url}/{get_id(charge)}/capture")
            .put_params(params or {})
            .put_method("post")
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
            .cast_to_id(["customer", "ending_before", "starting_after"])
        )
