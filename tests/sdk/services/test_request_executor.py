from dataclasses import dataclass
from typing import Any, Mapping, Optional
from unittest.mock import AsyncMock, Mock

import pytest

from stripe_sdk._services import make_request, make_request_async
from stripe_sdk._utils import Err, HttpMethod, Ok, Result, new_request
from stripe_sdk.models import Charge, ErrorCode, ErrorSource, StripeError


@dataclass
class Ref:
    id: str


class EchoTransport:
    """Records its inputs and answers with them."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def request(
        self,
        params: Mapping[str, Any],
        method: HttpMethod,
        endpoint: str,
        headers: Optional[Mapping[str, str]] = None,
        opts: Optional[Mapping[str, Any]] = None,
    ) -> Result[Any, StripeError]:
        self.calls.append((params, method, endpoint, headers, opts))
        return Ok({"params": params, "method": method.value, "endpoint": endpoint})


@pytest.fixture
def transport() -> EchoTransport:
    return EchoTransport()


class TestMakeRequest:
    def test_end_to_end(self, transport: EchoTransport):
        converter = Mock(return_value="converted")
        spec = (
            new_request({"api_key": "sk_other"})
            .put_endpoint("charges/ch_1/capture")
            .put_method("post")
            .put_param("amount", 100)
        )

        result = make_request(spec, transport, converter)

        assert transport.calls == [
            (
                {"amount": 100},
                HttpMethod.POST,
                "charges/ch_1/capture",
                {},
                {"api_key": "sk_other"},
            )
        ]
        converter.assert_called_once_with(
            {"params": {"amount": 100}, "method": "post", "endpoint": "charges/ch_1/capture"}
        )
        assert result == Ok("converted")

    def test_default_converter_builds_models(self):
        transport = Mock()
        transport.request.return_value = Ok({"id": "ch_1", "object": "charge"})
        spec = new_request().put_endpoint("charges/ch_1").put_method("get")

        result = make_request(spec, transport)

        assert isinstance(result, Ok)
        assert isinstance(result.value, Charge)
        assert result.value.id == "ch_1"

    def test_params_cast_before_sending(self, transport: EchoTransport):
        spec = (
            new_request()
            .put_endpoint("charges")
            .put_method("post")
            .cast_to_id(["customer"])
            .cast_path_to_id(["destination", "account"])
            .put_params(
                {
                    "customer": Ref(id="cus_1"),
                    "amount": 500,
                    "destination": {"account": Ref(id="acct_1"), "amount": 5},
                }
            )
        )

        make_request(spec, transport, lambda raw: raw)

        assert transport.calls[0][0] == {
            "customer": "cus_1",
            "amount": 500,
            "destination": {"account": "acct_1", "amount": 5},
        }

    def test_single_string_cast_key(self, transport: EchoTransport):
        spec = (
            new_request()
            .put_endpoint("charges")
            .put_method("post")
            .put_param("customer", Ref(id="cus_1"))
            .cast_to_id("customer")
        )

        make_request(spec, transport, lambda raw: raw)

        assert transport.calls[0][0] == {"customer": "cus_1"}

    def test_dynamic_endpoint_sees_cast_params(self, transport: EchoTransport):
        spec = (
            new_request()
            .put_endpoint(lambda p: f"customers/{p['customer']}/sources")
            .put_method("post")
            .put_param("customer", Ref(id="cus_1"))
            .cast_to_id(["customer"])
        )

        make_request(spec, transport, lambda raw: raw)

        assert transport.calls[0][2] == "customers/cus_1/sources"

    def test_dynamic_endpoint_invalid_result(self):
        transport = Mock()
        converter = Mock()
        spec = new_request().put_endpoint(lambda p: 42).put_method("get")

        result = make_request(spec, transport, converter)

        assert isinstance(result, Err)
        assert result.error.code == ErrorCode.ENDPOINT_FUN_INVALID_RESULT
        assert result.error.extra["result"] == 42
        transport.request.assert_not_called()
        converter.assert_not_called()

    def test_unset_endpoint(self):
        transport = Mock()
        converter = Mock()

        result = make_request(new_request(), transport, converter)

        assert isinstance(result, Err)
        assert result.error.code == ErrorCode.INVALID_ENDPOINT
        assert result.error.source == ErrorSource.INTERNAL
        transport.request.assert_not_called()
        converter.assert_not_called()

    def test_unset_method(self):
        transport = Mock()
        spec = new_request().put_endpoint("charges")

        result = make_request(spec, transport)

        assert isinstance(result, Err)
        assert result.error.code == ErrorCode.INVALID_METHOD
        assert result.error.source == ErrorSource.INTERNAL
        transport.request.assert_not_called()

    def test_transport_error_passed_through(self):
        error = StripeError(
            source=ErrorSource.STRIPE,
            code=ErrorCode.NOT_FOUND,
            message="No such charge: ch_missing",
            status_code=404,
        )
        transport = Mock()
        transport.request.return_value = Err(error)
        converter = Mock()
        spec = new_request().put_endpoint("charges/ch_missing").put_method("get")

        result = make_request(spec, transport, converter)

        assert isinstance(result, Err)
        assert result.error is error
        converter.assert_not_called()

    def test_spec_not_modified_by_execution(self, transport: EchoTransport):
        spec = (
            new_request()
            .put_endpoint("charges")
            .put_method("post")
            .put_param("customer", Ref(id="cus_1"))
            .cast_to_id(["customer"])
        )

        make_request(spec, transport, lambda raw: raw)

        assert spec.params == {"customer": Ref(id="cus_1")}


class TestMakeRequestAsync:
    @pytest.mark.anyio
    async def test_end_to_end(self):
        transport = Mock()
        transport.request_async = AsyncMock(return_value=Ok({"ok": True}))
        spec = (
            new_request()
            .put_endpoint(lambda p: f"charges/{p['charge']}/capture")
            .put_method("post")
            .put_params({"charge": Ref(id="ch_1"), "amount": 100})
            .cast_to_id(["charge"])
        )

        result = await make_request_async(spec, transport, lambda raw: raw)

        assert result == Ok({"ok": True})
        transport.request_async.assert_awaited_once_with(
            {"charge": "ch_1", "amount": 100},
            HttpMethod.POST,
            "charges/ch_1/capture",
            {},
            {},
        )

    @pytest.mark.anyio
    async def test_unset_endpoint(self):
        transport = Mock()
        transport.request_async = AsyncMock()

        result = await make_request_async(new_request().put_method("get"), transport)

        assert isinstance(result, Err)
        assert result.error.code == ErrorCode.INVALID_ENDPOINT
        transport.request_async.assert_not_awaited()

    @pytest.mark.anyio
    async def test_transport_error_passed_through(self):
        error = StripeError(
            source=ErrorSource.NETWORK,
            code=ErrorCode.NETWORK_ERROR,
            message="ConnectError: boom",
        )
        transport = Mock()
        transport.request_async = AsyncMock(return_value=Err(error))
        spec = new_request().put_endpoint("skus").put_method("get")

        result = await make_request_async(spec, transport)

        assert result == Err(error)
