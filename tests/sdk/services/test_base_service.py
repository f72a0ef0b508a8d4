from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs

import httpx
import pytest
from httpx import Headers
from pytest_httpx import HTTPXMock

from stripe_sdk._config import Config
from stripe_sdk._services._base_service import BaseService
from stripe_sdk._utils import Err, HttpMethod, Ok
from stripe_sdk._utils.constants import HEADER_USER_AGENT, SDK_VERSION
from stripe_sdk.models import ErrorCode, ErrorSource


@pytest.fixture
def service(config: Config) -> BaseService:
    return BaseService(config=config)


class TestBaseService:
    def test_init_base_service(self, service: BaseService):
        assert service is not None

    def test_base_service_default_headers(
        self, service: BaseService, secret: str, api_version: str
    ):
        assert service.default_headers == {
            "Accept": "application/json",
            HEADER_USER_AGENT: f"StripeSDK/Python/{SDK_VERSION}",
            "Stripe-Version": api_version,
            "Authorization": f"Bearer {secret}",
        }

    class TestRequest:
        def test_get_sends_query_params(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            secret: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/charges?limit=3&created%5Bgt%5D=100",
                status_code=200,
                json={"object": "list", "data": []},
            )

            result = service.request(
                {"limit": 3, "created": {"gt": 100}}, HttpMethod.GET, "charges"
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.headers["Authorization"] == f"Bearer {secret}"
            assert sent_request.content == b""
            assert result == Ok({"object": "list", "data": []})

        def test_post_sends_form_body(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/charges/ch_1/capture",
                method="POST",
                status_code=200,
                json={"id": "ch_1", "object": "charge"},
            )

            result = service.request(
                {"amount": 100, "metadata": {"order": 6}, "capture": True},
                HttpMethod.POST,
                "charges/ch_1/capture",
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "POST"
            assert sent_request.headers["Content-Type"] == "application/x-www-form-urlencoded"
            assert parse_qs(sent_request.content.decode()) == {
                "amount": ["100"],
                "metadata[order]": ["6"],
                "capture": ["true"],
            }
            assert result == Ok({"id": "ch_1", "object": "charge"})

        def test_delete(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/coupons/25OFF",
                method="DELETE",
                json={"id": "25OFF", "deleted": True},
            )

            result = service.request({}, HttpMethod.DELETE, "coupons/25OFF")

            assert result == Ok({"id": "25OFF", "deleted": True})

        def test_options_become_headers(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/charges", json={})

            service.request(
                {},
                HttpMethod.POST,
                "charges",
                {},
                {
                    "api_key": "sk_connected",
                    "api_version": "2020-08-27",
                    "connect_account": "acct_1",
                    "idempotency_key": "key-1",
                },
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.headers["Authorization"] == "Bearer sk_connected"
            assert sent_request.headers["Stripe-Version"] == "2020-08-27"
            assert sent_request.headers["Stripe-Account"] == "acct_1"
            assert sent_request.headers["Idempotency-Key"] == "key-1"

        def test_api_error_mapped(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/charges/ch_missing",
                status_code=404,
                headers={"Request-Id": "req_123"},
                json={
                    "error": {
                        "type": "invalid_request_error",
                        "message": "No such charge: ch_missing",
                        "param": "id",
                    }
                },
            )

            result = service.request({}, HttpMethod.GET, "charges/ch_missing")

            assert isinstance(result, Err)
            error = result.error
            assert error.source == ErrorSource.STRIPE
            assert error.code == ErrorCode.NOT_FOUND
            assert error.status_code == 404
            assert error.request_id == "req_123"
            assert error.message == "No such charge: ch_missing"
            assert error.extra["type"] == "invalid_request_error"
            assert error.extra["param"] == "id"
            assert error.user_message is None

        def test_card_error_has_user_message(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/charges",
                status_code=402,
                json={
                    "error": {
                        "type": "card_error",
                        "code": "card_declined",
                        "decline_code": "insufficient_funds",
                        "message": "Your card has insufficient funds.",
                    }
                },
            )

            result = service.request({"amount": 1}, HttpMethod.POST, "charges")

            assert isinstance(result, Err)
            assert result.error.code == ErrorCode.REQUEST_FAILED
            assert result.error.user_message == "Your card has insufficient funds."
            assert result.error.extra["decline_code"] == "insufficient_funds"

        def test_non_json_error_body(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/skus", status_code=502, text="Bad Gateway"
            )

            result = service.request({}, HttpMethod.GET, "skus")

            assert isinstance(result, Err)
            assert result.error.code == ErrorCode.SERVER_ERROR
            assert result.error.extra["body"] == "Bad Gateway"

        def test_network_error(self, httpx_mock: HTTPXMock, service: BaseService):
            httpx_mock.add_exception(httpx.ConnectError("connection refused"))

            result = service.request({}, HttpMethod.GET, "charges")

            assert isinstance(result, Err)
            assert result.error.source == ErrorSource.NETWORK
            assert result.error.code == ErrorCode.NETWORK_ERROR
            assert "connection refused" in result.error.message

        def test_server_error_retried(
            self,
            httpx_mock: HTTPXMock,
            base_url: str,
            secret: str,
        ):
            service = BaseService(
                config=Config(base_url=base_url, secret=secret, max_network_retries=1)
            )
            httpx_mock.add_response(url=f"{base_url}/charges", status_code=500, json={})
            httpx_mock.add_response(url=f"{base_url}/charges", json={"object": "list"})

            result = service.request({}, HttpMethod.GET, "charges")

            assert result == Ok({"object": "list"})
            assert len(httpx_mock.get_requests()) == 2

        def test_rate_limit_retried(
            self,
            httpx_mock: HTTPXMock,
            base_url: str,
            secret: str,
        ):
            service = BaseService(
                config=Config(base_url=base_url, secret=secret, max_network_retries=1)
            )
            httpx_mock.add_response(
                url=f"{base_url}/coupons", status_code=429, headers={"Retry-After": "0"}
            )
            httpx_mock.add_response(url=f"{base_url}/coupons", json={"object": "list"})

            result = service.request({}, HttpMethod.GET, "coupons")

            assert result == Ok({"object": "list"})
            assert len(httpx_mock.get_requests()) == 2

        def test_rate_limit_exhausted(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(url=f"{base_url}/coupons", status_code=429, json={})

            result = service.request({}, HttpMethod.GET, "coupons")

            assert isinstance(result, Err)
            assert result.error.code == ErrorCode.TOO_MANY_REQUESTS

    class TestRequestAsync:
        @pytest.mark.anyio
        async def test_simple_request_async(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            secret: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/skus/sku_1",
                method="POST",
                status_code=200,
                json={"id": "sku_1", "object": "sku"},
            )

            result = await service.request_async(
                {"price": 1500}, HttpMethod.POST, "skus/sku_1"
            )

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "POST"
            assert sent_request.headers["Authorization"] == f"Bearer {secret}"
            assert parse_qs(sent_request.content.decode()) == {"price": ["1500"]}
            assert result == Ok({"id": "sku_1", "object": "sku"})

        @pytest.mark.anyio
        async def test_api_error_async(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
        ):
            httpx_mock.add_response(
                url=f"{base_url}/skus",
                status_code=401,
                json={"error": {"type": "invalid_request_error", "message": "Invalid API Key"}},
            )

            result = await service.request_async({}, HttpMethod.GET, "skus")

            assert isinstance(result, Err)
            assert result.error.code == ErrorCode.UNAUTHORIZED
            assert result.error.message == "Invalid API Key"

    class TestRetryAfterParsing:
        """Tests for the _parse_retry_after method."""

        def test_parse_retry_after_with_seconds(self, service: BaseService):
            headers = Headers({"Retry-After": "5"})
            assert service._parse_retry_after(headers) == 5.0

        def test_parse_retry_after_with_date(self, service: BaseService):
            future_time = datetime.now(timezone.utc) + timedelta(seconds=10)
            retry_after_date = future_time.strftime("%a, %d %b %Y %H:%M:%S GMT")
            headers = Headers({"Retry-After": retry_after_date})
            result = service._parse_retry_after(headers)
            assert 9.0 <= result <= 11.0

        def test_parse_retry_after_with_past_date(self, service: BaseService):
            past_time = datetime.now(timezone.utc) - timedelta(seconds=10)
            retry_after_date = past_time.strftime("%a, %d %b %Y %H:%M:%S GMT")
            headers = Headers({"Retry-After": retry_after_date})
            assert service._parse_retry_after(headers) == 0.0

        def test_parse_retry_after_missing(self, service: BaseService):
            assert service._parse_retry_after(Headers({})) == 1.0

        def test_parse_retry_after_invalid(self, service: BaseService):
            headers = Headers({"Retry-After": "invalid"})
            assert service._parse_retry_after(headers) == 1.0


class TestClose:
    def test_close(self, service: BaseService):
        service.close()

        assert service._client.is_closed

    @pytest.mark.anyio
    async def test_aclose(self, service: BaseService):
        await service.aclose()

        assert service._client.is_closed
        assert service._client_async.is_closed
