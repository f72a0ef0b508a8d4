import json
from typing import Optional, Tuple

import click
from rich.console import Console

from .._stripe_sdk import StripeSDK
from .._utils import Err, HttpMethod, new_request
from ..models.errors import ApiKeyMissingError
from ._utils import parse_params, serialize_object

console = Console()
err_console = Console(stderr=True)


@click.command()
@click.argument(
    "method", type=click.Choice([m.value for m in HttpMethod], case_sensitive=False)
)
@click.argument("endpoint")
@click.option("--param", "-p", "params", multiple=True, help="Parameter as key=value; dots nest keys.")
@click.option("--api-key", envvar="STRIPE_API_KEY", help="API key; defaults to STRIPE_API_KEY.")
@click.option("--base-url", help="Override the API base URL.")
@click.option("--idempotency-key", help="Idempotency key for POST requests.")
@click.option("--connect-account", help="Act on behalf of a connected account.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def request(
    method: str,
    endpoint: str,
    params: Tuple[str, ...],
    api_key: Optional[str],
    base_url: Optional[str],
    idempotency_key: Optional[str],
    connect_account: Optional[str],
    debug: bool,
) -> None:
    """Send METHOD to ENDPOINT and print the response as JSON."""
    try:
        sdk = StripeSDK(api_key=api_key, base_url=base_url, debug=debug)
    except (ApiKeyMissingError, ValueError) as e:
        raise click.UsageError(str(e)) from e

    opts = {
        "idempotency_key": idempotency_key,
        "connect_account": connect_account,
    }
    spec = (
        new_request({k: v for k, v in opts.items() if v})
        .put_endpoint(endpoint.lstrip("/"))
        .put_method(method)
        .put_params(parse_params(params))
    )

    with sdk:
        outcome = sdk.api_client.execute(spec)
    if isinstance(outcome, Err):
        error = outcome.error
        err_console.print(
            f"[red]{error.source.value}/{error.code.value}[/red]: {error.message}"
        )
        raise SystemExit(1)

    console.print_json(json.dumps(serialize_object(outcome.value)))
