import click

from .._utils.constants import SDK_VERSION
from .cli_request import request


@click.group()
@click.version_option(SDK_VERSION, prog_name="stripe-sdk")
def cli() -> None:
    """Command line access to the API through the SDK request core."""


cli.add_command(request)
