"""Kentico Delivery CLI entry point.

Fetches content from the Delivery API and prints it as JSON on stdout;
errors are reported on stderr.
"""

import logging
import sys
from typing import List, Optional, Tuple

import click
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from kentico_delivery import __version__
from kentico_delivery.client import DeliveryClient
from kentico_delivery.config import DeliveryOptions
from kentico_delivery.exceptions import DeliveryError

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def parse_params(values: Tuple[str, ...]) -> List[Tuple[str, str]]:
    """Turn repeated ``NAME=VALUE`` options into ordered parameter pairs."""
    params = []
    for value in values:
        name, sep, param_value = value.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"'{value}' is not in NAME=VALUE form", param_hint="--param"
            )
        params.append((name, param_value))
    return params


param_option = click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    metavar="NAME=VALUE",
    help="Query parameter, may be repeated (e.g. -p limit=3 -p system.type=article)",
)


@click.group()
@click.version_option(version=__version__, prog_name="kentico-delivery")
@click.option("--project-id", envvar="KENTICO_PROJECT_ID", help="Kentico Cloud project identifier")
@click.option("--preview-api-key", envvar="KENTICO_PREVIEW_API_KEY", help="Preview API key")
@click.option(
    "--preview/--production",
    "use_preview_api",
    default=None,
    help="Use the Preview API (requires a Preview API key)",
)
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    project_id: Optional[str],
    preview_api_key: Optional[str],
    use_preview_api: Optional[bool],
    timeout: Optional[float],
    verbose: bool,
) -> None:
    """Retrieve content from the Kentico Cloud Delivery API.

    \b
    Examples:
        kentico-delivery --project-id <uuid> items -p limit=3
        kentico-delivery item on_roasts
        kentico-delivery --preview type article
        kentico-delivery element article title
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["options"] = dict(
        project_id=project_id,
        preview_api_key=preview_api_key,
        use_preview_api=use_preview_api,
        timeout=timeout,
    )


def create_client(ctx: click.Context) -> DeliveryClient:
    """Build a client from CLI options with environment fallbacks."""
    try:
        options = DeliveryOptions.from_env(**ctx.obj["options"])
    except ValidationError as e:
        raise click.UsageError(f"Invalid options: {e}")
    return DeliveryClient(options)


def run_query(ctx: click.Context, query) -> None:
    """Run a query against a fresh client and print the result."""
    try:
        with create_client(ctx) as client:
            result: BaseModel = query(client)
    except DeliveryError as e:
        logger.debug("Request failed", exc_info=True)
        console.print(f"[red]Error: {escape(e.message)}[/red]", soft_wrap=True)
        if e.help_text:
            console.print(f"[yellow]{escape(e.help_text)}[/yellow]", soft_wrap=True)
        sys.exit(1)
    click.echo(result.model_dump_json(indent=2, exclude_none=True))


@cli.command()
@param_option
@click.pass_context
def items(ctx: click.Context, params: Tuple[str, ...]) -> None:
    """List content items."""
    query_params = parse_params(params)
    run_query(ctx, lambda client: client.get_items(query_params))


@cli.command()
@click.argument("codename")
@param_option
@click.pass_context
def item(ctx: click.Context, codename: str, params: Tuple[str, ...]) -> None:
    """Show a single content item."""
    query_params = parse_params(params)
    run_query(ctx, lambda client: client.get_item(codename, query_params))


@cli.command()
@param_option
@click.pass_context
def types(ctx: click.Context, params: Tuple[str, ...]) -> None:
    """List content types."""
    query_params = parse_params(params)
    run_query(ctx, lambda client: client.get_types(query_params))


@cli.command("type")
@click.argument("codename")
@param_option
@click.pass_context
def type_(ctx: click.Context, codename: str, params: Tuple[str, ...]) -> None:
    """Show a single content type."""
    query_params = parse_params(params)
    run_query(ctx, lambda client: client.get_type(codename, query_params))


@cli.command()
@click.argument("type_codename")
@click.argument("element_codename")
@param_option
@click.pass_context
def element(
    ctx: click.Context, type_codename: str, element_codename: str, params: Tuple[str, ...]
) -> None:
    """Show a single element of a content type."""
    query_params = parse_params(params)
    run_query(
        ctx,
        lambda client: client.get_content_type_element(
            type_codename, element_codename, query_params
        ),
    )


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
