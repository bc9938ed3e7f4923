import click
import uvicorn

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.order_commands import order_list, order_show
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_stock,
    product_update,
)
from storefront.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog, carts and checkout"""
    cfg = settings()
    configure_logging(cfg.log_level, cfg.log_json)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def order() -> None:
    """Inspect orders."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, type=int, show_default=True)
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API."""
    uvicorn.run(
        "storefront.infrastructure.bootstrap:build_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


# Register subcommands
order.add_command(order_list)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_stock)
product.add_command(product_update)
