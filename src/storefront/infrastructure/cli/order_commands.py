"""CLI commands for inspecting orders."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (paid={'yes' if dto.paid else 'no'})")
    click.echo(f"User:     {dto.user_id if dto.user_id is not None else '-'}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{'$' + item.unit_price:>10} {'$' + item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {'$' + dto.total:>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", type=int, default=None, help="Only this user's orders.")
def order_list(user_id: int | None) -> None:
    """List orders."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle(user_id=user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'User':<6} {'Items':>5} {'Total':>10}  Created")
    click.echo("-" * 60)
    for o in orders:
        user = str(o.user_id) if o.user_id is not None else "-"
        click.echo(
            f"{o.id:<6} {user:<6} {len(o.items):>5} {'$' + o.total:>10}  {o.created_at}"
        )
