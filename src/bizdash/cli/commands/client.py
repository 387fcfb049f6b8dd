"""Client management commands."""

import click

from bizdash.cli.error_handling import get_gateway, handle_domain_error, wait_for_write
from bizdash.domain.client import ClientService
from bizdash.domain.errors import DomainError


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("add")
@click.argument("name")
@click.option("--phone", help="Phone number")
@click.pass_context
def add_client(ctx, name: str, phone: str | None):
    """Add a client."""
    service = ClientService(get_gateway(ctx))
    try:
        pending = service.create_client(name=name, phone=phone)
    except DomainError as e:
        handle_domain_error(ctx, e)
    wait_for_write(ctx, pending)
    click.echo(f"Created client '{name.strip()}' (ID: {pending.record_id})")


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List all clients."""
    clients = ClientService(get_gateway(ctx)).list_clients()
    if not clients:
        click.echo("No clients found. Add one with 'client add'.")
        return

    click.echo(f"\n{'ID':<34} {'Name':<30} {'Phone':<20}")
    click.echo("-" * 86)
    for c in clients:
        click.echo(f"{c.id:<34} {c.name[:30]:<30} {(c.phone or '-'):<20}")


@client_group.command("rename")
@click.argument("client_id")
@click.argument("name")
@click.pass_context
def rename_client(ctx, client_id: str, name: str):
    """Change a client's name."""
    service = ClientService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.rename_client(client_id, name))
    except DomainError as e:
        handle_domain_error(ctx, e)


@client_group.command("set-phone")
@click.argument("client_id")
@click.argument("phone", required=False)
@click.pass_context
def set_phone(ctx, client_id: str, phone: str | None):
    """Change a client's phone number (omit PHONE to clear it)."""
    service = ClientService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.set_phone(client_id, phone))
    except DomainError as e:
        handle_domain_error(ctx, e)


@client_group.command("delete")
@click.argument("client_id")
@click.pass_context
def delete_client(ctx, client_id: str):
    """Delete a client."""
    service = ClientService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.delete_client(client_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
