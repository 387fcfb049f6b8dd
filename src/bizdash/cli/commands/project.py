"""Project management commands."""

import click

from bizdash.cli.error_handling import format_day, get_gateway, handle_domain_error, wait_for_write
from bizdash.domain.errors import DomainError
from bizdash.domain.project import ProjectService


@click.group()
def project_group():
    """Manage projects."""
    pass


@project_group.command("add")
@click.argument("name")
@click.option("--description", help="Project description")
@click.option("--end-date", help="Delivery date (YYYY-MM-DD or relative like 'tomorrow')")
@click.pass_context
def add_project(ctx, name: str, description: str | None, end_date: str | None):
    """Add a project. Its start date is set to now."""
    service = ProjectService(get_gateway(ctx))
    try:
        pending = service.create_project(name=name, description=description, end_date=end_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
    wait_for_write(ctx, pending)
    click.echo(f"Created project '{name.strip()}' (ID: {pending.record_id})")


@project_group.command("list")
@click.pass_context
def list_projects(ctx):
    """List all projects."""
    projects = ProjectService(get_gateway(ctx)).list_projects()
    if not projects:
        click.echo("No projects found. Add one with 'project add'.")
        return

    click.echo(f"\n{'ID':<34} {'Name':<30} {'Started':<12} {'Delivery':<12}")
    click.echo("-" * 90)
    for p in projects:
        click.echo(
            f"{p.id:<34} {p.name[:30]:<30} {format_day(p.start_date):<12} {format_day(p.end_date):<12}"
        )
        if p.description:
            click.echo(f"{'':<35}{p.description}")


@project_group.command("update")
@click.argument("project_id")
@click.option("--name", help="New name")
@click.option("--description", help="New description")
@click.pass_context
def update_project(ctx, project_id: str, name: str | None, description: str | None):
    """Update a project's name or description."""
    if name is None and description is None:
        click.echo("Error: Nothing to update. Use --name and/or --description.", err=True)
        ctx.exit(1)
    service = ProjectService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.update_project(project_id, name=name, description=description))
    except DomainError as e:
        handle_domain_error(ctx, e)


@project_group.command("set-end-date")
@click.argument("project_id")
@click.argument("end_date", required=False)
@click.pass_context
def set_end_date(ctx, project_id: str, end_date: str | None):
    """Set a project's delivery date (omit END_DATE to clear it)."""
    service = ProjectService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.set_end_date(project_id, end_date))
    except DomainError as e:
        handle_domain_error(ctx, e)


@project_group.command("delete")
@click.argument("project_id")
@click.pass_context
def delete_project(ctx, project_id: str):
    """Delete a project."""
    service = ProjectService(get_gateway(ctx))
    try:
        wait_for_write(ctx, service.delete_project(project_id))
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
