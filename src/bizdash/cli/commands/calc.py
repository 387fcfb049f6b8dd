"""Calculator command."""

import click

from bizdash.collaborators import EchoClipboard, EchoNotifier
from bizdash.domain.calculator import Calculator


@click.command("calc")
@click.argument("keys")
@click.option("--copy", is_flag=True, help="Copy the result (printed on its own line)")
@click.pass_context
def calc_command(ctx, keys: str, copy: bool):
    """Press KEYS on the calculator and show the display.

    KEYS is a sequence such as "2+3*4=" or "50%". Use C to clear; spaces
    are ignored.

    \b
    Examples:
      bizdash calc "2+3*4="
      bizdash calc "200*15%=" --copy
    """
    calculator = Calculator(clipboard=EchoClipboard(), notifier=EchoNotifier(quiet=ctx.obj.get("quiet", False)))
    try:
        calculator.press_all(key for key in keys if not key.isspace())
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(calculator.display)
    if copy and not calculator.copy_result():
        click.echo("Nothing to copy.", err=True)


def register_commands(cli):
    """Register calc command with main CLI."""
    cli.add_command(calc_command)
