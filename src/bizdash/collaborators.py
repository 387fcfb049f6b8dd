"""Outward collaborators: notifications and clipboard.

The core only ever talks to these protocols. The CLI plugs in echoing
implementations.
"""

import threading
from typing import Protocol

import click


class Notifier(Protocol):
    """Receives short confirmation and failure messages. Fire-and-forget."""

    def notify(self, title: str, description: str) -> None:
        ...


class Clipboard(Protocol):
    """Accepts a plain text value."""

    def copy(self, text: str) -> None:
        ...


class NullNotifier:
    """Drops every notification."""

    def notify(self, title: str, description: str) -> None:
        return None


class EchoNotifier:
    """Prints notifications to the terminal.

    Titles ending in "failed" go to stderr and are printed even when quiet.
    """

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self._lock = threading.Lock()

    def notify(self, title: str, description: str) -> None:
        failed = title.lower().endswith("failed")
        if self.quiet and not failed:
            return
        with self._lock:
            click.echo(f"{title}: {description}", err=failed)


class EchoClipboard:
    """Terminal stand-in for a system clipboard: prints the copied text."""

    def copy(self, text: str) -> None:
        click.echo(text)

