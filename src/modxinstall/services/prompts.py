"""Interactive input/output channel for modxinstall."""

from typing import Callable, Optional

import click
from rich.console import Console

from modxinstall.errors import ValidationError


class PromptChannel:
    """Asks questions on the terminal and echoes resolved values."""

    def __init__(self, console: Console):
        self.console = console

    def echo(self, message: str):
        self.console.print(message, markup=False, highlight=False)

    def notice(self, message: str):
        self.console.print(f"[green]{message}[/green]")

    def ask(
        self,
        question: str,
        default: Optional[str] = None,
        hidden: bool = False,
        validator: Optional[Callable[[str], str]] = None,
    ) -> str:
        def value_proc(value: str) -> str:
            if validator is None:
                return value
            try:
                return validator(value)
            except ValidationError as exc:
                if hidden:
                    # click hides the reason for rejected hidden input
                    self.console.print(f"[red]{exc}[/red]")
                raise click.BadParameter(str(exc)) from exc

        return click.prompt(
            question,
            default=default,
            hide_input=hidden,
            show_default=False,
            value_proc=value_proc,
        )
