"""
Interactive collection of missing variable values.
"""

from typing import Dict, List, Optional, Protocol

import click
from rich.console import Console
from rich.markup import escape


class Prompter(Protocol):
    """Anything that can supply a value for each requested name."""

    def prompt_for_values(self, names: List[str]) -> Dict[str, str]:
        ...


class ClickPrompter:
    """
    Asks on the terminal, one name at a time, in the order given.

    Empty answers are accepted. Ctrl-C or EOF raises click.Abort, which is
    left for click to report.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def prompt_for_values(self, names: List[str]) -> Dict[str, str]:
        self.console.print(
            f"[yellow]Missing environment variables: {escape(', '.join(names))}[/yellow]"
        )

        answers: Dict[str, str] = {}
        for name in names:
            answers[name] = click.prompt(
                f"Enter a value for {name}",
                default="",
                show_default=False,
                type=str,
            )
        return answers
