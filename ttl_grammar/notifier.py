from typing import Optional

from rich.console import Console
from rich.markup import escape

from ttl_grammar.interfaces.notifier import INotifier


class ConsoleNotifier(INotifier):
    """Render notifications on a rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def info(self, source: str, detail: str, dismissable: bool = True) -> None:
        self.console.print(f"[bold cyan]{escape(source)}[/bold cyan] {escape(detail)}")

    def warning(self, source: str, detail: str, dismissable: bool = True) -> None:
        self.console.print(
            f"[bold yellow]{escape(source)} warning[/bold yellow] {escape(detail)}"
        )
