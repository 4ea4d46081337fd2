# aurwalk/modules/ui.py
"""
Console presentation on top of rich: status lines, result tables and prompts.
Core components only call confirm(), choose() and the status helpers.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table


def make_console(no_color: bool = False) -> Console:
    if no_color:
        return Console(color_system=None, force_terminal=False, highlight=False)
    return Console()


class ConsoleUI:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    # status lines
    def info(self, message: str):
        self.console.print(f"[blue]::[/blue] {message}")

    def success(self, message: str):
        self.console.print(f"[green]::[/green] {message}")

    def warning(self, message: str):
        self.console.print(f"[yellow]:: {message}[/yellow]")

    def error(self, message: str):
        self.console.print(f"[red]:: {message}[/red]")

    # prompts
    def confirm(self, question: str, assume_yes: bool = False) -> bool:
        if assume_yes:
            self.console.print(f"[bold]{question}[/bold] [dim](auto-confirmed)[/dim]")
            return True
        return Confirm.ask(question, default=True, console=self.console)

    def choose(self, records: Sequence) -> Optional[object]:
        """
        Numbered selection among records; None on empty or invalid input.
        """
        if not records:
            return None
        self.show_records(records, numbered=True)
        answer = Prompt.ask(f"Select a package [1-{len(records)}] (empty to skip)",
                            default="", show_default=False, console=self.console).strip()
        if not answer:
            return None
        if not answer.isdigit() or not 1 <= int(answer) <= len(records):
            self.warning(f"Invalid selection: {answer}")
            return None
        return records[int(answer) - 1]

    # tables
    def show_records(self, records: Sequence, title: str = "AUR packages", numbered: bool = False):
        table = Table(title=title, show_lines=False)
        if numbered:
            table.add_column("#", justify="right")
        table.add_column("Package", style="bold")
        table.add_column("Version")
        table.add_column("Votes", justify="right")
        table.add_column("Popularity", justify="right")
        table.add_column("Description", overflow="fold")
        for idx, rec in enumerate(records, 1):
            row = [rec.name, rec.version, str(rec.votes), f"{rec.popularity:.2f}", rec.description]
            if numbered:
                row.insert(0, str(idx))
            table.add_row(*row)
        self.console.print(table)

    def show_upgrades(self, candidates: List[Tuple[str, str, str]]):
        table = Table(title="Upgrades available")
        table.add_column("Package", style="bold")
        table.add_column("Installed", style="red")
        table.add_column("AUR", style="green")
        for name, local, remote in candidates:
            table.add_row(name, local, remote)
        self.console.print(table)

    def show_cache_entries(self, names: List[str], total_size: Optional[str] = None):
        table = Table(title="Cached recipes of packages not installed")
        table.add_column("Package", style="bold")
        for name in names:
            table.add_row(name)
        self.console.print(table)
        if total_size is not None:
            self.console.print(f"Disk usage: [bold]{total_size}[/bold]")
