"""CLI entrypoint."""

import os

import click
from rich.console import Console
from rich.markup import escape

from seasonrename.errors import InvariantViolation, QuitRequested
from seasonrename.patterns import PatternLibrary
from seasonrename.processors.confirmation_gate import ConfirmationGate
from seasonrename.processors.rename_executor import RenameExecutor
from seasonrename.processors.rename_planner import RenamePlanner
from seasonrename.processors.tree_walker import TreeWalker


console = Console()


class RenameSession:
    """Plan, confirm and apply renames for each season directory of a walk."""

    def __init__(self, patterns: PatternLibrary, gate: ConfirmationGate) -> None:
        self.planner = RenamePlanner(patterns)
        self.executor = RenameExecutor()
        self.gate = gate
        self.directories_reviewed = 0
        self.files_renamed = 0

    def handle_season_directory(self, season_directory: str) -> None:
        plan = self.planner.plan(season_directory)
        if not plan:
            return

        # Only plans with something to rename are put to the operator
        if plan.renames:
            self.directories_reviewed += 1
        if not self.gate.review(plan):
            return

        renamed = self.executor.execute(plan)
        self.files_renamed += renamed
        console.print(f"[green]Renamed {renamed} file(s).[/green]")


@click.command(context_settings=dict(show_default=True))
def cli() -> None:
    """Rename episodes in season folders to SxxEyy names.

    Walks the current directory, finds every folder whose path contains
    "season" and proposes renaming its entries after the first two numbers
    in their names, e.g. "Show 1x05.mkv" becomes "S01E05.mkv". Nothing is
    renamed without confirmation.
    """
    root = os.getcwd()
    gate = ConfirmationGate(root=root, console=console)

    console.clear()
    try:
        gate.confirm_start()
        console.clear()

        patterns = PatternLibrary()
        session = RenameSession(patterns, gate)
        TreeWalker(patterns, on_season_directory=session.handle_season_directory).walk(root)
    except QuitRequested:
        console.print("[yellow]Quit. No further changes were made.[/yellow]")
        return
    except InvariantViolation as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1) from e

    console.print(
        f"[bold green]All done.[/bold green] Renamed [cyan]{session.files_renamed}[/cyan] file(s) "
        f"in [cyan]{session.directories_reviewed}[/cyan] season folder(s) reviewed."
    )
