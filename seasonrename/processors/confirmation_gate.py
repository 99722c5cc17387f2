"""Interactive confirmation prompts."""

from collections.abc import Callable
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from seasonrename.errors import QuitRequested
from seasonrename.models.rename import RenamePlan


PLAN_PROMPT = "should these changes be made? ([y]es/[n]o/[q]uit)"


def ask(text: str) -> str:
    """Show `text` and read one line from the console."""
    return click.prompt(text, default="", show_default=False, prompt_suffix="\n")


class ConfirmationGate:
    """Ask the operator before anything is renamed.

    Both prompts block on a line of console input. Answering quit at either of
    them raises QuitRequested, which ends the whole run.
    """

    def __init__(
        self,
        root: str,
        console: Console | None = None,
        read_line: Callable[[str], str] = ask,
    ) -> None:
        """Initialize the gate.

        Args:
            root: Directory the program runs in. Planned paths are shown relative to it.
            console: Console used for display. Defaults to stdout.
            read_line: Prompt function returning the operator's answer.
        """
        self.root = root
        self.console = console or Console()
        self.read_line = read_line

    def confirm_start(self) -> None:
        """Loop until the operator confirms the working directory.

        Raises:
            QuitRequested: If the operator types `quit`.
        """
        message = f'program running in "{self.root}" confirm this is correct (type "yes")'
        while True:
            answer = self.read_line(message).strip()
            if answer.casefold() == "yes":
                return
            if answer.casefold() == "quit":
                raise QuitRequested()
            message = f'you entered "{answer}"\nenter "yes" to confirm or "quit" to end the program'

    def review(self, plan: RenamePlan) -> bool:
        """Show a plan and ask whether to apply it.

        Failed candidates are listed for visibility, but without at least one
        proposed rename the operator is not asked anything.

        Returns:
            True if the renames should be applied.

        Raises:
            QuitRequested: If the operator answers `q`.
        """
        if not plan:
            return False

        failed = plan.failed
        renames = plan.renames

        self.console.clear()
        self.console.print(f'inside of "{escape(plan.season_directory)}"', soft_wrap=True)
        self.console.print()

        if failed:
            self.console.print("[red]failed to rename the following[/red]")
            for candidate in failed:
                self.console.print(f'"{escape(self._relative(candidate.original))}"', soft_wrap=True)
            self.console.print("\n")

        if not renames:
            return False

        self.console.print("[green]making the following changes[/green]")
        for candidate in renames:
            original = escape(self._relative(candidate.original))
            proposed = escape(self._relative(candidate.proposed))
            self.console.print(f'"{original}" -> "{proposed}"', soft_wrap=True)

        while True:
            answer = self.read_line(PLAN_PROMPT)
            choice = answer[:1].lower()
            if choice == "y":
                return True
            if choice == "n":
                return False
            if choice == "q":
                raise QuitRequested()

    def _relative(self, path: str) -> str:
        try:
            return str(Path(path).relative_to(self.root))
        except ValueError:
            return path
