"""Terminal prompts used by the worktree menu."""

from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt


class Prompter(Protocol):
    """The three kinds of question the menu asks the user."""

    def select(self, prompt: str, options: Sequence[str]) -> int:
        """Return the zero-based index of the chosen option."""
        ...

    def text(self, prompt: str) -> str:
        ...

    def confirm(self, prompt: str) -> bool:
        ...


class RichPrompter:
    """Prompter backed by rich's Prompt and Confirm."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def select(self, prompt: str, options: Sequence[str]) -> int:
        """Print numbered options and ask for one of their numbers."""
        for index, option in enumerate(options):
            self.console.print(f"[cyan]{index}.[/cyan] {escape(option)}", highlight=False)
        choice = Prompt.ask(
            f"[bold]{escape(prompt)}[/bold]",
            choices=[str(i) for i in range(len(options))],
            default="0",
            console=self.console,
        )
        return int(choice)

    def text(self, prompt: str) -> str:
        return Prompt.ask(f"[bold]{escape(prompt)}[/bold]", console=self.console)

    def confirm(self, prompt: str) -> bool:
        return Confirm.ask(f"[cyan]{escape(prompt)}[/cyan]", console=self.console)
