"""Main entry point for warmtree"""

import sys
from rich.console import Console
from rich.markup import escape

from warmtree.cli.args import parse_args
from warmtree.config import Config
from warmtree.constants import COMPLETED_MESSAGE
from warmtree.logging_config import setup_logging
from warmtree.services.git import GitRunner, WorktreeService
from warmtree.ui import RichPrompter, WorktreeDisplay
from warmtree.workflow import WorktreeMenu

console = Console()
error_console = Console(stderr=True)


def main(argv=None):
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config.from_dict(vars(parsed_args))

        if config.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        runner = GitRunner(config.repo_path, config.git_executable)
        service = WorktreeService(runner)

        if config.list_only:
            WorktreeDisplay(console).display_worktree_table(service.list_worktrees())
            return 0

        menu = WorktreeMenu(service, RichPrompter(console), console)
        menu.run()

        console.print(COMPLETED_MESSAGE)
        return 0
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        if parsed_args.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
