import logging

import typer
from rich.console import Console
from rich.markup import escape

from tasklist.logging_setup import setup_logging
from tasklist.TODO.storage import PersistenceError
from tasklist.TODO.todo_app import TaskApp

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="A command-line to-do list kept in tasklist.json.")


@app.command()
def main():
    """Start the interactive task list (add, print, edit, delete, end)."""
    setup_logging()
    console = Console(highlight=False)
    task_app = TaskApp(console=console)
    try:
        task_app.main_menu()
    except PersistenceError as e:
        logger.debug("Task file error", exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
