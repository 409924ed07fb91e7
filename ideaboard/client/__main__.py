"""Command line client for the idea board.

Usage:
    python -m ideaboard.client list               # Print the board once
    python -m ideaboard.client post "Some idea"   # Submit an idea
    python -m ideaboard.client upvote 3           # Upvote idea 3
    python -m ideaboard.client watch              # Live board, polled every 5 s
"""

from __future__ import annotations

import time
from typing import Optional

import typer
from rich.console import Console
from rich.live import Live
from rich.table import Table

from ideaboard.client.board import POLL_INTERVAL_SECONDS, BoardState, IdeaBoardClient
from ideaboard.config import settings

app = typer.Typer(
    name="ideaboard",
    help="Idea board command line client",
    no_args_is_help=True,
)
console = Console(stderr=True)

ApiUrl = typer.Option(None, "--api-url", help="API base URL (defaults to $API_URL)")


def _client(api_url: Optional[str]) -> IdeaBoardClient:
    return IdeaBoardClient(api_url or settings.API_URL)


def render_board(state: BoardState) -> Table:
    table = Table(title=f"All Ideas ({len(state.ideas)})")
    table.add_column("ID", justify="right")
    table.add_column("Upvotes", justify="right")
    table.add_column("Idea")
    table.add_column("Posted")
    for idea in state.ideas:
        table.add_row(str(idea.id), str(idea.upvotes), idea.text, idea.created_at)
    if state.error:
        table.caption = f"[red]{state.error}[/red]"
    elif state.loading:
        table.caption = "Loading ideas..."
    elif not state.ideas:
        table.caption = "No ideas yet. Be the first to share one!"
    return table


@app.command("list")
def cmd_list(api_url: Optional[str] = ApiUrl) -> None:
    """Print the board once."""
    with _client(api_url) as client:
        client.refresh()
        console.print(render_board(client.state))
        if client.state.error:
            raise typer.Exit(1)


@app.command("post")
def cmd_post(text: str = typer.Argument(..., help="Idea text (max 280 characters)"), api_url: Optional[str] = ApiUrl) -> None:
    """Submit a new idea."""
    with _client(api_url) as client:
        if not client.submit(text):
            console.print(f"[red]{client.state.error}[/red]")
            raise typer.Exit(1)
        console.print(render_board(client.state))


@app.command("upvote")
def cmd_upvote(idea_id: int = typer.Argument(..., help="Idea id"), api_url: Optional[str] = ApiUrl) -> None:
    """Upvote an idea."""
    with _client(api_url) as client:
        if not client.upvote(idea_id):
            console.print(f"[red]{client.state.error}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]Upvoted idea {idea_id}[/green]")


@app.command("watch")
def cmd_watch(
    interval: float = typer.Option(POLL_INTERVAL_SECONDS, help="Seconds between polls"),
    api_url: Optional[str] = ApiUrl,
) -> None:
    """Show the board and keep it fresh until interrupted."""
    with _client(api_url) as client:
        client.start_polling(interval)
        try:
            with Live(render_board(client.state), console=console, refresh_per_second=2) as live:
                while True:
                    time.sleep(0.5)
                    live.update(render_board(client.state))
        except KeyboardInterrupt:
            pass


if __name__ == "__main__":
    app()
