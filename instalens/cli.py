"""Command-line interface for instalens."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from instalens import Aggregator, AggregatorConfig, save_json, __version__
from instalens.core.exporter import save_csv
from instalens.exceptions import InstalensError

app = typer.Typer(
    name="instalens",
    help="Instagram profile lookup and engagement metrics",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"instalens version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """instalens - Instagram profile lookup and engagement metrics."""
    pass


@app.command()
def lookup(
    username: str = typer.Argument(..., help="Instagram username to look up"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output directory for JSON (and CSV) files"
    ),
    csv: bool = typer.Option(
        False, "--csv", help="Also save posts as CSV (requires pandas and --output)"
    ),
    summary: bool = typer.Option(
        True, "--summary/--no-summary", help="Request a generated profile summary"
    ),
):
    """Look up a profile with engagement metrics and recent posts."""
    config = AggregatorConfig(summary_enabled=summary)

    async def run():
        async with Aggregator(config) as aggregator:
            return await aggregator.lookup(username)

    try:
        result = asyncio.run(run())
    except InstalensError as e:
        console.print(f"[red]Lookup failed: {e}[/red]")
        raise typer.Exit(1)

    _print_result(result)

    if output:
        filepath = save_json(result, output / f"{result.profile.username}.json")
        console.print(f"[dim]Saved to {filepath}[/dim]")
        if csv:
            csv_path = save_csv(result, output / f"{result.profile.username}_posts.csv")
            console.print(f"[dim]Saved to {csv_path}[/dim]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
):
    """Run the HTTP API server."""
    import uvicorn

    from instalens.api import create_app

    config = AggregatorConfig()
    uvicorn.run(
        create_app(config),
        host=host or config.host,
        port=port or config.port,
    )


def _print_result(result):
    """Print profile, engagement and recent posts."""
    p = result.profile
    e = result.engagement

    table = Table(title=f"@{p.username}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Name", p.name)
    table.add_row("Followers", f"{p.followers:,}")
    table.add_row("Following", f"{p.following:,}")
    table.add_row("Posts", f"{p.posts:,}")
    table.add_row("Avg Likes", f"{e.avg_likes:,.1f}")
    table.add_row("Avg Comments", f"{e.avg_comments:,.1f}")
    table.add_row("Engagement Rate", f"{e.engagement_rate:.2f}%")

    console.print(table)
    console.print(f"\n[bold]Summary[/bold]\n{p.summary}")

    if result.posts:
        console.print(f"\n[bold]Recent Posts ({len(result.posts)})[/bold]")
        for post in result.posts:
            caption = post.caption[:60] + "..." if len(post.caption) > 60 else post.caption
            console.print(f"[dim]{post.likes:>7,}♥ {post.comments:>5,}💬[/dim]  {caption or 'N/A'}")


if __name__ == "__main__":
    app()
