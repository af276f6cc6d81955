"""userhub CLI application using Typer.

This module provides command-line utilities for running the API server
and inspecting the effective configuration.
"""

from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from userhub.domain.shared.exceptions import ConfigurationError
from userhub_config.settings import get_settings

app = typer.Typer(
    name="userhub",
    help="userhub - CRUD service for users",
    no_args_is_help=True,
)
console = Console()


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Host to bind to (overrides config/env)",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        help="Port to listen on (overrides config/env)",
    ),
    reload: bool = typer.Option(
        False,
        "--reload",
        help="Enable auto-reload for development",
    ),
) -> None:
    """Start the API server with uvicorn."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e

    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(
        f"[bold green]Starting {settings.app_name}[/bold green] "
        f"on [cyan]http://{bind_host}:{bind_port}[/cyan] "
        f"[dim](environment: {settings.environment})[/dim]",
    )
    uvicorn.run(
        "userhub.presentation.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("config")
def show_config() -> None:
    """Print the effective configuration."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title=f"{settings.app_name} configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
