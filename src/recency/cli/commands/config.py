"""Show effective configuration."""

import typer
from rich.console import Console
from rich.table import Table

from ...config import CacheConfig
from ...core.exceptions import ConfigError

console = Console()


def config_command() -> None:
    """Print CacheConfig as resolved from environment variables."""
    try:
        config = CacheConfig.from_env()
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Cache configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("capacity", str(config.capacity))
    table.add_row("trace", str(config.trace))
    table.add_row("metrics_enabled", str(config.metrics_enabled))
    table.add_row("metrics_namespace", config.metrics_namespace)
    console.print(table)
