"""Main CLI entry point for the recency CLI."""

import typer
from importlib import metadata


def get_version() -> str:
    """Get the package version from metadata."""
    try:
        return metadata.version("recency")
    except metadata.PackageNotFoundError:
        return "unknown"


# command: recency
app = typer.Typer(
    name="recency",
    help="Thread-safe LRU cache toolkit",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command("demo")
def demo_cmd(
    capacity: int = typer.Option(3, "--capacity", "-c", help="Cache capacity"),
    trace: bool = typer.Option(False, "--trace", help="Log every list operation"),
):
    """Replay a short get/put sequence and show the recency order."""
    from .commands.demo import demo_command

    return demo_command(capacity, trace)


@app.command("bench")
def bench_cmd(
    capacity: int = typer.Option(10, "--capacity", "-c", help="Cache capacity"),
    threads: int = typer.Option(2, "--threads", "-t", help="Writer threads"),
    keys: int = typer.Option(100, "--keys", "-k", help="Distinct keys per thread"),
):
    """Fill a cache from several threads and verify the eviction count."""
    from .commands.bench import bench_command

    return bench_command(capacity, threads, keys)


@app.command("config")
def config_cmd():
    """Show the cache configuration resolved from the environment."""
    from .commands.config import config_command

    return config_command()


@app.command("version")
def version_cmd():
    """Show the installed version."""
    typer.echo(f"recency {get_version()}")


if __name__ == "__main__":
    app()
