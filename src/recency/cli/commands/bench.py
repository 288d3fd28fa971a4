"""Concurrent fill check for the cache."""

import threading
import time
from typing import Any, Dict

import typer
from rich.console import Console
from rich.table import Table

from ...core.cache import LRUCache
from ...core.exceptions import ConfigError

console = Console()


def run_bench(capacity: int, threads: int, keys: int) -> Dict[str, Any]:
    """Have each thread put `keys` distinct keys into one shared cache.

    Returns:
        Dictionary with final size, observed and expected eviction counts.
    """
    evictions = 0
    counter_lock = threading.Lock()

    def on_evict(key, value):
        nonlocal evictions
        with counter_lock:
            evictions += 1

    cache: LRUCache = LRUCache(capacity, on_evict=on_evict, name="bench")

    def writer(worker_id: int) -> None:
        for i in range(keys):
            cache.put((worker_id, i), i)

    workers = [threading.Thread(target=writer, args=(n,)) for n in range(threads)]
    started = time.perf_counter()
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    elapsed = time.perf_counter() - started

    total = threads * keys
    return {
        "puts": total,
        "size": cache.size(),
        "evictions": evictions,
        "expected_evictions": max(0, total - capacity),
        "elapsed_ms": elapsed * 1000,
    }


def bench_command(capacity: int, threads: int, keys: int) -> None:
    """Run the concurrent fill and report whether the counts line up."""
    if threads <= 0 or keys < 0:
        console.print("[red]Error:[/red] threads must be positive and keys non-negative")
        raise typer.Exit(1)

    try:
        result = run_bench(capacity, threads, keys)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Concurrent fill")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Threads", str(threads))
    table.add_row("Puts", str(result["puts"]))
    table.add_row("Final size", str(result["size"]))
    table.add_row("Evictions", str(result["evictions"]))
    table.add_row("Expected evictions", str(result["expected_evictions"]))
    table.add_row("Elapsed", f"{result['elapsed_ms']:.1f} ms")
    console.print(table)

    if result["evictions"] != result["expected_evictions"]:
        console.print("[red]Eviction count mismatch[/red]")
        raise typer.Exit(1)
    console.print("[green]✓ Eviction count matches[/green]")
