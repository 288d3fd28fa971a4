"""Scripted walkthrough of LRU behaviour."""

from typing import Any, List, Tuple

import typer
from rich.console import Console
from rich.table import Table

from ...core.cache import LRUCache
from ...core.exceptions import ConfigError
from ...logger import enable_trace

console = Console()

STEPS: List[Tuple[str, Any, Any]] = [
    ("put", 1, "A"),
    ("put", 2, "B"),
    ("put", 3, "C"),
    ("get", 1, None),
    ("put", 4, "D"),
    ("get", 2, None),
    ("put", 3, "C2"),
    ("get", 3, None),
    ("get", 99, None),
]


def run_steps(cache: LRUCache) -> List[Tuple[str, str, List[Any]]]:
    """Apply STEPS to cache and record the recency order after each one.

    Returns:
        (operation, result, keys head-to-tail) per step.
    """
    evicted: List[Any] = []
    cache.on_evict = lambda key, value: evicted.append(key)

    rows = []
    for op, key, value in STEPS:
        if op == "put":
            before = len(evicted)
            cache.put(key, value)
            result = f"evicted {evicted[-1]!r}" if len(evicted) > before else "-"
            label = f"put({key!r}, {value!r})"
        else:
            found = cache.get(key)
            result = "absent" if found is None else repr(found)
            label = f"get({key!r})"
        rows.append((label, result, cache.keys()))
    return rows


def demo_command(capacity: int, trace: bool) -> None:
    """Run the walkthrough and print a table of steps."""
    try:
        cache: LRUCache = LRUCache(capacity, trace=trace, name="demo")
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if trace:
        enable_trace()

    table = Table(title=f"LRU walkthrough (capacity={capacity})")
    table.add_column("Step", style="cyan")
    table.add_column("Result")
    table.add_column("Order (head → tail)", style="green")

    for label, result, order in run_steps(cache):
        table.add_row(label, result, ", ".join(repr(k) for k in order))

    console.print(table)
