"""
CLI utility helpers - output formatting.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def to_plain(value: Any) -> Any:
    """Convert containers to JSON-friendly lists/dicts, recursively."""
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return value
    return [to_plain(v) for v in value]


def output_examples(
    examples: Mapping[str, Any],
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render named example outcomes to the terminal."""
    if as_json:
        console.print_json(json.dumps(to_plain(examples), default=str))
        return

    if title:
        console.print(f"[bold]{escape(title)}[/bold]")
    for name, value in examples.items():
        console.print(f"  [cyan]{escape(name)}[/cyan]: {escape(repr(value))}")
