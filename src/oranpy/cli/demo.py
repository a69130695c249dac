"""
CLI: ``oranpy demo`` - worked examples of the container builders and the
fallback executor.
"""

from __future__ import annotations

import importlib
from collections import deque
from typing import Any

import typer

from oranpy.cli.utils import err_console, output_examples
from oranpy.core.containers import (
    HeapQueue,
    as_concurrent_set,
    as_linked_list,
    as_list,
    as_ordered_set,
    as_ordered_set_from,
    as_set,
    build_from_containers,
    build_from_elements,
    has_at_least_one,
    is_absent_or_empty,
)
from oranpy.core.errors import WrappedError
from oranpy.core.logging import LogContext, get_logger
from oranpy.core.tries import do_or_recover, run_or_fail, run_or_recover

logger = get_logger(__name__)

app = typer.Typer(no_args_is_help=True)


def container_examples() -> dict[str, Any]:
    """Outcomes of the container-builder examples, keyed by description."""
    integers = as_linked_list(1, 2, 3)
    integers2 = as_ordered_set(3, 4, 5)

    merged = build_from_containers(
        deque,
        as_set("Hello", "World", "3", "2", "1"),
        as_ordered_set("A", "B"),
        as_linked_list("C", "D"),
        as_list("E", "F"),
    )

    return {
        "ordered union of [1, 2, 3] and {3, 4, 5}": as_ordered_set_from(integers, integers2),
        "concurrent set of 'Hello' and 1": as_concurrent_set("Hello", 1),
        "empty set": as_set(),
        "ordered set from [None, '1', None, '2']": as_ordered_set_from([None, "1", None, "2"]),
        "deque merged from four containers": merged,
        "priority queue of 'X', 'Y', 'Z'": build_from_elements(HeapQueue, ("X", "Y", "Z")),
        "has_at_least_one(empty tuple)": has_at_least_one(()),
        "has_at_least_one(as_set())": has_at_least_one(as_set()),
        "has_at_least_one([1, 2, 3])": has_at_least_one(integers),
        "is_absent_or_empty(as_set())": is_absent_or_empty(as_set()),
        "is_absent_or_empty([1, 2, 3])": is_absent_or_empty(integers),
    }


def try_examples() -> dict[str, Any]:
    """Outcomes of the fallback-executor examples, keyed by description."""
    divisor = 0
    side_effect_errors: list[str] = []

    def report(ex: Exception) -> None:
        side_effect_errors.append(str(ex))
        err_console.print(f"[red]{ex}[/red]")

    recovered = run_or_recover(lambda: 1 // divisor, lambda ex: -1)
    resolved = run_or_fail(lambda: importlib.import_module("json").JSONDecoder.__name__)
    do_or_recover(lambda: print(1 // divisor), report)

    try:
        run_or_fail(lambda: 1 // divisor)
    except WrappedError as e:
        wrapped = e.to_dict()

    return {
        "run_or_recover(1 // 0, -1)": recovered,
        "run_or_fail(json.JSONDecoder)": resolved,
        "do_or_recover(print(1 // 0), report)": side_effect_errors,
        "run_or_fail(1 // 0)": wrapped,
    }


@app.command("containers")
def demo_containers(
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show the container builders."""
    with LogContext(command="demo.containers"):
        logger.debug("demo_started")
        output_examples(container_examples(), as_json=json_out, title="Container builders")


@app.command("tries")
def demo_tries(
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show the fallback executor."""
    with LogContext(command="demo.tries"):
        logger.debug("demo_started")
        output_examples(try_examples(), as_json=json_out, title="Fallback executor")
