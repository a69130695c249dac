"""
Root Typer application for the oranpy CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from oranpy.core.logging import configure_logging
from oranpy.core.settings import get_settings

app = Typer(
    name="oranpy",
    help="oranpy - null-safe container builders and try/except one-liners.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError, version as pkg_version

        try:
            v = pkg_version("oranpy")
        except PackageNotFoundError:
            from oranpy import __version__ as v
        typer.echo(f"oranpy {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """oranpy CLI - worked examples of the oranpy utilities."""
    settings = get_settings()
    configure_logging(level=settings.effective_log_level, json_format=settings.log_json)


# ── Sub-command registration ─────────────────────────────────────────────

from oranpy.cli.demo import app as demo_app  # noqa: E402

app.add_typer(demo_app, name="demo", help="Print worked examples.")
