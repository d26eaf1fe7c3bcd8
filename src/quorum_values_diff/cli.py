"""CLI for quorum-values-diff."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from quorum_values_diff import __version__
from quorum_values_diff.algorithm.config import DEFAULT_QUORUM, ArrayReduceMode, DiffConfig
from quorum_values_diff.api import diff as diff_values
from quorum_values_diff.api import reduce as reduce_values
from quorum_values_diff.documents import dump_document, dumps_yaml, load_document
from quorum_values_diff.errors import QuorumDiffError
from quorum_values_diff.observers import LoggingObserver
from quorum_values_diff.tree.nodes import ABSENT

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)

EXIT_DIFFERENT = 1
EXIT_ERROR = 2

INPUT_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def fail(exc: QuorumDiffError) -> NoReturn:
    """Report a library error and exit."""
    error_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    sys.exit(EXIT_ERROR)


def output_names(inputs: tuple[Path, ...]) -> list[str]:
    """File names for per-input diffs, prefixed by position when names collide."""
    names = [path.name for path in inputs]
    if len(set(names)) == len(names):
        return names
    return [f"{idx}-{name}" for idx, name in enumerate(names)]


@click.group()
@click.version_option(version=__version__, prog_name="quorum-values-diff")
@click.option("-v", "--verbose", is_flag=True, help="Log reduction diagnostics")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Quorum values diff - shared baselines for configuration values."""
    configure_logging(verbose)
    ctx.obj = {"verbose": verbose}


@main.command()
@click.argument("candidate", type=INPUT_FILE)
@click.argument("baseline", type=INPUT_FILE)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the diff to this file instead of stdout",
)
def diff(candidate: Path, baseline: Path, output: Path | None) -> None:
    """Show what in CANDIDATE differs from BASELINE.

    Exits 0 when there is no difference and 1 when there is one.
    """
    try:
        result = diff_values(load_document(candidate), load_document(baseline))
        if output is not None:
            dump_document(result, output)
    except QuorumDiffError as exc:
        fail(exc)

    if result is ABSENT:
        error_console.print("[green]No differences.[/green]")
        return

    if output is None:
        click.echo(dumps_yaml(result), nl=False)
    else:
        error_console.print(f"Diff written to [bold]{escape(str(output))}[/bold]")
    sys.exit(EXIT_DIFFERENT)


@main.command()
@click.argument("inputs", nargs=-1, required=True, type=INPUT_FILE)
@click.option(
    "-q",
    "--quorum",
    type=float,
    default=DEFAULT_QUORUM,
    show_default=True,
    help="Fraction of inputs that must agree on a value for it to enter the base",
)
@click.option(
    "--array-mode",
    type=click.Choice([mode.value for mode in ArrayReduceMode]),
    default=ArrayReduceMode.VERBATIM.value,
    show_default=True,
    help="verbatim: arrays always stay in diffs; atomic: vote on whole arrays",
)
@click.option(
    "-d",
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    required=True,
    help="Directory for the base and per-input diff files",
)
@click.option(
    "--base-name",
    default="base.yaml",
    show_default=True,
    help="File name of the common base inside --out-dir",
)
@click.pass_context
def reduce(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    quorum: float,
    array_mode: str,
    out_dir: Path,
    base_name: str,
) -> None:
    """Split INPUTS into a quorum-common base and per-input diffs."""
    observer = LoggingObserver() if ctx.obj["verbose"] else None
    names = output_names(inputs)
    if base_name in names:
        raise click.BadParameter(
            f"{base_name!r} collides with an input file name", param_hint="--base-name"
        )

    try:
        config = DiffConfig(quorum=quorum, array_mode=ArrayReduceMode(array_mode))
        documents = [load_document(path) for path in inputs]
        logger.debug("Loaded %d documents", len(documents))
        result = reduce_values(documents, config=config, observer=observer)

        dump_document(result.base, out_dir / base_name)
        for name, entry in zip(names, result.diffs, strict=True):
            dump_document(entry, out_dir / name)
    except QuorumDiffError as exc:
        fail(exc)

    table = Table(title="Reduction Complete")
    table.add_column("Input", style="cyan")
    table.add_column("Diff file")
    table.add_column("Overrides", justify="right")

    for path, name, entry in zip(inputs, names, result.diffs, strict=True):
        if entry is ABSENT:
            overrides = "-"
        else:
            overrides = str(len(entry)) if isinstance(entry, dict) else "1"
        table.add_row(str(path), name, overrides)

    console.print(table)

    if result.has_base:
        target = escape(str(out_dir / base_name))
        console.print(f"[green]Common base written to {target}[/green]")
    else:
        console.print("[yellow]No value met the quorum; base is empty.[/yellow]")
