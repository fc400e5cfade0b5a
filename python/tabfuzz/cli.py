"""
tabfuzz command line: score CSV columns without writing Python.

    tabfuzz pairwise ratio pairs.csv scored.csv --left name --right other
    tabfuzz match token_set master.csv reference.csv matched.csv
    tabfuzz fixtures fixtures/

CSV files are read with every column as text, so values such as ``00123``
are compared exactly as written.
"""

import logging
from typing import Optional

import click
import polars as pl

from tabfuzz._utils import normalize_method
from tabfuzz.errors import TabFuzzError, UnsupportedMethodError
from tabfuzz.fixtures import write_fixtures
from tabfuzz.polars_api import batch_best_match, batch_score


def _method(ctx, param, value):
    try:
        return normalize_method(value)
    except UnsupportedMethodError as exc:
        raise click.BadParameter(str(exc)) from None


def _check_column(df: pl.DataFrame, path: str, column: str, option: str) -> None:
    if column not in df.columns:
        raise click.BadParameter(
            f"column {column!r} not found in {path} (columns: {df.columns})",
            param_hint=option,
        )


def _read_column(path: str, column: str, option: str) -> pl.Series:
    df = pl.read_csv(path, infer_schema_length=0)
    _check_column(df, path, column, option)
    return df[column]


_common_options = [
    click.option("--nocase", is_flag=True, help="Compare case-insensitively"),
    click.option(
        "--prefix-weight",
        type=float,
        default=0.1,
        show_default=True,
        help="Jaro-Winkler prefix weight, in [0.0, 0.25]",
    ),
    click.option("--workers", type=int, default=None, help="Worker pool size"),
]


def common_options(func):
    for option in reversed(_common_options):
        func = option(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def cli(verbose: bool):
    """Fuzzy string scoring for tabular data."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname).1s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@cli.command()
@click.argument("method", callback=_method)
@click.argument("input_csv", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_csv", type=click.Path(dir_okay=False, writable=True))
@click.option("--left", "left_column", default="str1", show_default=True, help="First string column")
@click.option("--right", "right_column", default="str2", show_default=True, help="Second string column")
@common_options
def pairwise(
    method,
    input_csv: str,
    output_csv: str,
    left_column: str,
    right_column: str,
    nocase: bool,
    prefix_weight: float,
    workers: Optional[int],
):
    """Score each row's LEFT and RIGHT columns with METHOD.

    The output is the input table plus a score column named after the
    method and a status column.
    """
    df = pl.read_csv(input_csv, infer_schema_length=0)
    _check_column(df, input_csv, left_column, "--left")
    _check_column(df, input_csv, right_column, "--right")
    try:
        scored = batch_score(
            df[left_column],
            df[right_column],
            method=method,
            nocase=nocase,
            prefix_weight=prefix_weight,
            workers=workers,
        )
    except TabFuzzError as exc:
        raise click.ClickException(str(exc)) from exc

    out = df.with_columns(
        scored["score"].alias(method.value),
        scored["status"].alias("status"),
    )
    out.write_csv(output_csv)
    n_failed = out.filter(pl.col("status") != "ok").height
    click.echo(f"Scored {out.height} rows with {method.value} ({n_failed} failed) -> {output_csv}")


@cli.command()
@click.argument("method", callback=_method)
@click.argument("master_csv", type=click.Path(exists=True, dir_okay=False))
@click.argument("reference_csv", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_csv", type=click.Path(dir_okay=False, writable=True))
@click.option("--master-column", default="name", show_default=True, help="Column to look up")
@click.option("--reference-column", default="ref_name", show_default=True, help="Column to search in")
@click.option("--no-prune", is_flag=True, help="Disable length-bound pruning")
@common_options
def match(
    method,
    master_csv: str,
    reference_csv: str,
    output_csv: str,
    master_column: str,
    reference_column: str,
    no_prune: bool,
    nocase: bool,
    prefix_weight: float,
    workers: Optional[int],
):
    """Find the best REFERENCE entry for every MASTER entry under METHOD."""
    master = _read_column(master_csv, master_column, "--master-column")
    reference = _read_column(reference_csv, reference_column, "--reference-column")
    try:
        matched = batch_best_match(
            master,
            reference,
            method=method,
            nocase=nocase,
            prefix_weight=prefix_weight,
            workers=workers,
            prune=False if no_prune else None,
        )
    except TabFuzzError as exc:
        raise click.ClickException(str(exc)) from exc

    matched.write_csv(output_csv)
    n_failed = matched.filter(pl.col("status") != "ok").height
    click.echo(
        f"Matched {matched.height} rows against {len(reference)} entries "
        f"with {method.value} ({n_failed} failed) -> {output_csv}"
    )


@cli.command()
@click.argument("directory", type=click.Path(file_okay=False))
def fixtures(directory: str):
    """Write the regression fixture tables into DIRECTORY."""
    for path in write_fixtures(directory):
        click.echo(str(path))


def main():
    cli()


if __name__ == "__main__":
    main()
