"""
CLI for triggerwrap.

Usage:
    triggerwrap transform src/triggers -o dist   # Transform a tree of triggers
    triggerwrap transform trigger.ts             # Print one transformed file
    triggerwrap check src/triggers               # Report imports after the body
    triggerwrap split trigger.ts                 # Show where the body starts
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from ... import __version__
from ...config import load_options
from ...core.splitter import find_body_import, find_region_boundary
from ...domain.exceptions import ConfigLoadError
from ...domain.models import TransformOptions
from ...services import BuildRunner, TriggerTransformer, read_source
from ...ui.progress import CIProgressReporter, RichProgressReporter


def _make_reporter(ci: bool):
    """Rich output for terminals, plain lines for CI logs and pipes."""
    if ci or not sys.stderr.isatty():
        return CIProgressReporter()
    return RichProgressReporter()


def _resolve_options(
    config_path: Optional[Path],
    include: Tuple[str, ...],
    exclude: Tuple[str, ...],
) -> TransformOptions:
    """Load options from config, letting command-line patterns win per field."""
    try:
        options = load_options(config_path)
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    return TransformOptions(
        include=list(include) if include else options.include,
        exclude=list(exclude) if exclude else options.exclude,
    )


def filter_options(f):
    """Options shared by the commands that consult the eligibility filter."""
    f = click.option(
        "--config", "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Config file (YAML, or TOML with a [tool.triggerwrap] table)."
    )(f)
    f = click.option(
        "--exclude", "-e", multiple=True,
        help="Glob pattern of files to leave alone. Repeatable."
    )(f)
    f = click.option(
        "--include", "-i", multiple=True,
        help="Glob pattern of files to transform. Repeatable."
    )(f)
    return f


@click.group()
@click.version_option(version=__version__, prog_name="triggerwrap")
def main():
    """triggerwrap - make trigger scripts with early returns bundleable."""
    pass


@main.command()
@click.argument(
    "paths", nargs=-1, required=True,
    type=click.Path(exists=True, path_type=Path)
)
@filter_options
@click.option(
    "--out-dir", "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write transformed files to. Required for more than one file."
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory the output layout is relative to. Defaults to the current directory."
)
@click.option("--ci", is_flag=True, help="Plain log lines instead of a progress bar.")
def transform(
    paths: Tuple[Path, ...],
    include: Tuple[str, ...],
    exclude: Tuple[str, ...],
    config_path: Path | None,
    out_dir: Path | None,
    root: Path | None,
    ci: bool,
):
    """Split imports from the body and wrap the body in an IIFE."""
    options = _resolve_options(config_path, include, exclude)
    transformer = TriggerTransformer(options)

    if out_dir is None:
        if len(paths) != 1 or not paths[0].is_file():
            click.echo(
                "Error: --out-dir is required when transforming more than one file.",
                err=True
            )
            sys.exit(1)
        _transform_to_stdout(transformer, paths[0])
        return

    reporter = _make_reporter(ci)
    reporter.banner("triggerwrap", __version__)

    runner = BuildRunner(transformer, reporter)
    summary = runner.run(paths, out_dir=out_dir, root=root)

    for outcome in summary.transformed:
        reporter.info(f"{outcome.path} -> {outcome.output_path}")

    if summary.has_failures:
        sys.exit(1)


def _transform_to_stdout(transformer: TriggerTransformer, path: Path) -> None:
    runner = BuildRunner(transformer)
    outcome = runner.transform_file(path.resolve())

    if outcome.status == "failed":
        click.echo(f"Error: {outcome.to_location()}: {outcome.error}", err=True)
        sys.exit(1)

    if outcome.status == "skipped":
        # Not eligible: pass the file through untouched
        click.echo(read_source(path), nl=False)
        return

    click.echo(outcome.output, nl=False)


@main.command()
@click.argument(
    "paths", nargs=-1, required=True,
    type=click.Path(exists=True, path_type=Path)
)
@filter_options
@click.option("--ci", is_flag=True, help="Plain log lines instead of colors.")
def check(
    paths: Tuple[Path, ...],
    include: Tuple[str, ...],
    exclude: Tuple[str, ...],
    config_path: Path | None,
    ci: bool,
):
    """Report import statements that appear after the body started."""
    options = _resolve_options(config_path, include, exclude)
    reporter = _make_reporter(ci)

    runner = BuildRunner(TriggerTransformer(options), reporter)
    summary = runner.check(paths)

    checked = len(summary.outcomes) - len(summary.skipped)
    if summary.has_failures:
        reporter.warning(f"{len(summary.failed)} of {checked} file(s) import after the body started")
        sys.exit(1)

    reporter.success(f"{checked} file(s) clean")


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def split(file: Path):
    """Show where the import region of FILE ends."""
    try:
        lines = read_source(file).split("\n")
    except (UnicodeDecodeError, OSError) as e:
        click.echo(f"Error: cannot read {file}: {e}", err=True)
        sys.exit(1)
    boundary = find_region_boundary(lines)

    click.echo(
        f"Boundary: line {boundary + 1} "
        f"({boundary} import line(s), {len(lines) - boundary} body line(s))"
    )
    click.echo("--- import region ---")
    for line in lines[:boundary]:
        click.echo(line)
    click.echo("--- body region ---")
    for line in lines[boundary:]:
        click.echo(line)

    violation = find_body_import(lines, boundary)
    if violation is not None:
        click.echo(f"Error: {file}:{violation.line_number}:1: {violation.message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
