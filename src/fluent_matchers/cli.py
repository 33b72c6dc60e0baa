"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from fluent_matchers.check_execution import CheckExecutionError, CheckRequest, execute_check
from fluent_matchers.configuration import DEFAULT_CHECK_FILENAME, write_placeholder_check_document


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="fluent-matchers")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Fluent iterable matcher utility."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CHECK_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML check document template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML check document with guidance comments."""
    try:
        resolved_output = write_placeholder_check_document(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--expectations",
    "expectations_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON check document",
)
@click.option(
    "--actual",
    "actual_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON list of observed items, overriding the document's 'actual'",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of a diagnostics workbook to write",
)
@click.option(
    "--symbols-config",
    "symbols_config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON file with a 'symbols' section",
)
@click.option(
    "--ascii",
    "ascii_symbols",
    is_flag=True,
    default=False,
    help="Render mismatches with plain-ASCII symbols.",
)
def check(
    expectations_path: str,
    actual_path: str | None,
    report_path: str | None,
    symbols_config_path: str | None,
    ascii_symbols: bool,
) -> None:
    """Check observed items against the expectations of a check document."""
    try:
        outcome = execute_check(
            CheckRequest(
                expectations_path=expectations_path,
                actual_path=actual_path,
                report_path=report_path,
                symbols_config_path=symbols_config_path,
                ascii_symbols=ascii_symbols,
            )
        )
    except CheckExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(outcome.rendered.rstrip("\n"))
    if outcome.report_path is not None:
        click.echo(str(outcome.report_path))
    if not outcome.passed:
        raise CliError(f"Check failed with {len(outcome.findings)} finding(s).")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
