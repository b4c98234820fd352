"""
cli.py
------
Command-line interface for the nationalid SDK.

Entry point: ``nationalid``

Commands
--------
* ``generate`` — print random valid identifiers for a scheme.
* ``validate`` — check one or more identifiers against a scheme.
* ``info``     — break an NRIC into its fields.
* ``format``   — print an NRIC in spaced groups.
* ``detect``   — list the schemes that accept a value.
* ``audit``    — validate an identifier column of a CSV file.

Every command that prints results accepts ``--output pretty|json``.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional, Tuple

import click

from nationalid import __version__
from nationalid.connectors.csv import CSVConnector
from nationalid.core.config import IdentifierConfig, load_config
from nationalid.core.exceptions import GenerationError
from nationalid.core.result_schema import ColumnValidationResult
from nationalid.ingestion.validator import IdentifierValidator, detect_schemes
from nationalid.schemes import available_schemes, format_nric, get_nric_info, get_scheme
from nationalid.schemes.base import IdentifierScheme


_OUTPUT_OPTION = click.option(
    "--output", "output_format",
    type=click.Choice(["pretty", "json"], case_sensitive=False),
    default="pretty", show_default=True,
    help="Output format: pretty (default) or json.",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _verdict(valid: bool) -> str:
    if valid:
        return click.style("✓ VALID", fg="green", bold=True)
    return click.style("✗ INVALID", fg="red", bold=True)


def _load_config(config_path: Optional[str], seed: Optional[int]) -> IdentifierConfig:
    """Load the YAML config (if any) and apply the ``--seed`` override."""
    if config_path:
        try:
            config = load_config(config_path)
        except (FileNotFoundError, ValueError) as exc:
            click.echo(click.style(f"\n✗  Config error: {exc}", fg="red"), err=True)
            sys.exit(1)
    else:
        config = IdentifierConfig()
    if seed is not None:
        config.seed = seed
    return config


def _resolve_scheme(name: str, config: Optional[IdentifierConfig] = None) -> IdentifierScheme:
    try:
        return get_scheme(name, config=config)
    except KeyError as exc:
        raise click.BadParameter(exc.args[0], param_hint="SCHEME")


def _divider(width: int = 60) -> str:
    return click.style("─" * width, fg="bright_black")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="nationalid", message="%(prog)s %(version)s")
def cli():
    """nationalid — generate and validate national identifier numbers."""


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("scheme")
@click.option(
    "-n", "--count", type=click.IntRange(min=1), default=None,
    help="Number of identifiers to generate (default from config, 1).",
)
@click.option(
    "--prefix", type=str, default=None,
    help="[nric] Prefix letter S, T, F, G or M.",
)
@click.option(
    "--single/--double", "single_letter", default=None,
    help="[hkid] Force a one- or two-letter prefix.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option(
    "--config", "config_path", type=click.Path(dir_okay=False), default=None,
    help="YAML configuration file.",
)
@_OUTPUT_OPTION
def generate(
    scheme: str,
    count: Optional[int],
    prefix: Optional[str],
    single_letter: Optional[bool],
    seed: Optional[int],
    config_path: Optional[str],
    output_format: str,
):
    """
    Generate random identifiers that pass validation.

    \b
    SCHEME  Scheme id or region code: hkid/HK, nric/SG, nino/UK.
    """
    config = _load_config(config_path, seed)
    target = _resolve_scheme(scheme, config)

    options: Dict[str, Any] = {}
    if prefix is not None:
        if target.id != "nric":
            raise click.UsageError("--prefix is only supported for the nric scheme.")
        options["first_char"] = prefix
    if single_letter is not None:
        if target.id != "hkid":
            raise click.UsageError("--single/--double is only supported for the hkid scheme.")
        options["single_letter"] = single_letter

    try:
        values = target.generate_many(count or config.default_count, **options)
    except GenerationError as exc:
        click.echo(click.style(f"\n✗  Generation failed: {exc}", fg="red"), err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps({"scheme": target.id, "values": values}, indent=2))
        return
    for value in values:
        click.echo(value)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("scheme")
@click.argument("values", nargs=-1, required=True)
@_OUTPUT_OPTION
def validate(scheme: str, values: Tuple[str, ...], output_format: str):
    """
    Validate identifiers. Exits with status 1 if any value is invalid.

    \b
    SCHEME  Scheme id or region code.
    VALUES  One or more identifiers.
    """
    target = _resolve_scheme(scheme)
    results = [(value, target.validate(value)) for value in values]

    if output_format == "json":
        click.echo(json.dumps(
            {
                "scheme": target.id,
                "results": [{"value": v, "valid": ok} for v, ok in results],
            },
            indent=2,
        ))
    else:
        for value, ok in results:
            click.echo(f"  {value:<16} {_verdict(ok)}")

    if not all(ok for _, ok in results):
        sys.exit(1)


# ---------------------------------------------------------------------------
# NRIC helpers
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("value")
@_OUTPUT_OPTION
def info(value: str, output_format: str):
    """Show the fields of an NRIC/FIN."""
    details = get_nric_info(value)

    if output_format == "json":
        click.echo(json.dumps(details.to_dict(), indent=2))
        return

    divider = _divider()
    click.echo(f"\n{divider}")
    click.echo(click.style("  NRIC DETAILS", bold=True, fg="bright_white"))
    click.echo(divider)
    click.echo(f"  Value      : {details.value}")
    click.echo(f"  Format     : {'correct' if details.is_correct_format else 'incorrect'}")
    if details.is_correct_format:
        click.echo(f"  Prefix     : {details.first_char}")
        click.echo(f"  Identifier : {details.identifier}")
        click.echo(f"  Checksum   : {details.checksum}")
    click.echo(f"  Status     : {_verdict(details.is_valid)}")
    click.echo(f"{divider}\n")


@cli.command(name="format")
@click.argument("value")
def format_command(value: str):
    """Print an NRIC/FIN in spaced groups (S 1234 567 D)."""
    click.echo(format_nric(value))


# ---------------------------------------------------------------------------
# detect
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("value")
@_OUTPUT_OPTION
def detect(value: str, output_format: str):
    """List the schemes that accept VALUE."""
    matches = detect_schemes(value)

    if output_format == "json":
        click.echo(json.dumps({"value": value, "schemes": matches}, indent=2))
        return
    if not matches:
        click.echo(click.style("  No scheme accepts this value.", fg="yellow"))
        return
    for scheme_id in matches:
        target = get_scheme(scheme_id)
        click.echo(f"  {click.style(f'{scheme_id:<8}', fg='cyan', bold=True)} {target.description}")


# ---------------------------------------------------------------------------
# audit
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.option("--column", required=True, help="Column holding the identifiers.")
@click.option(
    "--scheme", required=True,
    help=f"Scheme id or region code ({', '.join(available_schemes())}).",
)
@click.option(
    "--encoding", default="utf-8-sig", show_default=True,
    help="CSV file encoding.",
)
@click.option(
    "--delimiter", default=",", show_default=True,
    help="CSV column delimiter.",
)
@click.option(
    "--sample-size", default=None, type=int,
    help="Maximum rows to read (useful for large CSVs).",
)
@_OUTPUT_OPTION
def audit(
    filepath: str,
    column: str,
    scheme: str,
    encoding: str,
    delimiter: str,
    sample_size: Optional[int],
    output_format: str,
):
    """
    Validate every identifier in a CSV column.

    Exits with status 1 when any non-empty value is invalid.
    """
    target = _resolve_scheme(scheme)

    connector = CSVConnector(
        filepath,
        encoding=encoding,
        delimiter=delimiter,
        sample_size=sample_size,
    )
    try:
        df = connector.connect_and_fetch()
    except Exception as exc:
        click.echo(click.style(f"\n✗  Could not load file: {exc}", fg="red"), err=True)
        sys.exit(1)

    try:
        result = IdentifierValidator(target).validate_column(df, column)
    except KeyError as exc:
        click.echo(click.style(f"\n✗  {exc.args[0]}", fg="red"), err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(result.to_json())
    else:
        _print_audit_report(filepath, result)

    if not result.passed:
        sys.exit(1)


def _print_audit_report(filepath: str, result: ColumnValidationResult) -> None:
    """Render a human-readable column audit to stdout."""
    divider = _divider()

    click.echo(f"\n{divider}")
    click.echo(click.style("  IDENTIFIER AUDIT REPORT", bold=True, fg="bright_white"))
    click.echo(divider)
    click.echo(f"  Source  : {filepath}")
    click.echo(f"  Column  : {result.column}")
    click.echo(f"  Scheme  : {result.scheme}")
    click.echo(f"  Rows    : {result.total:,}")
    click.echo(f"  Valid   : {click.style(str(result.valid), fg='green', bold=True)}")
    click.echo(f"  Invalid : {click.style(str(result.invalid), fg='red' if result.invalid else 'green', bold=True)}")
    click.echo(f"  Missing : {result.missing}")
    click.echo(f"  Ratio   : {result.valid_ratio:.1%}")

    if result.invalid_rows:
        shown = ", ".join(str(row) for row in result.invalid_rows[:20])
        more = " …" if len(result.invalid_rows) > 20 else ""
        click.echo(click.style(f"  ⚠  Invalid rows: {shown}{more}", fg="yellow"))
    else:
        click.echo(click.style("  ✓  All identifiers valid.", fg="green"))

    click.echo(f"{divider}\n")
