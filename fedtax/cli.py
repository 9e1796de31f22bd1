"""Typer CLI interface for fedtax."""

import logging
from pathlib import Path

import typer

from fedtax.exceptions import TaxComputationError

app = typer.Typer(
    name="fedtax",
    help="fedtax - Federal income tax estimator for W-2 and paystub income.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """fedtax - Federal income tax estimator for W-2 and paystub income."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _resolve_status(filing_status: str):
    from fedtax.engines.schedule import coerce_filing_status

    try:
        return coerce_filing_status(filing_status)
    except ValueError:
        typer.echo(
            f"Error: Invalid filing status '{filing_status}'. Valid: SINGLE, MFJ", err=True
        )
        raise typer.Exit(1)


@app.command()
def estimate(
    file: Path = typer.Argument(..., help="JSON file with W-2 and paystub entries"),
    year: int | None = typer.Option(None, "--year", "-y", help="Tax year (defaults to the file's tax_year)"),
    filing_status: str | None = typer.Option(
        None,
        "--filing-status",
        "-s",
        help="Filing status: SINGLE or MFJ (defaults to the file's filing_status, then SINGLE)",
    ),
    project: bool = typer.Option(False, "--project", help="Also project paystub income to year end"),
    summary: bool = typer.Option(False, "--summary", help="Print the step-by-step summary report"),
) -> None:
    """Compute estimated federal tax liability and refund or amount due."""
    from fedtax.engines.estimator import TaxEstimator
    from fedtax.ingestion.manual import ManualAdapter
    from fedtax.models.enums import FilingStatus
    from fedtax.reports.estimate_summary import EstimateSummaryGenerator

    adapter = ManualAdapter()
    engine = TaxEstimator()

    try:
        imported = adapter.parse(file)
        tax_year = year or imported.tax_year
        if tax_year is None:
            typer.echo("Error: No tax year given. Use --year or set tax_year in the file.", err=True)
            raise typer.Exit(1)
        if filing_status is not None:
            status = _resolve_status(filing_status)
        else:
            status = imported.filing_status or FilingStatus.SINGLE

        for warning in imported.warnings:
            typer.echo(f"Warning: {warning}", err=True)

        projection = None
        if project:
            projection = engine.compose_projected_estimate(
                tax_year, status, imported.annual_entries, imported.periodic_entries
            )
            result = projection.ytd_estimate
        else:
            result = engine.compose_estimate(
                tax_year, status, imported.annual_entries, imported.periodic_entries
            )
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if summary:
        typer.echo(EstimateSummaryGenerator().render(result, projection))
        return

    typer.echo("")
    typer.echo(f"=== Federal Tax Estimate: {tax_year} ({status.display_name}) ===")
    typer.echo("")
    typer.echo(f"  Total Wages:           ${result.total_wages:>12,.0f}")
    typer.echo(f"  Standard Deduction:    ${result.deduction_applied:>12,.0f}")
    typer.echo(f"  Taxable Income:        ${result.taxable_income:>12,.0f}")
    typer.echo("")
    for band in result.bracket_contributions:
        typer.echo(f"  {band.rate * 100:>3.0f}% on ${band.income_in_band:>10,.0f}:    ${band.tax_from_band:>12,.0f}")
    typer.echo("  ──────────────────────────────────────")
    typer.echo(f"  Tax Liability:         ${result.tax_liability:>12,.0f}")
    typer.echo(f"  Federal Withheld:      ${result.total_withheld:>12,.0f}")
    typer.echo("  ══════════════════════════════════════")
    if result.is_refund:
        typer.echo(f"  REFUND:                ${result.refund_amount:>12,.0f}")
    else:
        typer.echo(f"  AMOUNT DUE:            ${result.amount_due:>12,.0f}")

    if projection is not None:
        projected = projection.projected_estimate
        typer.echo("")
        typer.echo("YEAR-END PROJECTION")
        typer.echo(f"  Projected Wages:       ${projection.projected_total_wages:>12,.0f}")
        typer.echo(f"  Projected Withheld:    ${projection.projected_total_withheld:>12,.0f}")
        typer.echo(f"  Projected Liability:   ${projected.tax_liability:>12,.0f}")
        if projected.is_refund:
            typer.echo(f"  PROJECTED REFUND:      ${projected.refund_amount:>12,.0f}")
        else:
            typer.echo(f"  PROJECTED AMOUNT DUE:  ${projected.amount_due:>12,.0f}")

    if result.warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in result.warnings:
            typer.echo(f"  - {w}")


@app.command()
def brackets(
    year: int = typer.Argument(..., help="Tax year"),
    filing_status: str = typer.Option("SINGLE", "--filing-status", "-s", help="Filing status: SINGLE or MFJ"),
) -> None:
    """Show the bracket schedule and standard deduction for a tax year."""
    from rich.console import Console
    from rich.table import Table

    from fedtax.engines.schedule import ScheduleProvider

    status = _resolve_status(filing_status)
    provider = ScheduleProvider()
    try:
        bands = provider.get_brackets(year, status)
        deduction = provider.get_deduction(year, status)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    table = Table(title=f"{year} Federal Brackets ({status.display_name})")
    table.add_column("Rate", justify="right")
    table.add_column("Over", justify="right")
    table.add_column("Up To", justify="right")
    for band in bands:
        upper = "-" if band.upper_bound is None else f"${band.upper_bound:,.0f}"
        table.add_row(f"{band.rate * 100:.0f}%", f"${band.lower_bound:,.0f}", upper)

    console = Console()
    console.print(table)
    console.print(f"Standard deduction: ${deduction:,.0f}")


@app.command()
def validate(
    file: Path = typer.Argument(..., help="JSON file with W-2 and paystub entries"),
) -> None:
    """Check an entry file for errors and warnings without computing tax."""
    from fedtax.ingestion.manual import ManualAdapter

    adapter = ManualAdapter()
    try:
        imported = adapter.parse(file)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(
        f"{len(imported.annual_entries)} W-2 and {len(imported.periodic_entries)} paystub entries are valid."
    )
    for warning in adapter.validate(imported):
        typer.echo(f"Warning: {warning}")


if __name__ == "__main__":
    app()
