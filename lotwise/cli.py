"""Typer CLI interface for lotwise."""

import json
import logging
from datetime import date
from decimal import Decimal
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from lotwise.engines.brackets import DEFAULT_TAX_YEAR
from lotwise.exceptions import TaxComputationError
from lotwise.models.enums import FilingStatus
from lotwise.models.lots import RecentPurchase, TaxLot

app = typer.Typer(
    name="lotwise",
    help="lotwise — tax-lot selection, loss harvesting and year-end projection.",
)

_STATUS_MAP = {
    "SINGLE": "SINGLE",
    "MFJ": "MARRIED_FILING_JOINTLY",
    "MFS": "MARRIED_FILING_SEPARATELY",
    "HOH": "HEAD_OF_HOUSEHOLD",
}


class _DecimalEncoder(json.JSONEncoder):
    """JSON encoder that serializes Decimal as string."""

    def default(self, o):
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """lotwise — tax-lot selection, loss harvesting and year-end projection."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# Shared option parsing
# ---------------------------------------------------------------------------

def _parse_filing_status(filing_status: str) -> FilingStatus:
    fs_key = filing_status.upper()
    try:
        return FilingStatus(_STATUS_MAP.get(fs_key, fs_key))
    except ValueError:
        valid = ", ".join(_STATUS_MAP.keys())
        typer.echo(f"Error: Invalid filing status '{filing_status}'. Valid: {valid}", err=True)
        raise typer.Exit(1)


def _parse_as_of(as_of: str | None) -> date:
    if as_of is None:
        return date.today()
    try:
        return date.fromisoformat(as_of)
    except ValueError:
        typer.echo(f"Error: Invalid date '{as_of}'. Use YYYY-MM-DD.", err=True)
        raise typer.Exit(1)


def _load_lots(
    lots_file: Path | None,
    sample: bool,
    as_of: date,
) -> tuple[list[TaxLot], list[RecentPurchase]]:
    from lotwise.ingestion import LotFileAdapter, sample_lots

    if sample:
        return sample_lots(as_of), []
    if lots_file is None:
        typer.echo("Error: Provide a lot file or use --sample.", err=True)
        raise typer.Exit(1)

    adapter = LotFileAdapter()
    try:
        result = adapter.parse(lots_file)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    for warning in adapter.validate(result, as_of=as_of):
        typer.echo(f"Warning: {warning}", err=True)
    return result.lots, result.recent_purchases


def _echo_json(payload) -> None:
    typer.echo(json.dumps(payload, cls=_DecimalEncoder, indent=2, default=str))


def _fmt(val: Decimal) -> str:
    return f"{val:,.2f}"


LOTS_ARG = typer.Argument(None, help="JSON file with lots (and optional recent_purchases)")
SAMPLE_OPT = typer.Option(False, "--sample", help="Use the built-in sample portfolio")
STATUS_OPT = typer.Option("SINGLE", "--filing-status", "-s", help="Filing status: SINGLE, MFJ, MFS, HOH")
INCOME_OPT = typer.Option(85000, "--income", "-i", help="Taxable income")
YEAR_OPT = typer.Option(DEFAULT_TAX_YEAR, "--year", "-y", help="Tax year for bracket tables")
AS_OF_OPT = typer.Option(None, "--as-of", help="Evaluation date YYYY-MM-DD (default: today)")
JSON_OPT = typer.Option(False, "--json", help="Output as JSON")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def compare(
    lots_file: Path | None = LOTS_ARG,
    shares: float = typer.Option(..., "--shares", "-n", help="Number of shares to sell"),
    sample: bool = SAMPLE_OPT,
    filing_status: str = STATUS_OPT,
    income: float = INCOME_OPT,
    year: int = YEAR_OPT,
    as_of: str | None = AS_OF_OPT,
    json_output: bool = JSON_OPT,
) -> None:
    """Compare FIFO, LIFO, HIFO and tax-optimized lot selection."""
    from lotwise.engines import MethodComparator, TaxRateResolver, best_method
    from lotwise.engines.analyzer import LotAnalyzer

    fs = _parse_filing_status(filing_status)
    as_of_date = _parse_as_of(as_of)
    lots, _ = _load_lots(lots_file, sample, as_of_date)

    comparator = MethodComparator(LotAnalyzer(TaxRateResolver(tax_year=year)))
    results = comparator.compare(
        lots, Decimal(str(shares)), as_of_date, Decimal(str(income)), fs,
    )

    if json_output:
        _echo_json([r.model_dump() for r in results])
        return

    best = best_method(results)
    table = Table(title=f"Selling {shares:g} shares as of {as_of_date}", show_header=True)
    table.add_column("Method", style="cyan")
    table.add_column("Shares", justify="right")
    table.add_column("Short-term", justify="right")
    table.add_column("Long-term", justify="right")
    table.add_column("Tax", justify="right")
    table.add_column("Net proceeds", justify="right")
    table.add_column("Saves vs worst", justify="right", style="green")
    for r in results:
        label = f"{r.method.value} *" if r is best else r.method.value
        table.add_row(
            label,
            f"{r.shares_sold:g}",
            _fmt(r.short_term_gain),
            _fmt(r.long_term_gain),
            _fmt(r.total_tax),
            _fmt(r.net_proceeds),
            _fmt(r.tax_savings_vs_worst),
        )
    Console().print(table)
    typer.echo(f"* lowest tax: {best.method.value}")


@app.command()
def harvest(
    lots_file: Path | None = LOTS_ARG,
    sample: bool = SAMPLE_OPT,
    filing_status: str = STATUS_OPT,
    income: float = INCOME_OPT,
    year: int = YEAR_OPT,
    as_of: str | None = AS_OF_OPT,
    json_output: bool = JSON_OPT,
) -> None:
    """List tax-loss harvesting opportunities with wash-sale risk."""
    from lotwise.engines import HarvestingScanner, TaxRateResolver
    from lotwise.reports.optimizer_report import guidance_text

    fs = _parse_filing_status(filing_status)
    as_of_date = _parse_as_of(as_of)
    lots, purchases = _load_lots(lots_file, sample, as_of_date)

    scanner = HarvestingScanner(TaxRateResolver(tax_year=year))
    opportunities = scanner.scan(lots, Decimal(str(income)), fs, purchases, as_of=as_of_date)

    if json_output:
        _echo_json([o.model_dump() for o in opportunities])
        return

    if not opportunities:
        typer.echo("No lots are currently at a loss.")
        return

    for o in opportunities:
        flag = f"  [WASH SALE RISK until {o.wash_sale_window_end}]" if o.wash_sale_risk else ""
        typer.echo(
            f"{o.lot.id} ({o.lot.security}): loss ${_fmt(o.unrealized_loss_amount)}, "
            f"est. savings ${_fmt(o.estimated_tax_savings)}{flag}"
        )
        typer.echo(f"  {guidance_text(o)}")
    total = sum((o.estimated_tax_savings for o in opportunities), Decimal("0"))
    typer.echo(f"\nTotal estimated savings: ${_fmt(total)}")


@app.command()
def project(
    lots_file: Path | None = LOTS_ARG,
    sample: bool = SAMPLE_OPT,
    realized_gains: float = typer.Option(0, "--realized-gains", help="Realized gains year to date"),
    realized_losses: float = typer.Option(0, "--realized-losses", help="Realized losses year to date"),
    filing_status: str = STATUS_OPT,
    income: float = INCOME_OPT,
    year: int = YEAR_OPT,
    as_of: str | None = AS_OF_OPT,
    json_output: bool = JSON_OPT,
) -> None:
    """Project year-end capital gains tax with and without harvesting."""
    from lotwise.engines import TaxRateResolver, YearEndProjector

    fs = _parse_filing_status(filing_status)
    as_of_date = _parse_as_of(as_of)
    lots, _ = _load_lots(lots_file, sample, as_of_date)

    projector = YearEndProjector(TaxRateResolver(tax_year=year))
    p = projector.project(
        lots,
        Decimal(str(realized_gains)),
        Decimal(str(realized_losses)),
        Decimal(str(income)),
        fs,
    )

    if json_output:
        _echo_json(p.model_dump())
        return

    typer.echo(f"=== Year-End Projection: {year} ({fs.value}) ===")
    typer.echo(f"  Net realized:       ${_fmt(p.net_realized)}")
    typer.echo(f"  Unrealized gains:   ${_fmt(p.unrealized_gains)}")
    typer.echo(f"  Unrealized losses:  ${_fmt(p.unrealized_losses)}")
    typer.echo(f"  Harvestable:        ${_fmt(p.harvestable_amount)}")
    typer.echo(f"  Projected tax:      ${_fmt(p.projected_tax)}")
    typer.echo(f"  Optimized tax:      ${_fmt(p.optimized_tax)}")
    typer.echo(f"  Potential savings:  ${_fmt(p.potential_savings)}")


@app.command()
def lots(
    lots_file: Path | None = LOTS_ARG,
    sample: bool = SAMPLE_OPT,
    filing_status: str = STATUS_OPT,
    income: float = INCOME_OPT,
    year: int = YEAR_OPT,
    as_of: str | None = AS_OF_OPT,
    json_output: bool = JSON_OPT,
) -> None:
    """Show the per-lot tax analysis and holding periods."""
    from lotwise.engines import CostBasisOptimizer

    fs = _parse_filing_status(filing_status)
    as_of_date = _parse_as_of(as_of)
    tax_lots, _ = _load_lots(lots_file, sample, as_of_date)

    optimizer = CostBasisOptimizer(tax_year=year)
    analyses = optimizer.analyzer.analyze_all(tax_lots, as_of_date, Decimal(str(income)), fs)
    summary = optimizer.summarize_holdings(tax_lots, as_of_date)

    if json_output:
        _echo_json({
            "lots": [a.model_dump() for a in analyses],
            "summary": summary.model_dump(),
        })
        return

    table = Table(title=f"Lots as of {as_of_date}", show_header=True)
    table.add_column("Lot", style="cyan")
    table.add_column("Acquired")
    table.add_column("Shares", justify="right")
    table.add_column("Basis", justify="right")
    table.add_column("Gain", justify="right")
    table.add_column("Term")
    table.add_column("Days to LT", justify="right")
    table.add_column("Tax", justify="right")
    for a in analyses:
        table.add_row(
            a.lot.id,
            str(a.lot.acquisition_date),
            f"{a.lot.share_count:g}",
            _fmt(a.lot.cost_basis_per_share),
            _fmt(a.realized_gain),
            a.holding_period.value,
            str(a.days_until_long_term),
            _fmt(a.tax_owed),
        )
    Console().print(table)
    typer.echo(
        f"Long-term: {summary.long_term_lot_count} lots ({summary.long_term_shares:g} sh)  "
        f"Short-term: {summary.short_term_lot_count} lots ({summary.short_term_shares:g} sh)"
    )
    for item in summary.approaching_long_term:
        typer.echo(
            f"  {item.lot.id} becomes long-term in {item.days_until_long_term} days "
            f"({item.long_term_date})"
        )


@app.command()
def report(
    lots_file: Path | None = LOTS_ARG,
    shares: float = typer.Option(..., "--shares", "-n", help="Number of shares to sell"),
    sample: bool = SAMPLE_OPT,
    realized_gains: float = typer.Option(0, "--realized-gains", help="Realized gains year to date"),
    realized_losses: float = typer.Option(0, "--realized-losses", help="Realized losses year to date"),
    filing_status: str = STATUS_OPT,
    income: float = INCOME_OPT,
    year: int = YEAR_OPT,
    as_of: str | None = AS_OF_OPT,
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to this file"),
    json_output: bool = JSON_OPT,
) -> None:
    """Run every analysis and render the full optimization report."""
    from lotwise.engines import CostBasisOptimizer
    from lotwise.reports import OptimizerReportGenerator

    fs = _parse_filing_status(filing_status)
    as_of_date = _parse_as_of(as_of)
    tax_lots, purchases = _load_lots(lots_file, sample, as_of_date)

    result = CostBasisOptimizer(tax_year=year).run(
        tax_lots,
        shares_to_sell=Decimal(str(shares)),
        taxable_income=Decimal(str(income)),
        filing_status=fs,
        realized_gains_ytd=Decimal(str(realized_gains)),
        realized_losses_ytd=Decimal(str(realized_losses)),
        recent_purchases=purchases,
        as_of=as_of_date,
    )

    if json_output:
        _echo_json(result.model_dump())
        return

    text = OptimizerReportGenerator().render(result)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text)
        typer.echo(f"Report written to {output}")
    else:
        typer.echo(text)


if __name__ == "__main__":
    app()
