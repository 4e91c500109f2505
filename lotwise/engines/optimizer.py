"""Cost basis optimizer: one call that runs every engine for a set of host inputs.

Produces the method comparison, harvest opportunities, year-end projection
and holding-period summary a planning screen shows side by side. All engines
share one TaxRateResolver so they agree on the tax year and tables.
"""

from datetime import date
from decimal import Decimal

from lotwise.engines.analyzer import LotAnalyzer
from lotwise.engines.brackets import DEFAULT_TAX_YEAR
from lotwise.engines.comparator import MethodComparator, best_method, worst_method
from lotwise.engines.harvesting import HarvestingScanner
from lotwise.engines.holding import LotClassifier
from lotwise.engines.projection import YearEndProjector
from lotwise.engines.rates import TaxRateResolver
from lotwise.models.enums import FilingStatus
from lotwise.models.lots import RecentPurchase, TaxLot
from lotwise.models.results import (
    ApproachingLongTerm,
    HoldingPeriodSummary,
    OptimizerReport,
)


class CostBasisOptimizer:
    """Runs comparison, harvesting and projection over one lot collection."""

    def __init__(
        self,
        tax_year: int = DEFAULT_TAX_YEAR,
        resolver: TaxRateResolver | None = None,
    ) -> None:
        self.resolver = resolver or TaxRateResolver(tax_year=tax_year)
        self.classifier = LotClassifier()
        self.analyzer = LotAnalyzer(self.resolver, self.classifier)
        self.comparator = MethodComparator(self.analyzer)
        self.scanner = HarvestingScanner(self.resolver)
        self.projector = YearEndProjector(self.resolver)

    def run(
        self,
        lots: list[TaxLot],
        shares_to_sell: Decimal,
        taxable_income: Decimal,
        filing_status: FilingStatus,
        realized_gains_ytd: Decimal = Decimal("0"),
        realized_losses_ytd: Decimal = Decimal("0"),
        recent_purchases: list[RecentPurchase] | None = None,
        as_of: date | None = None,
    ) -> OptimizerReport:
        as_of = as_of or date.today()
        warnings: list[str] = []

        methods = self.comparator.compare(
            lots, shares_to_sell, as_of, taxable_income, filing_status,
        )
        available = sum((lot.share_count for lot in lots), Decimal("0"))
        if shares_to_sell > available:
            warnings.append(
                f"Requested {shares_to_sell} shares but only {available} are available; "
                "results sell every available share."
            )
        securities = {lot.security for lot in lots}
        if len(securities) > 1:
            warnings.append(
                f"Lots span {len(securities)} securities ({', '.join(sorted(securities))}); "
                "methods are compared as if they were one position."
            )

        return OptimizerReport(
            as_of=as_of,
            tax_year=self.resolver.tax_year,
            filing_status=filing_status,
            taxable_income=taxable_income,
            shares_requested=shares_to_sell,
            methods=methods,
            best_method=best_method(methods).method,
            worst_method=worst_method(methods).method,
            harvest_opportunities=self.scanner.scan(
                lots, taxable_income, filing_status, recent_purchases, as_of=as_of,
            ),
            projection=self.projector.project(
                lots, realized_gains_ytd, realized_losses_ytd, taxable_income, filing_status,
            ),
            holding_summary=self.summarize_holdings(lots, as_of),
            warnings=warnings,
        )

    def summarize_holdings(self, lots: list[TaxLot], as_of: date) -> HoldingPeriodSummary:
        """Split lots into long-term and short-term and flag those nearly long-term."""
        long_term = []
        short_term = []
        approaching = []
        for lot in lots:
            if lot.share_count <= 0:
                continue
            facts = self.classifier.classify(lot.acquisition_date, as_of)
            if facts.is_long_term:
                long_term.append(lot)
                continue
            short_term.append(lot)
            if self.classifier.is_approaching_long_term(lot.acquisition_date, as_of):
                approaching.append(ApproachingLongTerm(
                    lot=lot,
                    days_until_long_term=facts.days_until_long_term,
                    long_term_date=facts.long_term_date,
                    unrealized_gain=lot.unrealized_gain,
                ))

        approaching.sort(key=lambda a: a.days_until_long_term)
        return HoldingPeriodSummary(
            total_shares=sum((lot.share_count for lot in lots), Decimal("0")),
            total_market_value=sum((lot.market_value for lot in lots), Decimal("0")),
            long_term_lot_count=len(long_term),
            long_term_shares=sum((lot.share_count for lot in long_term), Decimal("0")),
            short_term_lot_count=len(short_term),
            short_term_shares=sum((lot.share_count for lot in short_term), Decimal("0")),
            approaching_long_term=approaching,
        )
