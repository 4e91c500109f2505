"""Lot-selection method comparison.

Sells the same share quantity under four orderings of one lot collection and
reports the tax outcome of each:

  FIFO           oldest acquisition first (the default absent specific ID)
  LIFO           newest acquisition first
  HIFO           highest cost basis per share first
  TAX_OPTIMIZED  greedy heuristic, see _tax_optimized_key

TAX_OPTIMIZED is a greedy ordering, not a solution to the underlying
selection problem. Choosing the lots that minimize total tax for a fixed share
count is a constrained optimization; the heuristic usually lands at or near
the minimum but is not guaranteed to.
"""

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal

from lotwise.engines.analyzer import LotAnalyzer
from lotwise.models.enums import FilingStatus, LotSelectionMethod
from lotwise.models.lots import LotAnalysis, TaxLot
from lotwise.models.results import MethodResult

logger = logging.getLogger(__name__)


def _tax_optimized_key(analysis: LotAnalysis) -> tuple:
    """Sort key: losses (most negative first), then long-term, then lowest gain %."""
    if analysis.realized_gain < 0:
        return (0, analysis.realized_gain, 0, Decimal("0"))
    return (1, Decimal("0"), 0 if analysis.is_long_term else 1, analysis.realized_gain_percent)


_ORDERINGS: dict[LotSelectionMethod, Callable[[list[LotAnalysis]], list[LotAnalysis]]] = {
    LotSelectionMethod.FIFO: lambda lots: sorted(
        lots, key=lambda a: a.lot.acquisition_date,
    ),
    LotSelectionMethod.LIFO: lambda lots: sorted(
        lots, key=lambda a: a.lot.acquisition_date, reverse=True,
    ),
    LotSelectionMethod.HIFO: lambda lots: sorted(
        lots, key=lambda a: a.lot.cost_basis_per_share, reverse=True,
    ),
    LotSelectionMethod.TAX_OPTIMIZED: lambda lots: sorted(lots, key=_tax_optimized_key),
}


class MethodComparator:
    """Compares FIFO, LIFO, HIFO and tax-optimized lot selection."""

    def __init__(self, analyzer: LotAnalyzer | None = None) -> None:
        self.analyzer = analyzer or LotAnalyzer()

    def compare(
        self,
        lots: list[TaxLot],
        shares_to_sell: Decimal,
        as_of: date,
        taxable_income: Decimal,
        filing_status: FilingStatus,
    ) -> list[MethodResult]:
        """Run all four methods and fill in tax savings relative to the worst.

        Requesting more shares than the lots hold is not an error: every
        method consumes all available shares and the shortfall shows in
        MethodResult.shares_sold.
        """
        analyses = []
        for lot in lots:
            if lot.share_count <= 0:
                logger.debug("Skipping zero-share lot %s", lot.id)
                continue
            analyses.append(self.analyzer.analyze(lot, as_of, taxable_income, filing_status))

        results = [
            self.consume(method, order(analyses), shares_to_sell)
            for method, order in _ORDERINGS.items()
        ]

        max_tax = max(r.total_tax for r in results)
        for r in results:
            r.tax_savings_vs_worst = max_tax - r.total_tax

        available = sum((a.lot.share_count for a in analyses), Decimal("0"))
        if shares_to_sell > available:
            logger.info(
                "Requested %s shares but only %s available; selling all", shares_to_sell, available,
            )
        return results

    def consume(
        self,
        method: LotSelectionMethod,
        ordered: list[LotAnalysis],
        shares_to_sell: Decimal,
    ) -> MethodResult:
        """Greedily sell from *ordered* until *shares_to_sell* is reached."""
        result = MethodResult(method=method)
        remaining = shares_to_sell

        for analysis in ordered:
            if remaining <= 0:
                break
            if analysis.lot.share_count <= 0:
                continue
            used = min(remaining, analysis.lot.share_count)
            portion = analysis.scaled(used)

            result.lots_consumed.append(portion)
            result.total_gain += portion.realized_gain
            if portion.is_long_term:
                result.long_term_gain += portion.realized_gain
            else:
                result.short_term_gain += portion.realized_gain
            result.total_tax += portion.tax_owed
            result.net_proceeds += portion.net_proceeds
            remaining -= used

        return result


def best_method(results: list[MethodResult]) -> MethodResult:
    """First method with the lowest total tax."""
    return min(results, key=lambda r: r.total_tax)


def worst_method(results: list[MethodResult]) -> MethodResult:
    """First method with the highest total tax."""
    return max(results, key=lambda r: r.total_tax)
