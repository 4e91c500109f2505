"""Per-lot tax analysis."""

from datetime import date
from decimal import Decimal

from lotwise.engines.holding import LotClassifier
from lotwise.engines.rates import TaxRateResolver
from lotwise.models.enums import FilingStatus
from lotwise.models.lots import LotAnalysis, TaxLot


class LotAnalyzer:
    """Computes gain, rate, tax and net proceeds for selling a whole lot."""

    def __init__(
        self,
        resolver: TaxRateResolver | None = None,
        classifier: LotClassifier | None = None,
    ) -> None:
        self.resolver = resolver or TaxRateResolver()
        self.classifier = classifier or LotClassifier()

    def analyze(
        self,
        lot: TaxLot,
        as_of: date,
        taxable_income: Decimal,
        filing_status: FilingStatus,
    ) -> LotAnalysis:
        facts = self.classifier.classify(lot.acquisition_date, as_of)
        price_change = lot.current_price_per_share - lot.cost_basis_per_share
        gain = price_change * lot.share_count
        rate = self.resolver.rate(taxable_income, filing_status, facts.is_long_term)
        # Losses never produce negative tax at the single-lot level; offsetting
        # happens in harvesting and year-end projection.
        tax = max(Decimal("0"), gain * rate)

        return LotAnalysis(
            lot=lot,
            realized_gain=gain,
            realized_gain_percent=price_change / lot.cost_basis_per_share * Decimal("100"),
            is_long_term=facts.is_long_term,
            holding_period_days=facts.holding_period_days,
            days_until_long_term=facts.days_until_long_term,
            long_term_date=facts.long_term_date,
            applicable_rate=rate,
            tax_owed=tax,
            net_proceeds=lot.market_value - tax,
        )

    def analyze_all(
        self,
        lots: list[TaxLot],
        as_of: date,
        taxable_income: Decimal,
        filing_status: FilingStatus,
    ) -> list[LotAnalysis]:
        return [self.analyze(lot, as_of, taxable_income, filing_status) for lot in lots]
