"""Tax-loss harvesting scan with wash-sale screening."""

import logging
from datetime import date, timedelta
from decimal import Decimal

from lotwise.engines.brackets import HARVEST_PRIORITY_THRESHOLD, WASH_SALE_WINDOW_DAYS
from lotwise.engines.rates import TaxRateResolver
from lotwise.models.enums import FilingStatus, HarvestGuidance
from lotwise.models.lots import RecentPurchase, TaxLot
from lotwise.models.results import HarvestOpportunity

logger = logging.getLogger(__name__)


class HarvestingScanner:
    """Finds lots with unrealized losses and estimates the tax they could save.

    Savings use the ordinary-income rate for every lot: a harvested loss can
    offset gains of either character, so this is the upper-bound benefit.

    The wash-sale screen only looks at purchases within WASH_SALE_WINDOW_DAYS
    of the evaluation date. It does not model the full 61-day window around a
    future sale, since purchases after the scan cannot be known.
    """

    def __init__(self, resolver: TaxRateResolver | None = None) -> None:
        self.resolver = resolver or TaxRateResolver()

    def scan(
        self,
        lots: list[TaxLot],
        taxable_income: Decimal,
        filing_status: FilingStatus,
        recent_purchases: list[RecentPurchase] | None = None,
        as_of: date | None = None,
    ) -> list[HarvestOpportunity]:
        """Return harvest opportunities ordered by estimated savings, largest first."""
        as_of = as_of or date.today()
        recent_purchases = recent_purchases or []
        rate = self.resolver.rate(taxable_income, filing_status, is_long_term=False)

        opportunities: list[HarvestOpportunity] = []
        for lot in lots:
            gain = lot.unrealized_gain
            if gain >= 0:
                continue

            loss = abs(gain)
            conflicting = self.conflicting_purchases(lot.security, recent_purchases, as_of)
            if conflicting:
                window_end = max(p.purchase_date for p in conflicting) + timedelta(
                    days=WASH_SALE_WINDOW_DAYS,
                )
                guidance = HarvestGuidance.WASH_SALE_WAIT
                logger.info(
                    "Wash sale risk for lot %s (%s) until %s", lot.id, lot.security, window_end,
                )
            else:
                window_end = as_of + timedelta(days=WASH_SALE_WINDOW_DAYS)
                if loss > HARVEST_PRIORITY_THRESHOLD:
                    guidance = HarvestGuidance.HARVEST_PRIORITY
                else:
                    guidance = HarvestGuidance.HARVEST

            opportunities.append(HarvestOpportunity(
                lot=lot,
                unrealized_loss_amount=loss,
                estimated_tax_savings=loss * rate,
                wash_sale_risk=bool(conflicting),
                wash_sale_window_end=window_end,
                guidance=guidance,
            ))

        opportunities.sort(key=lambda o: o.estimated_tax_savings, reverse=True)
        return opportunities

    @staticmethod
    def conflicting_purchases(
        security: str,
        recent_purchases: list[RecentPurchase],
        as_of: date,
    ) -> list[RecentPurchase]:
        """Purchases of *security* within the wash-sale window of *as_of*."""
        return [
            p for p in recent_purchases
            if p.security == security
            and abs((p.purchase_date - as_of).days) <= WASH_SALE_WINDOW_DAYS
        ]
