"""Year-end capital gains tax projection."""

from decimal import Decimal

from lotwise.engines.rates import TaxRateResolver, to_decimal
from lotwise.models.enums import FilingStatus
from lotwise.models.lots import TaxLot
from lotwise.models.results import YearEndProjection

_ZERO = Decimal("0")


class YearEndProjector:
    """Projects year-end tax on realized gains, with and without harvesting.

    This is a whole-portfolio view. Unrealized positions are not split by
    term, and tax is estimated at the average of the ordinary and long-term
    rates because the projection does not assume which lots get sold.
    Harvesting beyond net realized gains only feeds the capped ordinary-income
    offset and carryforward, which are not modeled here.
    """

    def __init__(self, resolver: TaxRateResolver | None = None) -> None:
        self.resolver = resolver or TaxRateResolver()

    def project(
        self,
        lots: list[TaxLot],
        realized_gains_ytd: Decimal | int | float | str,
        realized_losses_ytd: Decimal | int | float | str,
        taxable_income: Decimal,
        filing_status: FilingStatus,
    ) -> YearEndProjection:
        unrealized_gains = _ZERO
        unrealized_losses = _ZERO
        for lot in lots:
            gain = lot.unrealized_gain
            if gain >= 0:
                unrealized_gains += gain
            else:
                unrealized_losses += abs(gain)

        realized_gains_ytd = to_decimal(realized_gains_ytd) or _ZERO
        realized_losses_ytd = to_decimal(realized_losses_ytd) or _ZERO
        net_realized = realized_gains_ytd - realized_losses_ytd
        harvestable = min(unrealized_losses, max(_ZERO, net_realized))

        short_term_rate = self.resolver.rate(taxable_income, filing_status, is_long_term=False)
        long_term_rate = self.resolver.rate(taxable_income, filing_status, is_long_term=True)
        blended_rate = (short_term_rate + long_term_rate) / 2

        projected_tax = max(_ZERO, net_realized) * blended_rate
        optimized_tax = max(_ZERO, net_realized - harvestable) * blended_rate

        return YearEndProjection(
            realized_gains_to_date=realized_gains_ytd,
            realized_losses_to_date=realized_losses_ytd,
            net_realized=net_realized,
            unrealized_gains=unrealized_gains,
            unrealized_losses=unrealized_losses,
            harvestable_amount=harvestable,
            blended_rate=blended_rate,
            projected_tax=projected_tax,
            optimized_tax=optimized_tax,
            potential_savings=projected_tax - optimized_tax,
        )
