"""Tax lot, recent purchase, and per-lot analysis models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from lotwise.models.enums import HoldingPeriod


class TaxLot(BaseModel):
    """A batch of shares of one security acquired on one date at one basis.

    Lots are frozen. A partial sale is represented by a scaled copy from
    :meth:`with_shares`, the stored lot is never touched.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    security: str
    acquisition_date: date
    share_count: Decimal = Field(ge=0)
    cost_basis_per_share: Decimal = Field(gt=0)
    current_price_per_share: Decimal = Field(gt=0)

    @property
    def total_cost_basis(self) -> Decimal:
        return self.share_count * self.cost_basis_per_share

    @property
    def market_value(self) -> Decimal:
        return self.share_count * self.current_price_per_share

    @property
    def unrealized_gain(self) -> Decimal:
        return (self.current_price_per_share - self.cost_basis_per_share) * self.share_count

    def with_shares(self, shares: Decimal) -> "TaxLot":
        return self.model_copy(update={"share_count": shares})


class RecentPurchase(BaseModel):
    """A purchase of a security that may trigger the wash-sale rule."""

    model_config = ConfigDict(frozen=True)

    security: str
    purchase_date: date


class LotAnalysis(BaseModel):
    """Tax consequences of selling one lot in full as of a given date."""

    model_config = ConfigDict(frozen=True)

    lot: TaxLot
    realized_gain: Decimal
    realized_gain_percent: Decimal
    is_long_term: bool
    holding_period_days: int
    days_until_long_term: int
    long_term_date: date
    applicable_rate: Decimal
    tax_owed: Decimal
    net_proceeds: Decimal

    @property
    def holding_period(self) -> HoldingPeriod:
        return HoldingPeriod.LONG_TERM if self.is_long_term else HoldingPeriod.SHORT_TERM

    def scaled(self, shares: Decimal) -> "LotAnalysis":
        """Return the analysis for selling only *shares* of this lot.

        Gain, tax and proceeds are multiplied by the consumed-share fraction.
        Rate, percent and holding-period facts are per-lot and stay as is.
        """
        if self.lot.share_count <= 0:
            raise ValueError(f"Cannot scale zero-share lot {self.lot.id}")
        if shares == self.lot.share_count:
            return self
        fraction = shares / self.lot.share_count
        return self.model_copy(update={
            "lot": self.lot.with_shares(shares),
            "realized_gain": self.realized_gain * fraction,
            "tax_owed": self.tax_owed * fraction,
            "net_proceeds": self.net_proceeds * fraction,
        })
