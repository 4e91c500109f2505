"""Engine output models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from lotwise.models.enums import FilingStatus, HarvestGuidance, LotSelectionMethod
from lotwise.models.lots import LotAnalysis, TaxLot


class MethodResult(BaseModel):
    """Outcome of selling the requested shares under one lot-selection method."""

    method: LotSelectionMethod
    lots_consumed: list[LotAnalysis] = Field(default_factory=list)
    total_gain: Decimal = Decimal("0")
    short_term_gain: Decimal = Decimal("0")
    long_term_gain: Decimal = Decimal("0")
    total_tax: Decimal = Decimal("0")
    net_proceeds: Decimal = Decimal("0")
    tax_savings_vs_worst: Decimal = Decimal("0")

    @property
    def shares_sold(self) -> Decimal:
        return sum((a.lot.share_count for a in self.lots_consumed), Decimal("0"))


class HarvestOpportunity(BaseModel):
    lot: TaxLot
    unrealized_loss_amount: Decimal
    estimated_tax_savings: Decimal
    wash_sale_risk: bool
    wash_sale_window_end: date
    guidance: HarvestGuidance


class YearEndProjection(BaseModel):
    realized_gains_to_date: Decimal
    realized_losses_to_date: Decimal
    net_realized: Decimal
    unrealized_gains: Decimal
    unrealized_losses: Decimal
    harvestable_amount: Decimal
    blended_rate: Decimal
    projected_tax: Decimal
    optimized_tax: Decimal
    potential_savings: Decimal


class ApproachingLongTerm(BaseModel):
    """A short-term lot close enough to the long-term date to consider waiting."""

    lot: TaxLot
    days_until_long_term: int
    long_term_date: date
    unrealized_gain: Decimal


class HoldingPeriodSummary(BaseModel):
    total_shares: Decimal
    total_market_value: Decimal
    long_term_lot_count: int
    long_term_shares: Decimal
    short_term_lot_count: int
    short_term_shares: Decimal
    approaching_long_term: list[ApproachingLongTerm] = Field(default_factory=list)


class OptimizerReport(BaseModel):
    """Complete optimizer output for one set of host inputs."""

    as_of: date
    tax_year: int
    filing_status: FilingStatus
    taxable_income: Decimal
    shares_requested: Decimal
    methods: list[MethodResult]
    best_method: LotSelectionMethod
    worst_method: LotSelectionMethod
    harvest_opportunities: list[HarvestOpportunity] = Field(default_factory=list)
    projection: YearEndProjection
    holding_summary: HoldingPeriodSummary
    warnings: list[str] = Field(default_factory=list)

    @property
    def total_harvest_savings(self) -> Decimal:
        return sum(
            (o.estimated_tax_savings for o in self.harvest_opportunities),
            Decimal("0"),
        )
