"""Data models for lotwise."""

from lotwise.models.enums import (
    FilingStatus,
    HarvestGuidance,
    HoldingPeriod,
    LotSelectionMethod,
)
from lotwise.models.lots import LotAnalysis, RecentPurchase, TaxLot
from lotwise.models.results import (
    ApproachingLongTerm,
    HarvestOpportunity,
    HoldingPeriodSummary,
    MethodResult,
    OptimizerReport,
    YearEndProjection,
)

__all__ = [
    "ApproachingLongTerm",
    "FilingStatus",
    "HarvestGuidance",
    "HarvestOpportunity",
    "HoldingPeriod",
    "HoldingPeriodSummary",
    "LotAnalysis",
    "LotSelectionMethod",
    "MethodResult",
    "OptimizerReport",
    "RecentPurchase",
    "TaxLot",
    "YearEndProjection",
]
