"""Tax computation engines."""

from lotwise.engines.analyzer import LotAnalyzer
from lotwise.engines.comparator import MethodComparator, best_method, worst_method
from lotwise.engines.harvesting import HarvestingScanner
from lotwise.engines.holding import HoldingFacts, LotClassifier
from lotwise.engines.optimizer import CostBasisOptimizer
from lotwise.engines.projection import YearEndProjector
from lotwise.engines.rates import TaxRateResolver

__all__ = [
    "CostBasisOptimizer",
    "HarvestingScanner",
    "HoldingFacts",
    "LotAnalyzer",
    "LotClassifier",
    "MethodComparator",
    "TaxRateResolver",
    "YearEndProjector",
    "best_method",
    "worst_method",
]
