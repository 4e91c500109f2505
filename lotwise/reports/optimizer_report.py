"""Cost basis optimizer report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from lotwise.engines.brackets import WASH_SALE_WINDOW_DAYS
from lotwise.models.enums import HarvestGuidance, LotSelectionMethod
from lotwise.models.results import HarvestOpportunity, OptimizerReport

TEMPLATE_DIR = Path(__file__).parent / "templates"

METHOD_LABELS: dict[LotSelectionMethod, str] = {
    LotSelectionMethod.FIFO: "FIFO (First In, First Out)",
    LotSelectionMethod.LIFO: "LIFO (Last In, First Out)",
    LotSelectionMethod.HIFO: "HIFO (Highest Cost First)",
    LotSelectionMethod.TAX_OPTIMIZED: "Specific ID (Tax-Optimized)",
}


def money(value: Decimal) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def percent(value: Decimal, places: int = 1) -> str:
    return f"{value:.{places}f}%"


def rate(value: Decimal) -> str:
    return percent(value * 100, 0)


def guidance_text(opportunity: HarvestOpportunity) -> str:
    """Render a harvest guidance code as display text."""
    security = opportunity.lot.security
    loss = money(opportunity.unrealized_loss_amount)
    if opportunity.guidance == HarvestGuidance.WASH_SALE_WAIT:
        return (
            f"Wait until {opportunity.wash_sale_window_end} or sell a different position. "
            f"Avoid repurchasing {security} within {WASH_SALE_WINDOW_DAYS} days."
        )
    if opportunity.guidance == HarvestGuidance.HARVEST_PRIORITY:
        return (
            f"Consider harvesting the {loss} loss. If losses exceed gains, "
            "up to $3,000 can offset ordinary income."
        )
    return (
        f"Harvest the {loss} loss to offset gains. "
        "You can immediately buy a similar (not identical) fund."
    )


class OptimizerReportGenerator:
    """Generates a plain-text cost basis optimization report."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))
        self.env.filters["money"] = money
        self.env.filters["percent"] = percent
        self.env.filters["rate"] = rate
        self.env.filters["guidance"] = guidance_text
        self.env.filters["method_label"] = lambda m: METHOD_LABELS[m]

    def render(self, report: OptimizerReport) -> str:
        """Render the optimizer report."""
        template = self.env.get_template("optimizer_report.txt")
        return template.render(report=report)
