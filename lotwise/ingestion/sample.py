"""Demonstration portfolio: six VTI lots bought over four calendar years."""

from datetime import date
from decimal import Decimal

from lotwise.models.lots import TaxLot

SAMPLE_SECURITY = "VTI"
SAMPLE_PRICE = Decimal("185.50")

# (years before as_of's year, month, day, shares, cost basis per share)
_SAMPLE_LOTS = [
    (3, 3, 15, "100", "145.00"),
    (2, 7, 22, "50", "162.50"),
    (1, 1, 10, "75", "171.25"),
    (0, 2, 5, "40", "195.00"),
    (0, 5, 20, "60", "178.75"),
    (0, 9, 1, "25", "192.00"),
]


def sample_lots(as_of: date | None = None) -> list[TaxLot]:
    """Build the sample lots with acquisition dates anchored to *as_of*'s year."""
    year = (as_of or date.today()).year
    return [
        TaxLot(
            id=f"lot-{i}",
            security=SAMPLE_SECURITY,
            acquisition_date=date(year - years_back, month, day),
            share_count=Decimal(shares),
            cost_basis_per_share=Decimal(cost),
            current_price_per_share=SAMPLE_PRICE,
        )
        for i, (years_back, month, day, shares, cost) in enumerate(_SAMPLE_LOTS, 1)
    ]
