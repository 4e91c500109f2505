"""Shared test fixtures for lotwise."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from lotwise.models.lots import RecentPurchase, TaxLot

AS_OF = date(2026, 10, 18)


def make_lot(
    lot_id: str,
    days_held: int,
    shares: str,
    cost: str,
    price: str = "185.50",
    security: str = "VTI",
    as_of: date = AS_OF,
) -> TaxLot:
    return TaxLot(
        id=lot_id,
        security=security,
        acquisition_date=as_of - timedelta(days=days_held),
        share_count=Decimal(shares),
        cost_basis_per_share=Decimal(cost),
        current_price_per_share=Decimal(price),
    )


@pytest.fixture
def as_of() -> date:
    return AS_OF


@pytest.fixture
def lot_factory():
    return make_lot


@pytest.fixture
def long_term_lot() -> TaxLot:
    return make_lot("lot-lt", 400, "100", "145.00")


@pytest.fixture
def short_term_gain_lot() -> TaxLot:
    return make_lot("lot-st", 120, "60", "178.75")


@pytest.fixture
def loss_lot() -> TaxLot:
    return make_lot("lot-loss", 200, "40", "195.00")


@pytest.fixture
def mixed_lots(long_term_lot, short_term_gain_lot, loss_lot) -> list[TaxLot]:
    return [
        long_term_lot,
        make_lot("lot-lt2", 800, "50", "162.50"),
        short_term_gain_lot,
        loss_lot,
        make_lot("lot-st-loss", 30, "25", "192.00"),
    ]


@pytest.fixture
def recent_vti_purchase() -> RecentPurchase:
    return RecentPurchase(security="VTI", purchase_date=AS_OF - timedelta(days=10))
