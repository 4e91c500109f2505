"""Tests for lot models."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from lotwise.models.enums import LotSelectionMethod
from lotwise.models.lots import RecentPurchase, TaxLot
from lotwise.models.results import MethodResult


def _lot(**overrides) -> TaxLot:
    fields = dict(
        id="lot-1",
        security="VTI",
        acquisition_date=date(2024, 3, 15),
        share_count=Decimal("100"),
        cost_basis_per_share=Decimal("145.00"),
        current_price_per_share=Decimal("185.50"),
    )
    fields.update(overrides)
    return TaxLot(**fields)


class TestTaxLot:
    def test_derived_values(self):
        lot = _lot()
        assert lot.total_cost_basis == Decimal("14500.00")
        assert lot.market_value == Decimal("18550.00")
        assert lot.unrealized_gain == Decimal("4050.00")

    def test_frozen(self):
        lot = _lot()
        with pytest.raises(ValidationError):
            lot.share_count = Decimal("5")

    def test_with_shares_returns_copy(self):
        lot = _lot()
        part = lot.with_shares(Decimal("25"))
        assert part.share_count == Decimal("25")
        assert part.id == lot.id
        assert lot.share_count == Decimal("100")

    def test_zero_shares_allowed(self):
        assert _lot(share_count=Decimal("0")).market_value == 0

    @pytest.mark.parametrize(
        "field, value",
        [
            ("share_count", Decimal("-1")),
            ("cost_basis_per_share", Decimal("0")),
            ("cost_basis_per_share", Decimal("-10")),
            ("current_price_per_share", Decimal("0")),
        ],
    )
    def test_malformed_lot_rejected(self, field, value):
        with pytest.raises(ValidationError):
            _lot(**{field: value})

    def test_string_values_coerced(self):
        lot = TaxLot(
            id="lot-2",
            security="VTI",
            acquisition_date="2025-01-10",
            share_count="75",
            cost_basis_per_share="171.25",
            current_price_per_share="185.50",
        )
        assert lot.acquisition_date == date(2025, 1, 10)
        assert lot.share_count == Decimal("75")


class TestRecentPurchase:
    def test_fields(self):
        purchase = RecentPurchase(security="VTI", purchase_date=date(2026, 10, 8))
        assert purchase.purchase_date == date(2026, 10, 8)


class TestMethodResult:
    def test_shares_sold_empty(self):
        assert MethodResult(method=LotSelectionMethod.FIFO).shares_sold == Decimal("0")
