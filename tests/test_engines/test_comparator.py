"""Tests for the lot-selection method comparator."""

from decimal import Decimal

import pytest

from lotwise.engines.comparator import MethodComparator, best_method, worst_method
from lotwise.models.enums import FilingStatus, LotSelectionMethod

INCOME = Decimal("85000")


def _close(actual: Decimal, expected: str) -> bool:
    return abs(actual - Decimal(expected)) < Decimal("0.000001")


def _by_method(results):
    return {r.method: r for r in results}


class TestCompareMixedLots:
    """Selling 100 of 275 shares across two LT gain, one ST gain and two loss lots."""

    @pytest.fixture(autouse=True)
    def _run(self, mixed_lots, as_of):
        self.lots = mixed_lots
        self.results = MethodComparator().compare(
            mixed_lots, Decimal("100"), as_of, INCOME, FilingStatus.SINGLE,
        )
        self.by_method = _by_method(self.results)

    def test_four_methods_in_order(self):
        assert [r.method for r in self.results] == [
            LotSelectionMethod.FIFO,
            LotSelectionMethod.LIFO,
            LotSelectionMethod.HIFO,
            LotSelectionMethod.TAX_OPTIMIZED,
        ]

    def test_every_method_sells_requested_shares(self):
        for r in self.results:
            assert r.shares_sold == Decimal("100"), r.method

    def test_fifo_oldest_first(self):
        fifo = self.by_method[LotSelectionMethod.FIFO]
        assert [a.lot.id for a in fifo.lots_consumed] == ["lot-lt2", "lot-lt"]
        assert fifo.lots_consumed[1].lot.share_count == Decimal("50")
        assert _close(fifo.total_gain, "3175")
        assert _close(fifo.long_term_gain, "3175")
        assert fifo.short_term_gain == 0
        assert _close(fifo.total_tax, "476.25")

    def test_lifo_newest_first(self):
        lifo = self.by_method[LotSelectionMethod.LIFO]
        assert [a.lot.id for a in lifo.lots_consumed] == ["lot-st-loss", "lot-st", "lot-loss"]
        assert lifo.lots_consumed[-1].lot.share_count == Decimal("15")
        assert _close(lifo.short_term_gain, "100")
        assert _close(lifo.total_tax, "89.10")

    def test_hifo_highest_cost_first(self):
        hifo = self.by_method[LotSelectionMethod.HIFO]
        assert [a.lot.id for a in hifo.lots_consumed] == ["lot-loss", "lot-st-loss", "lot-st"]
        assert hifo.lots_consumed[-1].lot.share_count == Decimal("35")
        assert _close(hifo.total_gain, "-306.25")
        assert _close(hifo.total_tax, "51.975")

    def test_tax_optimized_losses_then_lowest_gain_percent_long_term(self):
        opt = self.by_method[LotSelectionMethod.TAX_OPTIMIZED]
        assert [a.lot.id for a in opt.lots_consumed] == ["lot-loss", "lot-st-loss", "lot-lt2"]
        assert _close(opt.total_gain, "262.5")
        assert _close(opt.total_tax, "120.75")

    def test_savings_relative_to_worst(self):
        worst = worst_method(self.results)
        best = best_method(self.results)
        assert worst.method == LotSelectionMethod.FIFO
        assert best.method == LotSelectionMethod.HIFO
        assert worst.tax_savings_vs_worst == 0
        assert best.tax_savings_vs_worst == worst.total_tax - best.total_tax
        assert all(r.tax_savings_vs_worst >= 0 for r in self.results)

    def test_net_proceeds_is_market_value_less_tax(self):
        for r in self.results:
            assert _close(r.net_proceeds, str(Decimal("18550.00") - r.total_tax)), r.method

    def test_stored_lots_not_mutated(self):
        assert [lot.share_count for lot in self.lots] == [
            Decimal("100"), Decimal("50"), Decimal("60"), Decimal("40"), Decimal("25"),
        ]


class TestTaxOptimizedOrdering:
    def setup_method(self):
        self.comparator = MethodComparator()

    def _optimized(self, lots, shares, as_of):
        results = self.comparator.compare(lots, Decimal(shares), as_of, INCOME, FilingStatus.SINGLE)
        return _by_method(results)[LotSelectionMethod.TAX_OPTIMIZED]

    def test_loss_lot_first_regardless_of_date(self, lot_factory, as_of):
        gain_lot = lot_factory("old-gain", 500, "100", "145.50")  # +4000
        loss_lot = lot_factory("new-loss", 10, "100", "195.50")  # -1000
        opt = self._optimized([gain_lot, loss_lot], "150", as_of)

        assert opt.lots_consumed[0].lot.id == "new-loss"
        assert opt.lots_consumed[0].realized_gain == Decimal("-1000.00")
        assert opt.lots_consumed[1].lot.id == "old-gain"

    def test_most_negative_loss_first(self, lot_factory, as_of):
        small = lot_factory("small-loss", 50, "10", "190.00")
        big = lot_factory("big-loss", 50, "10", "250.00")
        opt = self._optimized([small, big], "20", as_of)
        assert [a.lot.id for a in opt.lots_consumed] == ["big-loss", "small-loss"]

    def test_long_term_before_short_term_gain(self, lot_factory, as_of):
        st_small_gain = lot_factory("st", 100, "10", "185.00")
        lt_big_gain = lot_factory("lt", 700, "10", "100.00")
        opt = self._optimized([st_small_gain, lt_big_gain], "20", as_of)
        assert [a.lot.id for a in opt.lots_consumed] == ["lt", "st"]

    def test_lowest_gain_percent_within_term(self, lot_factory, as_of):
        high = lot_factory("high-pct", 700, "10", "100.00")
        low = lot_factory("low-pct", 700, "10", "180.00")
        opt = self._optimized([high, low], "20", as_of)
        assert [a.lot.id for a in opt.lots_consumed] == ["low-pct", "high-pct"]


class TestShareBoundaries:
    def setup_method(self):
        self.comparator = MethodComparator()

    def test_over_request_consumes_everything(self, mixed_lots, as_of):
        results = self.comparator.compare(
            mixed_lots, Decimal("1000"), as_of, INCOME, FilingStatus.SINGLE,
        )
        for r in results:
            assert r.shares_sold == Decimal("275")
            assert len(r.lots_consumed) == 5
            assert r.total_tax == Decimal("869.10")
            assert r.tax_savings_vs_worst == 0

    @pytest.mark.parametrize("shares", ["0", "1", "37.5", "100", "274.999", "275", "500"])
    def test_consumed_shares_equal_min_of_request_and_available(self, mixed_lots, as_of, shares):
        requested = Decimal(shares)
        results = self.comparator.compare(mixed_lots, requested, as_of, INCOME, FilingStatus.MFJ)
        for r in results:
            assert r.shares_sold == min(requested, Decimal("275")), r.method

    def test_zero_share_lot_skipped(self, lot_factory, as_of):
        lots = [
            lot_factory("empty", 900, "0", "100.00"),
            lot_factory("full", 400, "10", "150.00"),
        ]
        results = self.comparator.compare(lots, Decimal("5"), as_of, INCOME, FilingStatus.SINGLE)
        for r in results:
            assert [a.lot.id for a in r.lots_consumed] == ["full"]
            assert r.shares_sold == Decimal("5")

    def test_empty_collection(self, as_of):
        results = self.comparator.compare([], Decimal("10"), as_of, INCOME, FilingStatus.SINGLE)
        assert len(results) == 4
        for r in results:
            assert r.lots_consumed == []
            assert r.total_tax == 0

    def test_fifo_ties_keep_input_order(self, lot_factory, as_of):
        lots = [
            lot_factory("b", 400, "10", "150.00"),
            lot_factory("a", 400, "10", "140.00"),
        ]
        results = self.comparator.compare(lots, Decimal("20"), as_of, INCOME, FilingStatus.SINGLE)
        fifo = _by_method(results)[LotSelectionMethod.FIFO]
        assert [a.lot.id for a in fifo.lots_consumed] == ["b", "a"]


class TestIdempotence:
    def test_identical_inputs_identical_outputs(self, mixed_lots, as_of):
        comparator = MethodComparator()
        first = comparator.compare(mixed_lots, Decimal("120"), as_of, INCOME, FilingStatus.HOH)
        second = comparator.compare(mixed_lots, Decimal("120"), as_of, INCOME, FilingStatus.HOH)
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]
