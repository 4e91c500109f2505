"""Marginal tax rate lookup."""

import logging
from decimal import Decimal, InvalidOperation

from lotwise.engines.brackets import (
    DEFAULT_TAX_YEAR,
    LONG_TERM_BRACKETS,
    ORDINARY_BRACKETS,
    BracketTable,
    BracketTables,
)
from lotwise.models.enums import FilingStatus

logger = logging.getLogger(__name__)


def to_decimal(value: Decimal | int | float | str) -> Decimal | None:
    """Coerce host input to a finite Decimal, or None if it is not a number."""
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


class TaxRateResolver:
    """Resolves the marginal ordinary or long-term capital gains rate.

    Lookups never raise. Income that is negative, non-numeric, or infinite
    resolves to the lowest bracket, so a malformed input degrades the
    estimate instead of aborting it.
    """

    def __init__(
        self,
        tax_year: int = DEFAULT_TAX_YEAR,
        ordinary_brackets: BracketTables | None = None,
        long_term_brackets: BracketTables | None = None,
    ) -> None:
        self.ordinary_brackets = (
            ORDINARY_BRACKETS if ordinary_brackets is None else ordinary_brackets
        )
        self.long_term_brackets = (
            LONG_TERM_BRACKETS if long_term_brackets is None else long_term_brackets
        )
        self.tax_year = tax_year

    def rate(
        self,
        taxable_income: Decimal | int | float | str,
        filing_status: FilingStatus,
        is_long_term: bool,
    ) -> Decimal:
        """Return the rate of the highest bracket whose floor <= taxable_income."""
        table = self.table(filing_status, is_long_term)
        if not table:
            logger.warning("No brackets for %s in %s; using 0%%", filing_status, self.tax_year)
            return Decimal("0")

        income = to_decimal(taxable_income)
        if income is None:
            logger.warning("Non-numeric taxable income %r; using lowest bracket", taxable_income)
            return table[0][1]

        for floor, rate in reversed(table):
            if floor <= income:
                return rate
        return table[0][1]

    def table(self, filing_status: FilingStatus, is_long_term: bool) -> BracketTable:
        """Pick the bracket table for a filing status, falling back as needed.

        An unknown tax year uses the latest year available. A filing status
        missing from that year uses the SINGLE table.
        """
        tables = self.long_term_brackets if is_long_term else self.ordinary_brackets
        if not tables:
            return []

        year = self.tax_year
        if year not in tables:
            year = max(tables)
            logger.warning("No brackets for tax year %s; using %s", self.tax_year, year)

        by_status = tables[year]
        if filing_status in by_status:
            return by_status[filing_status]
        logger.warning("No %s brackets for %s; using SINGLE", year, filing_status)
        return by_status.get(FilingStatus.SINGLE, [])
