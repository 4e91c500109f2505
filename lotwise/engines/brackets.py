"""Tax bracket configuration.

Federal ordinary-income and long-term capital gains rate tables, keyed by tax
year and filing status, plus the holding-period and wash-sale constants the
engines share. Never hardcode brackets in computation functions.

Each table is a list of (income_floor, rate) pairs, strictly increasing in
income_floor. The applicable rate is that of the highest floor <= taxable
income. Hosts with authoritative tables pass their own to TaxRateResolver.

Sources:
  - 2025: IRS Rev. Proc. 2024-40
  - 2026: IRS inflation adjustments for tax year 2026 (post-OBBBA)
"""

from decimal import Decimal

from lotwise.models.enums import FilingStatus

BracketTable = list[tuple[Decimal, Decimal]]
BracketTables = dict[int, dict[FilingStatus, BracketTable]]

DEFAULT_TAX_YEAR = 2026

# ---------------------------------------------------------------------------
# Federal ordinary income brackets: {year: {filing_status: [(floor, rate), ...]}}
# Short-term gains are taxed at these rates.
# ---------------------------------------------------------------------------
ORDINARY_BRACKETS: BracketTables = {
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("11925"), Decimal("0.12")),
            (Decimal("48475"), Decimal("0.22")),
            (Decimal("103350"), Decimal("0.24")),
            (Decimal("197300"), Decimal("0.32")),
            (Decimal("250525"), Decimal("0.35")),
            (Decimal("626350"), Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("23850"), Decimal("0.12")),
            (Decimal("96950"), Decimal("0.22")),
            (Decimal("206700"), Decimal("0.24")),
            (Decimal("394600"), Decimal("0.32")),
            (Decimal("501050"), Decimal("0.35")),
            (Decimal("751600"), Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("11925"), Decimal("0.12")),
            (Decimal("48475"), Decimal("0.22")),
            (Decimal("103350"), Decimal("0.24")),
            (Decimal("197300"), Decimal("0.32")),
            (Decimal("250525"), Decimal("0.35")),
            (Decimal("375800"), Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("17000"), Decimal("0.12")),
            (Decimal("64850"), Decimal("0.22")),
            (Decimal("103350"), Decimal("0.24")),
            (Decimal("197300"), Decimal("0.32")),
            (Decimal("250500"), Decimal("0.35")),
            (Decimal("626350"), Decimal("0.37")),
        ],
    },
    2026: {
        FilingStatus.SINGLE: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("12400"), Decimal("0.12")),
            (Decimal("50400"), Decimal("0.22")),
            (Decimal("105700"), Decimal("0.24")),
            (Decimal("201775"), Decimal("0.32")),
            (Decimal("256225"), Decimal("0.35")),
            (Decimal("640600"), Decimal("0.37")),
        ],
        FilingStatus.MFJ: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("24800"), Decimal("0.12")),
            (Decimal("100800"), Decimal("0.22")),
            (Decimal("211400"), Decimal("0.24")),
            (Decimal("403550"), Decimal("0.32")),
            (Decimal("512450"), Decimal("0.35")),
            (Decimal("768700"), Decimal("0.37")),
        ],
        FilingStatus.MFS: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("12400"), Decimal("0.12")),
            (Decimal("50400"), Decimal("0.22")),
            (Decimal("105700"), Decimal("0.24")),
            (Decimal("201775"), Decimal("0.32")),
            (Decimal("256225"), Decimal("0.35")),
            (Decimal("384350"), Decimal("0.37")),
        ],
        FilingStatus.HOH: [
            (Decimal("0"), Decimal("0.10")),
            (Decimal("17700"), Decimal("0.12")),
            (Decimal("67450"), Decimal("0.22")),
            (Decimal("105700"), Decimal("0.24")),
            (Decimal("201775"), Decimal("0.32")),
            (Decimal("256200"), Decimal("0.35")),
            (Decimal("640600"), Decimal("0.37")),
        ],
    },
}

# ---------------------------------------------------------------------------
# Federal LTCG rate brackets: (floor, rate) for the 0%/15%/20% rates.
# Per IRC Section 1(h).
# ---------------------------------------------------------------------------
LONG_TERM_BRACKETS: BracketTables = {
    2025: {
        FilingStatus.SINGLE: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("48350"), Decimal("0.15")),
            (Decimal("533400"), Decimal("0.20")),
        ],
        FilingStatus.MFJ: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("96700"), Decimal("0.15")),
            (Decimal("600050"), Decimal("0.20")),
        ],
        FilingStatus.MFS: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("48350"), Decimal("0.15")),
            (Decimal("300000"), Decimal("0.20")),
        ],
        FilingStatus.HOH: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("64750"), Decimal("0.15")),
            (Decimal("566700"), Decimal("0.20")),
        ],
    },
    2026: {
        FilingStatus.SINGLE: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("49450"), Decimal("0.15")),
            (Decimal("545500"), Decimal("0.20")),
        ],
        FilingStatus.MFJ: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("98900"), Decimal("0.15")),
            (Decimal("613700"), Decimal("0.20")),
        ],
        FilingStatus.MFS: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("49450"), Decimal("0.15")),
            (Decimal("306850"), Decimal("0.20")),
        ],
        FilingStatus.HOH: [
            (Decimal("0"), Decimal("0.00")),
            (Decimal("66200"), Decimal("0.15")),
            (Decimal("579600"), Decimal("0.20")),
        ],
    },
}

# ---------------------------------------------------------------------------
# Holding period per IRC Section 1222: "more than one year"
# ---------------------------------------------------------------------------
LONG_TERM_HOLDING_DAYS = 366

# Short-term lots this close to LONG_TERM_HOLDING_DAYS are flagged as worth waiting on
APPROACHING_LONG_TERM_DAYS = 60

# ---------------------------------------------------------------------------
# Wash sale per IRC Section 1091 (lookback only, see HarvestingScanner)
# ---------------------------------------------------------------------------
WASH_SALE_WINDOW_DAYS = 30

# ---------------------------------------------------------------------------
# Capital loss limitation per IRC Section 1211(b). Losses above this amount
# cannot all be used against ordinary income in one year.
# ---------------------------------------------------------------------------
HARVEST_PRIORITY_THRESHOLD = Decimal("3000")
