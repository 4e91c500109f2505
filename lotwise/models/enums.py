"""Enumerations for lotwise."""

from enum import StrEnum


class FilingStatus(StrEnum):
    SINGLE = "SINGLE"
    MFJ = "MARRIED_FILING_JOINTLY"
    MFS = "MARRIED_FILING_SEPARATELY"
    HOH = "HEAD_OF_HOUSEHOLD"


class HoldingPeriod(StrEnum):
    SHORT_TERM = "SHORT_TERM"
    LONG_TERM = "LONG_TERM"


class LotSelectionMethod(StrEnum):
    FIFO = "FIFO"
    LIFO = "LIFO"
    HIFO = "HIFO"
    TAX_OPTIMIZED = "TAX_OPTIMIZED"


class HarvestGuidance(StrEnum):
    WASH_SALE_WAIT = "WASH_SALE_WAIT"
    HARVEST_PRIORITY = "HARVEST_PRIORITY"
    HARVEST = "HARVEST"
