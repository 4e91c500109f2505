"""Holding-period classification."""

from datetime import date, timedelta

from pydantic import BaseModel

from lotwise.engines.brackets import APPROACHING_LONG_TERM_DAYS, LONG_TERM_HOLDING_DAYS


class HoldingFacts(BaseModel):
    holding_period_days: int
    is_long_term: bool
    days_until_long_term: int
    long_term_date: date


class LotClassifier:
    """Computes holding-period facts for a lot as of a reference date."""

    def classify(self, acquisition_date: date, as_of: date) -> HoldingFacts:
        # Absolute difference: a future acquisition date reads as short-term
        # instead of producing a negative holding period.
        days = abs((as_of - acquisition_date).days)
        long_term = days >= LONG_TERM_HOLDING_DAYS
        return HoldingFacts(
            holding_period_days=days,
            is_long_term=long_term,
            days_until_long_term=0 if long_term else LONG_TERM_HOLDING_DAYS - days,
            long_term_date=acquisition_date + timedelta(days=LONG_TERM_HOLDING_DAYS),
        )

    def is_approaching_long_term(self, acquisition_date: date, as_of: date) -> bool:
        """True for short-term lots within APPROACHING_LONG_TERM_DAYS of the threshold."""
        facts = self.classify(acquisition_date, as_of)
        return (
            not facts.is_long_term
            and facts.days_until_long_term <= APPROACHING_LONG_TERM_DAYS
        )
