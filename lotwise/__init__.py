"""lotwise: tax-lot selection and optimization engine."""

__version__ = "0.1.0"
