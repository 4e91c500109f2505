"""Lot ingestion: JSON lot files and the sample portfolio."""

from lotwise.ingestion.lot_file import LotFileAdapter, LotImport
from lotwise.ingestion.sample import sample_lots

__all__ = ["LotFileAdapter", "LotImport", "sample_lots"]
