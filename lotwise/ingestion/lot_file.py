"""JSON lot-file adapter.

Accepted shapes::

    {"lots": [...], "recent_purchases": [...]}
    [...]                                   # bare list of lots

Each lot record needs ``id``, ``security`` (or ``symbol``/``ticker``),
``acquisition_date``, ``share_count`` (or ``shares``), ``cost_basis_per_share``
(or ``cost_basis``) and ``current_price_per_share`` (or ``current_price``).
"""

import json
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from lotwise.exceptions import LotFileError, LotValidationError
from lotwise.models.lots import RecentPurchase, TaxLot

_LOT_ALIASES: dict[str, tuple[str, ...]] = {
    "security": ("security", "symbol", "ticker"),
    "acquisition_date": ("acquisition_date", "purchase_date", "date_acquired"),
    "share_count": ("share_count", "shares"),
    "cost_basis_per_share": ("cost_basis_per_share", "cost_basis", "cost_per_share"),
    "current_price_per_share": ("current_price_per_share", "current_price", "price"),
}

_PURCHASE_ALIASES: dict[str, tuple[str, ...]] = {
    "security": ("security", "symbol", "ticker"),
    "purchase_date": ("purchase_date", "date"),
}


@dataclass
class LotImport:
    """Bundles the output from LotFileAdapter.parse."""

    lots: list[TaxLot] = field(default_factory=list)
    recent_purchases: list[RecentPurchase] = field(default_factory=list)


def _pick(raw: dict, aliases: tuple[str, ...]):
    for key in aliases:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


class LotFileAdapter:
    """Reads a JSON lot file into TaxLot and RecentPurchase models."""

    def parse(self, file_path: Path) -> LotImport:
        if not file_path.exists():
            raise LotFileError(str(file_path), "file not found")
        try:
            text = file_path.read_text()
        except (OSError, UnicodeDecodeError) as exc:
            raise LotFileError(str(file_path), f"cannot read file: {exc}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise LotFileError(str(file_path), f"invalid JSON: {exc}") from exc
        return self.parse_data(raw, source=str(file_path))

    def parse_data(self, raw: dict | list, source: str = "<data>") -> LotImport:
        if isinstance(raw, list):
            raw_lots, raw_purchases = raw, []
        elif isinstance(raw, dict) and "lots" in raw:
            raw_lots = raw["lots"]
            raw_purchases = raw.get("recent_purchases") or []
        else:
            raise LotFileError(source, "expected a list of lots or an object with a 'lots' key")

        if not isinstance(raw_lots, list) or not isinstance(raw_purchases, list):
            raise LotFileError(source, "'lots' and 'recent_purchases' must be lists")

        return LotImport(
            lots=[self._parse_lot(record, i) for i, record in enumerate(raw_lots)],
            recent_purchases=[self._parse_purchase(record, i) for i, record in enumerate(raw_purchases)],
        )

    def validate(self, data: LotImport, as_of: date | None = None) -> list[str]:
        """Return non-blocking warnings about the imported lots."""
        as_of = as_of or date.today()
        warnings: list[str] = []

        seen: set[str] = set()
        for lot in data.lots:
            if lot.id in seen:
                warnings.append(f"Duplicate lot id: {lot.id}")
            seen.add(lot.id)
            if lot.share_count == 0:
                warnings.append(f"Lot {lot.id} has zero shares and will be skipped")
            if lot.acquisition_date > as_of:
                warnings.append(
                    f"Lot {lot.id} acquisition date {lot.acquisition_date} is after {as_of}"
                )

        securities = sorted({lot.security for lot in data.lots})
        if len(securities) > 1:
            warnings.append(f"Lots span multiple securities: {', '.join(securities)}")

        for purchase in data.recent_purchases:
            if purchase.security not in securities:
                warnings.append(
                    f"Recent purchase of {purchase.security} matches no lot and cannot "
                    "affect wash-sale checks"
                )
        return warnings

    # --- Record parsing ---

    @staticmethod
    def _parse_lot(raw: dict, index: int) -> TaxLot:
        if not isinstance(raw, dict):
            raise LotValidationError(f"#{index}", "record is not an object")
        lot_id = str(raw.get("id") or f"lot-{index + 1}")
        values = {name: _pick(raw, aliases) for name, aliases in _LOT_ALIASES.items()}

        missing = [name for name, value in values.items() if value is None]
        if missing:
            raise LotValidationError(lot_id, f"missing fields: {', '.join(missing)}")

        try:
            return TaxLot(
                id=lot_id,
                security=str(values["security"]).upper(),
                acquisition_date=date.fromisoformat(str(values["acquisition_date"])[:10]),
                share_count=Decimal(str(values["share_count"])),
                cost_basis_per_share=Decimal(str(values["cost_basis_per_share"])),
                current_price_per_share=Decimal(str(values["current_price_per_share"])),
            )
        except (InvalidOperation, ValueError, ValidationError) as exc:
            raise LotValidationError(lot_id, str(exc)) from exc

    @staticmethod
    def _parse_purchase(raw: dict, index: int) -> RecentPurchase:
        if not isinstance(raw, dict):
            raise LotValidationError(f"purchase #{index}", "record is not an object")
        security = _pick(raw, _PURCHASE_ALIASES["security"])
        purchase_date = _pick(raw, _PURCHASE_ALIASES["purchase_date"])
        if security is None or purchase_date is None:
            raise LotValidationError(f"purchase #{index}", "needs security and purchase_date")
        try:
            return RecentPurchase(
                security=str(security).upper(),
                purchase_date=date.fromisoformat(str(purchase_date)[:10]),
            )
        except ValueError as exc:
            raise LotValidationError(f"purchase #{index}", str(exc)) from exc
