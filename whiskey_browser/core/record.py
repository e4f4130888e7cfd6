from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from whiskey_browser.core.exceptions import RecordSchemaError

logger = logging.getLogger(__name__)

KIND_TEXT = "text"
KIND_NUMBER = "number"
KIND_FLAG = "flag"


def _text():
    return field(default=None, metadata={"kind": KIND_TEXT})


def _number():
    return field(default=None, metadata={"kind": KIND_NUMBER})


def _flag():
    return field(default=None, metadata={"kind": KIND_FLAG})


@dataclass(frozen=True)
class Whiskey:
    """
    One bottle in a collection.

    Every attribute except `id` is optional. `None` means "no value recorded",
    which is distinct from a present falsy value such as 0 or False.

    Fields used by the filter/sort core:

    - categorical: type, distillery, region, country
    - flags: limited_edition, chill_filtered, natural_color, is_opened
    - measures: age, abv, rating, purchase_price, msrp
    """

    id: int

    name: Optional[str] = _text()
    type: Optional[str] = _text()
    distillery: Optional[str] = _text()
    region: Optional[str] = _text()
    country: Optional[str] = _text()

    age: Optional[float] = _number()
    abv: Optional[float] = _number()
    proof: Optional[float] = _number()
    size: Optional[str] = _text()
    quantity: Optional[float] = _number()
    rating: Optional[float] = _number()

    msrp: Optional[float] = _number()
    secondary_price: Optional[float] = _number()

    description: Optional[str] = _text()
    tasting_notes: Optional[str] = _text()

    # Purchase & acquisition
    purchase_date: Optional[str] = _text()
    purchase_price: Optional[float] = _number()
    purchase_location: Optional[str] = _text()
    obtained_from: Optional[str] = _text()
    bottle_code: Optional[str] = _text()

    # Inventory
    is_opened: Optional[bool] = _flag()
    date_opened: Optional[str] = _text()
    remaining_volume: Optional[float] = _number()
    storage_location: Optional[str] = _text()
    status: Optional[str] = _text()

    # Cask & production
    cask_type: Optional[str] = _text()
    cask_finish: Optional[str] = _text()
    barrel_number: Optional[str] = _text()
    bottle_number: Optional[str] = _text()
    vintage_year: Optional[str] = _text()
    bottled_date: Optional[str] = _text()
    mash_bill: Optional[str] = _text()

    # Tasting
    color: Optional[str] = _text()
    nose_notes: Optional[str] = _text()
    palate_notes: Optional[str] = _text()
    finish_notes: Optional[str] = _text()
    times_tasted: Optional[float] = _number()
    last_tasted_date: Optional[str] = _text()
    food_pairings: Optional[str] = _text()

    # Value tracking
    current_market_value: Optional[float] = _number()
    value_gain_loss: Optional[float] = _number()
    is_investment_bottle: Optional[bool] = _flag()

    # Production flags
    limited_edition: Optional[bool] = _flag()
    chill_filtered: Optional[bool] = _flag()
    natural_color: Optional[bool] = _flag()
    awards: Optional[str] = _text()

    # Media
    image_url: Optional[str] = _text()
    label_image_url: Optional[str] = _text()
    receipt_image_url: Optional[str] = _text()

    # Sharing
    is_for_sale: Optional[bool] = _flag()
    asking_price: Optional[float] = _number()
    is_for_trade: Optional[bool] = _flag()
    shared_with: Optional[str] = _text()
    private_notes: Optional[str] = _text()

    created_by: Optional[float] = _number()
    created_at: Optional[str] = _text()
    updated_at: Optional[str] = _text()

    @property
    def coalesced_price(self) -> Optional[float]:
        """Purchase price if recorded, otherwise MSRP, otherwise None."""
        if is_number(self.purchase_price):
            return self.purchase_price
        if is_number(self.msrp):
            return self.msrp
        return None

    def get(self, attr: str) -> Any:
        return getattr(self, attr, None)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> Whiskey:
        """
        Build a Whiskey from a JSON object.

        Values of the wrong type for their field are stored as None.
        Unknown keys are ignored.
        """
        record_id = raw.get("id")
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise RecordSchemaError(f"Record has no integer id: {record_id!r}")

        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name == "id" or f.name not in raw:
                continue
            coerced = _coerce(raw[f.name], f.metadata["kind"])
            if coerced is None and raw[f.name] is not None:
                logger.debug(
                    "Dropping malformed attribute",
                    extra={"record_id": record_id, "attribute": f.name},
                )
            values[f.name] = coerced

        return cls(id=record_id, **values)


def _coerce(value: Any, kind: str) -> Any:
    if value is None:
        return None

    if kind == KIND_FLAG:
        if isinstance(value, bool):
            return value
        # SQLite-style 0/1 integer flags
        if isinstance(value, int) and value in (0, 1):
            return value == 1
        return None

    if kind == KIND_NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    return value if isinstance(value, str) else None


def is_number(value: Any) -> bool:
    """True for real numbers (bools excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
