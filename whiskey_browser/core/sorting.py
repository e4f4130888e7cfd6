from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple

from whiskey_browser.core.exceptions import UnknownColumnError
from whiskey_browser.core.record import KIND_NUMBER, KIND_TEXT, Whiskey, is_number

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = (
    "name",
    "type",
    "distillery",
    "region",
    "age",
    "abv",
    "size",
    "quantity",
    "msrp",
    "secondary_price",
    "rating",
)

_COLUMN_KINDS: Dict[str, str] = {
    f.name: f.metadata["kind"] for f in fields(Whiskey) if f.name in SORTABLE_COLUMNS
}


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class SortState:
    """Active sort column and direction for the table."""
    column: str = "name"
    direction: SortDirection = SortDirection.ASC

    def toggle(self, column: str) -> SortState:
        """
        Same column flips the direction; a new column starts ascending.
        """
        if column not in SORTABLE_COLUMNS:
            raise UnknownColumnError(column)
        if column == self.column:
            return SortState(column=column, direction=self.direction.flipped())
        return SortState(column=column, direction=SortDirection.ASC)

    def to_dict(self) -> Dict[str, str]:
        return {"column": self.column, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> SortState:
        data = data or {}
        column = data.get("column")
        if column not in SORTABLE_COLUMNS:
            return cls()
        try:
            direction = SortDirection(data.get("direction", "asc"))
        except ValueError:
            direction = SortDirection.ASC
        return cls(column=column, direction=direction)


def collation_key(text: str) -> Tuple[str, str]:
    """
    Ordering key approximating locale collation: accents and case are
    ignored first, then the raw string breaks ties.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text


def _sort_value(record: Whiskey, column: str, kind: str) -> Any:
    value = record.get(column)
    if kind == KIND_NUMBER:
        return value if is_number(value) else None
    if kind == KIND_TEXT:
        return collation_key(value) if isinstance(value, str) else None
    return None


def sort_records(
    records: Sequence[Whiskey],
    column: str,
    direction: SortDirection | str = SortDirection.ASC,
) -> List[Whiskey]:
    """
    Return a new list ordered by `column`.

    Records without a value for the column always come last, in their
    input order. Equal keys keep their input order in both directions.
    """
    kind = _COLUMN_KINDS.get(column)
    if kind is None:
        raise UnknownColumnError(column)
    direction = SortDirection(direction)

    present: List[Tuple[Any, Whiskey]] = []
    missing: List[Whiskey] = []
    for record in records:
        key = _sort_value(record, column, kind)
        if key is None:
            missing.append(record)
        else:
            present.append((key, record))

    # reverse=True keeps equal keys in input order
    present.sort(key=lambda pair: pair[0], reverse=direction is SortDirection.DESC)

    logger.debug(
        "Sorted records",
        extra={"column": column, "direction": direction.value, "n_missing": len(missing)},
    )
    return [record for _, record in present] + missing


def sort_by_state(records: Sequence[Whiskey], state: SortState) -> List[Whiskey]:
    return sort_records(records, state.column, state.direction)
