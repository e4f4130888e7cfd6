from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

from whiskey_browser.core.domain import Domain, derive_domain
from whiskey_browser.core.record import Whiskey


class Collection:
    """
    A named, read-only sequence of Whiskey records.

    The Domain is derived lazily and cached, since the records never
    change for the lifetime of a Collection.
    """

    def __init__(
        self,
        name: str,
        records: Sequence[Whiskey],
        owner: Optional[str] = None,
        file_path: Optional[Path] = None,
    ) -> None:
        self.name = name
        self.records: tuple[Whiskey, ...] = tuple(records)
        self.owner = owner
        self.file_path = file_path

        self._by_id: Dict[int, Whiskey] = {w.id: w for w in self.records}
        self._domain: Optional[Domain] = None

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Whiskey]:
        return iter(self.records)

    def domain(self) -> Domain:
        """Return the cached Domain for dropdowns and range placeholders."""
        if self._domain is None:
            self._domain = derive_domain(self.records)
        return self._domain

    def get(self, record_id: int) -> Optional[Whiskey]:
        return self._by_id.get(record_id)

    def ids(self) -> List[int]:
        return [w.id for w in self.records]
