from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class Selection:
    """
    Set of selected record ids.

    Operations are scoped to the ids currently visible in the table, but
    ids that drop out of view are kept until explicitly deselected.
    """
    ids: FrozenSet[int] = field(default_factory=frozenset)

    def __contains__(self, record_id: int) -> bool:
        return record_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def toggle(self, record_id: int) -> Selection:
        if record_id in self.ids:
            return Selection(self.ids - {record_id})
        return Selection(self.ids | {record_id})

    def select_all(self, visible_ids: Sequence[int]) -> Selection:
        """
        Clear everything when the whole view is already selected,
        otherwise select exactly the view.
        """
        if self.all_selected(visible_ids):
            return Selection()
        return Selection(frozenset(visible_ids))

    def all_selected(self, visible_ids: Sequence[int]) -> bool:
        return bool(visible_ids) and all(i in self.ids for i in visible_ids)

    def some_selected(self, visible_ids: Sequence[int]) -> bool:
        return any(i in self.ids for i in visible_ids) and not self.all_selected(visible_ids)

    def visible_selected(self, visible_ids: Sequence[int]) -> List[int]:
        return [i for i in visible_ids if i in self.ids]

    def to_list(self) -> List[int]:
        return sorted(self.ids)

    @classmethod
    def from_list(cls, ids: Optional[Iterable[int]]) -> Selection:
        return cls(frozenset(int(i) for i in (ids or [])))
