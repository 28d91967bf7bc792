from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

from ..domain.models import Suggestion


class SuggestionCache:
    """Last fetched suggestions, unique by id.

    The content is an immutable tuple swapped in one assignment per
    completed operation, so readers never see a half-applied update.
    """

    def __init__(self):
        self._records: Tuple[Suggestion, ...] = ()

    @property
    def records(self) -> Tuple[Suggestion, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Suggestion]:
        return iter(self._records)

    def __contains__(self, suggestion_id: object) -> bool:
        return self.get(str(suggestion_id)) is not None

    def get(self, suggestion_id: str) -> Optional[Suggestion]:
        for s in self._records:
            if s.id == suggestion_id:
                return s
        return None

    def replace_all(self, records: Iterable[Suggestion]) -> None:
        """Swap the whole content; the first record wins on duplicate ids."""
        seen = set()
        unique = []
        for s in records:
            if s.id in seen:
                continue
            seen.add(s.id)
            unique.append(s)
        self._records = tuple(unique)

    def clear(self) -> None:
        self._records = ()

    def remove(self, suggestion_id: str) -> bool:
        kept = tuple(s for s in self._records if s.id != suggestion_id)
        removed = len(kept) != len(self._records)
        self._records = kept
        return removed

    def replace_one(self, record: Suggestion) -> bool:
        """Replace the entry with ``record.id``; no-op when absent."""
        if record.id not in self:
            return False
        self._records = tuple(record if s.id == record.id else s for s in self._records)
        return True


class DetailSelection:
    """The record shown in the detail view, referenced by id.

    Held apart from the cache; the board invalidates it explicitly whenever
    the referenced record goes away.
    """

    def __init__(self):
        self._id: Optional[str] = None
        self._record: Optional[Suggestion] = None

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def record(self) -> Optional[Suggestion]:
        return self._record

    def matches(self, suggestion_id: str) -> bool:
        return self._id is not None and self._id == suggestion_id

    def select(self, record: Suggestion) -> None:
        self._id = record.id
        self._record = record

    def refresh(self, record: Suggestion) -> bool:
        """Show ``record`` if it is the selected one."""
        if not self.matches(record.id):
            return False
        self._record = record
        return True

    def clear(self) -> None:
        self._id = None
        self._record = None
