"""
View filter pipeline.

``apply_filters`` is a pure function of (records, controls): it never
mutates its input and returns the same ordered tuple for the same input.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Tuple

from .models import ALL, FilterControls, SortOrder, Suggestion

_OLDEST_POSSIBLE = datetime.min.replace(tzinfo=timezone.utc)


def _value(v) -> str:
    return str(getattr(v, "value", v))


def matches_status(s: Suggestion, status_filter) -> bool:
    f = _value(status_filter)
    return f == ALL or s.status_value == f


def matches_category(s: Suggestion, category_filter) -> bool:
    f = _value(category_filter)
    return f == ALL or s.category_value == f


def matches_search(s: Suggestion, search_term: str) -> bool:
    term = (search_term or "").lower()
    if not term:
        return True
    return term in (s.title or "").lower() or term in (s.description or "").lower()


def _created_key(s: Suggestion) -> datetime:
    return s.created_at or _OLDEST_POSSIBLE


def apply_filters(records: Iterable[Suggestion], controls: FilterControls) -> Tuple[Suggestion, ...]:
    """Filter by status, category and search term, then sort by creation time.

    Sorting is stable: records with equal ``created_at`` keep their cache
    order for both sort directions.
    """
    kept = [
        s for s in records
        if matches_status(s, controls.status_filter)
        and matches_category(s, controls.category_filter)
        and matches_search(s, controls.search_term)
    ]
    if SortOrder(controls.sort_order) == SortOrder.NEWEST:
        # reverse=True still keeps equal keys in original order
        kept.sort(key=_created_key, reverse=True)
    else:
        kept.sort(key=_created_key)
    return tuple(kept)
