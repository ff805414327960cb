"""
Query/Filter Engine - free-text search plus field filters over one resource list.

Pure and order-preserving: the result is always a subsequence of the input,
and an empty query with no filters returns the input unchanged.

Date filters mean different things per kind:
- jobs:   posted within the trailing 7 (week) or 30 (month) days
- events: still upcoming (date after now), for both week and month
"""

from datetime import date, datetime, timedelta
from typing import Callable, Dict, Iterable, List, Optional

from careerhub.schemas.schemas import DateFilter, FieldFilters

DATE_WINDOWS = {
    DateFilter.week: timedelta(days=7),
    DateFilter.month: timedelta(days=30),
}


def _user_fields(item) -> List[str]:
    return [item.name, item.email]


def _company_fields(item) -> List[str]:
    return [item.name, item.description]


def _job_fields(item) -> List[str]:
    return [item.title, item.company_name, item.location]


def _event_fields(item) -> List[str]:
    return [item.title, item.organizer, item.location]


def _course_fields(item) -> List[str]:
    return [item.title, *item.tags]


SEARCH_FIELDS: Dict[str, Callable] = {
    "user": _user_fields,
    "company": _company_fields,
    "job": _job_fields,
    "event": _event_fields,
    "course": _course_fields,
}


def matches_query(item, query: str) -> bool:
    """Case-insensitive substring match against the kind's search fields."""
    if not query:
        return True
    fields = SEARCH_FIELDS.get(item.kind)
    if fields is None:
        return False
    needle = query.lower()
    return any(needle in (value or "").lower() for value in fields(item))


def as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value)).replace(tzinfo=None)


def matches_date(item, date_filter: DateFilter, now: datetime) -> bool:
    if date_filter == DateFilter.all:
        return True
    if item.kind == "job":
        return as_datetime(item.posted_date) > now - DATE_WINDOWS[date_filter]
    if item.kind == "event":
        return as_datetime(item.date) > now
    return True


def matches_fields(item, filters: FieldFilters, now: datetime) -> bool:
    if filters.status and filters.status != "all" and item.kind == "user":
        if item.status != filters.status:
            return False

    if not matches_date(item, filters.date, now):
        return False

    if filters.type and item.kind in ("job", "event"):
        if item.type != filters.type:
            return False

    if filters.virtual_only and item.kind == "event" and not item.virtual:
        return False

    if filters.company and item.kind == "job" and item.company_name != filters.company:
        return False

    if filters.industry and item.kind == "company" and filters.industry not in item.industry:
        return False

    return True


def filter_items(items: Iterable, query: str = "", filters: Optional[FieldFilters] = None,
                 now: Optional[datetime] = None) -> List:
    """
    Filter a resource list.

    Args:
        items: records of one kind (any iterable; never mutated)
        query: free text, matched case-insensitively; empty matches all
        filters: additional AND constraints
        now: reference time for date filters (defaults to utcnow)

    Returns:
        New list, same relative order as the input.
    """
    filters = filters or FieldFilters()
    now = now or datetime.utcnow()
    query = query or ""
    return [
        item for item in items
        if matches_query(item, query) and matches_fields(item, filters, now)
    ]


def annotate_saved(items: Iterable, ledger, saved_kind) -> List[dict]:
    """Serialize items with a `saved` flag taken from the ledger."""
    saved = ledger.list(saved_kind) if saved_kind is not None else set()
    rows = []
    for item in items:
        row = item.model_dump(mode="json")
        if saved_kind is not None:
            row["saved"] = item.id in saved
        rows.append(row)
    return rows
