"""
CSV Export Utility - serialize the currently filtered admin list.

Users export id, name, email, role and status only. Other kinds export
their flat fields; list values are joined with "; ".
"""

import csv
import io
from datetime import date, datetime
from typing import List, Optional, Tuple

from careerhub.schemas.schemas import ResourceKind

USER_FIELDS = ["id", "name", "email", "role", "status"]

# Fields left out of every export (type tag, embedded data URLs)
SKIPPED_FIELDS = {"kind", "logo", "avatar", "image"}


def export_filename(kind: ResourceKind, today: Optional[date] = None) -> str:
    """{kind}-export-{YYYY-MM-DD}.csv"""
    today = today or datetime.utcnow().date()
    return f"{kind.plural}-export-{today.isoformat()}.csv"


def _cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple, set)):
        return "; ".join(str(v) for v in value)
    if isinstance(value, dict):
        return "; ".join(f"{k}={v}" for k, v in value.items())
    return str(getattr(value, "value", value))


def export_rows(kind: ResourceKind, items: List) -> Tuple[List[str], List[dict]]:
    """Header and row dicts for the given items."""
    if kind is ResourceKind.user:
        fieldnames = list(USER_FIELDS)
    elif items:
        fieldnames = [f for f in items[0].model_dump(mode="json") if f not in SKIPPED_FIELDS]
    else:
        fieldnames = []

    rows = []
    for item in items:
        data = item.model_dump(mode="json")
        rows.append({field: _cell(data.get(field)) for field in fieldnames})
    return fieldnames, rows


def to_csv(kind: ResourceKind, items: List) -> str:
    """
    Serialize items to CSV text with a header row.

    Users always get a header row; other kinds give an empty document
    for an empty list since their columns come from the first record.
    """
    fieldnames, rows = export_rows(kind, items)
    if not fieldnames:
        return ""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return buffer.getvalue()
