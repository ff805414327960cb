"""
Admin dashboard statistics.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional

from careerhub.schemas.schemas import DashboardStats, ResourceKind, UserStatus
from careerhub.services.query_engine import as_datetime
from careerhub.services.resource_store import ResourceStore

RECENT_JOB_DAYS = 30

# Placeholder growth figures shown on the dashboard cards
USER_GROWTH = 12.5
JOB_GROWTH = 8.3


def dashboard_stats(stores: Dict[ResourceKind, ResourceStore], now: Optional[datetime] = None) -> DashboardStats:
    now = now or datetime.utcnow()
    recent_since = now - timedelta(days=RECENT_JOB_DAYS)

    users = stores[ResourceKind.user].list()
    jobs = stores[ResourceKind.job].list()
    events = stores[ResourceKind.event].list()

    return DashboardStats(
        total_users=len(users),
        active_users=sum(1 for u in users if u.status == UserStatus.active),
        total_jobs=len(jobs),
        recent_jobs=sum(1 for j in jobs if as_datetime(j.posted_date) > recent_since),
        total_events=len(events),
        upcoming_events=sum(1 for e in events if as_datetime(e.date) > now),
        total_companies=len(stores[ResourceKind.company]),
        total_courses=len(stores[ResourceKind.course]),
        user_growth=USER_GROWTH,
        job_growth=JOB_GROWTH,
    )
