"""
Demo data loaded into the in-memory stores at start-up.

Dates are relative to "now" so the recency and upcoming filters always have
something to show.
"""

from datetime import datetime, timedelta
from typing import Dict, Optional

from careerhub.core.session import demo_accounts
from careerhub.schemas.schemas import (
    Company, Course, EmployerActor, Event, Job, ResourceKind, StudentActor
)
from careerhub.services.resource_store import ResourceStore


def demo_companies():
    return [
        Company(
            id="company-1", name="Demo Company",
            description="A demo employer used for trying out employer accounts.",
            industry=["Technology"], location="Springfield, IL", website="https://demo.example.com",
            size="50-200", founded=2012, alumni=14, open_positions=2,
        ),
        Company(
            id="company-2", name="Tech Corp",
            description="Cloud infrastructure and developer tooling at global scale.",
            industry=["Technology", "Cloud"], location="San Francisco, CA", website="https://techcorp.example.com",
            size="1000+", founded=2004, alumni=52, open_positions=3,
        ),
        Company(
            id="company-3", name="Green Ledger",
            description="Sustainable finance and carbon accounting for mid-size businesses.",
            industry=["Finance", "Sustainability"], location="Boston, MA", website="https://greenledger.example.com",
            size="200-500", founded=2016, alumni=9, open_positions=1,
        ),
    ]


def demo_jobs(now: datetime):
    return [
        Job(
            id="job-1", title="Software Engineer", company_id="company-2", company_name="Tech Corp",
            location="San Francisco, CA", type="fulltime",
            description="Build and operate the services behind our developer platform alongside a small, senior team.",
            requirements=["BS in Computer Science or equivalent", "Experience with Python or Go"],
            salary="$110,000 - $140,000", posted_date=now - timedelta(days=2),
            deadline=(now + timedelta(days=30)).date(), tags=["backend", "cloud"],
            experience="2 years", level="mid", skills=["Python", "Go", "Kubernetes"],
        ),
        Job(
            id="job-2", title="Product Designer", company_id="company-1", company_name="Demo Company",
            location="Remote", type="contract",
            description="Own the end-to-end design of our onboarding flows, from research through polished UI.",
            requirements=["Portfolio of shipped product work"],
            salary="$60/hour", posted_date=now - timedelta(days=12),
            deadline=(now + timedelta(days=14)).date(), tags=["design"],
            level="mid", skills=["Figma", "User Research"],
        ),
        Job(
            id="job-3", title="Data Analyst Intern", company_id="company-3", company_name="Green Ledger",
            location="Boston, MA", type="internship",
            description="Support the analytics team with reporting, dashboards and data quality checks this summer.",
            requirements=["Currently enrolled in a degree program"],
            salary="$25/hour", posted_date=now - timedelta(days=45),
            deadline=(now + timedelta(days=7)).date(), tags=["analytics", "internship"],
            level="entry", skills=["SQL", "Excel"],
        ),
    ]


def demo_events(now: datetime):
    return [
        Event(
            id="event-1", title="Fall Career Fair", description="Meet over forty employers hiring for full-time and internship roles.",
            date=(now + timedelta(days=10)).date(), start_time="10:00", end_time="15:00",
            location="Student Union Ballroom", organizer="Career Services", type="career_fair",
            capacity=500, registered_count=212, tags=["hiring"],
        ),
        Event(
            id="event-2", title="Resume Workshop", description="Hands-on review of resumes with career advisors.",
            date=(now + timedelta(days=3)).date(), start_time="16:00", end_time="17:30",
            location="Online", organizer="Career Services", type="workshop", virtual=True,
            link="https://meet.example.com/resume", capacity=80, registered_count=35,
        ),
        Event(
            id="event-3", title="Tech Corp Info Session", description="Learn about engineering at Tech Corp.",
            date=(now - timedelta(days=5)).date(), start_time="18:00", end_time="19:00",
            location="Engineering Hall 101", organizer="Tech Corp", type="info_session",
        ),
    ]


def demo_courses():
    return [
        Course(id="course-1", title="Interviewing Fundamentals", description="Prepare for behavioral and technical interviews.",
               tags=["interviews", "career"], difficulty="Beginner"),
        Course(id="course-2", title="Data Structures Refresher", description="Arrays to graphs in six weeks.",
               tags=["algorithms", "python"], difficulty="Intermediate"),
        Course(id="course-3", title="Negotiating Your Offer", description="Compensation, equity and benefits.",
               tags=["salary", "offers"], difficulty="Advanced"),
    ]


def demo_users():
    users = list(demo_accounts().values())
    users.append(StudentActor(id="1", name="John Doe", email="john@example.com",
                              major="Computer Science", graduation_year=2024))
    users.append(EmployerActor(id="2", name="Jane Smith", email="jane@company.com",
                               company="Tech Corp", company_id="company-2"))
    return users


def load_demo_data(stores: Dict[ResourceKind, ResourceStore], now: Optional[datetime] = None) -> None:
    """Fill every store with the demo records."""
    now = now or datetime.utcnow()
    stores[ResourceKind.user].load(demo_users())
    stores[ResourceKind.company].load(demo_companies())
    stores[ResourceKind.job].load(demo_jobs(now))
    stores[ResourceKind.event].load(demo_events(now))
    stores[ResourceKind.course].load(demo_courses())
