"""
Pydantic Schemas - Domain records and Request/Response Validation

All portal records and API request/response schemas in one file for simplicity.
Actors are a tagged union on `role`; every other resource carries a `kind` tag.
"""

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, computed_field
from typing import Optional, List, Any, Dict, Union, Literal
from typing_extensions import Annotated
import datetime as dt
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class Role(str, Enum):
    student = "student"
    employer = "employer"
    admin = "admin"


class UserStatus(str, Enum):
    active = "active"
    inactive = "inactive"
    pending = "pending"


class ResourceKind(str, Enum):
    user = "user"
    company = "company"
    job = "job"
    event = "event"
    course = "course"

    @property
    def plural(self) -> str:
        """Admin tab / route name for this kind."""
        return "companies" if self is ResourceKind.company else f"{self.value}s"

    @classmethod
    def parse(cls, name: str) -> Optional["ResourceKind"]:
        """Accept singular or plural names; unknown names give None."""
        name = (name or "").lower()
        for kind in cls:
            if name in (kind.value, kind.plural):
                return kind
        return None


class Action(str, Enum):
    read = "read"
    save = "save"
    create = "create"
    edit = "edit"
    delete = "delete"


class JobType(str, Enum):
    fulltime = "fulltime"
    parttime = "parttime"
    internship = "internship"
    contract = "contract"


class JobLevel(str, Enum):
    entry = "entry"
    mid = "mid"
    senior = "senior"
    lead = "lead"


class EventType(str, Enum):
    workshop = "workshop"
    career_fair = "career_fair"
    info_session = "info_session"
    networking = "networking"
    other = "other"


class Difficulty(str, Enum):
    beginner = "Beginner"
    intermediate = "Intermediate"
    advanced = "Advanced"


class SavedKind(str, Enum):
    jobs = "jobs"
    events = "events"
    companies = "companies"


class BulkOperation(str, Enum):
    activate = "activate"
    deactivate = "deactivate"
    delete = "delete"


class DateFilter(str, Enum):
    all = "all"
    week = "week"
    month = "month"


class NotificationKind(str, Enum):
    success = "success"
    error = "error"


class TemplateName(str, Enum):
    modern = "modern"
    classic = "classic"
    creative = "creative"
    minimal = "minimal"
    corporate = "corporate"
    tech = "tech"


class ResumeSection(str, Enum):
    education = "education"
    experience = "experience"
    skills = "skills"
    projects = "projects"
    certifications = "certifications"


class BuilderSection(str, Enum):
    personal = "personal"
    education = "education"
    experience = "experience"
    skills = "skills"
    projects = "projects"
    achievements = "achievements"


class RenderMode(str, Enum):
    preview = "preview"
    print = "print"


# ============================================================
# ACTORS (USER RESOURCES)
# ============================================================

class ManagedItems(BaseModel):
    job_ids: List[str] = []
    event_ids: List[str] = []


class SavedItems(BaseModel):
    jobs: List[str] = []
    events: List[str] = []
    companies: List[str] = []


class BaseActor(BaseModel):
    kind: Literal["user"] = "user"
    id: str
    name: str
    email: str
    status: UserStatus = UserStatus.active
    avatar: Optional[str] = None  # data URL only
    bio: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None


class StudentActor(BaseActor):
    role: Literal["student"] = "student"
    major: Optional[str] = None
    graduation_year: Optional[int] = None
    skills: List[str] = []
    saved_items: SavedItems = Field(default_factory=SavedItems)


class EmployerActor(BaseActor):
    role: Literal["employer"] = "employer"
    company_id: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    managed_items: ManagedItems = Field(default_factory=ManagedItems)


class AdminActor(BaseActor):
    role: Literal["admin"] = "admin"
    permissions: List[str] = []


Actor = Annotated[Union[StudentActor, EmployerActor, AdminActor], Field(discriminator="role")]

actor_adapter = TypeAdapter(Actor)


def parse_actor(data: dict):
    """Build the right actor variant from a role-tagged dict."""
    return actor_adapter.validate_python(data)


# ============================================================
# PORTAL RESOURCES
# ============================================================

class Company(BaseModel):
    kind: Literal["company"] = "company"
    id: str
    name: str
    description: str = ""
    industry: List[str] = []
    location: str = ""
    website: str = ""
    size: Optional[str] = None
    founded: Optional[int] = None
    logo: Optional[str] = None
    alumni: Optional[int] = None
    open_positions: Optional[int] = None


class Job(BaseModel):
    kind: Literal["job"] = "job"
    id: str
    title: str
    # May dangle once the company is deleted; resolve through the company store.
    company_id: Optional[str] = None
    company_name: str = ""
    location: str = ""
    type: JobType = JobType.fulltime
    description: str = ""
    requirements: List[str] = []
    salary: Optional[str] = None
    posted_date: datetime
    deadline: Optional[date] = None
    tags: List[str] = []
    experience: Optional[str] = None
    level: Optional[JobLevel] = None
    skills: List[str] = []


class Event(BaseModel):
    kind: Literal["event"] = "event"
    id: str
    title: str
    description: str = ""
    date: date
    start_time: str
    end_time: str
    location: str = ""
    organizer: str = ""
    host: Optional[str] = None
    type: EventType = EventType.other
    virtual: bool = False
    capacity: Optional[int] = None
    registered_count: Optional[int] = None
    link: Optional[str] = None
    image: Optional[str] = None
    tags: List[str] = []

    @computed_field
    @property
    def time(self) -> str:
        return f"{self.start_time} - {self.end_time}"


class Course(BaseModel):
    kind: Literal["course"] = "course"
    id: str
    title: str
    description: str = ""
    tags: List[str] = []
    difficulty: Difficulty = Difficulty.beginner
    image: Optional[str] = None


# ============================================================
# RESOURCE DRAFTS (create) AND PATCHES (update)
# ============================================================

class UserCreate(BaseModel):
    name: str = ""
    email: str = ""
    role: Role = Role.student
    status: UserStatus = UserStatus.active
    company_id: Optional[str] = None
    company: Optional[str] = None
    major: Optional[str] = None
    graduation_year: Optional[int] = Field(None, ge=1900, le=2100)


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    status: Optional[UserStatus] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None
    major: Optional[str] = None
    graduation_year: Optional[int] = Field(None, ge=1900, le=2100)
    skills: Optional[List[str]] = None
    position: Optional[str] = None
    department: Optional[str] = None


class StatusUpdate(BaseModel):
    status: UserStatus


class CompanyCreate(BaseModel):
    name: str = ""
    description: str = ""
    industry: List[str] = []
    location: str = ""
    website: str = ""
    size: Optional[str] = None
    founded: Optional[int] = Field(None, ge=1800, le=2100)
    logo: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    industry: Optional[List[str]] = None
    location: Optional[str] = None
    website: Optional[str] = None
    size: Optional[str] = None
    founded: Optional[int] = Field(None, ge=1800, le=2100)
    logo: Optional[str] = None


class JobCreate(BaseModel):
    title: str = ""
    company_id: Optional[str] = None
    company_name: Optional[str] = None
    description: str = ""
    location: str = ""
    type: JobType = JobType.fulltime
    salary: Optional[str] = None
    requirements: List[str] = []
    deadline: Optional[date] = None
    experience: Optional[str] = None
    level: Optional[JobLevel] = JobLevel.entry
    skills: List[str] = []


class JobUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    type: Optional[JobType] = None
    salary: Optional[str] = None
    requirements: Optional[List[str]] = None
    deadline: Optional[date] = None
    experience: Optional[str] = None
    level: Optional[JobLevel] = None
    skills: Optional[List[str]] = None


class EventCreate(BaseModel):
    title: str = ""
    description: str = ""
    # dt.date: the field name shadows the type inside the class body
    date: Optional[dt.date] = None
    start_time: str = ""
    end_time: str = ""
    location: str = ""
    virtual: bool = False
    type: EventType = EventType.workshop
    host: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    link: Optional[str] = None
    tags: List[str] = []


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    virtual: Optional[bool] = None
    type: Optional[EventType] = None
    host: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=0)
    link: Optional[str] = None
    tags: Optional[List[str]] = None


class CourseCreate(BaseModel):
    title: str = ""
    description: str = ""
    tags: List[str] = []
    difficulty: Difficulty = Difficulty.beginner
    image: Optional[str] = None


class CourseUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    difficulty: Optional[Difficulty] = None
    image: Optional[str] = None


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = ""  # accepted and ignored; demo accounts only


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = ""
    role: Role
    company: Optional[str] = None


# ============================================================
# QUERY / BULK / SAVED SCHEMAS
# ============================================================

class FieldFilters(BaseModel):
    status: str = "all"
    date: DateFilter = DateFilter.all
    type: Optional[str] = None
    virtual_only: bool = False
    company: Optional[str] = None
    industry: Optional[str] = None


class BulkRequest(BaseModel):
    operation: BulkOperation
    kind: ResourceKind
    # Omit to act on the kind's current admin selection
    selected_ids: Optional[List[str]] = None


# ============================================================
# RESUME SCHEMAS
# ============================================================

class PersonalInfo(BaseModel):
    full_name: Optional[str] = None
    title: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None


class PersonalInfoUpdate(PersonalInfo):
    summary: Optional[str] = None


class Education(BaseModel):
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    gpa: Optional[str] = None
    location: Optional[str] = None
    achievements: List[str] = []


class Experience(BaseModel):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False
    location: Optional[str] = None
    description: List[str] = []


class Project(BaseModel):
    title: str = ""
    description: str = ""
    technologies: List[str] = []
    link: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class Certification(BaseModel):
    name: str = ""
    issuer: str = ""
    date: str = ""
    expires: Optional[str] = None
    link: Optional[str] = None


class Resume(BaseModel):
    id: str
    owner_id: str
    title: str = "Untitled Resume"
    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    template: TemplateName = TemplateName.modern
    education: List[Education] = []
    experience: List[Experience] = []
    skills: List[str] = []
    projects: List[Project] = []
    certifications: List[Certification] = []
    created_at: datetime
    updated_at: datetime


class ResumeCreate(BaseModel):
    title: str = "Untitled Resume"
    template: TemplateName = TemplateName.modern


class EntryPayload(BaseModel):
    entry: Union[str, Dict[str, Any]]


class SummaryUpdate(BaseModel):
    summary: str = ""


class TemplateUpdate(BaseModel):
    template: TemplateName


class ScoreResponse(BaseModel):
    resume_id: str
    score: int


class BuilderState(BaseModel):
    resume_id: str
    section: BuilderSection
    sections: List[BuilderSection]
    finished: bool = False


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class Notification(BaseModel):
    kind: NotificationKind
    message: str
    duration_seconds: int = 3


class MessageResponse(BaseModel):
    message: str
    success: bool = True
    notification: Optional[Notification] = None


class ItemResponse(BaseModel):
    item: Dict[str, Any]
    notification: Optional[Notification] = None


class ListResponse(BaseModel):
    items: List[Dict[str, Any]]
    total: int


class BulkResult(BaseModel):
    succeeded: int
    items: List[Dict[str, Any]] = []
    notification: Optional[Notification] = None


class SavedToggleResponse(BaseModel):
    kind: SavedKind
    id: str
    saved: bool
    notification: Optional[Notification] = None


class DashboardStats(BaseModel):
    total_users: int
    active_users: int
    total_jobs: int
    recent_jobs: int
    total_events: int
    upcoming_events: int
    total_companies: int
    total_courses: int
    user_growth: float
    job_growth: float


class RenderedDocument(BaseModel):
    resume_id: str
    template: TemplateName
    mode: RenderMode
    sections: List[str]
    html: str


class ErrorResponse(BaseModel):
    notification: Notification
    field_errors: Dict[str, str] = {}
