"""
Course Routes

GET /courses - List courses (q matches title and tags)
GET /courses/{course_id} - Get course details
POST /courses - Create course (admin)
PUT /courses/{course_id} - Update course (admin)
DELETE /courses/{course_id} - Delete course (admin)
"""

from fastapi import APIRouter

from careerhub.schemas.schemas import CourseCreate, CourseUpdate, ResourceKind
from careerhub.api.routes.resource_routes import add_resource_routes

router = APIRouter(prefix="/courses", tags=["Courses"])

add_resource_routes(router, ResourceKind.course, CourseCreate, CourseUpdate)
