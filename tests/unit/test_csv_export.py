"""Tests for CSV export of admin lists."""

import csv
import io
from datetime import date, datetime

from careerhub.schemas.schemas import (
    AdminActor, Company, Course, Job, ResourceKind, StudentActor, UserStatus
)
from careerhub.utils.csv_export import export_filename, to_csv


def parse(text: str):
    return list(csv.reader(io.StringIO(text)))


class TestFilename:

    def test_iso_date(self) -> None:
        assert export_filename(ResourceKind.user, date(2026, 3, 9)) == "users-export-2026-03-09.csv"
        assert export_filename(ResourceKind.company, date(2026, 3, 9)) == "companies-export-2026-03-09.csv"


class TestToCsv:

    def test_users_export_fixed_columns(self) -> None:
        users = [
            StudentActor(id="s1", name="Ada", email="ada@x.com", bio="ignored"),
            AdminActor(id="a1", name="Root", email="root@x.com", status=UserStatus.inactive),
        ]
        rows = parse(to_csv(ResourceKind.user, users))
        assert rows == [
            ["id", "name", "email", "role", "status"],
            ["s1", "Ada", "ada@x.com", "student", "active"],
            ["a1", "Root", "root@x.com", "admin", "inactive"],
        ]

    def test_lists_are_joined(self) -> None:
        courses = [Course(id="c1", title="Algorithms", tags=["python", "graphs"])]
        rows = parse(to_csv(ResourceKind.course, courses))
        header, row = rows
        assert "kind" not in header
        assert "image" not in header
        assert row[header.index("tags")] == "python; graphs"

    def test_commas_are_quoted(self) -> None:
        companies = [Company(id="c1", name="Acme, Inc.", location="Boston, MA")]
        rows = parse(to_csv(ResourceKind.company, companies))
        assert rows[1][rows[0].index("name")] == "Acme, Inc."

    def test_job_dates(self) -> None:
        job = Job(id="j1", title="Dev", posted_date=datetime(2026, 1, 2, 3, 4, 5), deadline=date(2026, 2, 1))
        header, row = parse(to_csv(ResourceKind.job, [job]))
        assert row[header.index("posted_date")].startswith("2026-01-02T03:04:05")
        assert row[header.index("deadline")] == "2026-02-01"
        assert row[header.index("company_id")] == ""

    def test_empty_list(self) -> None:
        assert to_csv(ResourceKind.job, []) == ""
        assert parse(to_csv(ResourceKind.user, [])) == [["id", "name", "email", "role", "status"]]
