"""Shared fixtures: isolated settings, a fresh portal per test, demo logins."""

import os

# careerhub.main builds a module-level app; keep it off the working directory
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SIMULATED_LATENCY_SECONDS", "0")

from pathlib import Path

import pytest

from careerhub.core.config import Settings
from careerhub.core.state import PortalState

ADMIN_EMAIL = "g6@gmail.com"
EMPLOYER_EMAIL = "employer@demo.com"
STUDENT_EMAIL = "student@demo.com"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="file",
        storage_dir=str(tmp_path / "store"),
        simulated_latency_seconds=0,
        simulated_failure_rate=0,
        log_level="DEBUG",
    )


@pytest.fixture()
def portal(settings: Settings) -> PortalState:
    return PortalState.bootstrap(settings)


@pytest.fixture()
def admin_portal(portal: PortalState) -> PortalState:
    portal.session.login(ADMIN_EMAIL)
    return portal


@pytest.fixture()
def employer_portal(portal: PortalState) -> PortalState:
    portal.session.login(EMPLOYER_EMAIL)
    return portal


@pytest.fixture()
def student_portal(portal: PortalState) -> PortalState:
    portal.session.login(STUDENT_EMAIL)
    return portal
