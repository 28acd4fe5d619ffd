"""Shared pytest fixtures for the cursorgen test suite.

Provides reusable fixtures for:
- Minimal and fully-featured project configurations
- A fixed clock for the guide's "Last Updated" footer
- Form files on disk (JSON and YAML)
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from cursorgen.clock import Clock, fixed_clock
from cursorgen.models import (
    ApiConfig,
    DatabaseConfig,
    Domain,
    EnvVariable,
    ProjectConfig,
    ProjectSettings,
    RedisConfig,
    TechnologyStack,
)


FIXED_DAY = date(2024, 1, 15)


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def clock() -> Clock:
    """A clock pinned to 2024-01-15."""
    return fixed_clock(FIXED_DAY)


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def minimal_config() -> ProjectConfig:
    """Only a name: general domain, empty stack, every flag off."""
    return ProjectConfig(project_name="My Cool App")


@pytest.fixture
def full_config() -> ProjectConfig:
    """A web-fullstack project with every optional feature switched on."""
    return ProjectConfig(
        project_name="Shop Front",
        project_description="An online storefront.",
        repository_url="https://github.com/acme/shop-front",
        domain=Domain.WEB_FULLSTACK,
        technology_stack=TechnologyStack(
            languages=["TypeScript"],
            frameworks=["Next.js", "React"],
            databases=["PostgreSQL"],
            tools=["Git", "Docker", "Kubernetes", "GitHub Actions"],
            css_framework="Tailwind CSS",
        ),
        team_size=8,
        use_typescript=True,
        use_linter=True,
        use_formatter=True,
        require_unit_tests=True,
        require_integration_tests=True,
        require_e2e_tests=True,
        testing_frameworks=["jest"],
        min_test_coverage=85,
        include_api_docs=True,
        include_architecture_diagrams=True,
        use_cicd=True,
        cicd_tool="GitHub Actions",
        project_config=ProjectSettings(
            server_port=4000,
            database_config=DatabaseConfig(host="db.local", port=5432, name="shop_front"),
            redis_config=RedisConfig(enabled=True, host="cache.local", port=6380),
            api_config=ApiConfig(base_url="/api/v1", version="v1", requires_auth=True),
            env_variables=[
                EnvVariable(key="STRIPE_KEY", description="Stripe secret", example="sk_test_123"),
            ],
        ),
    )


def make_config(**overrides) -> ProjectConfig:
    """Build a ProjectConfig with a default name, overriding any field."""
    data = {"project_name": "Test Project", **overrides}
    return ProjectConfig(**data)


@pytest.fixture
def config_factory():
    """Factory fixture wrapping ``make_config``."""
    return make_config


# ---------------------------------------------------------------------------
# Form files
# ---------------------------------------------------------------------------

@pytest.fixture
def form_json(tmp_path: Path) -> Path:
    """A camelCase JSON form file for a FastAPI backend."""
    path = tmp_path / "project.json"
    path.write_text(
        json.dumps(
            {
                "projectName": "Billing API",
                "domain": "web-backend",
                "technologyStack": {
                    "languages": ["Python"],
                    "frameworks": ["FastAPI"],
                    "databases": ["PostgreSQL"],
                    "tools": ["Docker", "Git"],
                },
                "testingFrameworks": ["pytest"],
                "projectConfig": {"serverPort": 8000},
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def form_yaml(tmp_path: Path) -> Path:
    """A snake_case YAML form file for a data-science project."""
    path = tmp_path / "project.yaml"
    path.write_text(
        "project_name: Churn Model\n"
        "domain: data-science\n"
        "technology_stack:\n"
        "  languages: [Python]\n"
        "  frameworks: [Jupyter, Pandas]\n"
        "  databases: []\n"
        "  tools: [Git]\n",
        encoding="utf-8",
    )
    return path
