"""Tests for the ProjectConfig data model.

Covers:
- Domain family resolution and the frontend/backend predicates
- Domain labels
- The two slug rules
- Derived defaults (coverage target, effective port)
- camelCase alias loading
- Validation bounds
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cursorgen.models import (
    Domain,
    DomainFamily,
    ProjectConfig,
    ProjectSettings,
    RedisConfig,
    db_slug,
    folder_slug,
    title_words,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------


class TestDomainFamily:
    @pytest.mark.parametrize(
        "domain, family",
        [
            (Domain.GENERAL, DomainFamily.GENERAL),
            (Domain.WEB_FRONTEND, DomainFamily.WEB),
            (Domain.WEB_BACKEND, DomainFamily.WEB),
            (Domain.WEB_FULLSTACK, DomainFamily.WEB),
            (Domain.MOBILE_IOS, DomainFamily.MOBILE),
            (Domain.MOBILE_ANDROID, DomainFamily.MOBILE),
            (Domain.MOBILE_REACT_NATIVE, DomainFamily.MOBILE),
            (Domain.DATA_SCIENCE, DomainFamily.DATA_SCIENCE),
            (Domain.DEVOPS, DomainFamily.DEVOPS),
        ],
    )
    def test_family(self, domain, family):
        assert domain.family is family

    def test_fullstack_is_frontend_and_backend(self):
        assert Domain.WEB_FULLSTACK.is_frontend
        assert Domain.WEB_FULLSTACK.is_backend

    def test_frontend_is_not_backend(self):
        assert Domain.WEB_FRONTEND.is_frontend
        assert not Domain.WEB_FRONTEND.is_backend

    def test_mobile_is_not_web(self):
        assert Domain.MOBILE_IOS.is_mobile
        assert not Domain.MOBILE_IOS.is_web


class TestDomainLabel:
    def test_fullstack_label(self):
        assert Domain.WEB_FULLSTACK.label == "Web Fullstack"

    def test_react_native_label(self):
        assert Domain.MOBILE_REACT_NATIVE.label == "Mobile React Native"

    def test_title_words(self):
        assert title_words("data-science") == "Data Science"


# ---------------------------------------------------------------------------
# Slugs
# ---------------------------------------------------------------------------


class TestSlugs:
    def test_db_slug(self):
        assert db_slug("My Cool App") == "my_cool_app"

    def test_folder_slug(self):
        assert folder_slug("My Cool App") == "my-cool-app"

    def test_whitespace_runs_collapse(self):
        assert db_slug("My   Cool\tApp") == "my_cool_app"
        assert folder_slug("My   Cool\tApp") == "my-cool-app"

    def test_config_exposes_both_slugs(self, minimal_config):
        assert minimal_config.db_slug == "my_cool_app"
        assert minimal_config.folder_slug == "my-cool-app"


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


class TestDerivedValues:
    def test_coverage_defaults_to_80(self):
        config = ProjectConfig(project_name="x", min_test_coverage=None)
        assert config.coverage_target == 80

    def test_coverage_zero_is_kept(self):
        config = ProjectConfig(project_name="x", min_test_coverage=0)
        assert config.coverage_target == 0

    def test_effective_port_defaults_to_3000(self, minimal_config):
        assert minimal_config.server_port is None
        assert minimal_config.effective_port == 3000

    def test_effective_port_uses_configured_port(self, full_config):
        assert full_config.effective_port == 4000

    def test_negative_port_passes_through(self):
        config = ProjectConfig(
            project_name="x", project_config=ProjectSettings(server_port=-1)
        )
        assert config.effective_port == -1

    def test_redis_disabled_without_settings(self, minimal_config):
        assert minimal_config.redis_enabled is False

    def test_redis_enabled_flag(self):
        config = ProjectConfig(
            project_name="x",
            project_config=ProjectSettings(redis_config=RedisConfig(enabled=True)),
        )
        assert config.redis_enabled is True

    def test_primary_database(self, full_config, minimal_config):
        assert full_config.primary_database == "PostgreSQL"
        assert minimal_config.primary_database is None
        assert minimal_config.uses_database is False

    def test_env_variables_empty_without_settings(self, minimal_config):
        assert minimal_config.env_variables == []


# ---------------------------------------------------------------------------
# Loading & validation
# ---------------------------------------------------------------------------


class TestLoading:
    def test_camel_case_aliases(self):
        config = ProjectConfig.model_validate(
            {
                "projectName": "Alias App",
                "domain": "web-backend",
                "technologyStack": {"languages": ["Go"], "cssFramework": "Bulma"},
                "useCICD": True,
                "requireE2ETests": True,
                "projectConfig": {"serverPort": 9000, "apiConfig": {"baseUrl": "/api/v2"}},
            }
        )
        assert config.project_name == "Alias App"
        assert config.technology_stack.css_framework == "Bulma"
        assert config.use_cicd is True
        assert config.require_e2e_tests is True
        assert config.server_port == 9000
        assert config.api_config.base_url == "/api/v2"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="")

    @pytest.mark.parametrize("size", [0, 1001])
    def test_team_size_bounds(self, size):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="x", team_size=size)

    def test_coverage_bounds(self):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="x", min_test_coverage=101)

    def test_unknown_domain_rejected(self):
        with pytest.raises(ValidationError):
            ProjectConfig(project_name="x", domain="desktop")

    def test_config_is_frozen(self, minimal_config):
        with pytest.raises(ValidationError):
            minimal_config.project_name = "Other"
