"""Tests for the individual fragment generators.

Covers:
- General rules: project configuration block, coverage fallback
- Web rules: frontend/backend gating and Bun runtimes
- Mobile rules: platform label and per-platform sections
- Guide sections: overview placeholders, setup numbering and ports,
  coding-standard language selection, deployment recipes, API WebSocket
  gating, troubleshooting footer date
"""

from __future__ import annotations

from datetime import date

import pytest

from cursorgen import fragments
from cursorgen.clock import fixed_clock
from cursorgen.models import (
    ApiConfig,
    CodeStylePreference,
    DatabaseConfig,
    Domain,
    ProjectSettings,
    RedisConfig,
    TechnologyStack,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# General rules
# ---------------------------------------------------------------------------


class TestGeneralRules:
    def test_header(self, minimal_config):
        out = fragments.general_rules(minimal_config)
        assert out.startswith("# Cursor AI Rules for My Cool App\n")
        assert "**Domain:** General" in out

    def test_no_configuration_block_without_settings(self, minimal_config):
        assert "## Project Configuration" not in fragments.general_rules(minimal_config)

    def test_configuration_block(self, full_config):
        out = fragments.general_rules(full_config)
        assert "## Project Configuration" in out
        assert "**Server Port:** 4000" in out
        assert "**Database:** db.local:5432/shop_front" in out
        assert "**Redis:** cache.local:6380" in out
        assert "**API:** /api/v1 (Auth Required)" in out

    def test_unit_test_paragraph_requires_flag(self, minimal_config):
        assert "### Unit Testing" not in fragments.general_rules(minimal_config)

    def test_coverage_falls_back_to_80(self, config_factory):
        config = config_factory(require_unit_tests=True, min_test_coverage=None)
        assert "Aim for 80% code coverage" in fragments.general_rules(config)

    def test_coverage_uses_configured_value(self, full_config):
        assert "Aim for 85% code coverage" in fragments.general_rules(full_config)

    def test_stack_guideline_without_selections(self, minimal_config):
        out = fragments.general_rules(minimal_config)
        assert "Always use the project languages with project frameworks" in out
        assert "Always use  with" not in out

    def test_unit_test_guideline_without_framework(self, config_factory):
        out = fragments.general_rules(config_factory(require_unit_tests=True))
        assert "**Add Tests:** Include unit tests\n" in out

    def test_unit_test_guideline_with_framework(self, config_factory):
        config = config_factory(require_unit_tests=True, testing_frameworks=["vitest"])
        assert "**Add Tests:** Include unit tests with vitest\n" in fragments.general_rules(config)

    def test_footer(self, minimal_config):
        assert fragments.general_rules(minimal_config).endswith(
            "Generated with Cursor Config Generator\n"
        )


# ---------------------------------------------------------------------------
# Web rules
# ---------------------------------------------------------------------------


class TestWebRules:
    def test_fullstack_has_both_sides(self, full_config):
        out = fragments.web_rules(full_config)
        assert "Type: FULLSTACK" in out
        assert "## Frontend Development" in out
        assert "## Backend Development" in out

    def test_frontend_only(self, config_factory):
        out = fragments.web_rules(config_factory(domain=Domain.WEB_FRONTEND))
        assert "Type: FRONTEND" in out
        assert "## Frontend Development" in out
        assert "## Backend Development" not in out

    def test_backend_only(self, config_factory):
        out = fragments.web_rules(config_factory(domain=Domain.WEB_BACKEND))
        assert "Type: BACKEND" in out
        assert "## Frontend Development" not in out

    def test_bun_runtime_section(self, config_factory):
        config = config_factory(
            domain=Domain.WEB_BACKEND,
            technology_stack=TechnologyStack(frameworks=["Bun + Hono"]),
        )
        assert "### Bun Runtime" in fragments.web_rules(config)

    def test_no_bun_section_for_express(self, config_factory):
        config = config_factory(
            domain=Domain.WEB_BACKEND,
            technology_stack=TechnologyStack(frameworks=["Express.js"]),
        )
        assert "### Bun Runtime" not in fragments.web_rules(config)


# ---------------------------------------------------------------------------
# Mobile rules
# ---------------------------------------------------------------------------


class TestMobileRules:
    def test_ios(self, config_factory):
        out = fragments.mobile_rules(config_factory(domain=Domain.MOBILE_IOS))
        assert "Platform: IOS" in out
        assert "## iOS Development (Swift/SwiftUI)" in out
        assert "## Android Development (Kotlin)" not in out

    def test_android(self, config_factory):
        out = fragments.mobile_rules(config_factory(domain=Domain.MOBILE_ANDROID))
        assert "Platform: ANDROID" in out
        assert "## Android Development (Kotlin)" in out

    def test_react_native(self, config_factory):
        out = fragments.mobile_rules(config_factory(domain=Domain.MOBILE_REACT_NATIVE))
        assert "Platform: REACT-NATIVE" in out
        assert "## React Native Development" in out
        assert "## Flutter Development" not in out

    def test_flutter_overrides_platform(self, config_factory):
        config = config_factory(
            domain=Domain.MOBILE_REACT_NATIVE,
            technology_stack=TechnologyStack(languages=["Dart"], frameworks=["Flutter"]),
        )
        out = fragments.mobile_rules(config)
        assert "Platform: FLUTTER (CROSS-PLATFORM)" in out
        assert "## Flutter Development" in out


class TestOtherRuleSets:
    def test_data_science(self, config_factory):
        out = fragments.data_science_rules(config_factory(domain=Domain.DATA_SCIENCE))
        assert out.startswith("# Data Science Cursor AI Rules")
        assert "## Project: Test Project" in out

    def test_devops(self, config_factory):
        out = fragments.devops_rules(config_factory(domain=Domain.DEVOPS))
        assert out.startswith("# DevOps Cursor AI Rules")


# ---------------------------------------------------------------------------
# Overview & setup
# ---------------------------------------------------------------------------


class TestOverview:
    def test_placeholders(self, minimal_config):
        out = fragments.overview(minimal_config)
        assert out.startswith("# My Cool App - Development Guide\n")
        assert "A comprehensive software project." in out
        assert "- (To be determined)" in out
        assert "#### Databases" not in out

    def test_team_size_pluralisation(self, minimal_config, full_config):
        assert "**Team Size:** 1 developer\n" in fragments.overview(minimal_config)
        assert "**Team Size:** 8 developers" in fragments.overview(full_config)

    def test_methodology_capitalised(self, minimal_config):
        assert "**Development Methodology:** Agile" in fragments.overview(minimal_config)


class TestSetup:
    def test_minimal_uses_placeholders_and_slug(self, minimal_config):
        out = fragments.setup(minimal_config)
        assert "git clone <repository-url>" in out
        assert "cd my-cool-app" in out
        assert "PORT=3000" in out

    def test_minimal_verification_numbering(self, minimal_config):
        out = fragments.setup(minimal_config)
        assert (
            "1. ✓ The application starts without errors\n"
            "2. ✓ Tests pass successfully\n"
        ) in out

    def test_full_verification_numbering(self, full_config):
        out = fragments.setup(full_config)
        assert (
            "1. ✓ The application starts without errors\n"
            "2. ✓ Database connection is successful\n"
            "3. ✓ Redis connection is successful\n"
            "4. ✓ API endpoints are accessible\n"
            "5. ✓ Tests pass successfully\n"
        ) in out

    def test_environment_step_number(self, config_factory):
        python = config_factory(technology_stack=TechnologyStack(languages=["Python"]))
        bare = config_factory()
        assert "#### 2. Set Up Python Environment" in fragments.setup(python)
        assert "#### 3. Environment Configuration" in fragments.setup(python)
        assert "#### 2. Environment Configuration" in fragments.setup(bare)

    def test_node_detected_from_framework(self, config_factory):
        config = config_factory(technology_stack=TechnologyStack(frameworks=["NestJS"]))
        assert "#### 2. Install Node.js Dependencies" in fragments.setup(config)

    def test_configured_port(self, full_config):
        out = fragments.setup(full_config)
        assert "PORT=4000" in out
        assert "lsof -ti:4000" in out
        assert "PORT=4001" in out

    def test_port_fallbacks_without_node(self, minimal_config):
        out = fragments.setup(minimal_config)
        assert "lsof -ti:8000" in out
        assert "The application will start at `http://localhost:8000`" in out

    def test_database_values(self, full_config):
        out = fragments.setup(full_config)
        assert "DB_HOST=db.local" in out
        assert "CREATE DATABASE shop_front;" in out

    def test_database_step_absent_without_databases(self, minimal_config):
        assert "Database Setup" not in fragments.setup(minimal_config)

    def test_negative_port_renders_literally(self, config_factory):
        config = config_factory(project_config=ProjectSettings(server_port=-5))
        assert "PORT=-5" in fragments.setup(config)

    def test_summary_fills_unset_settings(self, config_factory):
        config = config_factory(
            project_name="Sparse Api",
            domain=Domain.WEB_BACKEND,
            technology_stack=TechnologyStack(databases=["PostgreSQL"]),
            project_config=ProjectSettings(
                database_config=DatabaseConfig(host="db"),
                redis_config=RedisConfig(enabled=True),
                api_config=ApiConfig(requires_auth=True),
            ),
        )
        out = fragments.setup(config)
        assert "None" not in out
        assert "**Database:** db:5432/sparse_api" in out
        assert "**Redis:** localhost:6379" in out
        assert "**API Base URL:** /api/v1" in out


# ---------------------------------------------------------------------------
# Architecture & coding standards
# ---------------------------------------------------------------------------


class TestArchitecture:
    def test_general_placeholders(self, minimal_config):
        out = fragments.architecture(minimal_config)
        assert "[Add your architecture diagram here]" in out
        assert "[Add your folder structure here]" in out

    def test_data_science_layout_uses_folder_slug(self, config_factory):
        config = config_factory(project_name="Churn Model", domain=Domain.DATA_SCIENCE)
        out = fragments.architecture(config)
        assert "This is a data science project" in out
        assert "churn-model/\n├── data/" in out

    def test_backend_patterns(self, config_factory):
        out = fragments.architecture(config_factory(domain=Domain.WEB_BACKEND))
        assert "**Repository Pattern:** Data access abstraction layer" in out


class TestCodingStandards:
    def test_default_language_is_javascript(self, minimal_config):
        out = fragments.coding_standards(minimal_config)
        assert "**TypeScript/JavaScript:**" in out
        assert "Use 2 spaces" in out

    def test_python(self, config_factory):
        config = config_factory(technology_stack=TechnologyStack(languages=["Python"]))
        out = fragments.coding_standards(config)
        assert "**Python:**" in out
        assert "Use 4 spaces" in out
        assert "```python" in out

    def test_other_language(self, config_factory):
        config = config_factory(technology_stack=TechnologyStack(languages=["Rust"]))
        assert "**General:**" in fragments.coding_standards(config)

    def test_formatter_names(self, config_factory):
        prettier = config_factory(use_formatter=True)
        airbnb = config_factory(
            use_formatter=True, code_style_preference=CodeStylePreference.AIRBNB
        )
        assert "We use **Prettier**" in fragments.coding_standards(prettier)
        assert "We use **airbnb**" in fragments.coding_standards(airbnb)

    def test_no_formatter_section_when_disabled(self, minimal_config):
        assert "#### Automated Formatting" not in fragments.coding_standards(minimal_config)


# ---------------------------------------------------------------------------
# Testing, API docs, deployment, troubleshooting
# ---------------------------------------------------------------------------


class TestTestingSection:
    def test_framework_defaults_to_jest(self, minimal_config):
        assert "#### Framework: Jest" in fragments.testing(minimal_config)

    def test_framework_from_config(self, config_factory):
        config = config_factory(testing_frameworks=["pytest"])
        assert "#### Framework: pytest" in fragments.testing(config)


class TestApiDocumentation:
    def test_websocket_for_web(self, full_config):
        out = fragments.api_documentation(full_config)
        assert out.startswith("## API Documentation")
        assert "If your application uses WebSocket connections:" in out

    def test_no_websocket_outside_web(self, config_factory):
        out = fragments.api_documentation(config_factory(domain=Domain.DATA_SCIENCE))
        assert "### WebSocket API" in out
        assert "If your application uses WebSocket connections:" not in out


class TestDeployment:
    def test_docker_and_kubernetes(self, full_config):
        out = fragments.deployment(full_config)
        assert out.startswith("## Deployment Guide")
        assert "### Docker Deployment" in out
        assert "### Kubernetes Deployment" in out
        assert "${{ secrets.REGISTRY }}/app:${{ github.sha }}" in out

    def test_no_container_sections(self, minimal_config):
        out = fragments.deployment(minimal_config)
        assert "### Docker Deployment" not in out
        assert "### Kubernetes Deployment" not in out

    def test_environment_purposes(self, config_factory):
        config = config_factory(deployment_environments=["Production", "qa"])
        out = fragments.deployment(config)
        assert "**Purpose:** Live production environment" in out
        assert "**Purpose:** Testing and validation" in out
        assert "**Deployment:** Manual approval required" in out


class TestTroubleshooting:
    def test_last_updated_from_clock(self, minimal_config):
        out = fragments.troubleshooting(minimal_config, fixed_clock(date(2024, 1, 15)))
        assert "**Last Updated:** 2024-01-15" in out

    def test_node_section_only_for_node_languages(self, config_factory):
        node = config_factory(technology_stack=TechnologyStack(languages=["TypeScript"]))
        framework_only = config_factory(
            technology_stack=TechnologyStack(frameworks=["React"])
        )
        assert "Clear node_modules and reinstall" in fragments.troubleshooting(node)
        assert "Clear node_modules and reinstall" not in fragments.troubleshooting(
            framework_only
        )

    def test_windows_activation_uses_single_backslashes(self, config_factory):
        config = config_factory(technology_stack=TechnologyStack(languages=["Python"]))
        out = fragments.troubleshooting(config)
        assert ".\\venv\\Scripts\\activate" in out
        assert "\\\\" not in out
