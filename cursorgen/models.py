"""Pydantic v2 models for the cursorgen project configuration.

Defines ``ProjectConfig``, the single input of every generator, together with
its nested technology-stack and project-settings blocks.  Field names are
snake_case; the camelCase names used by the original web form
(``projectName``, ``technologyStack`` ...) are accepted as aliases so form
dumps can be loaded directly.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class DomainFamily(str, Enum):
    """Archetype a domain belongs to; selects the domain-specific rule set."""
    GENERAL = "general"
    WEB = "web"
    MOBILE = "mobile"
    DATA_SCIENCE = "data-science"
    DEVOPS = "devops"


class Domain(str, Enum):
    """Project archetype the generated documents are tailored to."""
    GENERAL = "general"
    WEB_FRONTEND = "web-frontend"
    WEB_BACKEND = "web-backend"
    WEB_FULLSTACK = "web-fullstack"
    MOBILE_IOS = "mobile-ios"
    MOBILE_ANDROID = "mobile-android"
    MOBILE_REACT_NATIVE = "mobile-react-native"
    DATA_SCIENCE = "data-science"
    DEVOPS = "devops"

    @property
    def label(self) -> str:
        """Human-readable title, e.g. ``web-fullstack`` -> ``Web Fullstack``."""
        return title_words(self.value)

    @property
    def is_web(self) -> bool:
        return "web" in self.value

    @property
    def is_mobile(self) -> bool:
        return "mobile" in self.value

    @property
    def is_frontend(self) -> bool:
        return self in (Domain.WEB_FRONTEND, Domain.WEB_FULLSTACK)

    @property
    def is_backend(self) -> bool:
        return self in (Domain.WEB_BACKEND, Domain.WEB_FULLSTACK)

    @property
    def family(self) -> DomainFamily:
        """Resolve the family by ordered predicates; the first match wins."""
        for family, matches in _FAMILY_PREDICATES:
            if matches(self.value):
                return family
        return DomainFamily.GENERAL


_FAMILY_PREDICATES = (
    (DomainFamily.WEB, lambda value: "web" in value),
    (DomainFamily.MOBILE, lambda value: "mobile" in value),
    (DomainFamily.DATA_SCIENCE, lambda value: value == "data-science"),
    (DomainFamily.DEVOPS, lambda value: value == "devops"),
)


class DevelopmentMethodology(str, Enum):
    AGILE = "agile"
    SCRUM = "scrum"
    KANBAN = "kanban"
    WATERFALL = "waterfall"
    LEAN = "lean"
    CUSTOM = "custom"


class CodeStylePreference(str, Enum):
    STANDARD = "standard"
    AIRBNB = "airbnb"
    GOOGLE = "google"
    PRETTIER = "prettier"
    CUSTOM = "custom"


class TestingFramework(str, Enum):
    """Testing frameworks offered by the form (free-form names are also accepted)."""
    JEST = "jest"
    VITEST = "vitest"
    MOCHA = "mocha"
    PYTEST = "pytest"
    JUNIT = "junit"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------

def title_words(value: str) -> str:
    """Replace hyphens with spaces and capitalise the first letter of every word."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), value.replace("-", " "))


def db_slug(name: str) -> str:
    """Slug used for database and file names: ``My Cool App`` -> ``my_cool_app``."""
    return re.sub(r"\s+", "_", name.lower())


def folder_slug(name: str) -> str:
    """Slug used for folder paths and image names: ``My Cool App`` -> ``my-cool-app``."""
    return re.sub(r"\s+", "-", name.lower())


# ---------------------------------------------------------------------------
# Technology stack
# ---------------------------------------------------------------------------

class FormModel(BaseModel):
    """Base for models loaded from form dumps (camelCase or snake_case keys)."""

    model_config = ConfigDict(populate_by_name=True)


class TechnologyStack(FormModel):
    """Ordered technology selections; order is preserved in the output."""
    languages: list[str] = Field(default_factory=list, description="Programming languages")
    frameworks: list[str] = Field(default_factory=list, description="Frameworks and libraries")
    databases: list[str] = Field(default_factory=list, description="Database vendors")
    tools: list[str] = Field(default_factory=list, description="Tools and infrastructure")
    css_framework: Optional[str] = Field(
        default=None, alias="cssFramework", description="CSS framework (frontend-ish domains)"
    )


# ---------------------------------------------------------------------------
# Project settings (the optional nested "projectConfig" block)
# ---------------------------------------------------------------------------

class DatabaseConfig(FormModel):
    host: Optional[str] = Field(default=None, description="Database host")
    port: Optional[int] = Field(default=None, description="Explicit database port")
    name: Optional[str] = Field(default=None, description="Database name")


class RedisConfig(FormModel):
    enabled: bool = Field(default=False, description="Whether Redis is used")
    host: Optional[str] = Field(default=None)
    port: Optional[int] = Field(default=None)


class ApiConfig(FormModel):
    base_url: Optional[str] = Field(default=None, alias="baseUrl", description="e.g. '/api/v1'")
    version: Optional[str] = Field(default=None, description="e.g. 'v1'")
    requires_auth: bool = Field(default=False, alias="requiresAuth")


class EnvVariable(FormModel):
    """A project-specific environment variable declared by the user."""
    key: str = Field(..., min_length=1)
    description: str = Field(default="")
    example: Optional[str] = Field(default=None)


class ProjectSettings(FormModel):
    """Runtime settings: server port, database, Redis, API and extra env vars."""
    server_port: Optional[int] = Field(default=None, alias="serverPort")
    database_config: Optional[DatabaseConfig] = Field(default=None, alias="databaseConfig")
    redis_config: Optional[RedisConfig] = Field(default=None, alias="redisConfig")
    api_config: Optional[ApiConfig] = Field(default=None, alias="apiConfig")
    env_variables: list[EnvVariable] = Field(default_factory=list, alias="envVariables")


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------

DEFAULT_MIN_TEST_COVERAGE = 80
DEFAULT_SERVER_PORT = 3000


class ProjectConfig(FormModel):
    """Everything the user declared for one generation run.

    Constructed once from the normalised form state and never mutated
    afterwards; generators only read it.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Basic information
    project_name: str = Field(..., min_length=1, alias="projectName")
    project_description: Optional[str] = Field(default=None, alias="projectDescription")
    repository_url: Optional[str] = Field(default=None, alias="repositoryUrl")

    # Domain & tech stack
    domain: Domain = Field(default=Domain.GENERAL)
    technology_stack: TechnologyStack = Field(
        default_factory=TechnologyStack, alias="technologyStack"
    )

    # Team settings
    team_size: int = Field(default=1, ge=1, le=1000, alias="teamSize")
    development_methodology: DevelopmentMethodology = Field(
        default=DevelopmentMethodology.AGILE, alias="developmentMethodology"
    )

    # Code preferences
    code_style_preference: CodeStylePreference = Field(
        default=CodeStylePreference.PRETTIER, alias="codeStylePreference"
    )
    use_typescript: bool = Field(default=False, alias="useTypeScript")
    use_linter: bool = Field(default=False, alias="useLinter")
    use_formatter: bool = Field(default=False, alias="useFormatter")

    # Testing requirements
    require_unit_tests: bool = Field(default=False, alias="requireUnitTests")
    require_integration_tests: bool = Field(default=False, alias="requireIntegrationTests")
    require_e2e_tests: bool = Field(default=False, alias="requireE2ETests")
    testing_frameworks: list[str] = Field(default_factory=list, alias="testingFrameworks")
    min_test_coverage: Optional[int] = Field(
        default=DEFAULT_MIN_TEST_COVERAGE, ge=0, le=100, alias="minTestCoverage"
    )

    # Documentation preferences
    include_api_docs: bool = Field(default=False, alias="includeApiDocs")
    include_architecture_diagrams: bool = Field(
        default=False, alias="includeArchitectureDiagrams"
    )

    # Deployment settings
    deployment_environments: list[str] = Field(
        default_factory=lambda: ["development", "staging", "production"],
        alias="deploymentEnvironments",
    )
    use_cicd: bool = Field(default=False, alias="useCICD")
    cicd_tool: Optional[str] = Field(default=None, alias="cicdTool")

    # Runtime settings
    project_config: Optional[ProjectSettings] = Field(default=None, alias="projectConfig")

    # ------------------------------------------------------------------
    # Derived values (read-only properties)
    # ------------------------------------------------------------------

    @property
    def coverage_target(self) -> int:
        """Minimum coverage percentage, falling back to 80 when unset."""
        if self.min_test_coverage is None:
            return DEFAULT_MIN_TEST_COVERAGE
        return self.min_test_coverage

    @property
    def server_port(self) -> Optional[int]:
        return self.project_config.server_port if self.project_config else None

    @property
    def effective_port(self) -> int:
        """The configured server port or 3000."""
        port = self.server_port
        return DEFAULT_SERVER_PORT if port is None else port

    @property
    def database_config(self) -> Optional[DatabaseConfig]:
        return self.project_config.database_config if self.project_config else None

    @property
    def redis_config(self) -> Optional[RedisConfig]:
        return self.project_config.redis_config if self.project_config else None

    @property
    def redis_enabled(self) -> bool:
        return bool(self.redis_config and self.redis_config.enabled)

    @property
    def api_config(self) -> Optional[ApiConfig]:
        return self.project_config.api_config if self.project_config else None

    @property
    def env_variables(self) -> list[EnvVariable]:
        return list(self.project_config.env_variables) if self.project_config else []

    @property
    def uses_database(self) -> bool:
        return bool(self.technology_stack.databases)

    @property
    def primary_database(self) -> Optional[str]:
        """First selected database vendor, if any."""
        databases = self.technology_stack.databases
        return databases[0] if databases else None

    @property
    def db_slug(self) -> str:
        return db_slug(self.project_name)

    @property
    def folder_slug(self) -> str:
        return folder_slug(self.project_name)
