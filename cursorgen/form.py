"""In-progress form state and its normalisation into a ``ProjectConfig``.

``FormState`` holds what the user has entered so far, seeded with the same
defaults the interactive form starts with.  Presets and form files are both
applied as a ``FormPatch``: a partial, nested project description whose set
values replace the corresponding state.  ``FormState.to_project_config`` is
the only place input is validated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import AnyUrl, Field, TypeAdapter

from .models import (
    ApiConfig,
    CodeStylePreference,
    DatabaseConfig,
    DevelopmentMethodology,
    Domain,
    EnvVariable,
    FormModel,
    ProjectConfig,
    ProjectSettings,
    RedisConfig,
    TechnologyStack,
    db_slug,
)

if TYPE_CHECKING:
    from .presets import Preset

_URL_ADAPTER = TypeAdapter(AnyUrl)


def toggle_selection(items: list[str], item: str) -> list[str]:
    """Return *items* with *item* removed if present, otherwise appended."""
    if item in items:
        return [i for i in items if i != item]
    return [*items, item]


# ---------------------------------------------------------------------------
# FormPatch
# ---------------------------------------------------------------------------

class FormPatch(FormModel):
    """A partial project description: every field is optional.

    The shape matches ``ProjectConfig`` (nested ``technology_stack`` and
    ``project_config`` blocks, camelCase aliases accepted) so preset tables
    and user form files read the same way.
    """

    project_name: Optional[str] = Field(default=None, alias="projectName")
    project_description: Optional[str] = Field(default=None, alias="projectDescription")
    repository_url: Optional[str] = Field(default=None, alias="repositoryUrl")
    domain: Optional[Domain] = None
    technology_stack: Optional[TechnologyStack] = Field(default=None, alias="technologyStack")
    team_size: Optional[int] = Field(default=None, alias="teamSize")
    development_methodology: Optional[DevelopmentMethodology] = Field(
        default=None, alias="developmentMethodology"
    )
    code_style_preference: Optional[CodeStylePreference] = Field(
        default=None, alias="codeStylePreference"
    )
    use_typescript: Optional[bool] = Field(default=None, alias="useTypeScript")
    use_linter: Optional[bool] = Field(default=None, alias="useLinter")
    use_formatter: Optional[bool] = Field(default=None, alias="useFormatter")
    require_unit_tests: Optional[bool] = Field(default=None, alias="requireUnitTests")
    require_integration_tests: Optional[bool] = Field(
        default=None, alias="requireIntegrationTests"
    )
    require_e2e_tests: Optional[bool] = Field(default=None, alias="requireE2ETests")
    testing_frameworks: Optional[list[str]] = Field(default=None, alias="testingFrameworks")
    min_test_coverage: Optional[int] = Field(default=None, alias="minTestCoverage")
    include_api_docs: Optional[bool] = Field(default=None, alias="includeApiDocs")
    include_architecture_diagrams: Optional[bool] = Field(
        default=None, alias="includeArchitectureDiagrams"
    )
    deployment_environments: Optional[list[str]] = Field(
        default=None, alias="deploymentEnvironments"
    )
    use_cicd: Optional[bool] = Field(default=None, alias="useCICD")
    cicd_tool: Optional[str] = Field(default=None, alias="cicdTool")
    project_config: Optional[ProjectSettings] = Field(default=None, alias="projectConfig")


# Scalar fields copied verbatim from a patch when set.
_SCALAR_FIELDS = (
    "project_name",
    "project_description",
    "repository_url",
    "domain",
    "team_size",
    "development_methodology",
    "code_style_preference",
    "use_typescript",
    "use_linter",
    "use_formatter",
    "require_unit_tests",
    "require_integration_tests",
    "require_e2e_tests",
    "min_test_coverage",
    "include_api_docs",
    "include_architecture_diagrams",
    "use_cicd",
    "cicd_tool",
)


# ---------------------------------------------------------------------------
# FormState
# ---------------------------------------------------------------------------

class FormState(FormModel):
    """Everything the form holds before submission, with its defaults."""

    # Basic information
    project_name: str = Field(default="", alias="projectName")
    project_description: str = Field(default="", alias="projectDescription")
    repository_url: str = Field(default="", alias="repositoryUrl")
    domain: Domain = Field(default=Domain.GENERAL)

    # Team and code preferences
    team_size: int = Field(default=5, alias="teamSize")
    development_methodology: DevelopmentMethodology = Field(
        default=DevelopmentMethodology.AGILE, alias="developmentMethodology"
    )
    code_style_preference: CodeStylePreference = Field(
        default=CodeStylePreference.PRETTIER, alias="codeStylePreference"
    )
    use_typescript: bool = Field(default=True, alias="useTypeScript")
    use_linter: bool = Field(default=True, alias="useLinter")
    use_formatter: bool = Field(default=True, alias="useFormatter")

    # Testing
    require_unit_tests: bool = Field(default=True, alias="requireUnitTests")
    require_integration_tests: bool = Field(default=False, alias="requireIntegrationTests")
    require_e2e_tests: bool = Field(default=False, alias="requireE2ETests")
    min_test_coverage: Optional[int] = Field(default=80, alias="minTestCoverage")
    testing_frameworks: list[str] = Field(
        default_factory=lambda: ["jest"], alias="testingFrameworks"
    )

    # Documentation and deployment
    include_api_docs: bool = Field(default=True, alias="includeApiDocs")
    include_architecture_diagrams: bool = Field(
        default=True, alias="includeArchitectureDiagrams"
    )
    use_cicd: bool = Field(default=True, alias="useCICD")
    cicd_tool: Optional[str] = Field(default="GitHub Actions", alias="cicdTool")
    deployment_environments: list[str] = Field(
        default_factory=lambda: ["development", "staging", "production"],
        alias="deploymentEnvironments",
    )

    # Technology selections
    languages: list[str] = Field(default_factory=lambda: ["TypeScript"])
    frameworks: list[str] = Field(default_factory=lambda: ["Next.js"])
    databases: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=lambda: ["Git", "Docker"])
    css_framework: str = Field(default="Tailwind CSS", alias="cssFramework")

    # Runtime settings
    server_port: Optional[int] = Field(default=3000, alias="serverPort")
    database_host: str = Field(default="localhost", alias="databaseHost")
    database_port: int = Field(default=5432, alias="databasePort")
    database_name: str = Field(default="", alias="databaseName")
    use_redis: bool = Field(default=False, alias="useRedis")
    redis_host: str = Field(default="localhost", alias="redisHost")
    redis_port: int = Field(default=6379, alias="redisPort")
    api_version: str = Field(default="v1", alias="apiVersion")
    requires_auth: bool = Field(default=True, alias="requiresAuth")
    env_variables: list[EnvVariable] = Field(default_factory=list, alias="envVariables")

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def apply(self, patch: FormPatch) -> FormState:
        """Return a new state with the values *patch* sets merged over this one.

        A technology stack in the patch replaces all four selection lists; its
        CSS framework only replaces the current one when set.  Nested database,
        Redis and API settings fall back to the form defaults for any value
        they leave unset.
        """
        update: dict = {}
        for name in _SCALAR_FIELDS:
            value = getattr(patch, name)
            if value is not None:
                update[name] = value

        if patch.testing_frameworks is not None:
            update["testing_frameworks"] = list(patch.testing_frameworks)
        if patch.deployment_environments is not None:
            update["deployment_environments"] = list(patch.deployment_environments)

        stack = patch.technology_stack
        if stack is not None:
            update["languages"] = list(stack.languages)
            update["frameworks"] = list(stack.frameworks)
            update["databases"] = list(stack.databases)
            update["tools"] = list(stack.tools)
            if stack.css_framework:
                update["css_framework"] = stack.css_framework

        settings = patch.project_config
        if settings is not None:
            if settings.server_port:
                update["server_port"] = settings.server_port
            if settings.database_config is not None:
                db = settings.database_config
                update["database_host"] = db.host or "localhost"
                update["database_port"] = db.port or 5432
                update["database_name"] = db.name or ""
            if settings.redis_config is not None:
                redis = settings.redis_config
                update["use_redis"] = redis.enabled
                update["redis_host"] = redis.host or "localhost"
                update["redis_port"] = redis.port or 6379
            if settings.api_config is not None:
                update["api_version"] = settings.api_config.version or "v1"
                update["requires_auth"] = settings.api_config.requires_auth
            if settings.env_variables:
                update["env_variables"] = [v.model_copy() for v in settings.env_variables]

        return self.model_copy(update=update, deep=True)

    def apply_preset(self, preset: Preset) -> FormState:
        """Seed the state from a catalog preset."""
        return self.apply(preset.config)

    def toggle(self, field: str, item: str) -> FormState:
        """Return a new state with *item* toggled in the selection list *field*."""
        current = getattr(self, field)
        if not isinstance(current, list):
            raise ValueError(f"{field!r} is not a selection list")
        return self.model_copy(update={field: toggle_selection(current, item)})

    # ------------------------------------------------------------------
    # Normalisation
    # ------------------------------------------------------------------

    def to_project_config(self) -> ProjectConfig:
        """Validate the state and build the immutable ``ProjectConfig``.

        Raises:
            pydantic.ValidationError: on an empty project name, an
                out-of-range team size or coverage, or a malformed
                repository URL.
        """
        if self.repository_url:
            _URL_ADAPTER.validate_python(self.repository_url)

        domain = self.domain
        frontend_ish = domain.is_frontend
        backend_ish = domain.is_backend

        database_config = None
        if self.databases:
            database_config = DatabaseConfig(
                host=self.database_host,
                port=self.database_port,
                name=self.database_name or db_slug(self.project_name),
            )

        api_config = None
        if backend_ish:
            api_config = ApiConfig(
                base_url=f"/api/{self.api_version}",
                version=self.api_version,
                requires_auth=self.requires_auth,
            )

        return ProjectConfig(
            project_name=self.project_name,
            project_description=self.project_description or None,
            repository_url=self.repository_url or None,
            domain=domain,
            technology_stack=TechnologyStack(
                languages=list(self.languages),
                frameworks=list(self.frameworks),
                databases=list(self.databases),
                tools=list(self.tools),
                css_framework=self.css_framework if frontend_ish else None,
            ),
            team_size=self.team_size,
            development_methodology=self.development_methodology,
            code_style_preference=self.code_style_preference,
            use_typescript=self.use_typescript,
            use_linter=self.use_linter,
            use_formatter=self.use_formatter,
            require_unit_tests=self.require_unit_tests,
            require_integration_tests=self.require_integration_tests,
            require_e2e_tests=self.require_e2e_tests,
            testing_frameworks=list(self.testing_frameworks),
            min_test_coverage=self.min_test_coverage,
            include_api_docs=self.include_api_docs,
            include_architecture_diagrams=self.include_architecture_diagrams,
            deployment_environments=list(self.deployment_environments),
            use_cicd=self.use_cicd,
            cicd_tool=self.cicd_tool,
            project_config=ProjectSettings(
                server_port=self.server_port,
                database_config=database_config,
                redis_config=RedisConfig(
                    enabled=self.use_redis,
                    host=self.redis_host,
                    port=self.redis_port,
                ),
                api_config=api_config,
                env_variables=[v.model_copy() for v in self.env_variables],
            ),
        )
