"""Fragment generators for the rules file and the development guide.

Every public function here maps a ``ProjectConfig`` to one markdown fragment.
The prose lives in the Jinja2 templates under ``cursorgen/templates/``; the
functions only derive the flags those templates branch on and render them.
They never raise for well-typed input: missing optional values suppress the
dependent text instead.
"""

from __future__ import annotations

from typing import Any, Optional

from .clock import Clock, system_clock
from .models import CodeStylePreference, Domain, ProjectConfig
from .templates import TemplateRenderer, get_renderer

_NODE_LANGUAGES = ("JavaScript", "TypeScript")
_NODE_FRAMEWORKS = ("Next.js", "React", "Vue.js", "Angular", "Express.js", "NestJS")

# Every template the fragments render; a custom template root must provide all of them.
TEMPLATES = (
    "cursorrules/general.md.j2",
    "cursorrules/web.md.j2",
    "cursorrules/mobile.md.j2",
    "cursorrules/data_science.md.j2",
    "cursorrules/devops.md.j2",
    "devguide/overview.md.j2",
    "devguide/setup.md.j2",
    "devguide/architecture.md.j2",
    "devguide/coding_standards.md.j2",
    "devguide/git_workflow.md.j2",
    "devguide/testing.md.j2",
    "devguide/api_documentation.md.j2",
    "devguide/deployment.md.j2",
    "devguide/troubleshooting.md.j2",
)

_ENVIRONMENT_PURPOSES = {
    "production": "Live production environment",
    "staging": "Pre-production testing",
    "development": "Development testing",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _render(
    template_path: str,
    config: ProjectConfig,
    renderer: Optional[TemplateRenderer] = None,
    **extra: Any,
) -> str:
    renderer = renderer or get_renderer()
    context: dict[str, Any] = {
        "config": config,
        "stack": config.technology_stack,
        "settings": config.project_config,
        "family": config.domain.family.value,
    }
    context.update(extra)
    return renderer.render(template_path, context)


def _first(items: list[str]) -> Optional[str]:
    return items[0] if items else None


def _has_node_language(config: ProjectConfig) -> bool:
    return any(lang in config.technology_stack.languages for lang in _NODE_LANGUAGES)


def _has_python(config: ProjectConfig) -> bool:
    return "Python" in config.technology_stack.languages


def _has_tool(config: ProjectConfig, tool: str) -> bool:
    return tool in config.technology_stack.tools


# ---------------------------------------------------------------------------
# Rule sets (.cursorrules)
# ---------------------------------------------------------------------------

def general_rules(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Rules shared by every project, whatever its domain."""
    return _render(
        "cursorrules/general.md.j2",
        config,
        renderer,
        primary_language=_first(config.technology_stack.languages),
        primary_framework=_first(config.technology_stack.frameworks),
        primary_testing_framework=_first(config.testing_frameworks),
    )


def web_rules(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Frontend and/or backend rules, gated on the web domain flavour."""
    frameworks = config.technology_stack.frameworks
    web_type = config.domain.value.replace("web-", "", 1).replace("-", " ", 1).upper()
    return _render(
        "cursorrules/web.md.j2",
        config,
        renderer,
        web_type=web_type,
        css=config.technology_stack.css_framework or "",
        uses_hono="Bun + Hono" in frameworks,
        uses_elysia="Bun + Elysiajs" in frameworks,
    )


def mobile_rules(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Platform rules for iOS, Android, React Native and Flutter projects."""
    is_flutter = "Flutter" in config.technology_stack.frameworks
    if is_flutter:
        platform = "FLUTTER (CROSS-PLATFORM)"
    else:
        platform = config.domain.value.replace("mobile-", "", 1).upper()
    return _render(
        "cursorrules/mobile.md.j2",
        config,
        renderer,
        platform=platform,
        is_ios=config.domain is Domain.MOBILE_IOS,
        is_android=config.domain is Domain.MOBILE_ANDROID,
        is_react_native=config.domain is Domain.MOBILE_REACT_NATIVE,
        is_flutter=is_flutter,
    )


def data_science_rules(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    return _render("cursorrules/data_science.md.j2", config, renderer)


def devops_rules(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    return _render("cursorrules/devops.md.j2", config, renderer)


# ---------------------------------------------------------------------------
# Development guide sections
# ---------------------------------------------------------------------------

def overview(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Title, description, stack and team summary."""
    return _render("devguide/overview.md.j2", config, renderer)


def setup(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Prerequisites, installation steps, environment and verification checklist.

    Node.js is assumed when a JavaScript-family language or a Node framework
    is selected. The setup database port falls back to 5432 without looking
    at the vendor; the vendor-aware derivation belongs to ``.env.example``.
    """
    stack = config.technology_stack
    has_node = _has_node_language(config) or any(
        fw in _NODE_FRAMEWORKS for fw in stack.frameworks
    )
    has_python = _has_python(config)
    uses_database = config.uses_database
    db = config.database_config

    verification = ["The application starts without errors"]
    if uses_database:
        verification.append("Database connection is successful")
    if config.redis_enabled:
        verification.append("Redis connection is successful")
    if config.include_api_docs:
        verification.append("API endpoints are accessible")
    verification.append("Tests pass successfully")

    server_port = config.server_port
    return _render(
        "devguide/setup.md.j2",
        config,
        renderer,
        has_node=has_node,
        has_python=has_python,
        has_docker=_has_tool(config, "Docker"),
        uses_database=uses_database,
        db=db,
        db_host=(db.host if db else None) or "localhost",
        db_port=(db.port if db else None) or 5432,
        db_name=(db.name if db else None) or config.db_slug,
        api=config.api_config,
        env_step=3 if has_node or has_python else 2,
        dev_port=server_port or (3000 if config.domain.is_web else 8000),
        kill_port=server_port or (3000 if has_node else 8000),
        verification=verification,
    )


def architecture(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """System overview, diagrams and folder layout for the domain."""
    return _render("devguide/architecture.md.j2", config, renderer)


def coding_standards(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Naming, formatting and documentation rules keyed on the primary language."""
    language = _first(config.technology_stack.languages) or "JavaScript"
    is_python = language == "Python"
    if config.code_style_preference is CodeStylePreference.PRETTIER:
        formatter_name = "Prettier"
    else:
        formatter_name = config.code_style_preference.value
    return _render(
        "devguide/coding_standards.md.j2",
        config,
        renderer,
        is_js=language in _NODE_LANGUAGES,
        is_python=is_python,
        code_lang="python" if is_python else "typescript",
        formatter_name=formatter_name,
    )


def git_workflow(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    return _render("devguide/git_workflow.md.j2", config, renderer)


def testing(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Testing strategy; unit, integration and E2E parts follow the requirements."""
    return _render(
        "devguide/testing.md.j2",
        config,
        renderer,
        primary_framework=_first(config.testing_frameworks) or "Jest",
    )


def api_documentation(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """REST API reference; the WebSocket part is only filled in for web domains."""
    return _render("devguide/api_documentation.md.j2", config, renderer)


def deployment(config: ProjectConfig, renderer: Optional[TemplateRenderer] = None) -> str:
    """Environments, Docker/Kubernetes recipes, CI/CD, rollback and scaling."""
    return _render(
        "devguide/deployment.md.j2",
        config,
        renderer,
        has_docker=_has_tool(config, "Docker"),
        has_k8s=_has_tool(config, "Kubernetes"),
        environment_purposes=_ENVIRONMENT_PURPOSES,
    )


def troubleshooting(
    config: ProjectConfig,
    clock: Optional[Clock] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> str:
    """Common issues and debugging tips, closed by a "Last Updated" footer.

    The footer date is the only value not derived from *config*; it is read
    from *clock* (UTC today when omitted) as ``YYYY-MM-DD``.
    """
    clock = clock or system_clock
    return _render(
        "devguide/troubleshooting.md.j2",
        config,
        renderer,
        has_node=_has_node_language(config),
        has_python=_has_python(config),
        has_docker=_has_tool(config, "Docker"),
        uses_database=config.uses_database,
        last_updated=clock().isoformat(),
    )
