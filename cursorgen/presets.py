"""Preset catalog, domain metadata and technology option lists.

These are immutable lookup tables.  Presets seed a ``FormState`` and are
never consumed by the document assemblers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnknownPresetError
from .form import FormPatch
from .models import Domain


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class Preset(BaseModel):
    """A named starting point for a common stack."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable identifier, e.g. 'nextjs-fullstack'")
    name: str = Field(..., description="Display name")
    description: str = Field(default="")
    icon: str = Field(default="")
    domain: Domain
    config: FormPatch = Field(..., description="Partial form state applied on selection")


class DomainInfo(BaseModel):
    """Display information for one domain option."""

    model_config = ConfigDict(frozen=True)

    id: Domain
    label: str
    description: str
    icon: str


def _preset(
    id: str, name: str, description: str, icon: str, domain: Domain, **config: Any
) -> Preset:
    return Preset(
        id=id,
        name=name,
        description=description,
        icon=icon,
        domain=domain,
        config=FormPatch.model_validate({"domain": domain, **config}),
    )


_API_V1_AUTH = {"base_url": "/api/v1", "version": "v1", "requires_auth": True}
_LOCAL_REDIS = {"enabled": True, "host": "localhost", "port": 6379}


def _local_db(port: int) -> dict[str, Any]:
    return {"host": "localhost", "port": port, "name": ""}


# ---------------------------------------------------------------------------
# Preset catalog
# ---------------------------------------------------------------------------

PRESETS: tuple[Preset, ...] = (
    _preset(
        "nextjs-fullstack",
        "Next.js Full-Stack",
        "Modern full-stack app with Next.js, TypeScript, and PostgreSQL",
        "⚡",
        Domain.WEB_FULLSTACK,
        technology_stack={
            "languages": ["TypeScript"],
            "frameworks": ["Next.js", "React"],
            "databases": ["PostgreSQL"],
            "tools": ["Docker", "Git", "GitHub Actions", "Vercel"],
            "css_framework": "Tailwind CSS",
        },
        use_typescript=True,
        use_linter=True,
        use_formatter=True,
        require_unit_tests=True,
        require_integration_tests=True,
        require_e2e_tests=False,
        testing_frameworks=["jest"],
        min_test_coverage=80,
        include_api_docs=True,
        use_cicd=True,
        cicd_tool="GitHub Actions",
        project_config={
            "server_port": 3000,
            "database_config": _local_db(5432),
            "redis_config": _LOCAL_REDIS,
            "api_config": _API_V1_AUTH,
        },
    ),
    _preset(
        "bun-hono-api",
        "Bun + Hono API",
        "Lightning-fast API with Bun runtime and Hono framework",
        "🍞",
        Domain.WEB_BACKEND,
        technology_stack={
            "languages": ["TypeScript"],
            "frameworks": ["Bun + Hono"],
            "databases": ["PostgreSQL"],
            "tools": ["Docker", "Git"],
        },
        use_typescript=True,
        use_linter=True,
        use_formatter=True,
        require_unit_tests=True,
        testing_frameworks=["jest"],
        include_api_docs=True,
        use_cicd=True,
        project_config={
            "server_port": 3001,
            "database_config": _local_db(5432),
            "redis_config": _LOCAL_REDIS,
            "api_config": _API_V1_AUTH,
        },
    ),
    _preset(
        "react-spa",
        "React SPA",
        "Single Page Application with React and Vite",
        "⚛️",
        Domain.WEB_FRONTEND,
        technology_stack={
            "languages": ["TypeScript"],
            "frameworks": ["React"],
            "databases": [],
            "tools": ["Git", "Vite", "GitHub Actions"],
            "css_framework": "Tailwind CSS",
        },
        use_typescript=True,
        use_linter=True,
        use_formatter=True,
        require_unit_tests=True,
        testing_frameworks=["vitest"],
        use_cicd=True,
        project_config={"server_port": 5173},
    ),
    _preset(
        "flutter-mobile",
        "Flutter App",
        "Cross-platform mobile app with Flutter",
        "📱",
        Domain.MOBILE_REACT_NATIVE,
        technology_stack={
            "languages": ["Dart"],
            "frameworks": ["Flutter"],
            "databases": [],
            "tools": ["Git", "Firebase"],
        },
        require_unit_tests=True,
        require_e2e_tests=True,
        testing_frameworks=["other"],
    ),
    _preset(
        "fastapi-backend",
        "FastAPI Backend",
        "Modern Python API with FastAPI",
        "🐍",
        Domain.WEB_BACKEND,
        technology_stack={
            "languages": ["Python"],
            "frameworks": ["FastAPI"],
            "databases": ["PostgreSQL"],
            "tools": ["Docker", "Git"],
        },
        require_unit_tests=True,
        testing_frameworks=["pytest"],
        include_api_docs=True,
        project_config={
            "server_port": 8000,
            "database_config": _local_db(5432),
            "api_config": _API_V1_AUTH,
        },
    ),
    _preset(
        "data-science",
        "Data Science Project",
        "ML/AI project with Python and Jupyter",
        "📊",
        Domain.DATA_SCIENCE,
        technology_stack={
            "languages": ["Python"],
            "frameworks": ["Jupyter", "Pandas", "Scikit-learn"],
            "databases": ["PostgreSQL"],
            "tools": ["Docker", "Git", "MLflow"],
        },
        require_unit_tests=True,
        testing_frameworks=["pytest"],
    ),
    _preset(
        "express-api",
        "Express.js API",
        "Classic Node.js REST API with Express",
        "🚂",
        Domain.WEB_BACKEND,
        technology_stack={
            "languages": ["TypeScript"],
            "frameworks": ["Express.js"],
            "databases": ["MongoDB"],
            "tools": ["Docker", "Git", "GitHub Actions"],
        },
        use_typescript=True,
        require_unit_tests=True,
        testing_frameworks=["jest"],
        include_api_docs=True,
        project_config={
            "server_port": 3000,
            "database_config": _local_db(27017),
            "redis_config": _LOCAL_REDIS,
            "api_config": _API_V1_AUTH,
        },
    ),
    _preset(
        "nestjs-microservices",
        "NestJS Microservices",
        "Enterprise-grade Node.js framework",
        "🏢",
        Domain.WEB_BACKEND,
        technology_stack={
            "languages": ["TypeScript"],
            "frameworks": ["NestJS"],
            "databases": ["PostgreSQL"],
            "tools": ["Docker", "Kubernetes", "Git", "GitHub Actions"],
        },
        use_typescript=True,
        require_unit_tests=True,
        require_integration_tests=True,
        testing_frameworks=["jest"],
        include_api_docs=True,
        use_cicd=True,
        project_config={
            "server_port": 3000,
            "database_config": _local_db(5432),
            "redis_config": _LOCAL_REDIS,
            "api_config": _API_V1_AUTH,
        },
    ),
)


def get_preset_by_id(preset_id: str) -> Preset:
    """Look up a preset by id.

    Raises:
        UnknownPresetError: if no preset has that id.
    """
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    raise UnknownPresetError(preset_id)


def get_presets_by_domain(domain: Domain | str) -> list[Preset]:
    """All presets whose domain is *domain*, in catalog order."""
    domain = Domain(domain)
    return [preset for preset in PRESETS if preset.domain is domain]


# ---------------------------------------------------------------------------
# Domain options
# ---------------------------------------------------------------------------

DOMAIN_OPTIONS: tuple[DomainInfo, ...] = (
    DomainInfo(id=Domain.GENERAL, label="General Purpose",
               description="Suitable for any type of project", icon="⚙️"),
    DomainInfo(id=Domain.WEB_FRONTEND, label="Web Frontend",
               description="React, Vue, Angular applications", icon="🎨"),
    DomainInfo(id=Domain.WEB_BACKEND, label="Web Backend",
               description="APIs and server-side applications", icon="🔧"),
    DomainInfo(id=Domain.WEB_FULLSTACK, label="Web Full-Stack",
               description="Complete web applications", icon="🌐"),
    DomainInfo(id=Domain.MOBILE_IOS, label="Mobile iOS",
               description="iOS applications with Swift", icon="📱"),
    DomainInfo(id=Domain.MOBILE_ANDROID, label="Mobile Android",
               description="Android applications with Kotlin", icon="🤖"),
    DomainInfo(id=Domain.MOBILE_REACT_NATIVE, label="React Native",
               description="Cross-platform mobile apps", icon="📲"),
    DomainInfo(id=Domain.DATA_SCIENCE, label="Data Science",
               description="ML, data analysis, and AI projects", icon="📊"),
    DomainInfo(id=Domain.DEVOPS, label="DevOps",
               description="Infrastructure and automation", icon="🚀"),
)


# ---------------------------------------------------------------------------
# Technology options
# ---------------------------------------------------------------------------

COMMON_LANGUAGES = (
    "TypeScript", "JavaScript", "Python", "Java", "Go", "Rust",
    "Swift", "Kotlin", "C#", "Ruby", "PHP", "Dart",
)

COMMON_WEB_FRAMEWORKS = (
    "Next.js", "React", "Vue.js", "Angular", "Svelte", "Express.js", "NestJS",
    "Bun + Hono", "Bun + Elysiajs", "FastAPI", "Django", "Flask",
    "Spring Boot", "Ruby on Rails", "Laravel",
)

COMMON_MOBILE_FRAMEWORKS = (
    "React Native", "Flutter", "SwiftUI", "UIKit", "Jetpack Compose", "Xamarin",
)

CSS_FRAMEWORKS = (
    "Tailwind CSS", "Bootstrap", "Material-UI (MUI)", "Chakra UI", "Ant Design",
    "Shadcn/ui", "DaisyUI", "Bulma", "Foundation", "Sass/SCSS",
    "Styled Components", "CSS Modules", "Emotion", "Vanilla CSS",
)

COMMON_DATABASES = (
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch",
    "SQLite", "DynamoDB", "Firebase", "Supabase",
)

COMMON_TOOLS = (
    "Git", "Docker", "Kubernetes", "GitHub Actions", "GitLab CI", "Jenkins",
    "Terraform", "AWS", "Google Cloud", "Azure", "Vercel", "Netlify",
)

DATA_SCIENCE_TOOLS = (
    "Jupyter", "Pandas", "NumPy", "Scikit-learn", "TensorFlow",
    "PyTorch", "MLflow", "Apache Spark", "Airflow",
)

DEVOPS_TOOLS = (
    "Docker", "Kubernetes", "Terraform", "Ansible", "Prometheus",
    "Grafana", "ELK Stack", "Jenkins", "ArgoCD", "Helm",
)


def relevant_languages(domain: Domain) -> tuple[str, ...]:
    """Languages offered for *domain*."""
    if domain is Domain.MOBILE_IOS:
        return ("Swift", "Objective-C")
    if domain is Domain.MOBILE_ANDROID:
        return ("Kotlin", "Java")
    if domain is Domain.MOBILE_REACT_NATIVE:
        return ("TypeScript", "JavaScript")
    if domain is Domain.DATA_SCIENCE:
        return ("Python", "R", "Julia", "Scala")
    if domain is Domain.DEVOPS:
        return ("Python", "Go", "Bash", "Ruby")
    if domain.is_web:
        return ("TypeScript", "JavaScript", "Python", "Java", "Go", "Rust", "PHP", "Ruby", "C#")
    return COMMON_LANGUAGES


def relevant_frameworks(domain: Domain) -> tuple[str, ...]:
    if domain.is_mobile:
        return COMMON_MOBILE_FRAMEWORKS
    if domain.is_web:
        return COMMON_WEB_FRAMEWORKS
    if domain is Domain.DATA_SCIENCE:
        return ("Jupyter", "Pandas", "NumPy", "Scikit-learn", "TensorFlow", "PyTorch")
    return ()


def relevant_tools(domain: Domain) -> tuple[str, ...]:
    if domain is Domain.DEVOPS:
        return DEVOPS_TOOLS
    if domain is Domain.DATA_SCIENCE:
        return DATA_SCIENCE_TOOLS
    return COMMON_TOOLS


def shows_databases(domain: Domain) -> bool:
    """Whether the database picker is offered for *domain*."""
    return domain.is_web or domain in (Domain.DATA_SCIENCE, Domain.DEVOPS)


def shows_css_framework(domain: Domain) -> bool:
    return domain.is_frontend
