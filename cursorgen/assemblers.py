"""The three document assemblers.

Each assembler is a pure function of a ``ProjectConfig`` (plus the clock for
the development guide's footer) and composes fragments in a fixed order.
"""

from __future__ import annotations

from typing import Callable, Optional

from . import fragments
from .clock import Clock, system_clock
from .env import generate_env_example
from .models import DomainFamily, ProjectConfig
from .templates import TemplateRenderer

__all__ = [
    "DOMAIN_RULES",
    "generate_cursor_rules",
    "generate_development_guide",
    "generate_env_example",
]

SECTION_SEPARATOR = "\n\n"

RuleGenerator = Callable[..., str]

# Family -> domain-specific rule set appended after the general rules.
DOMAIN_RULES: dict[DomainFamily, Optional[RuleGenerator]] = {
    DomainFamily.GENERAL: None,
    DomainFamily.WEB: fragments.web_rules,
    DomainFamily.MOBILE: fragments.mobile_rules,
    DomainFamily.DATA_SCIENCE: fragments.data_science_rules,
    DomainFamily.DEVOPS: fragments.devops_rules,
}

_missing = set(DomainFamily) - set(DOMAIN_RULES)
if _missing:
    raise RuntimeError(
        f"No rule set registered for domain families: {sorted(f.value for f in _missing)}"
    )
del _missing


def generate_cursor_rules(
    config: ProjectConfig, renderer: Optional[TemplateRenderer] = None
) -> str:
    """General rules followed by at most one domain-specific rule set."""
    parts = [fragments.general_rules(config, renderer)]
    domain_rules = DOMAIN_RULES[config.domain.family]
    if domain_rules is not None:
        parts.append(domain_rules(config, renderer))
    return SECTION_SEPARATOR.join(parts)


def generate_development_guide(
    config: ProjectConfig,
    clock: Optional[Clock] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> str:
    """Assemble ``DEVELOPMENT_GUIDE.md``.

    Section order is fixed: overview, setup, architecture, coding standards,
    git workflow, testing, the API reference (only with ``include_api_docs``),
    deployment and troubleshooting.
    """
    clock = clock or system_clock
    sections = [
        fragments.overview(config, renderer),
        fragments.setup(config, renderer),
        fragments.architecture(config, renderer),
        fragments.coding_standards(config, renderer),
        fragments.git_workflow(config, renderer),
        fragments.testing(config, renderer),
    ]
    if config.include_api_docs:
        sections.append(fragments.api_documentation(config, renderer))
    sections.append(fragments.deployment(config, renderer))
    sections.append(fragments.troubleshooting(config, clock, renderer))
    return SECTION_SEPARATOR.join(sections)
