"""Constraint Synthesis: domain-tailored bullets that preserve user intent.

Invariants:
    - Always starts with the 2 universal bullets
    - The language bullet names the requested language verbatim
    - Purely additive, never raises
"""

from prompt_enhancer.core.domain_types import Domain
from prompt_enhancer.core.prompt_sections import (
    DOMAIN_CONSTRAINTS,
    LANGUAGE_CONSTRAINT,
    UNIVERSAL_CONSTRAINTS,
    bullets,
)


def synthesize_constraints(domain: Domain, language: str | None = None) -> str:
    """Return the constraint bullets for a domain and optional output language."""
    lines = list(UNIVERSAL_CONSTRAINTS)
    if language:
        lines.append(LANGUAGE_CONSTRAINT.format(language=language))
    lines.extend(DOMAIN_CONSTRAINTS.get(Domain(domain), ()))
    return bullets(lines)
