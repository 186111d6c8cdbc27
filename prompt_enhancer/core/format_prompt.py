"""Prompt Structure & Formatting: assembles the 8 canonical sections into text.

Invariants:
    - role_for_domain is total over Domain
    - task is the trimmed raw prompt, never paraphrased
    - format_enhanced_prompt emits exactly 8 "### " headers in SECTION_ORDER,
      each body trimmed, sections separated by one blank line, no trailing newline
    - The textual layout is a byte-for-byte external contract (diff, hashing)

Design Decisions:
    - PromptStructure is a frozen dataclass: built once, never mutated
    - Section bodies are looked up by name through _SECTION_FIELDS so the
      order lives only in SECTION_ORDER
"""

from dataclasses import dataclass

from prompt_enhancer.core.domain_types import Domain
from prompt_enhancer.core.prompt_sections import (
    CITATION_SENSITIVE_DOMAINS,
    CODE_QUALITY_BAR,
    DEFAULT_OUTPUT_FORMAT,
    NO_CONTEXT_PROVIDED,
    NO_FABRICATED_CITATIONS_QUALITY_BAR,
    ROLE_BY_DOMAIN,
    SECTION_HEADERS,
    SECTION_ORDER,
    SEMANTIC_INTEGRITY_RULE,
    UNIVERSAL_QUALITY_BAR,
    bullets,
)


@dataclass(frozen=True)
class PromptStructure:
    role: str
    task: str
    context: str
    constraints: str
    verification_rules: str
    output_format: str
    semantic_integrity_rule: str
    quality_bar: str


_SECTION_FIELDS = {
    "ROLE": "role",
    "TASK": "task",
    "CONTEXT": "context",
    "CONSTRAINTS": "constraints",
    "VERIFICATION RULES": "verification_rules",
    "OUTPUT FORMAT": "output_format",
    "SEMANTIC INTEGRITY RULE": "semantic_integrity_rule",
    "QUALITY BAR": "quality_bar",
}


def role_for_domain(domain: Domain) -> str:
    return ROLE_BY_DOMAIN[Domain(domain)]


def quality_bar_for_domain(domain: Domain) -> str:
    """4 universal bullets plus domain extras (code, research/unknown)."""
    domain = Domain(domain)
    lines = list(UNIVERSAL_QUALITY_BAR)
    if domain is Domain.CODE:
        lines.append(CODE_QUALITY_BAR)
    if domain in CITATION_SENSITIVE_DOMAINS:
        lines.append(NO_FABRICATED_CITATIONS_QUALITY_BAR)
    return bullets(lines)


def build_prompt_structure(
    raw_prompt: str,
    domain: Domain,
    constraints: str,
    global_guards: str,
    verification_rules: str,
    output_format: str | None,
) -> PromptStructure:
    return PromptStructure(
        role=role_for_domain(domain),
        task=raw_prompt.strip(),
        context=NO_CONTEXT_PROVIDED,
        constraints="\n".join((global_guards, constraints)),
        verification_rules=verification_rules,
        output_format=output_format if output_format is not None else DEFAULT_OUTPUT_FORMAT,
        semantic_integrity_rule=SEMANTIC_INTEGRITY_RULE,
        quality_bar=quality_bar_for_domain(domain),
    )


def format_enhanced_prompt(structure: PromptStructure) -> str:
    """Render structure under the fixed headers, in the fixed order."""
    blocks = []
    for name in SECTION_ORDER:
        body = getattr(structure, _SECTION_FIELDS[name]).strip()
        blocks.append(f"{SECTION_HEADERS[name]}\n{body}")
    return "\n\n".join(blocks)
