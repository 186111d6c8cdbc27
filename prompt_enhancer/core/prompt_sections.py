"""Prompt Sections: fixed headers and instruction text for the canonical layout.

Invariants:
    - SECTION_ORDER is the only place the 8-section order is defined
    - Headers are never renamed or reordered per domain
    - Guard and rule lists are tuples (read-only after import)

Design Decisions:
    - Pure data module, no computation (same split as prompt text vs assembler)
"""

from types import MappingProxyType

from prompt_enhancer.core.domain_types import Domain

# ---------------------------------------------------------------------------
# Canonical layout
# ---------------------------------------------------------------------------

SECTION_ORDER = (
    "ROLE",
    "TASK",
    "CONTEXT",
    "CONSTRAINTS",
    "VERIFICATION RULES",
    "OUTPUT FORMAT",
    "SEMANTIC INTEGRITY RULE",
    "QUALITY BAR",
)

SECTION_HEADERS = MappingProxyType({name: f"### {name}" for name in SECTION_ORDER})

# ---------------------------------------------------------------------------
# Guards and verification rules (bullet text without the "- " prefix)
# ---------------------------------------------------------------------------

GLOBAL_GUARDS = (
    "Do not fabricate facts, data, sources, APIs, citations, or functionality.",
    "If required information is missing or unknown, explicitly state that it is unknown.",
    "Do not assume unstated user preferences, constraints, or context.",
    "Do not infer intent beyond what is explicitly requested.",
)

BASE_VERIFICATION_RULES = (
    "Treat missing information as unknown.",
    "Prefer conservative, factual responses over speculative or creative ones.",
    "Clearly state uncertainty when certainty is not possible.",
    "Never guess to fill gaps in information.",
)

HIGH_RISK_VERIFICATION_ADDITIONS = (
    "Do not provide estimates unless explicitly requested.",
    "Avoid absolute claims unless directly supported by provided information.",
    "If factual accuracy cannot be ensured, say so explicitly.",
)

AMBIGUITY_VERIFICATION_ADDITIONS = (
    "If required details are missing, respond using general best practices.",
    "Explicitly state any assumptions made.",
)

# ---------------------------------------------------------------------------
# Constraints
# ---------------------------------------------------------------------------

UNIVERSAL_CONSTRAINTS = (
    "Preserve the original user intent exactly.",
    "Do not add new requirements, features, or scope.",
)

LANGUAGE_CONSTRAINT = "Write the response in {language}."

DOMAIN_CONSTRAINTS = MappingProxyType({
    Domain.CODE: (
        "Use standard language features unless otherwise specified.",
        "Do not assume framework versions.",
    ),
    Domain.CONTENT: (
        "Maintain neutral, clear tone unless otherwise specified.",
    ),
    Domain.PLANNING: (
        "Base recommendations on common defaults only.",
    ),
    Domain.RESEARCH: (
        "Avoid unsupported claims.",
    ),
})

# ---------------------------------------------------------------------------
# Role, context, output format, integrity rule
# ---------------------------------------------------------------------------

ROLE_BY_DOMAIN = MappingProxyType({
    Domain.CODE: (
        "You are an expert software engineer focused on correctness and reliability."
    ),
    Domain.CONTENT: (
        "You are a professional writer and editor focused on clarity and accuracy."
    ),
    Domain.RESEARCH: (
        "You are a careful research assistant focused on factual accuracy "
        "and clear uncertainty handling."
    ),
    Domain.REASONING: (
        "You are a rigorous reasoning assistant focused on logical correctness "
        "and explicit uncertainty."
    ),
    Domain.PLANNING: (
        "You are a pragmatic planner focused on actionable, realistic guidance."
    ),
    Domain.DESIGN: (
        "You are a UI/UX designer focused on usability and clear communication."
    ),
    Domain.CONVERSION: (
        "You are a precise text transformation assistant focused on fidelity "
        "to the original content."
    ),
    Domain.UNKNOWN: (
        "You are a careful assistant focused on following instructions "
        "and avoiding fabrication."
    ),
})

NO_CONTEXT_PROVIDED = "No additional context was provided beyond the user prompt."

DEFAULT_OUTPUT_FORMAT = (
    "Provide a clear, well-organized response using appropriate structure."
)

SEMANTIC_INTEGRITY_RULE = (
    "The response must satisfy the original user request exactly, "
    "without adding, removing, or expanding scope."
)

# ---------------------------------------------------------------------------
# Quality bar
# ---------------------------------------------------------------------------

UNIVERSAL_QUALITY_BAR = (
    "Fully addresses the user request in TASK.",
    "Does not add, remove, or expand scope beyond the original request.",
    "Treats missing information as unknown and states uncertainty clearly when needed.",
    "Is clear, well-organized, and internally consistent.",
)

CODE_QUALITY_BAR = (
    "Uses correct, idiomatic code and avoids assuming unspecified "
    "dependencies or versions."
)

NO_FABRICATED_CITATIONS_QUALITY_BAR = (
    "Avoids unsupported factual claims and does not invent citations or sources."
)

CITATION_SENSITIVE_DOMAINS = frozenset({Domain.RESEARCH, Domain.UNKNOWN})


def bullets(lines) -> str:
    """Render lines as newline-joined "- " bullets."""
    return "\n".join(f"- {line}" for line in lines)
