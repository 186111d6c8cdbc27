"""Classification Rules: read-only regex tables for domain and risk detection.

Invariants:
    - Every pattern is compiled once at import time and never mutated
    - DOMAIN_RULES order is the classification priority (first match wins)
    - All word patterns are case-insensitive and unanchored
    - Word boundaries are ASCII-only: CJK or accented letters next to a
      keyword still leave a boundary ("请用python写" matches "python")

Design Decisions:
    - Tuples of compiled patterns over lists: immutable process-wide configuration
    - Order lives in one explicit tuple instead of an if/elif ladder
"""

import re
from types import MappingProxyType

from prompt_enhancer.core.domain_types import Domain, RiskLevel


def _words(*alternatives: str) -> re.Pattern:
    return re.compile(r"\b(" + "|".join(alternatives) + r")\b", re.IGNORECASE | re.ASCII)


# ─── Domain Pattern Groups ───────────────────────────────────────

CODE_PATTERNS = (
    re.compile(r"```[\s\S]*?```"),
    _words(
        "function", "class", "interface", "type", "import", "export",
        "const", "let", "var", "def", "return",
    ),
    _words(
        r"node\.js", "nodejs", "typescript", "javascript", "python", "java",
        r"c\+\+", "c#", "golang", "rust", "sql", "regex",
    ),
    re.compile(r"[{};]|=>"),
    _words(
        "api", "sdk", "library", "framework", "package", "dependency",
        "npm", "pip", "cargo", "maven", "gradle",
    ),
)

CONTENT_PATTERNS = (
    _words(
        "write", "draft", "compose", "script", "story", "caption", "post",
        "blog", "newsletter", "copy", "narrative", "poem",
    ),
    _words("tone", "voice", "style guide", "headline", "tagline", "call to action"),
)

RESEARCH_PATTERNS = (
    _words(
        "research", "study", "studies", "evidence", "data", "statistics",
        "statistic", "sources", "citations", "references",
    ),
    _words(
        "explain", "cause", "causes", "history", "when did", "how many",
        "what is", "who is",
    ),
)

REASONING_PATTERNS = (
    _words("why", "how"),
    _words("logic", "reasoning", "solve", "prove", "derive", "deduce"),
)

PLANNING_PATTERNS = (
    _words(
        "plan", "roadmap", "strategy", "process", "steps", "timeline",
        "milestones", "checklist",
    ),
)

DESIGN_PATTERNS = (
    _words(
        "ui", "ux", "wireframe", "layout", "branding", "logo", "typography",
        "color palette", "visual design",
    ),
)

CONVERSION_PATTERNS = (
    _words(
        "translate", "summarize", "convert", "rewrite", "transform",
        "paraphrase", "extract",
    ),
)

# Priority order. UNKNOWN is the fallback and has no rules.
DOMAIN_RULES: tuple[tuple[Domain, tuple[re.Pattern, ...]], ...] = (
    (Domain.CODE, CODE_PATTERNS),
    (Domain.CONTENT, CONTENT_PATTERNS),
    (Domain.RESEARCH, RESEARCH_PATTERNS),
    (Domain.REASONING, REASONING_PATTERNS),
    (Domain.PLANNING, PLANNING_PATTERNS),
    (Domain.DESIGN, DESIGN_PATTERNS),
    (Domain.CONVERSION, CONVERSION_PATTERNS),
)


# ─── Baseline Risk ───────────────────────────────────────────────

BASELINE_RISK: MappingProxyType = MappingProxyType({
    Domain.CONTENT: RiskLevel.LOW,
    Domain.DESIGN: RiskLevel.LOW,
    Domain.CONVERSION: RiskLevel.LOW,
    Domain.CODE: RiskLevel.MEDIUM,
    Domain.REASONING: RiskLevel.MEDIUM,
    Domain.PLANNING: RiskLevel.MEDIUM,
    Domain.RESEARCH: RiskLevel.HIGH,
    Domain.UNKNOWN: RiskLevel.HIGH,
})


# ─── Risk Escalation Signals ─────────────────────────────────────

SAFETY_CRITICAL_PATTERNS = (
    # legal
    _words(
        "legal", "law", "contract", "lawsuit", "attorney", "compliance",
        "regulation", "tax",
    ),
    # medical
    _words("medical", "diagnosis", "treatment", "symptom", "dosage", "drug", "health"),
    # security
    _words(
        "security", "vulnerability", "exploit", "malware", "phishing",
        "password", "encryption",
    ),
)

FACTUAL_REQUEST_PATTERNS = (
    _words(
        "how many", "when", "what year", "date", "statistics", "data",
        "percent", "percentage", "rate",
    ),
    _words("cite", "citation", "source", "reference"),
    _words("gdp", "population", "revenue", "market size", "inflation"),
)

# Only consulted when the prompt also contains a digit.
NUMERIC_FACT_PATTERN = _words("statistics", "data", "date", "year", "percent")
DIGIT_PATTERN = re.compile(r"[0-9]")


# ─── Ambiguity Markers ───────────────────────────────────────────

AMBIGUITY_PATTERNS = (
    re.compile(r"\betc\.?\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\band so on\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bwhatever\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\banything\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bsomething\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bvarious\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bseveral\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\ba few\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bkind of\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bsort of\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bmaybe\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bapproximately\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bas needed\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bas appropriate\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bto be determined\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\btbd\b", re.IGNORECASE | re.ASCII),
    re.compile(r"<[^>]+>"),
    re.compile(r"\[[^\]]+\]"),
)

# Domains where silently guessing through ambiguity does the most harm.
UNCERTAINTY_RULE_DOMAINS = frozenset({
    Domain.CODE,
    Domain.PLANNING,
    Domain.RESEARCH,
    Domain.REASONING,
    Domain.UNKNOWN,
})


# ─── Output Format Cues ──────────────────────────────────────────

FORMAT_CUE_PATTERN = _words(
    "format", "structure", "schema", "json", "yaml", "xml", "csv",
    "markdown", "table", "bullet", "list", "timeline", "steps",
    "step-by-step", "outline",
)


def matches_any(text: str, patterns: tuple[re.Pattern, ...]) -> bool:
    """True if at least one pattern matches anywhere in text."""
    return any(p.search(text) for p in patterns)
