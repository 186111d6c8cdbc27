"""Legacy Enhancer: keyword-heuristic six-section rewrite, kept for the CLI.

Invariants:
    - Pure and total; never raises on string input
    - Output has 6 sections (ROLE, TASK, CONTEXT, CONSTRAINTS, OUTPUT FORMAT,
      QUALITY BAR), always in that order
    - Unlike the canonical pipeline, TASK is reworded (not preserved verbatim)

Design Decisions:
    - Superseded by the canonical pipeline (services/enhance_prompt.py); no
      verification rules, no risk scaling, no determinism hash
    - Heuristic tables are ordered tuples: first match wins, same as the classifier
"""

import re
from dataclasses import dataclass, field
from enum import Enum

_LEGACY_SECTION_ORDER = (
    ("ROLE", "role"),
    ("TASK", "task"),
    ("CONTEXT", "context"),
    ("CONSTRAINTS", "constraints"),
    ("OUTPUT FORMAT", "output_format"),
    ("QUALITY BAR", "quality_bar"),
)


class TaskType(str, Enum):
    DECISION_MAKING = "decision-making"
    INFORMATIONAL = "informational"
    IMPLEMENTATION = "implementation"
    ANALYSIS = "analysis"


class DomainLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


@dataclass(frozen=True)
class PromptAnalysis:
    has_structure: bool
    detected_sections: tuple[str, ...]
    task_type: TaskType
    domain_level: DomainLevel


@dataclass(frozen=True)
class LegacyStructure:
    role: str
    task: str
    context: str
    constraints: str
    output_format: str
    quality_bar: str


@dataclass(frozen=True)
class LegacyEnhancement:
    enhanced: str
    original_length: int
    enhanced_length: int
    sections_inferred: list[str] = field(default_factory=list)


# ─── Analysis ────────────────────────────────────────────────────

_STRUCTURE_MARKERS = re.compile(r"###|##|\*\*[A-Z]+\*\*|ROLE:|TASK:|CONTEXT:", re.IGNORECASE)

_SECTION_MARKERS = (
    ("role", re.compile(r"role:", re.IGNORECASE)),
    ("task", re.compile(r"task:", re.IGNORECASE)),
    ("context", re.compile(r"context:", re.IGNORECASE)),
    ("constraints", re.compile(r"constraint", re.IGNORECASE)),
    ("output_format", re.compile(r"output|format", re.IGNORECASE)),
)

_TASK_TYPE_RULES = (
    (TaskType.IMPLEMENTATION, re.compile(r"\b(write|create|build|implement|code|develop|generate)\b", re.ASCII)),
    (TaskType.DECISION_MAKING, re.compile(r"\b(should|best|recommend|choose|decide|which)\b", re.ASCII)),
    (TaskType.ANALYSIS, re.compile(r"\b(analyze|evaluate|compare|assess|review|critique)\b", re.ASCII)),
)

_TECHNICAL_TERMS = re.compile(
    r"\b(architecture|distributed|scalability|optimization|algorithm|complexity|"
    r"refactor|design pattern|microservice|kubernetes|redis|kafka|postgresql)\b",
    re.IGNORECASE | re.ASCII,
)
_BASIC_TERMS = re.compile(
    r"\b(simple|basic|beginner|learn|how to|getting started|tutorial|introduction)\b",
    re.IGNORECASE | re.ASCII,
)


def detect_task_type(lower_prompt: str) -> TaskType:
    for task_type, pattern in _TASK_TYPE_RULES:
        if pattern.search(lower_prompt):
            return task_type
    return TaskType.INFORMATIONAL


def detect_domain_level(prompt: str) -> DomainLevel:
    if _BASIC_TERMS.search(prompt):
        return DomainLevel.BEGINNER
    if _TECHNICAL_TERMS.search(prompt):
        return DomainLevel.EXPERT
    return DomainLevel.INTERMEDIATE


def analyze_prompt(prompt: str) -> PromptAnalysis:
    return PromptAnalysis(
        has_structure=_STRUCTURE_MARKERS.search(prompt) is not None,
        detected_sections=tuple(
            name for name, pattern in _SECTION_MARKERS if pattern.search(prompt)
        ),
        task_type=detect_task_type(prompt.lower()),
        domain_level=detect_domain_level(prompt),
    )


# ─── Role ────────────────────────────────────────────────────────

_LANGUAGES = (
    ("TypeScript", re.compile(r"\btypescript\b", re.IGNORECASE | re.ASCII)),
    ("JavaScript", re.compile(r"\bjavascript\b|\bjs\b", re.IGNORECASE | re.ASCII)),
    ("Python", re.compile(r"\bpython\b", re.IGNORECASE | re.ASCII)),
    ("Java", re.compile(r"\bjava\b", re.IGNORECASE | re.ASCII)),
    ("Go", re.compile(r"\bgolang\b|\bgo\b", re.IGNORECASE | re.ASCII)),
    ("Rust", re.compile(r"\brust\b", re.IGNORECASE | re.ASCII)),
    ("C++", re.compile(r"\bc\+\+\b", re.IGNORECASE | re.ASCII)),
    ("C#", re.compile(r"\bc#\b", re.IGNORECASE | re.ASCII)),
    ("Ruby", re.compile(r"\bruby\b", re.IGNORECASE | re.ASCII)),
    ("PHP", re.compile(r"\bphp\b", re.IGNORECASE | re.ASCII)),
    ("Swift", re.compile(r"\bswift\b", re.IGNORECASE | re.ASCII)),
    ("Kotlin", re.compile(r"\bkotlin\b", re.IGNORECASE | re.ASCII)),
)

# (keywords, role) checked in order after the programming-language case
_ROLE_RULES = (
    (
        ("architecture", "system design"),
        "You are a senior systems architect with expertise in distributed systems, "
        "scalability, and enterprise architecture patterns.",
    ),
    (
        ("database", "sql", "data model"),
        "You are a database expert with extensive experience in data modeling, "
        "query optimization, and database architecture.",
    ),
    (
        ("api", "rest", "graphql"),
        "You are an API design specialist with expertise in RESTful services, "
        "API architecture, and integration patterns.",
    ),
    (
        ("security", "authentication", "authorization"),
        "You are a security engineer with deep knowledge of authentication, "
        "authorization, and secure application development.",
    ),
    (
        ("performance", "optimization", "speed"),
        "You are a performance optimization specialist with expertise in profiling, "
        "benchmarking, and system optimization.",
    ),
    (
        ("test", "testing"),
        "You are a test engineering expert specializing in test-driven development, "
        "automated testing, and quality assurance.",
    ),
)


def extract_language(prompt: str) -> str | None:
    for name, pattern in _LANGUAGES:
        if pattern.search(prompt):
            return name
    return None


def infer_role(prompt: str, analysis: PromptAnalysis) -> str:
    lower = prompt.lower()

    if any(word in lower for word in ("function", "code", "program")):
        language = extract_language(prompt)
        if language:
            return (
                f"You are an expert {language} developer with deep knowledge of best "
                "practices, design patterns, and production-ready code standards."
            )
        return (
            "You are an experienced software engineer specializing in writing clean, "
            "maintainable, and production-ready code."
        )

    for keywords, role in _ROLE_RULES:
        if any(word in lower for word in keywords):
            return role

    if analysis.task_type is TaskType.DECISION_MAKING:
        return (
            "You are a technical consultant with broad expertise in software "
            "engineering, architecture, and technology evaluation."
        )
    return (
        "You are a knowledgeable technical expert with deep understanding of "
        "software development principles and best practices."
    )


# ─── Task ────────────────────────────────────────────────────────

_POLITE_PREFIX = re.compile(
    r"^(please|can you|could you|i need to|i want to|help me)\s+", re.IGNORECASE,
)
_SENTENCE_BREAK = re.compile(r"[.!?]\s")
_IMPLEMENTATION_CLAUSE = re.compile(
    r"\b(write|create|build|implement|develop|generate)\s+(.+?)(?:\.|$)", re.IGNORECASE,
)
_DECISION_QUESTION = re.compile(
    r"\b(what|which|should|best|recommend).+?\?", re.IGNORECASE | re.ASCII,
)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def infer_task(prompt: str, analysis: PromptAnalysis) -> str:
    cleaned = _POLITE_PREFIX.sub("", prompt, count=1).strip()
    first_sentence = _SENTENCE_BREAK.split(cleaned, maxsplit=1)[0]

    if analysis.task_type is TaskType.IMPLEMENTATION:
        match = _IMPLEMENTATION_CLAUSE.search(cleaned)
        if match:
            task = match.group(0).strip()
            return _capitalize_first(task) + ("" if task.endswith(".") else ".")

    if analysis.task_type is TaskType.DECISION_MAKING:
        match = _DECISION_QUESTION.search(cleaned)
        if match:
            question = match.group(0).removesuffix("?")
            return f"Evaluate and recommend the best approach for: {question}."

    if analysis.task_type is TaskType.ANALYSIS:
        return f"Analyze and evaluate {first_sentence.lower()}."

    task = _capitalize_first(first_sentence)
    return task if task.endswith((".", "?")) else task + "."


# ─── Context ─────────────────────────────────────────────────────

_DOMAIN_CONTEXT = (
    (
        re.compile(r"\bemail\b", re.IGNORECASE | re.ASCII),
        "Email validation/handling must follow industry standards (RFC 5322 where "
        "applicable) while remaining practical for real-world use.",
    ),
    (
        re.compile(r"\bnotification\b", re.IGNORECASE | re.ASCII),
        "Notification systems require reliable message delivery, low latency, and "
        "proper handling of delivery failures.",
    ),
    (
        re.compile(r"\bapi\b", re.IGNORECASE | re.ASCII),
        "APIs should follow RESTful principles, include proper error handling, and "
        "provide clear documentation.",
    ),
    (
        re.compile(r"\bdatabase\b", re.IGNORECASE | re.ASCII),
        "Database operations should be optimized for performance, maintain data "
        "integrity, and follow normalization principles where appropriate.",
    ),
)

# (keywords, sentence): every matching rule contributes
_CONTEXT_RULES = (
    (
        ("user", "customer"),
        "The implementation should consider user experience and handle edge cases gracefully.",
    ),
    (
        ("real-time", "performance"),
        "Performance and efficiency are critical considerations.",
    ),
    (
        ("scale", "distributed"),
        "The solution must be designed to scale and handle high volumes.",
    ),
    (
        ("security", "auth"),
        "Security best practices and proper error handling are essential.",
    ),
)


def extract_domain_context(prompt: str) -> str | None:
    for pattern, sentence in _DOMAIN_CONTEXT:
        if pattern.search(prompt):
            return sentence
    return None


def infer_context(prompt: str, analysis: PromptAnalysis) -> str:
    lower = prompt.lower()
    parts = []

    if analysis.task_type is TaskType.IMPLEMENTATION:
        parts.append(
            "This solution is intended for production use where code quality, "
            "maintainability, and reliability are important."
        )
    for keywords, sentence in _CONTEXT_RULES:
        if any(word in lower for word in keywords):
            parts.append(sentence)

    domain_context = extract_domain_context(prompt)
    if domain_context:
        parts.append(domain_context)

    if not parts:
        parts.append("Standard software engineering best practices and principles should be followed.")
    return " ".join(parts)


# ─── Constraints, Output Format, Quality Bar ─────────────────────

def infer_constraints(prompt: str, analysis: PromptAnalysis) -> str:
    lower = prompt.lower()
    constraints = []

    if "no external" in lower or "no dependencies" in lower:
        constraints.append("No external libraries or dependencies")

    # "sync" also matches "async": the synchronous bullet wins for both
    if "synchronous" in lower or "sync" in lower:
        constraints.append("Synchronous implementation required")
    elif "async" in lower or "asynchronous" in lower:
        constraints.append("Asynchronous implementation required")

    if analysis.task_type is TaskType.IMPLEMENTATION:
        constraints.extend((
            "Code must be production-ready with proper error handling",
            "Include type safety and input validation",
            "Follow language-specific best practices and conventions",
        ))

    if "test" in lower:
        constraints.append("Include comprehensive test cases")

    if "comment" in lower or analysis.domain_level is DomainLevel.BEGINNER:
        constraints.append("Include clear explanatory comments")

    if analysis.task_type in (TaskType.DECISION_MAKING, TaskType.ANALYSIS):
        constraints.extend((
            "Base recommendations on proven, production-tested approaches",
            "Consider practical implementation constraints (time, team size, budget)",
        ))

    if not constraints:
        constraints.extend(("Follow industry best practices", "Ensure clarity and maintainability"))

    return "\n".join(f"- {c}" for c in constraints)


_OUTPUT_FORMATS = {
    TaskType.DECISION_MAKING: (
        "Clear recommendation with supporting rationale",
        "Comparison of viable alternatives (if applicable)",
        "Tradeoff analysis (pros/cons or comparison table)",
        "Specific technology/approach names (not generic categories)",
    ),
    TaskType.ANALYSIS: (
        "Structured analysis with clear sections",
        "Key findings and insights",
        "Supporting evidence or examples",
        "Actionable conclusions",
    ),
    TaskType.INFORMATIONAL: (
        "Clear, well-organized explanation",
        "Relevant examples demonstrating concepts",
        "Practical takeaways or next steps",
    ),
}


def infer_output_format(prompt: str, analysis: PromptAnalysis) -> str:
    if analysis.task_type is TaskType.IMPLEMENTATION:
        formats = ["Complete, runnable code with proper structure"]
        if "function" in prompt.lower():
            formats.extend((
                "Function signature with type annotations or JSDoc",
                "Implementation with clear logic flow",
                "Usage examples or test cases demonstrating functionality",
            ))
        else:
            formats.extend((
                "Well-structured implementation with clear entry points",
                "Supporting documentation or usage examples",
            ))
    else:
        formats = list(_OUTPUT_FORMATS[analysis.task_type])

    return "\n".join(f"{i}. {item}" for i, item in enumerate(formats, start=1))


_QUALITY_BARS = {
    TaskType.IMPLEMENTATION: (
        "Production-ready code that can be deployed with confidence",
        "Handles edge cases and error conditions gracefully",
        "Well-documented and easy to understand",
        "Follows established design patterns and conventions",
        "Efficient and performant for typical use cases",
    ),
    TaskType.DECISION_MAKING: (
        "Technically sound and proven at scale",
        "Practical and implementable with realistic constraints",
        "Includes specific, actionable recommendations",
        "Acknowledges tradeoffs explicitly",
        "Considers long-term maintenance and scalability",
    ),
    TaskType.ANALYSIS: (
        "Accurate and well-researched",
        "Provides actionable insights",
        "Considers multiple perspectives",
        "Includes concrete examples",
    ),
    TaskType.INFORMATIONAL: (
        "Clear and accurate information",
        "Appropriate level of detail for the context",
        "Practical and actionable",
        "Well-organized and easy to follow",
    ),
}


def infer_quality_bar(analysis: PromptAnalysis) -> str:
    return "\n".join(f"- {q}" for q in _QUALITY_BARS[analysis.task_type])


# ─── Assembly ────────────────────────────────────────────────────

def infer_structure(prompt: str, analysis: PromptAnalysis) -> LegacyStructure:
    return LegacyStructure(
        role=infer_role(prompt, analysis),
        task=infer_task(prompt, analysis),
        context=infer_context(prompt, analysis),
        constraints=infer_constraints(prompt, analysis),
        output_format=infer_output_format(prompt, analysis),
        quality_bar=infer_quality_bar(analysis),
    )


def format_legacy_prompt(structure: LegacyStructure) -> str:
    return "\n\n".join(
        f"### {header}\n{getattr(structure, attr)}"
        for header, attr in _LEGACY_SECTION_ORDER
    )


def legacy_enhance_prompt(raw_prompt: str) -> LegacyEnhancement:
    """Rewrite raw_prompt with the superseded six-section heuristics."""
    analysis = analyze_prompt(raw_prompt)
    structure = infer_structure(raw_prompt, analysis)
    enhanced = format_legacy_prompt(structure)
    return LegacyEnhancement(
        enhanced=enhanced,
        original_length=len(raw_prompt),
        enhanced_length=len(enhanced),
        sections_inferred=[
            attr for _, attr in _LEGACY_SECTION_ORDER
            if getattr(structure, attr).strip()
        ],
    )
