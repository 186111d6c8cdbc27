"""Ambiguity Resolution: detects vague or underspecified prompts.

Invariants:
    - Pure and total over any string
    - Prompts of 3 words or fewer are always ambiguous
    - inject_uncertainty_rules implies ambiguity_detected
"""

from dataclasses import dataclass

from prompt_enhancer.core.classification_rules import (
    AMBIGUITY_PATTERNS,
    UNCERTAINTY_RULE_DOMAINS,
    matches_any,
)
from prompt_enhancer.core.domain_types import Domain

SHORT_PROMPT_MAX_WORDS = 3


@dataclass(frozen=True)
class AmbiguityResult:
    ambiguity_detected: bool
    inject_uncertainty_rules: bool


def count_words(prompt: str) -> int:
    # "".split() is [], but an empty prompt still counts as one (empty) word
    return max(len(prompt.split()), 1)


def resolve_ambiguity(prompt: str, domain: Domain) -> AmbiguityResult:
    """Flag vagueness markers or very short prompts.

    Uncertainty rules are only injected for domains where guessing is
    harmful (code, planning, research, reasoning, unknown). Content, design
    and conversion tolerate stylistic latitude.
    """
    ambiguity_detected = (
        matches_any(prompt, AMBIGUITY_PATTERNS)
        or count_words(prompt) <= SHORT_PROMPT_MAX_WORDS
    )
    return AmbiguityResult(
        ambiguity_detected=ambiguity_detected,
        inject_uncertainty_rules=(
            ambiguity_detected and Domain(domain) in UNCERTAINTY_RULE_DOMAINS
        ),
    )
