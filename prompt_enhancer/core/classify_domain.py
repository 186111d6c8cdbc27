"""Domain & Risk Classification: maps raw prompt text to a domain and risk level.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - detect_domain is total: UNKNOWN when no rule group matches
    - Risk only escalates within one call (safety/factual → HIGH, strict → HIGH last)
    - NORMAL and AUTO strictness are behaviourally identical

Design Decisions:
    - First-match scan over DOMAIN_RULES: priority is data, not control flow
    - Factual detection is the literal OR of two checks: keyword groups, or
      (any digit AND a narrower statistics/date/percent keyword)
"""

from dataclasses import dataclass

from prompt_enhancer.core.classification_rules import (
    BASELINE_RISK,
    DIGIT_PATTERN,
    DOMAIN_RULES,
    FACTUAL_REQUEST_PATTERNS,
    NUMERIC_FACT_PATTERN,
    SAFETY_CRITICAL_PATTERNS,
    matches_any,
)
from prompt_enhancer.core.domain_types import Domain, RiskLevel, Strictness


@dataclass(frozen=True)
class ClassificationResult:
    domain: Domain
    risk_level: RiskLevel
    safety_critical_detected: bool
    factual_request_detected: bool


def detect_domain(prompt: str) -> Domain:
    """Return the domain of the first rule group with a match."""
    for domain, patterns in DOMAIN_RULES:
        if matches_any(prompt, patterns):
            return domain
    return Domain.UNKNOWN


def detect_safety_critical(prompt: str) -> bool:
    """Legal, medical or security vocabulary."""
    return matches_any(prompt, SAFETY_CRITICAL_PATTERNS)


def detect_factual_request(prompt: str) -> bool:
    """Quantitative/citation vocabulary, or a digit plus a statistics keyword."""
    if matches_any(prompt, FACTUAL_REQUEST_PATTERNS):
        return True
    return bool(DIGIT_PATTERN.search(prompt) and NUMERIC_FACT_PATTERN.search(prompt))


def classify_domain_and_risk(
    prompt: str, strictness: Strictness = Strictness.AUTO,
) -> ClassificationResult:
    """Classify prompt into a domain and a risk level.

    Baseline risk comes from the domain. Safety-critical or factual signals
    escalate to HIGH. STRICT forces HIGH after everything else.
    """
    domain = detect_domain(prompt)
    safety_critical = detect_safety_critical(prompt)
    factual_request = detect_factual_request(prompt)

    risk_level = BASELINE_RISK[domain]
    if safety_critical or factual_request:
        risk_level = risk_level.escalate(RiskLevel.HIGH)
    if Strictness(strictness) is Strictness.STRICT:
        risk_level = risk_level.escalate(RiskLevel.HIGH)

    return ClassificationResult(
        domain=domain,
        risk_level=risk_level,
        safety_critical_detected=safety_critical,
        factual_request_detected=factual_request,
    )
