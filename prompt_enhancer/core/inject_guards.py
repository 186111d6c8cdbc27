"""Hallucination Guard Injection: anti-fabrication guards and verification rules.

Invariants:
    - global_guards is identical for every input (4 bullets)
    - verification_rules = base (4) + high-risk (3, if HIGH) + ambiguity (2, if flagged)
    - The two extensions are independent and additive
"""

from dataclasses import dataclass

from prompt_enhancer.core.domain_types import RiskLevel
from prompt_enhancer.core.prompt_sections import (
    AMBIGUITY_VERIFICATION_ADDITIONS,
    BASE_VERIFICATION_RULES,
    GLOBAL_GUARDS,
    HIGH_RISK_VERIFICATION_ADDITIONS,
    bullets,
)


@dataclass(frozen=True)
class GuardInjectionResult:
    global_guards: str
    verification_rules: str


def inject_hallucination_guards(
    risk_level: RiskLevel, inject_ambiguity_rules: bool,
) -> GuardInjectionResult:
    rules = list(BASE_VERIFICATION_RULES)
    if RiskLevel(risk_level) is RiskLevel.HIGH:
        rules.extend(HIGH_RISK_VERIFICATION_ADDITIONS)
    if inject_ambiguity_rules:
        rules.extend(AMBIGUITY_VERIFICATION_ADDITIONS)
    return GuardInjectionResult(
        global_guards=bullets(GLOBAL_GUARDS),
        verification_rules=bullets(rules),
    )
