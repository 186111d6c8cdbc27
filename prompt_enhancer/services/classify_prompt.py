"""Classify Prompt: domain, risk level and ambiguity without enhancing."""

from prompt_enhancer.core.classify_domain import classify_domain_and_risk
from prompt_enhancer.core.domain_types import Strictness
from prompt_enhancer.core.resolve_ambiguity import resolve_ambiguity
from prompt_enhancer.schemas.prompt import ClassifyPromptRequest, ClassifyPromptResponse


def classify_prompt(request: ClassifyPromptRequest) -> ClassifyPromptResponse:
    classification = classify_domain_and_risk(request.prompt, Strictness.AUTO)
    ambiguity = resolve_ambiguity(request.prompt, classification.domain)
    return ClassifyPromptResponse(
        domain=classification.domain,
        risk_level=classification.risk_level,
        ambiguity_detected=ambiguity.ambiguity_detected,
    )
