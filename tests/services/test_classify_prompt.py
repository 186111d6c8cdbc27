"""Classify Prompt: domain, risk and ambiguity without enhancement."""

from prompt_enhancer.core.domain_types import Domain, RiskLevel
from prompt_enhancer.schemas.prompt import ClassifyPromptRequest
from prompt_enhancer.services.classify_prompt import classify_prompt


def test_plain_code_prompt():
    response = classify_prompt(
        ClassifyPromptRequest(prompt="Write a function in Python to reverse a string"),
    )
    assert response.domain is Domain.CODE
    assert response.risk_level is RiskLevel.MEDIUM
    assert response.ambiguity_detected is False


def test_short_prompt_is_unknown_high_and_ambiguous():
    response = classify_prompt(ClassifyPromptRequest(prompt="fix my code"))
    assert response.domain is Domain.UNKNOWN
    assert response.risk_level is RiskLevel.HIGH
    assert response.ambiguity_detected is True


def test_ambiguity_reported_for_any_domain():
    response = classify_prompt(ClassifyPromptRequest(prompt="Draft a blog post, maybe about cats"))
    assert response.domain is Domain.CONTENT
    assert response.risk_level is RiskLevel.LOW
    assert response.ambiguity_detected is True


def test_strictness_in_arguments_is_ignored():
    request = ClassifyPromptRequest.model_validate({
        "prompt": "Draft a blog post about spring flowers",
        "options": {"strictness": "strict"},
    })
    assert classify_prompt(request).risk_level is RiskLevel.LOW
