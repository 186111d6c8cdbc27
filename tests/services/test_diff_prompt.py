"""Diff Prompt: change summary rules.

Tests cover:
    - Base changes always present, in order
    - "high-risk guard injections" iff HIGH
    - "ambiguity handling" iff ambiguous, even where no rules are injected
    - raw is returned exactly as given
"""

from prompt_enhancer.core.domain_types import RiskLevel
from prompt_enhancer.schemas.prompt import DiffPromptRequest
from prompt_enhancer.services.diff_prompt import diff_prompt
from prompt_enhancer.services.enhance_prompt import enhance_prompt_internal


def test_plain_prompt_has_base_changes_only():
    response = diff_prompt(DiffPromptRequest(prompt="Write a function in Python to reverse a string"))
    assert response.changes_made == ["section additions", "guard injections"]


def test_high_risk_ambiguous_prompt_lists_all_changes():
    response = diff_prompt(DiffPromptRequest(prompt="fix my code"))
    assert response.metadata.risk_level is RiskLevel.HIGH
    assert response.changes_made == [
        "section additions",
        "guard injections",
        "high-risk guard injections",
        "ambiguity handling",
    ]


def test_ambiguity_listed_even_without_injected_rules():
    response = diff_prompt(DiffPromptRequest(prompt="Draft a blog post, maybe about cats"))
    assert response.changes_made == ["section additions", "guard injections", "ambiguity handling"]
    assert "Explicitly state any assumptions made." not in response.enhanced


def test_raw_is_returned_unchanged():
    raw = "  Why does ice float on liquid water  \n"
    assert diff_prompt(DiffPromptRequest(prompt=raw)).raw == raw


def test_enhanced_matches_default_enhancement():
    prompt = "Create a roadmap for moving our team to a new office"
    response = diff_prompt(DiffPromptRequest(prompt=prompt))
    outcome = enhance_prompt_internal(prompt)
    assert response.enhanced == outcome.enhanced_prompt
    assert response.metadata == outcome.metadata
