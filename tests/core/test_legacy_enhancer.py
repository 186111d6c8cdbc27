"""Legacy enhancer tests: heuristic analysis and the six-section rewrite.

Tests cover:
    - Task type and domain level detection
    - Role inference (language-specific developer, keyword roles, fallbacks)
    - Task rewording per task type
    - Context, constraints, output format, quality bar
    - Section layout and length bookkeeping
"""

import pytest

from prompt_enhancer.core.legacy_enhancer import (
    DomainLevel,
    TaskType,
    analyze_prompt,
    detect_domain_level,
    detect_task_type,
    extract_language,
    legacy_enhance_prompt,
)

EMAIL_PROMPT = "Write a function in Python to validate email addresses"
CACHE_PROMPT = "Should we use Redis or Memcached for caching?"


# --- Analysis -----------------------------------------------------------------

@pytest.mark.parametrize("prompt,expected", [
    ("write a parser for ini files", TaskType.IMPLEMENTATION),
    ("which queue should we pick", TaskType.DECISION_MAKING),
    ("review this pull request", TaskType.ANALYSIS),
    ("tell me about monads", TaskType.INFORMATIONAL),
])
def test_detect_task_type(prompt, expected):
    assert detect_task_type(prompt) is expected


def test_implementation_wins_over_decision():
    assert detect_task_type("which library should i use to build a cli") is TaskType.IMPLEMENTATION


@pytest.mark.parametrize("prompt,expected", [
    ("Basic intro to Kafka", DomainLevel.BEGINNER),
    ("Scale our Kafka consumers", DomainLevel.EXPERT),
    ("Rename the variables", DomainLevel.INTERMEDIATE),
])
def test_detect_domain_level(prompt, expected):
    assert detect_domain_level(prompt) is expected


def test_structured_prompt_is_detected():
    analysis = analyze_prompt("ROLE: reviewer\nTASK: check the output format")
    assert analysis.has_structure
    assert analysis.detected_sections == ("role", "task", "output_format")


def test_plain_prompt_has_no_structure():
    assert not analyze_prompt("Tell me about monads").has_structure


@pytest.mark.parametrize("prompt,expected", [
    ("a js helper", "JavaScript"),
    ("port it to golang", "Go"),
    ("modern c++17 features", "C++"),
    ("sort a list in C++ to speed it up", None),
    ("port it to C#", None),
    ("plain words only", None),
])
def test_extract_language(prompt, expected):
    assert extract_language(prompt) == expected


# --- Full rewrite -------------------------------------------------------------

def test_implementation_prompt_sections():
    text = legacy_enhance_prompt(EMAIL_PROMPT).enhanced
    assert "You are an expert Python developer" in text
    assert "### TASK\nWrite a function in Python to validate email addresses.\n" in text
    assert "intended for production use" in text
    assert "RFC 5322" in text
    assert "- Code must be production-ready with proper error handling" in text
    assert "4. Usage examples or test cases demonstrating functionality" in text
    assert "- Production-ready code that can be deployed with confidence" in text


def test_decision_prompt_sections():
    text = legacy_enhance_prompt(CACHE_PROMPT).enhanced
    assert "You are a technical consultant" in text
    assert (
        "Evaluate and recommend the best approach for: "
        "Should we use Redis or Memcached for caching."
    ) in text
    assert "1. Clear recommendation with supporting rationale" in text
    assert "- Acknowledges tradeoffs explicitly" in text


def test_polite_prefix_is_removed_from_task():
    text = legacy_enhance_prompt("Please compare REST and GraphQL").enhanced
    assert "### TASK\nAnalyze and evaluate compare rest and graphql." in text


def test_informational_fallbacks():
    text = legacy_enhance_prompt("Tell me about monads").enhanced
    assert "You are a knowledgeable technical expert" in text
    assert "### TASK\nTell me about monads.\n" in text
    assert "Standard software engineering best practices" in text
    assert "- Follow industry best practices\n- Ensure clarity and maintainability" in text


def test_sync_keyword_also_matches_async():
    text = legacy_enhance_prompt("Explain async IO in Python").enhanced
    assert "- Synchronous implementation required" in text
    assert "Asynchronous implementation required" not in text


def test_beginner_prompt_asks_for_comments():
    text = legacy_enhance_prompt("How to learn recursion as a beginner").enhanced
    assert "- Include clear explanatory comments" in text


def test_six_headers_in_order():
    text = legacy_enhance_prompt(EMAIL_PROMPT).enhanced
    headers = [line for line in text.split("\n") if line.startswith("### ")]
    assert headers == [
        "### ROLE", "### TASK", "### CONTEXT",
        "### CONSTRAINTS", "### OUTPUT FORMAT", "### QUALITY BAR",
    ]


def test_lengths_and_sections_are_reported():
    result = legacy_enhance_prompt(EMAIL_PROMPT)
    assert result.original_length == len(EMAIL_PROMPT)
    assert result.enhanced_length == len(result.enhanced)
    assert result.sections_inferred == [
        "role", "task", "context", "constraints", "output_format", "quality_bar",
    ]


def test_is_deterministic():
    assert legacy_enhance_prompt(CACHE_PROMPT) == legacy_enhance_prompt(CACHE_PROMPT)


def test_cpp_followed_by_space_gets_generic_developer_role():
    text = legacy_enhance_prompt("Write a function in C++ to sort numbers").enhanced
    assert text.startswith("### ROLE\nYou are an experienced software engineer")


def test_language_next_to_cjk_text_is_detected():
    assert extract_language("用python写一个函数") == "Python"
