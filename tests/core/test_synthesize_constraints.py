"""Constraint synthesis tests: universal, language and per-domain bullets."""

import pytest

from prompt_enhancer.core.domain_types import Domain
from prompt_enhancer.core.synthesize_constraints import synthesize_constraints

UNIVERSAL = [
    "- Preserve the original user intent exactly.",
    "- Do not add new requirements, features, or scope.",
]


def test_code_constraints_with_language():
    assert synthesize_constraints(Domain.CODE, "French").split("\n") == UNIVERSAL + [
        "- Write the response in French.",
        "- Use standard language features unless otherwise specified.",
        "- Do not assume framework versions.",
    ]


def test_language_is_named_verbatim():
    text = synthesize_constraints(Domain.CONTENT, "pt-BR (Brazilian Portuguese)")
    assert "- Write the response in pt-BR (Brazilian Portuguese)." in text


@pytest.mark.parametrize("language", [None, ""])
def test_missing_language_adds_no_bullet(language):
    assert "Write the response in" not in synthesize_constraints(Domain.CODE, language)


@pytest.mark.parametrize("domain,extra", [
    (Domain.CONTENT, ["- Maintain neutral, clear tone unless otherwise specified."]),
    (Domain.PLANNING, ["- Base recommendations on common defaults only."]),
    (Domain.RESEARCH, ["- Avoid unsupported claims."]),
    (Domain.REASONING, []),
    (Domain.DESIGN, []),
    (Domain.CONVERSION, []),
    (Domain.UNKNOWN, []),
])
def test_domain_specific_bullets(domain, extra):
    assert synthesize_constraints(domain).split("\n") == UNIVERSAL + extra


def test_every_line_is_a_bullet():
    for domain in Domain:
        for line in synthesize_constraints(domain, "German").split("\n"):
            assert line.startswith("- ")
