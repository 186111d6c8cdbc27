"""Domain Types: verifies enum members and the risk lattice.

Tests:
    - Domain has exactly 8 members, UNKNOWN included
    - RiskLevel is ordered LOW < MEDIUM < HIGH
    - escalate() is a max: never lowers, always commutative
    - Enums serialize to their string values
"""

import itertools
import json

from prompt_enhancer.core.domain_types import Domain, RiskLevel, Strictness, ToolName


def test_domain_has_exactly_eight_values():
    assert {d.value for d in Domain} == {
        "code", "content", "research", "reasoning",
        "planning", "design", "conversion", "unknown",
    }


def test_risk_levels_are_totally_ordered():
    assert RiskLevel.LOW.rank < RiskLevel.MEDIUM.rank < RiskLevel.HIGH.rank


def test_escalate_never_downgrades():
    for current, signal in itertools.product(RiskLevel, RiskLevel):
        escalated = current.escalate(signal)
        assert escalated.rank >= current.rank
        assert escalated.rank >= signal.rank


def test_escalate_is_commutative():
    for a, b in itertools.product(RiskLevel, RiskLevel):
        assert a.escalate(b) is b.escalate(a)


def test_escalate_to_high_from_any_level():
    for level in RiskLevel:
        assert level.escalate(RiskLevel.HIGH) is RiskLevel.HIGH


def test_strictness_values():
    assert {s.value for s in Strictness} == {"normal", "strict", "auto"}


def test_tool_names():
    assert [t.value for t in ToolName] == [
        "enhance_prompt", "classify_prompt", "diff_prompt",
    ]


def test_enums_serialize_to_strings():
    payload = json.dumps({"domain": Domain.CODE, "risk": RiskLevel.HIGH})
    assert payload == '{"domain": "code", "risk": "high"}'
