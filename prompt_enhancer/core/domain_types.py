"""Domain Types: closed enumerations shared by every pipeline stage.

Invariants:
    - Domain has exactly 8 values; UNKNOWN is the universal fallback
    - RiskLevel is totally ordered LOW < MEDIUM < HIGH
    - RiskLevel.escalate() never returns a lower level than self
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (tool results are JSON)
    - Escalation as lattice max: "never downgrades" is visible in one method
"""

from enum import Enum


class Domain(str, Enum):
    """Coarse topical category of a prompt. Drives persona and constraints."""
    CODE = "code"
    CONTENT = "content"
    RESEARCH = "research"
    REASONING = "reasoning"
    PLANNING = "planning"
    DESIGN = "design"
    CONVERSION = "conversion"
    UNKNOWN = "unknown"


class RiskLevel(str, Enum):
    """Hallucination/harm exposure tier. Controls verification guard volume."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]

    def escalate(self, other: "RiskLevel") -> "RiskLevel":
        """Lattice max: the higher of self and other."""
        return other if other.rank > self.rank else self


_RISK_RANK = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


class Strictness(str, Enum):
    """Caller-requested strictness. NORMAL and AUTO behave identically."""
    NORMAL = "normal"
    STRICT = "strict"
    AUTO = "auto"


class ToolName(str, Enum):
    """Names of the tools exposed by the MCP server and HTTP API."""
    ENHANCE_PROMPT = "enhance_prompt"
    CLASSIFY_PROMPT = "classify_prompt"
    DIFF_PROMPT = "diff_prompt"
