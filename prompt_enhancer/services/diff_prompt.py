"""Diff Prompt: raw vs enhanced text plus a summary of what was added.

Invariants:
    - changes_made always starts with "section additions", "guard injections"
    - "high-risk guard injections" appended iff risk_level is HIGH
    - "ambiguity handling" appended iff ambiguity was detected (any domain)
    - Uses default options (no language, no forced format, AUTO strictness)
"""

from prompt_enhancer.core.domain_types import RiskLevel
from prompt_enhancer.services.enhance_prompt import enhance_prompt_internal
from prompt_enhancer.schemas.prompt import DiffPromptRequest, DiffPromptResponse

BASE_CHANGES = ("section additions", "guard injections")
HIGH_RISK_CHANGE = "high-risk guard injections"
AMBIGUITY_CHANGE = "ambiguity handling"


def diff_prompt(request: DiffPromptRequest) -> DiffPromptResponse:
    outcome = enhance_prompt_internal(request.prompt)

    changes_made = list(BASE_CHANGES)
    if outcome.metadata.risk_level is RiskLevel.HIGH:
        changes_made.append(HIGH_RISK_CHANGE)
    if outcome.ambiguity_detected:
        changes_made.append(AMBIGUITY_CHANGE)

    return DiffPromptResponse(
        raw=request.prompt,
        enhanced=outcome.enhanced_prompt,
        changes_made=changes_made,
        metadata=outcome.metadata,
    )
