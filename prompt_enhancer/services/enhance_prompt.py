"""Enhance Prompt: runs the classification-and-synthesis pipeline end to end.

Invariants:
    - Pipeline order: classify -> ambiguity -> constraints + guards -> output
      format -> structure -> text -> hash
    - Input is already validated (schemas.prompt.validate_request); the
      pipeline itself never raises on a string
    - Same prompt + options always yields the same text and hash

Design Decisions:
    - enhance_prompt_internal keeps ambiguity_detected for diff_prompt, the
      public response drops it
    - Options default here (language None, force False, strictness AUTO),
      not in the core
"""

import logging
from dataclasses import dataclass

from prompt_enhancer.core.classify_domain import classify_domain_and_risk
from prompt_enhancer.core.derive_output_format import derive_output_format
from prompt_enhancer.core.determinism import compute_determinism_hash
from prompt_enhancer.core.domain_types import Strictness
from prompt_enhancer.core.format_prompt import (
    build_prompt_structure,
    format_enhanced_prompt,
)
from prompt_enhancer.core.inject_guards import inject_hallucination_guards
from prompt_enhancer.core.resolve_ambiguity import resolve_ambiguity
from prompt_enhancer.core.synthesize_constraints import synthesize_constraints
from prompt_enhancer.schemas.prompt import (
    EnhancementMetadata,
    EnhancePromptOptions,
    EnhancePromptRequest,
    EnhancePromptResponse,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnhancementOutcome:
    enhanced_prompt: str
    metadata: EnhancementMetadata
    ambiguity_detected: bool


def enhance_prompt_internal(
    prompt: str, options: EnhancePromptOptions | None = None,
) -> EnhancementOutcome:
    options = options or EnhancePromptOptions()
    strictness = options.strictness or Strictness.AUTO

    classification = classify_domain_and_risk(prompt, strictness)
    ambiguity = resolve_ambiguity(prompt, classification.domain)

    constraints = synthesize_constraints(classification.domain, options.language)
    guards = inject_hallucination_guards(
        classification.risk_level, ambiguity.inject_uncertainty_rules,
    )
    output_format = derive_output_format(
        prompt, classification.domain, bool(options.force_output_format),
    )

    structure = build_prompt_structure(
        raw_prompt=prompt,
        domain=classification.domain,
        constraints=constraints,
        global_guards=guards.global_guards,
        verification_rules=guards.verification_rules,
        output_format=output_format,
    )
    enhanced_prompt = format_enhanced_prompt(structure)
    determinism_hash = compute_determinism_hash(enhanced_prompt)

    logger.debug(
        "Prompt enhanced",
        extra={
            "domain": classification.domain.value,
            "risk_level": classification.risk_level.value,
            "ambiguity_detected": ambiguity.ambiguity_detected,
            "determinism_hash": determinism_hash,
        },
    )
    return EnhancementOutcome(
        enhanced_prompt=enhanced_prompt,
        metadata=EnhancementMetadata(
            domain=classification.domain,
            risk_level=classification.risk_level,
            determinism_hash=determinism_hash,
        ),
        ambiguity_detected=ambiguity.ambiguity_detected,
    )


def enhance_prompt(request: EnhancePromptRequest) -> EnhancePromptResponse:
    """Rewrite request.prompt into the canonical 8-section layout."""
    outcome = enhance_prompt_internal(request.prompt, request.options)
    return EnhancePromptResponse(
        enhanced_prompt=outcome.enhanced_prompt,
        metadata=outcome.metadata,
    )
