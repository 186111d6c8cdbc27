"""Prompt Schemas: Pydantic models with field-level validation for tool boundaries.

Invariants:
    - prompt: strict string, 10-5000 chars measured on the raw (unstripped) text
    - options: object or null; every field may be null, meaning "use the default"
    - Strict field types: wrong types are rejected, never coerced ("true" is not a bool)
    - validate_request() is the only way tool arguments become request models

Design Decisions:
    - StrictStr/StrictBool over plain str/bool: tool callers send JSON, and a
      coerced value would silently change the request
    - Extra fields ignored: clients may send fields for other tool versions
"""

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError

from prompt_enhancer.core.domain_types import Domain, RiskLevel, Strictness
from prompt_enhancer.core.errors import ErrorContext, InvalidInputError

PROMPT_MIN_LENGTH = 10
PROMPT_MAX_LENGTH = 5000


# --- Requests -----------------------------------------------------------------

class EnhancePromptOptions(BaseModel):
    """Optional knobs for enhance_prompt."""
    language: StrictStr | None = None
    force_output_format: StrictBool | None = None
    strictness: Strictness | None = None


class PromptRequest(BaseModel):
    """Shared prompt field for every tool."""
    prompt: StrictStr = Field(min_length=PROMPT_MIN_LENGTH, max_length=PROMPT_MAX_LENGTH)


class EnhancePromptRequest(PromptRequest):
    options: EnhancePromptOptions | None = None


class ClassifyPromptRequest(PromptRequest):
    pass


class DiffPromptRequest(PromptRequest):
    pass


# --- Responses ----------------------------------------------------------------

class EnhancementMetadata(BaseModel):
    domain: Domain
    risk_level: RiskLevel
    determinism_hash: str = Field(pattern=r"^[0-9a-f]{64}$")


class EnhancePromptResponse(BaseModel):
    enhanced_prompt: str
    metadata: EnhancementMetadata


class ClassifyPromptResponse(BaseModel):
    domain: Domain
    risk_level: RiskLevel
    ambiguity_detected: bool


class DiffPromptResponse(BaseModel):
    raw: str
    enhanced: str
    changes_made: list[str]
    metadata: EnhancementMetadata


# --- Boundary validation ------------------------------------------------------

def _format_reason(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


def validate_request(
    model: type[PromptRequest], arguments: object, tool_name: str | None = None,
) -> PromptRequest:
    """Validate raw tool arguments into model, or raise InvalidInputError."""
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidInputError(
            [_format_reason(err) for err in e.errors()],
            ErrorContext(tool_name=tool_name),
        ) from e
