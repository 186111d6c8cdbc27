"""Prompt Tool Schemas: tool definitions (name, description, input_schema).

Invariants:
    - One entry per ToolName, names match ToolDispatch keys
    - input_schema bounds mirror schemas.prompt (10-5000 chars, strictness enum)
    - input_schema is advisory for clients; schemas.prompt is the enforcing boundary
"""

from prompt_enhancer.core.domain_types import Strictness, ToolName
from prompt_enhancer.schemas.prompt import PROMPT_MAX_LENGTH, PROMPT_MIN_LENGTH

_PROMPT_PROPERTY = {
    "type": "string",
    "description": "The raw prompt to process",
    "minLength": PROMPT_MIN_LENGTH,
    "maxLength": PROMPT_MAX_LENGTH,
}

PROMPT_TOOLS = [
    {
        "name": ToolName.ENHANCE_PROMPT.value,
        "description": (
            "Rewrites a raw prompt into a hallucination-resistant prompt with "
            "the fixed ROLE/TASK/CONTEXT/CONSTRAINTS/VERIFICATION RULES/"
            "OUTPUT FORMAT/SEMANTIC INTEGRITY RULE/QUALITY BAR layout. "
            "Returns the enhanced text plus domain, risk level and a "
            "determinism hash."
        ),
        "input_schema": {
            "type": "object",
            "properties": {
                "prompt": _PROMPT_PROPERTY,
                "options": {
                    "type": ["object", "null"],
                    "properties": {
                        "language": {"type": ["string", "null"]},
                        "force_output_format": {"type": ["boolean", "null"]},
                        "strictness": {
                            "type": ["string", "null"],
                            "enum": [s.value for s in Strictness] + [None],
                        },
                    },
                },
            },
            "required": ["prompt"],
        },
    },
    {
        "name": ToolName.CLASSIFY_PROMPT.value,
        "description": (
            "Classifies a raw prompt: domain, risk level and whether it is ambiguous."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"prompt": _PROMPT_PROPERTY},
            "required": ["prompt"],
        },
    },
    {
        "name": ToolName.DIFF_PROMPT.value,
        "description": (
            "Returns the raw prompt, its enhanced form and the list of changes "
            "the enhancement made."
        ),
        "input_schema": {
            "type": "object",
            "properties": {"prompt": _PROMPT_PROPERTY},
            "required": ["prompt"],
        },
    },
]
