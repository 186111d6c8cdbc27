"""Tool Dispatch: explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible, no getattr magic, no auto-discovery
    - Arguments are validated before the handler runs; invalid input never
      reaches the pipeline (fail closed)
    - Unknown tools raise UnknownToolError
    - Any unexpected handler exception is wrapped in ExecutionFailedError
    - Every call is logged with its outcome

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - (request model, handler) pairs: validation and execution share one table
    - Stateless: one module-level dispatcher is safe to share across requests
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel

from prompt_enhancer.core.domain_types import ToolName
from prompt_enhancer.core.errors import (
    ErrorContext,
    ExecutionFailedError,
    PromptEnhancerError,
    UnknownToolError,
)
from prompt_enhancer.schemas.prompt import (
    ClassifyPromptRequest,
    DiffPromptRequest,
    EnhancePromptRequest,
    PromptRequest,
    validate_request,
)
from prompt_enhancer.services.classify_prompt import classify_prompt
from prompt_enhancer.services.diff_prompt import diff_prompt
from prompt_enhancer.services.enhance_prompt import enhance_prompt

logger = logging.getLogger(__name__)

Handler = Callable[[PromptRequest], BaseModel]


class ToolDispatch:
    """Routes tool_name -> (request model, handler). Explicit registration."""

    def __init__(self):
        # every mapping explicit: adding a tool requires editing this dict
        self._handlers: dict[str, tuple[type[PromptRequest], Handler]] = {
            ToolName.ENHANCE_PROMPT.value: (EnhancePromptRequest, enhance_prompt),
            ToolName.CLASSIFY_PROMPT.value: (ClassifyPromptRequest, classify_prompt),
            ToolName.DIFF_PROMPT.value: (DiffPromptRequest, diff_prompt),
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def execute(self, tool_name: str, arguments: object) -> dict:
        """Validate arguments, run the handler, return a JSON-ready dict."""
        entry = self._handlers.get(tool_name)
        if entry is None:
            logger.warning(
                f"Unknown tool requested: {tool_name}",
                extra={"tool_name": tool_name, "error_code": "UNKNOWN_TOOL"},
            )
            raise UnknownToolError(tool_name)

        model, handler = entry
        try:
            request = validate_request(model, arguments, tool_name)
        except PromptEnhancerError as e:
            logger.info(
                f"Rejected {tool_name} call: {e.message}",
                extra={"tool_name": tool_name, "error_code": e.code},
            )
            raise

        try:
            response = handler(request)
        except Exception as e:
            logger.error(
                f"Tool '{tool_name}' failed: {e}",
                extra={"tool_name": tool_name, "error_code": "EXECUTION_FAILED"},
                exc_info=True,
            )
            raise ExecutionFailedError(e, ErrorContext(tool_name=tool_name)) from e

        result = response.model_dump(mode="json")
        logger.info(
            f"Tool '{tool_name}' completed",
            extra={"tool_name": tool_name, **_log_fields(result)},
        )
        return result


def _log_fields(result: dict) -> dict:
    """Pull domain/risk out of either a flat or a metadata-nested result."""
    source = result.get("metadata", result)
    return {
        key: source[key]
        for key in ("domain", "risk_level", "determinism_hash")
        if key in source
    }
