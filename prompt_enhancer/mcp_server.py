"""MCP Server: exposes the prompt tools over the Model Context Protocol (stdio).

Invariants:
    - Tool names and descriptions come from PROMPT_TOOLS (single source)
    - Every tool delegates to ToolDispatch; no pipeline logic here
    - PromptEnhancerError surfaces to the client as a ToolError with the
      human-readable message; no partial result is ever returned
    - Nothing but protocol frames is written to stdout (logs go to stderr)

Design Decisions:
    - FastMCP over the low-level Server: decorators register tools explicitly,
      lifecycle and signal handling come with mcp.run()
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from prompt_enhancer.config import get_settings
from prompt_enhancer.core.domain_types import ToolName
from prompt_enhancer.core.errors import PromptEnhancerError
from prompt_enhancer.infrastructure.observability import setup_logging
from prompt_enhancer.services.define_prompt_tools import PROMPT_TOOLS
from prompt_enhancer.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)

_DESCRIPTIONS = {tool["name"]: tool["description"] for tool in PROMPT_TOOLS}

mcp = FastMCP(get_settings().service_name)
dispatch = ToolDispatch()


def _call(tool_name: ToolName, arguments: dict[str, Any]) -> dict:
    try:
        return dispatch.execute(tool_name.value, arguments)
    except PromptEnhancerError as e:
        raise ToolError(e.message) from e


@mcp.tool(
    name=ToolName.ENHANCE_PROMPT.value,
    description=_DESCRIPTIONS[ToolName.ENHANCE_PROMPT.value],
)
def enhance_prompt(prompt: str, options: dict[str, Any] | None = None) -> dict:
    return _call(ToolName.ENHANCE_PROMPT, {"prompt": prompt, "options": options})


@mcp.tool(
    name=ToolName.CLASSIFY_PROMPT.value,
    description=_DESCRIPTIONS[ToolName.CLASSIFY_PROMPT.value],
)
def classify_prompt(prompt: str) -> dict:
    return _call(ToolName.CLASSIFY_PROMPT, {"prompt": prompt})


@mcp.tool(
    name=ToolName.DIFF_PROMPT.value,
    description=_DESCRIPTIONS[ToolName.DIFF_PROMPT.value],
)
def diff_prompt(prompt: str) -> dict:
    return _call(ToolName.DIFF_PROMPT, {"prompt": prompt})


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.service_name} {settings.service_version} running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
