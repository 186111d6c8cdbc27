"""Prompt Tool Routes: HTTP access to enhance, classify and diff.

Invariants:
    - Request bodies validated by the same Pydantic models as the MCP path
    - Routes never contain pipeline logic (delegate to services)
    - POST /tools/{tool_name} accepts raw tool arguments and goes through
      ToolDispatch, exactly like an MCP tool call
"""

from typing import Any

from fastapi import APIRouter, Body

from prompt_enhancer.schemas.prompt import (
    ClassifyPromptRequest,
    ClassifyPromptResponse,
    DiffPromptRequest,
    DiffPromptResponse,
    EnhancePromptRequest,
    EnhancePromptResponse,
)
from prompt_enhancer.services.classify_prompt import classify_prompt
from prompt_enhancer.services.define_prompt_tools import PROMPT_TOOLS
from prompt_enhancer.services.diff_prompt import diff_prompt
from prompt_enhancer.services.enhance_prompt import enhance_prompt
from prompt_enhancer.services.tool_dispatch import ToolDispatch

router = APIRouter(prefix="/api/v1", tags=["prompts"])
dispatch = ToolDispatch()


@router.post("/prompts/enhance", response_model=EnhancePromptResponse)
async def enhance(body: EnhancePromptRequest):
    return enhance_prompt(body)


@router.post("/prompts/classify", response_model=ClassifyPromptResponse)
async def classify(body: ClassifyPromptRequest):
    return classify_prompt(body)


@router.post("/prompts/diff", response_model=DiffPromptResponse)
async def diff(body: DiffPromptRequest):
    return diff_prompt(body)


@router.get("/tools")
async def list_tools():
    """Tool definitions in the same shape the MCP server advertises."""
    return {"tools": PROMPT_TOOLS}


@router.post("/tools/{tool_name}")
async def call_tool(tool_name: str, arguments: Any = Body(None)):
    return dispatch.execute(tool_name, arguments)
