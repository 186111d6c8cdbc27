"""Command-line adapter: run the prompt tools from a terminal.

Subcommands:
    enhance   canonical 8-section enhancement (options: --language,
              --force-output-format, --strictness)
    classify  domain, risk level and ambiguity
    diff      raw vs enhanced plus the list of changes
    legacy    superseded six-section heuristic enhancer

The prompt is taken from the positional argument, or from stdin when the
argument is omitted or "-". Input goes through the same validation as the
MCP tools; invalid input exits with status 2 and the reason on stderr.
"""

import argparse
import json
import logging
import sys

from prompt_enhancer.config import get_settings
from prompt_enhancer.core.domain_types import Strictness, ToolName
from prompt_enhancer.core.errors import InvalidInputError, PromptEnhancerError
from prompt_enhancer.core.legacy_enhancer import legacy_enhance_prompt
from prompt_enhancer.infrastructure.observability import setup_logging
from prompt_enhancer.schemas.prompt import PromptRequest, validate_request
from prompt_enhancer.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompt-enhancer",
        description="Rewrite prompts into hallucination-resistant structured prompts.",
    )
    parser.add_argument("--json", action="store_true", help="print the full result as JSON")
    commands = parser.add_subparsers(dest="command", required=True)

    enhance = commands.add_parser("enhance", help="enhance a prompt")
    enhance.add_argument("prompt", nargs="?", default="-")
    enhance.add_argument("--language", default=None)
    enhance.add_argument("--force-output-format", action="store_true")
    enhance.add_argument(
        "--strictness", choices=[s.value for s in Strictness], default=None,
    )

    for name, help_text in (
        ("classify", "classify a prompt"),
        ("diff", "show raw vs enhanced prompt"),
        ("legacy", "enhance with the legacy six-section heuristics"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("prompt", nargs="?", default="-")

    return parser


def read_prompt(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _tool_arguments(args: argparse.Namespace, prompt: str) -> tuple[str, dict]:
    if args.command == "enhance":
        return ToolName.ENHANCE_PROMPT.value, {
            "prompt": prompt,
            "options": {
                "language": args.language,
                "force_output_format": args.force_output_format,
                "strictness": args.strictness,
            },
        }
    if args.command == "classify":
        return ToolName.CLASSIFY_PROMPT.value, {"prompt": prompt}
    return ToolName.DIFF_PROMPT.value, {"prompt": prompt}


def _render(command: str, result: dict) -> str:
    if command == "enhance":
        return result["enhanced_prompt"]
    if command == "diff":
        changes = "\n".join(f"- {c}" for c in result["changes_made"])
        return f"{result['enhanced']}\n\nChanges made:\n{changes}"
    if command == "legacy":
        return result["enhanced"]
    return "\n".join(f"{key}: {value}" for key, value in result.items())


def run(argv: list[str] | None = None) -> int:
    """Execute one CLI command. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    prompt = read_prompt(args.prompt)

    try:
        if args.command == "legacy":
            validate_request(PromptRequest, {"prompt": prompt}, "legacy")
            enhancement = legacy_enhance_prompt(prompt)
            result = {
                "enhanced": enhancement.enhanced,
                "metadata": {
                    "original_length": enhancement.original_length,
                    "enhanced_length": enhancement.enhanced_length,
                    "sections_inferred": enhancement.sections_inferred,
                },
            }
        else:
            tool_name, arguments = _tool_arguments(args, prompt)
            result = ToolDispatch().execute(tool_name, arguments)
    except InvalidInputError as e:
        print(e.message, file=sys.stderr)
        return EXIT_INVALID_INPUT
    except PromptEnhancerError as e:
        print(e.message, file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        print(_render(args.command, result))
    return 0


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    sys.exit(run())


if __name__ == "__main__":
    main()
