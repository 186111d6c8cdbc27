"""Output Format Derivation: picks one output-format directive, or none.

Invariants:
    - Returns None unless forced, the domain is CONVERSION, or a format cue is present
    - FORMAT_DIRECTIVES order is the priority; only the first matching cue is used
    - Cue lookup is a plain substring test on the lower-cased prompt
    - Deterministic and total

Design Decisions:
    - The trigger uses word boundaries, the directive lookup uses substrings.
      "lists" therefore does not trigger but selects the bullet directive once
      something else (force, conversion, another cue) has triggered.
"""

from prompt_enhancer.core.classification_rules import FORMAT_CUE_PATTERN
from prompt_enhancer.core.domain_types import Domain

# (cues, directive) in priority order
FORMAT_DIRECTIVES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("json",), "Return a valid JSON object as the entire response."),
    (("yaml",), "Return a valid YAML document as the entire response."),
    (("xml",), "Return a valid XML document as the entire response."),
    (("csv",), "Return a valid CSV document as the entire response."),
    (("markdown",), "Respond in Markdown."),
    (("table",), "Use a table for structured comparisons or structured data."),
    (("timeline",), "Include a timeline as part of the response."),
    (("step-by-step", "steps"), "Provide the response as step-by-step instructions."),
    (("outline",), "Provide the response as a clear outline with headings and subpoints."),
    (("bullet", "list"), "Use bullet points or numbered lists where appropriate."),
)

CONVERSION_DIRECTIVE = "Provide the transformed output requested in TASK."

GENERIC_DIRECTIVE = (
    "Provide the response in the format explicitly requested in TASK. "
    "If no explicit format is requested, use a clear structure."
)


def is_format_requested(prompt: str) -> bool:
    return FORMAT_CUE_PATTERN.search(prompt) is not None


def derive_output_format(
    prompt: str, domain: Domain, force_output_format: bool = False,
) -> str | None:
    """Return the format directive for prompt, or None for the caller's default."""
    is_conversion = Domain(domain) is Domain.CONVERSION
    if not (force_output_format or is_conversion or is_format_requested(prompt)):
        return None

    lower = prompt.lower()
    for cues, directive in FORMAT_DIRECTIVES:
        if any(cue in lower for cue in cues):
            return directive

    if is_conversion:
        return CONVERSION_DIRECTIVE
    return GENERIC_DIRECTIVE
