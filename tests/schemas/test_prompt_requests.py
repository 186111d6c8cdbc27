"""Prompt request validation: the boundary every tool call passes through.

Invariants:
    - prompt is a strict string of 10-5000 characters (raw, unstripped length)
    - options and each of its fields may be null
    - Wrong types are rejected, never coerced
    - Rejections raise InvalidInputError with one reason per failed field
"""

import pytest
from pydantic import ValidationError

from prompt_enhancer.core.domain_types import Strictness
from prompt_enhancer.core.errors import InvalidInputError
from prompt_enhancer.schemas.prompt import (
    ClassifyPromptRequest,
    EnhancementMetadata,
    EnhancePromptRequest,
    PROMPT_MAX_LENGTH,
    PROMPT_MIN_LENGTH,
    validate_request,
)


# --- prompt -------------------------------------------------------------------

def test_accepts_minimum_and_maximum_length():
    assert validate_request(ClassifyPromptRequest, {"prompt": "x" * PROMPT_MIN_LENGTH})
    assert validate_request(ClassifyPromptRequest, {"prompt": "x" * PROMPT_MAX_LENGTH})


@pytest.mark.parametrize("length", [0, PROMPT_MIN_LENGTH - 1, PROMPT_MAX_LENGTH + 1])
def test_rejects_out_of_range_length(length):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_request(ClassifyPromptRequest, {"prompt": "x" * length})
    assert exc_info.value.reasons[0].startswith("prompt: ")


def test_length_is_measured_before_stripping():
    request = validate_request(ClassifyPromptRequest, {"prompt": "   hi     "})
    assert request.prompt == "   hi     "


def test_missing_prompt_is_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_request(ClassifyPromptRequest, {})
    assert exc_info.value.reasons == ["prompt: Field required"]


@pytest.mark.parametrize("value", [1234567890123, None, ["a list of words"]])
def test_non_string_prompt_is_rejected(value):
    with pytest.raises(InvalidInputError):
        validate_request(ClassifyPromptRequest, {"prompt": value})


@pytest.mark.parametrize("arguments", [None, "just a string", ["prompt"]])
def test_non_object_arguments_are_rejected(arguments):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_request(ClassifyPromptRequest, arguments)
    assert exc_info.value.reasons


def test_unknown_fields_are_ignored():
    request = validate_request(ClassifyPromptRequest, {"prompt": "a" * 20, "extra": 1})
    assert request.prompt == "a" * 20


# --- options ------------------------------------------------------------------

def test_options_default_to_none():
    request = validate_request(EnhancePromptRequest, {"prompt": "a" * 20})
    assert request.options is None


def test_null_option_fields_are_accepted():
    request = validate_request(EnhancePromptRequest, {
        "prompt": "a" * 20,
        "options": {"language": None, "force_output_format": None, "strictness": None},
    })
    assert request.options.strictness is None


def test_valid_options_are_parsed():
    request = validate_request(EnhancePromptRequest, {
        "prompt": "a" * 20,
        "options": {"language": "German", "force_output_format": True, "strictness": "strict"},
    })
    assert request.options.language == "German"
    assert request.options.force_output_format is True
    assert request.options.strictness is Strictness.STRICT


@pytest.mark.parametrize("options,field", [
    ({"strictness": "extreme"}, "options.strictness"),
    ({"force_output_format": "true"}, "options.force_output_format"),
    ({"language": 42}, "options.language"),
])
def test_invalid_option_values_are_rejected(options, field):
    with pytest.raises(InvalidInputError) as exc_info:
        validate_request(EnhancePromptRequest, {"prompt": "a" * 20, "options": options})
    assert exc_info.value.reasons[0].startswith(f"{field}: ")


def test_options_must_be_an_object():
    with pytest.raises(InvalidInputError):
        validate_request(EnhancePromptRequest, {"prompt": "a" * 20, "options": "strict"})


# --- error envelope -----------------------------------------------------------

def test_error_carries_tool_name_and_reasons():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_request(EnhancePromptRequest, {"prompt": "short"}, "enhance_prompt")
    error = exc_info.value
    assert error.code == "INVALID_INPUT"
    assert error.http_status == 400
    assert error.message.startswith("Invalid input: prompt: ")
    body = error.to_response()["error"]
    assert body["context"]["tool_name"] == "enhance_prompt"
    assert body["reasons"] == error.reasons


def test_every_failed_field_is_reported():
    with pytest.raises(InvalidInputError) as exc_info:
        validate_request(EnhancePromptRequest, {
            "prompt": "short", "options": {"strictness": "extreme"},
        })
    assert len(exc_info.value.reasons) == 2


# --- metadata -----------------------------------------------------------------

def test_metadata_requires_lowercase_hex_hash():
    with pytest.raises(ValidationError):
        EnhancementMetadata(domain="code", risk_level="low", determinism_hash="ABC")


# --- length unit --------------------------------------------------------------

def test_length_counts_code_points():
    # each emoji is one code point (two UTF-16 units)
    with pytest.raises(InvalidInputError):
        validate_request(ClassifyPromptRequest, {"prompt": "😀" * (PROMPT_MIN_LENGTH - 1)})
    assert validate_request(ClassifyPromptRequest, {"prompt": "😀" * PROMPT_MIN_LENGTH})
    assert validate_request(ClassifyPromptRequest, {"prompt": "😀" * PROMPT_MAX_LENGTH})
