"""CLI: subcommands, stdin input, JSON output and exit statuses."""

import io
import json

import pytest

from prompt_enhancer.cli import EXIT_INVALID_INPUT, run

CODE_PROMPT = "Write a function in Python to reverse a string"


def test_enhance_prints_enhanced_prompt(capsys):
    assert run(["enhance", CODE_PROMPT]) == 0
    out = capsys.readouterr().out
    assert out.startswith("### ROLE\n")
    assert f"### TASK\n{CODE_PROMPT}\n" in out


def test_enhance_json_with_options(capsys):
    assert run([
        "--json", "enhance", CODE_PROMPT,
        "--language", "German", "--strictness", "strict", "--force-output-format",
    ]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["metadata"]["risk_level"] == "high"
    assert "- Write the response in German." in result["enhanced_prompt"]


def test_classify_prints_fields(capsys):
    assert run(["classify", "fix my code"]) == 0
    assert capsys.readouterr().out.split("\n")[:3] == [
        "domain: unknown", "risk_level: high", "ambiguity_detected: True",
    ]


def test_diff_lists_changes(capsys):
    assert run(["diff", "fix my code"]) == 0
    out = capsys.readouterr().out
    assert "Changes made:\n- section additions\n- guard injections" in out


def test_prompt_read_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Why does ice float on liquid water"))
    assert run(["--json", "classify"]) == 0
    assert json.loads(capsys.readouterr().out)["domain"] == "reasoning"


def test_legacy_enhancer(capsys):
    assert run(["--json", "legacy", CODE_PROMPT]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["enhanced"].startswith("### ROLE\nYou are an expert Python developer")
    assert result["metadata"]["original_length"] == len(CODE_PROMPT)


@pytest.mark.parametrize("command", ["enhance", "classify", "diff", "legacy"])
def test_invalid_input_exits_with_status_2(command, capsys):
    assert run([command, "short"]) == EXIT_INVALID_INPUT
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Invalid input: prompt: ")


def test_unknown_strictness_is_rejected_by_parser():
    with pytest.raises(SystemExit):
        run(["enhance", CODE_PROMPT, "--strictness", "extreme"])
