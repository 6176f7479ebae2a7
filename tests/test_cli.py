"""Summary: Tests for the command-line interface.

Importance: Validates output formats and exit codes of CLI commands.
Alternatives: Exercise the CLI manually from a shell.
"""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from chatcluster.cli import run_cli

from conftest import wire_messages


def test_cli_cluster_from_file(defaults_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Cluster messages read from a file.

    Importance: Confirms the CLI prints the result wire shape.
    Alternatives: Write results to a file instead of stdout.
    """

    input_path = defaults_dir / "chat.json"
    input_path.write_text(json.dumps(wire_messages("What is this?", "hello")), encoding="utf-8")
    assert run_cli(["cluster", str(input_path)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["processed_count"] == 2
    assert [bucket["label"] for bucket in output["buckets"]] == ["Questions", "General Chat"]


def test_cli_cluster_from_stdin(
    defaults_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Summary: Cluster messages read from stdin with a rule set override.

    Importance: Supports piping chat exports into the CLI.
    Alternatives: Require an input file path.
    """

    raw = json.dumps(wire_messages("Showtime tonight!")).encode("utf-8")
    stdin = io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)
    assert run_cli(["cluster", "--rule-set", "loose"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["buckets"][0]["label"] == "Questions"


def test_cli_cluster_parse_error(defaults_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Exit with status 1 on malformed input.

    Importance: Lets scripts detect invalid payloads.
    Alternatives: Print a traceback.
    """

    input_path = defaults_dir / "chat.json"
    input_path.write_text("[{\"text\": \"hi\"}]", encoding="utf-8")
    assert run_cli(["cluster", str(input_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Parse error: " in captured.err


def test_cli_cluster_invalid_utf8(defaults_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Exit with status 1 when the input file is not valid UTF-8.

    Importance: Undecodable chat exports are parse errors, not crashes.
    Alternatives: Decode with replacement characters.
    """

    input_path = defaults_dir / "bad.json"
    input_path.write_bytes(b'[{"text": "\xff", "author": "a", "timestamp": 0}]')
    assert run_cli(["cluster", str(input_path)]) == 1
    assert "Parse error: " in capsys.readouterr().err


def test_cli_cluster_missing_file(defaults_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Exit with status 1 when the input file does not exist.

    Importance: Lets scripts detect bad paths without a traceback.
    Alternatives: Fall back to reading stdin.
    """

    assert run_cli(["cluster", str(defaults_dir / "nope.json")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nope.json" in captured.err


def test_cli_unknown_rule_set(defaults_dir: Path) -> None:
    """Summary: Reject unknown rule set names as usage errors.

    Importance: Surfaces typos before reading input.
    Alternatives: Fall back to the default rule set.
    """

    with pytest.raises(SystemExit) as excinfo:
        run_cli(["cluster", "--rule-set", "nope", "missing.json"])
    assert excinfo.value.code == 2


def test_cli_summarize(defaults_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: Print the digest for a message file.

    Importance: Confirms the summarize command output.
    Alternatives: Print bucket counts only.
    """

    input_path = defaults_dir / "chat.json"
    input_path.write_text(json.dumps(wire_messages("so broken", "hi")), encoding="utf-8")
    assert run_cli(["summarize", str(input_path)]) == 0
    assert capsys.readouterr().out.strip() == (
        "Main focus: Issues/Bugs (1 messages)\n\nAlso active: General Chat (1)"
    )


def test_cli_list_rule_sets(defaults_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Summary: List rule sets with their labels.

    Importance: Helps users pick a rule set.
    Alternatives: Document rule sets only in the README.
    """

    assert run_cli(["list-rule-sets"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "v0: Questions, Issues/Bugs, Requests, General Chat"
    assert lines[1].startswith("loose: ")
