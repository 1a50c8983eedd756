"""Unit tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from reading_parser.cli import main


def test_cli_text_writes_outputs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "result.tsv"
    report = tmp_path / "report.md"

    status = main(
        [
            "--text",
            "my health and my love for this career",
            "--output",
            str(output),
            "--report",
            str(report),
        ]
    )

    captured = capsys.readouterr().out
    assert status == 0
    assert "JAN 16" in captured
    assert "Completed at event text-1." in captured
    assert output.exists()
    assert report.read_text(encoding="utf-8").startswith("# Reading Report")


def test_cli_partial_reports_missing(capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["--text", "love", "--text", "money"])

    captured = capsys.readouterr().out
    assert status == 1
    assert "Heard so far: Red=love, Economic=money" in captured
    assert "Missing: Trimester" in captured


def test_cli_requires_input() -> None:
    with pytest.raises(SystemExit):
        main([])


def test_cli_missing_transcript_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Transcript not found"):
        main(["--transcript", str(tmp_path / "absent.tsv")])


def test_cli_check_tables(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--check-tables"]) == 0
    assert "Tables OK." in capsys.readouterr().out
