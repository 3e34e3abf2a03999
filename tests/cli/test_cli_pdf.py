# topmark:header:start
#
#   project      : DocForge
#   file         : test_cli_pdf.py
#   file_relpath : tests/cli/test_cli_pdf.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `docforge pdf render` and `docforge pdf inspect`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docforge.core.exit_codes import ExitCode
from docforge.pdf import scan_document
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_render_to_file(tmp_path: Path) -> None:
    (tmp_path / "profile.txt").write_text("Members: 12\nProjects: 3 (2 active)\n", encoding="utf-8")

    result = run_cli_in(
        tmp_path, ["pdf", "render", "--title", "Group Profile", "-o", "out.pdf", "profile.txt"]
    )

    assert_SUCCESS(result)
    data = (tmp_path / "out.pdf").read_bytes()
    scan = scan_document(data)
    assert scan.is_consistent
    assert scan.size == 6
    assert rb"(Projects: 3 \(2 active\)) Tj" in data


@mark_cli
def test_render_from_stdin_to_stdout() -> None:
    result = run_cli(["pdf", "render", "-t", "Stdin"], input_text="hello\n")

    assert_SUCCESS(result)
    assert result.stdout_bytes.startswith(b"%PDF-1.4\n")
    assert result.stdout_bytes.rstrip().endswith(b"%%EOF")


@mark_cli
def test_render_requires_title() -> None:
    result = run_cli(["pdf", "render"], input_text="x\n")
    assert result.exit_code != ExitCode.SUCCESS
    assert "--title" in result.output


@mark_cli
def test_render_overflow_error_policy(tmp_path: Path) -> None:
    (tmp_path / "strict.toml").write_text(
        '[document]\noverflow = "error"\nmax_lines = 2\n', encoding="utf-8"
    )
    (tmp_path / "body.txt").write_text("a\nb\nc\n", encoding="utf-8")

    result = run_cli_in(
        tmp_path,
        ["pdf", "render", "--config", "strict.toml", "-t", "T", "-o", "x.pdf", "body.txt"],
    )

    assert_exit(result, ExitCode.DATA_ERROR)
    assert "single page holds 2" in result.output
    assert not (tmp_path / "x.pdf").exists()


@mark_cli
def test_render_missing_input(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["pdf", "render", "-t", "T", "absent.txt"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)


@mark_cli
def test_inspect_consistent_document(tmp_path: Path) -> None:
    run_cli_in(tmp_path, ["pdf", "render", "-t", "Doc", "-o", "doc.pdf"], input_text="x\n")

    result = run_cli_in(tmp_path, ["-v", "pdf", "inspect", "doc.pdf"])

    assert_SUCCESS(result)
    assert "Objects:     5" in result.output
    assert "/Size:       6" in result.output
    assert "4 0 obj @" in result.output
    assert "OK" in result.output


@mark_cli
def test_inspect_reports_inconsistency(tmp_path: Path) -> None:
    run_cli_in(tmp_path, ["pdf", "render", "-t", "Doc", "-o", "doc.pdf"], input_text="x\n")
    path = tmp_path / "doc.pdf"
    path.write_bytes(path.read_bytes().replace(b"/Size 6", b"/Size 9"))

    result = run_cli_in(tmp_path, ["pdf", "inspect", "doc.pdf"])

    assert_exit(result, ExitCode.INCONSISTENT)
    assert "trailer /Size 9" in result.output
    assert "Inconsistent" in result.output


@mark_cli
def test_inspect_rejects_non_pdf(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("not a pdf\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["pdf", "inspect", "notes.txt"])
    assert_exit(result, ExitCode.DATA_ERROR)
    assert "Not a readable DocForge PDF" in result.output


@mark_cli
def test_debug_logging_reports_render_and_inspect(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["-vv", "pdf", "render", "-t", "Doc", "-o", "doc.pdf"], input_text="x\n"
    )
    assert_SUCCESS(result)
    assert "for title 'Doc'" in result.output

    result = run_cli_in(tmp_path, ["-vv", "pdf", "inspect", "doc.pdf"])
    assert_SUCCESS(result)
    assert "Inspecting doc.pdf" in result.output
