import os

import pytest

from srcbundle.cli import build_parser, main, response_line_tokens
from srcbundle.rsp import write_rsp
from srcbundle.bundler import BundleOptions


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "A.cs").write_text("int x;\n\nint y;\n", encoding="utf-8")
    (tmp_path / "B.java").write_text("class X {}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_parser_defaults():
    args = build_parser().parse_args(["bundle", "-l", "cs"])
    assert args.sort == "name"
    assert args.output is None
    assert not args.note
    assert not args.remove_empty_lines
    assert args.author is None


def test_missing_language_exits_before_scanning(monkeypatch):
    def explode(*a, **kw):
        raise AssertionError("filesystem touched")

    monkeypatch.setattr(os, "walk", explode)
    with pytest.raises(SystemExit) as exc:
        main(["bundle", "-o", "out.txt"])
    assert exc.value.code == 2


def test_bundle_command_success(workdir, capsys):
    assert main(["bundle", "-l", "cs", "-o", "out.txt", "-n"]) == 0

    out = capsys.readouterr().out.strip()
    expected = os.path.join(os.getcwd(), "out.txt")
    assert out == f"SUCCESS: 1 files bundled into {expected}"
    text = (workdir / "out.txt").read_text(encoding="utf-8")
    assert text == "// --- Source: A.cs ---\nint x;\n\nint y;\n\n"


def test_bundle_command_reports_errors_with_zero_status(workdir, capsys):
    assert main(["bundle", "-l", "cs"]) == 0
    assert capsys.readouterr().out.strip() == \
        "ERROR: Output file path is required."


def test_bundle_command_no_matches(workdir, capsys):
    assert main(["bundle", "-l", "cobol", "-o", "out.txt"]) == 0
    assert "No matching files" in capsys.readouterr().out
    assert not (workdir / "out.txt").exists()


def test_response_line_tokens():
    assert response_line_tokens("bundle") == ["bundle"]
    assert response_line_tokens("--note") == ["--note"]
    assert response_line_tokens("--language cs, java") == \
        ["--language", "cs, java"]
    assert response_line_tokens('--output "C:\\out dir\\b.txt"') == \
        ["--output", "C:\\out dir\\b.txt"]
    assert response_line_tokens("   ") == []
    assert response_line_tokens("# saved options") == []


def test_response_file_replay(workdir, capsys):
    options = BundleOptions(language="cs, java", output="my bundle.txt",
                            sort="type", remove_empty_lines=True,
                            author="Dana Lee")
    write_rsp(options, str(workdir))

    assert main(["@options.rsp"]) == 0

    assert "SUCCESS: 2 files bundled" in capsys.readouterr().out
    text = (workdir / "my bundle.txt").read_text(encoding="utf-8")
    assert text == (
        "// Author: Dana Lee\n\n"
        "int x;\nint y;\n\n"
        "class X {}\n\n"
    )
