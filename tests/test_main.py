import io
import sys
from pathlib import Path

import pytest

from main import main


def test_render_file_to_stdout(tmp_path: Path, capsys):
    src = tmp_path / "note.md"
    src.write_text("# Hi", encoding="utf-8")
    assert main([str(src)]) == 0
    out = capsys.readouterr().out
    assert out == '<div class="markdown-renderer"><div class="md-h1">Hi</div></div>\n'


def test_render_stdin_compact(monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("*x*"))
    assert main(["-", "--compact"]) == 0
    out = capsys.readouterr().out
    assert out == '<div class="markdown-renderer compact"><em class="md-italic">x</em></div>\n'


def test_standalone_output_file(tmp_path: Path):
    src = tmp_path / "chapter.md"
    src.write_text("```python\nx = 1\n```", encoding="utf-8")
    target = tmp_path / "build" / "chapter"
    assert main([str(src), "-o", str(target), "--protect-code", "--highlight-code"]) == 0
    written = (tmp_path / "build" / "chapter.html").read_text(encoding="utf-8")
    assert "<title>chapter</title>" in written
    assert 'class="md-code-num"' in written


def test_escape_flag(tmp_path: Path, capsys):
    src = tmp_path / "n.md"
    src.write_text("<b>", encoding="utf-8")
    assert main([str(src), "--escape-html"]) == 0
    assert "&lt;b&gt;" in capsys.readouterr().out


def test_missing_input_returns_1(tmp_path: Path, capsys):
    assert main([str(tmp_path / "nope.md")]) == 1
    assert "mdview: error:" in capsys.readouterr().err


def test_bad_theme_from_env_returns_2(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys):
    src = tmp_path / "n.md"
    src.write_text("x", encoding="utf-8")
    monkeypatch.setenv("MDVIEW_THEME", "neon")
    assert main([str(src)]) == 2
    assert "Unknown theme" in capsys.readouterr().err
