import subprocess

import pytest

import compiler
from triforce.codegen import HEADER

SOURCE = '/_\\ demo\nhero :: [String] -> "Link"\nwrite("Hello" -> hero)\n'


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "demo.tri"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def test_compile_source():
    assert compiler.compile_source('x :: [String] -> "hi"') == HEADER + '\n\nlet x = "hi";\n'


def test_main_writes_output(source_file, tmp_path, capsys):
    out = tmp_path / "demo.js"
    assert compiler.main([str(source_file), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == compiler.compile_source(SOURCE)
    captured = capsys.readouterr()
    assert "Compilation finished successfully!" in captured.out


def test_verbose_dumps_tokens(source_file, tmp_path, capsys):
    out = tmp_path / "demo.js"
    assert compiler.main([str(source_file), "-o", str(out), "-v"]) == 0
    captured = capsys.readouterr()
    assert "Token: TYPE_DECL (::) at line 2" in captured.out


def test_scan_error_exits_nonzero(tmp_path, capsys):
    src = tmp_path / "bad.tri"
    src.write_text('write("oops', encoding="utf-8")
    out = tmp_path / "bad.js"
    assert compiler.main([str(src), "-o", str(out)]) == 1
    assert "Unterminated string at line 1" in capsys.readouterr().err
    assert not out.exists()


def test_emit_error_exits_nonzero(tmp_path, capsys):
    src = tmp_path / "expr.tri"
    src.write_text('x "hello"', encoding="utf-8")
    assert compiler.main([str(src), "-o", str(tmp_path / "expr.js")]) == 1
    assert "Unsupported node type: ExpressionStatement" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert compiler.main([str(tmp_path / "nope.tri"), "-o", str(tmp_path / "x.js")]) == 1
    assert "Compilation error" in capsys.readouterr().err


def test_run_without_node(source_file, tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(compiler.shutil, "which", lambda name: None)
    assert compiler.main([str(source_file), "-o", str(tmp_path / "demo.js"), "--run"]) == 1
    assert "node" in capsys.readouterr().err


def test_run_invokes_node(source_file, tmp_path, monkeypatch):
    calls = []

    def fake_run(cmd):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0)

    out = tmp_path / "demo.js"
    monkeypatch.setattr(compiler.shutil, "which", lambda name: "/usr/bin/node")
    monkeypatch.setattr(compiler.subprocess, "run", fake_run)
    assert compiler.main([str(source_file), "-o", str(out), "--run"]) == 0
    assert calls == [["/usr/bin/node", str(out)]]


def test_undecodable_input_file(tmp_path, capsys):
    src = tmp_path / "latin.tri"
    src.write_bytes(b'write("\xff\xfe")\n')
    out = tmp_path / "latin.js"
    assert compiler.main([str(src), "-o", str(out)]) == 1
    assert "Compilation error" in capsys.readouterr().err
    assert not out.exists()


def test_help_says_running_is_opt_in(capsys):
    with pytest.raises(SystemExit):
        compiler.main(["--help"])
    assert "off by default" in " ".join(capsys.readouterr().out.split())
