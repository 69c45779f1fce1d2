import json

import pytest

from xlang.cli import main
from xlang.utils.config import DEFAULT_CONFIG, find_config, load_config, merge_config

PROGRAM = """
fn main() -> num {
    return 40 + 2;
}
var x = main();
"""


def write_program(tmp_path, code=PROGRAM, name="prog.x"):
    path = tmp_path / name
    path.write_text(code)
    return str(path)


def test_run_named_function(tmp_path, capsys):
    assert main([write_program(tmp_path), "--run", "main", "--quiet"]) == 0
    assert capsys.readouterr().out.strip() == "42.0"


def test_run_entry(tmp_path, capsys):
    assert main([write_program(tmp_path), "-r"]) == 0
    out = capsys.readouterr().out
    assert "Running with JIT..." in out
    assert "Compilation process finished." in out


def test_print_ir(tmp_path, capsys):
    assert main([write_program(tmp_path), "--ir", "-q"]) == 0
    out = capsys.readouterr().out
    assert 'define double @"main"()' in out
    assert "fadd" in out


def test_object_file(tmp_path):
    out = tmp_path / "prog.o"
    assert main([write_program(tmp_path), "--obj", str(out), "-q", "-O", "2"]) == 0
    assert out.stat().st_size > 0


def test_ast_dump(tmp_path):
    dump = tmp_path / "ast.json"
    assert main([write_program(tmp_path), "--ast", str(dump), "-q"]) == 0
    data = json.loads(dump.read_text())
    assert data["type"] == "Program"
    assert data["body"][0]["id"]["name"] == "main"


def test_compile_error_exit_status(tmp_path, capsys):
    path = write_program(tmp_path, "var a = 1;\nvar b = a + missing;\n")
    assert main([path, "-q"]) == 1
    out = capsys.readouterr().out
    assert "error[UnknownSymbol]" in out
    assert "Build failed." in out


def test_parse_error_exit_status(tmp_path, capsys):
    assert main([write_program(tmp_path, "var a = ;"), "-q"]) == 1
    assert "error[ParseError]" in capsys.readouterr().out


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.x")]) == 2


def test_bad_arguments():
    with pytest.raises(SystemExit) as exc:
        main(["--no-such-flag"])
    assert exc.value.code == 2


def test_config_file_is_found_upwards(tmp_path, capsys):
    (tmp_path / "xlang.toml").write_text('[project]\nentry = "start"\n\n[build]\ndebug = true\n')
    nested = tmp_path / "src" / "deep"
    nested.mkdir(parents=True)
    path = write_program(nested, "var a = 1;")

    assert find_config(str(nested)) == str(tmp_path / "xlang.toml")
    assert main([path, "--ir", "-q"]) == 0
    out = capsys.readouterr().out
    assert '@"start"' in out
    assert "[DEBUG]" in out


def test_merge_config_ignores_unknown_keys():
    merged = merge_config(DEFAULT_CONFIG, {"build": {"opt": 3, "colour": "blue"}, "extra": {"a": 1}})
    assert merged["build"]["opt"] == 3
    assert "colour" not in merged["build"]
    assert "extra" not in merged
    assert DEFAULT_CONFIG["build"]["opt"] == 0


def test_load_config_defaults(tmp_path):
    config = load_config(str(tmp_path))
    if find_config(str(tmp_path)) is None:
        assert config == DEFAULT_CONFIG
