import pytest

from xlang.ast2.nodes import *
from xlang.codegen.compiler import Compiler
from xlang.compiletime.errors import (
    CompilerException, DuplicateSymbol, UnknownSymbol, InvalidTypeAnnotation,
    VoidValue, UnsupportedOperator, MalformedNode, KindMismatch, ErrorHandler,
)
from xlang.utils.helpers import parse_code


def compile_source(code):
    compiler = Compiler(code, "<test>")
    compiler.compile(parse_code(code, filename="<test>"))
    return compiler


def expect_error(code, kind):
    compiler = Compiler(code, "<test>")
    with pytest.raises(kind) as exc:
        compiler.compile(parse_code(code, filename="<test>"))
    # Frames are released even when compilation stops halfway
    assert compiler.scopes.depth == 0
    return exc.value


def test_duplicate_in_same_block():
    err = expect_error("var a = 1;\nvar a = 2;", DuplicateSymbol)
    assert err.lineno == 2
    assert "Shadowing" in err.hint


def test_duplicate_function():
    expect_error("fn f() {}\nfn f() {}", DuplicateSymbol)


def test_duplicate_parameter():
    expect_error("fn f(a: num, a: num) {}", DuplicateSymbol)


def test_same_name_in_nested_block_is_allowed():
    compile_source("var a = 1; { var a = 2; }")


def test_unknown_variable_with_hint():
    err = expect_error("var count = 1;\nvar b = coutn + 1;", UnknownSymbol)
    assert "count" in err.hint
    assert (err.lineno, err.col_offset) == (2, 9)


def test_unknown_function():
    err = expect_error("foo();", UnknownSymbol)
    assert "foo" in err.message


def test_calling_a_variable():
    expect_error("var x = 1; x();", UnknownSymbol)


def test_locals_of_other_functions_are_invisible():
    expect_error("var g = 1;\nfn f() -> num { return g; }", UnknownSymbol)


def test_void_call_as_value():
    expect_error("fn f() -> void {} var x: num = f();", VoidValue)
    expect_error("fn f() {}\nvar x: num = f();", VoidValue)
    expect_error("fn f() {}\nvar x = f() + 1;", VoidValue)
    expect_error("fn f() {}\nfn g(a: num) {}\ng(f());", VoidValue)


def test_void_variable_has_no_value():
    compiler = compile_source("fn f() {}\nvar nothing = f();")
    assert "nothing" not in compiler.generate_ir()
    expect_error("fn f() {}\nvar nothing = f();\nvar y = nothing;", VoidValue)


def test_function_as_value():
    expect_error("fn f() -> num { return 1; }\nvar x = f;", VoidValue)


def test_invalid_type_annotation():
    with pytest.raises(InvalidTypeAnnotation):
        parse_code("var x: str = 1;")


def test_arithmetic_on_booleans():
    expect_error("var b = true + 1;", UnsupportedOperator)
    expect_error("var n = 1 * false;", UnsupportedOperator)


def test_unsupported_operator_node():
    program = Program([ExpressionStatement(BinaryExpression(NumberLiteral(1), NumberLiteral(2), "%"))])
    with pytest.raises(UnsupportedOperator):
        Compiler().compile(program)


def test_malformed_nodes():
    with pytest.raises(MalformedNode):
        Compiler().compile(BlockStatement([]))
    with pytest.raises(MalformedNode):
        Compiler().compile(Program([NumberLiteral(1)]))
    with pytest.raises(MalformedNode):
        Compiler().compile(Program([ExpressionStatement(BlockStatement([]))]))


@pytest.mark.parametrize("code", [
    "var x: num = true;",
    "var x = 1; x = false;",
    "fn f() -> num { return true; }",
    "fn f() -> num { return; }",
    "fn f() { return 1; }",
    "fn f(a: num) -> num { return a; }\nf();",
    "fn f(a: num) -> num { return a; }\nf(1, 2);",
    "fn f(a: bool) {}\nf(1);",
])
def test_kind_mismatch(code):
    expect_error(code, KindMismatch)


def test_every_error_is_a_compiler_exception():
    for kind in (DuplicateSymbol, UnknownSymbol, InvalidTypeAnnotation, VoidValue,
                 UnsupportedOperator, MalformedNode, KindMismatch):
        assert issubclass(kind, CompilerException)


def test_render_points_at_source():
    code = "var a = 1;\nvar b = a + c;"
    err = expect_error(code, UnknownSymbol)
    text = ErrorHandler(code, "demo.x").render(err, use_color=False)
    assert "error[UnknownSymbol]: Unknown symbol 'c'" in text
    assert "--> demo.x:2:13" in text
    assert "var b = a + c;" in text
    assert "^ here" in text


def test_report_summary(capsys):
    err = expect_error("foo();", UnknownSymbol)
    ErrorHandler("foo();", "demo.x").report(err, use_color=False)
    out = capsys.readouterr().out
    assert "error[UnknownSymbol]" in out
    assert "Build failed. 1 error(s) found." in out
