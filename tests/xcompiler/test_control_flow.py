import pytest

from xlang.codegen.compiler import Compiler
from xlang.compiletime.errors import MalformedNode, UnknownSymbol
from xlang.utils.helpers import parse_code


def compile_source(code):
    compiler = Compiler(code, "<test>")
    compiler.compile(parse_code(code, filename="<test>"))
    compiler.verify()
    return compiler


def test_if_else():
    compiler = compile_source("""
        fn pick(c: bool) -> num {
            if (c) { return 1; } else { return 2; }
        }
    """)
    assert compiler.runwithjit("pick", True) == 1.0
    assert compiler.runwithjit("pick", False) == 2.0


def test_if_without_else_falls_through():
    compiler = compile_source("""
        fn bump(x: num, c: bool) -> num {
            if (c) { x = x + 10; }
            return x;
        }
    """)
    assert compiler.runwithjit("bump", 1, True) == 11.0
    assert compiler.runwithjit("bump", 1, False) == 1.0


def test_else_if_chain():
    compiler = compile_source("""
        fn classify(a: bool, b: bool) -> num {
            if (a) { return 1; } else if (b) { return 2; } else { return 3; }
        }
    """)
    assert compiler.runwithjit("classify", True, True) == 1.0
    assert compiler.runwithjit("classify", False, True) == 2.0
    assert compiler.runwithjit("classify", False, False) == 3.0


def test_numeric_condition_is_nonzero_test():
    compiler = compile_source("""
        fn truthy(x: num) -> bool {
            if (x) { return true; }
            return false;
        }
    """)
    assert compiler.runwithjit("truthy", 0) is False
    assert compiler.runwithjit("truthy", 0.5) is True
    assert compiler.runwithjit("truthy", -3) is True


def test_block_names():
    ir_text = compile_source("""
        fn f(x: num) -> num {
            if (x) { x = 1; } else { x = 2; }
            loop (x) { x = x - 1; }
            return x;
        }
    """).generate_ir()
    for name in ("if_then.0", "if_else.0", "if_merge.0", "loop_cond.1", "loop_body.1", "loop_end.1"):
        assert name in ir_text


def test_loop_sum():
    compiler = compile_source("""
        fn sum(n: num) -> num {
            var i = 0;
            var total = 0;
            loop (n - i) {
                i = i + 1;
                total = total + i;
            }
            return total;
        }
    """)
    assert compiler.runwithjit("sum", 10) == 55.0
    assert compiler.runwithjit("sum", 0) == 0.0


def test_break_and_continue():
    compiler = compile_source("""
        fn odd_sum(n: num) -> num {
            var total = 0;
            var odd = false;
            loop (true) {
                if (n) { } else { break; }
                n = n - 1;
                if (odd) { odd = false; continue; }
                odd = true;
                total = total + n + 1;
            }
            return total;
        }
    """)
    # Adds n, n-2, n-4, ...
    assert compiler.runwithjit("odd_sum", 5) == 9.0


def test_labeled_break_leaves_outer_loop():
    compiler = compile_source("""
        fn nested() -> num {
            var count = 0;
            var i = 5;
            outer: loop (i) {
                i = i - 1;
                var j = 3;
                loop (j) {
                    j = j - 1;
                    if (j - 1) { continue; }
                    count = count + 1;
                    break outer;
                }
                count = count + 100;
            }
            return count * 10 + i;
        }
    """)
    assert compiler.runwithjit("nested") == 14.0


def test_statements_after_return_are_unreachable():
    compiler = compile_source("""
        fn f() -> num {
            return 1;
            var x = 2;
            return x;
        }
    """)
    assert "unreachable" in compiler.generate_ir()
    assert compiler.runwithjit("f") == 1.0


def test_nested_block_sees_and_updates_outer():
    compiler = compile_source("""
        fn f() -> num {
            var a = 1;
            {
                var b = 2;
                a = a + b;
            }
            return a;
        }
    """)
    assert compiler.runwithjit("f") == 3.0


def test_nested_block_locals_are_dropped():
    with pytest.raises(UnknownSymbol):
        compile_source("""
            fn f() -> num {
                { var b = 2; }
                return b;
            }
        """)


def test_nested_block_may_reuse_name():
    compiler = compile_source("""
        fn f() -> num {
            var a = 1;
            { var a = true; }
            return a;
        }
    """)
    assert compiler.runwithjit("f") == 1.0


@pytest.mark.parametrize("code", [
    "break;",
    "fn f() { continue; }",
    "loop (true) { break nowhere; }",
    "loop (true) { fn g() { break; } }",
])
def test_control_outside_loop(code):
    with pytest.raises(MalformedNode):
        compile_source(code)
