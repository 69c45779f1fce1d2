from llvmlite import ir

from xlang.ast2.nodes import *
from xlang.semantics.inference import TypeInference
from xlang.semantics.scope import ScopeManager, VariableBinding, FunctionBinding
from xlang.semantics.types import KindName, NumberKind, BooleanKind, VoidKind, NoKind
from xlang.utils.helpers import parse_code


def setup_scopes():
    module = ir.Module(name="inference_test")
    fn = ir.Function(module, ir.FunctionType(ir.VoidType(), []), name="entry")
    noop = ir.Function(module, ir.FunctionType(ir.VoidType(), []), name="noop")
    scopes = ScopeManager(ir.IRBuilder())
    scopes.push(fn.append_basic_block("entry"), function=fn, is_function_scope=True)
    scopes.declare("n", VariableBinding(KindName.NUMBER))
    scopes.declare("flag", VariableBinding(KindName.BOOLEAN))
    scopes.declare("noop", FunctionBinding(noop, VoidKind, []))
    scopes.declare("check", FunctionBinding(noop, BooleanKind, [KindName.NUMBER]))
    return module, scopes


def expr(code):
    return parse_code(code + ";").body[0].expression


def test_literals():
    _, scopes = setup_scopes()
    inference = TypeInference(scopes)
    assert inference.infer(expr("1.5")) == NumberKind
    assert inference.infer(expr("true")) == BooleanKind


def test_identifiers_use_declared_kind():
    _, scopes = setup_scopes()
    inference = TypeInference(scopes)
    assert inference.infer(expr("n")) == NumberKind
    assert inference.infer(expr("flag")) == BooleanKind


def test_calls_use_return_kind():
    _, scopes = setup_scopes()
    inference = TypeInference(scopes)
    assert inference.infer(expr("check(1)")) == BooleanKind
    assert inference.infer(expr("noop()")) == VoidKind


def test_binary_and_assignment_follow_left_side():
    _, scopes = setup_scopes()
    inference = TypeInference(scopes)
    assert inference.infer(expr("flag + 1")) == BooleanKind
    assert inference.infer(expr("(n * 2) + flag")) == NumberKind
    assert inference.infer(expr("n = 3")) == NumberKind


def test_unknown_names_give_no_kind():
    _, scopes = setup_scopes()
    inference = TypeInference(scopes)
    assert inference.infer(expr("missing")) == NoKind
    assert inference.infer(expr("missing(1)")) == NumberKind  # falls through to the argument
    assert inference.infer(expr("noop")) == NoKind


def test_inference_is_idempotent_and_pure():
    module, scopes = setup_scopes()
    inference = TypeInference(scopes)
    e = expr("check(n + 1)")
    ir_before = str(module)
    names_before = scopes.visible_names()

    first = inference.infer(e)
    second = inference.infer(e)
    assert first == second == BooleanKind
    assert str(module) == ir_before
    assert scopes.visible_names() == names_before
    assert scopes.depth == 1
