import pytest
from llvmlite import ir

from xlang.compiletime.errors import DuplicateSymbol
from xlang.semantics.scope import ScopeManager, VariableBinding, FunctionBinding
from xlang.semantics.types import KindName, NumberKind


def make_function(name="f"):
    module = ir.Module(name="scope_test")
    fn = ir.Function(module, ir.FunctionType(ir.VoidType(), []), name=name)
    return fn, fn.append_basic_block("entry")


def test_push_pop_balance():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    assert scopes.depth == 0

    scopes.push(entry, function=fn, is_function_scope=True)
    scopes.push(entry)
    assert scopes.depth == 2
    scopes.pop()
    scopes.pop()
    assert scopes.depth == 0
    assert scopes.current is None


def test_pop_on_empty_stack():
    with pytest.raises(RuntimeError):
        ScopeManager(ir.IRBuilder()).pop()


def test_scope_context_pops_on_error():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    with pytest.raises(ValueError):
        with scopes.scope(entry, function=fn, is_function_scope=True):
            with scopes.scope(entry):
                raise ValueError("boom")
    assert scopes.depth == 0


def test_builder_follows_frames():
    fn, entry = make_function()
    builder = ir.IRBuilder()
    scopes = ScopeManager(builder)
    with scopes.scope(entry, function=fn, is_function_scope=True):
        assert builder.block is entry
        inner = fn.append_basic_block("inner")
        with scopes.scope(inner):
            assert builder.block is inner
            tail = fn.append_basic_block("tail")
            scopes.move_to(tail)
        # The enclosing frame resumes where the nested one finished
        assert builder.block is tail
        assert scopes.current.block is tail


def test_duplicate_in_same_frame():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    with scopes.scope(entry, function=fn, is_function_scope=True):
        scopes.declare("a", VariableBinding(KindName.NUMBER))
        with pytest.raises(DuplicateSymbol) as exc:
            scopes.declare("a", VariableBinding(KindName.BOOLEAN))
        assert "Shadowing" in exc.value.hint


def test_nested_frame_may_reuse_name():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    with scopes.scope(entry, function=fn, is_function_scope=True):
        outer = VariableBinding(KindName.NUMBER)
        scopes.declare("a", outer)
        with scopes.scope(entry):
            inner = VariableBinding(KindName.BOOLEAN)
            scopes.declare("a", inner)
            assert scopes.lookup("a") is inner
        assert scopes.lookup("a") is outer


def test_lookup_walks_parents_and_misses():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    assert scopes.lookup("anything") is None
    with scopes.scope(entry, function=fn, is_function_scope=True):
        binding = FunctionBinding(fn, NumberKind, [])
        scopes.declare("f", binding)
        with scopes.scope(entry):
            with scopes.scope(entry):
                assert scopes.lookup("f") is binding
                assert scopes.lookup("g") is None
                assert scopes.visible_names() == {"f"}


def test_function_is_inherited_by_nested_frames():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    with scopes.scope(entry, function=fn, is_function_scope=True, return_kind=NumberKind):
        with scopes.scope(entry):
            assert scopes.current.function is fn
            assert scopes.current.find_function_scope().return_kind == NumberKind


def test_find_loop_scope_by_label():
    fn, entry = make_function()
    scopes = ScopeManager(ir.IRBuilder())
    with scopes.scope(entry, function=fn, is_function_scope=True):
        assert scopes.current.find_loop_scope() is None
        with scopes.scope(entry, is_loop_scope=True, loop_label="outer") as outer:
            with scopes.scope(entry, is_loop_scope=True) as inner:
                with scopes.scope(entry):
                    assert scopes.current.find_loop_scope() is inner
                    assert scopes.current.find_loop_scope("outer") is outer
                    assert scopes.current.find_loop_scope("missing") is None


def test_loop_lookup_stops_at_function_boundary():
    fn, entry = make_function()
    other, other_entry = make_function("g")
    scopes = ScopeManager(ir.IRBuilder())
    with scopes.scope(entry, function=fn, is_function_scope=True):
        with scopes.scope(entry, is_loop_scope=True):
            with scopes.scope(other_entry, function=other, is_function_scope=True):
                assert scopes.current.find_loop_scope() is None
