import pytest

from egglisp.types.errors import (
    EggArgumentError,
    EggArityError,
    EggDuplicateDefinitionError,
    EggNameError,
    EggTypeError,
)
from egglisp.types.lambda_fn import Closure, Macro
from egglisp.types.nil import Nil


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", 1.0),
        ("(if #f 1 2)", 2.0),
        ("(if true \"yes\" \"no\")", "yes"),
        ("(if (nil? nil) 1 2)", 1.0),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_only_evaluates_one_branch(run, capsys):
    run('(if #t (print "then") (print "else"))')
    assert capsys.readouterr().out == "then\n"
    # The untaken branch may even refer to unbound names
    assert run("(if #f undefined-name 7)") == 7.0


@pytest.mark.parametrize("cond", ["0", "1", "nil", '""', "'x"])
def test_if_requires_boolean_condition(run, cond):
    with pytest.raises(EggArgumentError):
        run(f"(if {cond} 1 2)")


def test_if_arity(run):
    with pytest.raises(EggArityError):
        run("(if #t 1)")


def test_def_returns_nil_and_binds(run):
    assert run("(def x (+ 1 2))") is Nil
    assert run("x") == 3.0


def test_def_forbids_redefinition_in_same_scope(run):
    run("(def x 1)")
    with pytest.raises(EggDuplicateDefinitionError):
        run("(def x 2)")
    assert run("x") == 1.0


def test_def_inside_call_shadows_global(run):
    run("(def x 1)")
    assert run("((fn () (begin (def x 2) x)))") == 2.0
    assert run("x") == 1.0


@pytest.mark.parametrize("source", ["(def 1 2)", '(set! "x" 1)', "(set* (x) 1)", "(fn (1) 1)", "(fn x x)"])
def test_forms_reject_non_symbols(run, source):
    with pytest.raises(EggTypeError):
        run(source)


def test_duplicate_parameter_names(run):
    with pytest.raises(EggArgumentError):
        run("(fn (a a) a)")


def test_set_bang_only_current_scope(run):
    run("(def x 1)")
    assert run("(set! x 5)") == 5.0
    assert run("x") == 5.0
    # x lives in the global scope, not in the call frame
    with pytest.raises(EggNameError):
        run("((fn () (set! x 6)))")
    assert run("x") == 5.0


def test_set_star_mutates_enclosing_binding(run):
    run("(def x 1)")
    assert run("((fn () (set* x 6)))") == 6.0
    assert run("x") == 6.0
    with pytest.raises(EggNameError):
        run("(set* never-defined 1)")


def test_set_star_visible_through_shared_scope(run):
    run("""
        (def make-counter (fn ()
          ((fn (count)
             (list (fn () (set* count (+ count 1)))
                   (fn () count)))
           0)))
        (def pair (make-counter))
        (def inc (head pair))
        (def get (head (tail pair)))
    """)
    run("(inc)")
    run("(inc)")
    assert run("(get)") == 2.0


def test_set_bang_fails_in_child_but_set_star_succeeds(run):
    run("""
        (def outer (fn (v)
          (list (fn (n) (set! v n))
                (fn (n) (set* v n))
                (fn () v))))
        (def fns (outer 1))
    """)
    with pytest.raises(EggNameError):
        run("((head fns) 2)")
    run("((head (tail fns)) 3)")
    assert run("((head (tail (tail fns))))") == 3.0


def test_fn_and_macro_build_callables(run, env):
    f = run("(fn (a) a)")
    m = run("(macro (a) a)")
    assert isinstance(f, Closure) and not isinstance(f, Macro)
    assert isinstance(m, Macro)
    assert f.env is env
    assert m.env is env


@pytest.mark.parametrize("source", ["(fn (a))", "(fn (a) a a)", "(macro)", "(quote)", "(quote a b)"])
def test_form_arity(run, source):
    with pytest.raises(EggArityError):
        run(source)


def test_begin(run, capsys):
    assert run("(begin)") is Nil
    assert run('(begin (print "a") (print "b") 3)') == 3.0
    assert capsys.readouterr().out == "a\nb\n"
