import math

import pytest

from egglisp.builtin.env_builtin import register
from egglisp.reader.parser import parse
from egglisp.types.environment import Environment
from egglisp.types.errors import (
    EggArgumentError,
    EggArityError,
    EggDuplicateDefinitionError,
    EggTypeError,
)
from egglisp.types.nil import Nil
from egglisp.types.pair import Pair
from egglisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", 0.0),
        ("(+ 1 2 3)", 6.0),
        ("(+ 1.5 #t)", 2.5),
        ("(+ #t #t #f)", 2.0),
        ("(- 10 3 2)", 5.0),
        ("(- 4)", -4.0),
        ("(*)", 1.0),
        ("(* 2 3 4)", 24.0),
        ("(/ 12 3)", 4.0),
        ("(/ 4)", 0.25),
        ("(< 1 2)", True),
        ("(> 1 2)", False),
        ("(= 2 2)", True),
        ("(= #t 1)", True),
    ]
)
def test_arithmetic(run, source, expected):
    result = run(source)
    assert type(result) is type(expected)
    assert result == expected


def test_division_by_zero_follows_ieee(run):
    assert run("(/ 1 0)") == math.inf
    assert math.isnan(run("(/ 0 0)"))


@pytest.mark.parametrize("source", ['(+ 1 "2")', "(+ 'a)", "(* nil)", '(< "a" "b")', "(concat 1)", '(concat "a" #t)'])
def test_type_errors(run, source):
    with pytest.raises(EggTypeError):
        run(source)


def test_concat(run):
    assert run('(concat "egg" "" "lisp")') == "egglisp"
    assert run("(concat)") == ""


def test_list_primitives(run):
    assert run("(list)") is Nil
    assert run("(list 1 2 3)") == parse("(1 2 3)")
    assert run("(cons 1 (list 2))") == parse("(1 2)")
    assert run("(cons 1 nil)") == parse("(1)")
    assert run("(head '(a b))") == Symbol("a")
    assert run("(tail '(a b))") == parse("(b)")
    assert run("(tail '(a))") is Nil
    assert run("(nil? (list))") is True
    assert run("(nil? '(1))") is False


def test_cons_requires_list_tail(run):
    with pytest.raises(EggTypeError):
        run("(cons 1 2)")


@pytest.mark.parametrize("source", ["(head nil)", "(tail nil)", "(head (list))"])
def test_head_tail_of_nil(run, env, source):
    before = dict(env.vars)
    with pytest.raises(EggArgumentError):
        run(source)
    assert env.vars == before


@pytest.mark.parametrize("source", ["(head 1)", '(tail "abc")'])
def test_head_tail_of_non_list(run, source):
    with pytest.raises(EggTypeError):
        run(source)


@pytest.mark.parametrize("source", ["(head)", "(head '(1) '(2))", "(cons 1)", "(nil?)", "(is? 1)", "(env 1)"])
def test_fixed_arity_builtins(run, source):
    with pytest.raises(EggArityError):
        run(source)


def test_proper_lists_terminate(run):
    xs = run("(cons 1 (cons 2 (list 3 4)))")
    steps = 0
    while xs is not Nil:
        xs = xs.tail
        steps += 1
    assert steps == 4


def test_pair_constructor_rejects_improper_tail():
    with pytest.raises(EggTypeError):
        Pair(1.0, 2.0)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(is? nil (list))", True),
        ("(is? #t true)", True),
        ("(is? head head)", True),
        ("(is? '(1) '(1))", False),
        ("(is? (list) '())", True),
        ("(is? 'a 'a)", True),
        ("(is? 'a 'b)", False),
    ]
)
def test_identity(run, source, expected):
    assert run(source) is expected


def test_identity_of_shared_value(run):
    run("(def xs '(1 2))")
    assert run("(is? xs xs)") is True
    assert run("(is? (tail xs) (tail xs))") is True


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(type-of nil)", "nil"),
        ("(type-of #t)", "boolean"),
        ("(type-of 1)", "number"),
        ('(type-of "s")', "string"),
        ("(type-of 'a)", "symbol"),
        ("(type-of '(1))", "list"),
        ("(type-of ''a)", "quoted"),
        ("(type-of +)", "builtin"),
        ("(type-of if)", "specialform"),
        ("(type-of (fn () 1))", "function"),
        ("(type-of (macro () 1))", "macro"),
        ("(type-of (env))", "environment"),
    ]
)
def test_type_of(run, source, expected):
    assert run(source) == expected


def test_env_and_globals(run, env):
    assert run("(env)") is env
    assert run("(globals)") is env
    frame = run("((fn (a) (env)) 1)")
    assert isinstance(frame, Environment)
    assert frame.outer is env
    assert frame.vars == {Symbol("a"): 1.0}
    assert run("((fn () (globals)))") is env


def test_closure_exposes_shared_scope(run):
    run("(def make (fn (x) (fn () x)))")
    run("(def f (make 1))")
    scope = run("(closure f)")
    assert scope.lookup(Symbol("x")) == 1.0
    # Mutating the exposed scope is visible to the closure
    scope.assign(Symbol("x"), 5.0)
    assert run("(f)") == 5.0


def test_closure_and_body_require_user_callables(run):
    with pytest.raises(EggTypeError):
        run("(body +)")
    with pytest.raises(EggTypeError):
        run("(closure 1)")


def test_builtins_are_installed_once(env):
    with pytest.raises(EggDuplicateDefinitionError):
        register(env)
