import pytest

from tinylisp.errors import (
    ArgumentNumber,
    DivBy0,
    InvalidArguments,
    InvalidSyntax,
    RecursionLimitExceeded,
    ShouldBeNum,
    VoidFunction,
    VoidVariable,
)
from tinylisp.evaluation import operators
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import parse
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Int, List, Name, Operator
from tinylisp.types.function import FunctionDefinition
from tinylisp.types.operator import OperatorTag

SQUARE = "(defun square (x) (mul x x))"


def test_defun_returns_the_name(run):
    assert run(SQUARE) == Name("square")


def test_defun_stores_definition_verbatim(run, env):
    run(SQUARE)
    fn = env.functions["square"]
    assert fn.parameter_names == ("x",)
    assert fn.body == List([Operator(OperatorTag.MUL), Name("x"), Name("x")])


def test_defun_then_apply(run):
    assert run(SQUARE, "(square (add 5 9))") == Int(196)


def test_apply_prebuilt_function(env):
    env.define_function(
        FunctionDefinition("square", ("x",), parse("(mul x x)"))
    )
    assert evaluate(parse("(square (add 5 9))"), env) == Int(196)


def test_redefinition_replaces(run):
    run(SQUARE)
    run("(defun square (x) (add x x))")
    assert run("(square 5)") == Int(10)


def test_body_is_not_evaluated_at_definition(run):
    assert run("(defun later () (not_yet_defined 1))") == Name("later")
    with pytest.raises(VoidFunction):
        run("(later)")


def test_zero_argument_function(run):
    assert run("(defun three () (add 1 2))", "(three)") == Int(3)


def test_functions_calling_functions(run):
    run("(defun double (y) (mul 2 y))")
    run("(defun quad (z) (double (double z)))")
    assert run("(quad 3)") == Int(12)


def test_nested_calls_of_the_same_function(run):
    assert run(SQUARE, "(square (square 3))") == Int(81)


# -----------------------------------------------------
# Parameter binding
# -----------------------------------------------------


def test_parameters_do_not_leak(run, env):
    run(SQUARE, "(square 5)")
    assert "x" not in env.variables
    with pytest.raises(VoidVariable) as exc_info:
        run("x")
    assert exc_info.value.name == "x"


def test_parameters_removed_when_body_fails(run, env):
    run("(defun bad (x) (div x 0))")
    with pytest.raises(DivBy0):
        run("(bad 1)")
    assert env.variables == {}
    with pytest.raises(VoidVariable):
        run("x")


def test_previous_binding_is_restored(run, env):
    env.define_variable("x", Int(1))
    assert run(SQUARE, "(square 5)") == Int(25)
    assert run("x") == Int(1)


def test_arguments_are_bound_unevaluated(run, monkeypatch):
    seen = {}

    def spy(args, e, evaluate_fn):
        seen.update(e.variables)
        return Int(0)

    monkeypatch.setitem(operators.OPERATORS, OperatorTag.CAR, spy)
    run("(defun peek (a) (car a))", "(peek (add 1 2))")
    assert seen == {"a": List([Operator(OperatorTag.ADD), Int(1), Int(2)])}


def test_dynamic_scope(run):
    # `show` sees `y` because it is called while `outer` is running.
    run("(defun show () (add y 0))", "(defun outer (y) (show))")
    assert run("(outer 4)") == Int(4)
    with pytest.raises(VoidVariable):
        run("(show)")


def test_same_parameter_name_forwarded_is_self_referential(run, env):
    # g binds x to the expression `x`, which then refers to itself.
    run("(defun g (x) (add x 1))", "(defun f (x) (g x))")
    with pytest.raises(RecursionLimitExceeded):
        run("(f 5)")
    assert env.variables == {}
    assert env.depth == 0


@pytest.mark.parametrize("source,expected,got", [("(square)", 1, 0), ("(square 1 2)", 1, 2)])
def test_arity_mismatch(run, source, expected, got):
    run(SQUARE)
    with pytest.raises(ArgumentNumber) as exc_info:
        run(source)
    assert (exc_info.value.expected, exc_info.value.got) == (expected, got)


# -----------------------------------------------------
# Malformed defun
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,error",
    [
        ("(defun f (x))", ArgumentNumber),
        ("(defun f (x) (add x 1) (add x 2))", ArgumentNumber),
        ("(defun)", ArgumentNumber),
        ("(defun 1 (x) (add x 1))", InvalidSyntax),
        ("(defun add (x) (x))", InvalidSyntax),
        ("(defun f x (add x 1))", InvalidSyntax),
        ("(defun f '(x) (add x 1))", InvalidSyntax),
        ("(defun f (x) x)", InvalidSyntax),
        ("(defun f (x) 5)", InvalidSyntax),
        ("(defun f (x 1) (add x 1))", InvalidArguments),
        ('(defun f ("x") (add x 1))', InvalidArguments),
    ]
)
def test_malformed_defun(run, env, source, error):
    with pytest.raises(error):
        run(source)
    assert env.functions == {}


def test_defun_survives_later_error_in_same_line(run):
    with pytest.raises(ShouldBeNum):
        run("(add (defun sq (x) (mul x x)) 1)")
    assert run("(sq 3)") == Int(9)


# -----------------------------------------------------
# Recursion limit
# -----------------------------------------------------


def test_infinite_recursion_is_reported(run, env):
    run("(defun forever (n) (forever n))")
    with pytest.raises(RecursionLimitExceeded) as exc_info:
        run("(forever 1)")
    assert exc_info.value.limit == env.max_depth
    assert env.depth == 0
    assert env.variables == {}


def test_deep_expression_hits_limit():
    env = Environment(max_depth=10)
    source = "(add 1 " * 20 + "1" + ")" * 20
    with pytest.raises(RecursionLimitExceeded):
        evaluate(parse(source), env)
    assert env.depth == 0
    shallow = "(add 1 " * 3 + "1" + ")" * 3
    assert evaluate(parse(shallow), env) == Int(4)


def test_host_recursion_error_is_converted():
    env = Environment(max_depth=10 ** 6)
    env.define_variable("x", Name("x"))
    with pytest.raises(RecursionLimitExceeded):
        evaluate(Name("x"), env)
