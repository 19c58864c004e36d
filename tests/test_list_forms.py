import pytest

from tinylisp.errors import (
    ArgumentNumber,
    IndexOutOfRange,
    InvalidArguments,
    InvalidFunction,
    ShouldBeNum,
    VoidFunction,
    WrongTypeArgumentList,
)
from tinylisp.reader.printer import render
from tinylisp.types.boolean import Nil
from tinylisp.types.expression import Int, List, Name, Operator, QuotedList
from tinylisp.types.operator import OperatorTag

SQUARE = "(defun square (x) (mul x x))"


# -----------------------------------------------------
# list
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list 1 2 3)", QuotedList([Int(1), Int(2), Int(3)])),
        ("(list (add 1 2) 4)", QuotedList([Int(3), Int(4)])),
        ("(list)", QuotedList([])),
        ("(list '(a b))", QuotedList([List([Name("a"), Name("b")])])),
    ]
)
def test_list_evaluates_and_quotes(run, source, expected):
    assert run(source) == expected


def test_list_renders_as_quoted(run):
    assert render(run("(list 1 (mul 2 3))")) == "'(1 6)"


# -----------------------------------------------------
# car
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (list 5 6))", Int(5)),
        ("(car (list (add 2 2)))", Int(4)),
        ("(car (eval '(list 7 8)))", Int(7)),
        ("(car (list '(add 1 2)))", List([Operator(OperatorTag.ADD), Int(1), Int(2)])),
    ]
)
def test_car(run, source, expected):
    assert run(source) == expected


def test_car_of_empty_list_is_nil(run):
    assert run("(car (list))") is Nil


def test_car_of_variable_holding_quoted_list(run, env):
    env.define_variable("xs", QuotedList([Int(1), Int(2)]))
    assert run("(car xs)") == Int(1)


@pytest.mark.parametrize("source", ["(car '(1 2))", "(car 1)", '(car "abc")', "(car (add 1 2))"])
def test_car_rejects_literals_and_atoms(run, source):
    with pytest.raises(WrongTypeArgumentList):
        run(source)


@pytest.mark.parametrize("source,got", [("(car)", 0), ("(car (list 1) (list 2))", 2)])
def test_car_arity(run, source, got):
    with pytest.raises(ArgumentNumber) as exc_info:
        run(source)
    assert (exc_info.value.expected, exc_info.value.got) == (1, got)


# -----------------------------------------------------
# nth
# -----------------------------------------------------


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(nth 1 '(10 20 30))", Int(20)),
        ("(nth 0 (list 1 2))", Int(1)),
        ("(nth (add 1 1) '(a b c))", Name("c")),
        ("(nth 0 '((add 1 2)))", List([Operator(OperatorTag.ADD), Int(1), Int(2)])),
    ]
)
def test_nth(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,index,length",
    [
        ("(nth 3 '(1 2 3))", 3, 3),
        ("(nth 0 '())", 0, 0),
        ("(nth (- 0 1) '(1))", -1, 1),
    ]
)
def test_nth_out_of_range(run, source, index, length):
    with pytest.raises(IndexOutOfRange) as exc_info:
        run(source)
    assert (exc_info.value.index, exc_info.value.length) == (index, length)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(nth \"a\" '(1))", ShouldBeNum),
        ("(nth 1. '(1 2))", InvalidArguments),
        ("(nth 0 5)", WrongTypeArgumentList),
        ("(nth 1)", ArgumentNumber),
        ("(nth 1 '(1) '(2))", ArgumentNumber),
    ]
)
def test_nth_errors(run, source, error):
    with pytest.raises(error):
        run(source)


# -----------------------------------------------------
# map
# -----------------------------------------------------


def test_map_user_function(run):
    run(SQUARE)
    assert run("(map square '(1 2 3))") == List([Int(1), Int(4), Int(9)])
    assert run("(map square (list 1 (add 1 1)))") == List([Int(1), Int(4)])


def test_map_over_empty_list(run):
    run(SQUARE)
    assert run("(map square '())") == List([])


def test_map_spreads_quoted_argument_lists(run):
    assert run("(map add '('(1 2) '(3 4 5)))") == List([Int(3), Int(12)])
    assert run("(map * '('(2 3) 4))") == List([Int(6), Int(4)])


def test_map_with_two_parameter_function(run):
    run("(defun pow2 (a b) (mul a a b))")
    assert run("(map pow2 '('(2 1) '(3 2)))") == List([Int(4), Int(18)])


def test_map_result_renders_as_form(run):
    run(SQUARE)
    assert render(run("(map square '(2 3))")) == "(4 9)"


@pytest.mark.parametrize(
    "source,error",
    [
        ("(map 5 '(1))", InvalidFunction),
        ("(map (add 1) '(1))", InvalidFunction),
        ("(map '(add) '(1))", InvalidFunction),
        ("(map nope '(1))", VoidFunction),
        ("(map square 5)", WrongTypeArgumentList),
        ("(map square '(1 \"a\" 3))", ShouldBeNum),
        ("(map square '('(1 2)))", ArgumentNumber),
        ("(map square)", ArgumentNumber),
    ]
)
def test_map_errors(run, source, error):
    run(SQUARE)
    with pytest.raises(error):
        run(source)
