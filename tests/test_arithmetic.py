import pytest

from egg.builtin.env_builtin import OPERATORS, make_top_scope, to_display
from egg.errors import (
    EggArithmeticError,
    EggArityError,
    EggIndexError,
    EggReadOnlyError,
    EggTypeError,
)
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse


def ev(source, scope):
    return evaluate(parse(source), scope)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+(2, 3)", 5),
        ("-(2, 3)", -1),
        ("*(4, 5)", 20),
        ("/(10, 4)", 2.5),
        ("/(10, 2)", 5),
        ("==(1, 1)", True),
        ('==("a", "a")', True),
        ('==(1, "1")', False),
        ("<(1, 2)", True),
        ("<(2, 1)", False),
        (">(2, 1)", True),
        ('+("egg", "nog")', "eggnog"),
        ("+(*(2, 3), -(10, 4))", 12),
    ]
)
def test_operators(source, expected, scope):
    assert ev(source, scope) == expected


def test_operator_table():
    assert set(OPERATORS) == {"+", "-", "*", "/", "==", "<", ">"}


@pytest.mark.parametrize("source", ["+(1)", "+(1, 2, 3)", "<()", "==(1)"])
def test_operators_are_binary(source, scope):
    with pytest.raises(EggArityError):
        ev(source, scope)


@pytest.mark.parametrize(
    "source",
    [
        '+(1, "a")',
        '-("a", "b")',
        '<(1, "a")',
        "*(true, fun(1))",
        '*("ab", 3)',
        '<("a", "b")',
        '>("b", "a")',
        "+(array(1), array(2))",
        "-(true, 1)",
        "+(1, false)",
        "/(fun(1), 2)",
        '+("a", 1)',
    ]
)
def test_operand_types(source, scope):
    with pytest.raises(EggTypeError):
        ev(source, scope)


def test_division_by_zero(scope):
    with pytest.raises(EggArithmeticError):
        ev("/(1, 0)", scope)


def test_boolean_constants(scope):
    assert ev("true", scope) is True
    assert ev("false", scope) is False


# ------------------ arrays ------------------

def test_array_length_element(scope):
    assert ev("array(1, 2, 3)", scope) == [1, 2, 3]
    assert ev("array()", scope) == []
    assert ev("length(array(1, 2, 3))", scope) == 3
    assert ev('length("four")', scope) == 4
    assert ev("element(array(1, 2, 3), 1)", scope) == 2
    assert ev("element(array(1, 2, 3), /(4, 2))", scope) == 3


def test_sum_over_array(scope):
    program = """
    do(define(sum, fun(array,
         do(define(i, 0),
            define(sum, 0),
            while(<(i, length(array)),
              do(define(sum, +(sum, element(array, i))),
                 define(i, +(i, 1)))),
            sum))),
       sum(array(1, 2, 3)))
    """
    assert ev(program, scope) == 6


@pytest.mark.parametrize(
    "source",
    [
        "element(array(1, 2, 3), 3)",
        "element(array(), 0)",
        "element(array(1, 2, 3), -(0, 1))",
        "element(array(1, 2, 3), /(1, 2))",
        'element(array(1, 2, 3), "0")',
        "element(array(1, 2, 3), true)",
    ]
)
def test_element_out_of_range(source, scope):
    with pytest.raises(EggIndexError):
        ev(source, scope)


def test_sequence_type_errors(scope):
    with pytest.raises(EggTypeError):
        ev("length(5)", scope)
    with pytest.raises(EggTypeError):
        ev("element(5, 0)", scope)
    with pytest.raises(EggArityError):
        ev("length(array(), array())", scope)


# ------------------ print ------------------

def test_print_returns_value_and_writes(scope, out):
    assert ev("print(+(1, 2))", scope) == 3
    assert ev('print("hi")', scope) == "hi"
    assert out.getvalue() == "3\nhi\n"


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "true"),
        (False, "false"),
        (5.0, "5"),
        (2.5, "2.5"),
        ([1, [True, "x"]], "[1, [true, x]]"),
        ("text", "text"),
    ]
)
def test_to_display(value, expected):
    assert to_display(value) == expected


def test_print_closure(scope, out):
    ev("print(fun(a, +(a, 1)))", scope)
    assert out.getvalue() == "fun(a, +(a, 1))\n"


# ------------------ top scope ------------------

def test_top_scope_is_read_only(top_scope, scope):
    with pytest.raises(EggReadOnlyError):
        ev("set(true, false)", scope)
    with pytest.raises(EggReadOnlyError):
        evaluate(parse("define(x, 1)"), top_scope)
    assert ev("true", scope) is True


def test_top_scope_builtins_can_be_shadowed(top_scope, scope):
    assert ev("do(define(+, -), +(5, 3))", scope) == 2
    assert top_scope.lookup("+")(scope, [5, 3]) == 8
