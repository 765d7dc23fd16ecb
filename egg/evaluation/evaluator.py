"""Core evaluator for the Egg interpreter.

Dispatches on the expression kind: literals evaluate to themselves, words
are looked up through the scope chain, and call forms either go to a special
form handler (which receives its arguments unevaluated) or are applied as
ordinary function calls with arguments evaluated left to right.
"""

from __future__ import annotations

from egg import EggValue
from egg.errors import EggRecursionError, EggTypeError
from egg.evaluation.apply import apply, ensure_applicable
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.types.expression import Apply, Expression, Value, Word
from egg.types.scope import Scope


def evaluate(expr: Expression, scope: Scope) -> EggValue:
    """
    Evaluate `expr` in `scope`.

    The evaluator recurses once per nested call, so a program that nests
    deeper than the host stack allows surfaces as EggRecursionError.
    """
    try:
        return evaluate0(expr, scope)
    except RecursionError as e:
        raise EggRecursionError("Maximum evaluation depth exceeded") from e


def evaluate0(expr: Expression, scope: Scope) -> EggValue:
    """Single recursive evaluation step. Special forms call back into this."""
    match expr:
        case Value(value=value):
            return value

        case Word(name=name):
            return scope.lookup(name)

        case Apply(operator=Word(name=name), args=args) if name in SPECIAL_FORMS:
            return SPECIAL_FORMS[name](args, scope, evaluate0)

        case Apply(operator=operator, args=args):
            head = ensure_applicable(evaluate0(operator, scope))
            values = [evaluate0(arg, scope) for arg in args]
            return apply(head, values, scope, evaluate0)

    raise EggTypeError(f"Cannot evaluate {expr!r}")
