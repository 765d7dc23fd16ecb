from egg import EvaluatorFn
from egg import EggValue
from egg.types.expression import Expression
from egg.types.scope import Scope


def do_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    result: EggValue = False
    for e in args:
        result = evaluate_fn(e, scope)
    return result
