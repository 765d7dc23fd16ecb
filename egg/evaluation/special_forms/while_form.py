from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggArityError
from egg.types.expression import Expression
from egg.types.scope import Scope


def while_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    while(cond, body)
    Egg has no "no value", so the loop always evaluates to false.
    """
    if len(args) != 2:
        raise EggArityError("Wrong number of args to while")

    cond, body = args
    while evaluate_fn(cond, scope) is not False:
        evaluate_fn(body, scope)
    return False
