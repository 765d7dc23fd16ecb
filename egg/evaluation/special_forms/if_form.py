from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggArityError
from egg.types.expression import Expression
from egg.types.scope import Scope


def if_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 3:
        raise EggArityError("Wrong number of args to if")

    # Only the boolean false is falsy; 0 and "" take the then-branch
    if evaluate_fn(args[0], scope) is not False:
        return evaluate_fn(args[1], scope)
    return evaluate_fn(args[2], scope)
