from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggArityError, EggSpecialFormError
from egg.types.expression import Expression, Word
from egg.types.scope import Scope


def define_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Binds in the innermost scope only, shadowing any outer binding of the same name.
    """
    if len(args) != 2:
        raise EggArityError("define requires exactly 2 arguments")
    target, val_expr = args
    if not isinstance(target, Word):
        raise EggSpecialFormError("Incorrect use of define: first argument must be a word")

    value = evaluate_fn(val_expr, scope)
    scope.define(target.name, value)
    return value
