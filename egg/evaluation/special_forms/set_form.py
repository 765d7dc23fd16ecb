from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggArityError, EggSpecialFormError
from egg.types.expression import Expression, Word
from egg.types.scope import Scope


def set_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 2:
        raise EggArityError("set requires exactly 2 arguments: set(name, value)")
    target, val_expr = args
    if not isinstance(target, Word):
        raise EggSpecialFormError(f"Incorrect use of set: first argument must be a word, got {target!r}")

    value = evaluate_fn(val_expr, scope)
    # Mutates the nearest scope that already owns the name; never creates one
    scope.set(target.name, value)
    return value
