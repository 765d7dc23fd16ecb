from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggArityError, EggSpecialFormError
from egg.types.closure import Closure
from egg.types.expression import Expression, Word
from egg.types.scope import Scope


def fun_form(
    args: tuple[Expression, ...],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    # fun(p1, ..., pn, body): the last argument is always the body.
    # Nothing is evaluated until the closure is called.
    if not args:
        raise EggArityError("Functions need a body")

    *param_exprs, body = args
    params: list[str] = []
    for expr in param_exprs:
        if not isinstance(expr, Word):
            raise EggSpecialFormError("Parameter names must be words")
        if expr.name in params:
            raise EggSpecialFormError(f"Duplicate parameter name: {expr.name}")
        params.append(expr.name)

    return Closure(tuple(params), body, scope)
