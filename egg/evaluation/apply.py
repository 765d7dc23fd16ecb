"""Application engine for Egg.

Centralizes what it means to call a value:
- Closures bind their parameters in a fresh child of the captured scope and
  evaluate their body there.
- Non-functions are rejected by ensure_applicable.
- Host callables (built-ins and anything a host injects) are invoked as
  fn(scope, args) with the already-evaluated argument values.
"""

from __future__ import annotations

from typing import Callable

from egg import EggValue, EvaluatorFn
from egg.errors import EggTypeError
from egg.types.closure import Closure
from egg.types.scope import Scope


def ensure_applicable(head: EggValue) -> EggValue:
    """Return `head` if it can be called, else raise EggTypeError."""
    if not (isinstance(head, Closure) or callable(head)):
        raise EggTypeError(f"Applying a non-function: {head!r}")
    return head


def apply_closure(fn: Closure, args: list[EggValue], evaluate_fn: EvaluatorFn) -> EggValue:
    """Invoke a closure; raises EggArityError on an argument count mismatch."""
    local = fn.extend_scope(args)
    return evaluate_fn(fn.body, local)


def apply(
    head: Closure | Callable[[Scope, list[EggValue]], EggValue],
    args: list[EggValue],
    scope: Scope,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """Apply either a Closure or a host callable.

    - For Closure, defer to apply_closure.
    - For host callables, invoke with the calling scope and list of args.

    `head` must already have passed ensure_applicable; the evaluator checks
    it before evaluating any argument.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    return head(scope, args)
