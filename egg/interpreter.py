from __future__ import annotations

import logging
from typing import TextIO

from egg import EggValue
from egg.builtin.env_builtin import make_top_scope
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse
from egg import runtime_context
from egg.types.scope import Scope

logger = logging.getLogger(__name__)

_default_top_scope: Scope | None = None


def _top_scope() -> Scope:
    global _default_top_scope
    if _default_top_scope is None:
        _default_top_scope = make_top_scope()
    return _default_top_scope


def run(program: str, scope: Scope | None = None) -> EggValue:
    """Parse and evaluate `program` in a fresh child of `scope`.

    `scope` is the host's root scope of primitives; it defaults to the
    built-in table. Bindings the program defines at top level live in the
    child scope and are discarded afterwards.

    Host primitives in `scope` are called as fn(scope, args): the calling
    scope and a list of already-evaluated arguments. A plain one-argument
    Python function will not work there.
    """
    root = scope if scope is not None else _top_scope()
    with runtime_context.recursion_limit():
        expr = parse(program)
        logger.debug("parsed program: %r", expr)
        result = evaluate(expr, Scope(outer=root))
    logger.debug("program evaluated to %r", result)
    return result


class Interpreter:
    """
    Holds a read-only top scope of built-ins shared by every program it runs,
    plus a session scope whose definitions persist across eval() calls.
    """

    def __init__(self, out: TextIO | None = None, recursion_limit: int | None = None):
        self.top_scope: Scope = make_top_scope(out)
        self.scope: Scope = Scope(outer=self.top_scope)
        self.recursion_limit = recursion_limit

    def _evaluate(self, program: str, scope: Scope) -> EggValue:
        with runtime_context.recursion_limit(self.recursion_limit):
            expr = parse(program)
            logger.debug("parsed program: %r", expr)
            result = evaluate(expr, scope)
        logger.debug("program evaluated to %r", result)
        return result

    def run(self, program: str) -> EggValue:
        """Evaluate a standalone program; nothing it defines outlives the call."""
        return self._evaluate(program, Scope(outer=self.top_scope))

    def eval(self, program: str) -> EggValue:
        """Evaluate in the session scope, so definitions carry over to later calls."""
        return self._evaluate(program, self.scope)
