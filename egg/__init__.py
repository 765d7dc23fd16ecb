# Core type aliases for Egg's data model.
# Runtime values are plain Python objects: int/float, str, bool, list (arrays),
# Closure instances and host callables. Program text is parsed into the
# Value/Word/Apply expression tree defined in egg.types.expression.
#
# Naming guidance:
# - Expression: syntax produced by the reader and consumed by the evaluator.
# - EggValue:   anything an evaluation can return or a scope can bind.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type handed to special forms and the application engine
EvaluatorFn = Callable[..., EggValue]

from egg.types.expression import Apply, Expression, Value, Word  # noqa: E402
from egg.types.scope import Scope  # noqa: E402
from egg.reader.parser import parse  # noqa: E402
from egg.evaluation.evaluator import evaluate  # noqa: E402
from egg.interpreter import Interpreter, run  # noqa: E402

__all__ = [
    "EggValue",
    "EvaluatorFn",
    "Expression",
    "Value",
    "Word",
    "Apply",
    "Scope",
    "parse",
    "evaluate",
    "run",
    "Interpreter",
]
