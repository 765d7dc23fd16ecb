from egg.types.expression import Apply, Expression, Value, Word
from egg.types.scope import Scope
from egg.types.closure import Closure

__all__ = ["Apply", "Expression", "Value", "Word", "Scope", "Closure"]
