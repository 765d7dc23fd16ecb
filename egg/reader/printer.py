"""Serialize an expression tree back to Egg source text.

The output is canonical: arguments are separated by ", " and no comments or
extra whitespace are emitted, so parse(to_source(e)) == e for any tree the
reader can produce.
"""

from __future__ import annotations

from egg.errors import EggSyntaxError
from egg.types.expression import Apply, Expression, Value, Word


def to_source(expr: Expression) -> str:
    match expr:
        case Value(value=str() as text):
            if '"' in text:
                raise EggSyntaxError(f"String literal cannot contain '\"': {text!r}")
            return f'"{text}"'
        case Value(value=bool()):
            raise EggSyntaxError(f"No literal syntax for {expr.value!r}")
        case Value(value=int() as number) if number >= 0:
            return str(number)
        case Value():
            raise EggSyntaxError(f"No literal syntax for {expr.value!r}")
        case Word(name=name):
            return name
        case Apply(operator=operator, args=args):
            return f"{to_source(operator)}({', '.join(to_source(a) for a in args)})"
    raise EggSyntaxError(f"Not an expression: {expr!r}")
