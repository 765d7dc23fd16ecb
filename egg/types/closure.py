"""Closure representation and argument binding for Egg functions."""

from __future__ import annotations

from io import StringIO

from egg import EggValue
from egg.errors import EggArityError
from egg.types.expression import Expression
from egg.types.scope import Scope


class Closure:
    """A function value produced by `fun`: parameter names, body, and defining scope."""

    __slots__ = ("params", "body", "scope")

    def __init__(self, params: tuple[str, ...], body: Expression, scope: Scope):
        self.params: tuple[str, ...] = params
        self.body: Expression = body
        self.scope: Scope = scope

    def __str__(self) -> str:
        from egg.reader.printer import to_source

        with StringIO() as buffer:
            buffer.write("fun(")
            for param in self.params:
                buffer.write(param)
                buffer.write(", ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"

    def extend_scope(self, args: list[EggValue]) -> Scope:
        """
        Bind the given argument values to this closure's parameters and
        return a fresh child of the captured scope for evaluating the body.
        """
        if len(args) != len(self.params):
            raise EggArityError(
                f"Wrong number of arguments: expected {len(self.params)}, got {len(args)}"
            )
        local = Scope(outer=self.scope)
        for name, value in zip(self.params, args):
            local.define(name, value)
        return local
