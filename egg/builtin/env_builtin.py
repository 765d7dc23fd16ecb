"""Built-in functions for the Egg runtime environment.

This module defines the arithmetic and comparison operators, the array
helpers and `print`, plus `make_top_scope` which packs them into the
read-only scope every program runs under.

Every built-in follows the host calling convention fn(scope, args).
"""
from __future__ import annotations

import logging
import operator
import sys
from typing import Callable, TextIO

from egg import EggValue
from egg.errors import EggArithmeticError, EggArityError, EggIndexError, EggTypeError
from egg.types.scope import Scope

logger = logging.getLogger(__name__)

Builtin = Callable[[Scope, list[EggValue]], EggValue]

OPERATORS: dict[str, Callable[[EggValue, EggValue], EggValue]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "==": operator.eq,
    "<": operator.lt,
    ">": operator.gt,
}


def _is_number(x: EggValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_operands(symbol: str, a: EggValue, b: EggValue) -> None:
    # == compares anything; + also joins two strings; the rest want numbers
    if symbol == "==":
        return
    if symbol == "+" and isinstance(a, str) and isinstance(b, str):
        return
    if not (_is_number(a) and _is_number(b)):
        raise EggTypeError(
            f"Unsupported operands for {symbol}: {type(a).__name__} and {type(b).__name__}"
        )


def _binary(symbol: str, fn: Callable[[EggValue, EggValue], EggValue]) -> Builtin:
    """Wrap a two-argument host operator as an Egg built-in."""

    def builtin(scope: Scope, args: list[EggValue]) -> EggValue:
        if len(args) != 2:
            raise EggArityError(f"{symbol} requires exactly 2 arguments, got {len(args)}")
        a, b = args
        _check_operands(symbol, a, b)
        try:
            return fn(a, b)
        except ZeroDivisionError:
            raise EggArithmeticError(f"Division by zero: {to_display(a)} / {to_display(b)}")

    builtin.__name__ = f"builtin{symbol}"
    return builtin


def array(scope: Scope, args: list[EggValue]) -> list[EggValue]:
    """Return a new array holding the arguments in order."""
    return list(args)


def length(scope: Scope, args: list[EggValue]) -> int:
    """Number of elements in an array (or characters in a string)."""
    if len(args) != 1:
        raise EggArityError("length requires exactly 1 argument")
    seq = args[0]
    if not isinstance(seq, (list, str)):
        raise EggTypeError(f"length expects an array, got {to_display(seq)}")
    return len(seq)


def element(scope: Scope, args: list[EggValue]) -> EggValue:
    """Zero-indexed lookup; any index outside the array is an error."""
    if len(args) != 2:
        raise EggArityError("element requires exactly 2 arguments")
    seq, index = args
    if not isinstance(seq, (list, str)):
        raise EggTypeError(f"element expects an array, got {to_display(seq)}")
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if isinstance(index, bool) or not isinstance(index, int):
        raise EggIndexError(f"Array index must be a whole number, got {to_display(index)}")
    if not 0 <= index < len(seq):
        raise EggIndexError(f"Index {index} out of range for array of length {len(seq)}")
    return seq[index]


def to_display(x: EggValue) -> str:
    """Convert an Egg value to its printable form."""
    if x is True:
        return "true"
    if x is False:
        return "false"
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    if isinstance(x, list):
        return "[" + ", ".join(to_display(v) for v in x) + "]"
    return str(x)


def make_print(out: TextIO | None = None) -> Builtin:
    """Build a `print` built-in writing to `out` (stdout, resolved at call time, if None)."""

    def print_builtin(scope: Scope, args: list[EggValue]) -> EggValue:
        """Write the value and a newline, then return the value unchanged."""
        if len(args) != 1:
            raise EggArityError("print requires exactly 1 argument")
        print(to_display(args[0]), file=out if out is not None else sys.stdout)
        return args[0]

    return print_builtin


def register(scope: Scope, out: TextIO | None = None) -> None:
    """Register all builtin functions and constants into the given scope."""
    scope.update({symbol: _binary(symbol, fn) for symbol, fn in OPERATORS.items()})
    scope.update(
        {
            "array": array,
            "length": length,
            "element": element,
            "print": make_print(out),
        }
    )
    scope.define("true", True)
    scope.define("false", False)


def make_top_scope(out: TextIO | None = None) -> Scope:
    """Fresh read-only root scope holding every built-in."""
    scope = Scope()
    register(scope, out)
    logger.debug("top scope built with %d bindings", len(scope.vars))
    return scope.freeze()
