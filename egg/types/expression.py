"""Expression tree produced by the reader.

Three node kinds, all immutable:

    - Value  -> a string or number literal
    - Word   -> an identifier reference
    - Apply  -> a call form; the operator may itself be any expression,
                so f(x)(y) is Apply(Apply(Word("f"), (x,)), (y,))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Value:
    value: str | int | float


@dataclass(frozen=True)
class Word:
    name: str


@dataclass(frozen=True)
class Apply:
    operator: Expression
    args: tuple[Expression, ...] = ()


Expression = Union[Value, Word, Apply]
