"""
  Egg Reader: recursive-descent parser

Grammar:

    program    := expression
    expression := (string | number | word) { "(" arglist ")" }
    arglist    := [ expression { "," expression } ]

- strings -> Value(str), no escape sequences, a string ends at the next '"'
- numbers -> Value(int), a run of decimal digits ending at a word boundary
- words   -> Word(name), any run of chars except whitespace ( ) , # "
- calls   -> Apply(operator, args); calls chain, so f(1)(2) is a call of a call

Whitespace and '#' line comments may appear between any two tokens.

Every parse step takes the remaining program text and returns the parsed
expression together with the text left over after it.
"""

from __future__ import annotations

import re

from egg.errors import EggRecursionError, EggSyntaxError
from egg.types.expression import Apply, Expression, Value, Word


SKIPPABLE_RE = re.compile(r"(?:\s|#[^\n]*)*")
STRING_RE = re.compile(r'"([^"]*)"')
NUMBER_RE = re.compile(r"\d+\b", re.ASCII)
WORD_RE = re.compile(r'[^\s(),#"]+')

# How much of the offending text goes into an error message
_SNIPPET = 30


def _snippet(text: str) -> str:
    if len(text) > _SNIPPET:
        return repr(text[:_SNIPPET] + "...")
    return repr(text)


def skip_space(text: str) -> str:
    """Strip any interleaving of whitespace and line comments from the front of `text`."""
    return text[SKIPPABLE_RE.match(text).end():]


def parse_expression(program: str) -> tuple[Expression, str]:
    """Parse one expression (including trailing calls) from the head of `program`."""
    program = skip_space(program)
    if match := STRING_RE.match(program):
        expr: Expression = Value(match.group(1))
    elif match := NUMBER_RE.match(program):
        expr = Value(int(match.group(0)))
    elif match := WORD_RE.match(program):
        expr = Word(match.group(0))
    else:
        raise EggSyntaxError(f"Unexpected syntax: {_snippet(program)}", program)

    return parse_apply(expr, program[match.end():])


def parse_apply(expr: Expression, program: str) -> tuple[Expression, str]:
    """Wrap `expr` in Apply nodes for each argument list that follows it."""
    program = skip_space(program)
    while program.startswith("("):
        program = skip_space(program[1:])
        args: list[Expression] = []
        while not program.startswith(")"):
            arg, rest = parse_expression(program)
            args.append(arg)
            program = skip_space(rest)
            if program.startswith(","):
                program = skip_space(program[1:])
            elif not program.startswith(")"):
                raise EggSyntaxError("Expected ',' or ')'", program)
        expr = Apply(expr, tuple(args))
        program = skip_space(program[1:])
    return expr, program


def parse(program: str) -> Expression:
    """Parse a complete program: exactly one expression and nothing after it.

    The reader recurses once per nesting level, so text nested deeper than
    the host stack allows surfaces as EggRecursionError.
    """
    try:
        expr, rest = parse_expression(program)
    except RecursionError as e:
        raise EggRecursionError("Program nests too deeply to parse") from e
    rest = skip_space(rest)
    if rest:
        raise EggSyntaxError(f"Unexpected text after program: {_snippet(rest)}", rest)
    return expr
