"""Evaluate arithmetic expressions with the four operators and brackets."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum


class Symbol(IntEnum):
    """An algebraic operator or a bracket."""

    PLUS = 0
    MINUS = 1
    MULTIPLY = 2
    DIVIDE = 3
    LBRACKET = 4
    RBRACKET = 5


_SYMBOLS = {
    "+": Symbol.PLUS,
    "-": Symbol.MINUS,
    "*": Symbol.MULTIPLY,
    "/": Symbol.DIVIDE,
    "(": Symbol.LBRACKET,
    ")": Symbol.RBRACKET,
}


@dataclass(frozen=True)
class Token:
    """Either a literal number or an algebraic symbol."""

    is_symbol: bool
    literal: float = 0.0
    symbol: Symbol | None = None


class CalculationError(ValueError):
    """Raised when an expression cannot be tokenised or evaluated."""


def _divide(left: float, right: float) -> float:
    if right:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


_OPERATIONS: dict[Symbol, Callable[[float, float], float]] = {
    Symbol.PLUS: operator.add,
    Symbol.MINUS: operator.sub,
    Symbol.MULTIPLY: operator.mul,
    Symbol.DIVIDE: _divide,
}


def _to_rpn(tokens: Iterable[Token]) -> list[Token]:
    """Reorder infix tokens into reverse Polish notation (shunting yard)."""
    output: list[Token] = []
    stack: list[Token] = []
    for token in tokens:
        if token.is_symbol:
            while stack and token.symbol <= stack[-1].symbol:
                output.append(stack.pop())
            stack.append(token)
        else:
            output.append(token)
    output.extend(reversed(stack))
    return output


def eval_no_brackets(tokens: Iterable[Token]) -> float:
    """Evaluate tokens that hold no brackets."""
    stack: list[float] = []
    for token in _to_rpn(tokens):
        if not token.is_symbol:
            stack.append(token.literal)
            continue
        # A lone minus acts as unary negation.
        if len(stack) == 1 and token.symbol is Symbol.MINUS:
            stack[0] = -stack[0]
            continue
        if len(stack) < 2:
            raise CalculationError(
                "not enough literals on the stack to perform a binary computation"
            )
        operation = _OPERATIONS.get(token.symbol)
        if operation is None:
            raise CalculationError("unexpected symbol")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if len(stack) != 1:
        raise CalculationError(
            "unexpected number of literals left on the stack after performing all computations"
        )
    return stack[0]


def _parse_literal(text: str) -> float:
    if "_" in text or text != text.strip():
        raise CalculationError(f"invalid number: {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise CalculationError(f"invalid number: {text!r}") from exc


def tokenise(expr: str) -> list[Token]:
    """Split ``expr`` into literal and symbol tokens; spaces are ignored."""
    expr = expr.replace(" ", "")
    tokens: list[Token] = []
    start = 0
    for position, ch in enumerate(expr):
        symbol = _SYMBOLS.get(ch)
        if symbol is None:
            continue
        if start != position:
            tokens.append(Token(False, _parse_literal(expr[start:position])))
        start = position + 1
        tokens.append(Token(True, symbol=symbol))
    if start < len(expr):
        tokens.append(Token(False, _parse_literal(expr[start:])))
    return tokens


def evaluate(expr: str) -> float:
    """Evaluate an arithmetic expression; raises :class:`CalculationError` if invalid."""
    levels: list[list[Token]] = [[]]
    for token in tokenise(expr):
        if token.is_symbol and token.symbol is Symbol.LBRACKET:
            levels.append([])
        elif token.is_symbol and token.symbol is Symbol.RBRACKET:
            if len(levels) == 1:
                raise CalculationError("too many closing brackets")
            value = eval_no_brackets(levels.pop())
            levels[-1].append(Token(False, value))
        else:
            levels[-1].append(token)
    if len(levels) != 1:
        raise CalculationError("too many opening brackets")
    return eval_no_brackets(levels[0])