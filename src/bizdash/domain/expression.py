"""Minimal arithmetic expression evaluator.

Grammar (usual precedence, left-associative)::

    expression := term (("+" | "-") term)*
    term       := factor (("*" | "/") factor)*
    factor     := ("+" | "-") factor | NUMBER | "(" expression ")"

Only numbers, the four operators and parentheses are accepted. Division
by zero follows IEEE arithmetic (infinity, or NaN for 0/0) so the caller
decides what a non-finite result means.
"""

import math
import re

from bizdash.domain.errors import ComputationError

_TOKEN = re.compile(r"\s*(?:((?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)|(.))")
OPERATORS = ("+", "-", "*", "/")


def tokenize(expression: str) -> list[str]:
    """Split an expression into number and symbol tokens.

    Raises:
        ComputationError: On any character that is not part of the grammar
    """
    tokens = []
    for number, symbol in _TOKEN.findall(expression.strip()):
        if number:
            tokens.append(number)
        elif symbol in OPERATORS or symbol in "()":
            tokens.append(symbol)
        elif symbol.strip():
            raise ComputationError(f"Unexpected character '{symbol}'")
    return tokens


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression.

    Raises:
        ComputationError: If the expression is empty or malformed
    """
    parser = _Parser(tokenize(expression))
    if not parser.tokens:
        raise ComputationError("Empty expression")
    value = parser.expression()
    if parser.peek() is not None:
        raise ComputationError(f"Unexpected '{parser.peek()}'")
    return value


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


class _Parser:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.position = 0

    def peek(self):
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> str:
        token = self.peek()
        if token is None:
            raise ComputationError("Incomplete expression")
        self.position += 1
        return token

    def expression(self) -> float:
        value = self.term()
        while self.peek() in ("+", "-"):
            if self.advance() == "+":
                value = value + self.term()
            else:
                value = value - self.term()
        return value

    def term(self) -> float:
        value = self.factor()
        while self.peek() in ("*", "/"):
            if self.advance() == "*":
                value = value * self.factor()
            else:
                value = _divide(value, self.factor())
        return value

    def factor(self) -> float:
        token = self.advance()
        if token == "+":
            return self.factor()
        if token == "-":
            return -self.factor()
        if token == "(":
            value = self.expression()
            if self.advance() != ")":
                raise ComputationError("Missing ')'")
            return value
        if token in OPERATORS or token == ")":
            raise ComputationError(f"Unexpected '{token}'")
        return float(token)
