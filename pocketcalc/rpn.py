from dataclasses import dataclass
from typing import Callable

from pocketcalc.errors import ErrorKind
from pocketcalc.tokenizer import Token, TokenType

DIVISION_EPSILON = 1e-12


@dataclass
class CalcRuntimeError(Exception):
    errmsg: str
    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


BinaryOperationImpl = Callable[[float, float], float]
UnaryOperationImpl = Callable[[float], float]


def divide(a: float, b: float) -> float:
    if abs(b) < DIVISION_EPSILON:
        raise CalcRuntimeError(f"Division of {a} by zero", kind=ErrorKind.DIVISION_BY_ZERO)
    return a / b


def percent(a: float) -> float:
    return a / 100


binary_impls: dict[str, BinaryOperationImpl] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
}
unary_impls: dict[str, UnaryOperationImpl] = {
    "%": percent,
}


def _pop(stack: list[float], token: Token) -> float:
    if not stack:
        raise CalcRuntimeError(f"Missing operand for {token.lexeme!r}")
    return stack.pop()


def evaluate_postfix(tokens: list[Token]) -> float:
    stack: list[float] = []
    for token in tokens:
        if token.type is TokenType.NUMBER:
            stack.append(float(token.lexeme))
        elif token.type is TokenType.OPERATOR and token.lexeme in unary_impls:
            a = _pop(stack, token)
            stack.append(unary_impls[token.lexeme](a))
        elif token.type is TokenType.OPERATOR and token.lexeme in binary_impls:
            b = _pop(stack, token)
            a = _pop(stack, token)
            stack.append(binary_impls[token.lexeme](a, b))
        else:
            raise CalcRuntimeError(f"Unexpected token in postfix sequence: {token}")

    if len(stack) != 1:
        raise CalcRuntimeError(f"Expression must reduce to a single value, got {len(stack)}")
    return stack[0]
