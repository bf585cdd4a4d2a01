"""Recursive-descent evaluator over the same tokens as the shunting-yard pipeline.

Builds a tree first and then walks it. Only the tokenizer and the arithmetic
tables are shared with the stack-based pipeline, which this cross-checks.

    expr    := term (("+" | "-") term)*
    term    := postfix (("*" | "/") postfix)*
    postfix := primary "%"*
    primary := NUMBER | "(" expr ")"
"""
from dataclasses import dataclass
from typing import Callable

from pocketcalc.errors import ErrorKind
from pocketcalc.normalizer import normalize
from pocketcalc.rpn import CalcRuntimeError, binary_impls, unary_impls
from pocketcalc.shunting_yard import ParserError
from pocketcalc.tokenizer import Token, TokenType, tokenize
from pocketcalc.utils import PrintableEnum


class BinaryOperator(PrintableEnum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


class UnaryOperator(PrintableEnum):
    PERCENT = "%"


@dataclass
class UnaryOperation:
    operator: UnaryOperator
    operand: "Expression"


Expression = float | BinaryOperation | UnaryOperation

ADDITIVE = {"+": BinaryOperator.ADD, "-": BinaryOperator.SUB}
MULTIPLICATIVE = {"*": BinaryOperator.MUL, "/": BinaryOperator.DIV}


def parse(tokens: list[Token]) -> Expression:
    if not tokens:
        raise ParserError("Empty expression", tokens=tokens, error_token_idx=0, kind=ErrorKind.MALFORMED_EXPRESSION)
    expr, i = _consume_expression(tokens, 0)
    if i < len(tokens):
        kind = ErrorKind.UNBALANCED_PARENTHESES if tokens[i].lexeme == ")" else ErrorKind.MALFORMED_EXPRESSION
        raise ParserError(f"Unexpected {tokens[i].lexeme!r}", tokens=tokens, error_token_idx=i, kind=kind)
    return expr


def _is_operator(tokens: list[Token], i: int, table: dict[str, BinaryOperator]) -> bool:
    return i < len(tokens) and tokens[i].type is TokenType.OPERATOR and tokens[i].lexeme in table


ConsumeFn = Callable[[list[Token], int], tuple[Expression, int]]


def _consume_binary(
    tokens: list[Token], i: int, table: dict[str, BinaryOperator], consume_operand: ConsumeFn
) -> tuple[Expression, int]:
    left, i = consume_operand(tokens, i)
    while _is_operator(tokens, i, table):
        operator = table[tokens[i].lexeme]
        right, i = consume_operand(tokens, i + 1)
        left = BinaryOperation(operator=operator, left=left, right=right)
    return left, i


def _consume_expression(tokens: list[Token], i: int) -> tuple[Expression, int]:
    return _consume_binary(tokens, i, ADDITIVE, _consume_term)


def _consume_term(tokens: list[Token], i: int) -> tuple[Expression, int]:
    return _consume_binary(tokens, i, MULTIPLICATIVE, _consume_postfix)


def _consume_postfix(tokens: list[Token], i: int) -> tuple[Expression, int]:
    operand, i = _consume_primary(tokens, i)
    while i < len(tokens) and tokens[i].type is TokenType.OPERATOR and tokens[i].lexeme == "%":
        operand = UnaryOperation(operator=UnaryOperator.PERCENT, operand=operand)
        i += 1
    return operand, i


def _consume_primary(tokens: list[Token], i: int) -> tuple[Expression, int]:
    if i >= len(tokens):
        raise ParserError(
            "Operand expected", tokens=tokens, error_token_idx=i, kind=ErrorKind.MALFORMED_EXPRESSION
        )
    first = tokens[i]
    if first.type is TokenType.NUMBER:
        return float(first.lexeme), i + 1
    elif first.lexeme == "(":
        expr, j = _consume_expression(tokens, i + 1)
        if j >= len(tokens) or tokens[j].lexeme != ")":
            raise ParserError("Unclosed bracket", tokens=tokens, error_token_idx=j)
        return expr, j + 1
    else:
        raise ParserError(
            f"Operand expected, found {first.lexeme!r}",
            tokens=tokens,
            error_token_idx=i,
            kind=ErrorKind.MALFORMED_EXPRESSION,
        )


def evaluate_expression(expression: Expression) -> float:
    if isinstance(expression, float):
        return expression
    elif isinstance(expression, BinaryOperation):
        left_res = evaluate_expression(expression.left)
        right_res = evaluate_expression(expression.right)
        return binary_impls[expression.operator.value](left_res, right_res)
    elif isinstance(expression, UnaryOperation):
        return unary_impls[expression.operator.value](evaluate_expression(expression.operand))
    else:
        raise CalcRuntimeError(f"Unexpected expression type: {expression}")


def evaluate_reference(code: str) -> float:
    return evaluate_expression(parse(tokenize(normalize(code))))
