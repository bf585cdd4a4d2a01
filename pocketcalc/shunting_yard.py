from dataclasses import dataclass

from pocketcalc.errors import ErrorKind
from pocketcalc.tokenizer import Token, TokenType
from pocketcalc.utils import excerpt


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int
    kind: ErrorKind = ErrorKind.UNBALANCED_PARENTHESES

    def __str__(self) -> str:
        lexemes = [t.lexeme for t in self.tokens]
        parsed = " ".join(lexemes[: self.error_token_idx])
        caret_idx = len(parsed) + (1 if parsed else 0)
        return "\n".join([f"Parser error: {self.errmsg}", *excerpt(" ".join(lexemes), caret_idx, radius=20)])


@dataclass(frozen=True)
class OperatorInfo:
    precedence: int
    left_assoc: bool = True
    postfix: bool = False


OPERATORS: dict[str, OperatorInfo] = {
    "+": OperatorInfo(precedence=1),
    "-": OperatorInfo(precedence=1),
    "*": OperatorInfo(precedence=2),
    "/": OperatorInfo(precedence=2),
    "%": OperatorInfo(precedence=3, postfix=True),
}


def get_op_precedence(op: str) -> int:
    return OPERATORS[op].precedence


def is_left_assoc_op(op: str) -> bool:
    return OPERATORS[op].left_assoc


def _should_pop(top: Token, incoming: str) -> bool:
    if top.type is not TokenType.OPERATOR:
        return False
    top_precedence = get_op_precedence(top.lexeme)
    incoming_precedence = get_op_precedence(incoming)
    return top_precedence > incoming_precedence or (
        top_precedence == incoming_precedence and is_left_assoc_op(incoming)
    )


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Infix to RPN; "%" goes straight to the output and never touches the operator stack"""
    output: list[Token] = []
    stack: list[Token] = []
    for i, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            output.append(token)
        elif token.type is TokenType.OPERATOR:
            if OPERATORS[token.lexeme].postfix:
                output.append(token)
                continue
            while stack and _should_pop(stack[-1], token.lexeme):
                output.append(stack.pop())
            stack.append(token)
        elif token.lexeme == "(":
            stack.append(token)
        else:
            while stack and stack[-1].type is not TokenType.PARENTHESIS:
                output.append(stack.pop())
            if not stack:
                raise ParserError("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
            stack.pop()

    while stack:
        top = stack.pop()
        if top.type is TokenType.PARENTHESIS:
            raise ParserError("Unclosed bracket", tokens=tokens, error_token_idx=len(tokens))
        output.append(top)

    return output
