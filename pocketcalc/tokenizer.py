import enum
import re
from dataclasses import dataclass

from pocketcalc.errors import ErrorKind
from pocketcalc.utils import PrintableEnum, excerpt


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int
    kind: ErrorKind = ErrorKind.INVALID_CHARACTER

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *excerpt(self.code, self.error_char_idx)])


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    PARENTHESIS = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


DIGITS = "0123456789"
OPERATOR_SYMBOLS = "+-*/%"
SIGNS = "+-"


def _is_valid_in_number(s: str) -> bool:
    return s in DIGITS or s == "."


def _consume_number(code: str, i: int) -> int:
    """Returns the index right after the literal starting at ``i``; at most one dot is taken"""
    has_dot = code[i] == "."
    j = i + 1
    while j < len(code) and _is_valid_in_number(code[j]):
        if code[j] == ".":
            if has_dot:
                break
            has_dot = True
        j += 1
    return j


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    # true at start and right after an operator or "("
    expecting_operand = True
    while i < len(code):
        c = code[i]
        if c.isspace():
            i += 1
        elif _is_valid_in_number(c) or (expecting_operand and c in SIGNS):
            number_end_idx = _consume_number(code, i)
            lexeme = code[i:number_end_idx]
            if lexeme in SIGNS:
                # a lone sign, e.g. the first "-" of "--2"
                tokens.append(Token(type=TokenType.OPERATOR, lexeme=lexeme))
            elif not any(ch in DIGITS for ch in lexeme):
                raise TokenizerError(
                    f"Number expected, found {lexeme!r}",
                    code=code,
                    error_char_idx=i,
                    kind=ErrorKind.MALFORMED_EXPRESSION,
                )
            else:
                tokens.append(Token(type=TokenType.NUMBER, lexeme=lexeme))
                expecting_operand = False
            i = number_end_idx
        elif c in OPERATOR_SYMBOLS:
            tokens.append(Token(type=TokenType.OPERATOR, lexeme=c))
            expecting_operand = True
            i += 1
        elif c in "()":
            tokens.append(Token(type=TokenType.PARENTHESIS, lexeme=c))
            expecting_operand = c == "("
            i += 1
        else:
            raise TokenizerError(f"Unexpected character: {c!r}", code=code, error_char_idx=i)

    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # 50 % => 50%
    result = re.sub(r"\s+%", "%", result)
    return result
