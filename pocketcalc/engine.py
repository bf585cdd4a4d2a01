import logging
import math
from dataclasses import dataclass
from typing import Optional

from pocketcalc.errors import DisplayError, ErrorKind, to_display_error
from pocketcalc.formatting import format_result
from pocketcalc.normalizer import normalize
from pocketcalc.rpn import CalcRuntimeError, evaluate_postfix
from pocketcalc.shunting_yard import ParserError, to_postfix
from pocketcalc.tokenizer import TokenizerError, tokenize, untokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    text: Optional[str] = None
    error: Optional[DisplayError] = None
    kind: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "EvaluationResult":
        return cls(text=text)

    @classmethod
    def failure(cls, kind: ErrorKind, value: Optional[float] = None) -> "EvaluationResult":
        return cls(error=to_display_error(kind, value), kind=kind)


def compute(expression: str) -> float:
    """Runs normalize -> tokenize -> to_postfix -> evaluate_postfix, raising stage errors as they come"""
    normalized = normalize(expression)
    tokens = tokenize(normalized)
    logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    postfix = to_postfix(tokens)
    logger.debug("Postfix: %s", untokenize(postfix))
    return evaluate_postfix(postfix)


def evaluate(expression: str) -> EvaluationResult:
    """The single entry point for the UI; never raises on bad input"""
    if not expression.strip():
        return EvaluationResult.success("0")

    try:
        value = compute(expression)
    except (TokenizerError, ParserError, CalcRuntimeError) as e:
        logger.info("Evaluation of %r failed with %s: %s", expression, e.kind, e.errmsg)
        return EvaluationResult.failure(e.kind)

    if not math.isfinite(value):
        logger.info("Evaluation of %r produced non-finite value %s", expression, value)
        return EvaluationResult.failure(ErrorKind.NON_FINITE_RESULT, value)

    text = format_result(value)
    logger.debug("%r = %s", expression, text)
    return EvaluationResult.success(text)
