import enum
import math
from typing import Optional

from pocketcalc.utils import PrintableEnum


class ErrorKind(PrintableEnum):
    INVALID_CHARACTER = enum.auto()
    UNBALANCED_PARENTHESES = enum.auto()
    MALFORMED_EXPRESSION = enum.auto()
    DIVISION_BY_ZERO = enum.auto()
    NON_FINITE_RESULT = enum.auto()


class DisplayError(PrintableEnum):
    """What the user gets to see; the wording itself belongs to the UI"""

    DIVISION_BY_ZERO = enum.auto()
    INVALID_EXPRESSION = enum.auto()


def to_display_error(kind: ErrorKind, value: Optional[float] = None) -> DisplayError:
    if kind is ErrorKind.DIVISION_BY_ZERO:
        return DisplayError.DIVISION_BY_ZERO
    if kind is ErrorKind.NON_FINITE_RESULT and value is not None and math.isinf(value):
        # overflow is reported the same way as a literal x/0
        return DisplayError.DIVISION_BY_ZERO
    return DisplayError.INVALID_EXPRESSION
