import math

FRACTION_DIGITS = 10
INTEGER_TOLERANCE = 1e-10


def format_result(value: float) -> str:
    """Fixed point with trailing zeros stripped; integral values come out without a dot.

    >>> format_result(0.1 + 0.2)
    '0.3'
    >>> format_result(-6.0)
    '-6'
    """
    if not math.isfinite(value):
        raise ValueError(f"Can't format non-finite value {value}")
    rounded = f"{value:.{FRACTION_DIGITS}f}".rstrip("0").rstrip(".")
    as_float = float(rounded)
    if abs(as_float - math.trunc(as_float)) < INTEGER_TOLERANCE:
        return str(math.trunc(as_float))
    return rounded
