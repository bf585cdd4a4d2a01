import pytest

from pocketcalc.engine import evaluate
from pocketcalc.errors import DisplayError, ErrorKind


@pytest.mark.parametrize(
    "code, expected_text",
    [
        pytest.param("", "0", id="empty"),
        pytest.param("   ", "0", id="blank"),
        pytest.param("1", "1"),
        pytest.param("-1", "-1"),
        pytest.param("1+2", "3"),
        pytest.param("(1+2)", "3"),
        pytest.param("(((1)))", "1"),
        pytest.param("2+3*4", "14"),
        pytest.param("(2+3)*4", "20"),
        pytest.param("1 * 4 + 5", "9"),
        pytest.param("1 + 4 * 5", "21"),
        pytest.param("10 / 5 / 2 / 2", "0.5"),
        pytest.param("10 - 4 - 3", "3"),
        pytest.param("10 + 2 * (5 + 3 - 1)", "24"),
        pytest.param("0.1 + 0.2", "0.3"),
        pytest.param("1/3", "0.3333333333"),
        pytest.param("2/3", "0.6666666667"),
        # keypad glyphs
        pytest.param("6×7", "42"),
        pytest.param("7÷2", "3.5"),
        pytest.param("1,5+1,25", "2.75"),
        # percent
        pytest.param("50%", "0.5"),
        pytest.param("200*15%", "30"),
        pytest.param("2+3%", "2.03"),
        pytest.param("(2+3)%", "0.05"),
        pytest.param("50%*2", "1"),
        pytest.param("(50%)+1", "1.5"),
        pytest.param("50%%", "0.005"),
        # signs folded into literals
        pytest.param("3*-2", "-6"),
        pytest.param("3*+2", "6"),
        pytest.param("(-2)*(-3)", "6"),
        pytest.param("2--3", "5"),
        pytest.param("2+-3", "-1"),
        pytest.param("-.5+1", "0.5"),
        pytest.param("5.", "5"),
        pytest.param(".25*4", "1"),
        # decimals that collapse to integers
        pytest.param("0.1*3*10", "3"),
        pytest.param("2.00000000001", "2"),
        pytest.param("1" + "0" * 21, "1" + "0" * 21, id="large-integer"),
    ],
)
def test_eval_arithmetic(code: str, expected_text: str) -> None:
    result = evaluate(code)
    assert result.ok
    assert result.error is None
    assert result.text == expected_text


@pytest.mark.parametrize(
    "code, expected_error, expected_kind",
    [
        pytest.param("10/0", DisplayError.DIVISION_BY_ZERO, ErrorKind.DIVISION_BY_ZERO),
        pytest.param("10÷0,0", DisplayError.DIVISION_BY_ZERO, ErrorKind.DIVISION_BY_ZERO),
        pytest.param("1/(0.1+0.2-0.3)", DisplayError.DIVISION_BY_ZERO, ErrorKind.DIVISION_BY_ZERO),
        pytest.param("1/0.0000000000001", DisplayError.DIVISION_BY_ZERO, ErrorKind.DIVISION_BY_ZERO),
        pytest.param("9" * 400 + "*10", DisplayError.DIVISION_BY_ZERO, ErrorKind.NON_FINITE_RESULT),
        pytest.param(
            "9" * 400 + "-" + "9" * 400, DisplayError.INVALID_EXPRESSION, ErrorKind.NON_FINITE_RESULT, id="inf-inf"
        ),
        pytest.param("2*(3+", DisplayError.INVALID_EXPRESSION, ErrorKind.UNBALANCED_PARENTHESES),
        pytest.param("2)", DisplayError.INVALID_EXPRESSION, ErrorKind.UNBALANCED_PARENTHESES),
        pytest.param("2+", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("*2", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("()", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("--2", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("50%+1", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("1.2.3", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("2 3", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param(".", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("%", DisplayError.INVALID_EXPRESSION, ErrorKind.MALFORMED_EXPRESSION),
        pytest.param("2^3", DisplayError.INVALID_EXPRESSION, ErrorKind.INVALID_CHARACTER),
        pytest.param("sqrt(4)", DisplayError.INVALID_EXPRESSION, ErrorKind.INVALID_CHARACTER),
        pytest.param("x+1", DisplayError.INVALID_EXPRESSION, ErrorKind.INVALID_CHARACTER),
    ],
)
def test_eval_errors(code: str, expected_error: DisplayError, expected_kind: ErrorKind) -> None:
    result = evaluate(code)
    assert not result.ok
    assert result.text is None
    assert result.error is expected_error
    assert result.kind is expected_kind
