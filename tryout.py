import math

from pocketcalc.formatting import format_result
from pocketcalc.normalizer import normalize
from pocketcalc.rpn import CalcRuntimeError, evaluate_postfix
from pocketcalc.shunting_yard import ParserError, to_postfix
from pocketcalc.tokenizer import TokenizerError, tokenize, untokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 × 3",
    "(4 + 6)",
    "(4+6) × 3",
    "80225÷+2",
    "7/6/2000",
    "50%",
    "200 × 15%",
    "1,5 + 2,25",
    "2--3",
    "--2",
    "10 ÷ 0",
    "2*(3+",
    "2^3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(normalize(code))
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        postfix = to_postfix(tokens)
    except ParserError as e:
        print(e)
        continue
    print(f"postfix: {untokenize(postfix)}")

    try:
        value = evaluate_postfix(postfix)
    except CalcRuntimeError as e:
        print(e)
        continue
    print(f"result: {format_result(value) if math.isfinite(value) else value}")
