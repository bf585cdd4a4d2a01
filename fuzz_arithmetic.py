import math
import random

from pocketcalc.engine import evaluate
from pocketcalc.generator import generate_expression
from pocketcalc.reference import evaluate_reference
from pocketcalc.rpn import CalcRuntimeError


def eval_reference(code: str) -> float | str:
    try:
        value = evaluate_reference(code)
    except CalcRuntimeError as e:
        return str(e.kind)
    return value if math.isfinite(value) else "NON_FINITE_RESULT"


def eval_my(code: str) -> float | str:
    result = evaluate(code)
    if result.ok:
        assert result.text is not None
        return float(result.text)
    return str(result.kind)


if __name__ == "__main__":
    rng = random.Random()

    while True:
        code = generate_expression(rng, max_depth=4)

        res_ref = eval_reference(code)
        res_my = eval_my(code)
        if isinstance(res_ref, float) and isinstance(res_my, float):
            if math.isclose(res_my, res_ref, rel_tol=1e-9, abs_tol=1e-9):
                continue
        elif res_ref == res_my:
            continue
        print(f"{code!r}\nref: {res_ref}\nmy:  {res_my}\n\n")
