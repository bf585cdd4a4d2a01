import random

BINARY_OPERATORS = "+-*/"


def generate_number(rng: random.Random) -> str:
    literal = str(rng.randint(0, 999))
    if rng.random() < 0.3:
        literal += rng.choice(".,") + str(rng.randint(0, 99))
    if rng.random() < 0.15:
        literal = rng.choice("+-") + literal
    return literal


def generate_expression(rng: random.Random, max_depth: int = 4) -> str:
    """Random well-formed infix expression; every literal lands where an operand is expected"""
    if max_depth <= 0 or rng.random() < 0.3:
        return generate_number(rng)

    roll = rng.random()
    if roll < 0.15:
        return f"({generate_expression(rng, max_depth - 1)}%)"
    if roll < 0.3:
        return f"({generate_expression(rng, max_depth - 1)})"

    left = generate_expression(rng, max_depth - 1)
    right = generate_expression(rng, max_depth - 1)
    padding = rng.choice(["", " "])
    return f"{left}{padding}{rng.choice(BINARY_OPERATORS)}{padding}{right}"
