MULTIPLICATION_SIGN = "×"
DIVISION_SIGN = "÷"

_REPLACEMENTS = {
    MULTIPLICATION_SIGN: "*",
    DIVISION_SIGN: "/",
    ",": ".",
}


def normalize(raw: str) -> str:
    """Rewrites keypad glyphs and the decimal comma into what the tokenizer understands"""
    result = raw
    for glyph, replacement in _REPLACEMENTS.items():
        result = result.replace(glyph, replacement)
    return result
