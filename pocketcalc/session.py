import logging
from typing import Optional

from pocketcalc.config import Config
from pocketcalc.engine import EvaluationResult, evaluate

logger = logging.getLogger(__name__)

EMPTY_DISPLAY = "0"


def is_number_chunk(chunk: str) -> bool:
    return chunk in ("00", ".") or (chunk != "" and all(c in "0123456789" for c in chunk))


class CalculatorSession:
    """Keypad screen state: the expression being typed and what the display shows.

    A result becomes the new expression after "=", so the user can keep
    calculating with it; typing a number instead starts over. A failed
    evaluation only changes the display and leaves the expression editable.
    """

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config if config is not None else Config()
        self.expression = ""
        self.just_evaluated = False
        self.display = EMPTY_DISPLAY

    def _refresh(self) -> None:
        self.display = self.expression if self.expression.strip() else EMPTY_DISPLAY

    def press(self, chunk: str) -> str:
        if self.just_evaluated and is_number_chunk(chunk):
            self.expression = chunk
        else:
            self.expression += chunk
        self.just_evaluated = False
        self._refresh()
        return self.display

    def clear(self) -> str:
        self.expression = ""
        self.just_evaluated = False
        self.display = EMPTY_DISPLAY
        return self.display

    def delete(self) -> str:
        if self.expression:
            self.expression = self.expression[:-1]
            self._refresh()
        return self.display

    def equals(self) -> EvaluationResult:
        result = evaluate(self.expression)
        if result.ok:
            assert result.text is not None
            self.expression = result.text
            self.display = result.text
            self.just_evaluated = True
        else:
            assert result.error is not None
            logger.debug("Keeping %r editable after %s", self.expression, result.kind)
            self.display = self.config.message_for(result.error)
            self.just_evaluated = False
        return result
