import logging
import os
from dataclasses import dataclass

from pocketcalc.errors import DisplayError


@dataclass
class Config:
    div_zero_message: str = "Cannot divide by zero"
    invalid_expr_message: str = "Invalid expression"
    log_level: int = logging.WARNING

    @classmethod
    def from_env(cls) -> "Config":
        defaults = cls()

        level_name = os.getenv("POCKETCALC_LOG_LEVEL", "").strip().upper()
        if level_name:
            log_level = logging.getLevelName(level_name)
            if not isinstance(log_level, int):
                raise RuntimeError(f"Unknown POCKETCALC_LOG_LEVEL: {level_name!r}")
        else:
            log_level = defaults.log_level

        return cls(
            div_zero_message=os.getenv("POCKETCALC_DIV_ZERO_MESSAGE", defaults.div_zero_message),
            invalid_expr_message=os.getenv("POCKETCALC_INVALID_EXPR_MESSAGE", defaults.invalid_expr_message),
            log_level=log_level,
        )

    def message_for(self, error: DisplayError) -> str:
        if error is DisplayError.DIVISION_BY_ZERO:
            return self.div_zero_message
        return self.invalid_expr_message
