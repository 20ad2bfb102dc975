# -*- coding: utf-8 -*-
"""
Bot Error Types

Error codes and reply templates for command arguments.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class BotErrorCode(Enum):
    """Bot error codes"""

    INVALID_CURRENCY = "invalid_currency"     # currency is not 3 letters
    INVALID_VAT_RATE = "invalid_vat_rate"     # rate is not a number in 0-100
    UNKNOWN_COMMAND = "unknown_command"       # unrecognised /command


# Reply templates
ERROR_MESSAGES = {
    BotErrorCode.INVALID_CURRENCY: "⚠️ Невірна валюта «{value}». Приклад: /currency EUR",
    BotErrorCode.INVALID_VAT_RATE: "⚠️ Невірна ставка ПДВ «{value}». Приклад: /vatrate 20",
    BotErrorCode.UNKNOWN_COMMAND: "⚠️ Невідома команда «{value}». Список команд: /start",
}


@dataclass
class BotError(Exception):
    """Command error whose message is sent back to the user as is"""

    code: BotErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: BotErrorCode, **kwargs) -> "BotError":
        """Build an error from its code and template arguments"""
        template = ERROR_MESSAGES.get(code, "⚠️ Помилка")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)


class ClassifierError(Exception):
    """External classifier call failed (timeout, HTTP error, empty reply)."""
