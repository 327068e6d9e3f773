"""
Modelo de dominio: días de reintento (atributo X-PER).

Cuántos días debe reintentar el banco un pago que no se pudo ejecutar por
falta de fondos. Entero entre 1 y 30.
"""

import re
from dataclasses import dataclass

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.keys import X_PER

MIN_RETRY_DAYS = 1
MAX_RETRY_DAYS = 30

_RANGE_MESSAGE = f"Retry days must be a number from {MIN_RETRY_DAYS} to {MAX_RETRY_DAYS}"


@dataclass(frozen=True)
class RetryDays:
    days: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.days, bool)
            or not isinstance(self.days, int)
            or not MIN_RETRY_DAYS <= self.days <= MAX_RETRY_DAYS
        ):
            raise AttributeValidationError(_RANGE_MESSAGE, key=X_PER)

    @classmethod
    def from_string(cls, value: str) -> "RetryDays":
        if not re.fullmatch(r"[0-9]{1,2}", value):
            raise AttributeValidationError(_RANGE_MESSAGE, key=X_PER)
        return cls(int(value))

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return str(self.days)

    def __str__(self) -> str:
        return str(self.days)
