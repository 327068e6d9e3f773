"""
Modelo de dominio: fecha de vencimiento del pago (atributo DT).

En el texto SPAYD la fecha viaja como 8 dígitos YYYYMMDD. Internamente se
guarda como `date` de Python para poder ordenar y comparar vencimientos.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.keys import DT

MIN_YEAR = 1900


@dataclass(frozen=True)
class DueDate:
    """Fecha de vencimiento. El año debe ser >= 1900."""

    value: date

    def __post_init__(self) -> None:
        if not isinstance(self.value, date):
            raise AttributeValidationError("Due date must be a date.", key=DT)
        if self.value.year < MIN_YEAR:
            raise AttributeValidationError(
                f"Unreasonable year: {self.value.year}.", key=DT
            )

    @classmethod
    def from_string(cls, value: str) -> "DueDate":
        """Parsea YYYYMMDD respetando los años bisiestos.

        Ejemplos:
            >>> DueDate.from_string("20240229").value
            datetime.date(2024, 2, 29)
        """
        if not re.fullmatch(r"[0-9]{8}", value):
            raise AttributeValidationError(
                "Date must be exactly 8 digits (YYYYMMDD).", key=DT
            )
        year, month, day = int(value[:4]), int(value[4:6]), int(value[6:])
        if year < MIN_YEAR:
            raise AttributeValidationError(f"Unreasonable year: {year}.", key=DT)
        if not 1 <= month <= 12:
            raise AttributeValidationError(
                "Month number must be between 1 and 12.", key=DT
            )
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            raise AttributeValidationError(f"Invalid day of month: {day}", key=DT)
        return cls(date(year, month, day))

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return f"{self.value.year:04d}{self.value.month:02d}{self.value.day:02d}"

    def __str__(self) -> str:
        return self.value.isoformat()
