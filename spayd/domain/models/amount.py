"""
Modelos de dominio: importe y moneda del pago.

El importe se guarda como texto normalizado ("450.00") y no como número,
porque lo que viaja en el código QR es exactamente ese texto. Para hacer
cuentas se expone como `Decimal` (nunca float: Decimal("0.1") + Decimal("0.2")
es exactamente Decimal("0.3")).

Normalización elegida:
- Siempre 2 decimales: "1" → "1.00", "0.5" → "0.50", "1." → "1.00".
- Sin ceros redundantes a la izquierda: "000.1" → "0.10", ".5" → "0.50".
- La longitud máxima de 10 caracteres se comprueba DESPUÉS de normalizar,
  así que normalizar un importe ya normalizado siempre da el mismo valor.
"""

import re
from dataclasses import dataclass
from decimal import Decimal

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.keys import AM, CC
from spayd.domain.shared.percent_codec import percent_encode

MAX_AMOUNT_LENGTH = 10


@dataclass(frozen=True)
class Amount:
    """Importe del pago (atributo AM)."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _normalize_amount(self.value))

    @classmethod
    def from_string(cls, value: str) -> "Amount":
        """Parsea y normaliza un importe.

        Ejemplos:
            >>> Amount.from_string("450").value
            '450.00'
            >>> Amount.from_string(".5").value
            '0.50'
        """
        return cls(value)

    @classmethod
    def from_decimal(cls, amount: Decimal) -> "Amount":
        """Crea un importe desde un Decimal, redondeado a centavos.

        Ejemplos:
            >>> Amount.from_decimal(Decimal("1234.5")).value
            '1234.50'
        """
        if amount < 0:
            raise AttributeValidationError("Amount must not be negative.", key=AM)
        return cls(f"{amount.quantize(Decimal('0.01')):f}")

    @property
    def decimal(self) -> Decimal:
        return Decimal(self.value)

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return percent_encode(self.value, optimize_for_qr)

    def __str__(self) -> str:
        return self.value


def _normalize_amount(value: str) -> str:
    if not isinstance(value, str) or not value or value == ".":
        raise AttributeValidationError("Amount must have at least 1 digit.", key=AM)
    if not re.fullmatch(r"[0-9.]+", value):
        raise AttributeValidationError(
            "Amount must contain only digits or a decimal point", key=AM
        )

    integer_part, _, decimal_part = value.partition(".")
    if "." in decimal_part:
        raise AttributeValidationError(
            "Amount must contain at most one decimal point", key=AM
        )
    if len(decimal_part) > 2:
        raise AttributeValidationError(
            "Amount must be a decimal number with at most 2 decimal places.", key=AM
        )

    normalized = f"{integer_part.lstrip('0') or '0'}.{decimal_part.ljust(2, '0')}"
    if len(normalized) > MAX_AMOUNT_LENGTH:
        raise AttributeValidationError(
            f"Amount must not exceed {MAX_AMOUNT_LENGTH} characters "
            f"after normalization (was '{normalized}').",
            key=AM,
        )
    return normalized


@dataclass(frozen=True)
class Currency:
    """Código de moneda ISO 4217 (atributo CC). Se guarda en mayúsculas."""

    code: str

    def __post_init__(self) -> None:
        if not (isinstance(self.code, str) and re.fullmatch(r"[A-Za-z]{3}", self.code)):
            raise AttributeValidationError(
                "Currency code must be exactly 3 letters.", key=CC
            )
        object.__setattr__(self, "code", self.code.upper())

    @classmethod
    def from_string(cls, value: str) -> "Currency":
        return cls(value.strip())

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return percent_encode(self.code, optimize_for_qr)

    def __str__(self) -> str:
        return self.code
