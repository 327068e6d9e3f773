"""
Modelos de dominio: atributos de texto con longitud acotada.

Todos comparten el mismo contrato: un `value` de texto al que se le quitan
los espacios de los extremos (el codificador también los quita, así que
guardarlos rompería la ida y vuelta decode(encode(x)) == x) y cuya longitud
debe estar entre MIN_LENGTH y MAX_LENGTH. Los símbolos de pago además solo
admiten dígitos ASCII.

    _BoundedText
    ├── Message               MSG      0..60
    ├── Recipient             RN       1..35
    ├── NotificationAddress   NTA      1..320
    ├── CzPaymentId           X-ID     1..20
    ├── Url                   X-URL    1..140
    ├── PaymentSymbol         X-VS/X-SS/X-KS  1..10 dígitos
    └── SenderReference       RF       1..16 dígitos
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.keys import MSG, NTA, RF, RN, X_ID, X_URL
from spayd.domain.shared.percent_codec import percent_encode


@dataclass(frozen=True)
class _BoundedText:
    value: str

    KEY: ClassVar[str | None] = None
    LABEL: ClassVar[str] = "Value"
    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int]
    DIGITS_ONLY: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise AttributeValidationError(f"{self.LABEL} must be a string.", key=self.KEY)
        value = self.value.strip()
        if not self.MIN_LENGTH <= len(value) <= self.MAX_LENGTH:
            raise AttributeValidationError(
                f"{self.LABEL} must be {self.MIN_LENGTH}..{self.MAX_LENGTH} "
                f"characters long.",
                key=self.KEY,
            )
        if self.DIGITS_ONLY and not re.fullmatch(r"[0-9]*", value):
            raise AttributeValidationError(
                f"{self.LABEL} must contain only digits.", key=self.KEY
            )
        object.__setattr__(self, "value", value)

    @classmethod
    def from_string(cls, value: str):
        return cls(value)

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return percent_encode(self.value, optimize_for_qr)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Message(_BoundedText):
    """Mensaje para el destinatario."""

    KEY = MSG
    LABEL = "Message"
    MIN_LENGTH = 0
    MAX_LENGTH = 60


@dataclass(frozen=True)
class Recipient(_BoundedText):
    """Nombre del destinatario del pago."""

    KEY = RN
    LABEL = "Recipient"
    MAX_LENGTH = 35


@dataclass(frozen=True)
class NotificationAddress(_BoundedText):
    """Teléfono o correo al que se notifica el pago, según NT."""

    KEY = NTA
    LABEL = "Notification address"
    MAX_LENGTH = 320


@dataclass(frozen=True)
class CzPaymentId(_BoundedText):
    """Identificador del pago para el ordenante (X-ID)."""

    KEY = X_ID
    LABEL = "Payment ID"
    MAX_LENGTH = 20


@dataclass(frozen=True)
class Url(_BoundedText):
    KEY = X_URL
    LABEL = "URL"
    MAX_LENGTH = 140


@dataclass(frozen=True)
class PaymentSymbol(_BoundedText):
    """Símbolo variable, específico o constante (X-VS, X-SS, X-KS).

    El mismo tipo sirve para las tres claves, por eso no fija KEY: el
    decodificador añade la clave al error.
    """

    LABEL = "Payment symbol"
    MAX_LENGTH = 10
    DIGITS_ONLY = True


@dataclass(frozen=True)
class SenderReference(_BoundedText):
    """Referencia del ordenante (RF)."""

    KEY = RF
    LABEL = "Sender reference"
    MAX_LENGTH = 16
    DIGITS_ONLY = True
