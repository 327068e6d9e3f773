"""
Modelos de dominio: tipo de pago (PT) y tipo de notificación (NT).

PaymentType es una unión etiquetada: el caso "IP" (pago instantáneo) es una
variante distinguida y cualquier otro valor de 1 a 3 caracteres es una
variante personalizada que conserva su texto literal.
"""

from dataclasses import dataclass
from enum import Enum

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.keys import NT, PT
from spayd.domain.shared.percent_codec import percent_encode

INSTANT_PAYMENT_CODE = "IP"


class PaymentTypeKind(Enum):
    INSTANT = "instant"
    CUSTOM = "custom"


@dataclass(frozen=True)
class PaymentType:
    """Tipo de pago.

    Ejemplos:
        >>> PaymentType.from_string("IP").kind
        <PaymentTypeKind.INSTANT: 'instant'>
        >>> PaymentType.from_string("XY")
        PaymentType(kind=<PaymentTypeKind.CUSTOM: 'custom'>, value='XY')
    """

    kind: PaymentTypeKind
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not 1 <= len(self.value) <= 3:
            raise AttributeValidationError(
                "Payment type must be 1 to 3 characters long.", key=PT
            )
        is_instant_code = self.value == INSTANT_PAYMENT_CODE
        if (self.kind is PaymentTypeKind.INSTANT) != is_instant_code:
            raise AttributeValidationError(
                f"Payment type '{self.value}' does not match kind {self.kind.name}.",
                key=PT,
            )

    @classmethod
    def from_string(cls, value: str) -> "PaymentType":
        value = value.strip()
        if value == INSTANT_PAYMENT_CODE:
            return cls.instant()
        return cls(PaymentTypeKind.CUSTOM, value)

    @classmethod
    def instant(cls) -> "PaymentType":
        return cls(PaymentTypeKind.INSTANT, INSTANT_PAYMENT_CODE)

    @property
    def is_instant(self) -> bool:
        return self.kind is PaymentTypeKind.INSTANT

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return percent_encode(self.value, optimize_for_qr)

    def __str__(self) -> str:
        return self.value


class NotificationType(Enum):
    """Canal de notificación al destinatario."""

    PHONE = "P"
    EMAIL = "E"

    @classmethod
    def from_string(cls, value: str) -> "NotificationType":
        for member in cls:
            if member.value == value:
                return member
        raise AttributeValidationError(
            "Invalid notification type. Must be one of [P, E]", key=NT
        )

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return self.value
