"""
Modelo de dominio: registro SPAYD completo.

Es el objeto central que fluye por toda la arquitectura:
- Lo PRODUCE el decodificador (o `build_spayd`).
- Lo CONSUME el codificador.
- Lo ACUMULA el procesador por lotes y lo escribe el ExcelWriter.

Invariantes (se comprueban en `__post_init__`):
- `account` siempre está presente.
- `notification_type` y `notification_address` van juntos: los dos o
  ninguno.
- Las claves de los atributos personalizados no se repiten.
"""

from collections import defaultdict
from dataclasses import dataclass, fields

from spayd.domain.exceptions import (
    AttributeValidationError,
    ConsistencyError,
    DuplicateKeyError,
    MissingRequiredAttributeError,
)
from spayd.domain.models.amount import Amount, Currency
from spayd.domain.models.bank_account import IbanBic
from spayd.domain.models.custom_attribute import CustomAttribute
from spayd.domain.models.due_date import DueDate
from spayd.domain.models.keys import (
    ACC,
    ALT_ACC,
    AM,
    CC,
    DT,
    MSG,
    NT,
    NTA,
    PT,
    RF,
    RN,
    X_ID,
    X_KS,
    X_PER,
    X_SS,
    X_URL,
    X_VS,
)
from spayd.domain.models.payment_type import NotificationType, PaymentType
from spayd.domain.models.retry_days import RetryDays
from spayd.domain.models.text_attributes import (
    CzPaymentId,
    Message,
    NotificationAddress,
    PaymentSymbol,
    Recipient,
    SenderReference,
    Url,
)

SPAYD_VERSION = "1.0"

# Campo opcional → (tipo de valor, clave SPAYD).
_OPTIONAL_FIELD_TYPES = {
    "amount": (Amount, AM),
    "currency": (Currency, CC),
    "due_date": (DueDate, DT),
    "message": (Message, MSG),
    "notification_type": (NotificationType, NT),
    "notification_address": (NotificationAddress, NTA),
    "payment_type": (PaymentType, PT),
    "sender_reference": (SenderReference, RF),
    "recipient": (Recipient, RN),
    "vs": (PaymentSymbol, X_VS),
    "ss": (PaymentSymbol, X_SS),
    "ks": (PaymentSymbol, X_KS),
    "retry_days": (RetryDays, X_PER),
    "payment_id": (CzPaymentId, X_ID),
    "url": (Url, X_URL),
}


@dataclass(frozen=True)
class Spayd:
    """Instrucción de pago SPAYD 1.0 (Short Payment Descriptor)."""

    account: IbanBic
    """ACC: cuenta de destino. Único atributo obligatorio."""

    alt_accounts: tuple[IbanBic, ...] = ()
    """ALT-ACC: cuentas alternativas, en el orden en que se recibieron."""

    amount: Amount | None = None
    currency: Currency | None = None
    due_date: DueDate | None = None
    message: Message | None = None

    notification_type: NotificationType | None = None
    """NT: canal de notificación. Obligatorio si hay NTA."""

    notification_address: NotificationAddress | None = None
    """NTA: teléfono o correo, según NT."""

    payment_type: PaymentType | None = None
    sender_reference: SenderReference | None = None
    recipient: Recipient | None = None

    # --- Extensiones checas ---

    vs: PaymentSymbol | None = None
    """X-VS: símbolo variable."""

    ss: PaymentSymbol | None = None
    """X-SS: símbolo específico."""

    ks: PaymentSymbol | None = None
    """X-KS: símbolo constante."""

    retry_days: RetryDays | None = None
    payment_id: CzPaymentId | None = None
    url: Url | None = None

    custom_attributes: tuple[CustomAttribute, ...] = ()
    """Atributos 'X-' no reconocidos, en orden de aparición."""

    def __post_init__(self) -> None:
        if self.account is None:
            raise MissingRequiredAttributeError(ACC)
        if not isinstance(self.account, IbanBic):
            raise AttributeValidationError("Account must be an IbanBic.", key=ACC)

        for field_name, (value_type, key) in _OPTIONAL_FIELD_TYPES.items():
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, value_type):
                raise AttributeValidationError(
                    f"{field_name} must be a {value_type.__name__}, "
                    f"got {type(value).__name__}.",
                    key=key,
                )

        # Se aceptan listas pero se guardan como tuplas para mantener la
        # inmutabilidad del registro.
        object.__setattr__(
            self, "alt_accounts", _as_tuple(self.alt_accounts, IbanBic, ALT_ACC)
        )
        object.__setattr__(
            self,
            "custom_attributes",
            _as_tuple(self.custom_attributes, CustomAttribute, None),
        )

        if (self.notification_type is None) != (self.notification_address is None):
            raise ConsistencyError(
                "NT and NTA must be either both present or both absent."
            )

        indexes_by_key: dict[str, list[int]] = defaultdict(list)
        for index, attribute in enumerate(self.custom_attributes):
            indexes_by_key[attribute.key].append(index)
        duplicates = {k: v for k, v in indexes_by_key.items() if len(v) > 1}
        if duplicates:
            raise DuplicateKeyError(duplicates)

    @property
    def custom_attribute_map(self) -> dict[str, str]:
        """Atributos personalizados como dict clave → valor."""
        return {attribute.key: attribute.value for attribute in self.custom_attributes}

    def present_fields(self) -> list[str]:
        """Nombres de los campos con valor, en orden de declaración."""
        return [
            f.name
            for f in fields(self)
            if getattr(self, f.name) not in (None, ())
        ]


def _as_tuple(items, item_type: type, key: str | None) -> tuple:
    if not isinstance(items, (list, tuple)):
        raise AttributeValidationError(
            f"Expected a list or tuple of {item_type.__name__}, "
            f"got {type(items).__name__}.",
            key=key,
        )
    for item in items:
        if not isinstance(item, item_type):
            raise AttributeValidationError(
                f"Every item must be a {item_type.__name__}, got {type(item).__name__}.",
                key=key,
            )
    return tuple(items)
