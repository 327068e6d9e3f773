"""
Tabla de atributos estándar de SPAYD.

Une cada clave con el campo del registro Spayd, la función que valida el
valor decodificado y la que lo vuelve a codificar. La usan el
decodificador (despacho por clave), el codificador (orden de salida) y
`build_spayd` (misma validación que el decodificador).

El orden de ATTRIBUTES es el orden en que el codificador escribe los
atributos. CRC32 no está en la tabla: no se guarda en el registro.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models import keys
from spayd.domain.models.amount import Amount, Currency
from spayd.domain.models.bank_account import IbanBic
from spayd.domain.models.due_date import DueDate
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


@dataclass(frozen=True)
class AttributeSpec:
    key: str
    field_name: str
    parse: Callable[[str], Any]
    encode: Callable[[Any, bool], str]


def _parse_alt_accounts(value: str) -> tuple[IbanBic, ...]:
    try:
        return tuple(IbanBic.from_string(part) for part in value.split(","))
    except AttributeValidationError as e:
        raise type(e)(f"Cannot parse ALT-ACC: {e.reason}", key=keys.ALT_ACC) from e


def _encode_alt_accounts(accounts: tuple[IbanBic, ...], optimize_for_qr: bool) -> str:
    # La coma es separador: se codifica cada cuenta por separado.
    return ",".join(account.to_spayd(optimize_for_qr) for account in accounts)


def _encode_value(value: Any, optimize_for_qr: bool) -> str:
    return value.to_spayd(optimize_for_qr)


ATTRIBUTES: tuple[AttributeSpec, ...] = (
    AttributeSpec(keys.ACC, "account", IbanBic.from_string, _encode_value),
    AttributeSpec(keys.ALT_ACC, "alt_accounts", _parse_alt_accounts, _encode_alt_accounts),
    AttributeSpec(keys.AM, "amount", Amount.from_string, _encode_value),
    AttributeSpec(keys.CC, "currency", Currency.from_string, _encode_value),
    AttributeSpec(keys.DT, "due_date", DueDate.from_string, _encode_value),
    AttributeSpec(keys.MSG, "message", Message.from_string, _encode_value),
    AttributeSpec(keys.NT, "notification_type", NotificationType.from_string, _encode_value),
    AttributeSpec(keys.NTA, "notification_address", NotificationAddress.from_string, _encode_value),
    AttributeSpec(keys.PT, "payment_type", PaymentType.from_string, _encode_value),
    AttributeSpec(keys.RF, "sender_reference", SenderReference.from_string, _encode_value),
    AttributeSpec(keys.RN, "recipient", Recipient.from_string, _encode_value),
    AttributeSpec(keys.X_VS, "vs", PaymentSymbol.from_string, _encode_value),
    AttributeSpec(keys.X_SS, "ss", PaymentSymbol.from_string, _encode_value),
    AttributeSpec(keys.X_KS, "ks", PaymentSymbol.from_string, _encode_value),
    AttributeSpec(keys.X_PER, "retry_days", RetryDays.from_string, _encode_value),
    AttributeSpec(keys.X_ID, "payment_id", CzPaymentId.from_string, _encode_value),
    AttributeSpec(keys.X_URL, "url", Url.from_string, _encode_value),
)

ATTRIBUTES_BY_KEY = {spec.key: spec for spec in ATTRIBUTES}
ATTRIBUTES_BY_FIELD = {spec.field_name: spec for spec in ATTRIBUTES}


def parse_attribute(spec: AttributeSpec, value: str) -> Any:
    """Valida un valor ya decodificado y le añade la clave al error.

    Raises:
        AttributeValidationError: Con `key` igual a `spec.key` cuando el tipo
                                  de valor no la conocía (X-VS, X-SS, ...).
    """
    try:
        return spec.parse(value)
    except AttributeValidationError as e:
        if e.key is not None:
            raise
        raise e.with_key(spec.key) from e
