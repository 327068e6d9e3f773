"""
Construcción de registros Spayd desde texto.

`build_spayd` recibe los valores tal como los escribiría una persona y los
valida con exactamente las mismas funciones que usa el decodificador, así
que un registro construido aquí y uno decodificado cumplen las mismas
reglas.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from spayd.domain.exceptions import MissingRequiredAttributeError
from spayd.domain.models import keys
from spayd.domain.models.custom_attribute import CustomAttribute
from spayd.domain.models.spayd import Spayd
from spayd.domain.services.attributes import ATTRIBUTES_BY_FIELD, parse_attribute


def build_spayd(
    account: str,
    *,
    alt_accounts: Sequence[str] | str = (),
    amount: str | None = None,
    currency: str | None = None,
    due_date: str | date | None = None,
    message: str | None = None,
    notification_type: str | None = None,
    notification_address: str | None = None,
    payment_type: str | None = None,
    sender_reference: str | None = None,
    recipient: str | None = None,
    vs: str | None = None,
    ss: str | None = None,
    ks: str | None = None,
    retry_days: str | int | None = None,
    payment_id: str | None = None,
    url: str | None = None,
    custom_attributes: Mapping[str, str] | Iterable[tuple[str, str]] = (),
) -> Spayd:
    """Construye y valida un registro Spayd.

    Args:
        account: IBAN de destino, opcionalmente con '+BIC'.
        alt_accounts: Cuentas alternativas ("IBAN[+BIC]"), como lista o como
                      texto separado por comas.
        due_date: "YYYYMMDD" o un `date`.
        retry_days: Número de días (1-30), como texto o entero.
        custom_attributes: Atributos 'X-' adicionales, en orden.
        El resto: el texto del atributo correspondiente, ya sin escapar.

    Raises:
        MissingRequiredAttributeError: Si `account` está vacío.
        AttributeValidationError / ChecksumError / ConsistencyError: Igual
        que al decodificar.

    Ejemplos:
        >>> build_spayd("CZ9106000000000000000123", amount="450", vs="123").amount.value
        '450.00'
    """
    if not account:
        raise MissingRequiredAttributeError(keys.ACC)

    if isinstance(due_date, date):
        due_date = due_date.strftime("%Y%m%d")
    if isinstance(retry_days, int):
        retry_days = str(retry_days)
    if not isinstance(alt_accounts, str):
        alt_accounts = ",".join(alt_accounts) or None

    raw_values = {
        "account": account,
        "alt_accounts": alt_accounts,
        "amount": amount,
        "currency": currency,
        "due_date": due_date,
        "message": message,
        "notification_type": notification_type,
        "notification_address": notification_address,
        "payment_type": payment_type,
        "sender_reference": sender_reference,
        "recipient": recipient,
        "vs": vs,
        "ss": ss,
        "ks": ks,
        "retry_days": retry_days,
        "payment_id": payment_id,
        "url": url,
    }
    values = {
        field_name: parse_attribute(ATTRIBUTES_BY_FIELD[field_name], raw)
        for field_name, raw in raw_values.items()
        if raw is not None
    }

    if isinstance(custom_attributes, Mapping):
        custom_attributes = custom_attributes.items()

    return Spayd(
        **values,
        custom_attributes=tuple(
            CustomAttribute(key, value) for key, value in custom_attributes
        ),
    )
