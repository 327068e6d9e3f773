"""
Modelos de dominio del proyecto spayd-codec.

Todos los modelos son dataclasses inmutables (frozen=True) que se validan al
construirse: si una instancia existe, su valor es válido.

Uso:
    from spayd.domain.models import Spayd, IbanBic, Amount, Currency
"""

from spayd.domain.models.amount import Amount, Currency
from spayd.domain.models.bank_account import (
    BIC,
    IBAN,
    BankCode,
    CZBankAccount,
    CZBankAccountNumber,
    IbanBic,
)
from spayd.domain.models.custom_attribute import CustomAttribute
from spayd.domain.models.decode_result import DecodeResult
from spayd.domain.models.decoded_payment import DecodedPayment
from spayd.domain.models.due_date import DueDate
from spayd.domain.models.payment_type import NotificationType, PaymentType, PaymentTypeKind
from spayd.domain.models.retry_days import RetryDays
from spayd.domain.models.spayd import Spayd
from spayd.domain.models.text_attributes import (
    CzPaymentId,
    Message,
    NotificationAddress,
    PaymentSymbol,
    Recipient,
    SenderReference,
    Url,
)

__all__ = [
    "Amount",
    "BIC",
    "BankCode",
    "CZBankAccount",
    "CZBankAccountNumber",
    "Currency",
    "CustomAttribute",
    "CzPaymentId",
    "DecodeResult",
    "DecodedPayment",
    "DueDate",
    "IBAN",
    "IbanBic",
    "Message",
    "NotificationAddress",
    "NotificationType",
    "PaymentSymbol",
    "PaymentType",
    "PaymentTypeKind",
    "Recipient",
    "RetryDays",
    "SenderReference",
    "Spayd",
    "Url",
]
