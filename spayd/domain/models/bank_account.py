"""
Modelos de dominio: identificadores de cuentas bancarias.

- IBAN / BIC: cuenta internacional, usada en los atributos ACC y ALT-ACC.
- IbanBic: IBAN con BIC opcional; en el texto SPAYD se unen con '+'.
- BankCode, CZBankAccountNumber, CZBankAccount: cuenta nacional checa
  ("prefijo-número/banco"), convertible a IBAN con `IBAN.generate`.

Todos son dataclasses inmutables que se validan en `__post_init__`: no se
puede crear una instancia inválida. Los constructores `from_string` aceptan
el texto tal como lo escribe una persona (con espacios, ceros a la izquierda).
"""

import re
from dataclasses import dataclass

from spayd.domain.exceptions import AttributeValidationError, ChecksumError
from spayd.domain.shared.checksums import (
    ACCOUNT_NUMBER_WIDTH,
    PREFIX_WIDTH,
    count_non_zero_digits,
    cz_iban_from_parts,
    is_valid_cz_account_part,
    is_valid_iban_checksum,
)
from spayd.domain.shared.percent_codec import percent_encode

_CZ_ACCOUNT_NUMBER_RE = re.compile(r"[0-9]{2,10}|[0-9]{2,6}-[0-9]{2,10}")
_DIGITS_RE = re.compile(r"[0-9]*")
_UPPER_ALNUM_RE = re.compile(r"[A-Z0-9]*")


@dataclass(frozen=True)
class BankCode:
    """Código de banco checo (kód banky), exactamente 4 dígitos."""

    value: str

    def __post_init__(self) -> None:
        if not (isinstance(self.value, str) and re.fullmatch(r"[0-9]{4}", self.value)):
            raise AttributeValidationError(
                "Invalid bank code. Must be exactly 4 digits. "
                "Input has either bad length, or contains non-digits."
            )

    @classmethod
    def from_string(cls, value: str) -> "BankCode":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CZBankAccountNumber:
    """Número de cuenta checo: prefijo opcional (hasta 6 dígitos) y número
    (hasta 10 dígitos), cada uno protegido por su propio dígito de control.

    Los ceros a la izquierda se eliminan: "000721-0077628031" y
    "721-77628031" son la misma cuenta. Un prefijo vacío equivale a no
    tener prefijo.
    """

    prefix: str
    account_number: str

    def __post_init__(self) -> None:
        prefix = _normalize_part(self.prefix, PREFIX_WIDTH)
        account_number = _normalize_part(self.account_number, ACCOUNT_NUMBER_WIDTH)
        _validate_part(self.prefix, PREFIX_WIDTH, min_non_zero=0)
        _validate_part(self.account_number, ACCOUNT_NUMBER_WIDTH, min_non_zero=2)
        object.__setattr__(self, "prefix", prefix)
        object.__setattr__(self, "account_number", account_number)

    @classmethod
    def from_string(cls, value: str) -> "CZBankAccountNumber":
        """Parsea "número" o "prefijo-número".

        Ejemplos:
            >>> CZBankAccountNumber.from_string("721-77628031")
            CZBankAccountNumber(prefix='721', account_number='77628031')
        """
        text = value.strip()
        if not _CZ_ACCOUNT_NUMBER_RE.fullmatch(text):
            raise AttributeValidationError("Invalid CZ bank account number format.")
        prefix, _, account_number = text.rpartition("-")
        return cls(prefix, account_number)

    def __str__(self) -> str:
        if self.prefix:
            return f"{self.prefix}-{self.account_number}"
        return self.account_number


def _normalize_part(part: str, width: int) -> str:
    if not (isinstance(part, str) and _DIGITS_RE.fullmatch(part)):
        raise AttributeValidationError(
            "Invalid CZ bank account number format. Parts must contain only digits."
        )
    if len(part) > width:
        raise AttributeValidationError(
            f"Invalid CZ bank account number part length ({len(part)}). Must be <= {width}."
        )
    return part.lstrip("0")


def _validate_part(part: str, width: int, min_non_zero: int) -> None:
    if count_non_zero_digits(part) < min_non_zero:
        raise AttributeValidationError(
            "Invalid CZ bank account number - insufficient non-zero digits "
            f"(must have at least {min_non_zero})."
        )
    if not is_valid_cz_account_part(part, width):
        raise ChecksumError("Invalid CZ bank account number - check digit is invalid.")


@dataclass(frozen=True)
class CZBankAccount:
    """Cuenta nacional checa completa: "prefijo-número/banco"."""

    account_number: CZBankAccountNumber
    bank_code: BankCode

    @classmethod
    def from_string(cls, value: str) -> "CZBankAccount":
        """Parsea "721-77628031/0710" o "77628031/0710"."""
        parts = value.strip().split("/")
        if len(parts) != 2:
            raise AttributeValidationError(
                "Invalid account number with bank code. Expected 2 parts "
                f"separated by '/', but has {len(parts)} parts."
            )
        return cls(
            CZBankAccountNumber.from_string(parts[0]),
            BankCode.from_string(parts[1]),
        )

    def to_iban(self) -> "IBAN":
        return IBAN.generate(self)

    def __str__(self) -> str:
        return f"{self.account_number}/{self.bank_code}"


@dataclass(frozen=True)
class IBAN:
    """Número de cuenta bancaria internacional (ISO 13616)."""

    value: str

    MIN_LENGTH = 16
    MAX_LENGTH = 34

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, str):
            raise AttributeValidationError("IBAN must be a string.")
        if not self.MIN_LENGTH <= len(value) <= self.MAX_LENGTH:
            raise AttributeValidationError(
                f"IBAN length ({len(value)}) is not in the allowed range "
                f"{self.MIN_LENGTH}..{self.MAX_LENGTH}."
            )
        if not re.fullmatch(r"[A-Z]{2}", value[:2]):
            raise AttributeValidationError("Invalid country code.")
        if not re.fullmatch(r"[0-9]{2}", value[2:4]):
            raise AttributeValidationError("Invalid check digits.")
        if not _UPPER_ALNUM_RE.fullmatch(value):
            raise AttributeValidationError(
                "IBAN must contain only uppercase letters and digits."
            )
        if not is_valid_iban_checksum(value):
            raise ChecksumError("Invalid IBAN: did not pass mod97 check.")

    @classmethod
    def from_string(cls, value: str) -> "IBAN":
        """Parsea un IBAN ignorando los espacios ("CZ65 0800 ...")."""
        return cls("".join(value.split()))

    @classmethod
    def generate(cls, account: CZBankAccount) -> "IBAN":
        """Genera el IBAN de una cuenta checa.

        Ejemplos:
            >>> account = CZBankAccount.from_string("7720-77628461/0710")
            >>> IBAN.generate(account).value
            'CZ2507100077200077628461'
        """
        return cls(
            cz_iban_from_parts(
                account.bank_code.value,
                account.account_number.prefix,
                account.account_number.account_number,
            )
        )

    def readable(self) -> str:
        """IBAN en grupos de 4 caracteres: "CZ25 0710 0077 ..."."""
        return " ".join(self.value[i : i + 4] for i in range(0, len(self.value), 4))

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return percent_encode(self.value, optimize_for_qr)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BIC:
    """Código SWIFT: 4 letras de banco, 2 de país, 2 alfanuméricos de
    localidad y 3 alfanuméricos opcionales de sucursal."""

    value: str

    def __post_init__(self) -> None:
        value = self.value
        if not isinstance(value, str) or len(value) not in (8, 11):
            length = len(value) if isinstance(value, str) else 0
            raise AttributeValidationError(
                f"BIC must be 8 OR 11 characters long, was {length}."
            )
        if not re.fullmatch(r"[A-Z]{6}", value[:6]):
            raise AttributeValidationError("BIC must start with 6 uppercase letters.")
        if not _UPPER_ALNUM_RE.fullmatch(value[6:]):
            raise AttributeValidationError(
                "BIC must end with 2 or 5 alphanumeric characters."
            )

    @classmethod
    def from_string(cls, value: str) -> "BIC":
        return cls(value.strip())

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        return percent_encode(self.value, optimize_for_qr)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IbanBic:
    """Cuenta de destino del pago: IBAN y, opcionalmente, BIC."""

    iban: IBAN
    bic: BIC | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.iban, IBAN):
            raise AttributeValidationError("Account must contain an IBAN.")
        if self.bic is not None and not isinstance(self.bic, BIC):
            raise AttributeValidationError("Account BIC must be a BIC instance.")

    @classmethod
    def from_string(cls, value: str) -> "IbanBic":
        """Parsea "IBAN" o "IBAN+BIC"."""
        iban, separator, bic = value.partition("+")
        return cls(
            IBAN.from_string(iban),
            BIC.from_string(bic) if separator else None,
        )

    @classmethod
    def from_cz_bank_account(cls, account: CZBankAccount, bic: BIC | None = None) -> "IbanBic":
        return cls(IBAN.generate(account), bic)

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        # El '+' es separador, no se escapa: se codifica cada parte por separado.
        encoded = self.iban.to_spayd(optimize_for_qr)
        if self.bic is not None:
            encoded += "+" + self.bic.to_spayd(optimize_for_qr)
        return encoded

    def __str__(self) -> str:
        if self.bic is None:
            return str(self.iban)
        return f"{self.iban}+{self.bic}"
