"""
Dígitos de control de cuentas bancarias.

Dos esquemas distintos:

- Cuenta checa (prefijo-número/banco): cada parte, rellenada con ceros a la
  izquierda hasta 6 (prefijo) o 10 (número) dígitos, se multiplica de
  derecha a izquierda por los pesos 1,2,4,8,5,10,9,7,3,6. La parte es válida
  si la suma ponderada es múltiplo de 11.
  Fuente: vyhláška ČNB 169/2011 Sb.

- IBAN (ISO 13616): se mueven los 4 primeros caracteres al final, cada letra
  se convierte en número (A=10 … Z=35) y el número resultante debe dar
  resto 1 módulo 97. El resto se calcula dígito por dígito para no
  construir enteros enormes.
"""

CZ_ACCOUNT_WEIGHTS = (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)

PREFIX_WIDTH = 6
ACCOUNT_NUMBER_WIDTH = 10

# "CZ00" reordenado: C=12, Z=35, dígitos de control provisionales 00.
_CZ_COUNTRY_SUFFIX = "123500"


def cz_weighted_sum(part: str, width: int) -> int:
    """Suma ponderada de una parte de cuenta checa.

    Ejemplos:
        >>> cz_weighted_sum("77628461", 10)
        275
        >>> cz_weighted_sum("", 6)
        0
    """
    padded = part.rjust(width, "0")
    return sum(
        int(digit) * weight
        for digit, weight in zip(reversed(padded), CZ_ACCOUNT_WEIGHTS)
    )


def count_non_zero_digits(part: str) -> int:
    return sum(1 for digit in part if digit != "0")


def is_valid_cz_account_part(part: str, width: int) -> bool:
    """True si la suma ponderada de la parte es múltiplo de 11."""
    return cz_weighted_sum(part, width) % 11 == 0


def mod97(digits: str) -> int:
    """Resto módulo 97 de una cadena de dígitos decimales.

    Ejemplos:
        >>> mod97("3214282912345698765432161182")
        1
    """
    remainder = 0
    for char in digits:
        remainder = (remainder * 10 + int(char)) % 97
    return remainder


def iban_to_digits(iban: str) -> str:
    """Reordena el IBAN y convierte las letras a números (A=10 … Z=35).

    Se asume que el IBAN ya solo contiene dígitos y letras mayúsculas.
    """
    rearranged = iban[4:] + iban[:4]
    return "".join(
        char if char.isdigit() else str(ord(char) - ord("A") + 10)
        for char in rearranged
    )


def is_valid_iban_checksum(iban: str) -> bool:
    return mod97(iban_to_digits(iban)) == 1


def cz_iban_from_parts(bank_code: str, prefix: str, account_number: str) -> str:
    """Genera el IBAN checo de una cuenta nacional.

    El IBAN es CZ + dígitos de control + banco(4) + prefijo(6) + número(10).
    Los dígitos de control son 98 menos el mod-97 del BBAN seguido de "CZ00",
    de modo que el IBAN generado siempre pasa la validación mod-97.

    Ejemplos:
        >>> cz_iban_from_parts("0710", "7720", "77628461")
        'CZ2507100077200077628461'
    """
    bban = (
        bank_code
        + prefix.rjust(PREFIX_WIDTH, "0")
        + account_number.rjust(ACCOUNT_NUMBER_WIDTH, "0")
    )
    check_digits = 98 - mod97(bban + _CZ_COUNTRY_SUFFIX)
    return f"CZ{check_digits:02d}{bban}"
