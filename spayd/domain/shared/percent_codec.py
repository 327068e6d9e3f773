"""
Percent-encoding de valores SPAYD.

Los valores viajan en un texto delimitado por '*' que además suele ir dentro
de un código QR, así que cada byte que no sea "seguro" se escribe como '%XX'.

Hay dos conjuntos de caracteres permitidos sin escapar:

- FULL_CHARSET: todo ASCII (0x00-0x7F) menos '*' (separador), '%' (escape)
  y '+'. El '+' se escapa porque otros decodificadores lo tratan como un
  espacio codificado al estilo URL.
- QR_CHARSET: el subconjunto alfanumérico de QR (0-9, A-Z, espacio y
  "$-./:"). El texto se pasa a mayúsculas antes de codificar, lo que permite
  generar códigos QR más densos.

Al decodificar, los bytes escapados consecutivos se acumulan y se decodifican
como UTF-8 de una sola vez: una letra como 'á' ocupa dos bytes (%C3%A1) y no
se puede decodificar byte por byte.
"""

import string

from spayd.domain.exceptions import FormatError

FULL_CHARSET = frozenset(chr(code) for code in range(0x80)) - {"*", "%", "+"}
QR_CHARSET = frozenset(string.digits + string.ascii_uppercase + " $-./:")

_HEX_DIGITS = frozenset(string.hexdigits)


def percent_encode(text: str, optimize_for_qr: bool = False) -> str:
    """Codifica un valor para el formato SPAYD.

    Args:
        text: Texto a codificar. Se le hace strip antes de codificar.
        optimize_for_qr: Si es True, se pasa a mayúsculas y solo se dejan
                         sin escapar los caracteres alfanuméricos de QR.

    Returns:
        Texto ASCII con '%XX' (hexadecimal en mayúsculas) para cada byte
        UTF-8 fuera del conjunto permitido.

    Ejemplos:
        >>> percent_encode("123áé ‰*")
        '123%C3%A1%C3%A9 %E2%80%B0%2A'
        >>> percent_encode("Platba", optimize_for_qr=True)
        'PLATBA'
    """
    content = text.strip()
    if optimize_for_qr:
        content = content.upper()
    allowed = QR_CHARSET if optimize_for_qr else FULL_CHARSET

    if all(char in allowed for char in content):
        return content

    encoded = []
    for byte in content.encode("utf-8"):
        char = chr(byte)
        if char in allowed:
            encoded.append(char)
        else:
            encoded.append(f"%{byte:02X}")
    return "".join(encoded)


def percent_decode(text: str) -> str:
    """Decodifica un valor SPAYD con escapes '%XX'.

    Acepta dígitos hexadecimales en mayúsculas o minúsculas.

    Raises:
        FormatError: Si un '%' no va seguido de dos dígitos hexadecimales, o
                     si los bytes escapados no forman UTF-8 válido.

    Ejemplos:
        >>> percent_decode("123%C3%A1%c3%a9")
        '123áé'
    """
    if "%" not in text:
        return text

    decoded: list[str] = []
    buffer = bytearray()
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char != "%":
            if buffer:
                decoded.append(_decode_utf8(buffer))
                buffer.clear()
            decoded.append(char)
            pos += 1
            continue

        hex_pair = text[pos + 1 : pos + 3]
        if len(hex_pair) < 2:
            raise FormatError(
                "Invalid percent-encoded byte: Missing hexadecimal digit after '%'"
            )
        for digit in hex_pair:
            if digit not in _HEX_DIGITS:
                raise FormatError(f"Invalid hexadecimal digit: '{digit}'")
        buffer.append(int(hex_pair, 16))
        pos += 3

    if buffer:
        decoded.append(_decode_utf8(buffer))
    return "".join(decoded)


def _decode_utf8(buffer: bytearray) -> str:
    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"Percent-encoded bytes are not valid UTF-8: {e.reason}")
