"""
CRC32 (polinomio reflejado 0xEDB88320) con tabla de 256 entradas.

La tabla se construye una sola vez al importar el módulo y nunca se
modifica, así que se puede leer desde varios hilos sin bloqueos.

Se exponen tres niveles:
- update_crc32: avanza el registro crudo (sin inversión inicial ni final),
  útil para procesar datos por partes.
- compute_crc32: registro inicial 0xFFFFFFFF y XOR final 0xFFFFFFFF.
- crc32_hex: el mismo valor como 8 dígitos hexadecimales en mayúsculas,
  que es como aparece en el atributo CRC32 de SPAYD.
"""

POLYNOMIAL = 0xEDB88320
_MASK = 0xFFFFFFFF


def _build_table(polynomial: int) -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ polynomial
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


CRC32_TABLE = _build_table(POLYNOMIAL)


def _to_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def update_crc32(register: int, data: bytes | str) -> int:
    """Avanza el registro CRC con los bytes dados (sin invertir)."""
    for byte in _to_bytes(data):
        register = CRC32_TABLE[(register ^ byte) & 0xFF] ^ (register >> 8)
    return register & _MASK


def compute_crc32(data: bytes | str) -> int:
    """CRC32 estándar de `data`. Los str se codifican como UTF-8.

    Ejemplos:
        >>> hex(compute_crc32("Orang Utan"))
        '0x385171d6'
        >>> compute_crc32(b"")
        0
    """
    return update_crc32(_MASK, data) ^ _MASK


def crc32_hex(data: bytes | str) -> str:
    """CRC32 como 8 dígitos hexadecimales en mayúsculas.

    Ejemplos:
        >>> crc32_hex("Orang Utan")
        '385171D6'
    """
    return f"{compute_crc32(data):08X}"
