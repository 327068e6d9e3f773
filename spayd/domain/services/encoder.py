"""
Servicio de dominio: Codificador SPAYD.

Convierte un registro Spayd en el texto que va dentro del código QR:

    SPD*1.0*ACC:CZ...*AM:450.00*CC:CZK*...*

- Los atributos estándar salen en el orden de la tabla ATTRIBUTES.
- Los personalizados salen después, en el orden en que se guardaron.
- Cada segmento termina en '*', incluido el último.
- Con `optimize_for_qr` los valores se pasan a mayúsculas y se escapa todo
  lo que no sea alfanumérico de QR.
- Con `include_crc32` se añade CRC32 justo después de CC.

Codificar no puede fallar con un registro construido con tipos validados;
una excepción aquí indicaría un defecto, no un dato inválido.
"""

from collections.abc import Iterable

from spayd.domain.models import keys
from spayd.domain.models.spayd import SPAYD_VERSION, Spayd
from spayd.domain.services.attributes import ATTRIBUTES
from spayd.domain.shared.crc32 import crc32_hex

SPAYD_HEADER = f"SPD*{SPAYD_VERSION}*"

# Atributos que preceden a CRC32 en la salida.
_BEFORE_CRC32 = frozenset({keys.ACC, keys.ALT_ACC, keys.AM, keys.CC})


def encode(
    payment: Spayd,
    optimize_for_qr: bool = False,
    include_crc32: bool = False,
) -> str:
    """Codifica un registro Spayd.

    Args:
        payment: Registro a codificar.
        optimize_for_qr: Si es True, genera texto apto para el modo
                         alfanumérico de QR (más denso).
        include_crc32: Si es True, añade el atributo CRC32.

    Returns:
        Texto SPAYD que empieza con 'SPD*1.0*' y termina con '*'.

    Ejemplos:
        >>> from spayd.domain.services.builder import build_spayd
        >>> encode(build_spayd("CZ9106000000000000000123", amount="450"))
        'SPD*1.0*ACC:CZ9106000000000000000123*AM:450.00*'
    """
    segments = encode_segments(payment, optimize_for_qr)

    if include_crc32:
        position = sum(
            1 for segment in segments if segment.partition(":")[0] in _BEFORE_CRC32
        )
        checksum = crc32_hex(canonical_form(segments))
        segments.insert(position, f"{keys.CRC32}:{checksum}")

    return SPAYD_HEADER + "".join(f"{segment}*" for segment in segments)


def encode_segments(payment: Spayd, optimize_for_qr: bool = False) -> list[str]:
    """Segmentos "CLAVE:valor" del registro, sin CRC32 y sin el encabezado."""
    segments = []
    for spec in ATTRIBUTES:
        value = getattr(payment, spec.field_name)
        if value is None or value == ():
            continue
        segments.append(f"{spec.key}:{spec.encode(value, optimize_for_qr)}")

    segments.extend(
        attribute.to_spayd(optimize_for_qr) for attribute in payment.custom_attributes
    )
    return segments


def canonical_form(segments: Iterable[str], version: str = SPAYD_VERSION) -> str:
    """Forma canónica sobre la que se calcula el CRC32.

    Encabezado 'SPD*<versión>*' seguido de los segmentos ordenados por clave
    y luego por valor, unidos con '*' (sin '*' final). El segmento CRC32 no
    debe incluirse.

    Ejemplos:
        >>> canonical_form(["CC:CZK", "ACC:CZ9106000000000000000123", "AM:1.00"])
        'SPD*1.0*ACC:CZ9106000000000000000123*AM:1.00*CC:CZK'
    """
    ordered = sorted(segments, key=lambda segment: segment.partition(":")[::2])
    return f"SPD*{version}*" + "*".join(ordered)
