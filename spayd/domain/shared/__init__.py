"""
Utilidades compartidas del dominio.

Algoritmos puros (dígitos de control, CRC32, percent-encoding) usados por los
tipos de valor y por el codificador/decodificador. No dependen de ninguna
librería externa y no conocen el registro SPAYD completo.

Uso:
    from spayd.domain.shared.checksums import mod97, cz_iban_from_parts
    from spayd.domain.shared.crc32 import compute_crc32, crc32_hex
    from spayd.domain.shared.percent_codec import percent_encode, percent_decode
"""
