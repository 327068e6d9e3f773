"""
spayd-codec: decodificador y codificador de SPAYD (Short Payment Descriptor).

Uso:
    from spayd import decode, encode, build_spayd

    pago = decode("SPD*1.0*ACC:CZ9106000000000000000123*AM:450.00*CC:CZK*")
    texto = encode(pago, optimize_for_qr=True)
"""

from spayd.domain.exceptions import SpaydError
from spayd.domain.models import IBAN, CZBankAccount, Spayd
from spayd.domain.services.builder import build_spayd
from spayd.domain.services.decoder import SpaydDecoder, decode, try_decode
from spayd.domain.services.encoder import encode

__all__ = [
    "CZBankAccount",
    "IBAN",
    "Spayd",
    "SpaydDecoder",
    "SpaydError",
    "build_spayd",
    "decode",
    "encode",
    "try_decode",
]
