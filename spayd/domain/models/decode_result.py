"""
Modelo de dominio: resultado de decodificar un texto SPAYD sin excepciones.

Lo produce `SpaydDecoder.try_decode`. Sirve a quien prefiere revisar el
resultado en lugar de capturar excepciones (por ejemplo, al validar texto
que escribe un usuario en un formulario): contiene el pago o el error,
nunca ambos.
"""

from dataclasses import dataclass

from spayd.domain.exceptions import SpaydError
from spayd.domain.models.spayd import Spayd


@dataclass(frozen=True)
class DecodeResult:
    """Pago decodificado o error de decodificación."""

    payment: Spayd | None = None
    """Registro decodificado. None si falló la decodificación."""

    error: SpaydError | None = None
    """Primer error encontrado (o el error agregado de claves duplicadas)."""

    def __post_init__(self) -> None:
        if (self.payment is None) == (self.error is None):
            raise ValueError("DecodeResult requiere exactamente uno de payment o error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> str | None:
        """Nombre del tipo de error ('CharsetError', 'ChecksumError', ...)."""
        return type(self.error).__name__ if self.error is not None else None

    @property
    def message(self) -> str | None:
        return str(self.error) if self.error is not None else None

    def unwrap(self) -> Spayd:
        """Devuelve el pago o vuelve a lanzar el error."""
        if self.error is not None:
            raise self.error
        return self.payment
