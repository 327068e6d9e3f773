"""
Modelo de dominio: pago decodificado dentro de un lote.

Lo produce el PaymentBatchProcessor por cada línea válida de un archivo y lo
consume el ExcelWriter. Guarda de qué archivo y línea vino para poder
rastrear el pago en la bitácora y en el reporte.
"""

from dataclasses import dataclass

from spayd.domain.models.spayd import Spayd


@dataclass(frozen=True)
class DecodedPayment:
    line_number: int
    """Número de línea (empezando en 1) dentro del archivo de origen."""

    source_name: str
    """Nombre del archivo de origen, o '<stdin>'/'<memoria>'."""

    payment: Spayd

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number debe ser >= 1: {self.line_number}")
