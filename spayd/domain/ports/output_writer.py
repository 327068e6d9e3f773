"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir los pagos decodificados en algún formato
persistente (Excel, CSV, etc.). El procesador por lotes no conoce el
formato de salida: solo produce una lista de DecodedPayment.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from spayd.domain.models.decoded_payment import DecodedPayment


class OutputWriter(ABC):
    """Interfaz para escribir pagos decodificados."""

    @abstractmethod
    def write(self, payments: list[DecodedPayment], output_path: Path) -> Path:
        """Escribe el reporte de los pagos.

        Args:
            payments: Pagos decodificados, en el orden del archivo.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura o no hay pagos.
        """
        ...
