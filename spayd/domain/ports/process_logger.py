"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos mientras se decodifican textos
SPAYD. El dominio solo conoce los EVENTOS de negocio:
- "Una clave contiene '--'" (no "WARNING: clave rara")
- "El CRC32 recibido no coincide" (no "WARNING: checksum")

La implementación puede imprimir a consola, escribir a archivo o acumular
en memoria para los tests.

El decodificador solo emite advertencias (eventos no fatales); los errores
de validación se lanzan como excepciones. Los eventos de lote los emite el
PaymentBatchProcessor.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Advertencias del decodificador ---

    @abstractmethod
    def log_suspicious_key(self, index: int, key: str) -> None:
        """Registra una clave válida pero sospechosa (contiene '--').

        Args:
            index: Índice del par clave-valor dentro del texto.
            key: Clave tal como apareció. Ejemplo: 'X-ABC--DEF'.
        """
        ...

    @abstractmethod
    def log_unsupported_version(self, version: str) -> None:
        """Registra que el texto declara una versión distinta de 1.0."""
        ...

    @abstractmethod
    def log_crc32_mismatch(self, expected: str, actual: str) -> None:
        """Registra que el CRC32 del texto no coincide con el calculado.

        Args:
            expected: Valor del atributo CRC32 recibido.
            actual: CRC32 calculado sobre la forma canónica.
        """
        ...

    # --- Procesamiento por lotes ---

    @abstractmethod
    def log_file_received(self, file_path: Path) -> None:
        """Registra que se recibió un archivo con textos SPAYD."""
        ...

    @abstractmethod
    def log_payment_decoded(self, line_number: int, iban: str) -> None:
        """Registra una línea decodificada con éxito."""
        ...

    @abstractmethod
    def log_error(self, line_number: int, error: Exception) -> None:
        """Registra una línea que no se pudo decodificar."""
        ...

    @abstractmethod
    def log_report_written(self, output_path: Path) -> None:
        """Registra que se generó el reporte de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'pagos_decodificados': int,
                'lineas_con_error': int,
                'advertencias': int,
                'errores': List[dict],  # [{linea, error}]
            }
        """
        ...
