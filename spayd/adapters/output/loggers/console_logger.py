"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con un
formato consistente y lleva los contadores para el resumen final.

Útil para:
- Ejecución manual desde terminal (CLI `spayd`).
- Depurar textos SPAYD que generan advertencias.
"""

from pathlib import Path

from spayd.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de procesamiento a consola."""

    def __init__(self) -> None:
        self._archivos_recibidos: int = 0
        self._pagos_decodificados: int = 0
        self._advertencias: int = 0
        self._errores: list[dict] = []

    # --- Advertencias del decodificador ---

    def log_suspicious_key(self, index: int, key: str) -> None:
        self._advertencias += 1
        print(f"  ⚠️  Clave sospechosa en el índice {index}: '{key}' contiene '--'")

    def log_unsupported_version(self, version: str) -> None:
        self._advertencias += 1
        print(f"  ⚠️  Versión SPAYD {version} no soportada, se decodifica como 1.0")

    def log_crc32_mismatch(self, expected: str, actual: str) -> None:
        self._advertencias += 1
        print(f"  ⚠️  CRC32 no coincide: recibido: {expected}, calculado: {actual}")

    # --- Procesamiento por lotes ---

    def log_file_received(self, file_path: Path) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name}")

    def log_payment_decoded(self, line_number: int, iban: str) -> None:
        self._pagos_decodificados += 1
        print(f"  ✅ Línea {line_number}: {iban}")

    def log_error(self, line_number: int, error: Exception) -> None:
        self._errores.append({"linea": line_number, "error": str(error)})
        print(f"  ❌ Línea {line_number}: {error}")

    def log_report_written(self, output_path: Path) -> None:
        print(f"  📁 Reporte generado: {output_path}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "pagos_decodificados": self._pagos_decodificados,
            "lineas_con_error": len(self._errores),
            "advertencias": self._advertencias,
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        print("\n" + "=" * 60)
        print("RESUMEN DE PROCESAMIENTO")
        print("=" * 60)
        print(f"  Archivos recibidos:   {self._archivos_recibidos}")
        print(f"  Pagos decodificados:  {self._pagos_decodificados}")
        print(f"  Líneas con error:     {len(self._errores)}")
        print(f"  Advertencias:         {self._advertencias}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - Línea {err['linea']}: {err['error']}")

        print("=" * 60)
