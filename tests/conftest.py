"""
Fixtures compartidas.

MemoryLogger es la implementación de ProcessLogger para tests: acumula los
eventos en listas para poder hacer asserts sobre ellos.
"""

from pathlib import Path

import pytest

from spayd.domain.ports.process_logger import ProcessLogger


class MemoryLogger(ProcessLogger):
    def __init__(self) -> None:
        self.suspicious_keys: list[tuple[int, str]] = []
        self.versions: list[str] = []
        self.crc32_mismatches: list[tuple[str, str]] = []
        self.files: list[Path] = []
        self.decoded: list[tuple[int, str]] = []
        self.errors: list[tuple[int, Exception]] = []
        self.reports: list[Path] = []

    def log_suspicious_key(self, index: int, key: str) -> None:
        self.suspicious_keys.append((index, key))

    def log_unsupported_version(self, version: str) -> None:
        self.versions.append(version)

    def log_crc32_mismatch(self, expected: str, actual: str) -> None:
        self.crc32_mismatches.append((expected, actual))

    def log_file_received(self, file_path: Path) -> None:
        self.files.append(file_path)

    def log_payment_decoded(self, line_number: int, iban: str) -> None:
        self.decoded.append((line_number, iban))

    def log_error(self, line_number: int, error: Exception) -> None:
        self.errors.append((line_number, error))

    def log_report_written(self, output_path: Path) -> None:
        self.reports.append(output_path)

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": len(self.files),
            "pagos_decodificados": len(self.decoded),
            "lineas_con_error": len(self.errors),
            "advertencias": len(self.suspicious_keys)
            + len(self.versions)
            + len(self.crc32_mismatches),
            "errores": [{"linea": n, "error": str(e)} for n, e in self.errors],
        }


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()
