"""
Tests para spayd.adapters.output.loggers.console_logger
"""

from pathlib import Path

from spayd.adapters.output.loggers.console_logger import ConsoleLogger
from spayd.domain.exceptions import MissingRequiredAttributeError


class TestConsoleLogger:
    def test_resumen(self, capsys):
        logger = ConsoleLogger()
        logger.log_file_received(Path("/tmp/pagos.txt"))
        logger.log_payment_decoded(1, "CZ9106000000000000000123")
        logger.log_suspicious_key(2, "X--A")
        logger.log_error(3, MissingRequiredAttributeError("ACC"))

        summary = logger.get_summary()
        assert summary["archivos_recibidos"] == 1
        assert summary["pagos_decodificados"] == 1
        assert summary["lineas_con_error"] == 1
        assert summary["advertencias"] == 1
        assert summary["errores"] == [
            {"linea": 3, "error": "Missing required attribute 'ACC'."}
        ]

        out = capsys.readouterr().out
        assert "pagos.txt" in out
        assert "X--A" in out

    def test_print_summary(self, capsys):
        logger = ConsoleLogger()
        logger.log_error(7, MissingRequiredAttributeError("ACC"))
        logger.print_summary()
        out = capsys.readouterr().out
        assert "RESUMEN DE PROCESAMIENTO" in out
        assert "Línea 7" in out
