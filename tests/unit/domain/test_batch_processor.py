"""
Tests para spayd.domain.services.batch_processor

Usa MemoryLogger (tests/conftest.py) para verificar qué eventos se
registran sin imprimir a consola.
"""

import pytest

from spayd.domain.exceptions import InputError
from spayd.domain.services.batch_processor import PaymentBatchProcessor
from spayd.domain.services.decoder import SpaydDecoder

VALID_1 = "SPD*1.0*ACC:CZ9106000000000000000123*AM:450.00*CC:CZK*"
VALID_2 = "SPD*1.0*ACC:CZ2507100077200077628461*AM:10*CC:EUR*X-VS:42"
INVALID = "SPD*1.0*AM:100"


@pytest.fixture
def processor(memory_logger):
    return PaymentBatchProcessor(SpaydDecoder(memory_logger), memory_logger)


class TestProcessLines:
    def test_lineas_validas(self, processor, memory_logger):
        payments = processor.process_lines([VALID_1, VALID_2])
        assert [p.line_number for p in payments] == [1, 2]
        assert payments[0].source_name == "<memoria>"
        assert payments[1].payment.vs.value == "42"
        assert memory_logger.decoded == [
            (1, "CZ9106000000000000000123"),
            (2, "CZ2507100077200077628461"),
        ]

    def test_linea_invalida_no_detiene_el_lote(self, processor, memory_logger):
        payments = processor.process_lines([VALID_1, INVALID, VALID_2])
        assert [p.line_number for p in payments] == [1, 3]
        assert len(memory_logger.errors) == 1
        line_number, error = memory_logger.errors[0]
        assert line_number == 2
        assert "Missing required attribute 'ACC'" in str(error)

    def test_ignora_lineas_vacias(self, processor, memory_logger):
        payments = processor.process_lines(["", VALID_1, "   ", VALID_2 + "\r\n"])
        assert [p.line_number for p in payments] == [2, 4]
        assert memory_logger.errors == []

    def test_advertencias_del_decodificador_llegan_al_logger(self, processor, memory_logger):
        processor.process_lines(["SPD*1.1*ACC:CZ9106000000000000000123"])
        assert memory_logger.versions == ["1.1"]


class TestProcessFile:
    def test_lee_archivo(self, processor, memory_logger, tmp_path):
        input_file = tmp_path / "pagos.txt"
        input_file.write_text(f"{VALID_1}\n{INVALID}\n{VALID_2}\n", encoding="utf-8")

        payments = processor.process_file(input_file)

        assert len(payments) == 2
        assert all(p.source_name == "pagos.txt" for p in payments)
        assert memory_logger.files == [input_file]
        summary = memory_logger.get_summary()
        assert summary["pagos_decodificados"] == 2
        assert summary["lineas_con_error"] == 1

    def test_archivo_inexistente(self, processor, tmp_path):
        with pytest.raises(InputError, match="Error reading"):
            processor.process_file(tmp_path / "no_existe.txt")

    def test_archivo_no_utf8(self, processor, tmp_path):
        input_file = tmp_path / "latin1.txt"
        input_file.write_bytes(b"SPD*1.0*ACC:CZ9106000000000000000123*MSG:\xe1\xe9\xff\xfe")
        with pytest.raises(InputError):
            processor.process_file(input_file)
