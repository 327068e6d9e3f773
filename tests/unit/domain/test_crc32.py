"""
Tests para spayd.domain.shared.crc32

Se compara contra zlib.crc32, que usa el mismo polinomio reflejado.
"""

import zlib

import pytest

from spayd.domain.shared.crc32 import (
    CRC32_TABLE,
    compute_crc32,
    crc32_hex,
    update_crc32,
)


class TestCrc32:
    def test_orang_utan(self):
        assert compute_crc32("Orang Utan".encode("utf-8")) == 0x385171D6

    def test_acepta_str(self):
        assert compute_crc32("Orang Utan") == 0x385171D6

    def test_vacio_es_cero(self):
        assert compute_crc32(b"") == 0

    def test_valor_de_control_estandar(self):
        assert compute_crc32(b"123456789") == 0xCBF43926

    def test_hex_en_mayusculas_y_8_digitos(self):
        assert crc32_hex("Orang Utan") == "385171D6"
        assert crc32_hex(b"") == "00000000"

    @pytest.mark.parametrize(
        "data",
        [b"a", b"SPD*1.0*ACC:CZ9106000000000000000123", "áé‰*".encode("utf-8"), bytes(range(256))],
    )
    def test_coincide_con_zlib(self, data):
        assert compute_crc32(data) == zlib.crc32(data)

    def test_registro_crudo_por_partes(self):
        """Procesar por partes con update_crc32 da el mismo resultado."""
        register = update_crc32(0xFFFFFFFF, b"Orang ")
        register = update_crc32(register, b"Utan")
        assert register ^ 0xFFFFFFFF == 0x385171D6

    def test_tabla_tiene_256_entradas(self):
        assert len(CRC32_TABLE) == 256
        assert CRC32_TABLE[0] == 0
        assert CRC32_TABLE[1] == 0x77073096
