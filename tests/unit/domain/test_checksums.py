"""
Tests para spayd.domain.shared.checksums

Las cuentas de ejemplo son reales:
- 7720-77628461/0710 → CZ2507100077200077628461
- 19-2000145399/0800 → CZ6508000000192000145399 (ejemplo clásico de IBAN checo)
"""

import pytest

from spayd.domain.shared.checksums import (
    count_non_zero_digits,
    cz_iban_from_parts,
    cz_weighted_sum,
    iban_to_digits,
    is_valid_cz_account_part,
    is_valid_iban_checksum,
    mod97,
)


class TestCzWeightedSum:
    def test_numero_valido_es_multiplo_de_11(self):
        assert cz_weighted_sum("77628461", 10) == 275
        assert is_valid_cz_account_part("77628461", 10)

    def test_prefijo_valido(self):
        assert cz_weighted_sum("7720", 6) == 88
        assert is_valid_cz_account_part("7720", 6)

    def test_parte_vacia_suma_cero(self):
        assert cz_weighted_sum("", 6) == 0

    def test_ceros_a_la_izquierda_no_cambian_la_suma(self):
        assert cz_weighted_sum("0077628461", 10) == cz_weighted_sum("77628461", 10)

    @pytest.mark.parametrize("position", range(8))
    def test_cualquier_cambio_de_un_digito_se_detecta(self, position):
        """Los pesos 1..10 no son múltiplos de 11: un dígito cambiado
        siempre rompe la suma."""
        valid = "77628461"
        for digit in "0123456789":
            if digit == valid[position]:
                continue
            mutated = valid[:position] + digit + valid[position + 1 :]
            assert not is_valid_cz_account_part(mutated, 10), mutated

    def test_cuenta_digitos_distintos_de_cero(self):
        assert count_non_zero_digits("000000") == 0
        assert count_non_zero_digits("0102") == 2


class TestMod97:
    def test_ejemplo_iso(self):
        # GB82WEST12345698765432 reordenado
        assert mod97("3214282912345698765432161182") == 1

    def test_iban_to_digits_convierte_letras(self):
        assert iban_to_digits("CZ9106000000000000000123") == "06000000000000000123123591"

    def test_iban_valido(self):
        assert is_valid_iban_checksum("DE89370400440532013000")
        assert is_valid_iban_checksum("CZ9106000000000000000123")

    def test_iban_invalido(self):
        assert not is_valid_iban_checksum("DE89370400440532013001")


class TestCzIbanFromParts:
    def test_con_prefijo(self):
        assert cz_iban_from_parts("0710", "7720", "77628461") == "CZ2507100077200077628461"

    def test_ejemplo_clasico(self):
        assert cz_iban_from_parts("0800", "19", "2000145399") == "CZ6508000000192000145399"

    @pytest.mark.parametrize(
        "bank_code, prefix, number",
        [
            ("0710", "7720", "77628461"),
            ("0710", "721", "77628031"),
            ("0800", "19", "2000145399"),
            ("0800", "", "2000145399"),
            ("0300", "", "77628461"),
        ],
    )
    def test_iban_generado_siempre_pasa_mod97(self, bank_code, prefix, number):
        assert is_valid_iban_checksum(cz_iban_from_parts(bank_code, prefix, number))
