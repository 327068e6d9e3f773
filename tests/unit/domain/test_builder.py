"""
Tests para spayd.domain.services.builder
"""

from datetime import date

import pytest

from spayd.domain.exceptions import (
    AttributeValidationError,
    ChecksumError,
    ConsistencyError,
    DuplicateKeyError,
    MissingRequiredAttributeError,
)
from spayd.domain.services.builder import build_spayd
from spayd.domain.services.decoder import decode

IBAN = "CZ9106000000000000000123"


class TestBuildSpayd:
    def test_equivale_a_decodificar(self):
        built = build_spayd(IBAN, amount="450", currency="czk", vs="1234567890")
        assert built == decode(f"SPD*1.0*ACC:{IBAN}*AM:450.00*CC:CZK*X-VS:1234567890*")

    def test_cuenta_vacia(self):
        with pytest.raises(MissingRequiredAttributeError):
            build_spayd("")

    def test_iban_con_espacios(self):
        assert build_spayd("CZ91 0600 0000 0000 0000 0123").account.iban.value == IBAN

    def test_iban_invalido(self):
        with pytest.raises(ChecksumError, match="ACC: "):
            build_spayd("CZ9106000000000000000124")

    def test_fecha_como_date(self):
        payment = build_spayd(IBAN, due_date=date(2024, 12, 31))
        assert payment.due_date.to_spayd() == "20241231"

    def test_dias_de_reintento_como_entero(self):
        assert build_spayd(IBAN, retry_days=30).retry_days.days == 30

    def test_dias_de_reintento_fuera_de_rango(self):
        with pytest.raises(AttributeValidationError, match="X-PER: "):
            build_spayd(IBAN, retry_days=31)

    def test_cuentas_alternativas_como_lista_o_texto(self):
        as_list = build_spayd(IBAN, alt_accounts=["CZ2507100077200077628461", "DE89370400440532013000"])
        as_text = build_spayd(IBAN, alt_accounts="CZ2507100077200077628461,DE89370400440532013000")
        assert as_list == as_text
        assert len(as_list.alt_accounts) == 2

    def test_simbolo_invalido_lleva_la_clave(self):
        with pytest.raises(AttributeValidationError, match="X-SS: Payment symbol must contain only digits"):
            build_spayd(IBAN, ss="12-3")

    def test_nt_sin_nta(self):
        with pytest.raises(ConsistencyError):
            build_spayd(IBAN, notification_type="P")

    def test_atributos_personalizados_como_dict(self):
        payment = build_spayd(IBAN, custom_attributes={"X-B": "2", "X-A": "1"})
        assert [a.key for a in payment.custom_attributes] == ["X-B", "X-A"]

    def test_atributos_personalizados_duplicados(self):
        with pytest.raises(DuplicateKeyError):
            build_spayd(IBAN, custom_attributes=[("X-A", "1"), ("X-A", "2")])

    def test_clave_personalizada_reservada(self):
        with pytest.raises(AttributeValidationError, match="reserved"):
            build_spayd(IBAN, custom_attributes={"X-VS": "1"})
