"""
Tests para spayd.domain.services.encoder
"""

import pytest

from spayd.domain.services.builder import build_spayd
from spayd.domain.services.decoder import decode
from spayd.domain.services.encoder import canonical_form, encode, encode_segments
from spayd.domain.shared.crc32 import crc32_hex

IBAN = "CZ9106000000000000000123"


@pytest.fixture
def tmobile():
    return build_spayd(
        "CZ0608000000192235210247",
        alt_accounts=["CZ9003000000192235210247", "CZ4601000000192235210247"],
        amount="399.00",
        currency="CZK",
        message="T-Mobile - QR platba123áé ‰*",
        recipient="T-Mobile Czech Republic a.s.",
        vs="1113334445",
        ss="11",
    )


@pytest.fixture
def full_payment():
    return build_spayd(
        f"{IBAN}+KOMBCZPP",
        alt_accounts=["CZ2507100077200077628461+CNBACZPP", "DE89370400440532013000"],
        amount="1234.5",
        currency="EUR",
        due_date="20241231",
        message="Faktura 2024/001: 50% + DPH *zboží*",
        notification_type="E",
        notification_address="platby@example.com",
        payment_type="IP",
        sender_reference="1234567890123456",
        recipient="Příliš žluťoučký kůň",
        vs="2024001",
        ss="42",
        ks="0308",
        retry_days=7,
        payment_id="ABC-123",
        url="https://example.com/pay?id=1&x=%41",
        custom_attributes={"X-FOO": "bar*baz", "X-A": "1"},
    )


class TestEncode:
    def test_ejemplo_basico(self):
        payment = decode(f"SPD*1.0*ACC:{IBAN}*AM:450")
        assert encode(payment) == f"SPD*1.0*ACC:{IBAN}*AM:450.00*"

    def test_ejemplo_con_build_spayd(self):
        assert encode(build_spayd(IBAN, amount="450")) == f"SPD*1.0*ACC:{IBAN}*AM:450.00*"

    def test_factura_real(self, tmobile):
        expected = (
            "SPD*1.0*ACC:CZ0608000000192235210247"
            "*ALT-ACC:CZ9003000000192235210247,CZ4601000000192235210247"
            "*AM:399.00*CC:CZK*MSG:T-Mobile - QR platba123%C3%A1%C3%A9 %E2%80%B0%2A"
            "*RN:T-Mobile Czech Republic a.s.*X-VS:1113334445*X-SS:11*"
        )
        assert encode(tmobile) == expected

    def test_factura_real_para_qr(self, tmobile):
        expected = (
            "SPD*1.0*ACC:CZ0608000000192235210247"
            "*ALT-ACC:CZ9003000000192235210247,CZ4601000000192235210247"
            "*AM:399.00*CC:CZK*MSG:T-MOBILE - QR PLATBA123%C3%81%C3%89 %E2%80%B0%2A"
            "*RN:T-MOBILE CZECH REPUBLIC A.S.*X-VS:1113334445*X-SS:11*"
        )
        assert encode(tmobile, optimize_for_qr=True) == expected

    def test_siempre_termina_en_asterisco(self, full_payment):
        assert encode(full_payment).endswith("*")
        assert encode(full_payment, optimize_for_qr=True).endswith("*")

    def test_personalizados_al_final_en_orden(self, full_payment):
        assert encode(full_payment).endswith("*X-URL:https://example.com/pay?id=1&x=%2541*X-FOO:bar%2Abaz*X-A:1*")

    def test_iban_bic_no_escapa_el_mas(self, full_payment):
        text = encode(full_payment)
        assert text.startswith(f"SPD*1.0*ACC:{IBAN}+KOMBCZPP*")
        assert "ALT-ACC:CZ2507100077200077628461+CNBACZPP,DE89370400440532013000*" in text

    def test_orden_de_atributos(self, full_payment):
        keys = [segment.partition(":")[0] for segment in encode_segments(full_payment)]
        assert keys == [
            "ACC", "ALT-ACC", "AM", "CC", "DT", "MSG", "NT", "NTA", "PT", "RF", "RN",
            "X-VS", "X-SS", "X-KS", "X-PER", "X-ID", "X-URL", "X-FOO", "X-A",
        ]


class TestRoundTrip:
    def test_decode_encode(self, full_payment):
        assert decode(encode(full_payment)) == full_payment

    def test_decode_encode_qr_conserva_lo_que_no_es_texto(self, full_payment):
        payment = decode(encode(full_payment, optimize_for_qr=True))
        assert payment.account == full_payment.account
        assert payment.amount == full_payment.amount
        assert payment.due_date == full_payment.due_date
        assert payment.message.value == full_payment.message.value.upper()

    def test_texto_normalizado_es_estable(self, tmobile):
        text = encode(tmobile)
        assert encode(decode(text)) == text


class TestCrc32:
    def test_se_inserta_despues_de_cc(self, full_payment):
        keys = [segment.partition(":")[0] for segment in encode(full_payment, include_crc32=True)[8:-1].split("*")]
        assert keys[:6] == ["ACC", "ALT-ACC", "AM", "CC", "CRC32", "DT"]

    def test_sin_cc_va_despues_de_acc(self):
        payment = decode(f"SPD*1.0*ACC:{IBAN}*MSG:ahoj")
        text = encode(payment, include_crc32=True)
        assert text.startswith(f"SPD*1.0*ACC:{IBAN}*CRC32:")
        assert text.endswith("*MSG:ahoj*")

    def test_valor_es_crc_de_la_forma_canonica(self, full_payment):
        text = encode(full_payment, include_crc32=True)
        crc = text.split("*CRC32:")[1][:8]
        assert crc == crc32_hex(canonical_form(encode_segments(full_payment)))

    def test_round_trip_con_crc32(self, full_payment, memory_logger):
        text = encode(full_payment, include_crc32=True)
        assert decode(text, logger=memory_logger) == full_payment
        assert memory_logger.crc32_mismatches == []


class TestCanonicalForm:
    def test_ordena_por_clave_y_valor(self):
        segments = ["X-B:2", "CC:CZK", "ACC:CZ9106000000000000000123", "AM:1.00"]
        assert canonical_form(segments) == "SPD*1.0*ACC:CZ9106000000000000000123*AM:1.00*CC:CZK*X-B:2"

    def test_no_depende_del_orden_de_entrada(self):
        segments = ["MSG:a", "ACC:CZ9106000000000000000123", "AM:1.00"]
        assert canonical_form(segments) == canonical_form(reversed(segments))

    def test_version(self):
        assert canonical_form(["ACC:X"], version="2.0") == "SPD*2.0*ACC:X"
