"""
Tests para spayd.domain.models.due_date
"""

from datetime import date

import pytest

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.due_date import DueDate


class TestDueDateFromString:
    def test_fecha_valida(self):
        assert DueDate.from_string("20241231").value == date(2024, 12, 31)

    def test_29_de_febrero_bisiesto(self):
        assert DueDate.from_string("20240229").value == date(2024, 2, 29)

    def test_29_de_febrero_no_bisiesto(self):
        with pytest.raises(AttributeValidationError, match="Invalid day of month: 29"):
            DueDate.from_string("20230229")

    def test_dia_cero(self):
        with pytest.raises(AttributeValidationError, match="Invalid day of month: 0"):
            DueDate.from_string("20240100")

    def test_31_de_abril(self):
        with pytest.raises(AttributeValidationError, match="Invalid day of month: 31"):
            DueDate.from_string("20240431")

    @pytest.mark.parametrize("month", ["00", "13"])
    def test_mes_invalido(self, month):
        with pytest.raises(AttributeValidationError, match="between 1 and 12"):
            DueDate.from_string(f"2024{month}01")

    def test_anio_irrazonable(self):
        with pytest.raises(AttributeValidationError, match="Unreasonable year: 1899"):
            DueDate.from_string("18991231")

    @pytest.mark.parametrize("raw", ["2024011", "202401011", "2024-01-01", "", "2024O101"])
    def test_no_son_8_digitos(self, raw):
        with pytest.raises(AttributeValidationError, match="exactly 8 digits") as exc_info:
            DueDate.from_string(raw)
        assert exc_info.value.key == "DT"


class TestDueDate:
    def test_to_spayd(self):
        assert DueDate(date(2024, 3, 5)).to_spayd() == "20240305"

    def test_str_iso(self):
        assert str(DueDate(date(2024, 2, 29))) == "2024-02-29"

    def test_anio_minimo_en_constructor(self):
        with pytest.raises(AttributeValidationError, match="Unreasonable year"):
            DueDate(date(1899, 1, 1))

    def test_requiere_date(self):
        with pytest.raises(AttributeValidationError, match="must be a date"):
            DueDate("20240101")
