"""
Servicio de dominio: Procesador de lotes de textos SPAYD.

Lee un archivo de texto con un SPAYD por línea (por ejemplo, lo que exporta
un lector de códigos QR) y devuelve los pagos decodificados.

Una línea inválida NO detiene el lote: se registra en la bitácora y se
sigue con la siguiente. Las líneas vacías se ignoran.
"""

from collections.abc import Iterable
from pathlib import Path

from spayd.domain.exceptions import InputError
from spayd.domain.models.decoded_payment import DecodedPayment
from spayd.domain.ports.process_logger import ProcessLogger
from spayd.domain.services.decoder import SpaydDecoder


class PaymentBatchProcessor:
    """Decodifica lotes de textos SPAYD.

    Recibe sus dependencias por constructor: no sabe si la bitácora
    imprime a consola o acumula en memoria.
    """

    def __init__(self, decoder: SpaydDecoder, logger: ProcessLogger) -> None:
        self._decoder = decoder
        self._logger = logger

    def process_file(self, file_path: Path) -> list[DecodedPayment]:
        """Decodifica todas las líneas de un archivo UTF-8.

        Raises:
            InputError: Si el archivo no se puede leer.
        """
        self._logger.log_file_received(file_path)
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(str(file_path), str(e)) from e

        return self.process_lines(content.splitlines(), source_name=file_path.name)

    def process_lines(
        self, lines: Iterable[str], source_name: str = "<memoria>"
    ) -> list[DecodedPayment]:
        """Decodifica una secuencia de líneas.

        Args:
            lines: Líneas de texto; cada una debe ser un SPAYD completo.
            source_name: Nombre del origen, para trazabilidad.

        Returns:
            Pagos decodificados, en el orden de las líneas.
        """
        payments = []
        for line_number, line in enumerate(lines, start=1):
            text = line.rstrip("\r\n")
            if not text.strip():
                continue

            result = self._decoder.try_decode(text)
            if not result.ok:
                self._logger.log_error(line_number, result.error)
                continue

            payment = result.payment
            self._logger.log_payment_decoded(line_number, payment.account.iban.value)
            payments.append(
                DecodedPayment(
                    line_number=line_number,
                    source_name=source_name,
                    payment=payment,
                )
            )
        return payments
