"""
Adaptador de salida: Escritor de Excel.

Genera un archivo Excel con 2 hojas:
- Hoja 1 (Resumen): cantidad de pagos e importe total por moneda.
- Hoja 2 (Pagos): una fila por pago decodificado.

Los pagos sin moneda se agrupan bajo "(sin moneda)" y los pagos sin importe
cuentan en la cantidad pero suman 0.
"""

from pathlib import Path

import pandas as pd

from spayd.domain.exceptions import OutputError
from spayd.domain.models.decoded_payment import DecodedPayment
from spayd.domain.ports.output_writer import OutputWriter

NO_CURRENCY = "(sin moneda)"


class ExcelWriter(OutputWriter):
    """Genera reportes Excel de pagos decodificados."""

    def write(self, payments: list[DecodedPayment], output_path: Path) -> Path:
        """Escribe el reporte.

        Args:
            payments: Pagos decodificados.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        if not payments:
            raise OutputError(str(output_path), "No hay pagos para escribir")

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        df_resumen, df_pagos = self.build_frames(payments)
        try:
            self._escribir_excel(df_resumen, df_pagos, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    @staticmethod
    def build_frames(payments: list[DecodedPayment]) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Construye los DataFrames de las hojas Resumen y Pagos."""
        filas_pagos = []
        for decoded in payments:
            pago = decoded.payment
            filas_pagos.append(
                {
                    "Archivo": decoded.source_name,
                    "Línea": decoded.line_number,
                    "IBAN": pago.account.iban.value,
                    "BIC": pago.account.bic.value if pago.account.bic else "",
                    "Importe": float(pago.amount.decimal) if pago.amount else 0.0,
                    "Moneda": pago.currency.code if pago.currency else NO_CURRENCY,
                    "Vencimiento": pago.due_date.value if pago.due_date else None,
                    "VS": pago.vs.value if pago.vs else "",
                    "SS": pago.ss.value if pago.ss else "",
                    "KS": pago.ks.value if pago.ks else "",
                    "Destinatario": pago.recipient.value if pago.recipient else "",
                    "Mensaje": pago.message.value if pago.message else "",
                }
            )

        df_pagos = pd.DataFrame(filas_pagos)

        df_resumen = (
            df_pagos.groupby("Moneda", sort=True)
            .agg(**{"Num Pagos": ("IBAN", "count"), "Total": ("Importe", "sum")})
            .reset_index()
        )

        return df_resumen, df_pagos

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    @staticmethod
    def _escribir_excel(
        df_resumen: pd.DataFrame, df_pagos: pd.DataFrame, output_path: Path
    ) -> None:
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_pagos.to_excel(writer, index=False, sheet_name="Pagos")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_pagos = writer.sheets["Pagos"]

            # Texto para no perder ceros iniciales en símbolos y cuentas
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})
            date_format = workbook.add_format({"num_format": "dd/mm/yyyy"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 14)  # Moneda
            ws_resumen.set_column("B:B", 12)  # Num Pagos
            ws_resumen.set_column("C:C", 18, money_format)  # Total

            # --- Formato Hoja Pagos ---
            ws_pagos.set_column("A:A", 24)  # Archivo
            ws_pagos.set_column("B:B", 8)  # Línea
            ws_pagos.set_column("C:C", 30, text_format)  # IBAN
            ws_pagos.set_column("D:D", 13, text_format)  # BIC
            ws_pagos.set_column("E:E", 15, money_format)  # Importe
            ws_pagos.set_column("F:F", 14)  # Moneda
            ws_pagos.set_column("G:G", 12, date_format)  # Vencimiento
            ws_pagos.set_column("H:J", 12, text_format)  # VS/SS/KS
            ws_pagos.set_column("K:K", 35)  # Destinatario
            ws_pagos.set_column("L:L", 60)  # Mensaje
