"""
Punto de entrada CLI: spayd.

Uso:
    # Ver los atributos de un texto SPAYD
    spayd decode "SPD*1.0*ACC:CZ9106000000000000000123*AM:450.00*CC:CZK*"

    # Volver a codificar en forma normalizada (opcionalmente para QR y con CRC32)
    spayd normalize "SPD*1.0*ACC:CZ9106000000000000000123*AM:450*" --qr --crc32

    # Convertir una cuenta checa a IBAN
    spayd iban 7720-77628461/0710

    # Decodificar un archivo con un SPAYD por línea y generar un Excel
    spayd report pagos.txt -o /ruta/salida/pagos.xlsx

Este módulo es el ÚNICO lugar donde se ensamblan los componentes concretos
(ConsoleLogger, ExcelWriter) con los servicios del dominio. No contiene
lógica de negocio.
"""

import argparse
import sys
from pathlib import Path

from spayd.adapters.output.loggers.console_logger import ConsoleLogger
from spayd.adapters.output.writers.excel_writer import ExcelWriter
from spayd.domain.exceptions import SpaydError
from spayd.domain.models.bank_account import CZBankAccount, IBAN
from spayd.domain.models.spayd import Spayd
from spayd.domain.services.batch_processor import PaymentBatchProcessor
from spayd.domain.services.decoder import SpaydDecoder
from spayd.domain.services.encoder import encode


def main(argv: list[str] | None = None) -> None:
    """Punto de entrada principal del CLI."""
    args = _parse_args(argv)

    try:
        args.handler(args)
    except SpaydError as e:
        print(f"❌ {e}")
        sys.exit(1)


def _cmd_decode(args: argparse.Namespace) -> None:
    logger = ConsoleLogger()
    payment = SpaydDecoder(logger).decode(args.text)
    _print_payment(payment)


def _cmd_normalize(args: argparse.Namespace) -> None:
    logger = ConsoleLogger()
    payment = SpaydDecoder(logger).decode(args.text)
    print(encode(payment, optimize_for_qr=args.qr, include_crc32=args.crc32))


def _cmd_iban(args: argparse.Namespace) -> None:
    iban = IBAN.generate(CZBankAccount.from_string(args.account))
    print(iban.readable() if args.readable else iban.value)


def _cmd_report(args: argparse.Namespace) -> None:
    input_path = Path(args.input_path)
    output_path = (
        Path(args.output) if args.output else input_path.with_name(f"pagos_{input_path.stem}.xlsx")
    )

    logger = ConsoleLogger()
    processor = PaymentBatchProcessor(SpaydDecoder(logger), logger)

    print("=" * 60)
    print("SPAYD REPORT")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_path}")
    print()

    payments = processor.process_file(input_path)
    if not payments:
        logger.print_summary()
        print("\n❌ No se decodificó ningún pago.")
        sys.exit(1)

    written = ExcelWriter().write(payments, output_path)
    logger.log_report_written(written)
    logger.print_summary()


def _print_payment(payment: Spayd) -> None:
    """Imprime los atributos presentes, uno por línea."""
    for field_name in payment.present_fields():
        value = getattr(payment, field_name)
        if field_name == "alt_accounts":
            value = ", ".join(str(account) for account in value)
        elif field_name == "custom_attributes":
            value = ", ".join(f"{a.key}={a.value}" for a in value)
        elif field_name == "notification_type":
            value = value.name
        print(f"  {field_name:<22} {value}")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="spayd",
        description="Decodificador y codificador de pagos SPAYD (Short Payment Descriptor)",
        epilog="Ejemplo: spayd decode 'SPD*1.0*ACC:CZ9106000000000000000123*'",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Muestra los atributos de un texto SPAYD")
    decode_parser.add_argument("text", help="Texto SPAYD completo")
    decode_parser.set_defaults(handler=_cmd_decode)

    normalize_parser = subparsers.add_parser(
        "normalize", help="Decodifica y vuelve a codificar un texto SPAYD"
    )
    normalize_parser.add_argument("text", help="Texto SPAYD completo")
    normalize_parser.add_argument(
        "--qr",
        action="store_true",
        help="Genera texto en mayúsculas apto para el modo alfanumérico de QR",
    )
    normalize_parser.add_argument(
        "--crc32", action="store_true", help="Incluye el atributo CRC32"
    )
    normalize_parser.set_defaults(handler=_cmd_normalize)

    iban_parser = subparsers.add_parser("iban", help="Convierte una cuenta checa a IBAN")
    iban_parser.add_argument("account", help="Cuenta en formato prefijo-número/banco")
    iban_parser.add_argument(
        "--readable", action="store_true", help="Imprime el IBAN en grupos de 4"
    )
    iban_parser.set_defaults(handler=_cmd_iban)

    report_parser = subparsers.add_parser(
        "report", help="Decodifica un archivo (un SPAYD por línea) y genera un Excel"
    )
    report_parser.add_argument("input_path", help="Archivo de texto UTF-8")
    report_parser.add_argument(
        "-o",
        "--output",
        dest="output",
        help="Ruta del Excel. Si no se especifica, se usa pagos_<archivo>.xlsx "
        "junto al archivo de entrada.",
    )
    report_parser.set_defaults(handler=_cmd_report)

    return parser.parse_args(argv)


if __name__ == "__main__":
    main()
