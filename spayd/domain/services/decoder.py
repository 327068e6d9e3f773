"""
Servicio de dominio: Decodificador SPAYD.

Convierte el texto leído de un código QR en un registro Spayd inmutable.
Una sola pasada, sin retroceso:

1. Todos los caracteres deben estar en ISO-8859-1 (<= U+00FF).
2. El texto debe empezar con 'SPD*<mayor>.<menor>*' y tener contenido.
3. Se ignora UN '*' final (muchos generadores lo omiten, otros no).
4. El resto se separa por '*' en pares 'CLAVE:valor' (solo el primer ':'
   separa; el valor puede contener más ':').
5. Las claves predefinidas se aceptan tal cual (CRC32 lleva dígitos). Las
   demás solo admiten A-Z y '-' y deben empezar con 'X-'. Una clave con '--'
   es válida pero se reporta como advertencia.
6. Los valores se decodifican de '%XX'.
7. Si alguna clave se repite, se lanza UN error con todas las claves
   repetidas y todos sus índices. No se elige un "ganador".
8. Cada valor se valida con su tipo; las claves 'X-' desconocidas se
   guardan como atributos personalizados en orden de aparición.
9. ACC es obligatorio y NT/NTA deben venir juntos.

Salvo el caso de claves duplicadas, los errores se lanzan en cuanto se
encuentran y nunca se devuelve un registro parcial.
"""

import re
from collections import defaultdict
from dataclasses import dataclass

from spayd.domain.exceptions import (
    AttributeValidationError,
    CharsetError,
    DuplicateKeyError,
    FormatError,
    InvalidKeyError,
    MissingRequiredAttributeError,
    SpaydError,
)
from spayd.domain.models import keys
from spayd.domain.models.custom_attribute import CustomAttribute
from spayd.domain.models.decode_result import DecodeResult
from spayd.domain.models.spayd import SPAYD_VERSION, Spayd
from spayd.domain.ports.process_logger import ProcessLogger
from spayd.domain.services.attributes import ATTRIBUTES_BY_KEY, parse_attribute
from spayd.domain.services.encoder import canonical_form
from spayd.domain.shared.crc32 import crc32_hex
from spayd.domain.shared.percent_codec import percent_decode

MISSING_PREFIX_MESSAGE = "Missing required prefix 'SPD*{VERSION}*'"

_MAX_ISO_8859_1 = "\u00ff"
_PREFIX_RE = re.compile(r"SPD\*([0-9]+\.[0-9]+)\*.+", re.DOTALL)
_CRC32_VALUE_RE = re.compile(r"[0-9A-Fa-f]{8}")


@dataclass(frozen=True)
class _Entry:
    """Par clave-valor ya tokenizado."""

    index: int
    key: str
    raw_value: str
    value: str

    @property
    def raw_segment(self) -> str:
        return f"{self.key}:{self.raw_value}"


class SpaydDecoder:
    """Decodifica textos SPAYD.

    Recibe la bitácora por constructor. Sin bitácora, las advertencias
    (clave con '--', versión desconocida, CRC32 que no coincide) se
    descartan.
    """

    def __init__(self, logger: ProcessLogger | None = None) -> None:
        self._logger = logger

    def decode(self, text: str) -> Spayd:
        """Decodifica un texto SPAYD.

        Args:
            text: Texto tal como se leyó del código QR.

        Returns:
            Registro Spayd validado.

        Raises:
            CharsetError, FormatError, InvalidKeyError, DuplicateKeyError,
            AttributeValidationError, ChecksumError, ConsistencyError,
            MissingRequiredAttributeError: según la primera regla que falle.
        """
        self._check_charset(text)

        match = _PREFIX_RE.fullmatch(text)
        if match is None:
            raise FormatError(MISSING_PREFIX_MESSAGE)
        version = match.group(1)
        if version != SPAYD_VERSION and self._logger is not None:
            self._logger.log_unsupported_version(version)

        body = text[len(f"SPD*{version}*") :]
        if body.endswith("*"):
            body = body[:-1]

        entries = [
            self._tokenize(index, segment)
            for index, segment in enumerate(body.split("*"))
        ]
        self._check_duplicates(entries)
        return self._assemble(entries, version)

    def try_decode(self, text: str) -> DecodeResult:
        """Como `decode`, pero devuelve el error en lugar de lanzarlo.

        Ejemplos:
            >>> result = SpaydDecoder().try_decode("SPD*1.0*AM:100")
            >>> result.ok, result.error_kind
            (False, 'MissingRequiredAttributeError')
        """
        try:
            return DecodeResult(payment=self.decode(text))
        except SpaydError as e:
            return DecodeResult(error=e)

    # =================================================================
    # PASOS INTERNOS
    # =================================================================

    @staticmethod
    def _check_charset(text: str) -> None:
        for index, char in enumerate(text):
            if char > _MAX_ISO_8859_1:
                raise CharsetError(index, char)

    def _tokenize(self, index: int, segment: str) -> _Entry:
        if not segment:
            raise FormatError(f"Empty key-value pair at index {index}.")

        key, separator, raw_value = segment.partition(":")
        if not separator:
            raise FormatError(
                f"Invalid key-value pair at index {index}: missing ':' delimiter."
            )
        self._check_key(index, key)

        try:
            value = percent_decode(raw_value)
        except FormatError as e:
            raise AttributeValidationError(e.detail, key=key) from e

        return _Entry(index=index, key=key, raw_value=raw_value, value=value)

    def _check_key(self, index: int, key: str) -> None:
        # Las claves predefinidas pueden tener dígitos (CRC32).
        if key in keys.PREDEFINED_KEYS:
            return

        for char_index, char in enumerate(key):
            if char not in keys.KEY_CHARSET:
                raise InvalidKeyError(
                    index,
                    key,
                    f"Key-value at index {index} contains illegal character "
                    f"'{char}' at index {char_index}. Allowed key characters: [A-Z-]",
                )

        if not key.startswith(keys.CUSTOM_KEY_PREFIX):
            raise InvalidKeyError(index, key, "Custom keys must start with 'X-'.")

        # Permitido por el estándar, pero casi siempre es un error de tipeo.
        if "--" in key and self._logger is not None:
            self._logger.log_suspicious_key(index, key)

    @staticmethod
    def _check_duplicates(entries: list[_Entry]) -> None:
        indexes_by_key: dict[str, list[int]] = defaultdict(list)
        for entry in entries:
            indexes_by_key[entry.key].append(entry.index)

        duplicates = {key: idx for key, idx in indexes_by_key.items() if len(idx) > 1}
        if duplicates:
            raise DuplicateKeyError(duplicates)

    def _assemble(self, entries: list[_Entry], version: str) -> Spayd:
        values = {}
        custom_attributes = []

        for entry in entries:
            if entry.key == keys.CRC32:
                self._verify_crc32(entry, entries, version)
                continue

            spec = ATTRIBUTES_BY_KEY.get(entry.key)
            if spec is not None:
                values[spec.field_name] = parse_attribute(spec, entry.value)
            else:
                custom_attributes.append(CustomAttribute(entry.key, entry.value))

        if "account" not in values:
            raise MissingRequiredAttributeError(keys.ACC)

        return Spayd(**values, custom_attributes=tuple(custom_attributes))

    def _verify_crc32(self, crc_entry: _Entry, entries: list[_Entry], version: str) -> None:
        if not _CRC32_VALUE_RE.fullmatch(crc_entry.value):
            raise AttributeValidationError(
                "CRC32 must be exactly 8 hexadecimal digits.", key=keys.CRC32
            )
        if self._logger is None:
            return

        expected = crc_entry.value.upper()
        actual = crc32_hex(
            canonical_form(
                (entry.raw_segment for entry in entries if entry.key != keys.CRC32),
                version,
            )
        )
        if expected != actual:
            self._logger.log_crc32_mismatch(expected, actual)


def decode(text: str, logger: ProcessLogger | None = None) -> Spayd:
    """Atajo para `SpaydDecoder(logger).decode(text)`."""
    return SpaydDecoder(logger).decode(text)


def try_decode(text: str, logger: ProcessLogger | None = None) -> DecodeResult:
    """Atajo para `SpaydDecoder(logger).try_decode(text)`."""
    return SpaydDecoder(logger).try_decode(text)
