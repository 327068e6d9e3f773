"""
Modelo de dominio: atributo personalizado.

Cualquier clave que empiece con 'X-' y no sea una de las extensiones checas
conocidas (X-VS, X-SS, X-KS, X-PER, X-ID, X-URL) se conserva tal cual, en el
orden en que apareció.
"""

from dataclasses import dataclass

from spayd.domain.exceptions import AttributeValidationError
from spayd.domain.models.keys import (
    CUSTOM_KEY_PREFIX,
    KEY_CHARSET,
    RESERVED_EXTENSION_KEYS,
)
from spayd.domain.shared.percent_codec import percent_encode


@dataclass(frozen=True)
class CustomAttribute:
    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.startswith(CUSTOM_KEY_PREFIX):
            raise AttributeValidationError(
                f"Custom attribute key '{self.key}' must start with '{CUSTOM_KEY_PREFIX}'."
            )
        if any(char not in KEY_CHARSET for char in self.key):
            raise AttributeValidationError(
                f"Custom attribute key '{self.key}' may only contain [A-Z-]."
            )
        if self.key in RESERVED_EXTENSION_KEYS:
            raise AttributeValidationError(
                f"Custom attribute key '{self.key}' collides with a reserved extension key."
            )
        if not isinstance(self.value, str):
            raise AttributeValidationError("Custom attribute value must be a string.", key=self.key)
        object.__setattr__(self, "value", self.value.strip())

    def to_spayd(self, optimize_for_qr: bool = False) -> str:
        """Segmento completo "CLAVE:valor" (la clave nunca se escapa)."""
        return f"{self.key}:{percent_encode(self.value, optimize_for_qr)}"
