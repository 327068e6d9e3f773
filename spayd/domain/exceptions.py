"""
Excepciones de dominio del proyecto spayd-codec.

Cada tipo de error del decodificador tiene su propia clase para que el
código que llama pueda distinguir, por ejemplo, un carácter fuera de
ISO-8859-1 de un IBAN con dígitos de control inválidos, sin parsear el
mensaje del error.

Jerarquía:
    SpaydError
    ├── CharsetError                    → Carácter fuera de ISO-8859-1
    ├── FormatError                     → Prefijo, separadores o escapes mal formados
    ├── InvalidKeyError                 → Clave con caracteres o prefijo no permitidos
    ├── DuplicateKeyError               → Claves repetidas (error agregado)
    ├── AttributeValidationError        → Valor inválido de un atributo
    │   └── ChecksumError               → Falla mod-97 (IBAN) o mod-11 (cuenta CZ)
    ├── ConsistencyError                → NT y NTA no aparecen juntos
    ├── MissingRequiredAttributeError   → Falta ACC
    ├── InputError                      → No se pudo leer un archivo de entrada
    └── OutputError                     → No se pudo escribir el reporte

Los mensajes de los errores de formato y validación están en inglés, con
la misma redacción que usan otras implementaciones de SPAYD.
"""


class SpaydError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class CharsetError(SpaydError):
    """El texto contiene un carácter por encima de U+00FF."""

    def __init__(self, index: int, char: str):
        self.index = index
        self.char = char
        super().__init__(
            f"Illegal character at index {index}. SPAYD requires ISO-8859-1 charset."
        )


class FormatError(SpaydError):
    """La estructura del texto no respeta la gramática SPAYD.

    Ejemplos:
    - Falta el prefijo 'SPD*1.0*'.
    - Un par clave-valor no tiene ':'.
    - Un '%' no va seguido de dos dígitos hexadecimales.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class InvalidKeyError(SpaydError):
    """La clave de un par contiene caracteres no permitidos o no es una
    clave predefinida ni empieza con 'X-'."""

    def __init__(self, index: int, key: str, detail: str):
        self.index = index
        self.key = key
        self.detail = detail
        super().__init__(detail)


class DuplicateKeyError(SpaydError):
    """Una o más claves aparecen varias veces.

    Se reportan TODAS las claves duplicadas con TODOS sus índices en un
    solo error, en lugar de fallar en la primera repetición.
    """

    def __init__(self, duplicates: dict[str, list[int]]):
        self.duplicates = duplicates
        details = "; ".join(
            f"{key}: at indexes {','.join(str(i) for i in indexes)}"
            for key, indexes in duplicates.items()
        )
        super().__init__(f"Duplicate keys: {details}")


class AttributeValidationError(SpaydError):
    """El valor de un atributo no cumple su regla de formato.

    `key` puede ser None cuando el tipo de valor se construye fuera del
    decodificador (por ejemplo `IBAN.from_string(...)` directo). El
    decodificador vuelve a lanzar el error con la clave usando `with_key`.
    """

    def __init__(self, reason: str, key: str | None = None):
        self.reason = reason
        self.key = key
        super().__init__(f"{key}: {reason}" if key else reason)

    def with_key(self, key: str) -> "AttributeValidationError":
        """Devuelve una copia del error con la clave del atributo."""
        if self.key is not None:
            return self
        return type(self)(self.reason, key=key)


class ChecksumError(AttributeValidationError):
    """Falló el dígito de control: mod-97 del IBAN o mod-11 de la cuenta CZ."""


class ConsistencyError(SpaydError):
    """Dos atributos relacionados no son coherentes entre sí (NT/NTA)."""


class MissingRequiredAttributeError(SpaydError):
    """Falta un atributo obligatorio. En SPAYD 1.0 solo ACC es obligatorio."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing required attribute '{key}'.")


class InputError(SpaydError):
    """No se pudo leer el archivo con los textos SPAYD.

    Esto puede pasar porque el archivo no existe, no hay permisos de
    lectura o no está codificado en UTF-8.
    """

    def __init__(self, path: str, cause: str):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading '{path}': {cause}")


class OutputError(SpaydError):
    """Falló la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - No hay pagos para escribir.
    """

    def __init__(self, path: str, cause: str):
        self.path = path
        self.cause = cause
        super().__init__(f"Error writing report to '{path}': {cause}")
