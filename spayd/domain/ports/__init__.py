"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from spayd.domain.ports import OutputWriter, ProcessLogger
"""

from spayd.domain.ports.output_writer import OutputWriter
from spayd.domain.ports.process_logger import ProcessLogger

__all__ = [
    "OutputWriter",
    "ProcessLogger",
]
