"""
Claves de atributo SPAYD 1.0.

Las claves predefinidas son las del estándar; las que empiezan con 'X-' son
extensiones. De las extensiones, las checas (X-VS, X-SS, ...) tienen un
significado fijo y se validan como atributos propios; el resto se guardan
como atributos personalizados.
"""

ACC = "ACC"
ALT_ACC = "ALT-ACC"
AM = "AM"
CC = "CC"
CRC32 = "CRC32"
DT = "DT"
MSG = "MSG"
NT = "NT"
NTA = "NTA"
PT = "PT"
RF = "RF"
RN = "RN"

X_VS = "X-VS"
X_SS = "X-SS"
X_KS = "X-KS"
X_PER = "X-PER"
X_ID = "X-ID"
X_URL = "X-URL"

CUSTOM_KEY_PREFIX = "X-"

PREDEFINED_KEYS = frozenset({ACC, ALT_ACC, AM, CC, CRC32, DT, MSG, NT, NTA, PT, RF, RN})

RESERVED_EXTENSION_KEYS = frozenset({X_VS, X_SS, X_KS, X_PER, X_ID, X_URL})

KEY_CHARSET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ-")
