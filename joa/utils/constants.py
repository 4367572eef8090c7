"""
Constantes globais do cliente JOA (MuniRPC v2).

Define o prefixo do protocolo, caracteres especiais, message types,
valores default dos reports, configurações default, etc.
"""

# ============================================================================
# Protocolo
# ============================================================================

# Prefixo protocolo+versão que inicia cada payload (não configurável)
PROTOCOL_VERSION = "MuniRPCv2:"

# Caracteres especiais usados pelo protocolo
TAB = "\u0009"
EOL = "\u000A"

# ============================================================================
# Header Attributes
# ============================================================================

# Ordem fixa do schema de atributos do header (não a ordem do caller)
ATTR_VENDOR = "vendor"
ATTR_HASH = "hash"
ATTR_SECRET = "secret"
ATTR_TIME = "time"

HEADER_ATTRIBUTE_ORDER = (ATTR_VENDOR, ATTR_HASH, ATTR_SECRET, ATTR_TIME)

# ============================================================================
# Message Types
# ============================================================================

class MessageType:
    """Tipos de mensagens do protocolo JOA."""
    ZCL_REPORT = 0
    ZCL_MULTI_REPORT = 1
    ZCL_COMMAND = 2
    TAZ_FRAME = 3           # Sem construtor, apenas declarado
    TIME_INDICATION = "t"

    @staticmethod
    def to_string(msg_type) -> str:
        """Converte tipo de mensagem para string."""
        mapping = {
            0: "ZCL_REPORT",
            1: "ZCL_MULTI_REPORT",
            2: "ZCL_COMMAND",
            3: "TAZ_FRAME",
            "t": "TIME_INDICATION",
        }
        return mapping.get(msg_type, f"UNKNOWN({msg_type!r})")

# ============================================================================
# Report Defaults
# ============================================================================

DEFAULT_ENDPOINT_ID = "0x0a"
DEFAULT_PROFILE_ID = "0xf100"

# ============================================================================
# Transport
# ============================================================================

HTTP_STATUS_OK = 200
HTTP_TIMEOUT_DEFAULT = 30  # segundos
CONTENT_TYPE = "text/plain; charset=utf-8"

# ============================================================================
# Paths
# ============================================================================

DEFAULT_LOGS_DIR = "./logs"

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL_DEBUG = "DEBUG"
LOG_LEVEL_INFO = "INFO"
LOG_LEVEL_WARNING = "WARNING"
LOG_LEVEL_ERROR = "ERROR"

# ============================================================================
# Misc
# ============================================================================

DEFAULT_ENCODING = "utf-8"
