"""
Cliente JOA (MuniRPC v2) para gateways IoT.

Módulos:
- protocol: header, reports, queue e composição do payload
- security: digest de integridade do payload
- transport: envio HTTP para o backoffice
- client: JOAClient, o ponto de entrada
"""

from joa.client import JOAClient
from joa.protocol import (
    ComposeResult,
    ErrorCode,
    HeaderAttributes,
    HeaderConfig,
    JOAError,
    PayloadError,
    TransmitResult,
    TransportError,
)
from joa.security.digest import digest

__all__ = [
    'JOAClient',
    'ComposeResult',
    'ErrorCode',
    'HeaderAttributes',
    'HeaderConfig',
    'JOAError',
    'PayloadError',
    'TransmitResult',
    'TransportError',
    'digest',
]
