"""
Camada de protocolo MuniRPC v2.

Módulos:
- header: HeaderConfig e construção da linha de header
- reports: tipos de report (ZCL report, multi report, command, time)
- message_queue: queue de reports pendentes
- payload: composição do payload e inserção do hash
- errors: códigos de erro e resultados
"""

from joa.protocol.errors import (
    ErrorCode,
    JOAError,
    PayloadError,
    TransportError,
    Result,
    ComposeResult,
    TransmitResult,
)
from joa.protocol.header import HeaderAttributes, HeaderConfig, build_header
from joa.protocol.reports import (
    Report,
    ZCLReport,
    ZCLMultiReport,
    ZCLCommand,
    TimeIndication,
)
from joa.protocol.message_queue import MessageQueue
from joa.protocol.payload import PayloadComposer, compose_payload, hash_payload

__all__ = [
    'ErrorCode',
    'JOAError',
    'PayloadError',
    'TransportError',
    'Result',
    'ComposeResult',
    'TransmitResult',
    'HeaderAttributes',
    'HeaderConfig',
    'build_header',
    'Report',
    'ZCLReport',
    'ZCLMultiReport',
    'ZCLCommand',
    'TimeIndication',
    'MessageQueue',
    'PayloadComposer',
    'compose_payload',
    'hash_payload',
]
