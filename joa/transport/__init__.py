"""Transporte do payload para o backoffice."""

from joa.protocol.errors import TransportError
from joa.transport.http_transport import HttpTransport

__all__ = ['HttpTransport', 'TransportError']
