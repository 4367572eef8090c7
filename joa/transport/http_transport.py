"""
Transporte HTTP para o backoffice.

Faz o POST do payload e devolve o corpo da resposta. Qualquer status
diferente de 200, ou falha de rede, é passado ao caller como
TransportError sem interpretação nem retry.
"""

from typing import Optional

import requests

from joa.protocol.errors import TransportError
from joa.utils.constants import (
    CONTENT_TYPE,
    DEFAULT_ENCODING,
    HTTP_STATUS_OK,
    HTTP_TIMEOUT_DEFAULT,
)
from joa.utils.logger import get_logger

logger = get_logger("http_transport")


class HttpTransport:
    """
    Transporte HTTP POST baseado em requests.

    Attributes:
        timeout: Timeout de cada pedido em segundos
    """

    def __init__(self, timeout: float = HTTP_TIMEOUT_DEFAULT,
                 session: Optional[requests.Session] = None):
        self.timeout = timeout
        self._session = session or requests.Session()

    def post(self, url: str, body: str) -> str:
        """
        Envia o payload para o backoffice.

        Args:
            url: URL do backoffice
            body: Payload JOA

        Returns:
            Corpo da resposta (status 200)

        Raises:
            TransportError: Status != 200 ou falha de rede
        """
        logger.debug(f"POST {url} ({len(body)} chars)")

        try:
            response = self._session.post(
                url,
                data=body.encode(DEFAULT_ENCODING),
                headers={"Content-Type": CONTENT_TYPE},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if response.status_code != HTTP_STATUS_OK:
            raise TransportError(response.reason or str(response.status_code),
                                 status=response.status_code)

        return response.text

    def close(self):
        """Fecha a sessão HTTP."""
        self._session.close()
