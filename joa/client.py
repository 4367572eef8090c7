"""
Cliente JOA - ponto de entrada para comunicar com o backoffice.

Cada instância tem o seu próprio URL, header e queue, de modo que vários
gateways podem coexistir no mesmo processo. Header e queue são protegidos
por um único lock: compose() vê sempre um snapshot consistente dos dois.
"""

import threading
from typing import Any, Mapping, Optional, Sequence, Union

from joa.protocol.errors import (
    ComposeResult,
    ErrorCode,
    TransmitResult,
    TransportError,
)
from joa.protocol.header import HeaderConfig
from joa.protocol.message_queue import MessageQueue
from joa.protocol.payload import PayloadComposer
from joa.protocol.reports import (
    Report,
    TimeIndication,
    ZCLCommand,
    ZCLMultiReport,
    ZCLReport,
)
from joa.transport.http_transport import HttpTransport
from joa.utils.logger import get_logger

logger = get_logger("client")


class JOAClient:
    """
    Cliente de um gateway MuniRPC v2.

    Exemplo:
        client = JOAClient("https://joa3.munisense.net/debug/")
        client.headers({
            "attribute": {"vendor": "androidnode", "time": True},
            "gatewayIdentifier": "10.32.16.1",
        })
        client.add_zcl_report("f104:00ff:0000:0001", None, None,
                              "0x0402", "0x0000", "0x20", 1474552384381, "1")
        result = client.post()
    """

    def __init__(self, url: Optional[str] = None, transport=None):
        """
        Inicializa o cliente.

        Args:
            url: URL do backoffice
            transport: Objeto com post(url, body) -> str (default: HttpTransport)
        """
        self._url = url
        self._header = HeaderConfig()
        self._queue = MessageQueue()
        self.transport = transport if transport is not None else HttpTransport()

        # Estado (header + queue)
        self._lock = threading.Lock()
        # Uma transmissão de cada vez
        self._post_lock = threading.Lock()

    # ========================================================================
    # Configuration
    # ========================================================================

    @property
    def url(self) -> Optional[str]:
        return self._url

    def set_url(self, url: Optional[str]):
        self._url = url

    @property
    def header(self) -> HeaderConfig:
        return self._header

    def headers(self, data: Union[HeaderConfig, Mapping[str, Any]]):
        """
        Define a configuração do header.

        Args:
            data: HeaderConfig ou dict {"gatewayIdentifier": ..., "attribute": {...}}
        """
        config = data if isinstance(data, HeaderConfig) else HeaderConfig.from_dict(data)
        with self._lock:
            self._header = config

    set_headers = headers

    # ========================================================================
    # Queue
    # ========================================================================

    def add_zcl_report(self, eui64, endpoint_id, profile_id, cluster_id,
                       attribute_id, data_type_id, timestamp, value) -> ZCLReport:
        with self._lock:
            return self._queue.add_zcl_report(
                eui64, endpoint_id, profile_id, cluster_id,
                attribute_id, data_type_id, timestamp, value,
            )

    def add_zcl_multi_report(self, eui64, endpoint_id, profile_id, cluster_id,
                             attribute_id, data_type_id, timestamp, offset,
                             values: Sequence[Any]) -> ZCLMultiReport:
        with self._lock:
            return self._queue.add_zcl_multi_report(
                eui64, endpoint_id, profile_id, cluster_id,
                attribute_id, data_type_id, timestamp, offset, values,
            )

    def add_zcl_command(self, eui64, endpoint_id, profile_id, cluster_id,
                        is_cluster_specific, command_id, timestamp, value) -> ZCLCommand:
        with self._lock:
            return self._queue.add_zcl_command(
                eui64, endpoint_id, profile_id, cluster_id,
                is_cluster_specific, command_id, timestamp, value,
            )

    def add_time(self, timestamp) -> TimeIndication:
        with self._lock:
            return self._queue.add_time(timestamp)

    def remove_message(self, message_id: int) -> bool:
        with self._lock:
            return self._queue.remove_message(message_id)

    def clear_messages(self):
        with self._lock:
            self._queue.clear_messages()

    @property
    def messages(self) -> Sequence[Report]:
        """Snapshot dos reports pendentes."""
        with self._lock:
            return self._queue.snapshot()

    # ========================================================================
    # Payload
    # ========================================================================

    def compose(self) -> ComposeResult:
        """
        Compõe o payload com o header e a queue atuais.

        Returns:
            ComposeResult com o payload, ou com o PayloadError
        """
        with self._lock:
            return PayloadComposer(self._header, self._queue).compose()

    def to_string(self) -> str:
        """
        Payload atual como string.

        Raises:
            PayloadError: Se o header não puder ser composto
        """
        return self.compose().unwrap()

    def post(self) -> TransmitResult:
        """
        Envia a queue para o backoffice.

        Em caso de sucesso os reports enviados são removidos da queue.
        Em caso de falha a queue fica intacta.

        Returns:
            TransmitResult com o corpo da resposta, ou com o erro
        """
        with self._post_lock:
            with self._lock:
                url = self._url
                composed = PayloadComposer(self._header, self._queue).compose()
                if not composed.ok:
                    return TransmitResult.failure(composed.error)
                sent_ids = [report.id for report in self._queue.snapshot()]

            if not url:
                return TransmitResult.failure(TransportError(
                    ErrorCode.NO_URL_SET.value, code=ErrorCode.NO_URL_SET,
                ))

            logger.info(f"A enviar {len(sent_ids)} report(s) para {url}")
            try:
                response = self.transport.post(url, composed.payload)
            except TransportError as e:
                logger.warning(f"Envio falhou: {e.text} (status={e.status})")
                return TransmitResult.failure(e)

            with self._lock:
                self._queue.discard(sent_ids)

            logger.info(f"Envio concluído ({len(sent_ids)} report(s) removidos da queue)")
            return TransmitResult.success(response)

    def __repr__(self) -> str:
        return f"JOAClient(url={self._url!r}, gateway={self._header.gateway_identifier!r}, queue={len(self._queue)})"
