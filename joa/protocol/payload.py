"""
Composição do payload JOA.

payload = header + queue serializada

Com o atributo hash ativo, o digest é calculado sobre
secret + header (sem hash) + queue serializada, e ',hash=<digest>' é
inserido no header imediatamente antes do primeiro EOL.
"""

from joa.protocol.errors import ComposeResult, ErrorCode, PayloadError
from joa.protocol.header import HeaderConfig, build_header
from joa.protocol.message_queue import MessageQueue
from joa.security.digest import digest
from joa.utils.constants import EOL


def hash_payload(payload: str, secret: str) -> str:
    """
    Insere o atributo hash no header de um payload já composto.

    Args:
        payload: Header (sem hash) + corpo
        secret: Shared secret

    Returns:
        Payload com ',hash=<digest>' no fim da linha de header
    """
    index = payload.index(EOL)
    return payload[:index] + ",hash=" + digest(secret + payload) + payload[index:]


def compose_payload(config: HeaderConfig, queue: MessageQueue) -> str:
    """
    Compõe o payload completo.

    Raises:
        PayloadError: Erro do header (propagado tal como está) ou no_secret_set
    """
    header = build_header(config)
    payload = header + queue.serialize()

    attributes = config.attributes
    if not attributes.hash:
        return payload

    if not attributes.secret:
        raise PayloadError(ErrorCode.NO_SECRET_SET)

    return hash_payload(payload, attributes.secret)


class PayloadComposer:
    """
    Compõe payloads a partir de um header e de uma queue.

    Não guarda resultados: cada compose() lê o estado atual.
    """

    def __init__(self, config: HeaderConfig, queue: MessageQueue):
        self.config = config
        self.queue = queue

    def compose(self) -> ComposeResult:
        """
        Compõe o payload.

        Returns:
            ComposeResult com o payload, ou com o PayloadError
        """
        try:
            return ComposeResult.success(compose_payload(self.config, self.queue))
        except PayloadError as e:
            return ComposeResult.failure(e)
