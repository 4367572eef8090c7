"""
Queue de reports pendentes.

Responsável por:
- Criar reports com ids crescentes (um contador partilhado por todos os tipos)
- Aplicar os defaults de endpoint/profile
- Remover reports por id ou todos de uma vez
- Serializar a queue na ordem de inserção
"""

import collections.abc
import threading
from typing import Any, Iterable, Iterator, List, Optional, Sequence

from joa.protocol.reports import (
    Report,
    ZCLReport,
    ZCLMultiReport,
    ZCLCommand,
    TimeIndication,
)
from joa.utils.constants import DEFAULT_ENDPOINT_ID, DEFAULT_PROFILE_ID
from joa.utils.logger import get_logger

logger = get_logger("message_queue")


def _as_tuple(values: Any) -> Any:
    # Qualquer iterável (exceto texto) fica como tuplo para ser separado por vírgulas
    if isinstance(values, (str, bytes)) or not isinstance(values, collections.abc.Iterable):
        return values
    return tuple(values)


class MessageQueue:
    """
    Queue ordenada de reports de um cliente.

    O contador de ids nunca é reiniciado (nem por remove nem por clear),
    portanto os ids são únicos durante toda a vida da queue.
    """

    def __init__(self):
        self._messages: List[Report] = []

        # Contador de ids
        self._id_counter = 0
        self._id_lock = threading.Lock()

    # ========================================================================
    # Id Management
    # ========================================================================

    def _next_id(self) -> int:
        with self._id_lock:
            self._id_counter += 1
            return self._id_counter

    def _append(self, report: Report) -> Report:
        self._messages.append(report)
        logger.debug(f"Report adicionado: {report} (queue={len(self._messages)})")
        return report

    # ========================================================================
    # Report Creation
    # ========================================================================

    def add_zcl_report(
        self,
        eui64: Any,
        endpoint_id: Any,
        profile_id: Any,
        cluster_id: Any,
        attribute_id: Any,
        data_type_id: Any,
        timestamp: Any,
        value: Any,
    ) -> ZCLReport:
        """
        Adiciona um ZCL report à queue.

        Args:
            eui64: Endereço EUI-64 do dispositivo
            endpoint_id: Endpoint (vazio = "0x0a")
            profile_id: Profile (vazio = "0xf100")
            cluster_id: Cluster ZCL
            attribute_id: Atributo ZCL
            data_type_id: Tipo de dados ZCL
            timestamp: Timestamp em milissegundos
            value: Valor lido

        Returns:
            Report criado
        """
        return self._append(ZCLReport(
            id=self._next_id(),
            eui64=eui64,
            endpoint_id=endpoint_id or DEFAULT_ENDPOINT_ID,
            profile_id=profile_id or DEFAULT_PROFILE_ID,
            cluster_id=cluster_id,
            attribute_id=attribute_id,
            data_type_id=data_type_id,
            timestamp=timestamp,
            value=value,
        ))

    def add_zcl_multi_report(
        self,
        eui64: Any,
        endpoint_id: Any,
        profile_id: Any,
        cluster_id: Any,
        attribute_id: Any,
        data_type_id: Any,
        timestamp: Any,
        offset: Any,
        values: Sequence[Any],
    ) -> ZCLMultiReport:
        """
        Adiciona um ZCL multi report (várias leituras com offset) à queue.

        Returns:
            Report criado
        """
        return self._append(ZCLMultiReport(
            id=self._next_id(),
            eui64=eui64,
            endpoint_id=endpoint_id or DEFAULT_ENDPOINT_ID,
            profile_id=profile_id or DEFAULT_PROFILE_ID,
            cluster_id=cluster_id,
            attribute_id=attribute_id,
            data_type_id=data_type_id,
            timestamp=timestamp,
            offset=offset,
            values_=_as_tuple(values),
        ))

    def add_zcl_command(
        self,
        eui64: Any,
        endpoint_id: Any,
        profile_id: Any,
        cluster_id: Any,
        is_cluster_specific: Any,
        command_id: Any,
        timestamp: Any,
        value: Any,
    ) -> ZCLCommand:
        """
        Adiciona um ZCL command à queue.

        Returns:
            Report criado
        """
        return self._append(ZCLCommand(
            id=self._next_id(),
            eui64=eui64,
            endpoint_id=endpoint_id or DEFAULT_ENDPOINT_ID,
            profile_id=profile_id or DEFAULT_PROFILE_ID,
            cluster_id=cluster_id,
            is_cluster_specific=is_cluster_specific,
            command_id=command_id,
            timestamp=timestamp,
            value=value,
        ))

    def add_time(self, timestamp: Any) -> TimeIndication:
        """Adiciona uma indicação de tempo à queue."""
        return self._append(TimeIndication(id=self._next_id(), timestamp=timestamp))

    # ========================================================================
    # Removal
    # ========================================================================

    def remove_message(self, message_id: int) -> bool:
        """
        Remove o report com o id indicado.

        Args:
            message_id: Id do report

        Returns:
            True se um report foi removido, False se o id não existe
        """
        for i, report in enumerate(self._messages):
            if report.id == message_id:
                del self._messages[i]
                logger.debug(f"Report {message_id} removido")
                return True
        return False

    def discard(self, message_ids: Iterable[int]) -> int:
        """
        Remove todos os reports cujo id está em message_ids.

        Returns:
            Número de reports removidos
        """
        ids = set(message_ids)
        before = len(self._messages)
        self._messages = [r for r in self._messages if r.id not in ids]
        return before - len(self._messages)

    def clear_messages(self):
        """Esvazia a queue (o contador de ids mantém-se)."""
        self._messages = []
        logger.debug("Queue limpa")

    # ========================================================================
    # Access / Serialization
    # ========================================================================

    def get(self, message_id: int) -> Optional[Report]:
        for report in self._messages:
            if report.id == message_id:
                return report
        return None

    def snapshot(self) -> List[Report]:
        """Cópia da lista de reports (na ordem da queue)."""
        return list(self._messages)

    def serialize(self) -> str:
        """
        Serializa a queue completa.

        Returns:
            Concatenação das linhas de cada report, na ordem da queue
        """
        return "".join(report.to_line() for report in self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Report]:
        return iter(list(self._messages))

    def __repr__(self) -> str:
        return f"MessageQueue(size={len(self._messages)}, last_id={self._id_counter})"
