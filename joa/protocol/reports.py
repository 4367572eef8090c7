"""
Reports do protocolo JOA.

Cada tipo de mensagem é uma dataclass própria com uma ordem de campos fixa.
A serialização segue essa ordem (nunca a ordem de atributos do objeto):

ZCL Report        │ id │ type │ eui64 │ endpoint │ profile │ cluster │ attribute │ datatype │ timestamp │ value  │
ZCL Multi Report  │ id │ type │ eui64 │ endpoint │ profile │ cluster │ attribute │ datatype │ timestamp │ offset │ values │
ZCL Command       │ id │ type │ eui64 │ endpoint │ profile │ cluster │ cluster specific │ command │ timestamp │ value │
Time Indication   │ id │ type │ timestamp │

Todos os campos são separados por TAB e cada report termina em EOL.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Tuple, Union

from joa.utils.constants import (
    MessageType,
    TAB,
    EOL,
)

MessageTypeValue = Union[int, str]


def render_value(value: Any) -> str:
    """
    Converte um valor primitivo para o texto usado no payload.

    Args:
        value: Valor do campo

    Returns:
        Texto do campo (None fica vazio)
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(render_value(v) for v in value)
    return str(value)


@dataclass(frozen=True)
class Report:
    """
    Base comum a todos os reports.

    Attributes:
        id: Identificador atribuído pela queue (crescente, nunca reutilizado)
    """

    id: int

    message_type: ClassVar[MessageTypeValue]
    field_order: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        """Validação após inicialização."""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError(f"id deve ser um inteiro positivo, recebeu {self.id!r}")

    def values(self) -> Tuple[Any, ...]:
        """Valores dos campos na ordem do protocolo (id e messageType primeiro)."""
        return (self.id, self.message_type) + tuple(
            getattr(self, name) for name in self.field_order
        )

    def to_line(self) -> str:
        """
        Serializa o report para uma linha do payload.

        Returns:
            Campos separados por TAB, terminados em EOL
        """
        return TAB.join(render_value(v) for v in self.values()) + EOL

    def to_dict(self) -> dict:
        """Representação em dict com os nomes de campo do protocolo."""
        data = {"id": self.id, "messageType": self.message_type}
        for name in self.field_order:
            data[_camel(name)] = getattr(self, name)
        return data

    def __str__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, type={MessageType.to_string(self.message_type)})"


@dataclass(frozen=True)
class ZCLReport(Report):
    """Leitura de um único atributo ZCL."""

    eui64: Any = None
    endpoint_id: Any = None
    profile_id: Any = None
    cluster_id: Any = None
    attribute_id: Any = None
    data_type_id: Any = None
    timestamp: Any = None
    value: Any = None

    message_type: ClassVar[MessageTypeValue] = MessageType.ZCL_REPORT
    field_order: ClassVar[Tuple[str, ...]] = (
        "eui64", "endpoint_id", "profile_id", "cluster_id",
        "attribute_id", "data_type_id", "timestamp", "value",
    )


@dataclass(frozen=True)
class ZCLMultiReport(Report):
    """Várias leituras do mesmo atributo a partir de um offset."""

    eui64: Any = None
    endpoint_id: Any = None
    profile_id: Any = None
    cluster_id: Any = None
    attribute_id: Any = None
    data_type_id: Any = None
    timestamp: Any = None
    offset: Any = None
    values_: Sequence[Any] = ()

    message_type: ClassVar[MessageTypeValue] = MessageType.ZCL_MULTI_REPORT
    field_order: ClassVar[Tuple[str, ...]] = (
        "eui64", "endpoint_id", "profile_id", "cluster_id",
        "attribute_id", "data_type_id", "timestamp", "offset", "values_",
    )


@dataclass(frozen=True)
class ZCLCommand(Report):
    """Comando ZCL enviado para um endpoint."""

    eui64: Any = None
    endpoint_id: Any = None
    profile_id: Any = None
    cluster_id: Any = None
    is_cluster_specific: Any = None
    command_id: Any = None
    timestamp: Any = None
    value: Any = None

    message_type: ClassVar[MessageTypeValue] = MessageType.ZCL_COMMAND
    field_order: ClassVar[Tuple[str, ...]] = (
        "eui64", "endpoint_id", "profile_id", "cluster_id",
        "is_cluster_specific", "command_id", "timestamp", "value",
    )


@dataclass(frozen=True)
class TimeIndication(Report):
    """Indicação de tempo do gateway."""

    timestamp: Any = None

    message_type: ClassVar[MessageTypeValue] = MessageType.TIME_INDICATION
    field_order: ClassVar[Tuple[str, ...]] = ("timestamp",)


def _camel(name: str) -> str:
    # "values_" -> "values", "endpoint_id" -> "endpointId"
    head, *rest = name.rstrip("_").split("_")
    return head + "".join(part.capitalize() for part in rest)
