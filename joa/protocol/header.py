"""
Header do protocolo MuniRPC v2.

Formato da linha de header:

    MuniRPCv2:<gatewayIdentifier>[,vendor=<vendor>][,time][,hash=<digest>]\\n

- gatewayIdentifier: identificador virtual de 32 bits no formato de um
  endereço IP (gama privada do RFC1918). Obrigatório.
- vendor: nome do vendor atribuído. Obrigatório.
- time: flag sem valor; pede ao backoffice uma indicação de tempo.
- hash: o digest é inserido mais tarde pelo PayloadComposer.
- secret: shared secret do hash, nunca aparece no header.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from joa.protocol.errors import ErrorCode, PayloadError
from joa.utils.constants import (
    PROTOCOL_VERSION,
    EOL,
    HEADER_ATTRIBUTE_ORDER,
    ATTR_HASH,
    ATTR_SECRET,
    ATTR_TIME,
)


@dataclass(frozen=True)
class HeaderAttributes:
    """
    Atributos opcionais do header.

    Attributes:
        vendor: Nome do vendor (obrigatório para compor o header)
        hash: Se True, o payload leva um digest com o secret
        secret: Shared secret usado no digest
        time: Se True, o header leva a flag ',time'
    """

    vendor: Optional[str] = None
    hash: bool = False
    secret: Optional[str] = None
    time: bool = False


@dataclass(frozen=True)
class HeaderConfig:
    """Configuração do header definida pelo caller."""

    gateway_identifier: Optional[str] = None
    attributes: HeaderAttributes = field(default_factory=HeaderAttributes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'HeaderConfig':
        """
        Cria a configuração a partir de um dict no formato do protocolo.

        Exemplo:
            {"gatewayIdentifier": "10.32.16.1",
             "attribute": {"vendor": "jwz", "time": True, "hash": False, "secret": None}}

        Args:
            data: Dict com gatewayIdentifier/attribute (aceita também snake_case)

        Returns:
            HeaderConfig
        """
        gateway = data.get("gatewayIdentifier", data.get("gateway_identifier"))
        attrs = data.get("attribute", data.get("attributes")) or {}

        return cls(
            gateway_identifier=gateway,
            attributes=HeaderAttributes(
                vendor=attrs.get("vendor"),
                hash=bool(attrs.get("hash")),
                secret=attrs.get("secret"),
                time=bool(attrs.get("time")),
            ),
        )

    def to_dict(self) -> dict:
        return {
            "gatewayIdentifier": self.gateway_identifier,
            "attribute": {
                "vendor": self.attributes.vendor,
                "hash": self.attributes.hash,
                "secret": self.attributes.secret,
                "time": self.attributes.time,
            },
        }


def _is_set(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def build_header(config: HeaderConfig) -> str:
    """
    Constrói a linha de header (sem o hash).

    Args:
        config: Configuração do header

    Returns:
        Linha de header terminada em EOL

    Raises:
        PayloadError: no_gatewayidentifier_set ou no_vendor_attribute_set
    """
    if not _is_set(config.gateway_identifier):
        raise PayloadError(ErrorCode.NO_GATEWAYIDENTIFIER_SET)

    # Validação estrutural do vendor (antes de renderizar)
    if not _is_set(config.attributes.vendor):
        raise PayloadError(ErrorCode.NO_VENDOR_ATTRIBUTE_SET)

    header = PROTOCOL_VERSION + config.gateway_identifier

    for key in HEADER_ATTRIBUTE_ORDER:
        value = getattr(config.attributes, key)

        if key == ATTR_TIME:
            if value:
                header += ",time"
        elif key in (ATTR_SECRET, ATTR_HASH):
            continue
        elif _is_set(value):
            header += f",{key}={value}"

    return header + EOL
