"""
Erros e resultados do cliente JOA.

Os erros de composição e de transmissão são devolvidos ao caller como
resultados explícitos (sucesso com valor, ou falha com erro tipado). Nada
aqui é repetido automaticamente.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Códigos de erro do protocolo (valores iguais aos do backoffice)."""
    NO_GATEWAYIDENTIFIER_SET = "no_gatewayidentifier_set"
    NO_VENDOR_ATTRIBUTE_SET = "no_vendor_attribute_set"
    NO_SECRET_SET = "no_secret_set"
    NO_URL_SET = "no_url_set"
    TRANSPORT_ERROR = "transport_error"

    def __str__(self) -> str:
        return self.value


class JOAError(Exception):
    """Base para todos os erros do cliente JOA."""

    def __init__(self, code: ErrorCode, message: Optional[str] = None):
        self.code = code
        super().__init__(message or code.value)


class PayloadError(JOAError):
    """Falha ao construir o header ou o payload."""


class TransportError(JOAError):
    """
    Falha do transporte, passada ao caller sem interpretação.

    Attributes:
        status: Status HTTP (None se a falha foi antes da resposta)
        text: Texto do status ou da exceção original
    """

    def __init__(self, text: str, status: Optional[int] = None,
                 code: ErrorCode = ErrorCode.TRANSPORT_ERROR):
        self.status = status
        self.text = text
        super().__init__(code, text)


@dataclass(frozen=True)
class Result:
    """Resultado de uma operação: valor em caso de sucesso, erro caso contrário."""

    value: Optional[str] = None
    error: Optional[JOAError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Result precisa de exatamente um de value/error")

    @classmethod
    def success(cls, value: str) -> 'Result':
        return cls(value=value)

    @classmethod
    def failure(cls, error: JOAError) -> 'Result':
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> Optional[ErrorCode]:
        """Código do erro, ou None em caso de sucesso."""
        return self.error.code if self.error is not None else None

    def unwrap(self) -> str:
        """
        Obtém o valor ou levanta o erro transportado.

        Raises:
            JOAError: Se o resultado for uma falha
        """
        if self.error is not None:
            raise self.error
        return self.value


class ComposeResult(Result):
    """Resultado de compose(): o payload completo ou um PayloadError."""

    @property
    def payload(self) -> Optional[str]:
        return self.value


class TransmitResult(Result):
    """Resultado de post(): o corpo da resposta ou o erro (payload/transporte)."""

    @property
    def response(self) -> Optional[str]:
        return self.value
