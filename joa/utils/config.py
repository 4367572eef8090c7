"""
Gestão de configuração do gateway.

Lê variáveis de ambiente do ficheiro .env e fornece acesso centralizado
às configurações. Apenas a CLI e o logging usam esta configuração; o
núcleo (header, queue, payload) recebe tudo explicitamente do caller.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from joa.utils.constants import (
    DEFAULT_LOGS_DIR,
    HTTP_TIMEOUT_DEFAULT,
    LOG_LEVEL_INFO,
)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    """
    Classe de configuração singleton.

    Carrega configurações do .env e fornece acesso através de propriedades.
    """

    _instance: Optional['Config'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.reload()
        self._initialized = True

    def reload(self):
        """(Re)carrega os valores do .env e do ambiente."""
        load_dotenv()

        # Backoffice
        self.url: Optional[str] = os.getenv("JOA_URL")
        self.http_timeout: float = float(os.getenv("HTTP_TIMEOUT", HTTP_TIMEOUT_DEFAULT))

        # Header
        self.gateway_identifier: Optional[str] = os.getenv("JOA_GATEWAY_IDENTIFIER")
        self.vendor: Optional[str] = os.getenv("JOA_VENDOR")
        self.secret: Optional[str] = os.getenv("JOA_SECRET")
        self.hash: bool = _env_flag("JOA_HASH")
        self.time: bool = _env_flag("JOA_TIME")

        # Paths
        self.logs_dir: Path = Path(os.getenv("LOGS_DIR", DEFAULT_LOGS_DIR))

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", LOG_LEVEL_INFO)

        # Debug
        self.debug: bool = _env_flag("DEBUG")

    def ensure_directories_exist(self):
        """Cria os diretórios necessários se não existirem."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    def header_config(self):
        """
        Constrói um HeaderConfig a partir das variáveis JOA_*.

        Returns:
            HeaderConfig com os valores do ambiente (podem estar vazios)
        """
        from joa.protocol.header import HeaderAttributes, HeaderConfig

        return HeaderConfig(
            gateway_identifier=self.gateway_identifier,
            attributes=HeaderAttributes(
                vendor=self.vendor,
                time=self.time,
                hash=self.hash,
                secret=self.secret,
            ),
        )

    def __repr__(self) -> str:
        # O secret nunca é mostrado
        return (
            f"Config(\n"
            f"  url={self.url},\n"
            f"  gateway_identifier={self.gateway_identifier},\n"
            f"  vendor={self.vendor},\n"
            f"  hash={self.hash},\n"
            f"  time={self.time},\n"
            f"  log_level={self.log_level}\n"
            f")"
        )


# Instância global de configuração
config = Config()
