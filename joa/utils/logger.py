"""
Sistema de logging centralizado usando Loguru.

Fornece logging formatado para ficheiros e consola.
"""

import sys
from loguru import logger


def setup_logger(
    module_name: str = "joa-gateway",
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logger:
    """
    Configura o logger para o módulo especificado.

    Args:
        module_name: Nome do módulo (usado no nome do ficheiro de log)
        log_to_file: Se True, faz log para ficheiro
        log_to_console: Se True, faz log para consola

    Returns:
        Logger configurado
    """
    from joa.utils.config import config

    # Remover handlers default e ativar as mensagens da biblioteca
    logger.remove()
    logger.enable("joa")

    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan> | "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{extra[name]}:{function}:{line} | "
        "{message}"
    )

    logger.configure(extra={"name": module_name})

    if log_to_console:
        logger.add(
            sys.stderr,
            format=console_format,
            level=config.log_level,
            colorize=True,
        )

    if log_to_file:
        try:
            config.ensure_directories_exist()

            log_file = config.logs_dir / f"{module_name}.log"

            logger.add(
                log_file,
                format=file_format,
                level=config.log_level,
                rotation="10 MB",      # Rotação quando atingir 10MB
                retention="7 days",    # Manter logs dos últimos 7 dias
                compression="zip",     # Comprimir logs antigos
                enqueue=True,          # Thread-safe
            )
        except (PermissionError, OSError) as e:
            # Sem permissões: continuar apenas com a consola
            print(f"  Aviso: Não foi possível criar ficheiro de log: {e}", file=sys.stderr)
            print(f"   Logs apenas na consola.", file=sys.stderr)

    return logger


# Biblioteca: silenciosa até a aplicação chamar setup_logger()
logger.disable("joa")


def get_logger(name: str) -> logger:
    """
    Obtém um logger com contexto específico.

    Args:
        name: Nome do contexto (ex: "message_queue", "client", "http_transport")

    Returns:
        Logger com contexto
    """
    return logger.bind(name=name)
