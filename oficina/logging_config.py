"""
Configuração básica de logging.

``setup_logging`` configura o logger raiz com um handler de console e,
opcionalmente, um handler de arquivo. Só configura uma vez: chamadas
repetidas (testes, ``create_app`` chamado várias vezes) não duplicam
handlers.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configura o logger raiz.

    Parameters
    ----------
    level : str
        Nome do nível (``"DEBUG"``, ``"INFO"``...). Sem diferenciar
        maiúsculas de minúsculas.
    logfile : Optional[str]
        Arquivo para gravar as mensagens. Se omitido, só o console é usado.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
