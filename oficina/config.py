"""
Configuração da aplicação.

Os valores vêm de variáveis de ambiente lidas uma única vez, na importação
do módulo. Defina as variáveis antes de importar ``oficina.config``.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

# --- LÓGICA DE CAMINHO ---
# (Garante que o banco seja criado na raiz do projeto, inclusive no PyInstaller)
if getattr(sys, 'frozen', False):
    BASE_DIR = Path(sys._MEIPASS)
else:
    BASE_DIR = Path(".")

DB_FILE = BASE_DIR / "oficina.db"
# -------------------------


@dataclass
class Settings:
    """Configurações carregadas das variáveis de ambiente."""

    project_name: str = os.getenv("OFICINA_PROJECT_NAME", "Oficina - Ordens de Serviço")
    database_url: str = os.getenv("OFICINA_DATABASE_URL", f"sqlite:///{DB_FILE}")
    log_level: str = os.getenv("OFICINA_LOG_LEVEL", "INFO")
    log_file: str = os.getenv("OFICINA_LOG_FILE", "")

    # Prefixo do número das ordens de serviço (ex: OS-1718000000000)
    order_prefix: str = os.getenv("OFICINA_ORDER_PREFIX", "OS-")


settings = Settings()
