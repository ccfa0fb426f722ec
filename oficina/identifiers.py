"""
Estratégias de geração de identificadores.

Clientes, veículos, funcionários e serviços usam UUIDs opacos
(``RandomId``). Ordens de serviço usam um número legível: prefixo fixo
seguido do timestamp em milissegundos (``TimestampPrefixedId``).
"""

import time
import uuid
from typing import Callable, Iterable


class RandomId:
    """Identificador opaco (uuid4)."""

    def next_id(self, taken: Iterable[str] = ()) -> str:
        return str(uuid.uuid4())


class TimestampPrefixedId:
    """Prefixo + milissegundos, estritamente crescente.

    Dois pedidos no mesmo milissegundo (ou um relógio que volta) avançam o
    valor em 1 ms, e números já usados na coleção são pulados.
    """

    def __init__(self, prefix: str = "OS-", clock: Callable[[], float] = time.time):
        self.prefix = prefix
        self._clock = clock
        self._last = 0

    def next_id(self, taken: Iterable[str] = ()) -> str:
        taken = set(taken)
        millis = max(int(self._clock() * 1000), self._last + 1)
        while f"{self.prefix}{millis}" in taken:
            millis += 1
        self._last = millis
        return f"{self.prefix}{millis}"
