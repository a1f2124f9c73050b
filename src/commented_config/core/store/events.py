# src/commented_config/core/store/events.py
"""
Log estruturado de eventos do Document Store.

Eventos não são strings livres: cada chamada a `log` registra um
dicionário com documento, nível, mensagem, timestamp UTC e quaisquer
campos adicionais. Warnings são sinais não fatais coletados à parte.

Invariantes:
    - Todo evento inclui `document`, `level`, `message` e `timestamp`
    - A ordem de registro é preservada
    - Eventos DEBUG só são registrados com `debug=True`

Limites explícitos:
    - Não persiste eventos
    - Não escreve em stdout/stderr
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class EventLog:
    document: str
    debug: bool = False

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: List[str] = field(default_factory=list, init=False)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        if level == "DEBUG" and not self.debug:
            return
        event = {
            "document": self.document,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)


__all__ = ["EventLog"]
