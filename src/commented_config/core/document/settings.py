# src/commented_config/core/document/settings.py
"""Configuração de leitura e escrita de documentos (v1)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ..errors import UnsupportedDocumentFormatError


@dataclass(frozen=True)
class DocumentSettings:
    """
    Parâmetros imutáveis do motor de documento.

    Atributos:
        encoding: codificação usada em leitura e escrita.
        indent_step: deslocamento de itens de lista e de seções sintetizadas.
        suffixes: extensões de arquivo aceitas.
    """

    encoding: str = "utf-8"
    indent_step: int = 2
    suffixes: Tuple[str, ...] = (".yaml", ".yml")

    def check_format(self, path: Path) -> None:
        """Rejeita arquivos cuja extensão não é suportada."""
        if path.suffix.lower() not in self.suffixes:
            raise UnsupportedDocumentFormatError(f"Formato não suportado: {path.suffix or path.name}")


__all__ = ["DocumentSettings"]
