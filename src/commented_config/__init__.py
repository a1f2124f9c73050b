# src/commented_config/__init__.py
"""
Commented Config: árvore de configuração hierárquica sobre documentos YAML.

Um documento é representado como uma árvore de seções endereçadas por
caminhos pontuados ("a.b.c"), com leitura tipada, iteração ordenada e
um load que preserva os valores do usuário enquanto completa tudo o
que falta a partir de um documento de defaults.

Arquitetura em alto nível:
    - core.document → nós planos, parser e composer YAML
    - core.section  → árvore de seções e accessors tipados
    - core.store    → orquestração de load, merge e save

Exemplo:
    store = DocumentStore(file="config.yml", defaults="config.defaults.yml")
    store.load()
    port = store.get_int("server.port", 8080)
"""

from .core.document import DocumentSettings, Node, Value
from .core.errors import (
    ConfigError,
    DocumentNotFoundError,
    DocumentParseError,
    InvalidDocumentRootError,
    SectionPathError,
    UnsupportedDocumentFormatError,
    UnsupportedDocumentStructureError,
)
from .core.section import Lookup, Section
from .core.store import DocumentStore, LoadResult

__all__ = [
    "ConfigError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "DocumentSettings",
    "DocumentStore",
    "InvalidDocumentRootError",
    "LoadResult",
    "Lookup",
    "Node",
    "Section",
    "SectionPathError",
    "UnsupportedDocumentFormatError",
    "UnsupportedDocumentStructureError",
    "Value",
]
