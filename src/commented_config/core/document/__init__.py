# src/commented_config/core/document/__init__.py
"""
Motor de documento do Commented Config.

Este pacote faz a ponte entre o texto YAML e a sequência plana e
ordenada de `Node` consumida pela árvore de seções:

    texto → [parser] → List[Node] → [árvore de seções] → List[Node] → [composer] → texto

A gramática YAML pertence ao PyYAML. Este pacote apenas converte o
grafo de nós do PyYAML para o modelo de `Node` e de volta para texto.
"""

from .composer import compose_document, compose_text, shadowed_paths
from .node import Node, Value
from .parser import parse_document, parse_text
from .settings import DocumentSettings

__all__ = [
    "Node",
    "Value",
    "DocumentSettings",
    "parse_text",
    "parse_document",
    "compose_text",
    "compose_document",
    "shadowed_paths",
]
