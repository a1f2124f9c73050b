# src/commented_config/core/document/node.py
"""
Modelo canônico de nós do documento.

Este módulo define as estruturas consumidas e produzidas pelo motor de
documento: `Value` (escalar tipado) e `Node` (elemento endereçável por
caminho pontuado).

A árvore de seções nunca lê texto diretamente. Ela opera apenas sobre
sequências planas e ordenadas de `Node`, produzidas pelo parser e
entregues ao composer.

Decisões arquiteturais:
    - A identidade de um `Node` é o seu caminho pontuado (igualdade e hash)
    - Um `Node` sem valores representa uma seção (container)
    - Um `Node` pode ao mesmo tempo possuir valores e filhos na árvore
    - Metadados de formatação (indentação, linha, comentários) viajam no nó

Invariantes:
    - `path` termina sempre em `name`
    - `Value` é imutável; a lista `values` de um `Node` é substituível

Limites explícitos:
    - Não conhece a árvore de seções
    - Não realiza I/O
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Optional


@dataclass(frozen=True)
class Value:
    """
    Escalar tipado de um nó.

    `text` é a representação textual do valor e `tag` o nome curto da
    tag YAML resolvida (`str`, `int`, `float`, `bool`, `null`, ...).
    """

    text: str
    tag: str = "str"

    @classmethod
    def of(cls, obj: Any) -> "Value":
        """Constrói um `Value` a partir de um objeto Python."""
        if isinstance(obj, Value):
            return obj
        # bool antes de int (bool é subclasse de int)
        if isinstance(obj, bool):
            return cls("true" if obj else "false", "bool")
        if isinstance(obj, int):
            return cls(str(obj), "int")
        if isinstance(obj, (float, Decimal)):
            return cls(str(obj), "float")
        if obj is None:
            return cls("null", "null")
        return cls(str(obj), "str")


@dataclass(eq=False)
class Node:
    """
    Elemento endereçável do documento.

    Atributos:
        path: caminho pontuado completo (ex.: "a.b.c").
        name: último segmento do caminho.
        indentation: coluna da chave no documento de origem.
        line_number: linha da chave no documento de origem (1-based).
        raw_line: conteúdo textual bruto da linha de origem.
        values: lista ordenada de valores; vazia para seções.
        parent: nó pai no documento de origem (ou None na raiz).
        comments: linhas de comentário/brancas imediatamente acima da chave.
        sequence: indica que os valores são escritos como lista YAML.
    """

    path: str
    name: str
    indentation: int = 0
    line_number: int = 0
    raw_line: str = ""
    values: List[Value] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False)
    comments: List[str] = field(default_factory=list, repr=False)
    sequence: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def is_section(self) -> bool:
        return not self.values

    def set_values(self, values: List[Value]) -> None:
        self.values = list(values)

    @classmethod
    def synthesize(
        cls,
        *,
        parent: Optional["Node"],
        name: str,
        path: str,
        indentation: int,
        line_number: int,
    ) -> "Node":
        """
        Fabrica um nó de seção vazio para uma seção criada sob demanda.

        O nó não possui valores nem comentários; a linha bruta é apenas
        a chave seguida de `:`.
        """
        return cls(
            path=path,
            name=name,
            indentation=indentation,
            line_number=line_number,
            raw_line=f"{name}:",
            values=[],
            parent=parent,
        )


__all__ = ["Node", "Value"]
